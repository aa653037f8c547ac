"""Domain records built from CSV rows.

Each supported file schema maps onto one record model. Columns are read by
position, so the column tables below are the contract for source files.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import StrEnum
from typing import Optional

from pydantic import BaseModel


class RecordKind(StrEnum):
    MDU = "MDU"  # building access notice, keyed by civic address
    TARIFF = "TARIFF"


# --- Column offsets ---

MDU_COLUMNS: dict[str, int] = {
    "civic_number": 0,
    "street_name_en": 1,
    "street_name_fr": 2,
    "street_direction_en": 3,
    "street_direction_fr": 4,
    "additional_info_en": 5,
    "additional_info_fr": 6,
    "expiry_date": 7,
    "is_visible": 8,
    "city_id": 9,
    "street_id": 10,
    "province_id": 11,
    "file_type": 12,
    "posting_date": 13,
    "comment": 14,
}

MDU_COLUMN_COUNT = len(MDU_COLUMNS)
MDU_REQUIRED_FIELDS = ("civic_number", "street_name_en")

TARIFF_COLUMNS: dict[str, int] = {
    "tariff_code": 0,
    "description_en": 1,
    "description_fr": 2,
    "rate": 3,
    "unit": 4,
    "province": 5,
    "effective_date": 6,
    "expiry_date": 7,
    "category": 8,
    "notes": 9,
}


class MduRecord(BaseModel):
    """Building access notice for one civic address."""

    model_config = {"frozen": True}

    # --- Address ---
    civic_number: str
    street_name_en: str
    street_name_fr: str = ""
    street_direction_en: str = ""
    street_direction_fr: str = ""
    additional_info_en: str = ""
    additional_info_fr: str = ""

    # --- Location ids ---
    city_id: int = 0
    street_id: int = 0
    province_id: int = 0
    province_name: str = ""  # Derived from province_id

    # --- Notice ---
    expiry_date: Optional[datetime] = None
    posting_date: Optional[datetime] = None  # Posting deadline
    file_type: str = ""
    file_type_description: str = ""  # Derived from file_type
    comment: str = ""
    is_visible: bool = False

    import_timestamp: Optional[datetime] = None

    @property
    def title(self) -> str:
        return f"{self.civic_number} {self.street_name_en}"


class TariffRecord(BaseModel):
    """Rate card line."""

    model_config = {"frozen": True}

    tariff_code: str = ""
    description_en: str = ""
    description_fr: str = ""
    rate: Decimal = Decimal("0")
    unit: str = ""
    province: str = ""
    effective_date: Optional[datetime] = None
    expiry_date: Optional[datetime] = None
    category: str = ""
    notes: str = ""

    import_timestamp: Optional[datetime] = None

    @property
    def title(self) -> str:
        return f"{self.tariff_code} - {self.description_en}"


DomainRecord = MduRecord | TariffRecord
