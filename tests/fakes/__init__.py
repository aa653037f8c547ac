"""Shared test doubles and CSV builders."""

from __future__ import annotations

from bulkentry.clients.memory import MemoryRecordService
from bulkentry.sources.local_source import MemoryFileSource

MDU_HEADER = (
    "CIVIC_NUMBER,STREET_LABEL_EN,STREET_LABEL_FR,STREET_DIRECTION_EN,STREET_DIRECTION_FR,"
    "ADD_INFO_EN,ADD_INFO_FR,EXPIRY_DATE,MDU_VISIBLE,CITY_ID,STREET_ID,PROVINCE_ID,"
    "FILE_TYPE,POSTING_DATE_DEADLINE,COMMENT"
)

TARIFF_HEADER = (
    "TARIFF_CODE,DESCRIPTION_EN,DESCRIPTION_FR,RATE,UNIT,PROVINCE,EFFECTIVE_DATE,"
    "EXPIRY_DATE,CATEGORY,NOTES"
)


def mdu_line(civic: str = "100", street: str = "Main St", **overrides: str) -> str:
    """One 15-column MDU line; keyword overrides use the column names."""
    fields = {
        "civic_number": civic,
        "street_name_en": street,
        "street_name_fr": "Rue Main",
        "street_direction_en": "N",
        "street_direction_fr": "N",
        "additional_info_en": "",
        "additional_info_fr": "",
        "expiry_date": "12/31/2025",
        "is_visible": "1",
        "city_id": "42",
        "street_id": "7",
        "province_id": "4",
        "file_type": "1",
        "posting_date": "03/05/2024 09:15",
        "comment": "",
    }
    fields.update(overrides)
    return ",".join(fields.values())


def mdu_csv(*lines: str) -> str:
    return "\n".join((MDU_HEADER, *lines)) + "\n"


def tariff_csv(*lines: str) -> str:
    return "\n".join((TARIFF_HEADER, *lines)) + "\n"


__all__ = [
    "MDU_HEADER",
    "TARIFF_HEADER",
    "MemoryFileSource",
    "MemoryRecordService",
    "mdu_csv",
    "mdu_line",
    "tariff_csv",
]
