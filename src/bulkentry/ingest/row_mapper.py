"""RowMapper: turns one RawRow into a domain record or a validation failure.

Mapping is pure. The import timestamp is fixed when the mapper is built, so
the same row and kind always map to the same outcome.
"""

from __future__ import annotations

from datetime import datetime

from bulkentry.ingest import lookups
from bulkentry.ingest.coerce import to_datetime, to_decimal, to_int
from bulkentry.models.outcomes import MappedRecord, MappingOutcome, RawRow, ValidationFailure
from bulkentry.models.records import (
    MDU_COLUMNS,
    MDU_REQUIRED_FIELDS,
    TARIFF_COLUMNS,
    MduRecord,
    RecordKind,
    TariffRecord,
)

MISSING_REQUIRED = "missing required fields"


class RowMapper:
    """Positional row mapping for every RecordKind."""

    def __init__(self, imported_at: datetime, *, strict: bool = False) -> None:
        self._imported_at = imported_at
        self._strict = strict

    def map(self, row: RawRow, kind: RecordKind) -> MappingOutcome:
        try:
            if kind is RecordKind.MDU:
                return self._map_mdu(row)
            return self._map_tariff(row)
        except ValueError as exc:
            # Only raised in strict mode.
            return ValidationFailure(row=row, reason=f"invalid value at row {row.line_number}: {exc}")

    def _map_mdu(self, row: RawRow) -> MappingOutcome:
        cols = MDU_COLUMNS
        missing = [name for name in MDU_REQUIRED_FIELDS if not row.get(cols[name])]
        if missing:
            return ValidationFailure(
                row=row,
                reason=f"{MISSING_REQUIRED} ({', '.join(missing)}) at row {row.line_number}",
            )

        strict = self._strict
        province_id = to_int(row.get(cols["province_id"]), strict=strict)
        file_type = row.get(cols["file_type"])
        record = MduRecord(
            civic_number=row.get(cols["civic_number"]),
            street_name_en=row.get(cols["street_name_en"]),
            street_name_fr=row.get(cols["street_name_fr"]),
            street_direction_en=row.get(cols["street_direction_en"]),
            street_direction_fr=row.get(cols["street_direction_fr"]),
            additional_info_en=row.get(cols["additional_info_en"]),
            additional_info_fr=row.get(cols["additional_info_fr"]),
            city_id=to_int(row.get(cols["city_id"]), strict=strict),
            street_id=to_int(row.get(cols["street_id"]), strict=strict),
            province_id=province_id,
            province_name=lookups.province_name(province_id),
            expiry_date=to_datetime(row.get(cols["expiry_date"]), strict=strict),
            posting_date=to_datetime(row.get(cols["posting_date"]), strict=strict),
            file_type=file_type,
            file_type_description=lookups.file_type_description(file_type),
            comment=row.get(cols["comment"]),
            is_visible=row.get(cols["is_visible"]) == "1",
            import_timestamp=self._imported_at,
        )
        return MappedRecord(row=row, kind=RecordKind.MDU, record=record, title=record.title)

    def _map_tariff(self, row: RawRow) -> MappingOutcome:
        cols = TARIFF_COLUMNS
        strict = self._strict
        record = TariffRecord(
            tariff_code=row.get(cols["tariff_code"]),
            description_en=row.get(cols["description_en"]),
            description_fr=row.get(cols["description_fr"]),
            rate=to_decimal(row.get(cols["rate"]), strict=strict),
            unit=row.get(cols["unit"]),
            province=row.get(cols["province"]),
            effective_date=to_datetime(row.get(cols["effective_date"]), strict=strict),
            expiry_date=to_datetime(row.get(cols["expiry_date"]), strict=strict),
            category=row.get(cols["category"]),
            notes=row.get(cols["notes"]),
            import_timestamp=self._imported_at,
        )
        return MappedRecord(row=row, kind=RecordKind.TARIFF, record=record, title=record.title)


def map_row(
    row: RawRow, kind: RecordKind, imported_at: datetime, *, strict: bool = False
) -> MappingOutcome:
    """Functional form of RowMapper.map."""
    return RowMapper(imported_at, strict=strict).map(row, kind)
