"""Tests for RowMapper."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from bulkentry.ingest.row_mapper import RowMapper, map_row
from bulkentry.models.outcomes import MappedRecord, RawRow, ValidationFailure
from bulkentry.models.records import MduRecord, RecordKind, TariffRecord
from tests.fakes import mdu_line

IMPORTED_AT = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def _row(line: str, index: int = 1) -> RawRow:
    return RawRow(index=index, fields=tuple(field.strip() for field in line.split(",")))


@pytest.fixture
def mapper():
    return RowMapper(IMPORTED_AT)


class TestMduMapping:
    def test_maps_all_fields(self, mapper):
        outcome = mapper.map(_row(mdu_line("100", "Main St")), RecordKind.MDU)
        assert isinstance(outcome, MappedRecord)
        record = outcome.record
        assert isinstance(record, MduRecord)
        assert outcome.title == "100 Main St"
        assert record.street_name_fr == "Rue Main"
        assert record.city_id == 42
        assert record.street_id == 7
        assert record.province_id == 4
        assert record.province_name == "Ontario"
        assert record.file_type_description == "One-page Building Access Licence Template"
        assert record.is_visible is True
        assert record.expiry_date == datetime(2025, 12, 31)
        assert record.import_timestamp == IMPORTED_AT

    def test_posting_deadline_parses_local_time(self, mapper):
        outcome = mapper.map(_row(mdu_line(posting_date="03/05/2024 09:15")), RecordKind.MDU)
        assert outcome.record.posting_date == datetime(2024, 3, 5, 9, 15)

    def test_out_of_range_expiry_year_maps_to_none(self, mapper):
        outcome = mapper.map(_row(mdu_line(expiry_date="01/01/99999999999")), RecordKind.MDU)
        assert isinstance(outcome, MappedRecord)
        assert outcome.record.expiry_date is None

    def test_missing_civic_number_is_validation_failure(self, mapper):
        outcome = mapper.map(_row(mdu_line(civic=""), index=2), RecordKind.MDU)
        assert isinstance(outcome, ValidationFailure)
        assert outcome.reason.startswith("missing required fields")
        assert "civic_number" in outcome.reason
        assert "row 3" in outcome.reason

    def test_missing_both_required_fields_lists_both(self, mapper):
        outcome = mapper.map(_row(mdu_line(civic="", street="")), RecordKind.MDU)
        assert "civic_number, street_name_en" in outcome.reason

    def test_short_row_reads_missing_columns_as_empty(self, mapper):
        outcome = mapper.map(RawRow(index=1, fields=("5", "Oak Ave")), RecordKind.MDU)
        assert isinstance(outcome, MappedRecord)
        assert outcome.record.city_id == 0
        assert outcome.record.comment == ""

    def test_non_numeric_ids_default_to_zero(self, mapper):
        outcome = mapper.map(_row(mdu_line(city_id="abc", street_id="")), RecordKind.MDU)
        assert outcome.record.city_id == 0
        assert outcome.record.street_id == 0

    def test_unknown_province_maps_to_placeholder(self, mapper):
        outcome = mapper.map(_row(mdu_line(province_id="99")), RecordKind.MDU)
        assert outcome.record.province_name == "Unknown"

    def test_empty_file_type_means_pdf_attached(self, mapper):
        outcome = mapper.map(_row(mdu_line(file_type="")), RecordKind.MDU)
        assert outcome.record.file_type_description == "PDF Attached"

    def test_unknown_file_type_is_blank(self, mapper):
        outcome = mapper.map(_row(mdu_line(file_type="9")), RecordKind.MDU)
        assert outcome.record.file_type_description == ""

    @pytest.mark.parametrize("flag", ["0", "", "yes", "true"])
    def test_only_literal_one_is_visible(self, mapper, flag):
        outcome = mapper.map(_row(mdu_line(is_visible=flag)), RecordKind.MDU)
        assert outcome.record.is_visible is False

    def test_bad_date_is_none(self, mapper):
        outcome = mapper.map(_row(mdu_line(expiry_date="someday")), RecordKind.MDU)
        assert outcome.record.expiry_date is None


class TestTariffMapping:
    def test_maps_tariff_row(self, mapper):
        row = _row("T-100,Install fee,Frais,49.95,each,ON,2024-01-01,,Install,None")
        outcome = mapper.map(row, RecordKind.TARIFF)
        assert isinstance(outcome.record, TariffRecord)
        assert outcome.title == "T-100 - Install fee"
        assert outcome.record.rate == Decimal("49.95")
        assert outcome.record.effective_date == datetime(2024, 1, 1)
        assert outcome.record.expiry_date is None

    def test_empty_tariff_row_still_maps(self, mapper):
        outcome = mapper.map(RawRow(index=1, fields=("",)), RecordKind.TARIFF)
        assert isinstance(outcome, MappedRecord)
        assert outcome.record.rate == Decimal("0")


class TestStrictMode:
    def test_non_numeric_id_rejects_row(self):
        outcome = RowMapper(IMPORTED_AT, strict=True).map(
            _row(mdu_line(city_id="abc")), RecordKind.MDU
        )
        assert isinstance(outcome, ValidationFailure)
        assert outcome.reason.startswith("invalid value at row 2")

    def test_bad_date_rejects_row(self):
        outcome = RowMapper(IMPORTED_AT, strict=True).map(
            _row(mdu_line(expiry_date="someday")), RecordKind.MDU
        )
        assert isinstance(outcome, ValidationFailure)

    def test_clean_row_passes(self):
        outcome = RowMapper(IMPORTED_AT, strict=True).map(_row(mdu_line()), RecordKind.MDU)
        assert isinstance(outcome, MappedRecord)


def test_mapping_is_deterministic():
    row = _row(mdu_line("12", "Pine Rd"))
    assert map_row(row, RecordKind.MDU, IMPORTED_AT) == map_row(row, RecordKind.MDU, IMPORTED_AT)
