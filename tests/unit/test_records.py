"""Tests for the MDU and tariff record models."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from bulkentry.models.records import MDU_COLUMN_COUNT, MduRecord, TariffRecord


def test_mdu_title_joins_civic_number_and_street():
    record = MduRecord(civic_number="221B", street_name_en="Baker St")
    assert record.title == "221B Baker St"


def test_mdu_optional_fields_default_empty():
    record = MduRecord(civic_number="1", street_name_en="Elm")
    assert record.city_id == 0
    assert record.expiry_date is None
    assert record.is_visible is False


def test_tariff_defaults_to_zero_rate():
    record = TariffRecord()
    assert record.rate == Decimal("0")
    assert record.title == " - "


def test_records_are_frozen():
    record = TariffRecord(tariff_code="T1")
    with pytest.raises(ValidationError):
        record.tariff_code = "T2"


def test_mdu_schema_has_fifteen_columns():
    assert MDU_COLUMN_COUNT == 15
