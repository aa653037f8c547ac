"""Guess which record schema a file holds."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from bulkentry.models.records import MDU_COLUMN_COUNT, RecordKind

MDU_NAME_KEYWORDS = ("mdu", "building", "access")
TARIFF_NAME_KEYWORDS = ("tariff", "rate", "pricing")


def classify(file_name: str, first_row: Optional[Sequence[str]]) -> RecordKind:
    """Pick a RecordKind from the file name, then the first row's width.

    A heuristic only: a wrong guess shows up later as per-row validation
    errors, never as an exception here.
    """
    lowered = file_name.lower()
    if any(keyword in lowered for keyword in MDU_NAME_KEYWORDS):
        return RecordKind.MDU
    if any(keyword in lowered for keyword in TARIFF_NAME_KEYWORDS):
        return RecordKind.TARIFF
    if first_row is not None and len(first_row) == MDU_COLUMN_COUNT:
        return RecordKind.MDU
    return RecordKind.MDU
