"""Lenient text-to-value conversions used by the row mapper.

Lenient mode takes a leading number when one is present and turns
anything unusable into the field default. Strict mode raises
``ValueError`` for any non-empty value that does not convert cleanly,
and the mapper turns that into a validation failure.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Optional

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^[+-]?\d+")
_LEADING_DECIMAL = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_FULL_INT = re.compile(r"[+-]?\d+")


def to_int(text: str, *, strict: bool = False) -> int:
    """Leading integer of ``text``; 0 when there is none."""
    if not text:
        return 0
    if strict and not _FULL_INT.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    match = _LEADING_INT.match(text)
    return int(match.group()) if match else 0


def to_decimal(text: str, *, strict: bool = False) -> Decimal:
    """Leading decimal number of ``text``; Decimal("0") when there is none."""
    if not text:
        return Decimal("0")
    match = _LEADING_DECIMAL.match(text)
    if strict and (match is None or match.end() != len(text)):
        raise ValueError(f"not a number: {text!r}")
    if match is None:
        return Decimal("0")
    try:
        return Decimal(match.group())
    except InvalidOperation:
        return Decimal("0")


def _parse_slash_date(text: str) -> datetime:
    """MM/DD/YYYY with an optional HH:MM after the first space."""
    date_part, _, time_part = text.partition(" ")
    month, day, year = (int(piece) for piece in date_part.split("/"))
    hour = minute = 0
    if time_part.strip():
        clock = time_part.strip().split(":")
        hour = int(clock[0] or 0)
        minute = int(clock[1] or 0) if len(clock) > 1 else 0
    return datetime(year, month, day, hour, minute)


def to_datetime(text: str, *, strict: bool = False) -> Optional[datetime]:
    """Parse a date cell; ``None`` means unknown, never the epoch."""
    if not text:
        return None
    try:
        if "/" in text:
            return _parse_slash_date(text)
        return datetime.fromisoformat(text)
    except (ValueError, OverflowError):
        if strict:
            raise ValueError(f"not a date: {text!r}") from None
        logger.debug("Failed to parse date: %r", text)
        return None
