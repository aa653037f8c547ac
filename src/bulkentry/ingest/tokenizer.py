"""Split raw delimited text into a header and ordered data rows.

Quoted fields and embedded newlines are not supported: every line is one
row and every delimiter separates two fields.
"""

from __future__ import annotations

import logging

from bulkentry.core.exceptions import ColumnCountError, EmptyFileError
from bulkentry.models.outcomes import ParsedFile, RawRow

logger = logging.getLogger(__name__)


def _decode(content: bytes | str) -> str:
    if isinstance(content, bytes):
        return content.decode("utf-8-sig")
    return content.lstrip("\ufeff")


def _split(line: str, delimiter: str) -> tuple[str, ...]:
    return tuple(field.strip() for field in line.split(delimiter))


def tokenize(content: bytes | str, delimiter: str = ",", lenient: bool = False) -> ParsedFile:
    """Parse file content into a ParsedFile.

    Args:
        content: Raw file bytes (UTF-8) or text.
        delimiter: Field separator.
        lenient: Drop rows whose field count differs from the header's
            instead of failing the whole file.

    Raises:
        EmptyFileError: Fewer than two non-blank lines.
        ColumnCountError: A row's field count differs from the header's
            and ``lenient`` is off.
    """
    lines = [line.removesuffix("\r") for line in _decode(content).split("\n")]
    lines = [line for line in lines if line.strip()]
    if len(lines) < 2:
        raise EmptyFileError("File must contain a header and at least one data row")

    header = _split(lines[0], delimiter)
    rows: list[RawRow] = []
    dropped = 0
    for ordinal, line in enumerate(lines[1:], start=1):
        fields = _split(line, delimiter)
        if len(fields) != len(header):
            if not lenient:
                raise ColumnCountError(ordinal + 1, len(header), len(fields))
            dropped += 1
            logger.debug(
                "Dropping row %d: %d fields, header has %d", ordinal + 1, len(fields), len(header)
            )
            continue
        # Dropped rows keep their gap so row numbers still point at the source line.
        rows.append(RawRow(index=ordinal, fields=fields))

    if not rows:
        raise EmptyFileError("File has no data rows with the header's column count")
    if dropped:
        logger.info("Dropped %d rows with mismatched column counts", dropped)
    return ParsedFile(header=header, rows=tuple(rows))
