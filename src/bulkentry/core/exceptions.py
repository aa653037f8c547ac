"""bulkentry exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bulkentry.models.outcomes import Report


class BulkEntryError(Exception):
    """Base exception for all bulkentry errors."""


class ConfigError(BulkEntryError):
    """Required configuration is missing or invalid."""


class SourceError(BulkEntryError):
    """A source file could not be read."""


class UploadRejectedError(BulkEntryError):
    """An uploaded file failed the name or size checks."""

    def __init__(self, file_name: str, reason: str, *, too_large: bool = False) -> None:
        self.file_name = file_name
        self.reason = reason
        self.too_large = too_large
        super().__init__(f"{file_name}: {reason}")


class FatalRunError(BulkEntryError):
    """Aborts a whole run; no partial report is produced."""


class EmptyFileError(FatalRunError):
    """File has no header or no data rows."""


class ColumnCountError(FatalRunError):
    """A data row does not have as many fields as the header."""

    def __init__(self, line_number: int, expected: int, found: int) -> None:
        self.line_number = line_number
        self.expected = expected
        self.found = found
        super().__init__(
            f"Row {line_number} has {found} fields, header has {expected}"
        )


class AlreadyInProgressError(FatalRunError):
    """The engine is already running a file."""

    def __init__(self, run_id: str) -> None:
        self.run_id = run_id
        super().__init__(f"Processing already in progress (run {run_id})")


class RunCancelledError(FatalRunError):
    """The caller cancelled the run between batches."""

    def __init__(self, report: Report) -> None:
        self.report = report
        super().__init__(
            f"Run cancelled after {report.stats.processed} of {report.stats.total} rows"
        )


class ApiError(BulkEntryError):
    """The record service answered with a non-success status."""

    def __init__(self, status: int, body: str) -> None:
        self.status = status
        self.body = body
        super().__init__(f"API Error: {status} - {body}")
