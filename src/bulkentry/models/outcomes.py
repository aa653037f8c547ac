"""Row, outcome, and run report models."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Literal, Optional

from pydantic import BaseModel, Field

from bulkentry.models.records import DomainRecord, RecordKind


class RawRow(BaseModel):
    """One data row as read from the file, header excluded."""

    model_config = {"frozen": True}

    index: int  # 1-based ordinal among data rows
    fields: tuple[str, ...]

    @property
    def line_number(self) -> int:
        """Row number shown to users; counts the header row."""
        return self.index + 1

    def get(self, position: int) -> str:
        if position < len(self.fields):
            return self.fields[position]
        return ""


class ParsedFile(BaseModel):
    """Tokenizer output: header plus ordered data rows."""

    model_config = {"frozen": True}

    header: tuple[str, ...]
    rows: tuple[RawRow, ...]

    @property
    def first_row(self) -> Optional[RawRow]:
        return self.rows[0] if self.rows else None


# --- Mapping outcomes ---

class MappedRecord(BaseModel):
    """Row converted into a domain record."""

    model_config = {"frozen": True}

    ok: Literal[True] = True
    row: RawRow
    kind: RecordKind
    record: DomainRecord
    title: str


class ValidationFailure(BaseModel):
    """Row rejected before submission."""

    model_config = {"frozen": True}

    ok: Literal[False] = False
    row: RawRow
    reason: str


MappingOutcome = MappedRecord | ValidationFailure


# --- Submission outcomes ---

class ErrorStage(StrEnum):
    VALIDATION = "validation"
    SUBMISSION = "submission"


class CreatedEntry(BaseModel):
    """Entry accepted by the record service."""

    uid: str
    title: str
    kind: Optional[RecordKind] = None


class RowError(BaseModel):
    """Failure detail for one row, as rendered to users."""

    row: int  # line number, header counted
    reason: str
    data: list[str] = Field(default_factory=list)
    stage: ErrorStage = ErrorStage.SUBMISSION

    def snippet(self, limit: int = 100) -> str:
        text = ",".join(self.data)
        return text if len(text) <= limit else text[:limit] + "..."


class PublishWarning(BaseModel):
    """Entry was created but could not be published."""

    row: int
    uid: str
    reason: str


# --- Run results ---

class ProcessingStats(BaseModel):
    """Progress counters for one run."""

    total: int = 0
    processed: int = 0
    successful: int = 0
    errors: int = 0

    @property
    def percent(self) -> int:
        if self.total <= 0:
            return 0
        return round(self.processed / self.total * 100)


class Report(BaseModel):
    """Final outcome of one engine run."""

    file_name: str = ""
    kind: Optional[RecordKind] = None
    stats: ProcessingStats = Field(default_factory=ProcessingStats)
    errors: list[RowError] = Field(default_factory=list)
    successes: list[CreatedEntry] = Field(default_factory=list)
    publish_warnings: list[PublishWarning] = Field(default_factory=list)
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    cancelled: bool = False
