"""Concurrency-safe collector of per-row outcomes for one run."""

from __future__ import annotations

import threading
from datetime import datetime
from typing import Optional

from bulkentry.models.outcomes import (
    CreatedEntry,
    ErrorStage,
    ProcessingStats,
    PublishWarning,
    RawRow,
    Report,
    RowError,
)
from bulkentry.models.records import RecordKind


class ResultAggregator:
    """Accumulates outcomes; counters and lists change together under one lock.

    ``len(errors) + len(successes) == stats.processed`` holds whenever the
    lock is free.
    """

    def __init__(self, total: int) -> None:
        self._lock = threading.Lock()
        self._stats = ProcessingStats(total=total)
        self._errors: list[RowError] = []
        self._successes: list[CreatedEntry] = []
        self._warnings: list[PublishWarning] = []

    def record_success(self, entry: CreatedEntry) -> ProcessingStats:
        with self._lock:
            self._successes.append(entry)
            self._stats.successful += 1
            self._stats.processed += 1
            return self._stats.model_copy()

    def record_error(self, row: RawRow, reason: str, stage: ErrorStage) -> ProcessingStats:
        error = RowError(row=row.line_number, reason=reason, data=list(row.fields), stage=stage)
        with self._lock:
            self._errors.append(error)
            self._stats.errors += 1
            self._stats.processed += 1
            return self._stats.model_copy()

    def record_publish_warning(self, row: RawRow, uid: str, reason: str) -> None:
        with self._lock:
            self._warnings.append(PublishWarning(row=row.line_number, uid=uid, reason=reason))

    def snapshot(self) -> ProcessingStats:
        with self._lock:
            return self._stats.model_copy()

    def report(
        self,
        *,
        file_name: str = "",
        kind: Optional[RecordKind] = None,
        started_at: Optional[datetime] = None,
        finished_at: Optional[datetime] = None,
        cancelled: bool = False,
    ) -> Report:
        with self._lock:
            return Report(
                file_name=file_name,
                kind=kind,
                stats=self._stats.model_copy(),
                errors=list(self._errors),
                successes=list(self._successes),
                publish_warnings=list(self._warnings),
                started_at=started_at,
                finished_at=finished_at,
                cancelled=cancelled,
            )
