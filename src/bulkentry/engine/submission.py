"""SubmissionEngine: batched, paced, concurrent submission of mapped rows.

One run walks the data rows in fixed-size batches. Rows inside a batch are
mapped and submitted concurrently; batches run strictly one after another
with a fixed pause between them. A row's failure is recorded in the report
and never stops the batch or the run.
"""

from __future__ import annotations

import asyncio
import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Optional

from bulkentry.core.config import ProcessorConfig
from bulkentry.core.exceptions import AlreadyInProgressError, RunCancelledError
from bulkentry.core.protocols import IRecordService
from bulkentry.core.types import ProgressCallback, SchemaId, StatusCallback
from bulkentry.engine.aggregator import ResultAggregator
from bulkentry.ingest.classifier import classify
from bulkentry.ingest.row_mapper import RowMapper
from bulkentry.ingest.tokenizer import tokenize
from bulkentry.models.outcomes import (
    ErrorStage,
    MappedRecord,
    ParsedFile,
    ProcessingStats,
    RawRow,
    Report,
    ValidationFailure,
)
from bulkentry.models.records import RecordKind

logger = logging.getLogger(__name__)


class RunHandle:
    """Token for the single active run of an engine."""

    def __init__(self, file_name: str) -> None:
        self.run_id = uuid.uuid4().hex[:12]
        self.file_name = file_name
        self.started_at = datetime.now(timezone.utc)


class _Run:
    """Per-run state shared by the row tasks of that run."""

    def __init__(
        self,
        handle: RunHandle,
        kind: RecordKind,
        total: int,
        strict: bool,
        on_progress: Optional[ProgressCallback],
    ) -> None:
        self.handle = handle
        self.kind = kind
        self.results = ResultAggregator(total)
        self.mapper = RowMapper(handle.started_at, strict=strict)
        self.on_progress = on_progress

    @property
    def log_extra(self) -> dict[str, str]:
        return {"run_id": self.handle.run_id}


def _batches(rows: tuple[RawRow, ...], size: int) -> list[tuple[RawRow, ...]]:
    return [rows[start:start + size] for start in range(0, len(rows), size)]


class SubmissionEngine:
    """Runs one file at a time against an IRecordService."""

    def __init__(self, service: IRecordService, config: ProcessorConfig | None = None) -> None:
        self._service = service
        self._config = config or ProcessorConfig()
        self._guard = threading.Lock()
        self._active: RunHandle | None = None

    @property
    def config(self) -> ProcessorConfig:
        return self._config

    @property
    def active_run(self) -> RunHandle | None:
        return self._active

    # ---- run handle ----

    def _acquire(self, file_name: str) -> RunHandle:
        with self._guard:
            if self._active is not None:
                raise AlreadyInProgressError(self._active.run_id)
            self._active = RunHandle(file_name)
            return self._active

    def _release(self, handle: RunHandle) -> None:
        with self._guard:
            if self._active is handle:
                self._active = None

    # ---- entry points ----

    async def process_file(
        self,
        file_name: str,
        content: bytes | str,
        on_progress: Optional[ProgressCallback] = None,
        on_status: Optional[StatusCallback] = None,
        cancel: Optional[asyncio.Event] = None,
    ) -> Report:
        """Tokenize raw file content and process it.

        Raises:
            AlreadyInProgressError: Another run is active on this engine.
            EmptyFileError: No header or no data rows.
            ColumnCountError: A row's width differs from the header's.
            RunCancelledError: ``cancel`` was set between two batches.
        """
        handle = self._acquire(file_name)
        try:
            _emit(on_status, "Parsing file...")
            try:
                parsed = tokenize(
                    content,
                    delimiter=self._config.delimiter,
                    lenient=self._config.lenient_columns,
                )
            except Exception as exc:
                logger.error("Parsing %s failed: %s", file_name, exc, extra={"run_id": handle.run_id})
                _emit(on_status, f"Processing failed: {exc}")
                raise
            return await self._run(handle, parsed, on_progress, on_status, cancel)
        finally:
            self._release(handle)

    async def process(
        self,
        parsed: ParsedFile,
        file_name: str = "",
        on_progress: Optional[ProgressCallback] = None,
        on_status: Optional[StatusCallback] = None,
        cancel: Optional[asyncio.Event] = None,
    ) -> Report:
        """Process rows that were already tokenized."""
        handle = self._acquire(file_name)
        try:
            return await self._run(handle, parsed, on_progress, on_status, cancel)
        finally:
            self._release(handle)

    # ---- run ----

    async def _run(
        self,
        handle: RunHandle,
        parsed: ParsedFile,
        on_progress: Optional[ProgressCallback],
        on_status: Optional[StatusCallback],
        cancel: Optional[asyncio.Event],
    ) -> Report:
        first = parsed.first_row
        kind = classify(handle.file_name, first.fields if first is not None else None)
        config = self._config
        run = _Run(
            handle,
            kind,
            total=len(parsed.rows),
            strict=config.strict_mapping,
            on_progress=on_progress,
        )
        logger.info(
            "Processing %s as %s: %d rows, batch size %d",
            handle.file_name, kind, len(parsed.rows), config.batch_size, extra=run.log_extra,
        )
        _emit(on_status, f"Processing {kind} file with {len(parsed.rows)} rows...")

        try:
            batches = _batches(parsed.rows, config.batch_size)
            for number, batch in enumerate(batches, start=1):
                if number > 1:
                    self._raise_if_cancelled(run, cancel)
                _emit(on_status, f"Processing batch {number} of {len(batches)}...")
                await self._submit_batch(run, batch)
                stats = run.results.snapshot()
                logger.debug(
                    "Batch %d of %d settled: %d/%d processed",
                    number, len(batches), stats.processed, stats.total, extra=run.log_extra,
                )
                if number < len(batches):
                    self._raise_if_cancelled(run, cancel)
                    await self._pause(config.batch_delay_ms / 1000)
        except Exception as exc:
            logger.error("Run failed: %s", exc, extra=run.log_extra)
            _emit(on_status, f"Processing failed: {exc}")
            raise

        report = run.results.report(
            file_name=handle.file_name,
            kind=kind,
            started_at=handle.started_at,
            finished_at=datetime.now(timezone.utc),
        )
        logger.info(
            "Run complete: %d successful, %d errors, %d publish warnings",
            report.stats.successful, report.stats.errors, len(report.publish_warnings),
            extra=run.log_extra,
        )
        _emit(on_status, "Processing complete")
        return report

    def _raise_if_cancelled(self, run: _Run, cancel: Optional[asyncio.Event]) -> None:
        if cancel is None or not cancel.is_set():
            return
        report = run.results.report(
            file_name=run.handle.file_name,
            kind=run.kind,
            started_at=run.handle.started_at,
            finished_at=datetime.now(timezone.utc),
            cancelled=True,
        )
        raise RunCancelledError(report)

    async def _pause(self, seconds: float) -> None:
        if seconds > 0:
            await asyncio.sleep(seconds)

    async def _submit_batch(self, run: _Run, batch: tuple[RawRow, ...]) -> None:
        results = await asyncio.gather(
            *(self._submit_row(run, row) for row in batch), return_exceptions=True
        )
        for row, result in zip(batch, results):
            if isinstance(result, Exception):
                logger.error(
                    "Row %d task raised: %r", row.line_number, result,
                    exc_info=result, extra=run.log_extra,
                )

    # ---- rows ----

    async def _submit_row(self, run: _Run, row: RawRow) -> None:
        try:
            outcome = run.mapper.map(row, run.kind)
        except Exception as exc:
            logger.exception("Row %d mapping raised", row.line_number, extra=run.log_extra)
            outcome = ValidationFailure(row=row, reason=f"unexpected error at row {row.line_number}: {exc}")
        if isinstance(outcome, MappedRecord):
            stats = await self._create_and_publish(run, outcome)
        else:
            logger.info("Row %d rejected: %s", row.line_number, outcome.reason, extra=run.log_extra)
            stats = run.results.record_error(row, outcome.reason, ErrorStage.VALIDATION)
        if run.on_progress is not None:
            run.on_progress(stats)

    async def _create_and_publish(self, run: _Run, mapped: MappedRecord) -> ProcessingStats:
        schema_id = self._schema_for(mapped.kind)
        entry = {"title": mapped.title, **mapped.record.model_dump(mode="json")}
        try:
            created = await self._service.create_record(schema_id, entry)
        except Exception as exc:
            logger.info(
                "Row %d create failed: %s", mapped.row.line_number, exc, extra=run.log_extra,
            )
            return run.results.record_error(
                mapped.row, f"Failed to create {mapped.kind} entry: {exc}", ErrorStage.SUBMISSION,
            )

        created = created.model_copy(update={"kind": mapped.kind})
        if self._config.auto_publish:
            try:
                await self._service.publish_record(schema_id, created.uid, self._config.environment)
            except Exception as exc:
                logger.warning(
                    "Failed to publish entry %s: %s", created.uid, exc, extra=run.log_extra,
                )
                run.results.record_publish_warning(mapped.row, created.uid, str(exc))
        return run.results.record_success(created)

    def _schema_for(self, kind: RecordKind) -> SchemaId:
        if kind is RecordKind.MDU:
            return self._config.primary_schema_id
        return self._config.secondary_schema_id


def _emit(callback: Optional[StatusCallback], message: str) -> None:
    if callback is not None:
        callback(message)
