"""Command-line entry point: import one CSV file.

Usage:
    bulkentry data/mdu_march.csv
    bulkentry s3://bulkentry-uploads/incoming/tariffs.csv --no-publish
    bulkentry data/mdu_march.csv --dry-run --batch-size 5
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Sequence

from bulkentry.clients import create_record_service
from bulkentry.core.config import AppSettings
from bulkentry.core.exceptions import BulkEntryError, FatalRunError
from bulkentry.core.logging_setup import configure_logging
from bulkentry.engine.submission import SubmissionEngine
from bulkentry.engine.summary import error_lines, progress_line, summarize
from bulkentry.ingest.uploads import validate_upload
from bulkentry.models.outcomes import Report
from bulkentry.sources import open_source

EXIT_OK = 0
EXIT_ROW_ERRORS = 1
EXIT_FATAL = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bulkentry", description="Import a CSV file as content entries")
    parser.add_argument("location", help="Local path or s3://bucket/key of the CSV file")
    parser.add_argument("--dry-run", action="store_true", help="Use an in-memory record service")
    parser.add_argument("--batch-size", type=int, default=None, help="Rows submitted concurrently")
    parser.add_argument("--no-publish", action="store_true", help="Create entries without publishing")
    parser.add_argument("--strict", action="store_true", help="Reject rows with unparsable numbers or dates")
    parser.add_argument(
        "--lenient-columns", action="store_true",
        help="Drop rows whose column count differs from the header instead of failing",
    )
    parser.add_argument("--quiet", action="store_true", help="Only print the summary")
    return parser


def _apply_overrides(settings: AppSettings, args: argparse.Namespace) -> AppSettings:
    updates: dict = {}
    if args.batch_size is not None:
        if args.batch_size < 1:
            raise BulkEntryError("--batch-size must be at least 1")
        updates["batch_size"] = args.batch_size
    if args.no_publish:
        updates["auto_publish"] = False
    if args.strict:
        updates["strict_mapping"] = True
    if args.lenient_columns:
        updates["lenient_columns"] = True
    if not updates:
        return settings
    return settings.model_copy(update={"processor": settings.processor.model_copy(update=updates)})


async def _run(settings: AppSettings, args: argparse.Namespace) -> Report:
    file_name, content = open_source(args.location, settings)
    validate_upload(file_name, len(content), settings.upload)

    service = create_record_service(settings, dry_run=args.dry_run)
    engine = SubmissionEngine(service, settings.processor)
    on_progress = None if args.quiet else (lambda stats: print(progress_line(stats)))
    on_status = None if args.quiet else print
    try:
        return await engine.process_file(file_name, content, on_progress, on_status)
    finally:
        if hasattr(service, "aclose"):
            await service.aclose()


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = AppSettings()
    configure_logging(settings)
    try:
        settings = _apply_overrides(settings, args)
        report = asyncio.run(_run(settings, args))
    except FatalRunError as exc:
        print(f"Processing failed: {exc}", file=sys.stderr)
        return EXIT_FATAL
    except BulkEntryError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FATAL

    print(summarize(report))
    for line in error_lines(report):
        print(line)
    for warning in report.publish_warnings:
        print(f"row {warning.row}: created {warning.uid} but publish failed: {warning.reason}")
    return EXIT_ROW_ERRORS if report.stats.errors else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
