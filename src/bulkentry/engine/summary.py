"""Plain-text rendering of a run report."""

from __future__ import annotations

from bulkentry.models.outcomes import ProcessingStats, Report


def summarize(report: Report) -> str:
    """One-sentence outcome, as shown after a run."""
    stats = report.stats
    if stats.errors > 0:
        return (
            f"Processed {stats.successful} entries successfully with {stats.errors} errors "
            f"out of {stats.total} total rows."
        )
    return f"Successfully processed all {stats.successful} entries from {stats.total} rows."


def progress_line(stats: ProcessingStats) -> str:
    return (
        f"{stats.processed} / {stats.total} processed ({stats.percent}%) "
        f"ok={stats.successful} errors={stats.errors}"
    )


def error_lines(report: Report, limit: int = 100) -> list[str]:
    """Row, reason, and a data snippet for each failed row, sorted by row."""
    return [
        f"row {error.row} [{error.stage}]: {error.reason} | {error.snippet(limit)}"
        for error in sorted(report.errors, key=lambda e: e.row)
    ]
