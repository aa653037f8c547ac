"""Tests for report rendering helpers."""

from __future__ import annotations

from bulkentry.engine.summary import error_lines, progress_line, summarize
from bulkentry.models.outcomes import ProcessingStats, Report, RowError


def test_summary_without_errors():
    report = Report(stats=ProcessingStats(total=4, processed=4, successful=4))
    assert summarize(report) == "Successfully processed all 4 entries from 4 rows."


def test_summary_with_errors():
    report = Report(stats=ProcessingStats(total=4, processed=4, successful=3, errors=1))
    assert summarize(report) == (
        "Processed 3 entries successfully with 1 errors out of 4 total rows."
    )


def test_progress_line_includes_percent():
    stats = ProcessingStats(total=4, processed=1, successful=1)
    assert progress_line(stats) == "1 / 4 processed (25%) ok=1 errors=0"


def test_error_lines_sorted_by_row_and_truncated():
    report = Report(
        errors=[
            RowError(row=5, reason="late", data=["x" * 150]),
            RowError(row=2, reason="early", data=["a", "b"]),
        ]
    )
    lines = error_lines(report)
    assert lines[0] == "row 2 [submission]: early | a,b"
    assert lines[1].endswith("x" * 100 + "...")
