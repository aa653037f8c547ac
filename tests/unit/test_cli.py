"""Tests for the command-line entry point."""

from __future__ import annotations

import pytest

from bulkentry import cli
from tests.fakes import mdu_csv, mdu_line


@pytest.fixture(autouse=True)
def no_pacing(monkeypatch):
    monkeypatch.setenv("BULKENTRY_PROCESSOR_BATCH_DELAY_MS", "0")


def test_dry_run_success(tmp_path, capsys):
    path = tmp_path / "mdu.csv"
    path.write_text(mdu_csv(mdu_line("1", "Elm"), mdu_line("2", "Oak")))

    assert cli.main([str(path), "--dry-run", "--quiet"]) == cli.EXIT_OK
    out = capsys.readouterr().out
    assert "Successfully processed all 2 entries from 2 rows." in out


def test_row_errors_exit_code(tmp_path, capsys):
    path = tmp_path / "mdu.csv"
    path.write_text(mdu_csv(mdu_line("1", "Elm"), mdu_line("", "Oak")))

    assert cli.main([str(path), "--dry-run"]) == cli.EXIT_ROW_ERRORS
    out = capsys.readouterr().out
    assert "Processing batch 1 of 1..." in out
    assert "row 3 [validation]: missing required fields" in out


def test_empty_file_is_fatal(tmp_path, capsys):
    path = tmp_path / "mdu.csv"
    path.write_text(mdu_csv())

    assert cli.main([str(path), "--dry-run", "--quiet"]) == cli.EXIT_FATAL
    assert "Processing failed" in capsys.readouterr().err


def test_missing_file_is_fatal(tmp_path, capsys):
    assert cli.main([str(tmp_path / "nope.csv"), "--dry-run"]) == cli.EXIT_FATAL
    assert "Error:" in capsys.readouterr().err


def test_missing_credentials_is_fatal(tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("BULKENTRY_CONTENTSTACK_API_KEY", raising=False)
    monkeypatch.delenv("BULKENTRY_CONTENTSTACK_MANAGEMENT_TOKEN", raising=False)
    path = tmp_path / "mdu.csv"
    path.write_text(mdu_csv(mdu_line()))

    assert cli.main([str(path), "--quiet"]) == cli.EXIT_FATAL
    assert "api_key and management_token" in capsys.readouterr().err


def test_invalid_batch_size(tmp_path, capsys):
    path = tmp_path / "mdu.csv"
    path.write_text(mdu_csv(mdu_line()))
    assert cli.main([str(path), "--dry-run", "--batch-size", "0"]) == cli.EXIT_FATAL
