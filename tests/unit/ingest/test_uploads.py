"""Tests for upload checks and size formatting."""

from __future__ import annotations

import pytest

from bulkentry.core.config import UploadConfig
from bulkentry.core.exceptions import UploadRejectedError
from bulkentry.ingest.uploads import format_file_size, validate_upload


def test_accepts_csv_under_limit():
    validate_upload("MDU.CSV", 1024)


def test_rejects_other_extensions():
    with pytest.raises(UploadRejectedError) as exc_info:
        validate_upload("mdu.xlsx", 10)
    assert exc_info.value.too_large is False


def test_rejects_oversized_file():
    with pytest.raises(UploadRejectedError) as exc_info:
        validate_upload("mdu.csv", 11 * 1024 * 1024)
    assert exc_info.value.too_large is True


def test_limit_comes_from_config():
    with pytest.raises(UploadRejectedError):
        validate_upload("mdu.csv", 2 * 1024 * 1024, UploadConfig(max_upload_mb=1))


@pytest.mark.parametrize(
    ("size", "expected"),
    [(0, "0 Bytes"), (512, "512 Bytes"), (1536, "1.5 KB"), (1024 * 1024, "1 MB")],
)
def test_format_file_size(size, expected):
    assert format_file_size(size) == expected
