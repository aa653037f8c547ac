"""Checks applied to a file before it is handed to the engine."""

from __future__ import annotations

from bulkentry.core.config import UploadConfig
from bulkentry.core.exceptions import UploadRejectedError

_SIZE_UNITS = ("Bytes", "KB", "MB", "GB")


def validate_upload(file_name: str, size: int, config: UploadConfig | None = None) -> None:
    """Reject files with the wrong extension or over the size cap."""
    if config is None:
        config = UploadConfig()
    if not any(file_name.lower().endswith(suffix.lower()) for suffix in config.allowed_suffixes):
        allowed = ", ".join(config.allowed_suffixes)
        raise UploadRejectedError(file_name, f"unsupported file type; expected {allowed}")
    limit = config.max_upload_mb * 1024 * 1024
    if size > limit:
        raise UploadRejectedError(
            file_name,
            f"file size must be less than {config.max_upload_mb}MB ({format_file_size(size)})",
            too_large=True,
        )


def format_file_size(size: int) -> str:
    """Human-readable size: 0 Bytes, 512 Bytes, 1.5 KB, 2 MB."""
    if size <= 0:
        return "0 Bytes"
    value = float(size)
    exponent = 0
    while value >= 1024 and exponent < len(_SIZE_UNITS) - 1:
        value /= 1024
        exponent += 1
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {_SIZE_UNITS[exponent]}"
