"""Filesystem and in-memory IFileSource implementations."""

from __future__ import annotations

from pathlib import Path

from bulkentry.core.exceptions import SourceError


class LocalFileSource:
    """IFileSource over the local filesystem."""

    def read(self, location: str) -> bytes:
        try:
            return Path(location).read_bytes()
        except OSError as exc:
            raise SourceError(f"Failed to read file {location!r}: {exc}") from exc


class MemoryFileSource:
    """Dict-backed IFileSource for unit tests."""

    def __init__(self, files: dict[str, bytes] | None = None) -> None:
        self._files: dict[str, bytes] = dict(files or {})

    def add(self, location: str, data: bytes) -> None:
        self._files[location] = data

    def read(self, location: str) -> bytes:
        try:
            return self._files[location]
        except KeyError:
            raise SourceError(f"No such file: {location!r}") from None
