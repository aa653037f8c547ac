"""Pluggable source file readers behind the IFileSource protocol."""

from __future__ import annotations

from pathlib import PurePosixPath

from bulkentry.core.config import AppSettings
from bulkentry.core.exceptions import SourceError
from bulkentry.core.protocols import IFileSource
from bulkentry.sources.local_source import LocalFileSource, MemoryFileSource
from bulkentry.sources.s3_source import S3FileSource

S3_SCHEME = "s3://"

__all__ = ["LocalFileSource", "MemoryFileSource", "S3FileSource", "open_source", "resolve_source"]


def resolve_source(location: str, settings: AppSettings | None = None) -> tuple[IFileSource, str]:
    """Pick the reader for ``location``.

    Returns:
        Tuple of (source, key) where key is what ``source.read`` expects.
    """
    if settings is None:
        settings = AppSettings()
    if location.startswith(S3_SCHEME):
        bucket, _, key = location[len(S3_SCHEME):].partition("/")
        if not bucket or not key:
            raise SourceError(f"Malformed S3 location {location!r}; expected s3://bucket/key")
        source = S3FileSource(
            bucket=bucket,
            region=settings.s3.region,
            endpoint_url=settings.s3.endpoint_url,
        )
        return source, key
    return LocalFileSource(), location


def open_source(location: str, settings: AppSettings | None = None) -> tuple[str, bytes]:
    """Read a source file.

    Returns:
        Tuple of (file_name, content); file_name is the last path segment,
        which the classifier uses as its first hint.
    """
    source, key = resolve_source(location, settings)
    return PurePosixPath(key.replace("\\", "/")).name, source.read(key)
