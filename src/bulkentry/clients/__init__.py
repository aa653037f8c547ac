"""Record service backends behind the IRecordService protocol."""

from __future__ import annotations

from bulkentry.clients.contentstack import ContentstackRecordService
from bulkentry.clients.memory import MemoryRecordService
from bulkentry.core.config import AppSettings
from bulkentry.core.protocols import IRecordService


def create_record_service(settings: AppSettings | None = None, *, dry_run: bool = False) -> IRecordService:
    """Create the record service selected by settings.

    Returns:
        MemoryRecordService for dry runs, otherwise ContentstackRecordService.
    """
    if settings is None:
        settings = AppSettings()
    if dry_run:
        return MemoryRecordService()
    return ContentstackRecordService(settings.contentstack)
