"""Type aliases used across bulkentry."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from bulkentry.models.outcomes import ProcessingStats

JsonDict = dict[str, Any]
EntryUid = str
SchemaId = str

ProgressCallback = Callable[["ProcessingStats"], None]
StatusCallback = Callable[[str], None]
