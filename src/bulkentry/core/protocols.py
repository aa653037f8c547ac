"""Protocol interfaces for bulkentry collaborators.

The engine talks to its collaborators only through these Protocols:
structural typing, no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from bulkentry.core.types import EntryUid, JsonDict, SchemaId

if TYPE_CHECKING:
    from bulkentry.models.outcomes import CreatedEntry


# ---------------------------------------------------------------------------
# Record Service
# ---------------------------------------------------------------------------

@runtime_checkable
class IRecordService(Protocol):
    """Downstream content repository that creates and publishes entries."""

    async def create_record(self, schema_id: SchemaId, entry: JsonDict) -> CreatedEntry: ...

    async def publish_record(
        self, schema_id: SchemaId, uid: EntryUid, environment: str
    ) -> None: ...


# ---------------------------------------------------------------------------
# File Source
# ---------------------------------------------------------------------------

@runtime_checkable
class IFileSource(Protocol):
    """Read-only access to uploaded source files."""

    def read(self, location: str) -> bytes: ...
