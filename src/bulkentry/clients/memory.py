"""In-memory IRecordService for unit tests and dry runs."""

from __future__ import annotations

import asyncio
from typing import Any

from bulkentry.core.exceptions import ApiError
from bulkentry.core.types import EntryUid, JsonDict, SchemaId
from bulkentry.models.outcomes import CreatedEntry


class MemoryRecordService:
    """Dict-backed IRecordService.

    Entries whose title is in ``fail_titles`` are rejected with a 422
    ApiError; every publish fails when ``fail_publish`` is set. ``latency``
    adds an await before each call, and ``gate`` (when given) holds every
    create until it is set. Peak concurrent creates are tracked in
    ``max_in_flight``.
    """

    def __init__(
        self,
        *,
        fail_titles: set[str] | None = None,
        fail_publish: bool = False,
        latency: float = 0.0,
        gate: asyncio.Event | None = None,
    ) -> None:
        self.entries: dict[EntryUid, dict[str, Any]] = {}
        self.published: list[tuple[SchemaId, EntryUid, str]] = []
        self.fail_titles = fail_titles or set()
        self.fail_publish = fail_publish
        self.latency = latency
        self.gate = gate
        self.in_flight = 0
        self.max_in_flight = 0
        self._counter = 0

    async def create_record(self, schema_id: SchemaId, entry: JsonDict) -> CreatedEntry:
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.gate is not None:
                await self.gate.wait()
            if self.latency:
                await asyncio.sleep(self.latency)
            title = entry.get("title", "")
            if title in self.fail_titles:
                raise ApiError(422, f'{{"error_message": "Entry {title} rejected"}}')
            self._counter += 1
            uid = f"blt{self._counter:06d}"
            self.entries[uid] = {"schema_id": schema_id, **entry}
            return CreatedEntry(uid=uid, title=title)
        finally:
            self.in_flight -= 1

    async def publish_record(self, schema_id: SchemaId, uid: EntryUid, environment: str) -> None:
        if self.fail_publish:
            raise ApiError(500, "publish queue unavailable")
        self.published.append((schema_id, uid, environment))
