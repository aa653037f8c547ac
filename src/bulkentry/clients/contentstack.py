"""Contentstack management API client implementing IRecordService."""

from __future__ import annotations

from types import TracebackType

import httpx

from bulkentry.core.config import ContentstackConfig
from bulkentry.core.exceptions import ApiError, ConfigError
from bulkentry.core.types import EntryUid, JsonDict, SchemaId
from bulkentry.models.outcomes import CreatedEntry


class ContentstackRecordService:
    """Production IRecordService backed by the Contentstack management API."""

    def __init__(
        self,
        config: ContentstackConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not config.api_key or not config.management_token:
            raise ConfigError("Contentstack api_key and management_token are required")
        self._config = config
        self._client = httpx.AsyncClient(
            base_url=config.base_url.rstrip("/"),
            headers={
                "api_key": config.api_key,
                "authorization": config.management_token,
                "Content-Type": "application/json",
            },
            timeout=config.timeout,
            transport=transport,
        )

    async def __aenter__(self) -> ContentstackRecordService:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _post(self, path: str, payload: JsonDict) -> JsonDict:
        response = await self._client.post(path, json=payload)
        if not response.is_success:
            raise ApiError(response.status_code, response.text)
        return response.json()

    # ---- IRecordService ----

    async def create_record(self, schema_id: SchemaId, entry: JsonDict) -> CreatedEntry:
        body = await self._post(f"/content_types/{schema_id}/entries", {"entry": entry})
        created = body.get("entry") or {}
        if "uid" not in created:
            raise ApiError(200, f"response has no entry uid: {body!r}")
        return CreatedEntry(uid=created["uid"], title=created.get("title", entry.get("title", "")))

    async def publish_record(self, schema_id: SchemaId, uid: EntryUid, environment: str) -> None:
        await self._post(
            f"/content_types/{schema_id}/entries/{uid}/publish",
            {
                "entry": {
                    "environments": [environment],
                    "locales": [self._config.locale],
                },
            },
        )
