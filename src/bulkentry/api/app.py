"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from bulkentry.api.routes import health, imports
from bulkentry.clients import create_record_service
from bulkentry.core.config import AppSettings
from bulkentry.core.logging_setup import configure_logging
from bulkentry.core.protocols import IRecordService
from bulkentry.engine.submission import SubmissionEngine


def create_app(
    settings: AppSettings | None = None,
    record_service: IRecordService | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    ``record_service`` overrides the one built from settings; the app only
    closes services it created itself.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Initialize and tear down application resources."""
        app_settings = settings or AppSettings()
        configure_logging(app_settings)
        service = record_service or create_record_service(app_settings)
        app.state.settings = app_settings
        app.state.engine = SubmissionEngine(service, app_settings.processor)
        try:
            yield
        finally:
            if record_service is None and hasattr(service, "aclose"):
                await service.aclose()

    app = FastAPI(
        title="bulkentry CSV import service",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(health.router)
    app.include_router(imports.router)
    return app
