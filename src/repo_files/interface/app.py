"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from repo_files.infrastructure.config import get_settings
from repo_files.interface.dependencies import build_file_store
from repo_files.interface.error_handlers import register_error_handlers
from repo_files.interface.routes import router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Own one HTTP client and the adapter bound to it for the app's lifetime.

    A ``ConfigurationError`` escapes here, so the server refuses to start.
    """
    settings = get_settings()
    timeout = httpx.Timeout(settings.http_timeout_seconds)
    async with httpx.AsyncClient(timeout=timeout) as client:
        app.state.file_store = build_file_store(client, settings)
        logger.info("Serving files from %s", app.state.file_store.repository.full_name)
        try:
            yield
        finally:
            app.state.file_store = None


def create_app() -> FastAPI:
    """Build and wire the FastAPI application."""
    app = FastAPI(
        title="Repo Files",
        version="1.0.0",
        description="File-level CRUD on one GitHub repository via the contents API.",
        lifespan=_lifespan,
    )
    register_error_handlers(app)
    app.include_router(router)

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
