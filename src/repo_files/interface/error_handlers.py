"""Global exception handlers — translate domain errors to HTTP responses.

Each domain exception maps to a specific HTTP status code and the
standard ``{"status": "error", "message": "..."}`` envelope.
"""

from __future__ import annotations

import logging

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from repo_files.domain.exceptions import (
    ConfigurationError,
    ContentUnavailableError,
    InvalidRequestError,
    NotFoundError,
    RemoteApiError,
)

logger = logging.getLogger(__name__)

# Upstream statuses passed through as-is; everything else becomes 502.
_PASSTHROUGH_REMOTE_STATUS: dict[int, int] = {
    404: 404,
    409: 409,
    422: 409,
}


def _error_json(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "message": message},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    # ── Domain exceptions ───────────────────────────────────────────────

    @app.exception_handler(InvalidRequestError)
    async def invalid_request_handler(request: Request, exc: InvalidRequestError) -> JSONResponse:
        return _error_json(422, exc.reason)

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return _error_json(404, str(exc))

    @app.exception_handler(ContentUnavailableError)
    async def content_unavailable_handler(
        request: Request, exc: ContentUnavailableError
    ) -> JSONResponse:
        logger.warning("ContentUnavailableError: %s", exc)
        return _error_json(502, str(exc))

    @app.exception_handler(RemoteApiError)
    async def remote_api_handler(request: Request, exc: RemoteApiError) -> JSONResponse:
        logger.warning("RemoteApiError: %s", exc)
        return _error_json(_PASSTHROUGH_REMOTE_STATUS.get(exc.status_code, 502), str(exc))

    @app.exception_handler(ConfigurationError)
    async def configuration_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
        logger.error("ConfigurationError: %s", exc)
        return _error_json(500, "The service is misconfigured.")

    # ── Transport failures talking to GitHub ────────────────────────────

    @app.exception_handler(httpx.TimeoutException)
    async def timeout_handler(request: Request, exc: httpx.TimeoutException) -> JSONResponse:
        logger.warning("GitHub request timed out: %s", exc)
        return _error_json(504, "GitHub did not respond in time.")

    @app.exception_handler(httpx.TransportError)
    async def transport_handler(request: Request, exc: httpx.TransportError) -> JSONResponse:
        logger.warning("GitHub transport error: %s", exc)
        return _error_json(502, "Could not reach GitHub.")

    # ── Pydantic / FastAPI validation errors ────────────────────────────

    @app.exception_handler(RequestValidationError)
    async def validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        messages = []
        for err in exc.errors():
            loc = " → ".join(str(p) for p in err.get("loc", []))
            messages.append(f"{loc}: {err.get('msg', 'validation error')}")
        return _error_json(422, "; ".join(messages))

    # ── Catch-all for unexpected errors ─────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception")
        return _error_json(500, "An unexpected error occurred. Please try again later.")
