"""Global exception handlers.

Fetch failures never get here: views turn them into rendered failure
screens.  What remains are programming errors, which are logged and
answered with the standard ``{"status": "error", "message": "..."}``
envelope.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from repo_viewer.domain.exceptions import RepoViewerError
from repo_viewer.interface.schemas import ErrorResponse

logger = logging.getLogger(__name__)


def _error_json(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    # ── Domain exceptions ───────────────────────────────────────────────

    @app.exception_handler(RepoViewerError)
    async def domain_handler(request: Request, exc: RepoViewerError) -> JSONResponse:
        logger.error("%s on %s: %s", type(exc).__name__, request.url.path, exc)
        return _error_json(500, str(exc))

    # ── Catch-all for unexpected errors ─────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception")
        return _error_json(500, "An unexpected error occurred. Please try again later.")
