"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from repo_viewer.infrastructure.config import get_settings
from repo_viewer.interface.dependencies import shutdown, startup
from repo_viewer.interface.error_handlers import register_error_handlers
from repo_viewer.interface.rendering import templates
from repo_viewer.interface.routes import router


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage startup / shutdown of shared resources."""
    await startup()
    yield
    await shutdown()


def create_app() -> FastAPI:
    """Build and wire the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.site_title,
        version="1.0.0",
        description=(
            "Lists repositories from the repositories API and shows "
            "per-repository detail pages."
        ),
        lifespan=_lifespan,
    )

    register_error_handlers(app)
    templates.env.globals["site_title"] = settings.site_title

    # ── Health check (simple liveness probe) ────────────────────────────
    # Registered before the page router, whose catch-all matches every path.

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(router)

    return app
