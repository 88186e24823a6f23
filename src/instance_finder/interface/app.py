"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from instance_finder.interface.dependencies import shutdown, startup
from instance_finder.interface.error_handlers import register_error_handlers
from instance_finder.interface.routes import router


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage startup / shutdown of shared resources."""
    startup()
    yield
    shutdown()


def create_app() -> FastAPI:
    """Build and wire the FastAPI application."""
    app = FastAPI(
        title="Instance Finder",
        version="0.1.0",
        description=(
            "Local sidecar for the Instance Finder desktop app: manages the "
            "instances.social token, fetches and caches directory results, "
            "and filters them by language, region, size and signup policy."
        ),
        lifespan=_lifespan,
    )

    register_error_handlers(app)
    app.include_router(router)

    @app.get("/health", include_in_schema=False)
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
