"""
Main entrypoint for the Rental Registry API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn rental_registry_api.app.main:app --reload

The registry (database plus record stores) is opened on startup from
``settings.database_url`` unless one is passed to ``create_app``.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .core.state import RentalRegistry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Open the configured registry unless one was injected.
    if app.state.registry is None:
        app.state.registry = RentalRegistry.from_settings(settings)
    logger.info("Serving registry at %s", app.state.registry.database.path)
    yield


def create_app(registry: Optional[RentalRegistry] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    registry : Optional[RentalRegistry]
        Registry to serve.  When omitted, one is opened from the
        configured database when the application starts.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that startup can log.
    setup_logging(settings.log_level, settings.log_file, debug=settings.debug)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.registry = registry

    app.include_router(v1_router, prefix="/api/v1")

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()
