"""FastAPI application factory and lifecycle management."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from historify import __version__
from historify.api.v1.router import router as v1_router
from historify.config.settings import Settings
from historify.exceptions import DocumentLoadError
from historify.library import DocumentLibrary
from historify.observability.logging import setup_logging

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = Path("historify-config.yaml")


def create_app(settings: Settings | None = None, library: DocumentLibrary | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings. If None, loads ``historify-config.yaml``
            from the working directory when present, else the environment.
        library: Document library to serve. If None, a new empty library is
            created and seeded from ``settings.documents.path`` at startup.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        if _DEFAULT_CONFIG.exists():
            logger.info("Loading configuration from %s", _DEFAULT_CONFIG)
            settings = Settings.from_yaml(_DEFAULT_CONFIG)
        else:
            settings = Settings()

    if library is None:
        library = DocumentLibrary(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Manage application lifecycle (startup/shutdown)."""
        setup_logging(settings.observability)
        logger.info("Starting Historify v%s", __version__)

        seed_path = settings.documents.path
        if seed_path is not None:
            try:
                count = library.load(seed_path)
                logger.info("Seeded %d documents from %s", count, seed_path)
            except DocumentLoadError:
                logger.error("Could not seed documents from %s", seed_path, exc_info=True)
                raise

        logger.info("Historify is ready to serve requests on port %d", settings.server.port)
        yield
        logger.info("Historify shutdown complete")

    app = FastAPI(
        title=settings.app_name,
        debug=settings.debug,
        description=(
            "Search over digitized historical documents: keyword, exact-phrase and fuzzy "
            "search with TF-IDF ranking, filters, suggestions, highlighting and analytics."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.library = library

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(v1_router, prefix="/v1")

    return app
