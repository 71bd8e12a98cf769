"""FastAPI application factory and lifecycle management."""

from __future__ import annotations

import logging
import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bookbridge import __version__
from bookbridge.api.deps import set_facade
from bookbridge.api.v1.router import router as v1_router
from bookbridge.config.settings import CONFIG_FILE_ENV, Settings
from bookbridge.core.facade import BookSearchFacade
from bookbridge.observability.logging import setup_logging

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = Path("bookbridge-config.yaml")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings. If None, loads the YAML file named by
            ``BOOKBRIDGE_CONFIG_FILE``, else ``bookbridge-config.yaml`` when
            present, else the environment alone.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        config_file = os.environ.get(CONFIG_FILE_ENV)
        config_path = Path(config_file) if config_file else _DEFAULT_CONFIG
        if config_file or config_path.exists():
            logger.info("Loading configuration from %s", config_path)
            settings = Settings.from_yaml(config_path)
        else:
            settings = Settings()

    setup_logging(settings.observability)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Manage application lifecycle (startup/shutdown)."""
        logger.info("Starting BookBridge v%s", __version__)

        facade = BookSearchFacade.from_settings(settings)
        await facade.initialize()
        set_facade(facade)

        app.state.facade = facade

        logger.info("BookBridge is ready to serve requests on port %d", settings.server.port)
        yield

        logger.info("Shutting down BookBridge...")
        await facade.shutdown()
        set_facade(None)
        logger.info("BookBridge shutdown complete")

    app = FastAPI(
        title="BookBridge",
        description=(
            "One book-search API over Aladin, Kakao, and Naver — each request is "
            "routed to exactly one provider and answered with that provider's native JSON."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(v1_router, prefix="/v1")

    return app
