from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from leave_tracker.api.health import router as health_router
from leave_tracker.api.router import api_router
from leave_tracker.config import get_settings
from leave_tracker.exceptions import setup_exception_handlers
from leave_tracker.middleware import setup_middleware

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from leave_tracker.config import Settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager for startup and shutdown."""
    settings = get_settings()
    logger.info(
        "Starting %s v%s [%s] with %s record store",
        settings.app_name,
        settings.app_version,
        settings.environment,
        settings.record_store,
    )
    yield
    logger.info("Shutting down %s", settings.app_name)


def create_app() -> FastAPI:
    """Application factory."""
    settings = get_settings()
    configure_logging(settings)

    application = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
        docs_url="/docs" if settings.environment != "production" else None,
        redoc_url="/redoc" if settings.environment != "production" else None,
    )

    setup_middleware(application, settings)
    setup_exception_handlers(application)

    application.include_router(health_router)
    application.include_router(api_router)

    return application


app = create_app()
