"""FastAPI application factory."""

import logging
from typing import Optional

from fastapi import FastAPI

from shortener.config import Config
from shortener.service import URLShortenerService
from shortener.store.base import UrlMapStoreBase
from .api import api_router
from .web import web_router
from .middleware.logging import LoggingMiddleware


def create_app(
    store_instance: UrlMapStoreBase,
    service_instance: URLShortenerService,
    config: Config,
    logger: Optional[logging.Logger] = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        store_instance: Url map store
        service_instance: Service instance built on ``store_instance``
        config: Configuration instance
        logger: Optional logger for request logging

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="URL Shortener",
        description="Single-user URL shortener with expiring shortcodes",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    # Store instances in app state for access in routes
    app.state.store = store_instance
    app.state.service = service_instance
    app.state.config = config

    app.add_middleware(
        LoggingMiddleware,
        logger=logger.getChild("web") if logger else None,
        access_log_file=config.access_log_file,
    )

    # API first so /api/* never falls through to the /{shortcode} resolver
    app.include_router(api_router, prefix="/api", tags=["API"])
    app.include_router(web_router, tags=["Web"])

    return app
