"""Wiring and serving for the URL shortener web app."""

import logging

import uvicorn
from fastapi import FastAPI

from shortener.bootstrap import build_service, build_store
from shortener.config import Config
from .app_factory import create_app


def build_app(config: Config, logger: logging.Logger) -> FastAPI:
    """Build store, service and FastAPI app from configuration."""
    store = build_store(config, logger)
    service = build_service(config, store, logger)
    return create_app(
        store_instance=store,
        service_instance=service,
        config=config,
        logger=logger,
    )


def serve(config: Config, logger: logging.Logger) -> None:
    """Run the web app with uvicorn until interrupted.

    A single process serves every request; the url map store has no locking.
    """
    app = build_app(config, logger)

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=True,
    )
    server = uvicorn.Server(uvicorn_config)

    logger.info(f"Starting server on {config.host}:{config.port}")
    server.run()
    logger.info("Server stopped")
