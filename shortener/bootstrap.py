"""Build the store and service described by a configuration."""

import logging

from .config import Config
from .service import URLShortenerService
from .shortcode import ShortCodeGenerator
from .store import JSONFileStore, MemoryStore, UrlMapStoreBase


def build_store(config: Config, logger: logging.Logger) -> UrlMapStoreBase:
    """Create the url map store described by ``config``."""
    if config.storage_path:
        logger.info(f"Using url map at {config.storage_path} (key '{config.storage_key}')")
        return JSONFileStore(
            path=config.storage_path,
            storage_key=config.storage_key,
            logger=logger,
        )

    logger.warning("No storage path configured; short URLs are kept in memory only")
    return MemoryStore(storage_key=config.storage_key)


def build_service(
    config: Config,
    store: UrlMapStoreBase,
    logger: logging.Logger,
) -> URLShortenerService:
    return URLShortenerService(
        store=store,
        short_code_generator=ShortCodeGenerator(default_length=config.short_code_length),
        logger=logger,
        default_validity_minutes=config.default_validity_minutes,
        max_batch_size=config.max_batch_size,
    )
