#!/usr/bin/env python3
"""
Main entry point for URL shortener service.

The service is single-user: one process, one url map stored as a JSON
document on local disk.

Usage:
    python app.py

Environment variables:
    STORAGE_PATH - JSON document holding the url map
    STORAGE_KEY - Key the url map is stored under (default urlMap)
    BASE_URL - Base URL for short links
    PORT - Port to listen on
    DEFAULT_VALIDITY_MINUTES - Validity when none is given (default 30)
    MAX_BATCH_SIZE - URLs per submission (default 5)
    LOG_LEVEL - Logging level
    ACCESS_LOG_FILE - Append one line per request to this file
"""

import sys

from shortener.config import load_config
from shortener.common.logging_config import setup_logging
from shortener_web.server import serve


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("URL Shortener Service")
    logger.info(f"Configuration: {config.model_dump()}")

    try:
        serve(config, logger)
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
