"""Common utilities for URL shortener."""

from .validators import (
    is_valid_url,
    validate_url,
    is_valid_shortcode,
    validate_shortcode,
    parse_validity,
    is_valid_validity,
    compute_expiry,
)
from .url_builder import build_base_url, build_short_url
from .logging_config import setup_logging, get_event_logger
from .timeutils import utcnow, to_iso_z, parse_iso

__all__ = [
    "is_valid_url",
    "validate_url",
    "is_valid_shortcode",
    "validate_shortcode",
    "parse_validity",
    "is_valid_validity",
    "compute_expiry",
    "build_base_url",
    "build_short_url",
    "setup_logging",
    "get_event_logger",
    "utcnow",
    "to_iso_z",
    "parse_iso",
]
