"""Validation utilities for URL shortener."""

import re
from datetime import datetime, timedelta
from typing import Any, Optional, Tuple
from urllib.parse import urlsplit

from .timeutils import utcnow


MAX_URL_LENGTH = 2048
DEFAULT_VALIDITY_MINUTES = 30
# 100 years; anything larger leaves the datetime range
MAX_VALIDITY_MINUTES = 100 * 365 * 24 * 60

SHORTCODE_PATTERN = re.compile(r"^[a-zA-Z0-9]{1,20}$")
SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
# int() refuses strings of more than 4300 digits
LEADING_INT_PATTERN = re.compile(r"^\s*([+-]?[0-9]{1,4000})")

# Schemes that must carry a host (e.g. "http:foo" is not absolute enough)
HOST_REQUIRED_SCHEMES = {"http", "https", "ws", "wss", "ftp"}


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate that a string is a well-formed absolute URL.

    Args:
        url: The URL to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "URL is required"

    if len(url) > MAX_URL_LENGTH:
        return False, f"URL is too long (max {MAX_URL_LENGTH} characters)"

    if any(c.isspace() or ord(c) < 0x20 or ord(c) == 0x7F for c in url):
        return False, "URL must not contain whitespace or control characters"

    scheme, sep, rest = url.partition(":")
    if not sep or not SCHEME_PATTERN.match(scheme):
        return False, "URL must be absolute (include a scheme such as https://)"

    if not rest:
        return False, "URL has nothing after the scheme"

    try:
        result = urlsplit(url)

        if scheme.lower() in HOST_REQUIRED_SCHEMES:
            if not result.hostname:
                return False, "URL must have a valid host"
            # Accessing .port raises ValueError for non-numeric or out of range ports
            result.port

        return True, ""

    except ValueError as e:
        return False, f"Invalid URL format: {str(e)}"


def validate_url(url: str) -> bool:
    """Return True when ``url`` is a syntactically valid absolute URL."""
    return is_valid_url(url)[0]


def is_valid_shortcode(shortcode: str) -> Tuple[bool, str]:
    """Validate a shortcode against ``^[a-zA-Z0-9]{1,20}$``.

    Args:
        shortcode: The shortcode to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not shortcode or not isinstance(shortcode, str):
        return False, "Shortcode is required"

    if len(shortcode) > 20:
        return False, "Shortcode must be at most 20 characters"

    if not SHORTCODE_PATTERN.fullmatch(shortcode):
        return False, "Shortcode can only contain letters and numbers"

    return True, ""


def validate_shortcode(shortcode: str) -> bool:
    """Return True when ``shortcode`` is acceptable."""
    return is_valid_shortcode(shortcode)[0]


def parse_validity(value: Any, default: int = DEFAULT_VALIDITY_MINUTES) -> int:
    """Parse a validity (in minutes) the way a form field is read.

    The leading integer of the value is used, so "15", " 15 " and "15min"
    all give 15. Missing, unparseable and zero values give ``default``.
    Negative values are kept, so the entry is created already expired.

    Args:
        value: Raw validity (str, int or None)
        default: Fallback validity in minutes

    Returns:
        Validity in minutes
    """
    if value is None or isinstance(value, bool):
        return default

    if isinstance(value, int):
        minutes = value
    else:
        match = LEADING_INT_PATTERN.match(str(value))
        if not match:
            return default
        minutes = int(match.group(1))

    return minutes or default


def is_valid_validity(minutes: int) -> Tuple[bool, str]:
    """Validate that a parsed validity gives a representable expiry.

    Args:
        minutes: Validity in minutes, as returned by ``parse_validity``

    Returns:
        Tuple of (is_valid, error_message)
    """
    if abs(minutes) > MAX_VALIDITY_MINUTES:
        return False, f"Validity must be at most {MAX_VALIDITY_MINUTES} minutes"

    return True, ""


def compute_expiry(validity_minutes: int, now: Optional[datetime] = None) -> datetime:
    """Compute the absolute expiry for an entry created at ``now``."""
    if now is None:
        now = utcnow()
    return now + timedelta(minutes=validity_minutes)
