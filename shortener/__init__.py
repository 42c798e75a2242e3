"""Core business logic for URL shortener."""

from .shortcode import ShortCodeGenerator, generate_shortcode
from .service import URLShortenerService
from .models import ShortcodeEntry, ShortenEntry, ShortenResult

__all__ = [
    "ShortCodeGenerator",
    "generate_shortcode",
    "URLShortenerService",
    "ShortcodeEntry",
    "ShortenEntry",
    "ShortenResult",
]
