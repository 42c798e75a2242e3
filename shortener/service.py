"""Business logic service for URL shortener."""

import logging
from datetime import datetime
from typing import Any, Callable, Dict, Iterable, List, Optional

from .shortcode import ShortCodeGenerator
from .models import ShortcodeEntry, ShortenEntry, ShortenResult
from .store.base import UrlMapStoreBase
from .exceptions import (
    BatchSizeError,
    DuplicateShortcodeError,
    InvalidShortcodeError,
    InvalidURLError,
    InvalidValidityError,
    ShortcodeNotFoundError,
)
from .common.validators import (
    DEFAULT_VALIDITY_MINUTES,
    compute_expiry,
    is_valid_shortcode,
    is_valid_url,
    is_valid_validity,
    parse_validity,
)
from .common.logging_config import get_event_logger
from .common.timeutils import utcnow


class URLShortenerService:
    """Service layer for URL shortening business logic."""

    def __init__(
        self,
        store: UrlMapStoreBase,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        logger: Optional[logging.Logger] = None,
        default_validity_minutes: int = DEFAULT_VALIDITY_MINUTES,
        max_batch_size: int = 5,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize URL shortener service.

        Args:
            store: Url map store
            short_code_generator: Optional short code generator
            logger: Optional logger
            default_validity_minutes: Validity for entries that give none
            max_batch_size: Maximum entries per submission
            clock: Returns the current UTC time (for tests)
        """
        self.store = store
        self.generator = short_code_generator or ShortCodeGenerator()
        self.logger = logger or logging.getLogger(__name__)
        self.log_event = get_event_logger()
        self.default_validity_minutes = default_validity_minutes
        self.max_batch_size = max_batch_size
        self.now = clock or utcnow

    def shorten_batch(self, entries: Iterable[ShortenEntry]) -> List[ShortenResult]:
        """Validate and commit a batch of URLs.

        Entries are checked in order against a snapshot of the url map that
        also holds the entries accepted so far. The first failure aborts the
        batch and nothing is written.

        Args:
            entries: Rows to shorten

        Returns:
            One result per entry, in submission order

        Raises:
            BatchSizeError: If the batch is empty or too large
            InvalidURLError: If a URL is not a valid absolute URL
            InvalidShortcodeError: If a shortcode is not 1-20 alphanumerics
            DuplicateShortcodeError: If a shortcode is already taken
            InvalidValidityError: If a validity is too large to give an expiry
        """
        entries = list(entries)
        if not entries:
            raise BatchSizeError("At least one URL is required")
        if len(entries) > self.max_batch_size:
            raise BatchSizeError(
                f"At most {self.max_batch_size} URLs can be shortened at once"
            )

        url_map = self.store.load()
        created = self.now()
        results: List[ShortenResult] = []

        for entry in entries:
            is_valid, error = is_valid_url(entry.url)
            if not is_valid:
                self.log_event(f"Invalid URL submitted: {entry.url}")
                self.logger.warning(f"Rejected batch: invalid URL {entry.url!r} ({error})")
                raise InvalidURLError(entry.url, error)

            shortcode = (entry.shortcode or "").strip() or self.generator.generate()

            is_valid, error = is_valid_shortcode(shortcode)
            if not is_valid:
                self.log_event(f"Invalid shortcode input: {shortcode}")
                self.logger.warning(f"Rejected batch: invalid shortcode {shortcode!r} ({error})")
                raise InvalidShortcodeError(shortcode, error)

            if shortcode in url_map:
                self.log_event(f"Duplicate shortcode attempted: {shortcode}")
                self.logger.warning(f"Rejected batch: duplicate shortcode {shortcode!r}")
                raise DuplicateShortcodeError(shortcode)

            validity = parse_validity(entry.validity, default=self.default_validity_minutes)
            is_valid, error = is_valid_validity(validity)
            if not is_valid:
                self.log_event(f"Invalid validity input: {entry.validity}")
                self.logger.warning(f"Rejected batch: invalid validity {entry.validity!r} ({error})")
                raise InvalidValidityError(entry.validity, error)

            expiry = compute_expiry(validity, now=created)

            url_map[shortcode] = ShortcodeEntry(
                shortcode=shortcode,
                original_url=entry.url,
                expiry=expiry,
            )
            results.append(
                ShortenResult(shortcode=shortcode, original_url=entry.url, expiry=expiry)
            )

        self.store.save(url_map)

        for result in results:
            self.log_event(f"Shortened URL created: {result.shortcode} -> {result.original_url}")
        self.logger.info(f"Committed batch of {len(results)} short URL(s)")

        return results

    def shorten(
        self,
        url: str,
        validity: Any = None,
        shortcode: Optional[str] = None,
    ) -> ShortenResult:
        """Shorten a single URL (a batch of one)."""
        return self.shorten_batch(
            [ShortenEntry(url=url, validity=validity, shortcode=shortcode)]
        )[0]

    def resolve(self, shortcode: str) -> str:
        """Get the original URL for a live shortcode.

        Args:
            shortcode: The shortcode to lookup

        Returns:
            Original URL

        Raises:
            ShortcodeNotFoundError: If the shortcode is unknown or expired
        """
        entry = self.store.load().get(shortcode)

        if entry is None or entry.is_expired(self.now()):
            self.log_event(f"Invalid/expired shortcode: {shortcode}")
            raise ShortcodeNotFoundError(shortcode)

        self.log_event(f"Redirecting to: {entry.original_url}")
        return entry.original_url

    def get_entry(self, shortcode: str) -> Optional[ShortcodeEntry]:
        """Get the stored entry for a shortcode, expired or not."""
        return self.store.load().get(shortcode)

    def is_expired(self, entry: ShortcodeEntry) -> bool:
        return entry.is_expired(self.now())

    def list_entries(self) -> List[ShortcodeEntry]:
        """List stored entries, latest expiry first."""
        return sorted(
            self.store.load().values(),
            key=lambda entry: entry.expiry,
            reverse=True,
        )

    def get_statistics(self) -> Dict[str, int]:
        """Get service statistics.

        Returns:
            Dictionary with total, active and expired entry counts
        """
        now = self.now()
        entries = list(self.store.load().values())
        expired = sum(1 for entry in entries if entry.is_expired(now))

        return {
            "total_urls": len(entries),
            "active_urls": len(entries) - expired,
            "expired_urls": expired,
        }

    def health_check(self) -> Dict[str, bool]:
        """Perform health check.

        Returns:
            Dictionary with health status
        """
        store_healthy = self.store.health_check()
        return {
            "store": store_healthy,
            "overall": store_healthy,
        }
