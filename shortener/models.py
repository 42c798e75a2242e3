"""Data models for URL shortener."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from .common.timeutils import parse_iso, to_iso_z, utcnow


@dataclass
class ShortcodeEntry:
    """Represents one shortcode -> URL mapping in the url map."""

    shortcode: str
    original_url: str
    expiry: datetime

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """An entry is live only while its expiry is strictly in the future."""
        now = now or utcnow()
        return not self.expiry > now

    def to_dict(self) -> Dict[str, str]:
        """Convert to the persisted form (keyed by shortcode in the url map)."""
        return {
            "originalUrl": self.original_url,
            "expiry": to_iso_z(self.expiry),
        }

    @classmethod
    def from_dict(cls, shortcode: str, data: Dict[str, Any]) -> "ShortcodeEntry":
        """Create from the persisted form."""
        expiry = data["expiry"]
        return cls(
            shortcode=shortcode,
            original_url=data["originalUrl"],
            expiry=expiry if isinstance(expiry, datetime) else parse_iso(expiry),
        )


@dataclass
class ShortenEntry:
    """One row of a submitted batch."""

    url: str
    validity: Any = None
    shortcode: Optional[str] = None


@dataclass
class ShortenResult:
    """A committed entry, as reported back to the submitter."""

    shortcode: str
    original_url: str
    expiry: datetime

    def to_dict(self) -> Dict[str, str]:
        return {
            "shortcode": self.shortcode,
            "original_url": self.original_url,
            "expiry": to_iso_z(self.expiry),
        }
