"""Abstract base class for url map stores."""

import json
from abc import ABC, abstractmethod
from typing import Any, Dict

from ..exceptions import StoreError
from ..models import ShortcodeEntry


UrlMap = Dict[str, ShortcodeEntry]


class UrlMapStoreBase(ABC):
    """A url map persisted as one serialized blob.

    The map is always read and written whole; there are no partial updates.
    """

    def __init__(self, storage_key: str = "urlMap"):
        """Initialize store.

        Args:
            storage_key: Key the serialized url map is kept under
        """
        self.storage_key = storage_key

    @abstractmethod
    def load(self) -> UrlMap:
        """Load the url map.

        Returns:
            Mapping of shortcode to entry (empty when nothing is stored yet)

        Raises:
            StoreError: If the stored data cannot be parsed
        """
        pass

    @abstractmethod
    def save(self, url_map: UrlMap) -> None:
        """Replace the stored url map with ``url_map``.

        Args:
            url_map: Complete mapping of shortcode to entry
        """
        pass

    def health_check(self) -> bool:
        """Check that the stored url map can be read.

        Returns:
            True if healthy, False otherwise
        """
        try:
            self.load()
            return True
        except StoreError:
            return False

    @staticmethod
    def serialize(url_map: UrlMap) -> Dict[str, Dict[str, str]]:
        """Convert a url map to its JSON-ready form."""
        return {code: entry.to_dict() for code, entry in url_map.items()}

    @staticmethod
    def deserialize(data: Any) -> UrlMap:
        """Build a url map from its JSON form.

        Raises:
            StoreError: If the data does not have the url map shape
        """
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise StoreError("Stored url map is not a JSON object")

        try:
            return {
                code: ShortcodeEntry.from_dict(code, entry)
                for code, entry in data.items()
            }
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise StoreError(f"Stored url map is malformed: {e}") from e

    @staticmethod
    def dumps(url_map: UrlMap) -> str:
        return json.dumps(UrlMapStoreBase.serialize(url_map))
