"""In-memory implementation of the url map store."""

import json
from typing import Optional

from .base import UrlMapStoreBase, UrlMap
from ..exceptions import StoreError


class MemoryStore(UrlMapStoreBase):
    """Url map held as a serialized string in process memory.

    Used when no storage path is configured and in tests. Keeping the map
    serialized means loaded maps never share objects with the store.
    """

    def __init__(self, storage_key: str = "urlMap", initial: Optional[str] = None):
        super().__init__(storage_key=storage_key)
        self._blob: Optional[str] = initial

    def load(self) -> UrlMap:
        if self._blob is None:
            return {}
        try:
            data = json.loads(self._blob)
        except json.JSONDecodeError as e:
            raise StoreError(f"Stored url map is not valid JSON: {e}") from e
        return self.deserialize(data)

    def save(self, url_map: UrlMap) -> None:
        self._blob = self.dumps(url_map)

    @property
    def raw(self) -> Optional[str]:
        """The serialized url map, as it would sit under ``storage_key``."""
        return self._blob
