"""JSON file implementation of the url map store."""

import json
import logging
import os
import tempfile
from typing import Any, Dict, Optional

from .base import UrlMapStoreBase, UrlMap
from ..exceptions import StoreError


class JSONFileStore(UrlMapStoreBase):
    """Url map kept in a JSON document on local disk.

    The document is an object of storage keys; the url map lives under
    ``storage_key`` and any other keys are carried over untouched on save.
    """

    def __init__(
        self,
        path: str,
        storage_key: str = "urlMap",
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize JSON file store.

        Args:
            path: Path of the JSON document
            storage_key: Key the url map is stored under
            logger: Optional logger instance
        """
        super().__init__(storage_key=storage_key)
        self.path = os.path.abspath(path)
        self.logger = logger or logging.getLogger(__name__)

    def load(self) -> UrlMap:
        document = self._read_document()
        return self.deserialize(document.get(self.storage_key))

    def save(self, url_map: UrlMap) -> None:
        document = self._read_document()
        document[self.storage_key] = self.serialize(url_map)
        self._write_document(document)
        self.logger.debug(f"Saved {len(url_map)} entries to {self.path}")

    def _read_document(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                content = f.read()
        except OSError as e:
            raise StoreError(f"Cannot read {self.path}: {e}") from e

        if not content.strip():
            return {}

        try:
            document = json.loads(content)
        except json.JSONDecodeError as e:
            raise StoreError(f"{self.path} is not valid JSON: {e}") from e

        if not isinstance(document, dict):
            raise StoreError(f"{self.path} does not hold a JSON object")

        return document

    def _write_document(self, document: Dict[str, Any]) -> None:
        directory = os.path.dirname(self.path)
        os.makedirs(directory, exist_ok=True)

        # Readers only ever see a complete document
        fd, tmp_path = tempfile.mkstemp(prefix=".urlmap-", suffix=".tmp", dir=directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2, sort_keys=True)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
