"""Url map storage for URL shortener."""

from .base import UrlMapStoreBase, UrlMap
from .json_file import JSONFileStore
from .memory import MemoryStore

__all__ = ["UrlMapStoreBase", "UrlMap", "JSONFileStore", "MemoryStore"]
