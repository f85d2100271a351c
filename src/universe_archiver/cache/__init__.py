"""Local storage for fetched catalog documents."""

from .exceptions import CacheError, CacheMissError, CacheReadError, CacheWriteError
from .store import CacheStore

__all__ = [
    "CacheStore",
    "CacheError",
    "CacheReadError",
    "CacheMissError",
    "CacheWriteError",
]
