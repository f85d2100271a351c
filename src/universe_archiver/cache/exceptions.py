"""Exceptions raised by the document cache."""

from pathlib import Path


class CacheError(Exception):
    """Base exception for cache failures.

    Attributes:
        message: Human-readable description
        path: The cache file involved
    """

    def __init__(self, message: str, path: Path | None = None):
        self.message = message
        self.path = path
        super().__init__(message)


class CacheReadError(CacheError):
    """Raised when a cached document cannot be read."""

    pass


class CacheMissError(CacheReadError):
    """Raised when the requested document has never been cached."""

    pass


class CacheWriteError(CacheError):
    """Raised when a document cannot be written to the cache."""

    pass
