"""Document acquisition strategies.

A source turns ``(kind, identifier)`` into raw document bytes. The live
source goes to the network and writes every body through to the cache; the
replay source only reads the cache.
"""

import logging
from abc import ABC, abstractmethod

from universe_archiver.cache import CacheStore
from universe_archiver.clients import UniverseClient
from universe_archiver.documents import DocumentKind

from .rate_limiter import RateLimiter

logger = logging.getLogger(__name__)


class DocumentSource(ABC):
    """Provides raw catalog documents."""

    is_remote: bool = False

    @abstractmethod
    def acquire(self, kind: DocumentKind, identifier: int | None = None) -> bytes:
        """Return the raw body of a document.

        Args:
            kind: Document kind
            identifier: Story id for ARTICLE documents, None for CATEGORY
        """
        pass


class LiveSource(DocumentSource):
    """Fetches documents over the network, paced by a shared rate limiter."""

    is_remote = True

    def __init__(
        self,
        client: UniverseClient,
        store: CacheStore,
        rate_limiter: RateLimiter,
    ):
        self.client = client
        self.store = store
        self.rate_limiter = rate_limiter

    def acquire(self, kind: DocumentKind, identifier: int | None = None) -> bytes:
        self.rate_limiter.acquire()
        body = self.client.fetch(kind, identifier)
        self.store.write(kind, identifier, body)
        return body


class ReplaySource(DocumentSource):
    """Reads previously cached documents. Never touches the network."""

    def __init__(self, store: CacheStore):
        self.store = store

    def acquire(self, kind: DocumentKind, identifier: int | None = None) -> bytes:
        return self.store.read(kind, identifier)
