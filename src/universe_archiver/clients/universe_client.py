"""Client for the catalog category and story endpoints."""

import logging

from universe_archiver.documents import DocumentKind

from .client import Client

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.dnf-universe.com"
DEFAULT_CATEGORIES_URL = "https://static.dnf-universe.com/categories.json"
DEFAULT_STORY_PATH = "/api/v1/story/{id}"


class UniverseClient(Client):
    """Fetches raw catalog documents.

    The category root is served from a static host, stories from the API
    host. ``fetch`` returns the response body untouched; decoding and caching
    are left to the caller.

    Example:
        config = {"base_url": "https://www.dnf-universe.com"}
        with UniverseClient(config) as client:
            body = client.fetch(DocumentKind.ARTICLE, 1234)
    """

    @property
    def categories_url(self) -> str:
        return str(self._config.get("categories_url", DEFAULT_CATEGORIES_URL))

    @property
    def story_path(self) -> str:
        return str(self._config.get("story_path", DEFAULT_STORY_PATH))

    def url_for(self, kind: DocumentKind, identifier: int | None = None) -> str:
        """Build the request URL (absolute, or relative to base_url)."""
        if kind is DocumentKind.CATEGORY:
            return self.categories_url
        if identifier is None:
            raise ValueError("article documents require an identifier")
        return self.story_path.format(id=int(identifier))

    def fetch(self, kind: DocumentKind, identifier: int | None = None) -> bytes:
        """Fetch the raw body of one catalog document.

        Args:
            kind: Document kind to fetch
            identifier: Story id for ARTICLE documents, ignored for CATEGORY

        Returns:
            The response body bytes

        Raises:
            ClientError: If the request fails after retries
        """
        url = self.url_for(kind, identifier)
        logger.debug(f"GET {url}")
        response = self.get(url)
        return response.content

    def fetch_categories(self) -> bytes:
        return self.fetch(DocumentKind.CATEGORY)

    def fetch_article(self, article_id: int) -> bytes:
        return self.fetch(DocumentKind.ARTICLE, article_id)
