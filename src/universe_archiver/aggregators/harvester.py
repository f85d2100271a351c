"""Harvester selecting between live and replay catalog sources."""

import logging
from enum import Enum

from schemas.article import ArticleRecord
from schemas.common import PRIMARY_LANGUAGE, Language
from universe_archiver.cache import CacheStore
from universe_archiver.clients import UniverseClient
from universe_archiver.decoding import decode_article_document, decode_category_document
from universe_archiver.documents import DocumentKind

from .catalog_traverser import CatalogTraverser, TraversalResult
from .rate_limiter import MinIntervalRateLimiter, RateLimiter
from .sources import DocumentSource, LiveSource, ReplaySource

logger = logging.getLogger(__name__)


class HarvestMode(str, Enum):
    LIVE = "live"
    REPLAY = "replay"


class ArticleDiscovery(str, Enum):
    """How replay mode finds the articles to load.

    ENUMERATE loads every cached article file, whether or not the cached
    catalog references it. TREE walks the cached catalog exactly like live
    mode does and reads each referenced article from the cache.
    """

    ENUMERATE = "enumerate"
    TREE = "tree"


class CatalogHarvester:
    """Collects category names and articles from the catalog.

    In live mode the category root and every article are fetched over the
    network through one shared rate limiter and written through to the cache.
    In replay mode everything is read back from the cache with no network
    access and no pacing.

    Example:
        store = CacheStore(Path("./crawled_data"))
        with UniverseClient({"base_url": DEFAULT_BASE_URL}) as client:
            harvester = CatalogHarvester(store, client)
            result = harvester.harvest(HarvestMode.LIVE)
    """

    def __init__(
        self,
        store: CacheStore,
        client: UniverseClient | None = None,
        rate_limiter: RateLimiter | None = None,
        language: Language = PRIMARY_LANGUAGE,
        discovery: ArticleDiscovery = ArticleDiscovery.ENUMERATE,
    ):
        """Initialize the harvester.

        Args:
            store: Cache for raw documents
            client: Catalog client, required for live mode
            rate_limiter: Pacing for network calls (default: one call per second)
            language: Language of exported titles and bodies
            discovery: How replay mode finds articles
        """
        self.store = store
        self.client = client
        self.rate_limiter = rate_limiter or MinIntervalRateLimiter()
        self.language = language
        self.discovery = discovery

    def harvest(self, mode: HarvestMode) -> TraversalResult:
        if mode is HarvestMode.LIVE:
            return self.harvest_live()
        return self.harvest_replay()

    def harvest_live(self) -> TraversalResult:
        """Fetch the catalog and every article over the network.

        Raises:
            ValueError: If the harvester has no client
        """
        if self.client is None:
            raise ValueError("live harvesting requires a client")

        source = LiveSource(self.client, self.store, self.rate_limiter)
        logger.info(f"Fetching catalog from {self.client.categories_url}")
        result = self._walk(source, collect_articles=True)
        self._log_summary("live", result)
        return result

    def harvest_replay(self) -> TraversalResult:
        """Rebuild the harvest from cached documents only."""
        source = ReplaySource(self.store)
        logger.info(f"Replaying catalog from {self.store.root}")

        if self.discovery is ArticleDiscovery.TREE:
            result = self._walk(source, collect_articles=True)
        else:
            result = self._walk(source, collect_articles=False)
            result.articles.extend(self._load_cached_articles())

        self._log_summary("replay", result)
        return result

    def _walk(self, source: DocumentSource, collect_articles: bool) -> TraversalResult:
        body = source.acquire(DocumentKind.CATEGORY)
        document = decode_category_document(body, language=self.language)
        traverser = CatalogTraverser(source, language=self.language)
        return traverser.traverse(document.data, collect_articles=collect_articles)

    def _load_cached_articles(self) -> list[ArticleRecord]:
        articles = []
        for article_id in self.store.identifiers(DocumentKind.ARTICLE):
            body = self.store.read(DocumentKind.ARTICLE, article_id)
            article = decode_article_document(
                body, language=self.language, article_id=article_id
            ).data
            logger.debug(f"Loaded cached article {article_id}")
            articles.append(article)
        return articles

    def _log_summary(self, mode: str, result: TraversalResult) -> None:
        logger.info(
            f"Harvest ({mode}) complete: {len(result.category_names)} categories, "
            f"{len(result.articles)} articles"
        )
