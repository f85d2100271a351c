"""Depth-first traversal of the catalog tree."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from schemas.article import ArticleRecord
from schemas.category import CategoryNode, NodeKind
from schemas.common import PRIMARY_LANGUAGE, Language
from universe_archiver.decoding import decode_article_document
from universe_archiver.documents import DocumentKind

from .sources import DocumentSource

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 64


class TraversalError(Exception):
    """Raised when the catalog tree cannot be walked."""

    def __init__(self, message: str, node_id: int | None = None):
        self.message = message
        self.node_id = node_id
        super().__init__(message)


class CatalogCycleError(TraversalError):
    """Raised when a node appears among its own ancestors.

    Nodes are identified by kind and id, since category ids and story ids
    are separate id spaces.
    """

    pass


class CatalogDepthError(TraversalError):
    """Raised when the tree is nested deeper than allowed."""

    pass


@dataclass
class TraversalResult:
    """Accumulated output of a traversal, in pre-order.

    Attributes:
        category_names: Primary-language titles of CATEGORY nodes
        articles: Decoded records of ARTICLE nodes
    """

    category_names: list[str] = field(default_factory=list)
    articles: list[ArticleRecord] = field(default_factory=list)


class CatalogTraverser:
    """Walks a catalog tree and collects category names and articles.

    Nodes are visited depth-first in sibling order. CATEGORY nodes contribute
    their title; ARTICLE nodes are acquired from the configured source and
    decoded. Children are always descended into, whatever the node's kind,
    since the payload may nest entries under an ARTICLE node.

    Any acquisition or decode error aborts the walk and propagates unchanged.

    Example:
        traverser = CatalogTraverser(ReplaySource(CacheStore(root)))
        result = traverser.traverse(document.data)
    """

    def __init__(
        self,
        source: DocumentSource,
        language: Language = PRIMARY_LANGUAGE,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ):
        self.source = source
        self.language = language
        self.max_depth = max_depth

    def traverse(
        self,
        nodes: Sequence[CategoryNode],
        sink: TraversalResult | None = None,
        collect_articles: bool = True,
    ) -> TraversalResult:
        """Traverse ``nodes`` and their descendants.

        Args:
            nodes: Top-level nodes, in display order
            sink: Result to append to; a new one is created if omitted
            collect_articles: If False, ARTICLE nodes are passed over without
                being acquired (only category names are collected)

        Returns:
            The sink, with category names and articles appended in pre-order
        """
        if sink is None:
            sink = TraversalResult()
        self._visit(nodes, sink, collect_articles, ancestors=())
        return sink

    def _visit(
        self,
        nodes: Sequence[CategoryNode],
        sink: TraversalResult,
        collect_articles: bool,
        ancestors: tuple[tuple[NodeKind, int], ...],
    ) -> None:
        if len(ancestors) >= self.max_depth:
            raise CatalogDepthError(
                f"Catalog nested deeper than {self.max_depth} levels",
                node_id=ancestors[-1][1] if ancestors else None,
            )

        for node in nodes:
            key = (node.kind, node.id)
            if key in ancestors:
                raise CatalogCycleError(
                    f"Node {node.id} appears among its own ancestors",
                    node_id=node.id,
                )

            if node.kind is NodeKind.ARTICLE:
                if collect_articles:
                    sink.articles.append(self._acquire_article(node.id))
            elif node.kind is NodeKind.CATEGORY:
                sink.category_names.append(node.title(self.language))

            if node.children:
                self._visit(
                    node.children, sink, collect_articles, ancestors + (key,)
                )

    def _acquire_article(self, article_id: int) -> ArticleRecord:
        body = self.source.acquire(DocumentKind.ARTICLE, article_id)
        article = decode_article_document(
            body, language=self.language, article_id=article_id
        ).data
        logger.info(
            f"{article.category_title(self.language)} - {article.title(self.language)}"
        )
        return article
