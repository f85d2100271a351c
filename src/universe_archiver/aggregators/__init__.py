"""Aggregators for walking the catalog and gathering its documents."""

from .catalog_traverser import (
    CatalogCycleError,
    CatalogDepthError,
    CatalogTraverser,
    TraversalError,
    TraversalResult,
)
from .harvester import ArticleDiscovery, CatalogHarvester, HarvestMode
from .rate_limiter import MinIntervalRateLimiter, NullRateLimiter, RateLimiter
from .sources import DocumentSource, LiveSource, ReplaySource

__all__ = [
    "ArticleDiscovery",
    "CatalogCycleError",
    "CatalogDepthError",
    "CatalogHarvester",
    "CatalogTraverser",
    "DocumentSource",
    "HarvestMode",
    "LiveSource",
    "MinIntervalRateLimiter",
    "NullRateLimiter",
    "RateLimiter",
    "ReplaySource",
    "TraversalError",
    "TraversalResult",
]
