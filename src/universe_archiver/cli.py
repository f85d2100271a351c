"""Command-line interface for universe-archiver."""

import argparse
import logging
import sys
from pathlib import Path

from universe_archiver.aggregators import (
    ArticleDiscovery,
    CatalogHarvester,
    HarvestMode,
    MinIntervalRateLimiter,
    NullRateLimiter,
)
from universe_archiver.aggregators.rate_limiter import DEFAULT_MIN_INTERVAL
from universe_archiver.cache import CacheStore
from universe_archiver.clients import UniverseClient
from universe_archiver.clients.universe_client import DEFAULT_BASE_URL, DEFAULT_CATEGORIES_URL
from universe_archiver.compilers import DEFAULT_EXCLUDED_CATEGORIES, ExportCompiler

DEFAULT_CACHE_DIR = Path("./crawled_data")
USER_AGENT = "universe-archiver/0.1"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def run(args: argparse.Namespace) -> int:
    """Harvest the catalog and write the export.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    if args.min_interval < 0:
        logger.error("--min-interval must not be negative")
        return 1

    cache_dir = args.cache_dir
    output_dir = args.output or cache_dir / "final"
    mode = HarvestMode.LIVE if args.live else HarvestMode.REPLAY

    excluded = set(args.exclude or [])
    if not args.no_default_excludes:
        excluded |= DEFAULT_EXCLUDED_CATEGORIES

    config = {
        "base_url": args.base_url,
        "categories_url": args.categories_url,
        "headers": {"User-Agent": USER_AGENT},
    }
    rate_limiter = (
        MinIntervalRateLimiter(args.min_interval) if args.min_interval > 0 else NullRateLimiter()
    )
    store = CacheStore(cache_dir)

    try:
        with UniverseClient(config) as client:
            harvester = CatalogHarvester(
                store,
                client=client,
                rate_limiter=rate_limiter,
                discovery=ArticleDiscovery(args.discovery),
            )
            result = harvester.harvest(mode)
    except Exception as e:
        logger.error(f"Harvest failed: {e}")
        return 1

    try:
        compiler = ExportCompiler(output_dir, article_format=args.format)
        manifest = compiler.compile(result.articles, result.category_names, excluded)
    except Exception as e:
        logger.error(f"Export failed: {e}")
        return 1

    logger.info(f"Mode: {mode.value}")
    logger.info(f"  Categories: {manifest.category_count}")
    logger.info(f"  Articles: {manifest.article_count}")
    logger.info(f"  Output: {output_dir}")

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="universe-archiver",
        description="Crawl the story catalog, cache every document and export the text",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--live",
        action="store_true",
        help="Fetch from the network instead of replaying the local cache",
    )
    parser.add_argument(
        "--cache-dir",
        type=Path,
        default=DEFAULT_CACHE_DIR,
        help=f"Cache root for fetched documents (default: {DEFAULT_CACHE_DIR})",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Export directory (default: <cache-dir>/final)",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        metavar="CATEGORY",
        help="Category name to leave out of the export (repeatable)",
    )
    parser.add_argument(
        "--no-default-excludes",
        action="store_true",
        help="Do not exclude the built-in category list",
    )
    parser.add_argument(
        "--format",
        choices=["md", "txt"],
        default="md",
        help="Article export format (default: md)",
    )
    parser.add_argument(
        "--discovery",
        choices=[d.value for d in ArticleDiscovery],
        default=ArticleDiscovery.ENUMERATE.value,
        help="How replay mode finds articles: every cached file, or the cached tree (default: enumerate)",
    )
    parser.add_argument(
        "--min-interval",
        type=float,
        default=DEFAULT_MIN_INTERVAL,
        help=f"Minimum seconds between network requests (default: {DEFAULT_MIN_INTERVAL})",
    )
    parser.add_argument(
        "--base-url",
        type=str,
        default=DEFAULT_BASE_URL,
        help=f"Story API base URL (default: {DEFAULT_BASE_URL})",
    )
    parser.add_argument(
        "--categories-url",
        type=str,
        default=DEFAULT_CATEGORIES_URL,
        help=f"Catalog root URL (default: {DEFAULT_CATEGORIES_URL})",
    )

    args = parser.parse_args(argv)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
