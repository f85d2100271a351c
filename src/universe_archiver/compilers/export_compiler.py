"""Flattened text export of harvested categories and articles."""

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from schemas.article import ArticleRecord
from schemas.common import PRIMARY_LANGUAGE, Language
from schemas.export import ExportManifest

from .compiler import Compiler

logger = logging.getLogger(__name__)

DEFAULT_EXCLUDED_CATEGORIES = frozenset({"명예의 전당", "스페셜", "아트던展"})

CATEGORY_NAMES_FILENAME = "category_names.txt"
ARTICLES_FILENAME = "all_articles.{ext}"
MANIFEST_FILENAME = "export-manifest.json"

ARTICLE_HEADERS = {
    "md": "```[{title}]```\\",
    "txt": "[{title}]",
}


class ExportCompiler(Compiler):
    """Writes the category name list and the concatenated article document.

    Output layout:
        {output_dir}/
        ├── category_names.txt
        ├── all_articles.md       # or all_articles.txt
        └── export-manifest.json

    Articles whose owning category is excluded are dropped, as are excluded
    category names. Everything else keeps its input order.
    """

    def __init__(
        self,
        output_dir: Path,
        language: Language = PRIMARY_LANGUAGE,
        article_format: str = "md",
    ):
        if article_format not in ARTICLE_HEADERS:
            raise ValueError(
                f"article_format must be one of {sorted(ARTICLE_HEADERS)}, "
                f"got {article_format!r}"
            )
        self.output_dir = Path(output_dir)
        self.language = language
        self.article_format = article_format

    @property
    def category_names_path(self) -> Path:
        return self.output_dir / CATEGORY_NAMES_FILENAME

    @property
    def articles_path(self) -> Path:
        return self.output_dir / ARTICLES_FILENAME.format(ext=self.article_format)

    def format(
        self,
        articles: Sequence[ArticleRecord],
        category_names: Sequence[str],
        excluded: Iterable[str] = (),
    ) -> tuple[str, str]:
        """Render the two export texts.

        Args:
            articles: Articles in traversal order
            category_names: Category names in traversal order
            excluded: Category names to leave out

        Returns:
            Tuple of (category_text, article_text)
        """
        excluded = set(excluded)

        names = [name for name in category_names if name not in excluded]
        blocks = [
            self._render_article(article)
            for article in self._kept_articles(articles, excluded)
        ]

        return "\n".join(names), "\n".join(blocks)

    def compile(
        self,
        articles: Sequence[ArticleRecord],
        category_names: Sequence[str],
        excluded: Iterable[str] = (),
    ) -> ExportManifest:
        """Write the export artifacts to ``output_dir``."""
        excluded = set(excluded)
        category_text, article_text = self.format(articles, category_names, excluded)

        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.category_names_path.write_text(category_text, encoding="utf-8")
        self.articles_path.write_text(article_text, encoding="utf-8")

        kept = len(self._kept_articles(articles, excluded))
        manifest = ExportManifest(
            category_names_path=str(self.category_names_path),
            articles_path=str(self.articles_path),
            category_count=sum(1 for name in category_names if name not in excluded),
            article_count=kept,
            excluded_article_count=len(articles) - kept,
            excluded_categories=sorted(excluded),
        )
        manifest_path = self.output_dir / MANIFEST_FILENAME
        manifest_path.write_text(manifest.model_dump_json(indent=2), encoding="utf-8")

        logger.info(
            f"Exported {manifest.category_count} categories and "
            f"{manifest.article_count} articles to {self.output_dir}"
        )
        if manifest.excluded_article_count:
            logger.debug(f"Excluded {manifest.excluded_article_count} articles")

        return manifest

    def _kept_articles(
        self, articles: Sequence[ArticleRecord], excluded: set[str]
    ) -> list[ArticleRecord]:
        return [
            article
            for article in articles
            if article.category_title(self.language) not in excluded
        ]

    def _render_article(self, article: ArticleRecord) -> str:
        header = ARTICLE_HEADERS[self.article_format].format(
            title=article.title(self.language)
        )
        return f"{header}\n{article.content(self.language)}\n\n\n\n"
