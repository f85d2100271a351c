"""Base class for export compilers."""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

from schemas.article import ArticleRecord
from schemas.export import ExportManifest


class Compiler(ABC):
    """Abstract base class for export compilers.

    Compilers turn the output of a harvest into files on disk.
    """

    @abstractmethod
    def compile(
        self,
        articles: Sequence[ArticleRecord],
        category_names: Sequence[str],
        excluded: Iterable[str] = (),
    ) -> ExportManifest:
        """Write the export artifacts.

        Args:
            articles: Harvested articles, in traversal order
            category_names: Harvested category names, in traversal order
            excluded: Category names to leave out

        Returns:
            ExportManifest describing the written files
        """
        pass
