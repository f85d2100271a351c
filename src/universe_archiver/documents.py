"""Kinds of catalog documents that are fetched and cached."""

from enum import Enum


class DocumentKind(str, Enum):
    """A catalog document kind.

    CATEGORY is the single catalog root document. ARTICLE documents are keyed
    by story id.
    """

    CATEGORY = "category"
    ARTICLE = "articles"

    @property
    def directory(self) -> str:
        """Cache subdirectory for this kind."""
        return self.value

    def filename(self, identifier: int | None = None) -> str:
        if self is DocumentKind.CATEGORY:
            return "categories.json"
        if identifier is None:
            raise ValueError("article documents require an identifier")
        return f"{int(identifier)}.json"
