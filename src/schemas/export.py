"""Export manifest schema."""

from pydantic import BaseModel


class ExportManifest(BaseModel):
    """Describes the artifacts written by one export run.

    Attributes:
        category_names_path: Path of the newline-joined category name list
        articles_path: Path of the concatenated article document
        category_count: Number of category names written
        article_count: Number of articles written
        excluded_article_count: Number of articles dropped by the exclusion filter
        excluded_categories: Category names that were filtered out
    """

    category_names_path: str
    articles_path: str
    category_count: int
    article_count: int
    excluded_article_count: int = 0
    excluded_categories: list[str] = []
