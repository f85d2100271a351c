"""Catalog category tree schemas.

The catalog root document is a flat list of top-level nodes, each carrying
its own ordered ``children``. A node is either a CATEGORY (a container that
contributes a display name) or an ARTICLE (a leaf whose content is fetched
from the story endpoint).
"""

from enum import Enum

from pydantic import BaseModel, Field

from .common import Language, LocalizedText


class NodeKind(str, Enum):
    """Kind of a catalog node, taken from the payload's ``type`` field."""

    CATEGORY = "CATEGORY"
    ARTICLE = "ARTICLE"


class CategoryNode(BaseModel):
    """A node in the catalog tree.

    Attributes:
        id: Node identifier. For ARTICLE nodes this is the story id.
        parent_id: Identifier of the parent node, None for top-level nodes
        position: Display position among siblings
        kind: CATEGORY or ARTICLE
        status: Lifecycle tag from the source, kept as-is
        titles: Display title per language
        children: Ordered child nodes
        modified: Opaque flag from the source, passed through unchanged
    """

    id: int
    parent_id: int | None = None
    position: int
    kind: NodeKind = Field(alias="type")
    status: str
    titles: LocalizedText
    children: list["CategoryNode"] = []
    modified: bool

    model_config = {"populate_by_name": True}

    @property
    def is_article(self) -> bool:
        return self.kind is NodeKind.ARTICLE

    def title(self, language: Language) -> str:
        return self.titles[language]


class CategoryDocument(BaseModel):
    """Envelope returned by the catalog root endpoint."""

    code: str | int
    message: str
    data: list[CategoryNode] = []
