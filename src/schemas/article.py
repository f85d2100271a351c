"""Catalog article (story) schemas.

Two attachment layouts occur across payload versions: attachments grouped by
language (``{"KR": [...]}``) and attachments grouped by attachment type
(``{"IMAGE": [...]}``). Both are accepted and resolved at validation time into
a ``LanguageAttachments`` or ``TypeAttachments`` value.
"""

from typing import Annotated, ClassVar

from pydantic import BaseModel, Field, RootModel

from .common import Language, LocalizedText


class Attachment(BaseModel):
    """A media attachment on an article."""

    id: int
    type: str
    position: int
    source_url: str
    thumbnail_url: str | None = None
    modified: bool = False
    status: str

    model_config = {"extra": "allow"}


class LanguageAttachments(RootModel[dict[Language, list[Attachment]]]):
    """Attachments grouped by language."""

    keyed_by: ClassVar[str] = "language"

    def all(self) -> list[Attachment]:
        return [item for items in self.root.values() for item in items]


class TypeAttachments(RootModel[dict[str, list[Attachment]]]):
    """Attachments grouped by attachment type."""

    keyed_by: ClassVar[str] = "type"

    def all(self) -> list[Attachment]:
        return [item for items in self.root.values() for item in items]


# Language keys are tried first; any non-language key selects the type layout.
Attachments = Annotated[
    LanguageAttachments | TypeAttachments, Field(union_mode="left_to_right")
]


class ArticleRecord(BaseModel):
    """A single article as returned by the story endpoint.

    Attributes:
        id: Story identifier
        category_id: Identifier of the owning category
        category_titles: Owning category's title per language
        status: Lifecycle tag from the source
        titles: Article title per language
        subtitles: Article subtitle per language
        image_url: Cover image URL, if any
        attachments: Attachments, grouped by language or by type
        contents: Full body text per language
    """

    id: int
    category_id: int
    category_titles: LocalizedText
    status: str
    titles: LocalizedText
    subtitles: LocalizedText = {}
    image_url: str | None = None
    attachments: Attachments = Field(default_factory=lambda: LanguageAttachments({}))
    contents: LocalizedText

    def title(self, language: Language) -> str:
        return self.titles[language]

    def category_title(self, language: Language) -> str:
        return self.category_titles[language]

    def content(self, language: Language) -> str:
        return self.contents[language]


class ArticleDocument(BaseModel):
    """Envelope returned by the story endpoint."""

    code: str | int
    message: str
    data: ArticleRecord
