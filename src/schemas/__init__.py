"""Schema definitions for Universe Archiver."""

from .article import (
    ArticleDocument,
    ArticleRecord,
    Attachment,
    LanguageAttachments,
    TypeAttachments,
)
from .category import CategoryDocument, CategoryNode, NodeKind
from .common import PRIMARY_LANGUAGE, Language, LocalizedText
from .export import ExportManifest

__all__ = [
    "ArticleDocument",
    "ArticleRecord",
    "Attachment",
    "CategoryDocument",
    "CategoryNode",
    "ExportManifest",
    "Language",
    "LanguageAttachments",
    "LocalizedText",
    "NodeKind",
    "PRIMARY_LANGUAGE",
    "TypeAttachments",
]
