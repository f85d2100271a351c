"""Decoding of raw catalog documents into schema models.

Structural validation is done by pydantic. On top of it, every localized
field consumed downstream must carry the primary language; a missing key is
reported as a decode failure rather than surfacing later as a KeyError.
"""

from collections.abc import Iterable

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from schemas.article import ArticleDocument
from schemas.category import CategoryDocument, CategoryNode, NodeKind
from schemas.common import PRIMARY_LANGUAGE, Language


class DecodeError(Exception):
    """Raised when a document is malformed or does not match the schema.

    Attributes:
        message: Human-readable description
        errors: Individual validation errors
        source: What was being decoded (e.g. "article 1234")
    """

    def __init__(
        self, message: str, errors: list | None = None, source: str | None = None
    ):
        self.message = message
        self.errors = errors or []
        self.source = source
        super().__init__(message)


def _validate(model: type[BaseModel], raw: bytes | str, source: str):
    try:
        return model.model_validate_json(raw)
    except PydanticValidationError as e:
        raise DecodeError(
            f"{source} failed validation",
            errors=[str(err) for err in e.errors()],
            source=source,
        ) from e


def _require_language(
    mapping: dict, language: Language, field: str, source: str
) -> None:
    if language not in mapping:
        raise DecodeError(
            f"{source} is missing {language.value!r} in {field}",
            errors=[f"{field}: missing key {language.value!r}"],
            source=source,
        )


def _check_nodes(nodes: Iterable[CategoryNode], language: Language) -> None:
    for node in nodes:
        if node.kind is NodeKind.CATEGORY:
            _require_language(
                node.titles, language, "titles", f"category node {node.id}"
            )
        _check_nodes(node.children, language)


def decode_category_document(
    raw: bytes | str, language: Language = PRIMARY_LANGUAGE
) -> CategoryDocument:
    """Decode the catalog root document.

    Args:
        raw: Raw JSON body
        language: Language every CATEGORY node title must provide

    Returns:
        The validated CategoryDocument

    Raises:
        DecodeError: If the body is not valid JSON, does not match the
            schema, or a CATEGORY node lacks a title in ``language``
    """
    document = _validate(CategoryDocument, raw, "category document")
    _check_nodes(document.data, language)
    return document


def decode_article_document(
    raw: bytes | str,
    language: Language = PRIMARY_LANGUAGE,
    article_id: int | None = None,
) -> ArticleDocument:
    """Decode one article document.

    Args:
        raw: Raw JSON body
        language: Language the title, category title and body must provide
        article_id: Expected story id, used only in error messages

    Returns:
        The validated ArticleDocument

    Raises:
        DecodeError: If the body is malformed or a consumed field lacks
            ``language``
    """
    source = f"article {article_id}" if article_id is not None else "article document"
    document = _validate(ArticleDocument, raw, source)

    article = document.data
    source = f"article {article.id}"
    _require_language(article.titles, language, "titles", source)
    _require_language(article.category_titles, language, "category_titles", source)
    _require_language(article.contents, language, "contents", source)
    return document
