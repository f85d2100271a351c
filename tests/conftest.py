"""Pytest fixtures for Universe Archiver tests."""

import json

import pytest

from universe_archiver.cache import CacheStore
from universe_archiver.documents import DocumentKind


def _node(node_id, kind, title, parent_id=None, position=0, children=None):
    return {
        "id": node_id,
        "parent_id": parent_id,
        "position": position,
        "type": kind,
        "status": "PUBLISHED",
        "titles": {"KR": title, "EN": f"{title} (en)"},
        "children": children or [],
        "modified": False,
    }


@pytest.fixture
def sample_category_document():
    """Catalog root document with nested categories and articles.

    Pre-order traversal yields the categories
    세계관, 지역, 숨은 분류, 명예의 전당 and the articles 101, 102, 103, 104.
    Article 103 carries a child category.
    """
    return {
        "code": "SUCCESS",
        "message": "OK",
        "data": [
            _node(1, "CATEGORY", "세계관", children=[
                _node(2, "CATEGORY", "지역", parent_id=1, children=[
                    _node(101, "ARTICLE", "첫 번째 이야기", parent_id=2, position=0),
                    _node(102, "ARTICLE", "두 번째 이야기", parent_id=2, position=1),
                ]),
                _node(103, "ARTICLE", "세 번째 이야기", parent_id=1, position=1, children=[
                    _node(3, "CATEGORY", "숨은 분류", parent_id=103),
                ]),
            ]),
            _node(4, "CATEGORY", "명예의 전당", position=1, children=[
                _node(104, "ARTICLE", "네 번째 이야기", parent_id=4),
            ]),
        ],
    }


@pytest.fixture
def make_article_document():
    """Factory for article documents as returned by the story endpoint."""

    def make(
        article_id,
        category_id=2,
        category_title="지역",
        title=None,
        content=None,
        attachments=None,
    ):
        title = title or f"이야기 {article_id}"
        return {
            "code": "SUCCESS",
            "message": "OK",
            "data": {
                "id": article_id,
                "category_id": category_id,
                "category_titles": {"KR": category_title, "EN": "Category"},
                "status": "PUBLISHED",
                "titles": {"KR": title, "EN": f"Story {article_id}"},
                "subtitles": {"KR": "부제", "EN": "Subtitle"},
                "image_url": f"https://cdn.example.com/{article_id}.png",
                "attachments": attachments if attachments is not None else {},
                "contents": {
                    "KR": content or f"본문 {article_id}",
                    "EN": f"Body {article_id}",
                },
            },
        }

    return make


@pytest.fixture
def catalog_articles(make_article_document):
    """Article documents for every ARTICLE node of sample_category_document."""
    return {
        101: make_article_document(101, 2, "지역"),
        102: make_article_document(102, 2, "지역"),
        103: make_article_document(103, 1, "세계관"),
        104: make_article_document(104, 4, "명예의 전당"),
    }


@pytest.fixture
def populated_cache(tmp_path, sample_category_document, catalog_articles):
    """CacheStore holding the sample catalog and all of its articles."""
    store = CacheStore(tmp_path / "crawled_data")
    store.write(
        DocumentKind.CATEGORY, None, json.dumps(sample_category_document).encode()
    )
    for article_id, document in catalog_articles.items():
        store.write(DocumentKind.ARTICLE, article_id, json.dumps(document).encode())
    return store
