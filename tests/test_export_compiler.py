"""Tests for the ExportCompiler class."""

import json

import pytest

from schemas import ExportManifest, Language
from schemas.article import ArticleRecord
from universe_archiver.compilers import DEFAULT_EXCLUDED_CATEGORIES, ExportCompiler


@pytest.fixture
def articles(catalog_articles):
    """ArticleRecords for the sample catalog, in traversal order."""
    return [
        ArticleRecord.model_validate(catalog_articles[article_id]["data"])
        for article_id in (101, 102, 103, 104)
    ]


@pytest.fixture
def category_names():
    return ["세계관", "지역", "숨은 분류", "명예의 전당"]


class TestExportCompilerInit:
    """Tests for ExportCompiler initialization."""

    def test_articles_path_follows_format(self, tmp_path):
        """The article file extension follows the format."""
        assert ExportCompiler(tmp_path).articles_path.name == "all_articles.md"
        assert ExportCompiler(tmp_path, article_format="txt").articles_path.name == "all_articles.txt"

    def test_rejects_unknown_format(self, tmp_path):
        """Unknown formats are rejected."""
        with pytest.raises(ValueError, match="article_format"):
            ExportCompiler(tmp_path, article_format="html")


class TestExportCompilerFormat:
    """Tests for ExportCompiler.format()."""

    def test_excluded_category_name_dropped(self, tmp_path):
        """An excluded category name is filtered out."""
        category_text, _ = ExportCompiler(tmp_path).format([], ["A", "B"], {"A"})

        assert category_text == "B"

    def test_category_names_joined_in_order(self, tmp_path, category_names):
        """Category names are newline-joined in input order."""
        category_text, _ = ExportCompiler(tmp_path).format([], category_names)

        assert category_text == "세계관\n지역\n숨은 분류\n명예의 전당"

    def test_articles_in_excluded_category_dropped(self, tmp_path, articles):
        """Articles owned by an excluded category are filtered out."""
        _, article_text = ExportCompiler(tmp_path).format(
            articles, [], DEFAULT_EXCLUDED_CATEGORIES
        )

        assert "이야기 104" not in article_text
        assert "본문 104" not in article_text
        assert "이야기 103" in article_text

    def test_markdown_blocks(self, tmp_path, articles):
        """Markdown blocks carry a fenced bracketed header and the body."""
        _, article_text = ExportCompiler(tmp_path).format(articles[:2], [])

        assert article_text == (
            "```[이야기 101]```\\\n본문 101\n\n\n\n"
            "\n"
            "```[이야기 102]```\\\n본문 102\n\n\n\n"
        )

    def test_text_blocks(self, tmp_path, articles):
        """Plain text blocks carry a bracketed header and the body."""
        _, article_text = ExportCompiler(tmp_path, article_format="txt").format(
            articles[:1], []
        )

        assert article_text == "[이야기 101]\n본문 101\n\n\n\n"

    def test_articles_keep_input_order(self, tmp_path, articles):
        """Article blocks follow input order."""
        _, article_text = ExportCompiler(tmp_path).format(list(reversed(articles)), [])

        positions = [article_text.index(f"이야기 {i}") for i in (104, 103, 102, 101)]
        assert positions == sorted(positions)

    def test_uses_configured_language(self, tmp_path, articles):
        """Titles and bodies are taken in the configured language."""
        _, article_text = ExportCompiler(
            tmp_path, language=Language.EN, article_format="txt"
        ).format(articles[:1], [])

        assert article_text == "[Story 101]\nBody 101\n\n\n\n"

    def test_empty_input(self, tmp_path):
        """No input yields two empty texts."""
        assert ExportCompiler(tmp_path).format([], []) == ("", "")


class TestExportCompilerCompile:
    """Tests for ExportCompiler.compile()."""

    def test_writes_artifacts(self, tmp_path, articles, category_names):
        """compile() writes both artifacts and a manifest."""
        output_dir = tmp_path / "final"
        compiler = ExportCompiler(output_dir)

        manifest = compiler.compile(articles, category_names, {"명예의 전당"})

        assert (output_dir / "category_names.txt").read_text(encoding="utf-8") == (
            "세계관\n지역\n숨은 분류"
        )
        assert (output_dir / "all_articles.md").read_text(encoding="utf-8").count("```[") == 3
        assert isinstance(manifest, ExportManifest)
        assert manifest.category_count == 3
        assert manifest.article_count == 3
        assert manifest.excluded_article_count == 1
        assert manifest.excluded_categories == ["명예의 전당"]

        on_disk = json.loads((output_dir / "export-manifest.json").read_text(encoding="utf-8"))
        assert on_disk["article_count"] == 3

    def test_compile_is_idempotent(self, tmp_path, articles, category_names):
        """Compiling twice produces byte-identical files."""
        output_dir = tmp_path / "final"
        compiler = ExportCompiler(output_dir)

        compiler.compile(articles, category_names, DEFAULT_EXCLUDED_CATEGORIES)
        first = {path.name: path.read_bytes() for path in output_dir.iterdir()}
        compiler.compile(articles, category_names, DEFAULT_EXCLUDED_CATEGORIES)
        second = {path.name: path.read_bytes() for path in output_dir.iterdir()}

        assert "export-manifest.json" in first
        assert first == second

    def test_existing_output_dir(self, tmp_path, articles, category_names):
        """An existing output directory is reused."""
        output_dir = tmp_path / "final"
        output_dir.mkdir()

        ExportCompiler(output_dir).compile(articles, category_names)

        assert (output_dir / "category_names.txt").exists()
