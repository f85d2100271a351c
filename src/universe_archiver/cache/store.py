"""On-disk cache of raw catalog documents."""

import logging
import os
from pathlib import Path

from universe_archiver.documents import DocumentKind

from .exceptions import CacheMissError, CacheReadError, CacheWriteError

logger = logging.getLogger(__name__)


class CacheStore:
    """Stores raw document bodies under paths derived from their identifier.

    Layout:
        {root}/
        ├── category/
        │   └── categories.json
        └── articles/
            ├── {id}.json
            └── ...

    Each identifier maps to exactly one file; writing it again replaces the
    previous content. The store never keeps documents in memory.
    """

    def __init__(self, root: Path):
        self.root = Path(root)

    def path_for(self, kind: DocumentKind, identifier: int | None = None) -> Path:
        return self.root / kind.directory / kind.filename(identifier)

    def exists(self, kind: DocumentKind, identifier: int | None = None) -> bool:
        return self.path_for(kind, identifier).is_file()

    def write(
        self, kind: DocumentKind, identifier: int | None, body: bytes
    ) -> Path:
        """Write a document, replacing any cached copy.

        The body is written to a temporary sibling and renamed into place.

        Args:
            kind: Document kind
            identifier: Story id for ARTICLE documents, None for CATEGORY
            body: Raw document bytes

        Returns:
            Path of the cached file

        Raises:
            CacheWriteError: If the directory or file cannot be written
        """
        path = self.path_for(kind, identifier)
        tmp_path = path.with_name(f".{path.name}.tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_bytes(body)
            os.replace(tmp_path, path)
        except OSError as e:
            raise CacheWriteError(f"Cannot write {path}: {e}", path=path) from e

        logger.debug(f"Cached {kind.value} document at {path}")
        return path

    def read(self, kind: DocumentKind, identifier: int | None = None) -> bytes:
        """Read a cached document.

        Raises:
            CacheMissError: If the document is not cached
            CacheReadError: If the cached file cannot be read
        """
        path = self.path_for(kind, identifier)
        try:
            return path.read_bytes()
        except FileNotFoundError as e:
            raise CacheMissError(f"Not cached: {path}", path=path) from e
        except OSError as e:
            raise CacheReadError(f"Cannot read {path}: {e}", path=path) from e

    def identifiers(self, kind: DocumentKind = DocumentKind.ARTICLE) -> list[int]:
        """List cached article ids in numeric order.

        Files whose stem is not a canonical integer (``notes.json``,
        ``007.json``) are ignored.

        Raises:
            CacheMissError: If the kind's directory does not exist
        """
        directory = self.root / kind.directory
        if not directory.is_dir():
            raise CacheMissError(f"No cached {kind.value} directory: {directory}", path=directory)

        ids = []
        for path in directory.glob("*.json"):
            try:
                article_id = int(path.stem)
            except ValueError:
                article_id = None
            if article_id is None or str(article_id) != path.stem:
                logger.debug(f"Ignoring unexpected cache file {path}")
                continue
            ids.append(article_id)
        return sorted(ids)
