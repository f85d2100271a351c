"""Tests for the error kinds surfaced by a harvest."""

from pathlib import Path

import pytest

from universe_archiver.cache import CacheError, CacheMissError, CacheReadError, CacheWriteError
from universe_archiver.clients import (
    APIError,
    ClientError,
    ConnectionError,
    NotFoundError,
    RateLimitError,
)
from universe_archiver.decoding import DecodeError


class TestClientErrors:
    """Tests for transport exceptions."""

    def test_client_error_stores_message_and_url(self):
        """ClientError stores the message and the URL."""
        error = ClientError("boom", url="https://example.com/x")

        assert error.message == "boom"
        assert error.url == "https://example.com/x"
        assert str(error) == "boom"

    def test_connection_error_is_client_error(self):
        """ConnectionError inherits from ClientError."""
        assert isinstance(ConnectionError("down"), ClientError)

    def test_rate_limit_defaults(self):
        """RateLimitError has a default message and status 429."""
        error = RateLimitError()

        assert error.message == "Rate limit exceeded"
        assert error.status_code == 429
        assert isinstance(error, APIError)

    def test_not_found_defaults(self):
        """NotFoundError has a default message and status 404."""
        error = NotFoundError()

        assert error.message == "Resource not found"
        assert error.status_code == 404

    @pytest.mark.parametrize(
        "status_code, transient",
        [(400, False), (404, False), (429, True), (500, True), (503, True)],
    )
    def test_is_transient(self, status_code, transient):
        """Only 429 and 5xx statuses are transient."""
        assert APIError("x", status_code=status_code).is_transient is transient


class TestCacheErrors:
    """Tests for cache exceptions."""

    def test_cache_error_stores_path(self):
        """CacheError stores the message and the path."""
        error = CacheReadError("unreadable", path=Path("/tmp/x.json"))

        assert error.message == "unreadable"
        assert error.path == Path("/tmp/x.json")

    def test_hierarchy(self):
        """A miss is a read failure; read and write failures are separate."""
        assert isinstance(CacheMissError("x"), CacheReadError)
        assert isinstance(CacheWriteError("x"), CacheError)
        assert not isinstance(CacheWriteError("x"), CacheReadError)


class TestDecodeError:
    """Tests for DecodeError."""

    def test_stores_errors_and_source(self):
        """DecodeError stores the individual errors and the source."""
        error = DecodeError("bad", errors=["titles: missing"], source="article 1")

        assert error.message == "bad"
        assert error.errors == ["titles: missing"]
        assert error.source == "article 1"

    def test_default_errors(self):
        """DecodeError defaults to an empty error list."""
        assert DecodeError("bad").errors == []

    def test_distinct_from_other_kinds(self):
        """Decode failures are not transport or cache failures."""
        error = DecodeError("bad")

        assert not isinstance(error, ClientError)
        assert not isinstance(error, CacheError)
