"""Transport exceptions raised by catalog clients."""


class ClientError(Exception):
    """Base exception for all transport failures.

    Attributes:
        message: Human-readable description
        url: The URL being requested, when known
    """

    def __init__(self, message: str, url: str | None = None):
        self.message = message
        self.url = url
        super().__init__(message)


class ConnectionError(ClientError):
    """Raised when the remote service cannot be reached after all retries."""

    pass


class APIError(ClientError):
    """Raised when the remote service answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int, url: str | None = None):
        self.status_code = status_code
        super().__init__(message, url=url)

    @property
    def is_transient(self) -> bool:
        """Whether retrying the request may succeed."""
        return self.status_code == 429 or self.status_code >= 500


class RateLimitError(APIError):
    """Raised when the remote service answers 429."""

    def __init__(self, message: str = "Rate limit exceeded", url: str | None = None):
        super().__init__(message, status_code=429, url=url)


class NotFoundError(APIError):
    """Raised when the remote service answers 404."""

    def __init__(self, message: str = "Resource not found", url: str | None = None):
        super().__init__(message, status_code=404, url=url)
