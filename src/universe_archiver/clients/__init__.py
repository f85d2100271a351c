"""Network clients for the remote catalog."""

from .client import Client
from .exceptions import (
    APIError,
    ClientError,
    ConnectionError,
    NotFoundError,
    RateLimitError,
)
from .universe_client import UniverseClient

__all__ = [
    "Client",
    "UniverseClient",
    "ClientError",
    "ConnectionError",
    "APIError",
    "RateLimitError",
    "NotFoundError",
]
