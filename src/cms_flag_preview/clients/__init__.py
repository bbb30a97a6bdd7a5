"""Network clients for the Contentstack Delivery API."""

from .client import Client
from .contentstack_client import DEFAULT_BASE_URL, ContentstackClient
from .exceptions import (
    APIError,
    AuthError,
    ClientError,
    ConfigurationError,
    ContentMissing,
    ContentTypeError,
    DecodeError,
    DiscoveryUnavailable,
    FetchFailed,
    NotFoundError,
    TransportError,
    ValidationError,
)

__all__ = [
    "Client",
    "ContentstackClient",
    "DEFAULT_BASE_URL",
    "ClientError",
    "ValidationError",
    "ConfigurationError",
    "TransportError",
    "DecodeError",
    "APIError",
    "FetchFailed",
    "AuthError",
    "NotFoundError",
    "ContentTypeError",
    "DiscoveryUnavailable",
    "ContentMissing",
]
