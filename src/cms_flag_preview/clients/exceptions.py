"""Custom exceptions for the CMS clients and the preview flow."""


class ClientError(Exception):
    """Base exception for all client errors."""

    kind = "error"

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ValidationError(ClientError):
    """Raised when a content reference or response fails schema validation."""

    kind = "validation"

    def __init__(self, message: str, errors: list | None = None, *args, **kwargs):
        self.errors = errors or []
        super().__init__(message, *args, **kwargs)


class ConfigurationError(ValidationError):
    """Raised when CMS credentials are missing or incomplete.

    ``status_code`` is the status the request handler answers with: 400
    when the caller supplied a broken config, 500 when no usable config
    source exists at all.
    """

    def __init__(self, message: str, status_code: int = 400):
        self.status_code = status_code
        super().__init__(message)


class TransportError(ClientError):
    """Raised when a network connection fails or times out."""

    kind = "transport"


class DecodeError(TransportError):
    """Raised when a response body is not valid JSON."""

    def __init__(self, message: str, raw_body: str = ""):
        self.raw_body = raw_body
        super().__init__(message)


class APIError(ClientError):
    """Raised when the API returns a non-2xx response."""

    kind = "api"

    def __init__(
        self, message: str, status_code: int, raw_body: str = "", *args, **kwargs
    ):
        self.status_code = status_code
        self.raw_body = raw_body
        super().__init__(message, *args, **kwargs)


FetchFailed = APIError


class AuthError(APIError):
    """Raised when the API rejects the credentials (401 or 403)."""

    kind = "auth"

    def __init__(
        self,
        message: str = "Authentication failed",
        status_code: int = 401,
        raw_body: str = "",
    ):
        super().__init__(message, status_code=status_code, raw_body=raw_body)


class NotFoundError(APIError):
    """Raised when the API returns a 404 not found response."""

    kind = "not_found"

    def __init__(self, message: str = "Resource not found", raw_body: str = ""):
        super().__init__(message, status_code=404, raw_body=raw_body)


class ContentTypeError(APIError):
    """Raised when the API returns a 422 for an unknown or invalid content type."""

    kind = "content_type"

    def __init__(self, message: str = "Invalid content type", raw_body: str = ""):
        super().__init__(message, status_code=422, raw_body=raw_body)


class DiscoveryUnavailable(APIError):
    """Raised when the content type listing cannot be retrieved."""

    kind = "discovery_unavailable"


class ContentMissing(ClientError):
    """Raised when a successful response carries no entry or asset."""

    kind = "content_missing"
