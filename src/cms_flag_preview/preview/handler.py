"""Flag preview request handling.

Turns a flag management preview request body into a ``(status, body)``
pair. The transport that carries requests and responses is left to the
caller.

Request body:
    {
        "variation": {"value": <ContentReference>},
        "config": {"contentstack": <ContentstackCredentials>}   # optional
    }

Response body:
    200 {"preview": <PreviewRecord>}
    4xx/5xx {"error": <label>, "kind": <kind>, "detail": <message>}
"""

import logging
from collections.abc import Callable
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from cms_flag_preview.clients import (
    AuthError,
    ClientError,
    ConfigurationError,
    ContentMissing,
    ContentstackClient,
    ContentTypeError,
    NotFoundError,
    TransportError,
    ValidationError,
)
from schemas.content_reference import ContentReference
from schemas.credentials import ContentstackCredentials

from .service import ContentPreviewService

logger = logging.getLogger(__name__)

ClientFactory = Callable[..., ContentstackClient]


def handle_flag_preview(
    body: Any,
    default_credentials: ContentstackCredentials | None = None,
    client_factory: ClientFactory = ContentstackClient.from_credentials,
    client_config: dict | None = None,
) -> tuple[int, dict[str, Any]]:
    """Answer a flag preview request.

    Args:
        body: Decoded JSON request body
        default_credentials: Credentials to use when the request carries none
        client_factory: Builds a client from credentials and config overrides
        client_config: Extra client config (base_url, timeout, ...)

    Returns:
        Tuple of (HTTP status code, response body)
    """
    try:
        reference = parse_reference(body)
        credentials = select_credentials(body, default_credentials)

        logger.info(f"Processing flag preview request for entry {reference.entry_id}")

        with client_factory(credentials, **(client_config or {})) as client:
            service = ContentPreviewService(client)
            record = service.preview(reference, discovery_environment=credentials.environment)

        logger.info(f"Built preview for entry {reference.entry_id}")
        return 200, {"preview": record.to_response()}

    except ClientError as e:
        status, label = error_status(e)
        logger.error(f"Flag preview request failed ({status}): {e.message}")
        return status, {"error": label, "kind": e.kind, "detail": e.message}

    except Exception:
        logger.exception("Unexpected error processing flag preview request")
        return 500, {
            "error": "Internal Server Error",
            "kind": "internal",
            "detail": "Failed to process flag preview request",
        }


def parse_reference(body: Any) -> ContentReference:
    """Extract and validate the content reference from a request body.

    Raises:
        ValidationError: If the variation is missing or malformed
    """
    variation = _member(_member(body, "variation"), "value")

    if not isinstance(variation, dict):
        raise ValidationError("Missing variation in request body")
    if not variation.get("entryId"):
        raise ValidationError("Missing entryId in variation")
    if not variation.get("environment"):
        raise ValidationError("Missing environment in variation")
    if variation.get("cmsType") != "contentstack":
        raise ValidationError('Invalid cmsType. Only "contentstack" is supported.')

    try:
        return ContentReference.model_validate(variation)
    except PydanticValidationError as e:
        raise ValidationError(
            "Invalid variation in request body",
            errors=[str(err) for err in e.errors()],
        ) from e


def select_credentials(
    body: Any, default_credentials: ContentstackCredentials | None
) -> ContentstackCredentials:
    """Pick request-supplied credentials, else the process defaults.

    Raises:
        ConfigurationError: 400 if request credentials are incomplete,
            500 if no complete credentials are available at all
    """
    supplied = _member(_member(body, "config"), "contentstack")

    if supplied is not None:
        try:
            credentials = ContentstackCredentials.model_validate(supplied)
        except PydanticValidationError as e:
            raise ConfigurationError("Invalid Contentstack configuration") from e

        if not credentials.is_complete:
            missing = ", ".join(credentials.missing_fields())
            raise ConfigurationError(
                f"Missing required Contentstack configuration ({missing})"
            )
        logger.debug("Using request-supplied Contentstack configuration")
        return credentials

    if default_credentials is None or not default_credentials.is_complete:
        raise ConfigurationError(
            "Missing Contentstack configuration. Provide config in the request body "
            "or configure default credentials.",
            status_code=500,
        )

    logger.debug("Using default Contentstack configuration")
    return default_credentials


def error_status(error: ClientError) -> tuple[int, str]:
    """Map a client error to an HTTP status code and error label."""
    if isinstance(error, ConfigurationError):
        return error.status_code, "Configuration Error"
    if isinstance(error, ValidationError):
        return 400, "Invalid Request"
    if isinstance(error, AuthError):
        return 401, "Authentication Failed"
    if isinstance(error, (NotFoundError, ContentMissing)):
        return 404, "Content Not Found"
    if isinstance(error, ContentTypeError):
        return 422, "Content Type Error"
    if isinstance(error, TransportError):
        return 500, "Transport Error"
    return 500, "Internal Server Error"


def _member(value: Any, key: str) -> Any:
    if isinstance(value, dict):
        return value.get(key)
    return None
