"""Contentstack Delivery API client."""

import logging
from typing import Any
from urllib.parse import quote

from pydantic import ValidationError as PydanticValidationError

from schemas.credentials import ContentstackCredentials
from schemas.location import ResolvedLocation
from schemas.preview import ContentTypeInfo

from .client import Client
from .exceptions import (
    APIError,
    ConfigurationError,
    ContentMissing,
    DiscoveryUnavailable,
    ValidationError,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://cdn.contentstack.io/v3"


class ContentstackClient(Client):
    """Client for the Contentstack Content Delivery API.

    Authenticates every request with the stack API key and a delivery
    token, sent as the ``api_key`` and ``access_token`` headers.

    Config keys (in addition to the base Client keys):
        api_key (required): Stack API key
        delivery_token (required): Delivery token
        base_url: Delivery API root (default: https://cdn.contentstack.io/v3)

    Example:
        config = {"api_key": "blt...", "delivery_token": "cs..."}
        with ContentstackClient(config) as client:
            entry = client.fetch_entry("blt0f6ddaddb7222b8d", "page", "preview")
    """

    def __init__(self, config: dict):
        missing = [key for key in ("api_key", "delivery_token") if not config.get(key)]
        if missing:
            raise ConfigurationError(
                f"Missing required Contentstack configuration: {', '.join(missing)}"
            )

        config = dict(config)
        config.setdefault("base_url", DEFAULT_BASE_URL)
        super().__init__(config)

    @classmethod
    def from_credentials(
        cls, credentials: ContentstackCredentials, **overrides
    ) -> "ContentstackClient":
        """Build a client from a credentials model.

        Args:
            credentials: API key and delivery token to authenticate with
            **overrides: Extra config keys (base_url, timeout, ...)
        """
        config = {
            "api_key": credentials.api_key,
            "delivery_token": credentials.delivery_token,
        }
        config.update({k: v for k, v in overrides.items() if v is not None})
        return cls(config)

    @property
    def headers(self) -> dict[str, str]:
        headers = super().headers
        headers.update(
            {
                "api_key": str(self._config["api_key"]),
                "access_token": str(self._config["delivery_token"]),
                "Content-Type": "application/json",
            }
        )
        return headers

    def fetch(self, location: ResolvedLocation) -> dict[str, Any]:
        """Fetch the raw payload for a resolved location.

        Args:
            location: Entry or asset location with a known content type

        Returns:
            The ``entry`` or ``asset`` object from the response

        Raises:
            ContentMissing: If the response lacks the entry/asset key
            APIError: If the API returns a non-2xx response
            TransportError: If the network request fails or the body is malformed
        """
        if location.is_asset:
            return self.fetch_asset(location.entry_id, location.environment)
        return self.fetch_entry(
            location.entry_id,
            location.content_type,
            location.environment,
            preview=location.preview,
        )

    def fetch_entry(
        self,
        entry_id: str,
        content_type: str,
        environment: str,
        preview: bool = False,
    ) -> dict[str, Any]:
        """Fetch one entry by uid from a content type bucket."""
        path = self._entry_path(content_type, entry_id)
        params = self._build_params(environment, preview=preview)
        logger.debug(f"Fetching entry {entry_id} from content type {content_type}")

        data = self.get_json(path, params=params)
        return self._extract(data, "entry", entry_id)

    def fetch_asset(self, asset_id: str, environment: str) -> dict[str, Any]:
        """Fetch one asset by uid."""
        path = f"/assets/{_segment(asset_id)}"
        params = self._build_params(environment)
        logger.debug(f"Fetching asset {asset_id}")

        data = self.get_json(path, params=params)
        return self._extract(data, "asset", asset_id)

    def list_content_types(self, environment: str) -> list[str]:
        """List the uids of all content types, in API order.

        Raises:
            DiscoveryUnavailable: If the listing request does not succeed
        """
        try:
            data = self.get_json("/content_types", params=self._build_params(environment))
        except APIError as e:
            raise DiscoveryUnavailable(
                f"Failed to list content types: HTTP {e.status_code}",
                status_code=e.status_code,
                raw_body=e.raw_body,
            ) from e

        content_types = data.get("content_types") or []
        return [ct["uid"] for ct in content_types if isinstance(ct, dict) and ct.get("uid")]

    def has_entry(self, content_type: str, entry_id: str, environment: str) -> bool:
        """Probe whether an entry exists in a content type bucket.

        Any non-2xx answer counts as "not here".

        Raises:
            TransportError: If the network request fails
        """
        try:
            self.get(
                self._entry_path(content_type, entry_id),
                params=self._build_params(environment),
            )
        except APIError as e:
            logger.debug(
                f"Entry {entry_id} not in content type {content_type}: HTTP {e.status_code}"
            )
            return False
        return True

    def fetch_content_type(self, uid: str, environment: str) -> ContentTypeInfo:
        """Fetch metadata describing one content type.

        Raises:
            ContentMissing: If the response has no ``content_type`` key
            ValidationError: If the metadata lacks required fields
        """
        data = self.get_json(
            f"/content_types/{_segment(uid)}", params=self._build_params(environment)
        )
        content_type = data.get("content_type")
        if not isinstance(content_type, dict):
            raise ContentMissing(f"No content type in response for {uid}")

        try:
            return ContentTypeInfo.model_validate(content_type)
        except PydanticValidationError as e:
            raise ValidationError(
                f"Content type {uid} failed validation",
                errors=[str(err) for err in e.errors()],
            ) from e

    def _entry_path(self, content_type: str, entry_id: str) -> str:
        return f"/content_types/{_segment(content_type)}/entries/{_segment(entry_id)}"

    def _build_params(self, environment: str, preview: bool = False) -> dict[str, Any]:
        """Build query parameters for a delivery request.

        The delivery API uses:
        - environment: Publishing environment to read from
        - preview: "true" to read preview content (entries only)
        """
        params = {"environment": environment}
        if preview:
            params["preview"] = "true"
        return params

    def _extract(self, data: dict[str, Any], key: str, uid: str) -> dict[str, Any]:
        item = data.get(key)
        if not isinstance(item, dict):
            raise ContentMissing(f"No {key} found in response for {uid}")
        return item


def _segment(value: str) -> str:
    """Escape a uid for use as a single URL path segment."""
    return quote(value, safe="")
