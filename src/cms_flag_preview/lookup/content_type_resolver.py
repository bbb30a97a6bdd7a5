"""Content type discovery for entries addressed only by uid."""

import logging

from cms_flag_preview.clients import ClientError, ContentstackClient, DiscoveryUnavailable
from schemas.preview import ContentTypeInfo

logger = logging.getLogger(__name__)


class ContentTypeResolver:
    """Finds which content type bucket holds a given entry.

    Lists every content type in the environment, then probes each one in
    listing order for the entry and stops at the first success. Requests
    are sequential and nothing is cached between calls.

    Example:
        with ContentstackClient(config) as client:
            resolver = ContentTypeResolver(client)
            content_type = resolver.resolve("blt0f6ddaddb7222b8d", "preview")
    """

    def __init__(self, client: ContentstackClient):
        self.client = client

    def resolve(self, entry_id: str, environment: str) -> str | None:
        """Discover the content type uid holding an entry.

        Args:
            entry_id: Entry uid to locate
            environment: Publishing environment to search

        Returns:
            The first content type uid whose probe succeeds, or None if the
            listing is unavailable or no bucket holds the entry
        """
        logger.info(f"Discovering content type for entry {entry_id}")

        try:
            content_types = self.client.list_content_types(environment)
        except DiscoveryUnavailable as e:
            logger.warning(f"Content type discovery unavailable: {e}")
            return None
        except ClientError as e:
            logger.warning(f"Content type listing failed: {e}")
            return None

        logger.debug(f"Found {len(content_types)} content types: {content_types}")

        for content_type in content_types:
            try:
                found = self.client.has_entry(content_type, entry_id, environment)
            except ClientError as e:
                logger.warning(f"Probe of content type {content_type} failed: {e}")
                return None

            if found:
                logger.info(f"Entry {entry_id} belongs to content type {content_type}")
                return content_type

        logger.info(f"No content type holds entry {entry_id}")
        return None

    def resolve_with_metadata(
        self, entry_id: str, environment: str
    ) -> tuple[str | None, ContentTypeInfo | None]:
        """Discover an entry's content type and describe it.

        Metadata failures are logged and leave the metadata empty; the
        discovered uid is still returned.
        """
        content_type = self.resolve(entry_id, environment)
        if content_type is None:
            return None, None

        try:
            metadata = self.client.fetch_content_type(content_type, environment)
        except ClientError as e:
            logger.warning(f"Failed to fetch metadata for content type {content_type}: {e}")
            return content_type, None

        return content_type, metadata

    def resolve_many(
        self, entry_ids: list[str], environment: str
    ) -> dict[str, str | None]:
        """Discover content types for several entries, one after another."""
        logger.info(f"Discovering content types for {len(entry_ids)} entries")

        results: dict[str, str | None] = {}
        for entry_id in entry_ids:
            results[entry_id] = self.resolve(entry_id, environment)

        return results
