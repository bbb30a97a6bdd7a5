"""Content preview service: lookup, fetch and normalize."""

import logging

from cms_flag_preview.clients import ContentstackClient
from cms_flag_preview.lookup import ContentTypeResolver
from cms_flag_preview.normalizers import extract_metadata, normalize_preview
from schemas.content_reference import ContentReference
from schemas.location import ResolvedLocation
from schemas.preview import ItemMetadata, PreviewRecord

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "page"


class ContentPreviewService:
    """Builds preview records for content references.

    Resolves the content type bucket when the reference does not name one,
    fetches the item and normalizes it. When discovery finds nothing the
    default content type is tried before giving up.

    Example:
        with ContentstackClient(config) as client:
            service = ContentPreviewService(client)
            record = service.preview(reference)
    """

    def __init__(
        self,
        client: ContentstackClient,
        resolver: ContentTypeResolver | None = None,
        default_content_type: str = DEFAULT_CONTENT_TYPE,
    ):
        """Initialize the preview service.

        Args:
            client: Authenticated Contentstack client
            resolver: Optional ContentTypeResolver for dependency injection
            default_content_type: Bucket to fall back to when discovery finds nothing
        """
        self.client = client
        self.resolver = resolver or ContentTypeResolver(client)
        self.default_content_type = default_content_type

    def locate(
        self, reference: ContentReference, discovery_environment: str | None = None
    ) -> ResolvedLocation:
        """Resolve a reference to a fetchable location.

        Args:
            reference: The content reference to resolve
            discovery_environment: Environment to list content types in
                (defaults to the reference's environment)
        """
        if reference.is_asset:
            return ResolvedLocation.for_asset(reference.entry_id, reference.environment)

        content_type = reference.content_type_bucket
        if content_type is None:
            content_type = self.resolver.resolve(
                reference.entry_id, discovery_environment or reference.environment
            )
        if content_type is None:
            logger.warning(
                f"Could not discover content type for {reference.entry_id}, "
                f"falling back to '{self.default_content_type}'"
            )
            content_type = self.default_content_type

        return ResolvedLocation.for_entry(
            reference.entry_id,
            reference.environment,
            content_type,
            preview=reference.preview,
        )

    def preview(
        self, reference: ContentReference, discovery_environment: str | None = None
    ) -> PreviewRecord:
        """Fetch and normalize the item a reference points at.

        Raises:
            NotFoundError: If the item does not exist
            ContentTypeError: If the content type is invalid
            AuthError: If the credentials are rejected
            ContentMissing: If the response carries no entry or asset
            TransportError: If the network request fails
        """
        location = self.locate(reference, discovery_environment)
        if location.is_asset:
            logger.info(f"Fetching asset {location.entry_id}")
        else:
            logger.info(
                f"Fetching entry {location.entry_id} from content type {location.content_type}"
            )

        payload = self.client.fetch(location)
        return normalize_preview(payload, location.is_asset)

    def metadata(
        self, reference: ContentReference, discovery_environment: str | None = None
    ) -> ItemMetadata:
        """Fetch the title and thumbnail of the item a reference points at.

        Locates and fetches the item the same way preview() does.
        """
        location = self.locate(reference, discovery_environment)
        logger.info(f"Fetching metadata for {location.entry_id}")

        payload = self.client.fetch(location)
        return extract_metadata(payload, location.is_asset)
