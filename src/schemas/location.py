"""Resolved location domain object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResolvedLocation:
    """A content reference whose content type bucket is known.

    Attributes:
        entry_id: Entry or asset uid
        environment: Publishing environment
        content_type: Content type bucket uid, None for assets
        is_asset: Whether the item lives on the asset endpoint
        preview: Whether to request preview content
    """

    entry_id: str
    environment: str
    content_type: str | None = None
    is_asset: bool = False
    preview: bool = False

    def __post_init__(self):
        if not self.is_asset and not self.content_type:
            raise ValueError("entry locations require a content_type")

    @classmethod
    def for_asset(cls, entry_id: str, environment: str) -> "ResolvedLocation":
        return cls(entry_id=entry_id, environment=environment, is_asset=True)

    @classmethod
    def for_entry(
        cls,
        entry_id: str,
        environment: str,
        content_type: str,
        preview: bool = False,
    ) -> "ResolvedLocation":
        return cls(
            entry_id=entry_id,
            environment=environment,
            content_type=content_type,
            preview=preview,
        )
