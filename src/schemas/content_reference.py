"""Content reference schemas.

A content reference is the value stored in a feature flag variation. It
points at one entry or asset in Contentstack.
"""

from typing import Literal

from pydantic import BaseModel, Field

ASSET_CONTENT_TYPE = "asset"
ENTRY_CONTENT_TYPE = "entry"


class ContentReference(BaseModel):
    """Reference to one addressable item in the CMS.

    Attributes:
        cms_type: CMS identifier, only "contentstack" is supported
        entry_id: Entry or asset uid
        environment: Publishing environment to read from
        content_type: Optional content type hint ("asset", "entry" or a bucket uid)
        preview: Whether to request preview content for entries
    """

    cms_type: Literal["contentstack"] = Field(alias="cmsType")
    entry_id: str = Field(alias="entryId", min_length=1)
    environment: str = Field(min_length=1)
    content_type: str | None = Field(default=None, alias="contentType")
    preview: bool = False

    model_config = {"frozen": True, "populate_by_name": True, "extra": "allow"}

    @property
    def is_asset(self) -> bool:
        return self.content_type == ASSET_CONTENT_TYPE

    @property
    def content_type_bucket(self) -> str | None:
        """The bucket named by the hint, or None when it has to be discovered."""
        if not self.content_type or self.content_type in (
            ASSET_CONTENT_TYPE,
            ENTRY_CONTENT_TYPE,
        ):
            return None
        return self.content_type
