"""Preview record schemas.

The preview record is the shape a flag management UI renders. Fields that
the source payload lacks are omitted from the serialized record rather
than sent as null.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field

AssetType = Literal["image", "file", "video", "audio"]


class AssetDimensions(BaseModel):
    """Pixel dimensions of an image asset."""

    width: int | None = None
    height: int | None = None


class PreviewRecord(BaseModel):
    """Normalized preview of an entry or asset.

    Attributes:
        title: Display title, always present
        summary: Short description
        html: Rendered body for entries
        image_url: Representative image
        structured_data: The raw CMS payload, unmodified
        asset_type: image, video, audio or file (assets only)
        file_name: Asset file name
        file_size: Asset size in bytes
        file_url: Asset download URL
        mime_type: Asset MIME type
        dimensions: Asset pixel dimensions
    """

    title: str
    summary: str | None = None
    html: str | None = None
    image_url: str | None = Field(default=None, alias="imageUrl")
    structured_data: dict[str, Any] = Field(
        default_factory=dict, alias="structuredData"
    )

    # Asset fields
    asset_type: AssetType | None = Field(default=None, alias="assetType")
    file_name: str | None = Field(default=None, alias="fileName")
    file_size: int | None = Field(default=None, alias="fileSize")
    file_url: str | None = Field(default=None, alias="fileUrl")
    mime_type: str | None = Field(default=None, alias="mimeType")
    dimensions: AssetDimensions | None = None

    model_config = {"populate_by_name": True}

    def to_response(self) -> dict[str, Any]:
        """Serialize with wire names, dropping absent fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ItemMetadata(BaseModel):
    """Title and thumbnail for listing an entry or asset in a picker."""

    title: str | None = None
    thumbnail: str | None = None
    file_url: str | None = Field(default=None, alias="fileUrl")

    model_config = {"populate_by_name": True}

    def to_response(self) -> dict[str, Any]:
        """Serialize with wire names, dropping absent fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ContentTypeInfo(BaseModel):
    """Metadata describing a content type bucket."""

    uid: str
    title: str
    description: str | None = None

    model_config = {"extra": "allow"}
