"""Schema definitions for CMS flag previews."""

from .content_reference import ASSET_CONTENT_TYPE, ENTRY_CONTENT_TYPE, ContentReference
from .credentials import ContentstackCredentials
from .location import ResolvedLocation
from .preview import AssetDimensions, AssetType, ContentTypeInfo, ItemMetadata, PreviewRecord

__all__ = [
    "ASSET_CONTENT_TYPE",
    "ENTRY_CONTENT_TYPE",
    "AssetDimensions",
    "AssetType",
    "ContentReference",
    "ContentTypeInfo",
    "ContentstackCredentials",
    "ItemMetadata",
    "PreviewRecord",
    "ResolvedLocation",
]
