"""Normalizers for turning CMS payloads into preview records."""

from .preview_normalizer import (
    DEFAULT_ASSET_TITLE,
    DEFAULT_ENTRY_TITLE,
    extract_metadata,
    get_asset_type,
    normalize_asset,
    normalize_entry,
    normalize_preview,
)

__all__ = [
    "DEFAULT_ASSET_TITLE",
    "DEFAULT_ENTRY_TITLE",
    "extract_metadata",
    "get_asset_type",
    "normalize_asset",
    "normalize_entry",
    "normalize_preview",
]
