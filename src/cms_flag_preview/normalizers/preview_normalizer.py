"""Normalization of Contentstack payloads into preview records.

Entries and assets come back from the delivery API in different shapes.
These functions map both onto the single PreviewRecord that the flag
management UI renders. They perform no I/O.
"""

from typing import Any

from schemas.preview import AssetDimensions, AssetType, ItemMetadata, PreviewRecord

DEFAULT_ENTRY_TITLE = "Entry"
DEFAULT_ASSET_TITLE = "Asset"


def get_asset_type(mime_type: str | None) -> AssetType:
    """Classify an asset by the prefix of its MIME type.

    Args:
        mime_type: MIME type such as "image/png"

    Returns:
        "image", "video" or "audio" by prefix, otherwise "file"

    Examples:
        >>> get_asset_type("image/png")
        'image'
        >>> get_asset_type("application/pdf")
        'file'
    """
    if not mime_type:
        return "file"
    if mime_type.startswith("image/"):
        return "image"
    if mime_type.startswith("video/"):
        return "video"
    if mime_type.startswith("audio/"):
        return "audio"
    return "file"


def normalize_preview(payload: dict[str, Any], is_asset: bool) -> PreviewRecord:
    """Map a raw entry or asset payload to a PreviewRecord.

    Args:
        payload: The ``entry`` or ``asset`` object from the delivery API
        is_asset: Whether the payload is an asset

    Returns:
        PreviewRecord whose structured_data is the payload itself
    """
    if is_asset:
        return normalize_asset(payload)
    return normalize_entry(payload)


def normalize_entry(entry: dict[str, Any]) -> PreviewRecord:
    """Map an entry payload to a PreviewRecord."""
    return PreviewRecord(
        title=_text(entry.get("title")) or DEFAULT_ENTRY_TITLE,
        summary=_text(entry.get("summary")),
        html=_text(entry.get("body")),
        image_url=_nested_url(entry.get("image")),
        structured_data=entry,
    )


def normalize_asset(asset: dict[str, Any]) -> PreviewRecord:
    """Map an asset payload to a PreviewRecord."""
    filename = _text(asset.get("filename")) or None
    url = _text(asset.get("url")) or None
    mime_type = _text(asset.get("content_type")) or None

    return PreviewRecord(
        title=_text(asset.get("title")) or filename or DEFAULT_ASSET_TITLE,
        summary=f"Asset: {filename}" if filename else DEFAULT_ASSET_TITLE,
        image_url=url,
        file_url=url,
        file_name=filename,
        file_size=_int_or_none(asset.get("file_size")),
        mime_type=mime_type,
        asset_type=get_asset_type(mime_type),
        dimensions=_dimensions(asset.get("dimension")),
        structured_data=asset,
    )


def extract_metadata(payload: dict[str, Any], is_asset: bool) -> ItemMetadata:
    """Pick the title and thumbnail used by flag variation pickers.

    Entries take their thumbnail from ``image.url``. Assets use their own
    url as both thumbnail and file url.
    """
    if is_asset:
        url = _text(payload.get("url")) or None
        return ItemMetadata(
            title=_text(payload.get("title")) or _text(payload.get("filename")) or None,
            thumbnail=url,
            file_url=url,
        )
    return ItemMetadata(
        title=_text(payload.get("title")) or None,
        thumbnail=_nested_url(payload.get("image")),
    )


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _nested_url(value: Any) -> str | None:
    if isinstance(value, dict) and value.get("url"):
        return str(value["url"])
    return None


def _int_or_none(value: Any) -> int | None:
    """Contentstack reports file sizes as strings; accept both."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _dimensions(value: Any) -> AssetDimensions | None:
    if not isinstance(value, dict):
        return None
    width = _int_or_none(value.get("width"))
    height = _int_or_none(value.get("height"))
    if width is None and height is None:
        return None
    return AssetDimensions(width=width, height=height)
