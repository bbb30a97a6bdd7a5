"""Flag preview flow and request handling."""

from .handler import error_status, handle_flag_preview, parse_reference, select_credentials
from .service import DEFAULT_CONTENT_TYPE, ContentPreviewService

__all__ = [
    "ContentPreviewService",
    "DEFAULT_CONTENT_TYPE",
    "error_status",
    "handle_flag_preview",
    "parse_reference",
    "select_credentials",
]
