"""Content type lookup."""

from .content_type_resolver import ContentTypeResolver

__all__ = ["ContentTypeResolver"]
