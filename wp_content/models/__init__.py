"""
Pydantic records for WordPress REST responses.
"""

from .content import ContentItem, MediaDetails, MediaMetadata, MediaSize, RenderedText

__all__ = ["ContentItem", "MediaDetails", "MediaMetadata", "MediaSize", "RenderedText"]
