from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RenderedText(BaseModel):
    rendered: str = ""

    model_config = ConfigDict(extra="allow")


class ContentItem(BaseModel):
    """A post or page as returned by the WordPress REST API.

    Only the fields the helpers touch are declared; everything else the
    API sends is kept as extra data.
    """

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
    )

    slug: str = ""
    link: str = ""
    categories: List[int] = Field(default_factory=list)
    image: Optional[str] = None
    title: RenderedText = Field(default_factory=RenderedText)
    featured_media: int = Field(0, alias="featuredMediaId")

    def needs_image(self) -> bool:
        """True when no image is attached yet and a featured media id exists."""
        return not self.image and self.featured_media != 0

    def with_image(self, image: str) -> "ContentItem":
        """Copy of this item with only ``image`` replaced."""
        return self.model_copy(update={"image": image})

    def with_display_fields_from(self, original: "ContentItem") -> "ContentItem":
        """
        Copy of this item carrying the list-page presentation of ``original``.

        Exactly ``categories``, ``image`` and ``title.rendered`` are taken
        from ``original``; every other field stays as is.
        """
        return self.model_copy(
            update={
                "categories": list(original.categories),
                "image": original.image,
                "title": RenderedText(rendered=original.title.rendered),
            }
        )

    def to_api_dict(self) -> Dict[str, object]:
        """Dump by field name, leaving out unset optional values."""
        return self.model_dump(exclude_none=True)


class MediaSize(BaseModel):
    source_url: str

    model_config = ConfigDict(extra="allow")


class MediaDetails(BaseModel):
    sizes: Dict[str, MediaSize] = Field(default_factory=dict)

    model_config = ConfigDict(extra="allow")


class MediaMetadata(BaseModel):
    """Media object from ``/wp/v2/media/<id>``."""

    model_config = ConfigDict(extra="allow")

    id: Optional[int] = None
    media_details: MediaDetails

    def full_size_url(self) -> str:
        """Source URL of the ``full`` registered size.

        :raises KeyError: when the media has no ``full`` size.
        """
        return self.media_details.sizes["full"].source_url
