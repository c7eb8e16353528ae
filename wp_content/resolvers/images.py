"""
Featured-image enrichment.

:func:`get_image_link` turns a media id into the URL of its full-size
rendition and raises :class:`MediaFetchError` when it cannot.
:func:`add_images_to_posts` applies it to every item that still needs an
image and falls back to the unmodified item on failure.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Sequence

from pydantic import ValidationError

from wp_content.models.content import ContentItem, MediaMetadata
from wp_content.utils.concurrency import run_concurrently
from wp_content.utils.errors import MediaFetchError, Sink, report_error, report_ok

FetchData = Callable[[str], Sequence[Dict[str, Any]]]


def get_image_link(media_id: int, fetch_data: FetchData, *, sink: Optional[Sink] = None) -> str:
    """
    Fetch media metadata for ``media_id`` and return its full-size URL.

    :param media_id: The ``featured_media`` id of a post or page.
    :param fetch_data: Collaborator performing ``GET <base>/<path>``.
    :return: The ``source_url`` of the ``full`` size.
    :raises MediaFetchError: if the fetch fails or the size is missing.
    """
    try:
        found = fetch_data(f"media/{media_id}")
        if not found:
            raise MediaFetchError(f"No media found for id {media_id}")
        return MediaMetadata.model_validate(found[0]).full_size_url()
    except MediaFetchError as e:
        report_error("MEDIA_FETCH", None, e, sink=sink, extra={"media_id": media_id})
        raise
    except (ValidationError, KeyError) as e:
        report_error("MEDIA_FETCH", None, e, sink=sink, extra={"media_id": media_id})
        raise MediaFetchError(f"Media {media_id} has no full-size source URL") from e
    except Exception as e:
        report_error("MEDIA_FETCH", None, e, sink=sink, extra={"media_id": media_id})
        raise MediaFetchError(f"Failed to fetch media {media_id}: {e}") from e


def _attach_image(item: ContentItem, fetch_data: FetchData, sink: Optional[Sink]) -> ContentItem:
    if not item.needs_image():
        return item
    try:
        image = get_image_link(item.featured_media, fetch_data, sink=sink)
    except MediaFetchError as e:
        report_error("IMAGE_FAILED", item, e, sink=sink)
        return item
    report_ok("IMAGE_ATTACHED", item, {"image": image}, sink=sink)
    return item.with_image(image)


def add_images_to_posts(
    items: Sequence[ContentItem],
    fetch_data: FetchData,
    *,
    sink: Optional[Sink] = None,
    max_workers: Optional[int] = None,
) -> List[ContentItem]:
    """
    Attach the full-size featured image URL to each item that lacks one.

    Items that already have an image, or have ``featured_media == 0``,
    are returned as is and never trigger a fetch.

    :param items: Posts or pages.
    :param fetch_data: Collaborator used by :func:`get_image_link`.
    :param sink: Diagnostic sink.
    :param max_workers: Optional bound on concurrent media lookups.
    :return: A new list in input order.
    """
    return run_concurrently(lambda item: _attach_image(item, fetch_data, sink), items, max_workers)
