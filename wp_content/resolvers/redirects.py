"""
Redirect resolution for lists of posts.

When a post's stored ``slug`` differs from the first path segment of its
canonical ``link``, WordPress has moved the content.  The resolver looks
the content up again under the link's slug and keeps the original
entry's list-page presentation (categories, image and rendered title) on
top of the canonical record.  Failures never abort the batch: the
original item is kept and the failure goes to the diagnostic sink.
"""

from __future__ import annotations

from typing import Any, Callable, List, Mapping, Optional, Sequence, Union

from wp_content.models.content import ContentItem
from wp_content.utils.concurrency import run_concurrently
from wp_content.utils.errors import Sink, report_error, report_ok
from wp_content.utils.slugs import extract_slug

FetchBySlug = Callable[[str], Sequence[Union[ContentItem, Mapping[str, Any]]]]


def _as_item(value: Union[ContentItem, Mapping[str, Any]]) -> ContentItem:
    if isinstance(value, ContentItem):
        return value
    return ContentItem.model_validate(value)


def resolve_redirect(
    item: ContentItem, fetch_by_slug: FetchBySlug, *, sink: Optional[Sink] = None
) -> List[ContentItem]:
    """
    Resolve a single item.

    :return: ``[item]`` (the same object) when nothing changes, otherwise
             the fetched records with the first one carrying the
             original's display fields.
    """
    try:
        link_slug = extract_slug(item.link)
        if item.slug == link_slug:
            return [item]

        found = [_as_item(value) for value in (fetch_by_slug(link_slug) or [])]
        if not found:
            return [item]

        found[0] = found[0].with_display_fields_from(item)
        report_ok("REDIRECT_RESOLVED", item, {"target_slug": link_slug}, sink=sink)
        return found
    except Exception as e:
        report_error("REDIRECT_FAILED", item, e, sink=sink)
        return [item]


def detect_redirects(
    items: Sequence[ContentItem],
    fetch_by_slug: FetchBySlug,
    *,
    sink: Optional[Sink] = None,
    max_workers: Optional[int] = None,
) -> List[ContentItem]:
    """
    Detect and resolve redirects in a list of posts.

    :param items: Posts as returned by the content API.
    :param fetch_by_slug: Collaborator returning the items stored under a
                          slug, e.g. :meth:`WordPressClient.fetch_page_by_slug`.
    :param sink: Diagnostic sink for per-item failures and redirects.
    :param max_workers: Optional bound on concurrent lookups.
    :return: A new, flattened list; its length may differ from the input.
    """
    results = run_concurrently(
        lambda item: resolve_redirect(item, fetch_by_slug, sink=sink),
        items,
        max_workers,
    )
    return [resolved for group in results for resolved in group]
