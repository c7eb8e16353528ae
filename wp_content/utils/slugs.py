from __future__ import annotations

from urllib.parse import urlparse

from wp_content.utils.errors import MalformedUrlError


def extract_slug(link: str) -> str:
    """Return the first path segment of an absolute URL.

    ``https://example.com/my-post/`` gives ``my-post``; a bare host gives
    an empty string.

    :param link: The canonical link of a content item.
    :return: The slug found right after the leading ``/``.
    :raises MalformedUrlError: if ``link`` is not an absolute URL.
    """
    if not isinstance(link, str):
        raise MalformedUrlError(f"Invalid URL: {link!r}")
    try:
        parsed = urlparse(link.strip())
    except ValueError as e:
        raise MalformedUrlError(f"Invalid URL: {link!r}") from e
    if not parsed.scheme or not parsed.netloc:
        raise MalformedUrlError(f"Invalid URL: {link!r}")

    segments = (parsed.path or "/").split("/")
    return segments[1] if len(segments) > 1 else ""
