"""
WordPress REST API collaborator.

This module implements the two lookups the resolvers depend on plus the
collection fetches a caller uses to obtain raw items:

* :meth:`WordPressClient.fetch_data` – generic GET returning a list of
  JSON objects (a single object response is wrapped in a list)
* :meth:`WordPressClient.fetch_page_by_slug` – ``?slug=`` lookup,
  empty list when nothing matches
* :meth:`WordPressClient.fetch_posts` / :meth:`WordPressClient.fetch_pages`

Usage example::

    from wp_content.clients import WordPressClient
    from wp_content.resolvers import detect_redirects, add_images_to_posts

    with WordPressClient("https://example.com/wp-json/wp/v2") as wp:
        posts = wp.fetch_posts(["slug", "link", "title"], 10)
        posts = detect_redirects(posts, wp.fetch_page_by_slug)
        posts = add_images_to_posts(posts, wp.fetch_data)

Requests are not retried; failures surface as
:class:`~wp_content.utils.errors.WordPressAPIError`.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence

import requests

from wp_content.models.content import ContentItem
from wp_content.utils.errors import WordPressAPIError
from wp_content.utils.params import build_endpoint_params, build_query_string

DEFAULT_USER_AGENT = "wp-content-helpers/0.1"


def wp_headers(user_agent: str = DEFAULT_USER_AGENT) -> Dict[str, str]:
    """
    Construct the default headers for WordPress REST requests.

    :param user_agent: Value for the ``User-Agent`` header.
    :return: A dictionary of headers.
    """
    return {
        "Accept": "application/json",
        "User-Agent": user_agent,
    }


class WordPressClient:
    """
    Thin wrapper around a :class:`requests.Session` bound to one REST base
    URL such as ``https://example.com/wp-json/wp/v2``.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        if not base_url:
            raise ValueError("WordPress base URL is empty.")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(wp_headers(user_agent))

    def __enter__(self) -> "WordPressClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def _url(self, path: str, params: Optional[Mapping[str, Any]] = None) -> str:
        url = f"{self.base_url}/{path.lstrip('/')}"
        if params:
            url = f"{url}?{build_query_string(params)}"
        return url

    def fetch_data(self, path: str, params: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
        """
        GET ``path`` relative to the base URL and return the decoded items.

        :param path: Resource path, e.g. ``"media/42"`` or ``"posts"``.
        :param params: Optional query parameters.
        :return: A list of JSON objects.
        :raises WordPressAPIError: on network, HTTP or decoding errors.
        """
        url = self._url(path, params)
        try:
            resp = self.session.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise WordPressAPIError(f"GET {url} failed: {e}", status_code=status) from e
        except requests.RequestException as e:
            raise WordPressAPIError(f"GET {url} failed: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            raise WordPressAPIError(f"GET {url} returned invalid JSON: {e}") from e

        if isinstance(data, dict):
            return [data]
        if isinstance(data, list):
            return data
        raise WordPressAPIError(f"GET {url} returned unexpected payload type {type(data).__name__}")

    def fetch_page_by_slug(self, slug: str, resource: str = "pages") -> List[ContentItem]:
        """Look up ``resource`` items whose slug is ``slug``."""
        items = self.fetch_data(resource, {"slug": slug})
        return [ContentItem.model_validate(item) for item in items]

    def fetch_items(
        self,
        resource: str,
        fields: Optional[Sequence[str]] = None,
        quantity: Optional[int] = None,
    ) -> List[ContentItem]:
        params = build_endpoint_params(fields, quantity)
        return [ContentItem.model_validate(item) for item in self.fetch_data(resource, params)]

    def fetch_posts(self, fields: Optional[Sequence[str]] = None, quantity: Optional[int] = None) -> List[ContentItem]:
        return self.fetch_items("posts", fields, quantity)

    def fetch_pages(self, fields: Optional[Sequence[str]] = None, quantity: Optional[int] = None) -> List[ContentItem]:
        return self.fetch_items("pages", fields, quantity)
