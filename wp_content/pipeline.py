"""
High-level orchestration of the content helpers.

This module defines a :class:`ContentPipeline` class that ties together
the client, resolvers and utilities: it fetches posts or pages, resolves
redirects and attaches featured images.  Diagnostics are recorded
through the :mod:`wp_content.utils.errors` module.
"""

from __future__ import annotations

import os
from typing import Any, Dict, List, Optional, Sequence

from wp_content.clients.wordpress_client import WordPressClient
from wp_content.config import apply_defaults, load_config
from wp_content.models.content import ContentItem
from wp_content.resolvers.images import add_images_to_posts
from wp_content.resolvers.redirects import detect_redirects
from wp_content.utils.errors import JsonlReporter, Sink


class ContentPipeline:
    """
    Encapsulates the configuration, client and diagnostic sink needed to
    turn raw WordPress items into list-ready items.
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        *,
        config_file: Optional[str] = None,
        client: Optional[WordPressClient] = None,
        sink: Optional[Sink] = None,
    ) -> None:
        if config_file:
            config = load_config(config_file)
        else:
            config = apply_defaults(config if config is not None else {})

        self.config = config
        self.report_dir: str = config["reports"]["dir"]
        self.max_workers: Optional[int] = config["wordpress"].get("max_workers")
        self.redirect_resource: str = config["wordpress"]["redirect_resource"]
        self.sink: Sink = sink or JsonlReporter(self.report_dir)
        self.client = client or WordPressClient(
            config["wordpress"]["base_url"],
            timeout=config["wordpress"]["timeout"],
        )

    def log_message(self, message: str, level: str = "INFO") -> None:
        print(f"[{level}] {message}")
        os.makedirs(self.report_dir, exist_ok=True)
        with open(os.path.join(self.report_dir, "content.log"), "a", encoding="utf-8") as f:
            f.write(f"{level}: {message}\n")

    def fetch_by_slug(self, slug: str) -> List[ContentItem]:
        return self.client.fetch_page_by_slug(slug, resource=self.redirect_resource)

    def resolve(self, items: Sequence[ContentItem]) -> List[ContentItem]:
        """Run redirect resolution followed by image enrichment."""
        items = detect_redirects(items, self.fetch_by_slug, sink=self.sink, max_workers=self.max_workers)
        return add_images_to_posts(items, self.client.fetch_data, sink=self.sink, max_workers=self.max_workers)

    def load_posts(
        self,
        fields: Optional[Sequence[str]] = None,
        quantity: Optional[int] = None,
        resource: str = "posts",
    ) -> List[ContentItem]:
        """
        Fetch ``resource`` items and resolve them.

        :param fields: Optional field filter sent as ``_fields``.
        :param quantity: Optional page size.
        :param resource: ``"posts"`` or ``"pages"``.
        :return: Items with redirects resolved and images attached.
        """
        self.log_message(f"Fetching {resource} from {self.client.base_url}")
        items = self.client.fetch_items(resource, fields, quantity)
        self.log_message(f"Fetched {len(items)} {resource}", level="DEBUG")
        resolved = self.resolve(items)
        self.log_message(f"Resolved {len(resolved)} {resource}")
        return resolved

    def close(self) -> None:
        self.client.close()
