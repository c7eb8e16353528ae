"""
Clients for the WordPress REST API.
"""

from .wordpress_client import WordPressClient, wp_headers

__all__ = ["WordPressClient", "wp_headers"]
