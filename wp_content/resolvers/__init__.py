"""
Resolvers that rewrite lists of content items.

Both resolvers take their network collaborator as an argument, so they
work with :class:`wp_content.clients.WordPressClient` or any fake.
"""

from .images import add_images_to_posts, get_image_link
from .redirects import detect_redirects

__all__ = ["add_images_to_posts", "get_image_link", "detect_redirects"]
