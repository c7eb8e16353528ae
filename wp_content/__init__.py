"""
Top-level package for the WordPress content helpers.

This package bundles the small pieces a headless WordPress client needs
between "fetch a list of posts" and "render the list": building REST
query parameters, extracting slugs from canonical links, resolving post
redirects and attaching featured-image URLs.  Modules are split into
subpackages:

* :mod:`wp_content.models` – pydantic records for posts, pages and media
* :mod:`wp_content.utils` – query building, slug extraction, diagnostics
* :mod:`wp_content.clients` – the WordPress REST collaborator
* :mod:`wp_content.resolvers` – redirect resolution and image enrichment

Each layer has no direct knowledge of configuration; orchestration is
handled in :mod:`wp_content.pipeline`.
"""
