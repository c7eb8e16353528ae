"""
Entry point for the WordPress content helpers.

Fetches posts or pages, resolves redirects, attaches featured images
and writes the result as JSON.
"""

import argparse
import json
import os

from wp_content.config import DEFAULT_CONFIG_FILE, load_config
from wp_content.pipeline import ContentPipeline
from wp_content.utils.errors import WordPressAPIError


def main():
    """
    Main function to run the content pipeline.
    """
    parser = argparse.ArgumentParser(
        description="Fetch WordPress posts or pages with redirects resolved and featured images attached."
    )
    parser.add_argument("--config", default=DEFAULT_CONFIG_FILE, help=f"JSON config file (default: {DEFAULT_CONFIG_FILE})")
    parser.add_argument("--resource", choices=["posts", "pages"], default="posts")
    parser.add_argument("--fields", default="", help="Comma separated list of fields to request")
    parser.add_argument("--quantity", type=int, default=None, help="Number of items to fetch")
    parser.add_argument("--out", default="reports/content/items.json", help="Output JSON file")
    args = parser.parse_args()

    try:
        config = load_config(args.config)
    except ValueError as e:
        print(f"[ERROR] Invalid configuration: {e}")
        return

    if not config["wordpress"]["base_url"]:
        print("[ERROR] WordPress base URL ('base_url') not found in config or WORDPRESS_API_URL.")
        return

    pipeline = ContentPipeline(config)

    fields = [f.strip() for f in args.fields.split(",") if f.strip()]
    try:
        items = pipeline.load_posts(fields or None, args.quantity, resource=args.resource)
    except WordPressAPIError as e:
        pipeline.log_message(f"Failed to fetch {args.resource}: {e}", level="ERROR")
        return
    finally:
        pipeline.close()

    os.makedirs(os.path.dirname(args.out) or ".", exist_ok=True)
    with open(args.out, "w", encoding="utf-8") as f:
        json.dump([item.to_api_dict() for item in items], f, ensure_ascii=False, indent=2)
    pipeline.log_message(f"Wrote {len(items)} items to {args.out}")


if __name__ == "__main__":
    main()
