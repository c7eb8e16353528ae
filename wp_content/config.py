"""
Configuration loading.

Configuration is supplied via a JSON file path or directly as a
dictionary.  The ``wordpress`` section holds the REST ``base_url``
(for example ``https://example.com/wp-json/wp/v2``), the request
``timeout`` and an optional ``max_workers`` bound for concurrent lookups.
The ``reports`` section controls where logs and diagnostics are written.
Missing keys are filled from environment variables or defaults.
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, Optional

DEFAULT_CONFIG_FILE = "config/content_config.json"


def _env_int(name: str) -> Optional[int]:
    value = os.getenv(name, "").strip()
    if not value:
        return None
    try:
        return int(value)
    except ValueError as e:
        raise ValueError(f"Environment variable {name} must be an integer, got {value!r}.") from e


def apply_defaults(config: Dict[str, Any]) -> Dict[str, Any]:
    """Fill missing keys in ``config`` in place and return it."""
    config.setdefault("wordpress", {})
    config["wordpress"].setdefault("base_url", os.getenv("WORDPRESS_API_URL", ""))
    config["wordpress"].setdefault("timeout", float(os.getenv("WORDPRESS_TIMEOUT", "10")))
    config["wordpress"].setdefault("max_workers", _env_int("WORDPRESS_MAX_WORKERS"))
    config["wordpress"].setdefault("redirect_resource", "pages")

    config.setdefault("reports", {})
    config["reports"].setdefault("dir", os.path.join("reports", "content"))
    return config


def load_config(config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Read ``config_file`` if it exists and apply defaults.

    :param config_file: Path to a JSON configuration file.
    :return: The configuration dictionary.
    :raises json.JSONDecodeError: if the file exists but is not valid JSON.
    """
    config: Dict[str, Any] = {}
    if config_file and os.path.exists(config_file):
        with open(config_file, "r", encoding="utf-8") as f:
            config = json.load(f)
    return apply_defaults(config)
