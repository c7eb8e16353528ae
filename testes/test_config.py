import os
import sys

# Ensure project root is on sys.path for imports when running tests directly
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import json

import pytest

from wp_content.config import load_config


def test_defaults_without_file(monkeypatch):
    monkeypatch.delenv("WORDPRESS_API_URL", raising=False)
    monkeypatch.delenv("WORDPRESS_MAX_WORKERS", raising=False)
    monkeypatch.delenv("WORDPRESS_TIMEOUT", raising=False)

    config = load_config(None)

    assert config["wordpress"]["base_url"] == ""
    assert config["wordpress"]["timeout"] == 10.0
    assert config["wordpress"]["max_workers"] is None
    assert config["wordpress"]["redirect_resource"] == "pages"
    assert config["reports"]["dir"].endswith("content")


def test_environment_fills_missing_keys(monkeypatch, tmp_path):
    monkeypatch.setenv("WORDPRESS_API_URL", "https://env.example/wp-json/wp/v2")
    monkeypatch.setenv("WORDPRESS_MAX_WORKERS", "4")

    config = load_config(str(tmp_path / "missing.json"))

    assert config["wordpress"]["base_url"] == "https://env.example/wp-json/wp/v2"
    assert config["wordpress"]["max_workers"] == 4


def test_file_values_win_over_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("WORDPRESS_API_URL", "https://env.example/wp-json/wp/v2")
    monkeypatch.delenv("WORDPRESS_TIMEOUT", raising=False)
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"wordpress": {"base_url": "https://file.example/wp-json/wp/v2"}}), encoding="utf-8")

    config = load_config(str(path))

    assert config["wordpress"]["base_url"] == "https://file.example/wp-json/wp/v2"
    assert config["wordpress"]["timeout"] == 10.0


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        load_config(str(path))


def test_non_integer_max_workers_names_the_variable(monkeypatch):
    monkeypatch.setenv("WORDPRESS_MAX_WORKERS", "many")

    with pytest.raises(ValueError, match="WORDPRESS_MAX_WORKERS must be an integer"):
        load_config(None)
