"""
Utility helpers used by the content pipeline.

This subpackage exposes query building, slug extraction, concurrency
and structured diagnostics.
"""

from .errors import (
    ERRORS,
    ContentHelperError,
    Diagnostic,
    JsonlReporter,
    MalformedUrlError,
    MediaFetchError,
    WordPressAPIError,
    report_error,
    report_ok,
)
from .params import build_endpoint_params, build_query_string
from .slugs import extract_slug

__all__ = [
    "ERRORS",
    "ContentHelperError",
    "Diagnostic",
    "JsonlReporter",
    "MalformedUrlError",
    "MediaFetchError",
    "WordPressAPIError",
    "report_error",
    "report_ok",
    "build_endpoint_params",
    "build_query_string",
    "extract_slug",
]
