"""
Exceptions and structured diagnostics for the content helpers.

The :mod:`wp_content.utils.errors` module centralizes how failures and
successes are surfaced.  Batch operations never raise for a single bad
item; instead they hand a :class:`Diagnostic` to a *sink*, which is any
callable accepting one argument.  The default sink is a
:class:`JsonlReporter` that prints a one-line summary and appends the
entry to a JSON Lines file so the information can be reviewed after a
run.  Tests usually pass ``list.append`` as the sink.

Two public functions are provided:

``report_error``
    Record an error that occurred for a content item.  An optional
    exception can be supplied and will be serialized to the entry.

``report_ok``
    Record a successful step for a content item.  Additional key/value
    information can be attached via the ``extra`` parameter.

The ``ERRORS`` dictionary maps event codes to human readable messages.
Codes not present in the dictionary fall back to the code itself.
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Dict, Optional


class ContentHelperError(Exception):
    """Base class for errors raised by the content helpers."""


class MalformedUrlError(ContentHelperError, ValueError):
    """Raised when a link cannot be parsed as an absolute URL."""


class MediaFetchError(ContentHelperError):
    """Raised when media metadata cannot be fetched or lacks a full-size URL."""


class WordPressAPIError(ContentHelperError):
    """Raised by the REST client on HTTP, network or decoding failures."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


# Event codes used throughout the helpers.  The keys include both error
# and success codes as the same lookup is used by report_error and report_ok.
ERRORS: Dict[str, str] = {
    "REDIRECT_FAILED": "Failed to resolve post redirect",
    "REDIRECT_RESOLVED": "Post redirected to canonical slug",
    "MEDIA_FETCH": "Failed to fetch media metadata",
    "IMAGE_FAILED": "Failed to attach featured image",
    "IMAGE_ATTACHED": "Featured image attached",
    "WP_NETWORK": "Network error communicating with WordPress",
}


@dataclass
class Diagnostic:
    """A single reported event."""

    code: str
    message: str
    ok: bool = False
    slug: Optional[str] = None
    title: Optional[str] = None
    error: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra")
        if data["error"] is None:
            data.pop("error")
        data.update(extra)
        return data


Sink = Callable[[Diagnostic], None]


class JsonlReporter:
    """
    Print diagnostics and append them to ``errors.jsonl`` or
    ``success.jsonl`` under ``report_dir``.
    """

    def __init__(self, report_dir: str = os.path.join("reports", "content")) -> None:
        self.report_dir = report_dir
        self.error_log = os.path.join(report_dir, "errors.jsonl")
        self.ok_log = os.path.join(report_dir, "success.jsonl")

    def _write_jsonl(self, path: str, data: Dict[str, Any]) -> None:
        """Append ``data`` as a JSON object followed by a newline to ``path``."""
        os.makedirs(self.report_dir, exist_ok=True)
        with open(path, "a", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False)
            f.write("\n")

    def __call__(self, diagnostic: Diagnostic) -> None:
        if diagnostic.ok:
            print(f"[OK] {diagnostic.message} - {diagnostic.slug or ''}")
            self._write_jsonl(self.ok_log, diagnostic.to_dict())
        else:
            print(f"[ERROR] {diagnostic.message} - {diagnostic.slug or ''}")
            self._write_jsonl(self.error_log, diagnostic.to_dict())


_default_sink: Sink = JsonlReporter()


def _item_identity(item: Any) -> Dict[str, Optional[str]]:
    if item is None:
        return {"slug": None, "title": None}
    if isinstance(item, dict):
        title = item.get("title")
        if isinstance(title, dict):
            title = title.get("rendered")
        return {"slug": item.get("slug"), "title": title}
    title = getattr(item, "title", None)
    return {
        "slug": getattr(item, "slug", None),
        "title": getattr(title, "rendered", title),
    }


def _emit(diagnostic: Diagnostic, sink: Optional[Sink]) -> None:
    """Hand ``diagnostic`` to the sink; a failing sink never breaks the caller."""
    try:
        (sink or _default_sink)(diagnostic)
    except Exception as e:
        print(f"[WARNING] Could not record {diagnostic.code} - {diagnostic.slug or ''}: {e}")


def report_error(
    code: str,
    item: Any = None,
    exc: Optional[BaseException] = None,
    *,
    sink: Optional[Sink] = None,
    extra: Optional[Dict[str, Any]] = None,
) -> Diagnostic:
    """Report an error event for ``item``.

    Parameters
    ----------
    code:
        A key identifying the type of error.  If ``code`` is present in
        :data:`ERRORS` its value will be used as the message.
    item:
        The content item (model or raw dictionary) associated with the
        error.  Only its slug and rendered title are recorded.
    exc:
        Optional exception instance that triggered the error.  Its string
        representation is included in the entry.
    sink:
        Callable receiving the :class:`Diagnostic`.  Defaults to the
        module level :class:`JsonlReporter`.
    """
    diagnostic = Diagnostic(
        code=code,
        message=ERRORS.get(code, code),
        error=str(exc) if exc is not None else None,
        extra=dict(extra or {}),
        **_item_identity(item),
    )
    _emit(diagnostic, sink)
    return diagnostic


def report_ok(
    code: str,
    item: Any = None,
    extra: Optional[Dict[str, Any]] = None,
    *,
    sink: Optional[Sink] = None,
) -> Diagnostic:
    """Report a successful event for ``item``.

    Parameters
    ----------
    code:
        A key identifying the type of event.
    item:
        The content item associated with the event.
    extra:
        Optional dictionary of additional fields to merge into the entry.
    sink:
        Callable receiving the :class:`Diagnostic`.
    """
    diagnostic = Diagnostic(
        code=code,
        message=ERRORS.get(code, code),
        ok=True,
        extra=dict(extra or {}),
        **_item_identity(item),
    )
    _emit(diagnostic, sink)
    return diagnostic
