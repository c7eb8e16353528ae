import os
import sys

# Ensure project root is on sys.path for imports when running tests directly
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import json

from wp_content.utils.errors import ERRORS, Diagnostic, JsonlReporter, report_error, report_ok
from wp_content.models.content import ContentItem


def test_report_error_uses_known_message_and_item_identity():
    events = []
    item = ContentItem(slug="hello", title={"rendered": "Hello"})

    diagnostic = report_error("REDIRECT_FAILED", item, RuntimeError("boom"), sink=events.append)

    assert events == [diagnostic]
    assert diagnostic.message == ERRORS["REDIRECT_FAILED"]
    assert diagnostic.slug == "hello"
    assert diagnostic.title == "Hello"
    assert diagnostic.error == "boom"
    assert not diagnostic.ok


def test_unknown_code_falls_back_to_code():
    events = []
    report_ok("SOMETHING_NEW", {"slug": "raw", "title": {"rendered": "Raw"}}, sink=events.append)
    assert events[0].message == "SOMETHING_NEW"
    assert events[0].slug == "raw"
    assert events[0].title == "Raw"
    assert events[0].ok


def test_to_dict_merges_extra_and_drops_empty_error():
    diagnostic = Diagnostic(code="IMAGE_ATTACHED", message="m", ok=True, slug="a", extra={"image": "x.jpg"})
    assert diagnostic.to_dict() == {
        "code": "IMAGE_ATTACHED",
        "message": "m",
        "ok": True,
        "slug": "a",
        "title": None,
        "image": "x.jpg",
    }


def test_jsonl_reporter_writes_separate_logs(tmp_path, capsys):
    reporter = JsonlReporter(str(tmp_path / "reports"))

    report_error("MEDIA_FETCH", None, ValueError("nope"), sink=reporter, extra={"media_id": 3})
    report_ok("IMAGE_ATTACHED", {"slug": "a"}, {"image": "x.jpg"}, sink=reporter)

    errors = [json.loads(line) for line in open(reporter.error_log, encoding="utf-8")]
    oks = [json.loads(line) for line in open(reporter.ok_log, encoding="utf-8")]
    assert errors[0]["code"] == "MEDIA_FETCH"
    assert errors[0]["media_id"] == 3
    assert errors[0]["error"] == "nope"
    assert oks[0]["image"] == "x.jpg"

    out = capsys.readouterr().out
    assert "[ERROR] Failed to fetch media metadata" in out
    assert "[OK] Featured image attached - a" in out


def test_failing_sink_is_reported_not_raised(capsys):
    def broken_sink(diagnostic):
        raise OSError("disk full")

    diagnostic = report_error("REDIRECT_FAILED", {"slug": "a"}, RuntimeError("boom"), sink=broken_sink)

    assert diagnostic.code == "REDIRECT_FAILED"
    assert "[WARNING] Could not record REDIRECT_FAILED - a: disk full" in capsys.readouterr().out


def test_unwritable_report_dir_does_not_raise(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    reporter = JsonlReporter(str(blocker / "reports"))

    report_ok("IMAGE_ATTACHED", {"slug": "a"}, sink=reporter)

    assert not (blocker / "reports").exists()
