import os
import sys
import threading
import time

# Ensure project root is on sys.path for imports when running tests directly
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from wp_content.models.content import ContentItem
from wp_content.resolvers.images import add_images_to_posts
from wp_content.resolvers.redirects import detect_redirects
from wp_content.utils.concurrency import run_concurrently


def test_all_tasks_are_in_flight_together():
    items = list(range(6))
    barrier = threading.Barrier(len(items), timeout=5)

    def task(value):
        # Raises BrokenBarrierError unless every task is running at once.
        barrier.wait()
        return value * 2

    assert run_concurrently(task, items) == [0, 2, 4, 6, 8, 10]


def test_results_keep_input_order_when_tasks_finish_out_of_order():
    delays = [0.2, 0.15, 0.1, 0.05, 0.0]

    def task(delay):
        time.sleep(delay)
        return delay

    assert run_concurrently(task, delays) == delays


def test_max_workers_bounds_tasks_in_flight():
    lock = threading.Lock()
    state = {"running": 0, "peak": 0}

    def task(value):
        with lock:
            state["running"] += 1
            state["peak"] = max(state["peak"], state["running"])
        time.sleep(0.05)
        with lock:
            state["running"] -= 1
        return value

    assert run_concurrently(task, list(range(8)), max_workers=2) == list(range(8))
    assert state["peak"] <= 2


def test_empty_input_runs_nothing():
    assert run_concurrently(lambda value: value, []) == []


def test_redirect_lookups_run_concurrently():
    items = [
        ContentItem(slug=f"old-{n}", link=f"https://x/new-{n}/", title={"rendered": f"T{n}"})
        for n in range(4)
    ]
    barrier = threading.Barrier(len(items), timeout=5)

    def lookup(slug):
        barrier.wait()
        return [{"slug": slug}]

    events = []
    result = detect_redirects(items, lookup, sink=events.append)

    assert [r.slug for r in result] == ["new-0", "new-1", "new-2", "new-3"]
    assert [r.title.rendered for r in result] == ["T0", "T1", "T2", "T3"]
    assert not [e for e in events if not e.ok]


def test_media_lookups_run_concurrently():
    items = [ContentItem(slug=f"p{n}", featured_media=n + 1) for n in range(3)]
    barrier = threading.Barrier(len(items), timeout=5)

    def fetch(path):
        barrier.wait()
        return [{"media_details": {"sizes": {"full": {"source_url": f"https://x/{path}.jpg"}}}}]

    result = add_images_to_posts(items, fetch, sink=lambda d: None)

    assert [r.image for r in result] == [
        "https://x/media/1.jpg",
        "https://x/media/2.jpg",
        "https://x/media/3.jpg",
    ]
