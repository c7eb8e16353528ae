from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Sequence, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def run_concurrently(
    fn: Callable[[T], R], items: Sequence[T], max_workers: Optional[int] = None
) -> List[R]:
    """
    Apply ``fn`` to every item on a thread pool and wait for all of them.

    Results come back in input order.  With ``max_workers=None`` every item
    gets its own worker; pass an integer to bound the number of requests
    in flight.  Exceptions raised by ``fn`` propagate, so callers that must
    not fail wrap their per-item work themselves.
    """
    if not items:
        return []
    workers = max(1, max_workers or len(items))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(fn, items))
