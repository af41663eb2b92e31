"""FIFO crawl frontier with a visited set."""

from __future__ import annotations

from collections import deque
from typing import Deque, FrozenSet, Set

from flowmap.crawl.models import CrawlTarget


class Frontier:
    """Breadth-first work queue for a single crawl.

    A URL may sit in the queue more than once (it can be discovered from
    several pages before it is dequeued); :meth:`is_visited` is what stops it
    from being processed twice.
    """

    def __init__(self, start_url: str) -> None:
        self._queue: Deque[CrawlTarget] = deque([CrawlTarget(url=start_url, depth=0)])
        self._visited: Set[str] = set()

    def __len__(self) -> int:
        return len(self._queue)

    def __bool__(self) -> bool:
        return bool(self._queue)

    def push(self, url: str, depth: int) -> None:
        self._queue.append(CrawlTarget(url=url, depth=depth))

    def pop(self) -> CrawlTarget:
        return self._queue.popleft()

    def mark_visited(self, url: str) -> None:
        self._visited.add(url)

    def is_visited(self, url: str) -> bool:
        return url in self._visited

    @property
    def visited(self) -> FrozenSet[str]:
        return frozenset(self._visited)
