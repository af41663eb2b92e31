"""Data models produced by the crawl engine.

Pages reference each other purely by normalised URL string, so cycles in the
site's link structure never become cycles between Python objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, List, Tuple


@dataclass(frozen=True)
class CrawlTarget:
    url: str
    depth: int


@dataclass(frozen=True)
class Page:
    """A successfully fetched page.

    ``links`` holds the page's distinct outgoing same-host URLs in the order
    they were first seen.
    """

    url: str
    title: str
    links: Tuple[str, ...] = ()


@dataclass(frozen=True)
class CrawlFailure:
    """Operational note for a page that was visited but could not be used."""

    url: str
    depth: int
    reason: str


@dataclass
class CrawlResult:
    """Everything a single :func:`~flowmap.crawl.engine.crawl` call produced."""

    start_url: str
    pages: List[Page] = field(default_factory=list)
    visited: FrozenSet[str] = frozenset()
    failures: List[CrawlFailure] = field(default_factory=list)

    @property
    def crawled_count(self) -> int:
        return len(self.pages)

    def urls(self) -> List[str]:
        """Return page URLs in visitation order."""
        return [p.url for p in self.pages]
