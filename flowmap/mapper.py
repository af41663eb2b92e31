"""Site-map pipeline.

``map_site`` orchestrates the full pipeline from a seed URL to a graph:

    crawl → count link frequencies → pick boilerplate → build graph
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional

from flowmap.crawl.engine import Extractor, Fetcher, crawl
from flowmap.crawl.models import CrawlFailure
from flowmap.errors import EmptyResult
from flowmap.graph.builder import build_graph
from flowmap.graph.models import Graph
from flowmap.graph.noise import compute_boilerplate


@dataclass
class SiteMap:
    start_url: str
    graph: Graph
    crawled_count: int
    boilerplate: FrozenSet[str] = frozenset()
    failures: List[CrawlFailure] = field(default_factory=list)

    def to_payload(self) -> dict:
        """Return the ``{nodes, edges, crawledCount}`` response body."""
        return {
            "nodes": [n.to_dict() for n in self.graph.nodes],
            "edges": [e.to_dict() for e in self.graph.edges],
            "crawledCount": self.crawled_count,
        }


async def map_site(
    start_url: Optional[str],
    max_depth: Optional[int] = None,
    *,
    threshold: Optional[float] = None,
    max_pages: Optional[int] = None,
    timeout: Optional[float] = None,
    fetcher: Optional[Fetcher] = None,
    extractor: Optional[Extractor] = None,
) -> SiteMap:
    """Crawl *start_url* and return its navigation graph.

    Args:
        start_url: Seed URL.
        max_depth: Link hops from the seed; ``None`` uses the configured default.
        threshold: Boilerplate ratio; ``None`` uses the configured default.
        max_pages: Page cap; ``None`` uses the configured default.
        timeout: Per-fetch timeout in seconds.
        fetcher: Optional page fetcher override (see :func:`crawl`).
        extractor: Optional link extractor override (see :func:`crawl`).

    Raises:
        InvalidInput: If the seed or a bound is unusable.
        EmptyResult: If not a single page could be fetched.
    """
    result = await crawl(
        start_url,
        max_depth,
        max_pages=max_pages,
        timeout=timeout,
        fetcher=fetcher,
        extractor=extractor,
    )
    if not result.pages:
        raise EmptyResult(result)

    boilerplate = compute_boilerplate(result.pages, threshold)
    graph = build_graph(result.pages, boilerplate)
    return SiteMap(
        start_url=result.start_url,
        graph=graph,
        crawled_count=result.crawled_count,
        boilerplate=boilerplate,
        failures=list(result.failures),
    )
