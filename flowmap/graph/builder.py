"""Convert crawled pages into a node/edge graph."""

from __future__ import annotations

from typing import AbstractSet, List, Optional

from flowmap.config import settings
from flowmap.crawl.models import Page
from flowmap.graph.models import Edge, Graph, Node


def truncate_label(title: str, limit: Optional[int] = None) -> str:
    """Cut *title* to *limit* characters, appending ``...`` only if it was cut."""
    if limit is None:
        limit = settings.label_max_length
    if len(title) > limit:
        return title[:limit] + "..."
    return title


def edge_id(source: str, target: str) -> str:
    return f"{source}->{target}"


def build_graph(pages: List[Page], boilerplate: AbstractSet[str]) -> Graph:
    """Build a :class:`Graph` from *pages*.

    Every page becomes a node.  An edge ``P -> L`` is emitted only when ``L``
    is itself one of *pages* (links to pages that were never fetched produce
    no dangling edge) and ``L`` is not in *boilerplate*.  Node and edge order
    follow page visitation order, then link order within a page.
    """
    crawled = {page.url for page in pages}
    nodes = [Node(id=page.url, label=truncate_label(page.title)) for page in pages]

    edges: List[Edge] = []
    seen: set[str] = set()
    for page in pages:
        for target in page.links:
            if target not in crawled or target in boilerplate:
                continue
            eid = edge_id(page.url, target)
            if eid in seen:
                continue
            seen.add(eid)
            edges.append(Edge(id=eid, source=page.url, target=target))

    return Graph(nodes=nodes, edges=edges)
