"""Top-to-bottom layered layout for a crawl graph.

Ranks are breadth-first distances from the root page over the (already
filtered) edges, so the seed sits on top and each navigation step moves one
rank down.  A fresh ``networkx.DiGraph`` is built per call; nothing is shared
between invocations.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, List, Optional

import networkx as nx

from flowmap.config import settings
from flowmap.graph.models import Graph, Position


def _to_digraph(graph: Graph) -> nx.DiGraph:
    g = nx.DiGraph()
    g.add_nodes_from(node.id for node in graph.nodes)
    g.add_edges_from((edge.source, edge.target) for edge in graph.edges)
    return g


def _ranks(graph: Graph, root: str) -> List[List[str]]:
    """Return node ids grouped by rank, unreachable nodes in a final rank."""
    layers = [list(layer) for layer in nx.bfs_layers(_to_digraph(graph), [root])]
    placed = {node_id for layer in layers for node_id in layer}
    orphans = [node.id for node in graph.nodes if node.id not in placed]
    if orphans:
        layers.append(orphans)
    return layers


def layout_graph(
    graph: Graph,
    root: Optional[str] = None,
    *,
    node_width: Optional[int] = None,
    node_height: Optional[int] = None,
) -> Graph:
    """Return a copy of *graph* with every node's ``position`` filled in.

    Args:
        graph: The graph to place.  It is not modified.
        root: Node id for the top rank; defaults to the first node (the seed).
        node_width: Node box width in pixels; siblings are spaced 1.5x apart.
        node_height: Node box height in pixels; ranks are spaced 3x apart.

    Raises:
        ValueError: If *root* is not a node of *graph*.
    """
    if not graph.nodes:
        return Graph(nodes=[], edges=list(graph.edges))

    width = settings.node_width if node_width is None else node_width
    height = settings.node_height if node_height is None else node_height
    root = root or graph.nodes[0].id
    if root not in {node.id for node in graph.nodes}:
        raise ValueError(f"Root {root!r} is not a node of the graph")

    col_gap = width * 1.5
    rank_gap = height * 3

    layers = _ranks(graph, root)
    widest = max(len(layer) for layer in layers)

    positions: Dict[str, Position] = {}
    for rank, layer in enumerate(layers):
        # centre each rank under the widest one
        offset = (widest - len(layer)) * col_gap / 2
        for i, node_id in enumerate(layer):
            positions[node_id] = Position(x=offset + i * col_gap, y=rank * rank_gap)

    nodes = [replace(node, position=positions[node.id]) for node in graph.nodes]
    return Graph(nodes=nodes, edges=list(graph.edges))
