"""Graph package — noise filter, graph builder and layout."""

from flowmap.graph.builder import build_graph, truncate_label
from flowmap.graph.layout import layout_graph
from flowmap.graph.models import Edge, Graph, Node, Position
from flowmap.graph.noise import compute_boilerplate, link_frequency

__all__ = [
    "build_graph",
    "truncate_label",
    "layout_graph",
    "compute_boilerplate",
    "link_frequency",
    "Graph",
    "Node",
    "Edge",
    "Position",
]
