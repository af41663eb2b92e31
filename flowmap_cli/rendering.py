"""Utilities for rendering crawl graphs in the CLI."""

from __future__ import annotations

from typing import Dict, List

from flowmap.graph.models import Graph
from flowmap.mapper import SiteMap


def render_tree(graph: Graph, root_id: str) -> str:
    """Render *graph* as an ASCII tree hanging from *root_id*.

    Each node is drawn once, under the first parent that reaches it; nodes
    not reachable through the filtered edges are listed after the tree.

    Args:
        graph: Graph produced by the site mapper.
        root_id: Node id of the seed page.

    Returns:
        String representation of the tree.
    """
    adj: Dict[str, List[str]] = {}
    for e in graph.edges:
        adj.setdefault(e.source, []).append(e.target)

    labels = {n.id: n.label for n in graph.nodes}
    lines: List[str] = []
    visited: set[str] = set()

    def _render_node(node_id: str, prefix: str, is_last: bool, is_root: bool) -> None:
        visited.add(node_id)
        label = labels.get(node_id, node_id)

        if is_root:
            lines.append(f"{label} <{node_id}>")
            child_prefix = ""
        else:
            connector = "└── " if is_last else "├── "
            lines.append(f"{prefix}{connector}{label} <{node_id}>")
            child_prefix = prefix + ("    " if is_last else "│   ")

        # Claim children before descending so siblings are not re-drawn deeper down.
        children = [c for c in adj.get(node_id, []) if c not in visited]
        visited.update(children)
        for i, child_id in enumerate(children):
            _render_node(child_id, child_prefix, i == len(children) - 1, False)

    if root_id not in labels:
        return "Root node not found in graph."

    _render_node(root_id, "", True, True)

    orphans = [n for n in graph.nodes if n.id not in visited]
    if orphans:
        lines.append("")
        lines.append("Unlinked pages:")
        for n in orphans:
            lines.append(f"  {n.label} <{n.id}>")

    return "\n".join(lines)


def render_list(site: SiteMap) -> str:
    """Render nodes, edges, boilerplate links and failures as flat sections."""
    lines = [f"Pages ({site.crawled_count}):"]
    lines += [f"  {n.label} <{n.id}>" for n in site.graph.nodes]

    lines.append(f"Edges ({len(site.graph.edges)}):")
    lines += [f"  {e.source} --> {e.target}" for e in site.graph.edges]

    if site.boilerplate:
        lines.append(f"Boilerplate links ({len(site.boilerplate)}):")
        lines += [f"  {url}" for url in sorted(site.boilerplate)]

    if site.failures:
        lines.append(f"Failed pages ({len(site.failures)}):")
        lines += [f"  {f.url}: {f.reason}" for f in site.failures]

    return "\n".join(lines)
