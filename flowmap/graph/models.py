"""Graph models handed to the layout engine and the outer surfaces."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass(frozen=True)
class Position:
    x: float
    y: float


@dataclass
class Node:
    id: str
    label: str
    position: Optional[Position] = None

    def to_dict(self) -> dict[str, Any]:
        """Serialise for the API; unplaced nodes get a ``(0, 0)`` placeholder."""
        pos = self.position or Position(0.0, 0.0)
        return {"id": self.id, "label": self.label, "position": {"x": pos.x, "y": pos.y}}


@dataclass
class Edge:
    id: str
    source: str
    target: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "source": self.source, "target": self.target}


@dataclass
class Graph:
    nodes: List[Node] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)
