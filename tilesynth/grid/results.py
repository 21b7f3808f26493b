from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .cells import Coord2D, Edge, Node
from .grid import Grid


@dataclass
class GenerationResult:
    """Output of a generator.

    ``nodes``/``edges`` form the legacy room graph; current generators leave
    them empty and populate ``grid`` only.
    """

    nodes: List[Node] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)
    grid: Optional[Grid] = None
    algorithm: str = ""
    metrics: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "algorithm": self.algorithm,
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
            "grid": self.grid.to_lists() if self.grid is not None else None,
            "metrics": dict(self.metrics),
        }


@dataclass
class PathResult:
    path: List[Node] = field(default_factory=list)
    visited: List[Node] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return bool(self.path)

    @property
    def length(self) -> int:
        return len(self.path)

    def coords(self) -> List[Coord2D]:
        return [n.coord for n in self.path]

    def visited_coords(self) -> List[Coord2D]:
        return [n.coord for n in self.visited]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": [n.to_dict() for n in self.path],
            "visited": [n.to_dict() for n in self.visited],
        }


__all__ = ["GenerationResult", "PathResult"]
