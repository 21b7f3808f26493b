from dataclasses import dataclass
from typing import Optional, Tuple

Coord2D = Tuple[int, int]

NODE_TYPES = ("room", "corridor", "cell")


@dataclass(frozen=True)
class Node:
    """Coordinate reference used as legacy graph vertex and as path/visited element."""

    id: str
    x: int
    y: int
    width: Optional[int] = None
    height: Optional[int] = None
    type: str = "cell"
    active: bool = False

    def __post_init__(self):
        if self.type not in NODE_TYPES:
            raise ValueError(f"node type must be one of {NODE_TYPES}, got {self.type!r}")

    @property
    def coord(self) -> Coord2D:
        return (self.x, self.y)

    def to_dict(self):
        d = {"id": self.id, "x": self.x, "y": self.y, "type": self.type, "active": self.active}
        if self.width is not None:
            d["width"] = self.width
        if self.height is not None:
            d["height"] = self.height
        return d


@dataclass(frozen=True)
class Edge:
    source: str
    target: str

    def to_dict(self):
        return {"source": self.source, "target": self.target}


def path_node(x: int, y: int) -> Node:
    return Node(id=f"p-{x}-{y}", x=x, y=y, type="cell", active=True)


def visited_node(x: int, y: int) -> Node:
    return Node(id=f"v-{x}-{y}", x=x, y=y, type="cell", active=False)


__all__ = ["Coord2D", "NODE_TYPES", "Node", "Edge", "path_node", "visited_node"]
