"""Public grid model interface.

Shared data contracts consumed by generators, pathfinders and callers.
"""

from .cells import Coord2D, Edge, Node  # noqa: F401
from .config import GenerationParams  # noqa: F401
from .grid import Grid  # noqa: F401
from .results import GenerationResult, PathResult  # noqa: F401
from .tiles import FLOOR, WALL  # noqa: F401

__all__ = [
    "Coord2D",
    "Edge",
    "Node",
    "GenerationParams",
    "Grid",
    "GenerationResult",
    "PathResult",
    "FLOOR",
    "WALL",
]
