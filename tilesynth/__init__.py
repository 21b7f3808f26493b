"""
project: tilesynth
module: __init__.py
License: MIT

Procedural tile maps and grid path search.

Two generators turn :class:`GenerationParams` into a :class:`Grid`
(``bsp`` rooms and corridors, ``ca`` cellular-automata caves) and two solvers
walk the result from its first to its last floor cell (``bfs`` and ``astar``).
Everything is synchronous and allocates fresh state per call.
"""

from .errors import InvalidParamsError, TilesynthError, UnknownAlgorithmError  # noqa: F401
from .generators import BSPGenerator, CaveGenerator, get_generator  # noqa: F401
from .grid import (  # noqa: F401
    FLOOR,
    WALL,
    Edge,
    GenerationParams,
    GenerationResult,
    Grid,
    Node,
    PathResult,
)
from .pathfinding import AStarPathfinder, BFSPathfinder, get_pathfinder  # noqa: F401

__version__ = "0.2.0"

__all__ = [
    "AStarPathfinder",
    "BFSPathfinder",
    "BSPGenerator",
    "CaveGenerator",
    "Edge",
    "FLOOR",
    "GenerationParams",
    "GenerationResult",
    "Grid",
    "InvalidParamsError",
    "Node",
    "PathResult",
    "TilesynthError",
    "UnknownAlgorithmError",
    "WALL",
    "get_generator",
    "get_pathfinder",
    "__version__",
]
