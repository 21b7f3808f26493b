"""Grid solvers keyed by algorithm name (``bfs``, ``astar``)."""

from __future__ import annotations

from typing import Dict, Type

from ..errors import UnknownAlgorithmError
from .astar import AStarPathfinder
from .base import BasePathfinder
from .bfs import BFSPathfinder
from .endpoints import find_endpoints, manhattan

PATHFINDERS: Dict[str, Type[BasePathfinder]] = {
    BFSPathfinder.name: BFSPathfinder,
    AStarPathfinder.name: AStarPathfinder,
}


def get_pathfinder(name: str) -> BasePathfinder:
    try:
        return PATHFINDERS[name]()
    except KeyError:
        raise UnknownAlgorithmError("solver", name, PATHFINDERS) from None


__all__ = [
    "AStarPathfinder",
    "BFSPathfinder",
    "BasePathfinder",
    "PATHFINDERS",
    "find_endpoints",
    "get_pathfinder",
    "manhattan",
]
