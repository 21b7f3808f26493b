from __future__ import annotations

from typing import List

from ..grid.cells import Coord2D, Node, path_node
from ..grid.grid import Grid
from ..grid.results import GenerationResult, PathResult
from ..logging_utils import get_logger
from .endpoints import find_endpoints

log = get_logger(__name__)

NO_PARENT = -1


class BasePathfinder:
    name = ""

    def find_path(self, result: GenerationResult) -> PathResult:
        grid = result.grid
        if grid is None:
            return self._solve_without_grid(result)
        start, end = find_endpoints(grid)
        if start is None or end is None:
            return PathResult([], [])
        out = self._solve_grid(grid, start, end)
        log.debug(event="solve", solver=self.name, start=f"{start[0]},{start[1]}",
                  end=f"{end[0]},{end[1]}", path=len(out.path), visited=len(out.visited))
        return out

    def _solve_without_grid(self, result: GenerationResult) -> PathResult:
        log.warn(event="solve_skipped", solver=self.name, reason="no_grid")
        return PathResult([], [])

    def _solve_grid(self, grid: Grid, start: Coord2D, end: Coord2D) -> PathResult:
        raise NotImplementedError


def walk_parents(grid: Grid, parent: List[int], start: Coord2D, end: Coord2D) -> List[Node]:
    """Follow a flat parent table from ``end`` back to ``start``; ``start`` is always included."""
    si = grid.index(*start)
    cur = grid.index(*end)
    chain: List[Node] = []
    while cur != si and cur != NO_PARENT:
        chain.append(path_node(*grid.coord(cur)))
        cur = parent[cur]
    chain.append(path_node(*start))
    chain.reverse()
    return chain


__all__ = ["BasePathfinder", "NO_PARENT", "walk_parents"]
