"""Structural diagnostics for generated maps.

``analyze`` summarises one :class:`GenerationResult`: floor coverage, number
of disconnected floor pockets, endpoints and the BFS/A* path lengths. The
``ok`` flag is False only when the two solvers disagree on length, which
would indicate a search bug rather than an unlucky map.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from .grid.cells import Coord2D
from .grid.connectivity import floor_regions
from .grid.results import GenerationResult, PathResult
from .grid.tiles import END_CHAR, FLOOR, PATH_CHAR, START_CHAR, VISITED_CHAR
from .pathfinding import AStarPathfinder, BFSPathfinder, find_endpoints


def analyze(result: GenerationResult) -> Dict[str, Any]:
    grid = result.grid
    if grid is None:
        return {"algorithm": result.algorithm, "grid": None, "ok": True}
    regions = floor_regions(grid)
    start, end = find_endpoints(grid)
    bfs = BFSPathfinder().find_path(result)
    astar = AStarPathfinder().find_path(result)
    return {
        "algorithm": result.algorithm,
        "grid": [grid.width, grid.height],
        "tiles_floor": grid.count(FLOOR),
        "floor_regions": len(regions),
        "largest_region": max((len(r) for r in regions), default=0),
        "roomless_leaves": result.metrics.get("roomless_leaves"),
        "start": list(start) if start else None,
        "end": list(end) if end else None,
        "bfs_length": bfs.length,
        "bfs_visited": len(bfs.visited),
        "astar_length": astar.length,
        "astar_visited": len(astar.visited),
        "ok": bfs.length == astar.length,
    }


def path_overlay(path: PathResult, show_visited: bool = False) -> Dict[Coord2D, str]:
    """Characters to lay over ``Grid.to_text`` for a solved path."""
    overlay: Dict[Coord2D, str] = {}
    if show_visited:
        for c in path.visited_coords():
            overlay[c] = VISITED_CHAR
    coords = path.coords()
    for c in coords:
        overlay[c] = PATH_CHAR
    if coords:
        overlay[coords[0]] = START_CHAR
        overlay[coords[-1]] = END_CHAR
    return overlay


def render_text(result: GenerationResult, path: Optional[PathResult] = None, show_visited: bool = False) -> str:
    if result.grid is None:
        return ""
    overlay = path_overlay(path, show_visited) if path is not None else None
    return result.grid.to_text(overlay)


__all__ = ["analyze", "path_overlay", "render_text"]
