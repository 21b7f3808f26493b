from typing import Dict

from .grid import Grid
from .tiles import FLOOR, WALL


def init_metrics() -> Dict[str, int | float | dict]:
    return {
        'grid_width': 0,
        'grid_height': 0,
        'tiles_floor': 0,
        'tiles_wall': 0,
        'runtime_ms': 0.0,
        'phase_ms': {},
    }


def record_tile_counts(metrics: Dict, grid: Grid) -> None:
    metrics['grid_width'] = grid.width
    metrics['grid_height'] = grid.height
    metrics['tiles_floor'] = grid.count(FLOOR)
    metrics['tiles_wall'] = grid.count(WALL)
