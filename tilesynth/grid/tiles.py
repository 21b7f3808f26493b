# Tile constants centralized for modular imports
FLOOR = 0
WALL = 1

# Text dump characters (diagnostics and test fixtures)
FLOOR_CHAR = "."
WALL_CHAR = "#"
VISITED_CHAR = "o"
PATH_CHAR = "*"
START_CHAR = "S"
END_CHAR = "E"

CHAR_MAP = {FLOOR: FLOOR_CHAR, WALL: WALL_CHAR}
TILE_FROM_CHAR = {FLOOR_CHAR: FLOOR, WALL_CHAR: WALL}

__all__ = [
    "FLOOR",
    "WALL",
    "FLOOR_CHAR",
    "WALL_CHAR",
    "VISITED_CHAR",
    "PATH_CHAR",
    "START_CHAR",
    "END_CHAR",
    "CHAR_MAP",
    "TILE_FROM_CHAR",
]
