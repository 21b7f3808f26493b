from map_test_utils import WINDING, WINDING_PATH, assert_valid_path, result_from_text
from tilesynth.grid import GenerationResult
from tilesynth.pathfinding import AStarPathfinder, BFSPathfinder


def test_open_grid_path(open_result):
    res = AStarPathfinder().find_path(open_result)
    assert res.length == 19
    assert res.coords()[0] == (0, 0) and res.coords()[-1] == (9, 9)
    assert_valid_path(open_result.grid, res.coords())


def test_goal_directed_search_expands_only_the_path(open_result):
    res = AStarPathfinder().find_path(open_result)
    assert len(res.visited) == 19
    assert res.visited_coords() == res.coords()


def test_explores_less_than_bfs(open_result):
    astar = AStarPathfinder().find_path(open_result)
    bfs = BFSPathfinder().find_path(open_result)
    assert len(astar.visited) < len(bfs.visited)
    assert astar.length == bfs.length


def test_visited_cells_are_unique(open_result):
    coords = AStarPathfinder().find_path(open_result).visited_coords()
    assert len(coords) == len(set(coords))


def test_winding_corridor():
    res = AStarPathfinder().find_path(result_from_text(WINDING))
    assert res.coords() == WINDING_PATH


def test_detour_around_wall():
    text = """
        .....
        .###.
        .#...
        .#.#.
        ...#.
    """
    result = result_from_text(text)
    astar = AStarPathfinder().find_path(result)
    bfs = BFSPathfinder().find_path(result)
    assert astar.length == bfs.length == 9
    assert_valid_path(result.grid, astar.coords())


def test_unreachable_end():
    res = AStarPathfinder().find_path(result_from_text("""
        .#.
        .#.
    """))
    assert res.path == []
    assert sorted(res.visited_coords()) == [(0, 0), (0, 1)]


def test_no_floor(wall_result):
    res = AStarPathfinder().find_path(wall_result)
    assert res.path == [] and res.visited == []


def test_single_floor_cell():
    res = AStarPathfinder().find_path(result_from_text("#.#"))
    assert res.coords() == [(1, 0)]
    assert len(res.visited) == 1


def test_no_grid_returns_empty():
    res = AStarPathfinder().find_path(GenerationResult())
    assert res.path == [] and res.visited == []
