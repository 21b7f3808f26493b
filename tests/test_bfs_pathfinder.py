from map_test_utils import WINDING, WINDING_PATH, assert_valid_path, result_from_text
from tilesynth.grid import GenerationResult
from tilesynth.pathfinding import BFSPathfinder


def test_open_grid_path(open_result):
    res = BFSPathfinder().find_path(open_result)
    assert res.found
    assert res.length == 19
    coords = res.coords()
    assert coords[0] == (0, 0) and coords[-1] == (9, 9)
    assert_valid_path(open_result.grid, coords)


def test_open_grid_visits_every_cell_before_far_corner(open_result):
    res = BFSPathfinder().find_path(open_result)
    assert len(res.visited) == 100
    assert res.visited_coords()[0] == (0, 0)
    assert res.visited_coords()[-1] == (9, 9)


def test_visited_follows_neighbour_order(open_result):
    res = BFSPathfinder().find_path(open_result)
    # +x is enqueued before +y
    assert res.visited_coords()[:3] == [(0, 0), (1, 0), (0, 1)]


def test_node_shapes(open_result):
    res = BFSPathfinder().find_path(open_result)
    first = res.path[0]
    assert first.id == "p-0-0" and first.active and first.type == "cell"
    assert all(n.id.startswith("v-") and not n.active for n in res.visited)


def test_winding_corridor():
    res = BFSPathfinder().find_path(result_from_text(WINDING))
    assert res.coords() == WINDING_PATH


def test_unreachable_end_reports_visited_region():
    res = BFSPathfinder().find_path(result_from_text("""
        ..#..
        ..#..
        ..#..
    """))
    assert res.path == []
    assert not res.found
    assert sorted(res.visited_coords()) == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]


def test_no_floor(wall_result):
    res = BFSPathfinder().find_path(wall_result)
    assert res.path == [] and res.visited == []


def test_single_floor_cell():
    res = BFSPathfinder().find_path(result_from_text("""
        ###
        #.#
        ###
    """))
    assert res.coords() == [(1, 1)]
    assert res.visited_coords() == [(1, 1)]


def test_no_grid_and_no_nodes():
    res = BFSPathfinder().find_path(GenerationResult())
    assert res.path == [] and res.visited == []


def test_fresh_result_each_call(open_result):
    bfs = BFSPathfinder()
    a = bfs.find_path(open_result)
    b = bfs.find_path(open_result)
    assert a == b
    assert a is not b and a.path is not b.path
