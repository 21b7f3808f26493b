from map_test_utils import WINDING, result_from_text
from tilesynth.diagnostics import analyze, path_overlay, render_text
from tilesynth.grid import GenerationResult
from tilesynth.pathfinding import BFSPathfinder


def test_analyze_open_grid(open_result):
    report = analyze(open_result)
    assert report['grid'] == [10, 10]
    assert report['tiles_floor'] == 100
    assert report['floor_regions'] == 1
    assert report['start'] == [0, 0] and report['end'] == [9, 9]
    assert report['bfs_length'] == report['astar_length'] == 19
    assert report['bfs_visited'] == 100 and report['astar_visited'] == 19
    assert report['ok'] is True


def test_analyze_without_floor(wall_result):
    report = analyze(wall_result)
    assert report['tiles_floor'] == 0
    assert report['start'] is None and report['end'] is None
    assert report['ok'] is True


def test_analyze_without_grid():
    assert analyze(GenerationResult(algorithm='bsp')) == {'algorithm': 'bsp', 'grid': None, 'ok': True}


def test_render_path():
    result = result_from_text(WINDING)
    path = BFSPathfinder().find_path(result)
    assert render_text(result, path).splitlines() == ['S#***', '*#*#*', '***#E']


def test_render_visited_without_path():
    result = result_from_text("""
        ..#..
        ..#..
    """)
    path = BFSPathfinder().find_path(result)
    assert render_text(result, path, show_visited=True).splitlines() == ['oo#..', 'oo#..']
    assert render_text(result, path).splitlines() == ['..#..', '..#..']


def test_overlay_endpoints_override_path():
    result = result_from_text('...')
    overlay = path_overlay(BFSPathfinder().find_path(result))
    assert overlay == {(0, 0): 'S', (1, 0): '*', (2, 0): 'E'}


def test_render_without_grid():
    assert render_text(GenerationResult()) == ''
