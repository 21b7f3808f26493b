import random

import pytest

from tilesynth.generators import BSPGenerator, CaveGenerator
from tilesynth.grid import FLOOR, WALL, GenerationParams

BASE_KEYS = {'grid_width', 'grid_height', 'tiles_floor', 'tiles_wall', 'runtime_ms', 'phase_ms'}


def test_bsp_metrics():
    res = BSPGenerator(rng=random.Random(5)).generate(GenerationParams(width=600, height=400, iterations=5))
    m = res.metrics
    assert BASE_KEYS <= set(m)
    assert set(m['phase_ms']) == {'split', 'rooms', 'corridors'}
    assert m['grid_width'] == 150 and m['grid_height'] == 100
    assert m['tiles_floor'] == res.grid.count(FLOOR)
    assert m['tiles_floor'] + m['tiles_wall'] == 150 * 100
    assert m['rooms'] + m['roomless_leaves'] == m['leaves']
    assert 1 <= m['tree_depth'] <= 5
    assert m['corridors'] <= m['leaves'] - 1


def test_cave_metrics():
    res = CaveGenerator(rng=random.Random(5)).generate(GenerationParams(width=600, height=400, iterations=5))
    m = res.metrics
    assert BASE_KEYS <= set(m)
    assert set(m['phase_ms']) == {'initialize', 'simulate', 'connectivity', 'center'}
    assert m['tiles_wall'] == res.grid.count(WALL)
    assert m['largest_region'] == m['tiles_floor']
    assert isinstance(m['runtime_ms'], int)


@pytest.mark.parametrize('cls', [BSPGenerator, CaveGenerator])
def test_metrics_disabled_by_env(monkeypatch, cls):
    monkeypatch.setenv('TILESYNTH_ENABLE_GENERATION_METRICS', '0')
    res = cls().generate(GenerationParams(width=200, height=200, iterations=3))
    assert res.metrics == {}
    assert res.grid is not None


@pytest.mark.parametrize('cls', [BSPGenerator, CaveGenerator])
def test_metrics_disabled_by_argument(cls):
    res = cls(enable_metrics=False).generate(GenerationParams(width=200, height=200, iterations=3))
    assert res.metrics == {}
