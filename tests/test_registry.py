import random

import pytest

from tilesynth.errors import TilesynthError, UnknownAlgorithmError
from tilesynth.generators import GENERATORS, BSPGenerator, CaveGenerator, get_generator
from tilesynth.pathfinding import PATHFINDERS, AStarPathfinder, BFSPathfinder, get_pathfinder


def test_known_names():
    assert sorted(GENERATORS) == ['bsp', 'ca']
    assert sorted(PATHFINDERS) == ['astar', 'bfs']
    assert isinstance(get_generator('bsp'), BSPGenerator)
    assert isinstance(get_generator('ca'), CaveGenerator)
    assert isinstance(get_pathfinder('bfs'), BFSPathfinder)
    assert isinstance(get_pathfinder('astar'), AStarPathfinder)


def test_fresh_instances():
    assert get_generator('bsp') is not get_generator('bsp')
    assert get_pathfinder('bfs') is not get_pathfinder('bfs')


def test_rng_and_options_are_forwarded():
    rng = random.Random(1)
    gen = get_generator('ca', rng=rng, enable_metrics=False)
    assert gen.rng is rng
    assert gen.enable_metrics is False
    assert get_generator('bsp').rng is random


@pytest.mark.parametrize('lookup,name', [(get_generator, 'wfc'), (get_pathfinder, 'dijkstra')])
def test_unknown_names(lookup, name):
    with pytest.raises(UnknownAlgorithmError) as exc:
        lookup(name)
    err = exc.value
    assert isinstance(err, TilesynthError) and isinstance(err, KeyError)
    assert err.name == name
    assert name in str(err)
