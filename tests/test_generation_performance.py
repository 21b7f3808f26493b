import random
import time

import pytest

from tilesynth.generators import get_generator
from tilesynth.grid import GenerationParams
from tilesynth.pathfinding import AStarPathfinder, BFSPathfinder

# Simple performance guardrail. Not a strict micro-benchmark; aims to catch large regressions.
# Adjust thresholds if CI hardware differs significantly.


@pytest.mark.performance
@pytest.mark.parametrize('algorithm', ['bsp', 'ca'])
def test_largest_maps_generate_and_solve_quickly(algorithm):
    params = GenerationParams(width=1000, height=1000, iterations=8 if algorithm == 'bsp' else 5)
    seeds = [10101, 20202, 30303]
    max_seconds_per = 3.0  # generous threshold; tune as needed
    timings = []
    for s in seeds:
        start = time.perf_counter()
        result = get_generator(algorithm, rng=random.Random(s)).generate(params)
        BFSPathfinder().find_path(result)
        AStarPathfinder().find_path(result)
        elapsed = time.perf_counter() - start
        timings.append(elapsed)
        assert result.grid is not None
        assert elapsed < max_seconds_per, f"Seed {s} took {elapsed:.3f}s (> {max_seconds_per}s)"
    avg = sum(timings) / len(timings)
    assert avg < max_seconds_per * 0.85, f"Average generate+solve {avg:.3f}s too high"
