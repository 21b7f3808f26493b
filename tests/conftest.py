import os
import random
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from tilesynth import logging_utils  # noqa: E402
from tilesynth.grid import FLOOR, WALL, GenerationResult, Grid  # noqa: E402

ENV_KEYS = (
    "TILESYNTH_DEFAULT_WIDTH",
    "TILESYNTH_DEFAULT_HEIGHT",
    "TILESYNTH_DEFAULT_ITERATIONS",
    "TILESYNTH_ENABLE_GENERATION_METRICS",
    "TILESYNTH_LOG_LEVEL",
    "TILESYNTH_LOG_JSON",
)


@pytest.fixture(autouse=True)
def _isolate_env_and_logging(monkeypatch):
    """Keep developer shell settings and CLI --log-level calls from leaking between tests."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(logging_utils, "CURRENT_LEVEL", logging_utils.LEVELS["warn"])
    monkeypatch.setattr(logging_utils, "JSON_MODE", False)
    yield


@pytest.fixture()
def rng():
    return random.Random(20240607)


@pytest.fixture()
def open_result():
    """10x10 grid with every cell FLOOR."""
    return GenerationResult(grid=Grid.filled(10, 10, FLOOR))


@pytest.fixture()
def wall_result():
    return GenerationResult(grid=Grid.filled(10, 10, WALL))
