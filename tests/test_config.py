import pytest

from tilesynth.errors import InvalidParamsError
from tilesynth.grid.config import (
    DEFAULT_HEIGHT,
    DEFAULT_ITERATIONS,
    DEFAULT_WIDTH,
    GenerationParams,
    env_flag,
)


def test_defaults():
    p = GenerationParams()
    assert (p.width, p.height, p.iterations) == (DEFAULT_WIDTH, DEFAULT_HEIGHT, DEFAULT_ITERATIONS)
    assert p.smoothing == 0 and p.seed is None


def test_env_overrides_defaults(monkeypatch):
    monkeypatch.setenv("TILESYNTH_DEFAULT_WIDTH", "320")
    monkeypatch.setenv("TILESYNTH_DEFAULT_ITERATIONS", "3")
    monkeypatch.setenv("TILESYNTH_DEFAULT_HEIGHT", "not-a-number")
    p = GenerationParams()
    assert p.width == 320
    assert p.iterations == 3
    assert p.height == DEFAULT_HEIGHT


def test_from_mapping_ignores_unknown_keys():
    p = GenerationParams.from_mapping({"width": 200, "height": 100, "colour": "red"})
    assert (p.width, p.height) == (200, 100)


@pytest.mark.parametrize(
    "kwargs,field,code",
    [
        ({"width": -1}, "width", "min"),
        ({"height": "10"}, "height", "type"),
        ({"iterations": True}, "iterations", "type"),
        ({"seed": 1.5}, "seed", "type"),
    ],
)
def test_validate_errors(kwargs, field, code):
    with pytest.raises(InvalidParamsError) as exc:
        GenerationParams(**kwargs).validate()
    assert exc.value.field == field
    assert exc.value.code == code
    assert exc.value.to_dict()["field"] == field


def test_validate_returns_self():
    p = GenerationParams(width=0, height=0, iterations=0)
    assert p.validate() is p


def test_clamped_ranges():
    p = GenerationParams(width=5000, height=10, iterations=50)
    bsp = p.clamped("bsp")
    assert (bsp.width, bsp.height, bsp.iterations) == (1000, 100, 8)
    ca = p.clamped("ca")
    assert ca.iterations == 20
    # original untouched
    assert p.width == 5000


def test_env_flag(monkeypatch):
    assert env_flag("TILESYNTH_ENABLE_GENERATION_METRICS", True) is True
    monkeypatch.setenv("TILESYNTH_ENABLE_GENERATION_METRICS", "no")
    assert env_flag("TILESYNTH_ENABLE_GENERATION_METRICS", True) is False
    monkeypatch.setenv("TILESYNTH_ENABLE_GENERATION_METRICS", "1")
    assert env_flag("TILESYNTH_ENABLE_GENERATION_METRICS", False) is True
