import os
from dataclasses import asdict, dataclass, field, replace
from typing import Any, Dict, Mapping, Optional, Tuple

from ..errors import InvalidParamsError

DEFAULT_WIDTH = 600
DEFAULT_HEIGHT = 400
DEFAULT_ITERATIONS = 5

# Slider ranges offered to callers; generators themselves accept any size.
EXTENT_RANGE: Tuple[int, int] = (100, 1000)
ITERATION_RANGES: Dict[str, Tuple[int, int]] = {"bsp": (1, 8), "ca": (1, 20)}


def env_flag(name: str, default: bool) -> bool:
    if name not in os.environ:
        return default
    return os.environ.get(name, "").lower() not in {"0", "false", "no", ""}


def _env_int(name: str, default: int):
    def factory() -> int:
        raw = os.getenv(name)
        if raw is None or raw.strip() == "":
            return default
        try:
            return int(raw)
        except ValueError:
            return default

    return factory


@dataclass
class GenerationParams:
    width: int = field(default_factory=_env_int("TILESYNTH_DEFAULT_WIDTH", DEFAULT_WIDTH))
    height: int = field(default_factory=_env_int("TILESYNTH_DEFAULT_HEIGHT", DEFAULT_HEIGHT))
    iterations: int = field(default_factory=_env_int("TILESYNTH_DEFAULT_ITERATIONS", DEFAULT_ITERATIONS))
    smoothing: int = 0  # accepted for interface parity; no generator reads it
    seed: Optional[int] = None  # accepted for interface parity; generation is not seeded

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "GenerationParams":
        known = {k: data[k] for k in ("width", "height", "iterations", "smoothing", "seed") if k in data}
        return cls(**known)

    def validate(self) -> "GenerationParams":
        """Raise :class:`InvalidParamsError` for non-integer or negative fields."""
        for name in ("width", "height", "iterations", "smoothing"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidParamsError(name, "expected int", "type")
            if value < 0:
                raise InvalidParamsError(name, "must not be negative", "min")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise InvalidParamsError("seed", "expected int or None", "type")
        return self

    def clamped(self, algorithm: str) -> "GenerationParams":
        """Copy with extents and iterations pulled into the ranges offered for ``algorithm``."""
        lo, hi = EXTENT_RANGE
        it_lo, it_hi = ITERATION_RANGES.get(algorithm, (1, 20))
        return replace(
            self,
            width=min(hi, max(lo, self.width)),
            height=min(hi, max(lo, self.height)),
            iterations=min(it_hi, max(it_lo, self.iterations)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = [
    "DEFAULT_WIDTH",
    "DEFAULT_HEIGHT",
    "DEFAULT_ITERATIONS",
    "EXTENT_RANGE",
    "ITERATION_RANGES",
    "GenerationParams",
    "env_flag",
]
