"""Shared generator pipeline.

Subclasses implement :meth:`BaseGenerator._run_pipeline`, calling ``phase``
for each step; the base class wraps it with per-phase timing, tile counts and
a single structured log event per generation.
"""
from __future__ import annotations

import random
import time
from typing import Any, Callable, Dict, List, Optional

from ..grid.config import GenerationParams, env_flag
from ..grid.grid import Grid
from ..grid.metrics import init_metrics, record_tile_counts
from ..grid.results import GenerationResult
from ..logging_utils import get_logger

log = get_logger(__name__)


class BaseGenerator:
    name = ""
    scale = 1

    def __init__(self, rng: Optional[random.Random] = None, enable_metrics: Optional[bool] = None):
        # Module-level random unless a caller injects its own generator state
        self.rng = rng if rng is not None else random
        if enable_metrics is None:
            enable_metrics = env_flag("TILESYNTH_ENABLE_GENERATION_METRICS", True)
        self.enable_metrics = enable_metrics

    def grid_size(self, params: GenerationParams):
        return max(0, params.width // self.scale), max(0, params.height // self.scale)

    def generate(self, params: GenerationParams) -> GenerationResult:
        metrics: Dict[str, Any] = init_metrics() if self.enable_metrics else {}
        if self.enable_metrics:
            start = time.perf_counter()
            phase_times: Dict[str, int] = {}

            def _phase(label: str, fn: Callable, *a, **k):
                ps = time.perf_counter(); r = fn(*a, **k); pe = time.perf_counter()
                phase_times[label] = int((pe - ps) * 1000)
                return r
        else:
            def _phase(label: str, fn: Callable, *a, **k):
                return fn(*a, **k)

        grid = self._run_pipeline(params, _phase, metrics)

        if self.enable_metrics:
            record_tile_counts(metrics, grid)
            metrics['phase_ms'] = phase_times
            metrics['runtime_ms'] = int((time.perf_counter() - start) * 1000)
        log.debug(event="generate", algorithm=self.name, width=grid.width, height=grid.height,
                  iterations=params.iterations, runtime_ms=metrics.get('runtime_ms'))
        return GenerationResult(nodes=[], edges=[], grid=grid, algorithm=self.name, metrics=metrics)

    def _run_pipeline(self, params: GenerationParams, phase: Callable, metrics: Dict[str, Any]) -> Grid:
        raise NotImplementedError


def blank_columns(width: int, height: int, value: int) -> List[List[int]]:
    return [[value] * height for _ in range(width)]


__all__ = ["BaseGenerator", "blank_columns"]
