#!/usr/bin/env python3
"""Structural diagnostics over a batch of generated maps.

Usage:
  python scripts/diagnose_maps.py bsp ca --runs 20 --iterations 6

If no algorithms are provided as CLI args, both generators are sampled.
Exits with non-zero status if BFS and A* ever disagree on path length.
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from typing import List

# Ensure project root on path if executed directly
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from tilesynth.diagnostics import analyze  # noqa: E402 import after path fix
from tilesynth.generators import GENERATORS, get_generator  # noqa: E402 import after path fix
from tilesynth.grid.config import GenerationParams  # noqa: E402 import after path fix

DEFAULT_ALGORITHMS = sorted(GENERATORS)


def run_batch(algorithm: str, runs: int, params: GenerationParams) -> dict:
    gen = get_generator(algorithm)
    reports = [analyze(gen.generate(params)) for _ in range(runs)]
    return {
        "algorithm": algorithm,
        "runs": runs,
        "disconnected_maps": sum(1 for r in reports if r["floor_regions"] > 1),
        "empty_maps": sum(1 for r in reports if r["tiles_floor"] == 0),
        "unreachable_ends": sum(1 for r in reports if r["start"] and r["bfs_length"] == 0),
        "mismatches": [r for r in reports if not r["ok"]],
        "ok": all(r["ok"] for r in reports),
    }


def main(argv: List[str]) -> int:
    parser = argparse.ArgumentParser(description="Batch structural diagnostics")
    parser.add_argument("algorithms", nargs="*", help=f"Any of: {', '.join(DEFAULT_ALGORITHMS)} (default: all)")
    parser.add_argument("--runs", type=int, default=10)
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--iterations", type=int, default=None)
    args = parser.parse_args(argv)
    unknown = [a for a in args.algorithms if a not in GENERATORS]
    if unknown:
        parser.error(f"unknown algorithm(s): {', '.join(unknown)} (choose from {', '.join(DEFAULT_ALGORITHMS)})")
    raw = {k: getattr(args, k) for k in ("width", "height", "iterations") if getattr(args, k) is not None}
    params = GenerationParams.from_mapping(raw).validate()
    results = [run_batch(a, args.runs, params) for a in (args.algorithms or DEFAULT_ALGORITHMS)]
    print(json.dumps({"results": results}, indent=2))
    # Non-zero exit if any failure
    if not all(r["ok"] for r in results):
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
