"""Structured log lines for tilesynth.

Each call prints one line: ``level=... ts=... key=value ...`` pairs, or a
compact JSON object when JSON mode is on. Debug and info go to stdout, errors
to stderr.

Usage:
    from tilesynth.logging_utils import get_logger
    log = get_logger(__name__)
    log.debug(event="generate", algorithm="bsp", width=150, height=100)

``None`` values are dropped; other values are str()'d with spaces replaced by
underscores. Reserved keys: level, ts, logger. ``TILESYNTH_LOG_LEVEL`` and
``TILESYNTH_LOG_JSON`` are read at import; :func:`set_level` and
:func:`set_json_mode` change them afterwards (the CLI does so once a ``.env``
file is loaded).
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
CURRENT_LEVEL = LEVELS.get(os.getenv("TILESYNTH_LOG_LEVEL", "info").lower(), 20)
TRUTHY = ("1", "true", "yes", "on")
JSON_MODE = os.getenv("TILESYNTH_LOG_JSON", "0").lower() in TRUTHY


def set_level(name: str) -> None:
    """Change the global threshold (``debug``/``info``/``warn``/``error``)."""
    global CURRENT_LEVEL
    key = (name or "").lower()
    if key not in LEVELS:
        raise ValueError(f"unknown log level: {name!r}")
    CURRENT_LEVEL = LEVELS[key]


def set_json_mode(flag) -> None:
    """Switch JSON output on or off; strings are parsed like ``TILESYNTH_LOG_JSON``."""
    global JSON_MODE
    if isinstance(flag, str):
        flag = flag.lower() in TRUTHY
    JSON_MODE = bool(flag)


def _format(level: str, **fields) -> str:
    if JSON_MODE:
        rec = {k: v for k, v in fields.items() if v is not None}
        rec["level"] = level
        rec["ts"] = int(time.time())
        return json.dumps(rec, separators=(",", ":"), default=str)
    parts = [f"level={level}", f"ts={int(time.time())}"]
    for k, v in fields.items():
        if v is None:
            continue
        if isinstance(v, (int, float)):
            parts.append(f"{k}={v}")
        else:
            s = str(v).replace(" ", "_")
            parts.append(f"{k}={s}")
    return " ".join(parts)


class _Logger:
    def __init__(self, name: str | None = None):
        self.name = name or "tilesynth"

    def _log(self, lvl: str, **fields) -> None:
        if LEVELS[lvl] < CURRENT_LEVEL:
            return
        if "logger" not in fields:
            fields["logger"] = self.name
        print(_format(lvl, **fields), file=sys.stdout if lvl != "error" else sys.stderr)

    def debug(self, **fields) -> None:
        self._log("debug", **fields)

    def info(self, **fields) -> None:
        self._log("info", **fields)

    def warn(self, **fields) -> None:
        self._log("warn", **fields)

    def error(self, **fields) -> None:
        self._log("error", **fields)


_LOGGER_CACHE: dict = {}


def get_logger(name: str) -> _Logger:
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


log = get_logger("tilesynth")

__all__ = ["LEVELS", "get_logger", "log", "set_json_mode", "set_level"]
