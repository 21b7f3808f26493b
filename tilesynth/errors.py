"""Exceptions raised at the edges of the library.

Generators and solvers never raise for degenerate input; they return empty
results instead. These types cover parameter validation and registry lookups.
"""

from __future__ import annotations


class TilesynthError(Exception):
    """Base class for all tilesynth errors."""


class InvalidParamsError(TilesynthError, ValueError):
    def __init__(self, field: str, message: str, code: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message
        self.code = code

    def to_dict(self) -> dict:
        return {"field": self.field, "error": self.message, "code": self.code}


class UnknownAlgorithmError(TilesynthError, KeyError):
    def __init__(self, kind: str, name: str, known):
        super().__init__(name)
        self.kind = kind
        self.name = name
        self.known = sorted(known)

    def __str__(self) -> str:
        return f"unknown {self.kind} {self.name!r} (expected one of: {', '.join(self.known)})"


__all__ = ["TilesynthError", "InvalidParamsError", "UnknownAlgorithmError"]
