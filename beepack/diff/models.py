"""Data models for first-divergence reporting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from beepack.diff.formatting import stringify

Relation = Literal["==", "!="]


@dataclass(frozen=True, slots=True)
class Divergence:
    """The first point where two values differ.

    ``actual`` and ``expected`` are the leaves that differ: primitive values,
    lengths, type descriptions or, for unsupported kinds, the raw objects.
    ``path`` is empty at the top level.
    """

    actual: Any
    expected: Any
    path: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "actual": stringify(self.actual),
            "expected": stringify(self.expected),
        }
