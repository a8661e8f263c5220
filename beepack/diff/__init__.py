"""Equality engine and divergence rendering for Bee."""

from beepack.diff.engine import compare_values, first_divergence, is_nil
from beepack.diff.formatting import ELLIPSIS, NIL_TEXT, stringify, truncate
from beepack.diff.models import Divergence, Relation

__all__ = [
    "Divergence",
    "Relation",
    "compare_values",
    "first_divergence",
    "is_nil",
    "stringify",
    "truncate",
    "NIL_TEXT",
    "ELLIPSIS",
]
