"""Value introspection and kind classification for Bee."""

from beepack.core.types import FLOAT_EPSILON, PRIMITIVE_KINDS, UNSUPPORTED_KINDS, Kind
from beepack.core.values import INVALID, Ref, Value, classify, describe_type, inspect_value

__all__ = [
    "Kind",
    "PRIMITIVE_KINDS",
    "UNSUPPORTED_KINDS",
    "FLOAT_EPSILON",
    "Value",
    "Ref",
    "INVALID",
    "classify",
    "describe_type",
    "inspect_value",
]
