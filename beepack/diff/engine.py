"""Recursive structural equality with first-divergence detection."""

from __future__ import annotations

import math
from typing import Any

from beepack.core.types import FLOAT_EPSILON, PRIMITIVE_KINDS, UNSUPPORTED_KINDS, Kind
from beepack.core.values import Value, inspect_value
from beepack.diff.formatting import stringify
from beepack.diff.models import Divergence


def first_divergence(actual: Any, expected: Any) -> Divergence | None:
    """Compare two values in lock-step.

    Returns ``None`` when they are equal, otherwise the first point where
    they differ. Neither value is modified.
    """
    return compare_values(inspect_value(actual), inspect_value(expected), path="")


def is_nil(value: Any) -> bool:
    """Whether ``value`` is absent: ``None``, a null reference or a null pointer."""
    return inspect_value(value).is_null()


def compare_values(actual: Value, expected: Value, *, path: str) -> Divergence | None:
    if not actual.is_valid or not expected.is_valid:
        if actual.is_valid != expected.is_valid:
            return Divergence(actual=actual.raw, expected=expected.raw, path=path)
        return None

    if actual.value_type is not expected.value_type:
        return Divergence(
            actual=actual.describe_type(),
            expected=expected.describe_type(),
            path=path,
        )

    kind = actual.kind
    if kind in PRIMITIVE_KINDS:
        return _compare_primitive(actual, expected, path=path)
    if kind is Kind.SEQUENCE:
        return _compare_sequence(actual, expected, path=path)
    if kind is Kind.MAPPING:
        return _compare_mapping(actual, expected, path=path)
    if kind is Kind.RECORD:
        return _compare_record(actual, expected, path=path)
    if kind is Kind.OPTIONAL:
        return _compare_optional(actual, expected, path=path)
    if kind in UNSUPPORTED_KINDS:
        if actual.raw is expected.raw:
            return None
        return Divergence(actual=actual.raw, expected=expected.raw, path=path)

    if actual.raw != expected.raw:
        return Divergence(actual=actual.raw, expected=expected.raw, path=path)
    return None


def _compare_primitive(actual: Value, expected: Value, *, path: str) -> Divergence | None:
    left = actual.scalar()
    right = expected.scalar()

    if actual.kind is Kind.FLOAT:
        equal = _floats_equal(left, right)
    else:
        equal = left == right

    if equal:
        return None
    return Divergence(actual=left, expected=right, path=path)


def _compare_sequence(actual: Value, expected: Value, *, path: str) -> Divergence | None:
    length = actual.length()
    if length != expected.length():
        return Divergence(actual=length, expected=expected.length(), path=f"len({path})")

    for position in range(length):
        divergence = compare_values(
            actual.index(position),
            expected.index(position),
            path=f"{path}[{position}]",
        )
        if divergence is not None:
            return divergence
    return None


def _compare_mapping(actual: Value, expected: Value, *, path: str) -> Divergence | None:
    size = actual.length()
    if size != expected.length():
        return Divergence(actual=size, expected=expected.length(), path=f"len({path})")

    for key in actual.keys():
        key_path = f"{path}[{stringify(key)}]"
        if key not in expected.raw:
            # A key holding None still differs from a key that is absent.
            return Divergence(actual=actual.lookup(key).raw, expected=None, path=key_path)
        divergence = compare_values(actual.lookup(key), expected.lookup(key), path=key_path)
        if divergence is not None:
            return divergence
    return None


def _compare_record(actual: Value, expected: Value, *, path: str) -> Divergence | None:
    names = actual.field_names()
    names.extend(name for name in expected.field_names() if name not in names)

    for name in names:
        divergence = compare_values(
            actual.field(name),
            expected.field(name),
            path=f"{path}.{name}",
        )
        if divergence is not None:
            return divergence
    return None


def _compare_optional(actual: Value, expected: Value, *, path: str) -> Divergence | None:
    actual_null = actual.is_null()
    expected_null = expected.is_null()
    if actual_null or expected_null:
        if actual_null != expected_null:
            return Divergence(actual=actual.raw, expected=expected.raw, path=path)
        return None

    return compare_values(actual.elem(), expected.elem(), path=f"*{path}")


def _floats_equal(left: float, right: float) -> bool:
    if left == right or abs(left - right) <= FLOAT_EPSILON:
        return True
    return math.isnan(left) and math.isnan(right)
