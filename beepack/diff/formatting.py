"""Natural-language rendering of divergence leaves."""

from __future__ import annotations

import ctypes
from decimal import Decimal
from enum import Enum
import math
from typing import Any

from beepack.core.types import Kind
from beepack.core.values import Value, inspect_value

NIL_TEXT = "<nil>"
ELLIPSIS = "..."

# Shortest float renderings switch to exponent form at this decimal exponent.
_EXPONENT_THRESHOLD = 6


def stringify(value: Any) -> str:
    """Render ``value`` for a failure message.

    Booleans render as ``true``/``false``, absence as ``<nil>``, sequences as
    ``[a b]``, mappings as ``map[k:v]``, records as ``{a b}``.
    """
    return _render(inspect_value(value))


def truncate(text: str, width: int | None) -> str:
    """Drop newlines, then cut to ``width`` characters ending in ``...``."""
    text = text.replace("\n", "")
    if width is not None and len(text) > width:
        return f"{text[: max(0, width - len(ELLIPSIS))]}{ELLIPSIS}"
    return text


def format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"

    sign, raw_digits, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(str(digit) for digit in raw_digits)
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    digits = stripped

    point = len(digits) + exponent
    decimal_exponent = point - 1
    prefix = "-" if sign else ""

    if decimal_exponent < -4 or decimal_exponent >= _EXPONENT_THRESHOLD:
        mantissa = digits[0] if len(digits) == 1 else f"{digits[0]}.{digits[1:]}"
        exponent_sign = "-" if decimal_exponent < 0 else "+"
        return f"{prefix}{mantissa}e{exponent_sign}{abs(decimal_exponent):02d}"

    if point <= 0:
        return f"{prefix}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return f"{prefix}{digits}{'0' * (point - len(digits))}"
    return f"{prefix}{digits[:point]}.{digits[point:]}"


def format_complex(value: complex) -> str:
    imag = format_float(value.imag)
    if imag[0] not in "+-":
        imag = f"+{imag}"
    return f"({format_float(value.real)}{imag}i)"


def _render(value: Value) -> str:
    kind = value.kind
    if kind is Kind.INVALID:
        return NIL_TEXT
    if kind is Kind.BOOL:
        return "true" if value.scalar() else "false"
    if kind in (Kind.INT, Kind.UINT):
        return str(int(value.scalar()))
    if kind is Kind.FLOAT:
        return format_float(float(value.scalar()))
    if kind is Kind.COMPLEX:
        return format_complex(value.raw)
    if kind is Kind.TEXT:
        text = value.scalar()
        return text.decode("latin-1") if isinstance(text, bytes) else text
    if kind is Kind.SEQUENCE:
        items = (_render(value.index(position)) for position in range(value.length()))
        return f"[{' '.join(items)}]"
    if kind is Kind.MAPPING:
        entries = (
            f"{stringify(key)}:{_render(value.lookup(key))}" for key in _ordered_keys(value.keys())
        )
        return f"map[{' '.join(entries)}]"
    if kind is Kind.RECORD:
        return f"{{{' '.join(_render(value.field(name)) for name in value.field_names())}}}"
    if kind is Kind.OPTIONAL:
        return NIL_TEXT if value.is_null() else f"&{_render(value.elem())}"
    if kind is Kind.RAW_POINTER and isinstance(value.raw, ctypes.c_void_p):
        return NIL_TEXT if value.is_null() else hex(value.raw.value)
    if kind is Kind.FUNCTION:
        return getattr(value.raw, "__qualname__", None) or str(value.raw)
    if isinstance(value.raw, Enum):
        return value.raw.name
    return str(value.raw)


def _ordered_keys(keys: list[Any]) -> list[Any]:
    try:
        return sorted(keys)
    except TypeError:
        # Mixed key types keep the mapping's own order.
        return keys
