"""Introspection layer mapping arbitrary Python objects onto a closed Value variant."""

from __future__ import annotations

import asyncio
from collections.abc import Iterator, Mapping, Set
import ctypes
from dataclasses import dataclass, fields, is_dataclass
import datetime
from enum import Enum
import functools
import inspect
import numbers
from pathlib import PurePath
import queue
import types
from typing import Any, Generic, TypeVar
import uuid
import weakref

from beepack.core.types import Kind

T = TypeVar("T")

_BOOL_CTYPES = (ctypes.c_bool,)
_SIGNED_CTYPES = (
    ctypes.c_byte,
    ctypes.c_short,
    ctypes.c_int,
    ctypes.c_long,
    ctypes.c_longlong,
    ctypes.c_ssize_t,
)
_UNSIGNED_CTYPES = (
    ctypes.c_ubyte,
    ctypes.c_ushort,
    ctypes.c_uint,
    ctypes.c_ulong,
    ctypes.c_ulonglong,
    ctypes.c_size_t,
)
_FLOAT_CTYPES = (ctypes.c_float, ctypes.c_double, ctypes.c_longdouble)
_TEXT_CTYPES = (ctypes.c_char, ctypes.c_wchar)
_SCALAR_CTYPES = (
    _BOOL_CTYPES + _SIGNED_CTYPES + _UNSIGNED_CTYPES + _FLOAT_CTYPES + _TEXT_CTYPES
)

# Value objects that define their own equality and are compared with ``==``.
_OPAQUE_TYPES = (
    Enum,
    type,
    types.ModuleType,
    Set,
    numbers.Number,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    PurePath,
    uuid.UUID,
)
_SEQUENCE_TYPES = (list, tuple, bytes, bytearray, range, ctypes.Array)
_CTYPES_RECORD_TYPES = (ctypes.Structure, ctypes.Union)
_CHANNEL_TYPES = (Iterator, queue.Queue, queue.SimpleQueue, asyncio.Queue)
_RAW_POINTER_TYPES = (ctypes.c_void_p, memoryview)


@dataclass(frozen=True, slots=True)
class Ref(Generic[T]):
    """Nullable single-slot reference. ``Ref(None)`` is a null reference."""

    target: T | None = None

    @property
    def is_null(self) -> bool:
        return self.target is None


@dataclass(frozen=True, slots=True)
class Value:
    """A raw object together with its structural kind.

    The engine only ever talks to ``Value`` accessors; which accessors are
    meaningful depends on ``kind``.
    """

    raw: Any
    kind: Kind

    @property
    def is_valid(self) -> bool:
        return self.kind is not Kind.INVALID

    @property
    def value_type(self) -> type:
        return type(self.raw)

    def describe_type(self) -> str:
        return describe_type(type(self.raw))

    def scalar(self) -> Any:
        if isinstance(self.raw, _SCALAR_CTYPES):
            return self.raw.value
        return self.raw

    def length(self) -> int:
        return len(self.raw)

    def index(self, position: int) -> Value:
        return inspect_value(self.raw[position])

    def keys(self) -> list[Any]:
        return list(self.raw.keys())

    def lookup(self, key: Any) -> Value:
        if key in self.raw:
            return inspect_value(self.raw[key])
        return INVALID

    def field_names(self) -> list[str]:
        return _record_field_names(self.raw)

    def field(self, name: str) -> Value:
        if name == "args" and isinstance(self.raw, BaseException):
            return inspect_value(self.raw.args)
        try:
            return inspect_value(getattr(self.raw, name))
        except AttributeError:
            return INVALID

    def is_null(self) -> bool:
        if self.kind is Kind.OPTIONAL:
            return self._target() is None
        if self.kind is Kind.RAW_POINTER and isinstance(self.raw, ctypes.c_void_p):
            return self.raw.value is None
        return self.kind is Kind.INVALID

    def elem(self) -> Value:
        return inspect_value(self._target())

    def _target(self) -> Any:
        if isinstance(self.raw, weakref.ReferenceType):
            return self.raw()
        return self.raw.target


INVALID = Value(raw=None, kind=Kind.INVALID)


def inspect_value(raw: Any) -> Value:
    """Wrap ``raw`` without modifying it."""
    if raw is None:
        return INVALID
    return Value(raw=raw, kind=classify(raw))


def classify(raw: Any) -> Kind:
    if raw is None:
        return Kind.INVALID
    if isinstance(raw, (bool,) + _BOOL_CTYPES):
        return Kind.BOOL
    if isinstance(raw, (int,) + _SIGNED_CTYPES):
        return Kind.INT
    if isinstance(raw, _UNSIGNED_CTYPES):
        return Kind.UINT
    if isinstance(raw, (float,) + _FLOAT_CTYPES):
        return Kind.FLOAT
    if isinstance(raw, complex):
        return Kind.COMPLEX
    if isinstance(raw, (str,) + _TEXT_CTYPES):
        return Kind.TEXT
    if isinstance(raw, (Ref, weakref.ReferenceType)):
        return Kind.OPTIONAL
    if isinstance(raw, _OPAQUE_TYPES):
        return Kind.OPAQUE
    if _is_namedtuple(raw):
        return Kind.RECORD
    if isinstance(raw, _SEQUENCE_TYPES):
        return Kind.SEQUENCE
    if isinstance(raw, Mapping):
        return Kind.MAPPING
    if inspect.isroutine(raw) or isinstance(raw, functools.partial):
        return Kind.FUNCTION
    if isinstance(raw, _CHANNEL_TYPES):
        return Kind.CHANNEL
    if isinstance(raw, _RAW_POINTER_TYPES):
        return Kind.RAW_POINTER
    if is_dataclass(raw) or isinstance(raw, BaseException):
        return Kind.RECORD
    if _has_attributes(raw) and _record_field_names(raw):
        return Kind.RECORD
    # Nothing to walk: fall back to the object's own equality.
    return Kind.OPAQUE


def describe_type(value_type: type) -> str:
    """Builtins by bare name, everything else as ``module.QualName``."""
    if value_type.__module__ == "builtins":
        return value_type.__qualname__
    return f"{value_type.__module__}.{value_type.__qualname__}"


def _is_namedtuple(raw: Any) -> bool:
    return isinstance(raw, tuple) and hasattr(type(raw), "_fields")


def _record_field_names(raw: Any) -> list[str]:
    if _is_namedtuple(raw):
        return list(raw._fields)
    if is_dataclass(raw):
        return [item.name for item in fields(raw)]
    if isinstance(raw, _CTYPES_RECORD_TYPES):
        return _ctypes_field_names(type(raw))

    names: list[str] = ["args"] if isinstance(raw, BaseException) else []
    for name in getattr(raw, "__dict__", {}):
        if name not in names:
            names.append(name)
    for name in _slot_names(type(raw)):
        if name not in names and hasattr(raw, name):
            names.append(name)
    return names


def _slot_names(value_type: type) -> list[str]:
    names: list[str] = []
    for cls in reversed(value_type.__mro__):
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name not in ("__dict__", "__weakref__") and name not in names:
                names.append(name)
    return names


def _ctypes_field_names(value_type: type) -> list[str]:
    names: list[str] = []
    for cls in reversed(value_type.__mro__):
        for entry in cls.__dict__.get("_fields_", ()):
            if entry[0] not in names:
                names.append(entry[0])
    return names


def _has_attributes(raw: Any) -> bool:
    return (
        isinstance(raw, _CTYPES_RECORD_TYPES)
        or hasattr(raw, "__dict__")
        or bool(_slot_names(type(raw)))
    )
