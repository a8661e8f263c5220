from __future__ import annotations

from collections import OrderedDict, namedtuple
import ctypes
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
import functools
import queue
from typing import Any
import weakref

import pytest

from beepack.core import Kind, Ref, classify, describe_type, inspect_value


@dataclass
class Point:
    x: int
    y: int


class Slotted:
    __slots__ = ("a", "b")

    def __init__(self, a: int) -> None:
        self.a = a


class Plain:
    def __init__(self) -> None:
        self.first = 1
        self.second = "two"


class Color(Enum):
    RED = 1


class Header(ctypes.Structure):
    _fields_ = [("size", ctypes.c_uint32), ("flags", ctypes.c_uint8)]


class Bare:
    pass


Pair = namedtuple("Pair", ["left", "right"])


def _function() -> None:
    return None


@pytest.mark.parametrize(
    ("raw", "kind"),
    [
        (None, Kind.INVALID),
        (True, Kind.BOOL),
        (ctypes.c_bool(False), Kind.BOOL),
        (3, Kind.INT),
        (ctypes.c_int16(-3), Kind.INT),
        (ctypes.c_uint8(3), Kind.UINT),
        (ctypes.c_uint64(3), Kind.UINT),
        (1.5, Kind.FLOAT),
        (ctypes.c_float(1.5), Kind.FLOAT),
        (ctypes.c_longdouble(1.5), Kind.FLOAT),
        (ctypes.c_char(b"a"), Kind.TEXT),
        (ctypes.c_wchar("a"), Kind.TEXT),
        ((ctypes.c_int * 2)(1, 2), Kind.SEQUENCE),
        (Header(1), Kind.RECORD),
        (Bare(), Kind.OPAQUE),
        (1 + 2j, Kind.COMPLEX),
        ("text", Kind.TEXT),
        ([1], Kind.SEQUENCE),
        ((1, 2), Kind.SEQUENCE),
        (b"ab", Kind.SEQUENCE),
        (range(3), Kind.SEQUENCE),
        ({"a": 1}, Kind.MAPPING),
        (OrderedDict(a=1), Kind.MAPPING),
        (Point(1, 2), Kind.RECORD),
        (Pair(1, 2), Kind.RECORD),
        (Slotted(1), Kind.RECORD),
        (Plain(), Kind.RECORD),
        (ValueError("boom"), Kind.RECORD),
        (Ref(1), Kind.OPTIONAL),
        (Ref(None), Kind.OPTIONAL),
        (iter([1]), Kind.CHANNEL),
        (queue.Queue(), Kind.CHANNEL),
        (_function, Kind.FUNCTION),
        (functools.partial(_function), Kind.FUNCTION),
        (len, Kind.FUNCTION),
        (ctypes.c_void_p(None), Kind.RAW_POINTER),
        (memoryview(b"x"), Kind.RAW_POINTER),
        ({1, 2}, Kind.OPAQUE),
        (Decimal("1.5"), Kind.OPAQUE),
        (Color.RED, Kind.OPAQUE),
        (int, Kind.OPAQUE),
    ],
)
def test_classify_maps_python_objects_to_kinds(raw: Any, kind: Kind) -> None:
    assert classify(raw) is kind


def test_weakref_is_optional_and_null_once_target_is_gone() -> None:
    target = Plain()
    reference = weakref.ref(target)
    value = inspect_value(reference)

    resolves_to_target = value.elem().raw is target

    assert value.kind is Kind.OPTIONAL
    assert value.is_null() is False
    assert resolves_to_target is True

    del target
    assert inspect_value(reference).is_null() is True


def test_record_field_names_follow_declaration_order() -> None:
    assert inspect_value(Point(1, 2)).field_names() == ["x", "y"]
    assert inspect_value(Pair(1, 2)).field_names() == ["left", "right"]
    assert inspect_value(Plain()).field_names() == ["first", "second"]
    assert inspect_value(ValueError("boom")).field_names() == ["args"]
    assert inspect_value(Header(1, 2)).field_names() == ["size", "flags"]


def test_unset_slot_is_not_a_field() -> None:
    value = inspect_value(Slotted(1))

    assert value.field_names() == ["a"]
    assert value.field("b").kind is Kind.INVALID


def test_mapping_lookup_of_missing_key_is_invalid() -> None:
    value = inspect_value({"a": 1})

    assert value.lookup("a").raw == 1
    assert value.lookup("b").is_valid is False


def test_ctypes_scalars_are_unwrapped() -> None:
    assert inspect_value(ctypes.c_uint32(7)).scalar() == 7
    assert inspect_value(ctypes.c_int8(-7)).scalar() == -7


def test_describe_type_qualifies_non_builtins() -> None:
    assert describe_type(int) == "int"
    assert describe_type(list) == "list"
    assert describe_type(Point) == f"{Point.__module__}.Point"
    assert describe_type(ctypes.c_ubyte) == "ctypes.c_ubyte"


def test_inspection_does_not_modify_the_value() -> None:
    payload = {"a": [1, 2], "b": Point(1, 2)}
    value = inspect_value(payload)

    value.lookup("a").index(1)
    value.lookup("b").field("y")

    assert payload == {"a": [1, 2], "b": Point(1, 2)}
