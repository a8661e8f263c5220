"""Type definitions for Bee value classification."""

from enum import Enum


class Kind(str, Enum):
    """Structural classification of a value, independent of its declared type."""

    INVALID = "invalid"
    BOOL = "bool"
    INT = "int"
    UINT = "uint"
    FLOAT = "float"
    COMPLEX = "complex"
    TEXT = "text"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    RECORD = "record"
    OPTIONAL = "optional"
    CHANNEL = "channel"
    FUNCTION = "function"
    RAW_POINTER = "raw_pointer"
    OPAQUE = "opaque"


PRIMITIVE_KINDS: frozenset[Kind] = frozenset(
    {
        Kind.BOOL,
        Kind.INT,
        Kind.UINT,
        Kind.FLOAT,
        Kind.COMPLEX,
        Kind.TEXT,
    }
)

UNSUPPORTED_KINDS: frozenset[Kind] = frozenset(
    {
        Kind.CHANNEL,
        Kind.FUNCTION,
        Kind.RAW_POINTER,
    }
)

FLOAT_EPSILON = 1e-9
