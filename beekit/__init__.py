"""Stable public API surface for Bee.

This module is the supported import path for library users.
"""

from __future__ import annotations

from typing import Any

from beepack.context import Bee
from beepack.context import new as _new
from beepack.core import Kind, Ref
from beepack.diff import Divergence
from beepack.diff import first_divergence as _first_divergence
from beepack.diff import is_nil as _is_nil
from beepack.reporters import FailureReporter, RecordingReporter
from beepack.settings import Settings
from beepack.settings import configure as _configure
from beepack.style import (
    StyleConfig,
    StyleConfigError,
    StyleOption,
    actual_color,
    column_width,
    expected_color,
    no_color,
    what_color,
)

__version__ = "0.1.0"


def new(reporter: FailureReporter, *options: StyleOption) -> Bee:
    """Create an assertion context reporting to ``reporter``.

    Options apply left to right after the defaults (column width 60 and the
    what/expected/actual colours); later options win.
    """
    return _new(reporter, *options)


def first_divergence(actual: Any, expected: Any) -> Divergence | None:
    """Return the first divergence between two values, or ``None`` when equal."""
    return _first_divergence(actual, expected)


def is_nil(value: Any) -> bool:
    """Return whether ``value`` is absent (``None`` or a null reference)."""
    return _is_nil(value)


def configure(*, no_color: bool = False) -> Settings:
    """Set process-wide defaults read by every context created afterwards."""
    return _configure(no_color=no_color)


__all__ = [
    "__version__",
    "Bee",
    "Divergence",
    "FailureReporter",
    "Kind",
    "RecordingReporter",
    "Ref",
    "Settings",
    "StyleConfig",
    "StyleConfigError",
    "StyleOption",
    "new",
    "first_divergence",
    "is_nil",
    "configure",
    "column_width",
    "no_color",
    "what_color",
    "expected_color",
    "actual_color",
]
