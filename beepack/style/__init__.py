"""Rendering styles, options and column layout for Bee."""

from beepack.style.columns import exceeds_columns, join_columns, wrap_column
from beepack.style.config import ColumnStyle, StyleConfig, TextStyle
from beepack.style.exceptions import StyleConfigError, StyleError
from beepack.style.options import (
    DEFAULT_COLUMN_WIDTH,
    StyleOption,
    actual_color,
    build_style_config,
    column_width,
    expected_color,
    no_color,
    what_color,
)

__all__ = [
    "StyleConfig",
    "TextStyle",
    "ColumnStyle",
    "StyleOption",
    "StyleError",
    "StyleConfigError",
    "DEFAULT_COLUMN_WIDTH",
    "build_style_config",
    "column_width",
    "no_color",
    "what_color",
    "expected_color",
    "actual_color",
    "join_columns",
    "wrap_column",
    "exceeds_columns",
]
