"""Two-column side-by-side layout for long failure values."""

from __future__ import annotations

import io

from rich.console import Console
from rich.text import Text

from beepack.style.config import ColumnStyle

# Only used for word wrapping; never printed to.
_WRAP_CONSOLE = Console(file=io.StringIO(), color_system=None, width=1024)


def wrap_column(text: str, column: ColumnStyle) -> list[str]:
    """Word-wrap ``text`` and pad every line to exactly ``column.width``."""
    inner = column.content_width
    lines = Text(text).wrap(_WRAP_CONSOLE, inner)
    return [
        f"{' ' * column.padding_left}{line.plain.rstrip().ljust(inner)}{' ' * column.padding_right}"
        for line in lines
    ]


def join_columns(
    actual_text: str,
    expected_text: str,
    *,
    actual_column: ColumnStyle,
    expected_column: ColumnStyle,
) -> str:
    """Render actual (left) and expected (right) top-aligned, one row per line."""
    left = wrap_column(actual_text, actual_column)
    right = wrap_column(expected_text, expected_column)
    height = max(len(left), len(right))
    left.extend([" " * actual_column.width] * (height - len(left)))
    right.extend([" " * expected_column.width] * (height - len(right)))

    return "\n".join(
        f"{actual_column.render(left_line)}{expected_column.render(right_line)}"
        for left_line, right_line in zip(left, right)
    )


def exceeds_columns(
    actual_text: str,
    expected_text: str,
    *,
    actual_column: ColumnStyle,
    expected_column: ColumnStyle,
) -> bool:
    return len(actual_text) + len(expected_text) > actual_column.width + expected_column.width
