from __future__ import annotations

from beepack.style import build_style_config, column_width, no_color
from beepack.style.columns import exceeds_columns, join_columns, wrap_column
from beepack.style.config import ColumnStyle


def test_wrap_column_pads_every_line_to_the_column_width() -> None:
    column = ColumnStyle(width=6, padding_left=1)

    assert wrap_column("one two three", column) == [" one  ", " two  ", " three"]


def test_wrap_column_folds_words_longer_than_the_column() -> None:
    column = ColumnStyle(width=4, padding_right=1)

    assert wrap_column("abcdefg", column) == ["abc ", "def ", "g   "]


def test_join_columns_top_aligns_and_fills_the_shorter_side() -> None:
    cfg = build_style_config(column_width(6), no_color())

    rendered = join_columns(
        "one two three",
        "x",
        actual_column=cfg.actual_column,
        expected_column=cfg.expected_column,
    )

    assert rendered.split("\n") == [
        "one    x    ",
        "two         ",
        "three       ",
    ]


def test_join_columns_colors_each_column() -> None:
    cfg = build_style_config(column_width(4))

    rendered = join_columns(
        "a",
        "b",
        actual_column=cfg.actual_column,
        expected_column=cfg.expected_column,
    )

    assert rendered == "\x1b[38;2;250;40;25ma   \x1b[0m\x1b[38;2;18;181;32m b  \x1b[0m"


def test_exceeds_columns_threshold() -> None:
    cfg = build_style_config(column_width(6))
    columns = {"actual_column": cfg.actual_column, "expected_column": cfg.expected_column}

    assert exceeds_columns("a" * 6, "b" * 6, **columns) is False
    assert exceeds_columns("a" * 7, "b" * 6, **columns) is True
