"""Style option directives folded left to right into a ``StyleConfig``."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union

from beepack.style.config import StyleConfig, rgb
from beepack.style.exceptions import StyleConfigError

MIN_COLUMN_WIDTH = 3


@dataclass(frozen=True, slots=True)
class ColumnWidth:
    width: int

    def __post_init__(self) -> None:
        if isinstance(self.width, bool) or not isinstance(self.width, int):
            raise StyleConfigError("column width must be an integer")
        if self.width < MIN_COLUMN_WIDTH:
            raise StyleConfigError(f"column width must be at least {MIN_COLUMN_WIDTH}")

    def apply(self, cfg: StyleConfig) -> StyleConfig:
        return replace(
            cfg,
            expected_text=replace(cfg.expected_text, max_width=self.width),
            actual_text=replace(cfg.actual_text, max_width=self.width),
            expected_column=replace(cfg.expected_column, width=self.width, padding_left=1),
            actual_column=replace(cfg.actual_column, width=self.width, padding_right=1),
        )


@dataclass(frozen=True, slots=True)
class NoColor:
    def apply(self, cfg: StyleConfig) -> StyleConfig:
        return replace(
            cfg,
            what_text=replace(cfg.what_text, color=None),
            expected_text=replace(cfg.expected_text, color=None),
            actual_text=replace(cfg.actual_text, color=None),
            expected_column=replace(cfg.expected_column, color=None),
            actual_column=replace(cfg.actual_column, color=None),
        )


@dataclass(frozen=True, slots=True)
class _ColorOption:
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for component in (self.red, self.green, self.blue):
            if isinstance(component, bool) or not isinstance(component, int):
                raise StyleConfigError("color components must be integers")
            if not 0 <= component <= 255:
                raise StyleConfigError(f"color component out of range 0..255: {component}")


@dataclass(frozen=True, slots=True)
class WhatColor(_ColorOption):
    def apply(self, cfg: StyleConfig) -> StyleConfig:
        color = rgb(self.red, self.green, self.blue)
        return replace(cfg, what_text=replace(cfg.what_text, color=color))


@dataclass(frozen=True, slots=True)
class ExpectedColor(_ColorOption):
    def apply(self, cfg: StyleConfig) -> StyleConfig:
        color = rgb(self.red, self.green, self.blue)
        return replace(
            cfg,
            expected_text=replace(cfg.expected_text, color=color),
            expected_column=replace(cfg.expected_column, color=color),
        )


@dataclass(frozen=True, slots=True)
class ActualColor(_ColorOption):
    def apply(self, cfg: StyleConfig) -> StyleConfig:
        color = rgb(self.red, self.green, self.blue)
        return replace(
            cfg,
            actual_text=replace(cfg.actual_text, color=color),
            actual_column=replace(cfg.actual_column, color=color),
        )


StyleOption = Union[ColumnWidth, NoColor, WhatColor, ExpectedColor, ActualColor]


def column_width(width: int) -> ColumnWidth:
    """Set the truncation width of inline text and the width of each column."""
    return ColumnWidth(width)


def no_color() -> NoColor:
    """Strip colour from every style."""
    return NoColor()


def what_color(red: int, green: int, blue: int) -> WhatColor:
    """Colour of the path label."""
    return WhatColor(red, green, blue)


def expected_color(red: int, green: int, blue: int) -> ExpectedColor:
    return ExpectedColor(red, green, blue)


def actual_color(red: int, green: int, blue: int) -> ActualColor:
    return ActualColor(red, green, blue)


DEFAULT_COLUMN_WIDTH = 60

DEFAULT_OPTIONS: tuple[StyleOption, ...] = (
    column_width(DEFAULT_COLUMN_WIDTH),
    what_color(2, 118, 250),
    expected_color(18, 181, 32),
    actual_color(250, 40, 25),
)


def build_style_config(*options: StyleOption) -> StyleConfig:
    """Fold the defaults followed by ``options`` into one immutable config."""
    cfg = StyleConfig()
    for option in (*DEFAULT_OPTIONS, *options):
        cfg = option.apply(cfg)
    return cfg
