"""Immutable rendering configuration for assertion output."""

from __future__ import annotations

from dataclasses import dataclass, field

from rich.color import Color, ColorSystem
from rich.style import Style


@dataclass(frozen=True, slots=True)
class TextStyle:
    """Colour and maximum width for inline message text."""

    color: Color | None = None
    max_width: int | None = None

    def render(self, text: str) -> str:
        return Style(color=self.color).render(text, color_system=ColorSystem.TRUECOLOR)


@dataclass(frozen=True, slots=True)
class ColumnStyle:
    """Colour, fixed width and padding for one side-by-side column."""

    color: Color | None = None
    width: int = 0
    padding_left: int = 0
    padding_right: int = 0

    @property
    def content_width(self) -> int:
        return max(1, self.width - self.padding_left - self.padding_right)

    def render(self, text: str) -> str:
        return Style(color=self.color).render(text, color_system=ColorSystem.TRUECOLOR)


@dataclass(frozen=True, slots=True)
class StyleConfig:
    """The five styles used when reporting a failure."""

    what_text: TextStyle = field(default_factory=TextStyle)
    expected_text: TextStyle = field(default_factory=TextStyle)
    actual_text: TextStyle = field(default_factory=TextStyle)
    expected_column: ColumnStyle = field(default_factory=ColumnStyle)
    actual_column: ColumnStyle = field(default_factory=ColumnStyle)

    @property
    def no_color(self) -> bool:
        return all(
            style.color is None
            for style in (
                self.what_text,
                self.expected_text,
                self.actual_text,
                self.expected_column,
                self.actual_column,
            )
        )


def rgb(red: int, green: int, blue: int) -> Color:
    return Color.from_rgb(red, green, blue)
