"""
Terminal styling primitives.

Style is the decoration applied to markers and item text while rendering.
Colors and attributes are delegated to rich; padding is applied here so that
padded cells carry the same decoration as the text they surround.

The measuring helpers (width, height) and the block joins understand ANSI
escape sequences and wide characters, which is what keeps markers aligned once
they have been colored.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Union

from rich.cells import cell_len
from rich.color import Color
from rich.style import Style as RichStyle
from rich.text import Text

from canopy.config import get_settings

ColorLike = Union[str, int, Color]


def _parse_color(color: ColorLike) -> Union[str, Color]:
    # Bare numbers are ANSI 256 palette indices ("212" -> "color(212)")
    if isinstance(color, Color):
        return color
    text = str(color).strip()
    if text.isdigit():
        return f"color({text})"
    return text


@dataclass(frozen=True)
class Style:
    """
    Immutable decoration for a block of text.

    Every setter returns a new Style, so styles can be shared freely between
    trees and renderers.

    Examples:
        >>> Style().foreground("63").padding_right(1).render("├──")
    """

    rich_style: RichStyle = field(default_factory=RichStyle.null)
    pad_left: int = 0
    pad_right: int = 0

    def _with(self, **attrs) -> "Style":
        return replace(self, rich_style=self.rich_style + RichStyle(**attrs))

    def foreground(self, color: ColorLike) -> "Style":
        return self._with(color=_parse_color(color))

    def background(self, color: ColorLike) -> "Style":
        return self._with(bgcolor=_parse_color(color))

    def bold(self, value: bool = True) -> "Style":
        return self._with(bold=value)

    def italic(self, value: bool = True) -> "Style":
        return self._with(italic=value)

    def faint(self, value: bool = True) -> "Style":
        return self._with(dim=value)

    def underline(self, value: bool = True) -> "Style":
        return self._with(underline=value)

    def padding_left(self, cells: int) -> "Style":
        return replace(self, pad_left=max(0, cells))

    def padding_right(self, cells: int) -> "Style":
        return replace(self, pad_right=max(0, cells))

    def get_background(self) -> Optional[Color]:
        return self.rich_style.bgcolor

    def render(self, text: str) -> str:
        """
        Apply padding and decoration to every line of text.

        Args:
            text: Plain or already decorated text, possibly multi-line

        Returns:
            The decorated text. A null style without padding returns the input
            unchanged.
        """
        if not text and not (self.pad_left or self.pad_right):
            return text
        color_system = get_settings().rich_color_system()
        left = " " * self.pad_left
        right = " " * self.pad_right
        lines = []
        for line in text.split("\n"):
            lines.append(self.rich_style.render(f"{left}{line}{right}", color_system=color_system))
        return "\n".join(lines)


def background_style(style: Style) -> Style:
    """Return a style that keeps only the background of the given style."""
    bg = style.get_background()
    if bg is None:
        return Style()
    return Style(rich_style=RichStyle(bgcolor=bg))


def line_width(line: str) -> int:
    if "\x1b" in line:
        line = Text.from_ansi(line).plain
    return cell_len(line)


def width(text: str) -> int:
    """On-screen width of the widest line, ignoring ANSI escape sequences."""
    return max((line_width(line) for line in text.split("\n")), default=0)


def height(text: str) -> int:
    return text.count("\n") + 1


def join_vertical(*blocks: str) -> str:
    return "\n".join(blocks)


def join_horizontal(*blocks: str) -> str:
    """
    Place blocks side by side, aligned to the top.

    Every block but the last is padded to its own width so that the following
    block starts in the same column on every line. Shorter blocks are extended
    with blank lines.
    """
    if not blocks:
        return ""
    split = [block.split("\n") for block in blocks]
    rows = max(len(lines) for lines in split)
    columns = []
    for position, lines in enumerate(split):
        is_last = position == len(split) - 1
        block_width = max(line_width(line) for line in lines)
        padded = []
        for row in range(rows):
            line = lines[row] if row < len(lines) else ""
            if not is_last:
                line += " " * (block_width - line_width(line))
            padded.append(line)
        columns.append(padded)
    return "\n".join("".join(column[row] for column in columns) for row in range(rows))


__all__ = [
    "Style",
    "background_style",
    "width",
    "height",
    "line_width",
    "join_vertical",
    "join_horizontal",
]
