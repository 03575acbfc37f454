"""ANSI color palette used by prompt segments and the compositor.

Colors are plain SGR parameter pairs. Segments pick a foreground/background
pair; the compositor turns pairs into escape sequences with :func:`sgr`.
"""

from __future__ import annotations

from dataclasses import dataclass

RESET = "\033[0m"


@dataclass(frozen=True)
class Color:
    """One of the terminal's base colors with its SGR codes."""

    name: str
    fg: int
    bg: int
    fg_bright: int
    bg_bright: int


BLACK = Color("black", 30, 40, 90, 100)
RED = Color("red", 31, 41, 91, 101)
GREEN = Color("green", 32, 42, 92, 102)
YELLOW = Color("yellow", 33, 43, 93, 103)
BLUE = Color("blue", 34, 44, 94, 104)
MAGENTA = Color("magenta", 35, 45, 95, 105)
CYAN = Color("cyan", 36, 46, 96, 106)
WHITE = Color("white", 37, 47, 97, 107)
DEFAULT = Color("default", 39, 49, 99, 109)


def sgr(fg: Color, bg: Color, *, no_color: bool = False) -> str:
    """Return the escape sequence selecting ``fg`` on ``bg``."""
    if no_color:
        return ""
    return f"\033[{fg.fg}m\033[{bg.bg}m"


def reset(*, no_color: bool = False) -> str:
    return "" if no_color else RESET


def foreground(color: Color) -> str:
    """Return the escape sequence for a foreground-only color change."""
    return f"\033[{color.fg}m"


__all__ = [
    "Color",
    "RESET",
    "BLACK",
    "RED",
    "GREEN",
    "YELLOW",
    "BLUE",
    "MAGENTA",
    "CYAN",
    "WHITE",
    "DEFAULT",
    "sgr",
    "reset",
    "foreground",
]
