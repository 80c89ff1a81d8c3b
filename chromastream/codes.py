"""ANSI escape sequences for terminal text attributes and colours."""

from __future__ import annotations

from enum import Enum

_CSI = "\033["


class Attribute(Enum):
    """A named text attribute or colour, valued by its SGR parameters."""

    RESET = "00"
    BOLD = "1"
    DARK = "2"
    ITALIC = "3"
    UNDERLINE = "4"
    BLINK = "5"
    REVERSE = "7"
    CONCEALED = "8"
    CROSSED = "9"

    GREY = "30"
    RED = "31"
    GREEN = "32"
    YELLOW = "33"
    BLUE = "34"
    MAGENTA = "35"
    CYAN = "36"
    WHITE = "37"

    BRIGHT_GREY = "90"
    BRIGHT_RED = "91"
    BRIGHT_GREEN = "92"
    BRIGHT_YELLOW = "93"
    BRIGHT_BLUE = "94"
    BRIGHT_MAGENTA = "95"
    BRIGHT_CYAN = "96"
    BRIGHT_WHITE = "97"

    ON_GREY = "40"
    ON_RED = "41"
    ON_GREEN = "42"
    ON_YELLOW = "43"
    ON_BLUE = "44"
    ON_MAGENTA = "45"
    ON_CYAN = "46"
    ON_WHITE = "47"

    ON_BRIGHT_GREY = "100"
    ON_BRIGHT_RED = "101"
    ON_BRIGHT_GREEN = "102"
    ON_BRIGHT_YELLOW = "103"
    ON_BRIGHT_BLUE = "104"
    ON_BRIGHT_MAGENTA = "105"
    ON_BRIGHT_CYAN = "106"
    ON_BRIGHT_WHITE = "107"

    DARK_GREY = "30;2"
    DARK_RED = "31;2"
    DARK_GREEN = "32;2"
    DARK_YELLOW = "33;2"
    DARK_BLUE = "34;2"
    DARK_MAGENTA = "35;2"
    DARK_CYAN = "36;2"
    DARK_WHITE = "37;2"

    DARK_BRIGHT_GREY = "90;2"
    DARK_BRIGHT_RED = "91;2"
    DARK_BRIGHT_GREEN = "92;2"
    DARK_BRIGHT_YELLOW = "93;2"
    DARK_BRIGHT_BLUE = "94;2"
    DARK_BRIGHT_MAGENTA = "95;2"
    DARK_BRIGHT_CYAN = "96;2"
    DARK_BRIGHT_WHITE = "97;2"

    def sequence(self) -> str:
        """Return the escape sequence that switches this attribute on."""
        return f"{_CSI}{self.value}m"

    def __str__(self) -> str:
        return self.sequence()


def _byte(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be in 0..255, got {value}")
    return value


def foreground_256(code: int) -> str:
    """Escape sequence selecting foreground colour *code* of the 256-colour palette."""
    return f"{_CSI}38;5;{_byte('code', code)}m"


def background_256(code: int) -> str:
    """Escape sequence selecting background colour *code* of the 256-colour palette."""
    return f"{_CSI}48;5;{_byte('code', code)}m"


def foreground_rgb(r: int, g: int, b: int) -> str:
    """Escape sequence selecting a true-colour foreground."""
    return f"{_CSI}38;2;{_byte('r', r)};{_byte('g', g)};{_byte('b', b)}m"


def background_rgb(r: int, g: int, b: int) -> str:
    """Escape sequence selecting a true-colour background."""
    return f"{_CSI}48;2;{_byte('r', r)};{_byte('g', g)};{_byte('b', b)}m"