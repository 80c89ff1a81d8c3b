"""Colour handling for consoles driven by attribute words rather than escapes."""

from __future__ import annotations

from chromastream.codes import Attribute

FOREGROUND_BLUE = 0x0001
FOREGROUND_GREEN = 0x0002
FOREGROUND_RED = 0x0004
FOREGROUND_INTENSITY = 0x0008
BACKGROUND_BLUE = 0x0010
BACKGROUND_GREEN = 0x0020
BACKGROUND_RED = 0x0040
BACKGROUND_INTENSITY = 0x0080
COMMON_LVB_UNDERSCORE = 0x8000

_FOREGROUND_MASK = 0x0F
_BACKGROUND_MASK = 0xF0
_WORD_MAX = 0xFFFF

_FG = {
    "GREY": 0,
    "RED": FOREGROUND_RED,
    "GREEN": FOREGROUND_GREEN,
    "YELLOW": FOREGROUND_GREEN | FOREGROUND_RED,
    "BLUE": FOREGROUND_BLUE,
    "MAGENTA": FOREGROUND_BLUE | FOREGROUND_RED,
    "CYAN": FOREGROUND_BLUE | FOREGROUND_GREEN,
    "WHITE": FOREGROUND_BLUE | FOREGROUND_GREEN | FOREGROUND_RED,
}
_BG = {
    "GREY": 0,
    "RED": BACKGROUND_RED,
    "GREEN": BACKGROUND_GREEN,
    "YELLOW": BACKGROUND_GREEN | BACKGROUND_RED,
    "BLUE": BACKGROUND_BLUE,
    "MAGENTA": BACKGROUND_BLUE | BACKGROUND_RED,
    "CYAN": BACKGROUND_GREEN | BACKGROUND_BLUE,
    "WHITE": BACKGROUND_GREEN | BACKGROUND_BLUE | BACKGROUND_RED,
}


def _build_table() -> dict[Attribute, tuple[int | None, int | None]]:
    table: dict[Attribute, tuple[int | None, int | None]] = {
        Attribute.RESET: (None, None),
        Attribute.UNDERLINE: (None, COMMON_LVB_UNDERSCORE),
    }
    for name, fg in _FG.items():
        table[Attribute[name]] = (fg, None)
        table[Attribute[f"BRIGHT_{name}"]] = (fg | FOREGROUND_INTENSITY, None)
        # Dim variants have no console equivalent and fall back to the plain colour.
        table[Attribute[f"DARK_{name}"]] = (fg, None)
        table[Attribute[f"DARK_BRIGHT_{name}"]] = (fg, None)
    for name, bg in _BG.items():
        table[Attribute[f"ON_{name}"]] = (None, bg)
        table[Attribute[f"ON_BRIGHT_{name}"]] = (None, bg | BACKGROUND_INTENSITY)
    return table


# Foreground/background words per attribute; None leaves that half unchanged.
# Attributes missing here have no console counterpart.
WINDOWS_ATTRIBUTES: dict[Attribute, tuple[int | None, int | None]] = _build_table()


def _word(name: str, value: int | None) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int or None, not {type(value).__name__}")
    if not 0 <= value <= _WORD_MAX:
        raise ValueError(f"{name} must be in 0..{_WORD_MAX:#x}, got {value}")
    return value


def merge_attributes(current: int, foreground: int | None, background: int | None) -> int:
    """Replace the foreground and/or background bits of *current*.

    A part given as None is left as it is.
    """
    result = _word("current", current)
    fg = _word("foreground", foreground)
    bg = _word("background", background)
    if fg is not None:
        result = (result & ~_FOREGROUND_MASK) | fg
    if bg is not None:
        result = (result & ~_BACKGROUND_MASK) | bg
    return result & _WORD_MAX


class ConsoleAttributes:
    """Tracks a console's default attribute word and computes changes to it."""

    def __init__(self, default: int) -> None:
        self.default = _word("default", default)

    def change(self, current: int, foreground: int | None, background: int | None) -> int:
        """Return the attribute word after a change; both None restores the default."""
        if foreground is None and background is None:
            _word("current", current)
            return self.default
        return merge_attributes(current, foreground, background)