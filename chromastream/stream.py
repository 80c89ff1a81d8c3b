"""Stream wrapper that writes text with colour manipulators."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Callable, TextIO

from chromastream.codes import (
    Attribute,
    background_256,
    background_rgb,
    foreground_256,
    foreground_rgb,
)


@dataclass(frozen=True)
class Manipulator:
    """An action applied to a ColorStream, such as switching on a colour."""

    name: str
    action: Callable[["ColorStream"], None]

    def __call__(self, stream: "ColorStream") -> "ColorStream":
        self.action(stream)
        return stream

    def __repr__(self) -> str:
        return f"Manipulator({self.name!r})"


class ColorStream:
    """Wraps a text stream; escape sequences reach it only when colour is on.

    Colour is on when the underlying stream is a terminal, or when the
    stream has been asked to colorize regardless.
    """

    def __init__(self, stream: TextIO | None = None, colorize: bool = False) -> None:
        self.stream = sys.stdout if stream is None else stream
        self.colorize = bool(colorize)

    def __lshift__(self, item: Any) -> "ColorStream":
        if isinstance(item, Manipulator):
            return item(self)
        if isinstance(item, Attribute):
            return _escape(item.name.lower(), item.sequence())(self)
        self.stream.write(str(item))
        return self

    def write(self, *args: Any) -> "ColorStream":
        """Write every argument in turn, applying manipulators among them."""
        for item in args:
            self << item
        return self

    def flush(self) -> None:
        flush = getattr(self.stream, "flush", None)
        if callable(flush):
            flush()

    def is_atty(self) -> bool:
        """Whether the underlying stream refers to a terminal."""
        isatty = getattr(self.stream, "isatty", None)
        if not callable(isatty):
            return False
        try:
            return bool(isatty())
        except ValueError:
            return False

    def is_colorized(self) -> bool:
        """Whether escape sequences are written to this stream."""
        return self.is_atty() or self.colorize

    def _emit(self, sequence: str) -> None:
        if self.is_colorized():
            self.stream.write(sequence)


def _escape(name: str, sequence: str) -> Manipulator:
    def action(stream: ColorStream) -> None:
        stream._emit(sequence)

    return Manipulator(name, action)


def _attribute(attribute: Attribute) -> Manipulator:
    return _escape(attribute.name.lower(), attribute.sequence())


def _set_colorize(flag: bool) -> Callable[[ColorStream], None]:
    def action(stream: ColorStream) -> None:
        stream.colorize = flag

    return action


def _endl(stream: ColorStream) -> None:
    stream.stream.write("\n")
    stream.flush()


def color(*args: int) -> Manipulator:
    """Foreground colour: one palette index (0..255) or r, g, b components."""
    if len(args) == 1:
        return _escape(f"color{args}", foreground_256(args[0]))
    if len(args) == 3:
        return _escape(f"color{args}", foreground_rgb(*args))
    raise TypeError(f"color() takes 1 or 3 arguments, got {len(args)}")


def on_color(*args: int) -> Manipulator:
    """Background colour: one palette index (0..255) or r, g, b components."""
    if len(args) == 1:
        return _escape(f"on_color{args}", background_256(args[0]))
    if len(args) == 3:
        return _escape(f"on_color{args}", background_rgb(*args))
    raise TypeError(f"on_color() takes 1 or 3 arguments, got {len(args)}")


colorize = Manipulator("colorize", _set_colorize(True))
nocolorize = Manipulator("nocolorize", _set_colorize(False))
endl = Manipulator("endl", _endl)

reset = _attribute(Attribute.RESET)
bold = _attribute(Attribute.BOLD)
dark = _attribute(Attribute.DARK)
italic = _attribute(Attribute.ITALIC)
underline = _attribute(Attribute.UNDERLINE)
blink = _attribute(Attribute.BLINK)
reverse = _attribute(Attribute.REVERSE)
concealed = _attribute(Attribute.CONCEALED)
crossed = _attribute(Attribute.CROSSED)

grey = _attribute(Attribute.GREY)
red = _attribute(Attribute.RED)
green = _attribute(Attribute.GREEN)
yellow = _attribute(Attribute.YELLOW)
blue = _attribute(Attribute.BLUE)
magenta = _attribute(Attribute.MAGENTA)
cyan = _attribute(Attribute.CYAN)
white = _attribute(Attribute.WHITE)

bright_grey = _attribute(Attribute.BRIGHT_GREY)
bright_red = _attribute(Attribute.BRIGHT_RED)
bright_green = _attribute(Attribute.BRIGHT_GREEN)
bright_yellow = _attribute(Attribute.BRIGHT_YELLOW)
bright_blue = _attribute(Attribute.BRIGHT_BLUE)
bright_magenta = _attribute(Attribute.BRIGHT_MAGENTA)
bright_cyan = _attribute(Attribute.BRIGHT_CYAN)
bright_white = _attribute(Attribute.BRIGHT_WHITE)

on_grey = _attribute(Attribute.ON_GREY)
on_red = _attribute(Attribute.ON_RED)
on_green = _attribute(Attribute.ON_GREEN)
on_yellow = _attribute(Attribute.ON_YELLOW)
on_blue = _attribute(Attribute.ON_BLUE)
on_magenta = _attribute(Attribute.ON_MAGENTA)
on_cyan = _attribute(Attribute.ON_CYAN)
on_white = _attribute(Attribute.ON_WHITE)

on_bright_grey = _attribute(Attribute.ON_BRIGHT_GREY)
on_bright_red = _attribute(Attribute.ON_BRIGHT_RED)
on_bright_green = _attribute(Attribute.ON_BRIGHT_GREEN)
on_bright_yellow = _attribute(Attribute.ON_BRIGHT_YELLOW)
on_bright_blue = _attribute(Attribute.ON_BRIGHT_BLUE)
on_bright_magenta = _attribute(Attribute.ON_BRIGHT_MAGENTA)
on_bright_cyan = _attribute(Attribute.ON_BRIGHT_CYAN)
on_bright_white = _attribute(Attribute.ON_BRIGHT_WHITE)

dark_grey = _attribute(Attribute.DARK_GREY)
dark_red = _attribute(Attribute.DARK_RED)
dark_green = _attribute(Attribute.DARK_GREEN)
dark_yellow = _attribute(Attribute.DARK_YELLOW)
dark_blue = _attribute(Attribute.DARK_BLUE)
dark_magenta = _attribute(Attribute.DARK_MAGENTA)
dark_cyan = _attribute(Attribute.DARK_CYAN)
dark_white = _attribute(Attribute.DARK_WHITE)

dark_bright_grey = _attribute(Attribute.DARK_BRIGHT_GREY)
dark_bright_red = _attribute(Attribute.DARK_BRIGHT_RED)
dark_bright_green = _attribute(Attribute.DARK_BRIGHT_GREEN)
dark_bright_yellow = _attribute(Attribute.DARK_BRIGHT_YELLOW)
dark_bright_blue = _attribute(Attribute.DARK_BRIGHT_BLUE)
dark_bright_magenta = _attribute(Attribute.DARK_BRIGHT_MAGENTA)
dark_bright_cyan = _attribute(Attribute.DARK_BRIGHT_CYAN)
dark_bright_white = _attribute(Attribute.DARK_BRIGHT_WHITE)