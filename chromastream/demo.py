"""Demonstration of the colour manipulators."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence, TextIO

from chromastream.stream import (
    ColorStream,
    blink,
    blue,
    bold,
    bright_blue,
    bright_cyan,
    bright_green,
    bright_grey,
    bright_magenta,
    bright_red,
    bright_white,
    bright_yellow,
    color,
    concealed,
    crossed,
    cyan,
    dark,
    endl,
    green,
    grey,
    italic,
    magenta,
    on_blue,
    on_bright_blue,
    on_bright_cyan,
    on_bright_green,
    on_bright_grey,
    on_bright_magenta,
    on_bright_red,
    on_bright_white,
    on_bright_yellow,
    on_color,
    on_cyan,
    on_green,
    on_grey,
    on_magenta,
    on_red,
    on_white,
    on_yellow,
    red,
    reset,
    reverse,
    underline,
    white,
    yellow,
)


def _wrap(stream: ColorStream | TextIO) -> ColorStream:
    return stream if isinstance(stream, ColorStream) else ColorStream(stream)


def welcome(stream: ColorStream | TextIO) -> None:
    """Write the greeting line."""
    out = _wrap(stream)
    out << yellow << "Warm welcome to " << blue << underline << "TERMCOLOR" << reset << endl


def showcase(stream: ColorStream | TextIO) -> None:
    """Write a sample of every colour and attribute."""
    out = _wrap(stream)

    out << color(181, 137, 0) << "#b58900" << reset << endl
    out << on_color(211, 54, 130) << "#d33682" << reset << endl
    out << endl

    out << color(123) << "No. 123" << reset << endl
    out << on_color(234) << "No. 234" << reset << endl
    out << endl

    sections = [
        [(grey, "grey"), (red, "red"), (green, "green"), (yellow, "yellow"),
         (blue, "blue"), (magenta, "magenta"), (cyan, "cyan"), (white, "white")],
        [(bright_grey, "bright grey"), (bright_red, "bright red"),
         (bright_green, "bright green"), (bright_yellow, "bright yellow"),
         (bright_blue, "bright blue"), (bright_magenta, "bright magenta"),
         (bright_cyan, "bright cyan"), (bright_white, "bright white")],
    ]
    for section in sections:
        for manipulator, name in section:
            out << manipulator << f"{name} message" << reset << endl
        out << "default message" << endl << endl

    backgrounds = [
        [(on_grey, "grey"), (on_red, "red"), (on_green, "green"), (on_yellow, "yellow"),
         (on_blue, "blue"), (on_magenta, "magenta"), (on_cyan, "cyan"),
         (on_white, "white")],
        [(on_bright_grey, "bright grey"), (on_bright_red, "bright red"),
         (on_bright_green, "bright green"), (on_bright_yellow, "bright yellow"),
         (on_bright_blue, "bright blue"), (on_bright_magenta, "bright magenta"),
         (on_bright_cyan, "bright cyan"), (on_bright_white, "bright white")],
    ]
    for section in backgrounds:
        for manipulator, name in section:
            out << manipulator << f"message on {name}" << reset << endl
        out << "default message" << endl << endl

    pairs = [
        [(red, on_white, "red on white"), (blue, on_yellow, "blue on yellow")],
        [(bright_red, on_white, "bright red on white"),
         (blue, on_bright_yellow, "blue on bright yellow")],
        [(bright_red, on_bright_white, "bright red on bright white"),
         (bright_blue, on_bright_yellow, "bright blue on bright yellow")],
    ]
    for section in pairs:
        for fg, bg, text in section:
            out << fg << bg << text << reset << endl
        out << endl

    out << bold << red << "bold red message" << reset << endl
    out << dark << blue << "dark blue message" << reset << endl
    for manipulator, text in [
        (italic, "italic message"),
        (underline, "underlined message"),
        (blink, "blinked message"),
        (reverse, "reversed message"),
        (concealed, "concealed message"),
        (crossed, "crossed message"),
    ]:
        out << manipulator << text << reset << endl
    out << "default message" << endl << endl

    out << "formatted " << yellow << "log" << reset << " message" << endl
    out << "formatted " << red << "error" << reset << " message" << endl
    out << endl

    out << blue << "subtest" << reset << endl


def main(argv: Sequence[str] | None = None) -> int:
    """Print the greeting, or the full showcase with --showcase."""
    parser = argparse.ArgumentParser(prog="chromastream", description=main.__doc__)
    parser.add_argument("--showcase", action="store_true",
                        help="print every colour and attribute")
    parser.add_argument("--force-color", action="store_true",
                        help="emit escape sequences even when not writing to a terminal")
    args = parser.parse_args(argv)

    out = ColorStream(sys.stdout, colorize=args.force_color)
    if args.showcase:
        showcase(out)
    else:
        welcome(out)
    return 0