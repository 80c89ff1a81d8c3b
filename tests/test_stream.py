import io

import pytest

from chromastream.codes import Attribute
from chromastream.stream import (
    ColorStream,
    Manipulator,
    blue,
    bold,
    color,
    colorize,
    dark_bright_white,
    dark_grey,
    endl,
    nocolorize,
    on_bright_white,
    on_color,
    on_yellow,
    red,
    reset,
    underline,
)


class _FakeTerminal(io.StringIO):
    def isatty(self):
        return True


def _forced():
    buf = io.StringIO()
    return buf, ColorStream(buf, colorize=True)


def test_escapes_skipped_for_plain_streams():
    buf = io.StringIO()
    cs = ColorStream(buf)
    cs << red << "term" << blue << on_yellow << "color"
    assert buf.getvalue() == "termcolor"


def test_escapes_preserved_when_asked():
    buf = io.StringIO()
    cs = ColorStream(buf)
    cs << colorize << red << "term" << nocolorize << blue << "color"
    assert buf.getvalue() == "\033[31mtermcolor"


def test_terminal_stream_is_colorized():
    buf = _FakeTerminal()
    cs = ColorStream(buf)
    assert cs.is_atty() is True
    assert cs.is_colorized() is True
    cs << red << "x"
    assert buf.getvalue() == "\033[31mx"


def test_plain_stream_is_not_atty():
    cs = ColorStream(io.StringIO())
    assert cs.is_atty() is False
    assert cs.is_colorized() is False


def test_stream_without_isatty():
    class Sink:
        def __init__(self):
            self.parts = []

        def write(self, text):
            self.parts.append(text)

    sink = Sink()
    cs = ColorStream(sink)
    assert cs.is_atty() is False
    cs << red << "a"
    assert sink.parts == ["a"]


def test_closed_stream_is_not_atty():
    buf = io.StringIO()
    buf.close()
    assert ColorStream(buf).is_atty() is False


def test_truecolor_sequences():
    buf, cs = _forced()
    cs << color(181, 137, 0) << "#b58900" << reset
    assert buf.getvalue() == "\033[38;2;181;137;0m#b58900\033[00m"
    buf, cs = _forced()
    cs << on_color(211, 54, 130) << "#d33682"
    assert buf.getvalue() == "\033[48;2;211;54;130m#d33682"


def test_palette_sequences():
    buf, cs = _forced()
    cs << color(123) << "No. 123" << on_color(234) << "No. 234"
    assert buf.getvalue() == "\033[38;5;123mNo. 123\033[48;5;234mNo. 234"


@pytest.mark.parametrize("args", [(), (1, 2), (1, 2, 3, 4)])
def test_color_arity(args):
    with pytest.raises(TypeError):
        color(*args)
    with pytest.raises(TypeError):
        on_color(*args)


def test_color_range():
    with pytest.raises(ValueError):
        color(256)
    with pytest.raises(ValueError):
        on_color(0, -1, 0)


@pytest.mark.parametrize(
    "manipulator, expected",
    [
        (reset, "\033[00m"),
        (bold, "\033[1m"),
        (underline, "\033[4m"),
        (dark_grey, "\033[30;2m"),
        (dark_bright_white, "\033[97;2m"),
        (on_bright_white, "\033[107m"),
    ],
)
def test_attribute_sequences(manipulator, expected):
    buf, cs = _forced()
    cs << manipulator
    assert buf.getvalue() == expected


def test_attribute_enum_accepted():
    buf, cs = _forced()
    cs << Attribute.GREEN << "go"
    assert buf.getvalue() == "\033[32mgo"


def test_non_string_items_are_stringified():
    buf = io.StringIO()
    ColorStream(buf) << 5 << " " << 2.5
    assert buf.getvalue() == "5 2.5"


def test_write_applies_manipulators():
    buf, cs = _forced()
    result = cs.write(bold, red, "bold red message", reset, endl)
    assert result is cs
    assert buf.getvalue() == "\033[1m\033[31mbold red message\033[00m\n"


def test_endl_writes_newline_without_colour():
    buf = io.StringIO()
    ColorStream(buf) << "line" << endl
    assert buf.getvalue() == "line\n"


def test_manipulator_call_returns_stream():
    buf, cs = _forced()
    assert red(cs) is cs
    assert buf.getvalue() == "\033[31m"


def test_custom_manipulator():
    buf = io.StringIO()
    cs = ColorStream(buf)
    cs << Manipulator("mark", lambda s: s.stream.write("*")) << "x"
    assert buf.getvalue() == "*x"


def test_colorize_flag_toggles():
    cs = ColorStream(io.StringIO())
    cs << colorize
    assert cs.colorize is True
    cs << nocolorize
    assert cs.colorize is False