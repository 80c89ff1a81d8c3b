# chromastream

Colored and styled terminal output for Python, written as a chain of
manipulators pushed into a stream.

Escape sequences are only written when the underlying stream is a terminal,
or when colorizing has been switched on for that stream. Anything else, such
as an in-memory buffer or a redirected file, receives the plain text only, so
output stays clean when piped or captured.

## Installation

```
pip install chromastream
```

No third-party dependencies are needed.

## Usage

Wrap a text stream in a `ColorStream` (it defaults to `sys.stdout`) and push
text and manipulators into it with `<<`:

```python
from chromastream.stream import ColorStream, blue, endl, reset, underline, yellow

out = ColorStream()
out << yellow << "Warm welcome to " << blue << underline << "chromastream" << reset << endl
```

Anything that is not a manipulator is written with `str()`. `endl` writes a
newline and flushes the stream.

The module `chromastream.stream` provides these manipulators:

- styles: `reset`, `bold`, `dark`, `italic`, `underline`, `blink`, `reverse`,
  `concealed`, `crossed`;
- foreground colors: `grey`, `red`, `green`, `yellow`, `blue`, `magenta`,
  `cyan`, `white`, each also as `bright_*`, `dark_*` and `dark_bright_*`;
- background colors: `on_grey`, `on_red`, … `on_white`, and `on_bright_*`;
- `color(code)` and `on_color(code)` pick a color from the 256-color palette
  for the foreground or the background; `color(r, g, b)` and
  `on_color(r, g, b)` pick a true color. Values must be ints in 0..255,
  otherwise `ValueError` (or `TypeError`) is raised; any other number of
  arguments raises `TypeError`;
- `colorize` and `nocolorize` switch forced colorizing on and off for the
  stream they are pushed into.

A member of `chromastream.codes.Attribute` may also be pushed in directly,
for example `out << Attribute.RED`.

Other parts of `ColorStream`:

- `write(*args)` pushes several items in order and returns the stream.
- `is_atty()` tells whether the wrapped stream is a terminal.
- `is_colorized()` tells whether escape sequences will be written.
- `flush()` flushes the wrapped stream.

Building a colored string in memory:

```python
import io
from chromastream.stream import ColorStream, blue, colorize, nocolorize, red

buffer = io.StringIO()
ColorStream(buffer) << colorize << red << "term" << nocolorize << blue << "color"
assert buffer.getvalue() == "\033[31mtermcolor"
```

`ColorStream(buffer, colorize=True)` starts with colorizing already on.

### Raw sequences

`chromastream.codes` exposes the sequences themselves:
`foreground_256(code)`, `background_256(code)`, `foreground_rgb(r, g, b)`
and `background_rgb(r, g, b)` return escape sequences, and every `Attribute`
member gives its own through `Attribute.sequence()` (also its `str()`).

### Console attribute words

`chromastream.console` computes the attribute words used by consoles that
are colored through attribute bits rather than escape sequences:

- constants such as `FOREGROUND_RED`, `BACKGROUND_INTENSITY` and
  `COMMON_LVB_UNDERSCORE`;
- `WINDOWS_ATTRIBUTES`, mapping each `Attribute` that has a console
  counterpart to its `(foreground, background)` words, `None` meaning
  "leave unchanged";
- `merge_attributes(current, foreground, background)`, which replaces the
  foreground and/or background bits of an attribute word;
- `ConsoleAttributes(default)`, whose `change(current, foreground,
  background)` returns the new word, or the default when both parts are
  `None`.

## What it does not do

`ColorStream` always writes escape sequences. The console module only
computes attribute words; nothing in the package reads or sets the
attributes of a real console.

## Demo

```
chromastream-demo
```

prints a short colored greeting.

```
chromastream-demo --showcase
```

prints a sample of every color and style. Add `--force-color` to write the
escape sequences even when the output is not a terminal.

From code, `chromastream.demo.welcome(stream)` and
`chromastream.demo.showcase(stream)` do the same on any text stream or
`ColorStream`, and `chromastream.demo.main(argv)` runs the command.

## Tests

```
pip install chromastream[test]
pytest
```