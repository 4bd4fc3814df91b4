"""Reading XPM images into plain pixel grids."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from wolfmaze.colors import lookup_color

# Pixel value stored for transparent ("None") colours.
TRANSPARENT = 0xFF000000

_INT_RE = re.compile(r"[ \t\n\r\f\v]*([+-]?\d+)")
_HEX_RE = re.compile(r"[ \t\n\r\f\v]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")
_WORD_SEP_RE = re.compile(r"[ \t]+")


class XpmError(ValueError):
    """Raised when XPM data cannot be read or parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: ``pixels[y][x]`` holds a 0xRRGGBB value."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at column ``x``, row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y][x]


def split_words(text: str) -> list[str]:
    """Split on spaces and tabs only, dropping empty words."""
    return [word for word in _WORD_SEP_RE.split(text) if word]


def _blank(text: str, opener: str, closer: str) -> str:
    out: list[str] = []
    quoted = False
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == '"':
            quoted = not quoted
        elif not quoted and text.startswith(opener, i):
            end = text.find(closer, i + len(opener))
            stop = n if end == -1 else end + len(closer)
            out.append(" " * (stop - i))
            i = stop
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def strip_comments(text: str) -> str:
    """Replace C-style comments outside quotes with spaces.

    Block comments are removed first, then line comments together with
    their newline. The length of the text is kept.
    """
    return _blank(_blank(text, "/*", "*/"), "//", "\n")


def quoted_lines(text: str) -> list[str]:
    """Return the contents of each complete double-quoted string, in order."""
    parts = text.split('"')
    pairs = (len(parts) - 1) // 2
    return parts[1 : 2 * pairs : 2]


def _atoi(word: str) -> int:
    match = _INT_RE.match(word)
    return int(match.group(1)) if match else 0


def text_to_rgb(name: str, end: str | None) -> int:
    """Turn an XPM colour specification into a 0xRRGGBB value.

    ``#`` introduces a hexadecimal value. Otherwise ``name`` (joined with
    ``end`` when given) is looked up among named colours; ``None`` gives -1
    and an unknown name gives 0.
    """
    if name.startswith("#"):
        match = _HEX_RE.match(name, 1)
        if not match:
            return 0
        value = int(match.group(2), 16)
        return -value if match.group(1) == "-" else value
    if end is not None:
        name = f"{name} {end}"[:63]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _mask_layout(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"colour mask must be positive, got {mask:#x}")
    shift = (mask & -mask).bit_length() - 1
    rest = mask >> shift
    bits = (~rest & (rest + 1)).bit_length() - 1
    return shift, bits


def color_value(color: int, depth: int, red_mask: int, green_mask: int, blue_mask: int) -> int:
    """Convert 0xRRGGBB to a pixel value for a visual with the given masks.

    Visuals of depth 24 or more take the colour unchanged.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    value = 0
    for channel, mask in ((red, red_mask), (green, green_mask), (blue, blue_mask)):
        shift, bits = _mask_layout(mask)
        value += (channel >> (16 - bits)) << shift
    return value


def _next_line(rows: Iterator[str], what: str) -> str:
    try:
        return next(rows)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode XPM strings: a header, colour definitions, then pixel rows."""
    rows = iter(lines)
    words = split_words(_next_line(rows, "header"))
    if len(words) < 4:
        raise XpmError("header needs width, height, colour count and characters per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid header: {' '.join(words[:4])}")

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(rows, "colour definition")
        spec = split_words(line[cpp:])
        try:
            at = spec.index("c")
        except ValueError:
            raise XpmError(f"colour definition without 'c' key: {line!r}") from None
        if at + 1 >= len(spec):
            raise XpmError(f"colour definition without a colour: {line!r}")
        rgb = text_to_rgb(spec[at + 1], spec[at + 2] if at + 2 < len(spec) else None)
        key = line[:cpp]
        if cpp <= 2:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    span = width * cpp
    pixels = []
    for _ in range(height):
        line = _next_line(rows, "pixel row")
        if len(line) < span:
            raise XpmError(f"pixel row shorter than {span} characters: {line!r}")
        colours = (palette.get(line[k : k + cpp], 0) for k in range(0, span, cpp))
        pixels.append(tuple(TRANSPARENT if c == -1 else c for c in colours))
    return XpmImage(width, height, tuple(pixels))


def read_xpm(path: str | os.PathLike[str]) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        with open(path, encoding="latin-1") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read {os.fspath(path)}: {exc.strerror}") from exc
    return parse_xpm(quoted_lines(strip_comments(text)))