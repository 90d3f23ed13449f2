"""Reading of XPM images: the texture format the game's tiles are drawn from."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from typing import Iterable, Iterator, Union

from .colors import NO_COLOR, lookup_color

StrPath = Union[str, "PathLike[str]"]

TRANSPARENT = 0xFF000000
"""Pixel value of a "None" colour: the top byte marks full transparency."""

_NAME_LIMIT = 63
_WORD_SEPARATORS = re.compile(r"[ \t]+")
_QUOTED = re.compile(r'"([^"]*)"')
_DECIMAL = re.compile(r"\s*([+-]?\d+)")
_HEXADECIMAL = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")


class XpmError(ValueError):
    """Raised when XPM data is missing, truncated or malformed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: rows of 0xAARRGGBB pixels, AA being transparency."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value at column ``x``, row ``y``."""
        return self.pixels[y][x]

    def to_rgba(self) -> bytes:
        """Return the pixels as RGBA bytes, row by row, alpha as opacity."""
        out = bytearray()
        for row in self.pixels:
            for value in row:
                out += bytes(
                    (
                        (value >> 16) & 0xFF,
                        (value >> 8) & 0xFF,
                        value & 0xFF,
                        0xFF - ((value >> 24) & 0xFF),
                    )
                )
        return bytes(out)


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _find_outside_quotes(text: str, token: str) -> int:
    quoted = False
    for index, char in enumerate(text):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(token, index):
            return index
    return -1


def _blank_comments(text: str, opener: str, closer: str) -> str:
    while (start := _find_outside_quotes(text, opener)) != -1:
        close = text.find(closer, start + len(opener))
        stop = len(text) if close < 0 else close + len(closer)
        text = text[:start] + " " * (stop - start) + text[stop:]
    return text


def strip_comments(text: str) -> str:
    """Blank out C comments lying outside quoted strings; length is kept."""
    text = _blank_comments(text, "/*", "*/")
    return _blank_comments(text, "//", "\n")


def _atoi(text: str) -> int:
    match = _DECIMAL.match(text)
    return int(match.group(1)) if match else 0


def _hex_value(text: str) -> int:
    match = _HEXADECIMAL.match(text)
    if not match:
        return 0
    value = int(match.group(2), 16)
    if match.group(1) == "-":
        value = -value
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def text_to_rgb(name: str, end: str | None = None) -> int:
    """Resolve a colour spec: "#hex", or a colour name optionally in two words.

    Unknown names give 0; "None" gives -1.
    """
    if name.startswith("#"):
        return _hex_value(name[1:])
    if end is not None:
        name = f"{name} {end}"[:_NAME_LIMIT]
    color = lookup_color(name)
    return 0 if color is None else color


def _pixel_value(color: int) -> int:
    return TRANSPARENT if color == NO_COLOR else color & 0xFFFFFFFF


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode an image from its XPM strings: header, colours, pixel rows."""
    source = iter(lines)
    header = split_words(_next_line(source, "header"))
    if len(header) < 4:
        raise XpmError("incomplete header")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("invalid header values")

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "colour entry")
        if len(line) < cpp:
            raise XpmError("colour entry shorter than its key")
        key = line[:cpp]
        words = split_words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"colour entry {key!r} has no 'c' key") from None
        if index + 1 >= len(words):
            raise XpmError(f"colour entry {key!r} has no colour")
        end = words[index + 2] if index + 2 < len(words) else None
        color = text_to_rgb(words[index + 1], end)
        if cpp <= 2:
            palette[key] = color
        else:
            palette.setdefault(key, color)

    rows = []
    for _ in range(height):
        line = _next_line(source, "pixel row")
        if len(line) < width * cpp:
            raise XpmError("pixel row too short")
        keys = (line[start : start + cpp] for start in range(0, width * cpp, cpp))
        rows.append(tuple(_pixel_value(palette.get(key, 0)) for key in keys))
    return XpmImage(width=width, height=height, pixels=tuple(rows))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode the text of an XPM file."""
    strings = (match.group(1) for match in _QUOTED.finditer(strip_comments(text)))
    return parse_xpm_lines(strings)


def load_xpm(path: StrPath) -> XpmImage:
    """Read and decode the XPM file at ``path``."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read {path}") from exc
    return parse_xpm_text(text)