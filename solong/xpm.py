"""Reading of XPM pixmaps into 32-bit pixel images."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from solong.colors import color_from_text

__all__ = [
    "TRANSPARENT",
    "XpmError",
    "XpmImage",
    "split_words",
    "find_unquoted",
    "strip_comments",
    "quoted_lines",
    "parse_xpm",
    "parse_xpm_text",
    "load_xpm",
]

TRANSPARENT = 0xFF000000
"""Pixel value stored for the colour "None"."""

_BYTES_PER_PIXEL = 4
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded XPM image; each pixel is a 32-bit 0xAARRGGBB value."""

    width: int
    height: int
    rows: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.rows[y][x]

    def to_bytes(self, big_endian: bool = False) -> bytes:
        """Return the pixels as 4-byte values, row by row."""
        order = "big" if big_endian else "little"
        return b"".join(
            value.to_bytes(_BYTES_PER_PIXEL, order) for row in self.rows for value in row
        )


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs only."""
    return [word for word in text.replace("\t", " ").split(" ") if word]


def find_unquoted(text: str, needle: str) -> int:
    """Return the first position of ``needle`` outside double quotes, or -1."""
    if not needle:
        raise ValueError("needle must not be empty")
    if len(needle) > len(text):
        return -1
    in_quote = False
    for pos, char in enumerate(text[: len(text) - len(needle) + 1]):
        if char == '"':
            in_quote = not in_quote
        if not in_quote and text.startswith(needle, pos):
            return pos
    return -1


def _blank(text: str, start: int, span: int) -> str:
    stop = min(start + span, len(text))
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C comments outside quotes with spaces, keeping the length."""
    while (start := find_unquoted(text, "/*")) != -1:
        end = text.find("*/", start + 2)
        span = end - start + 2 if end != -1 else 3
        text = _blank(text, start, span)
    while (start := find_unquoted(text, "//")) != -1:
        end = text.find("\n", start + 2)
        span = end - start + 1 if end != -1 else 2
        text = _blank(text, start, span)
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield each double-quoted string of ``text`` in order."""
    pos = 0
    while (opening := text.find('"', pos)) != -1:
        closing = text.find('"', opening + 1)
        if closing == -1:
            return
        yield text[opening + 1 : closing]
        pos = closing + 1


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _read_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"bad header: {line!r}")
    values = tuple(_atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError(f"bad header: {line!r}")
    return values  # type: ignore[return-value]


def _read_color(line: str, cpp: int) -> tuple[str, int]:
    if len(line) < cpp:
        raise XpmError(f"colour line too short: {line!r}")
    words = split_words(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"no colour key in {line!r}") from None
    if index >= len(words):
        raise XpmError(f"no colour after key in {line!r}")
    end = words[index + 1] if index + 1 < len(words) else None
    return line[:cpp], color_from_text(words[index], end)


def _pixel_value(color: int) -> int:
    return TRANSPARENT if color == -1 else color & 0xFFFFFFFF


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode XPM values: a header line, colour lines, then pixel rows."""
    source = iter(lines)
    width, height, ncolors, cpp = _read_header(_next_line(source, "header"))

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        key, color = _read_color(_next_line(source, "colour line"), cpp)
        if cpp <= 2:
            palette[key] = color
        else:
            palette.setdefault(key, color)

    rows = []
    for _ in range(height):
        line = _next_line(source, "pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        rows.append(
            tuple(
                _pixel_value(palette.get(line[start : start + cpp], 0))
                for start in range(0, width * cpp, cpp)
            )
        )
    return XpmImage(width, height, tuple(rows))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode the text of an XPM file."""
    return parse_xpm(quoted_lines(strip_comments(text)))


def load_xpm(path: str | PathLike[str]) -> XpmImage:
    """Read and decode an XPM file."""
    return parse_xpm_text(Path(path).read_text(encoding="latin-1"))