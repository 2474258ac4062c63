"""Loading of ``.fdf`` height-map files."""

from __future__ import annotations

from itertools import islice
from os import PathLike
from typing import BinaryIO, Iterable, Iterator, Union

from wirefdf.colors import parse_color
from wirefdf.model import DEFAULT_COLOR, FdfError, HeightMap, Point
from wirefdf.textutil import atoi, split_words

MAX_LINES = 20
MAX_LINE_LENGTH = 1023


def _file_lines(stream: BinaryIO) -> Iterator[str]:
    """Yield the lines of ``stream``, each at most ``MAX_LINE_LENGTH`` bytes.

    Lines keep their newline; longer lines are split into several pieces.
    """
    for raw in iter(lambda: stream.readline(MAX_LINE_LENGTH), b""):
        yield raw.decode("latin-1")


def read_dimensions(lines: Iterable[str]) -> tuple[int, int]:
    """Return ``(width, height)`` from the first ``MAX_LINES`` lines.

    Lines without any word are ignored. A line whose word count differs
    from the first non-empty line raises FdfError.
    """
    width = 0
    height = 0
    for line in islice(lines, MAX_LINES):
        count = len(split_words(line, " "))
        if not count:
            continue
        if width == 0:
            width = count
        elif width != count:
            raise FdfError("Error: Invalid map (inconsistent width)")
        height += 1
    return width, height


def parse_point(text: str, x: int, y: int) -> Point:
    """Parse one ``z`` or ``z,0xRRGGBB`` entry of the map at column x, row y."""
    parts = split_words(text, ",")
    if not parts:
        raise FdfError("Error: Invalid map format")
    color = parse_color(parts[1]) if len(parts) > 1 else DEFAULT_COLOR
    return Point(x, y, atoi(parts[0]), color)


def parse_points(lines: Iterable[str], width: int, height: int) -> HeightMap:
    """Build a height map of the given size from the map's lines.

    Entries beyond ``width`` on a line are ignored; positions that no line
    fills keep a flat default point. The z range always includes 0.
    """
    rows = [[Point(x, y, 0) for x in range(width)] for y in range(height)]
    z_min = 0
    z_max = 0
    for y, line in enumerate(islice(lines, min(height, MAX_LINES))):
        for x, word in enumerate(split_words(line, " ")[:width]):
            point = parse_point(word, x, y)
            rows[y][x] = point
            z_min = min(z_min, point.z)
            z_max = max(z_max, point.z)
    return HeightMap(width, height, rows, z_min, z_max)


def parse_map(path: Union[str, PathLike]) -> HeightMap:
    """Read and parse the map file at ``path``."""
    try:
        with open(path, "rb") as stream:
            width, height = read_dimensions(_file_lines(stream))
    except OSError as exc:
        raise FdfError("Error: Cannot open file") from exc
    if width == 0 or height == 0:
        raise FdfError("Error: Empty map")
    try:
        with open(path, "rb") as stream:
            return parse_points(_file_lines(stream), width, height)
    except OSError as exc:
        raise FdfError("Error: Cannot open file") from exc