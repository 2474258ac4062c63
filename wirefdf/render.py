"""Projection and wireframe drawing into an in-memory image."""

from __future__ import annotations

import math
import struct
from array import array
from dataclasses import replace

from wirefdf.colors import height_color
from wirefdf.model import (
    DEFAULT_COLOR,
    WIN_HEIGHT,
    WIN_WIDTH,
    Camera,
    HeightMap,
    Point,
)
from wirefdf.transform import apply_rotation

BACKGROUND = 0x000000FF


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


class Image:
    """A fixed-size grid of packed RGBA pixels, row by row."""

    def __init__(self, width: int = WIN_WIDTH, height: int = WIN_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("image dimensions must be positive")
        self.width = width
        self.height = height
        self.pixels = array("I", [0]) * (width * height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.width + x

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at (x, y)."""
        self.pixels[self._index(x, y)] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel at (x, y)."""
        return self.pixels[self._index(x, y)]

    def clear(self, color: int = BACKGROUND) -> None:
        """Fill the whole image with one colour."""
        self.pixels = array("I", [color & 0xFFFFFFFF]) * (self.width * self.height)


def project_point(point: Point, camera: Camera) -> Point:
    """Rotate a point and project it isometrically onto the screen."""
    rotated = apply_rotation(point, camera)
    x = _f32(rotated.x - _f32(camera.x_offset))
    y = _f32(rotated.y - _f32(camera.y_offset))
    z = _f32(rotated.z)
    zoom = _f32(camera.zoom)
    screen_x = _f32(x - y) * math.cos(_f32(camera.angle_x)) * zoom + WIN_WIDTH // 2
    screen_y = (
        _f32(x + y) * math.sin(_f32(camera.angle_y)) * zoom
        - _f32(z * zoom)
        + WIN_HEIGHT // 2
    )
    return Point(int(screen_x), int(screen_y), rotated.z, rotated.color)


def draw_segment(image: Image, p1: Point, p2: Point) -> None:
    """Draw a line between two screen points in the colour of ``p1``.

    Pixels outside the image are skipped.
    """
    x, y = p1.x, p1.y
    dx = abs(p2.x - x)
    dy = abs(p2.y - y)
    sx = 1 if x < p2.x else -1
    sy = 1 if y < p2.y else -1
    err = dx - dy
    while True:
        if 0 <= x < image.width and 0 <= y < image.height:
            image.put_pixel(x, y, p1.color)
        if x == p2.x and y == p2.y:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy


def draw_line(image: Image, p1: Point, p2: Point, camera: Camera) -> None:
    """Project two map points and draw the segment joining them."""
    draw_segment(image, project_point(p1, camera), project_point(p2, camera))


def _shaded(point: Point, height_map: HeightMap) -> Point:
    if point.color != DEFAULT_COLOR:
        return point
    return replace(point, color=height_color(point.z, height_map.z_min, height_map.z_max))


def render_map(image: Image, height_map: HeightMap, camera: Camera) -> None:
    """Clear the image and draw the map as a grid of connected segments.

    Points with the default colour are shaded by height.
    """
    image.clear(BACKGROUND)
    last_row = height_map.height - 1
    last_col = height_map.width - 1
    for y, row in enumerate(height_map.points[: height_map.height]):
        for x, point in enumerate(row[: height_map.width]):
            start = _shaded(point, height_map)
            if x < last_col:
                draw_line(image, start, _shaded(row[x + 1], height_map), camera)
            if y < last_row:
                below = height_map.points[y + 1][x]
                draw_line(image, start, _shaded(below, height_map), camera)