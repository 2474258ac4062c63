"""Rotations of grid points about the three axes."""

from __future__ import annotations

import math
import struct

from wirefdf.model import Camera, Point


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _trig(angle: float) -> tuple[float, float]:
    a = _f32(angle)
    return _f32(math.cos(a)), _f32(math.sin(a))


def _mul(n: int, factor: float) -> float:
    return _f32(_f32(n) * factor)


def rotate_x(point: Point, angle: float) -> Point:
    """Rotate about the x axis; coordinates are truncated to integers."""
    c, s = _trig(angle)
    y = _f32(_mul(point.y, c) - _mul(point.z, s))
    z = _f32(_mul(point.y, s) + _mul(point.z, c))
    return Point(point.x, int(y), int(z), point.color)


def rotate_y(point: Point, angle: float) -> Point:
    """Rotate about the y axis; coordinates are truncated to integers."""
    c, s = _trig(angle)
    x = _f32(_mul(point.x, c) + _mul(point.z, s))
    z = _f32(_mul(-point.x, s) + _mul(point.z, c))
    return Point(int(x), point.y, int(z), point.color)


def rotate_z(point: Point, angle: float) -> Point:
    """Rotate about the z axis; coordinates are truncated to integers."""
    c, s = _trig(angle)
    x = _f32(_mul(point.x, c) - _mul(point.y, s))
    y = _f32(_mul(point.x, s) + _mul(point.y, c))
    return Point(int(x), int(y), point.z, point.color)


def apply_rotation(point: Point, camera: Camera) -> Point:
    """Apply the camera's x, y and z rotations in that order."""
    rotated = rotate_x(point, camera.rot_x)
    rotated = rotate_y(rotated, camera.rot_y)
    return rotate_z(rotated, camera.rot_z)