"""Keyboard controls for moving, zooming and rotating the view."""

from __future__ import annotations

import struct
from enum import Enum, auto

from wirefdf.model import Camera, HeightMap

PAN_STEP = 20
ZOOM_FACTOR = 1.2
ANGLE_STEP = 0.1


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


class Key(Enum):
    """Keys the viewer reacts to."""

    ESCAPE = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    EQUAL = auto()
    MINUS = auto()
    W = auto()
    S = auto()
    A = auto()
    D = auto()
    Q = auto()
    E = auto()
    R = auto()


def handle_key(camera: Camera, height_map: HeightMap, key: Key) -> bool:
    """Update the camera for a key press.

    Returns False when the key asks to close the window, True otherwise.
    The caller redraws the map afterwards.
    """
    match key:
        case Key.ESCAPE:
            return False
        case Key.UP:
            camera.y_offset = _f32(camera.y_offset - PAN_STEP)
        case Key.DOWN:
            camera.y_offset = _f32(camera.y_offset + PAN_STEP)
        case Key.LEFT:
            camera.x_offset = _f32(camera.x_offset - PAN_STEP)
        case Key.RIGHT:
            camera.x_offset = _f32(camera.x_offset + PAN_STEP)
        case Key.EQUAL:
            camera.zoom = _f32(camera.zoom * ZOOM_FACTOR)
        case Key.MINUS:
            camera.zoom = _f32(camera.zoom / ZOOM_FACTOR)
        case Key.W:
            camera.angle_x = _f32(camera.angle_x + ANGLE_STEP)
        case Key.S:
            camera.angle_x = _f32(camera.angle_x - ANGLE_STEP)
        case Key.A:
            camera.angle_y = _f32(camera.angle_y + ANGLE_STEP)
        case Key.D:
            camera.angle_y = _f32(camera.angle_y - ANGLE_STEP)
        case Key.Q:
            camera.rot_z = _f32(camera.rot_z + ANGLE_STEP)
        case Key.E:
            camera.rot_z = _f32(camera.rot_z - ANGLE_STEP)
        case Key.R:
            camera.reset(height_map.width, height_map.height)
    return True