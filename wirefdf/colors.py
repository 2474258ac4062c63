"""Colour parsing and height-based colouring."""

from __future__ import annotations

import struct
from typing import Optional

from wirefdf.model import DEFAULT_COLOR

_HEX_DIGITS = "0123456789abcdefABCDEF"


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def parse_color(text: Optional[str]) -> int:
    """Parse a ``0xRRGGBB`` colour into a packed RGBA value with full alpha.

    Anything not starting with ``0x`` or holding a non-hex digit yields the
    default colour 0xFFFFFF.
    """
    if not text or not text.startswith("0x"):
        return DEFAULT_COLOR
    digits = text[2:]
    if any(ch not in _HEX_DIGITS for ch in digits):
        return DEFAULT_COLOR
    color = int(digits, 16) & 0xFFFFFFFF if digits else 0
    return ((color << 8) | 0xFF) & 0xFFFFFFFF


def height_color(z: int, z_min: int, z_max: int) -> int:
    """Shade from green at ``z_min`` to red at ``z_max``, with fixed blue."""
    if z_max == z_min:
        return DEFAULT_COLOR
    ratio = _f32(_f32(z - z_min) / _f32(z_max - z_min))
    red = int(_f32(255 * ratio))
    green = int(_f32(255 * _f32(1 - ratio)))
    blue = 128
    return (red << 16) | (green << 8) | blue