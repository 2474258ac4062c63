"""Core data types: points, height maps and the camera."""

from __future__ import annotations

from dataclasses import dataclass, field

WIN_WIDTH = 1920
WIN_HEIGHT = 1080
TITLE = "FDF - Wireframe Model"

DEFAULT_COLOR = 0xFFFFFF
DEFAULT_ZOOM = 30.0
DEFAULT_ANGLE = 0.785398  # 45 degrees in radians


class FdfError(Exception):
    """Raised when a map cannot be loaded or displayed."""


@dataclass(frozen=True)
class Point:
    """A grid point with integer coordinates and a packed colour."""

    x: int
    y: int
    z: int
    color: int = DEFAULT_COLOR


@dataclass
class HeightMap:
    """A rectangular grid of points, stored row by row."""

    width: int
    height: int
    points: list[list[Point]] = field(default_factory=list)
    z_min: int = 0
    z_max: int = 0


@dataclass
class Camera:
    """View parameters used when projecting the map."""

    zoom: float = DEFAULT_ZOOM
    x_offset: float = 0.0
    y_offset: float = 0.0
    angle_x: float = DEFAULT_ANGLE
    angle_y: float = DEFAULT_ANGLE
    rot_x: float = 0.0
    rot_y: float = 0.0
    rot_z: float = 0.0

    def reset(self, map_width: int, map_height: int) -> None:
        """Restore the default view, centred on a map of the given size."""
        self.zoom = DEFAULT_ZOOM
        self.angle_x = DEFAULT_ANGLE
        self.angle_y = DEFAULT_ANGLE
        self.x_offset = float(map_width // 2)
        self.y_offset = float(map_height // 2)
        self.rot_x = 0.0
        self.rot_y = 0.0
        self.rot_z = 0.0