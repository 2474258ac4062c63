import dataclasses

import pytest

from wirefdf.model import Camera, FdfError, HeightMap, Point


def test_camera_defaults():
    cam = Camera()
    assert cam.zoom == 30.0
    assert cam.angle_x == 0.785398
    assert cam.angle_y == 0.785398
    assert (cam.rot_x, cam.rot_y, cam.rot_z) == (0.0, 0.0, 0.0)
    assert (cam.x_offset, cam.y_offset) == (0.0, 0.0)


def test_camera_reset_restores_view():
    cam = Camera(zoom=2.5, angle_x=1.0, angle_y=-1.0, rot_x=0.3, rot_y=0.2, rot_z=0.1,
                 x_offset=-40.0, y_offset=60.0)
    cam.reset(19, 11)
    fresh = Camera()
    assert cam.zoom == fresh.zoom
    assert cam.angle_x == fresh.angle_x
    assert cam.angle_y == fresh.angle_y
    assert (cam.rot_x, cam.rot_y, cam.rot_z) == (fresh.rot_x, fresh.rot_y, fresh.rot_z)
    assert (cam.x_offset, cam.y_offset) == (9, 5)


def test_camera_reset_is_idempotent():
    cam = Camera()
    cam.reset(8, 6)
    first = dataclasses.asdict(cam)
    cam.zoom *= 1.2
    cam.reset(8, 6)
    assert dataclasses.asdict(cam) == first


def test_point_default_color():
    assert Point(1, 2, 3).color == 0xFFFFFF


def test_point_is_immutable():
    p = Point(1, 2, 3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.z = 4
    assert p.z == 3
    assert p == Point(1, 2, 3)


def test_height_map_holds_rows():
    rows = [[Point(x, y, x * y) for x in range(3)] for y in range(2)]
    hm = HeightMap(width=3, height=2, points=rows, z_min=0, z_max=2)
    assert hm.points[1][2] == Point(2, 1, 2)
    assert len(hm.points) == hm.height
    assert all(len(row) == hm.width for row in hm.points)


def test_fdf_error_carries_message():
    err = FdfError("Error: Empty map")
    assert str(err) == "Error: Empty map"
    assert err.args == ("Error: Empty map",)
    assert issubclass(FdfError, Exception)