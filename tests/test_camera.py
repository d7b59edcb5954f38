"""Unit tests for perspective projection and the bounds test."""
import pytest

from ascii_cube_renderer.camera import Camera, ProjectedPoint
from ascii_cube_renderer.math_utils import Point3D

W, H = 80, 24


def test_origin_projects_to_center():
    p = Camera().project(Point3D(0, 0, 0), W, H)
    assert p == ProjectedPoint(40, 12, '#', 10.0)


def test_x_is_doubled_for_cell_aspect():
    p = Camera().project(Point3D(1, 1, 0), W, H)
    assert (p.screen_x, p.screen_y) == (42, 13)


def test_depth_is_distance_from_camera():
    camera = Camera()
    assert camera.depth(Point3D(0, 0, 5)) == 15.0
    assert camera.depth(Point3D(0, 0, -12)) == 2.0
    assert camera.position == Point3D(0, 0, -10)


def test_farther_points_shrink():
    camera = Camera()
    near = camera.project(Point3D(5, 0, -5), W, H)
    far = camera.project(Point3D(5, 0, 5), W, H)
    assert near.screen_x > far.screen_x > W // 2


def test_off_screen_is_none():
    camera = Camera()
    assert camera.project(Point3D(100, 0, 0), W, H) is None
    assert camera.project(Point3D(-100, 0, 0), W, H) is None
    assert camera.project(Point3D(0, 100, 0), W, H) is None


@pytest.mark.parametrize("x", [0.0, 1.0, -1.0])
def test_point_on_projection_plane_is_dropped(x):
    """z = -view_distance gives an infinite scale; nothing raises."""
    assert Camera().project(Point3D(x, 1.0, -100.0), W, H) is None


def test_results_always_within_grid():
    camera = Camera()
    for x in range(-40, 41, 4):
        for y in range(-20, 21, 4):
            for z in (-150, -100, -99.5, -20, 0, 20, 300):
                p = camera.project(Point3D(x, y, z), W, H)
                if p is not None:
                    assert 0 <= p.screen_x < W
                    assert 0 <= p.screen_y < H


def test_glyph_comes_from_shader():
    camera = Camera()
    p = camera.project(Point3D(0, 0, -10), W, H)
    assert p.depth == 0.0
    assert p.glyph == '='
