"""Unit tests for the frame pipeline and painter's-algorithm compositing."""
from ascii_cube_renderer.camera import Camera, ProjectedPoint
from ascii_cube_renderer.canvas import Canvas
from ascii_cube_renderer.display import BufferDisplay
from ascii_cube_renderer.mesh import PointCloud
from ascii_cube_renderer.renderer import Renderer, composite

W, H = 80, 24


def test_nearer_point_wins_cell():
    near = ProjectedPoint(3, 2, '=', 5.0)
    far = ProjectedPoint(3, 2, '.', 20.0)
    assert composite([near, far], 10, 5).get(3, 2) == '='
    assert composite([far, near], 10, 5).get(3, 2) == '='


def test_equal_depths_keep_input_order():
    a = ProjectedPoint(1, 1, '+', 7.0)
    b = ProjectedPoint(1, 1, '#', 7.0)
    assert composite([a, b], 4, 4).get(1, 1) == '#'
    assert composite([b, a], 4, 4).get(1, 1) == '+'


def test_canvas_clips_out_of_range():
    canv = Canvas(4, 3)
    canv.put(-1, 0, '#')
    canv.put(4, 0, '#')
    canv.put(0, 3, '#')
    assert canv.rows() == ['    '] * 3
    assert canv.get(9, 9) is None


def test_blit_presents_once():
    canv = composite([ProjectedPoint(2, 1, '*', 3.0)], 5, 3)
    display = BufferDisplay(5, 3)
    canv.blit(display)
    assert list(display.frames) == [['     ', '  *  ', '     ']]


def test_render_is_deterministic():
    cloud = PointCloud.cube(5.0, 0.3)
    renderer = Renderer(Camera(), W, H)
    first = renderer.project_all(cloud, 0.9, 0.4)
    second = renderer.project_all(cloud, 0.9, 0.4)
    assert first == second
    assert renderer.render(cloud, 0.9, 0.4).rows() == renderer.render(cloud, 0.9, 0.4).rows()


def test_projected_points_are_on_screen():
    cloud = PointCloud.cube(5.0, 0.3)
    renderer = Renderer(Camera(), W, H)
    points = renderer.project_all(cloud, 1.3, 2.1)
    assert points
    assert all(0 <= p.screen_x < W and 0 <= p.screen_y < H for p in points)


def test_front_face_hides_back_face():
    """Facing the camera, the center cell shows the near face's glyph."""
    cloud = PointCloud.cube(5.0, 0.3)
    canv = Renderer(Camera(), W, H).render(cloud, 0.0, 0.0)
    assert canv.get(40, 12) == '='


def test_draw_presents_rendered_frame():
    cloud = PointCloud.cube(2.0, 0.5)
    display = BufferDisplay(W, H)
    canv = Renderer(Camera(), W, H).draw(display, cloud, 0.2, 0.1)
    assert list(display.frames) == [canv.rows()]
