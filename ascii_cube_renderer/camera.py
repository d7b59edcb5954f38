#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/camera.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
from typing import NamedTuple, Optional

from .math_utils import Point3D
from .shading import DepthShader


class ProjectedPoint(NamedTuple):
    """One on-screen sample of the current frame."""
    screen_x: int
    screen_y: int
    glyph: str
    depth: float


class Camera:
    """
    Fixed viewer for the cube renderer.

    The camera sits on the Z axis at `z` and never moves; it is only used
    to measure depth. Perspective uses a separate projection plane at
    `view_distance` in front of the origin.
    """
    __slots__ = ('z', 'view_distance', 'shader')

    def __init__(self, z: float = -10.0, view_distance: float = 100.0,
                 shader: Optional[DepthShader] = None):
        self.z = z
        self.view_distance = view_distance
        self.shader = shader if shader is not None else DepthShader()

    @property
    def position(self) -> Point3D:
        return Point3D(0.0, 0.0, self.z)

    def depth(self, p: Point3D) -> float:
        """Distance from the camera along the viewing axis."""
        return abs(p.z - self.z)

    def scale(self, p: Point3D) -> float:
        """
        Perspective scale factor for `p`.

        Points on the projection plane get an infinite scale and points
        behind it a negative one. Neither is corrected; the bounds test in
        project() throws the resulting coordinates away.
        """
        denom = p.z + self.view_distance
        if denom == 0:
            return math.copysign(math.inf, self.view_distance)
        return self.view_distance / denom

    def project(self, p: Point3D, width: int, height: int) -> Optional[ProjectedPoint]:
        """
        Map a rotated point onto a `width` x `height` character grid.

        X is doubled because terminal cells are about twice as tall as
        they are wide. Returns None when the point falls off the grid.
        """
        scale = self.scale(p)
        fx = p.x * scale * 2 + width / 2
        fy = p.y * scale + height / 2
        if not (math.isfinite(fx) and math.isfinite(fy)):
            return None

        x = round(fx)
        y = round(fy)
        if 0 <= x < width and 0 <= y < height:
            depth = self.depth(p)
            return ProjectedPoint(x, y, self.shader.get_glyph(depth), depth)
        return None
