#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
from operator import attrgetter

from .camera import Camera
from .canvas import Canvas
from .math_utils import rotate_point
from .mesh import PointCloud

logger = logging.getLogger(__name__)


def composite(points, width, height) -> Canvas:
    """
    Paint projected points far to near onto a fresh canvas.

    There is no depth buffer: nearer points simply overwrite farther ones
    in the same cell. sorted() is stable with reverse=True, so equal
    depths keep their input order.
    """
    canv = Canvas(width, height)
    for p in sorted(points, key=attrgetter('depth'), reverse=True):
        canv.put(p.screen_x, p.screen_y, p.glyph)
    return canv


class Renderer:
    """
    Stateless point-cloud renderer.

    render(cloud, ax, ay) returns one frame as a Canvas; draw() also
    presents it on a display surface.
    """

    def __init__(self, camera: Camera, width: int, height: int):
        self.camera = camera
        self.width = width
        self.height = height

    def project_all(self, cloud: PointCloud, ax: float, ay: float):
        """
        Rotate and project every sample, dropping the off-screen ones.

        Pipeline:
          1. rotate about Y by ay, then about X by ax
          2. perspective project onto the character grid
          3. filter points that fall outside the grid
        """
        camera = self.camera
        w, h = self.width, self.height
        projected = []
        for point in cloud:
            p = camera.project(rotate_point(point, ax, ay), w, h)
            if p is not None:
                projected.append(p)
        return projected

    def render(self, cloud: PointCloud, ax: float, ay: float) -> Canvas:
        projected = self.project_all(cloud, ax, ay)
        logger.debug("Frame at (%.3f, %.3f): %d of %d samples visible",
                     ax, ay, len(projected), len(cloud))
        return composite(projected, self.width, self.height)

    def draw(self, display, cloud: PointCloud, ax: float, ay: float) -> Canvas:
        canv = self.render(cloud, ax, ay)
        canv.blit(display)
        return canv
