#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/mesh.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import math

from .math_utils import Point3D

logger = logging.getLogger(__name__)

# Slack for grid endpoints that land on `size` up to float error
_GRID_EPS = 1e-6


def grid_values(size: float, step: float):
    """Sample positions over [-size, size], endpoint included when reachable."""
    count = int(math.floor(2.0 * size / step + _GRID_EPS)) + 1
    return [-size + i * step for i in range(count)]


class PointCloud:
    """
    Static point samples covering the six faces of an axis-aligned cube.

    Edge and corner samples are emitted once per face that touches them, so
    edges come out denser than face interiors.
    """

    def __init__(self, points=()):
        self.points = tuple(points)

    def __len__(self):
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    @classmethod
    def cube(cls, size: float = 5.0, step: float = 0.3) -> 'PointCloud':
        """Factory method sampling the cube [-size, size]^3 every `step`."""
        if size <= 0:
            raise ValueError(f"cube size must be positive, got {size}")
        if step <= 0:
            raise ValueError(f"sample step must be positive, got {step}")

        values = grid_values(size, step)
        points = []
        for a in values:
            for b in values:
                points.append(Point3D(a, b, size))
                points.append(Point3D(a, b, -size))
                points.append(Point3D(a, size, b))
                points.append(Point3D(a, -size, b))
                points.append(Point3D(size, a, b))
                points.append(Point3D(-size, a, b))

        logger.debug("Generated %d cube samples (size=%s, step=%s)",
                     len(points), size, step)
        return cls(points)
