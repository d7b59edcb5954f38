#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math


class Point3D:
    """Immutable 3-component point in model space."""
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float, y: float, z: float):
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))
        object.__setattr__(self, 'z', float(z))

    def __setattr__(self, name, value):
        raise AttributeError("Point3D is immutable")

    def __delattr__(self, name):
        raise AttributeError("Point3D is immutable")

    def __repr__(self):
        return f"Point3D({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        raise IndexError("Point3D index out of range")

    def __eq__(self, other):
        if isinstance(other, Point3D):
            return (self.x, self.y, self.z) == (other.x, other.y, other.z)
        return NotImplemented

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def isclose(self, other, tol: float = 1e-9) -> bool:
        """True when every component of `other` is within `tol` of ours."""
        return (abs(self.x - other[0]) <= tol and
                abs(self.y - other[1]) <= tol and
                abs(self.z - other[2]) <= tol)


def rotate_point(p: Point3D, ax: float, ay: float) -> Point3D:
    """
    Rotate `p` about the Y axis by `ay`, then about the X axis by `ax`.

    The order is part of the animation: swapping the two steps makes the
    cube tumble around a different axis.
    """
    sx, cx = math.sin(ax), math.cos(ax)
    sy, cy = math.sin(ay), math.cos(ay)

    # X/Z mix (about Y)
    x = p.x * cy + p.z * sy
    z = -p.x * sy + p.z * cy

    # Y/Z mix (about X)
    y = p.y * cx - z * sx
    z = p.y * sx + z * cx

    return Point3D(x, y, z)
