#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging

from .math_utils import Point3D, rotate_point
from .config import RenderConfig
from .shading import DepthShader, get_glyph
from .canvas import Canvas
from .mesh import PointCloud
from .camera import Camera, ProjectedPoint
from .renderer import Renderer, composite
from .display import CursesDisplay, BufferDisplay, DisplayError
from .demo import AnimationState, DriverState, FrameDriver, main

logging.getLogger(__name__).addHandler(logging.NullHandler())
