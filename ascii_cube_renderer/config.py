#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from dataclasses import dataclass, field
from typing import Optional

from .camera import Camera
from .shading import DepthShader


@dataclass
class RenderConfig:
    """Configuration for the rendering pipeline and frame loop."""
    cube_size: float = 5.0
    sample_step: float = 0.3
    camera_z: float = -10.0
    view_distance: float = 100.0
    max_dist: float = 30.0
    angle_step_x: float = 0.03
    angle_step_y: float = 0.02
    frame_delay: float = 0.05
    exit_key: str = 'q'

    # Instance of the DepthShader computed from these settings
    shader: Optional[DepthShader] = field(init=False, repr=False, default=None)

    def __post_init__(self):
        if self.cube_size <= 0:
            raise ValueError(f"cube_size must be positive, got {self.cube_size}")
        if self.sample_step <= 0:
            raise ValueError(f"sample_step must be positive, got {self.sample_step}")
        if self.frame_delay < 0:
            raise ValueError(f"frame_delay must not be negative, got {self.frame_delay}")
        self.init_shader()

    def init_shader(self):
        """Update the internal shader based on current settings."""
        self.shader = DepthShader(max_dist=self.max_dist)

    def make_camera(self) -> Camera:
        return Camera(z=self.camera_z, view_distance=self.view_distance,
                      shader=self.shader)
