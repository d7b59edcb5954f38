#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import enum
import logging
import time
from dataclasses import dataclass

from .config import RenderConfig
from .display import CursesDisplay, DisplayError
from .mesh import PointCloud
from .renderer import Renderer

logger = logging.getLogger(__name__)


@dataclass
class AnimationState:
    """Current rotation of the cube. Grows without wrapping."""
    angle_x: float = 0.0
    angle_y: float = 0.0

    def advance(self, dx: float, dy: float):
        self.angle_x += dx
        self.angle_y += dy


class DriverState(enum.Enum):
    RUNNING = "running"
    STOPPED = "stopped"


class FrameDriver:
    """
    Frame loop for the spinning cube.

    Each tick polls for the exit key, advances the rotation, draws one
    frame and sleeps for a fixed delay. The exit key is only seen at the
    top of a tick, so the sleep is never cut short. STOPPED is final.
    """

    def __init__(self, display, config: RenderConfig = None, sleep=time.sleep):
        self.display = display
        self.config = config if config is not None else RenderConfig()
        self.sleep = sleep

        self.cloud = PointCloud.cube(self.config.cube_size, self.config.sample_step)
        width, height = display.size()
        self.renderer = Renderer(self.config.make_camera(), width, height)

        self.animation = AnimationState()
        self.state = DriverState.RUNNING
        self.frames = 0
        logger.debug("Frame driver ready: %d samples on %dx%d grid",
                     len(self.cloud), width, height)

    @property
    def running(self) -> bool:
        return self.state is DriverState.RUNNING

    def stop(self):
        self.state = DriverState.STOPPED

    def render_frame(self):
        """Draw the cube at the current angles and present it."""
        anim = self.animation
        self.frames += 1
        return self.renderer.draw(self.display, self.cloud,
                                  anim.angle_x, anim.angle_y)

    def tick(self) -> bool:
        """Run one tick. Returns False once the driver has stopped."""
        if not self.running:
            return False

        if self.display.poll_key() == self.config.exit_key:
            self.stop()
            logger.info("Exit key pressed after %d frames", self.frames)
            return False

        self.animation.advance(self.config.angle_step_x, self.config.angle_step_y)
        self.render_frame()
        self.sleep(self.config.frame_delay)
        return True

    def run(self, max_ticks=None) -> int:
        """Tick until stopped (or `max_ticks` frames); returns frames drawn."""
        start = self.frames
        while self.tick():
            if max_ticks is not None and self.frames - start >= max_ticks:
                break
        return self.frames - start


def main(config: RenderConfig = None) -> int:
    """Entry point: run the cube in the terminal and return an exit status."""
    logging.basicConfig(level=logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    config = config if config is not None else RenderConfig()
    try:
        with CursesDisplay() as display:
            FrameDriver(display, config).run()
    except DisplayError as e:
        logger.error("%s", e)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0
