#!/usr/bin/env python3
#
# PROJECT: ascii-cube-renderer
# MODULE: spin_cube.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import sys
import os

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from ascii_cube_renderer.demo import main


if __name__ == "__main__":
    sys.exit(main())
