#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/display.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses
import logging
import signal
from collections import deque

logger = logging.getLogger(__name__)


class DisplayError(RuntimeError):
    """The terminal could not be set up for drawing."""


def _raise_exit(signum, frame):
    raise SystemExit(128 + signum)


class CursesDisplay:
    """
    Scoped curses session used as the frame loop's display surface.

    Entering puts the terminal into cbreak, no-echo, non-blocking mode
    with the cursor hidden. Leaving always undoes that, whether the block
    ends normally, raises, or the process receives SIGTERM.
    """

    def __init__(self):
        self.stdscr = None
        self._prev_sigterm = None

    def __enter__(self):
        try:
            stdscr = curses.initscr()
        except curses.error as e:
            raise DisplayError(f"Could not initialise terminal: {e}") from e
        self.stdscr = stdscr
        try:
            curses.noecho()
            curses.cbreak()
            stdscr.keypad(True)
            stdscr.nodelay(True)
            try:
                curses.curs_set(0)
            except curses.error:
                # Terminal cannot hide the cursor
                pass
            w, h = self.size()
            if w <= 0 or h <= 0:
                raise DisplayError(f"Terminal reports unusable size {w}x{h}")
        except curses.error as e:
            self._restore()
            raise DisplayError(f"Could not configure terminal: {e}") from e
        except BaseException:
            self._restore()
            raise
        self._install_sigterm()
        logger.debug("Curses session opened (%dx%d)", w, h)
        return self

    def __exit__(self, exc_type, exc, tb):
        self._uninstall_sigterm()
        self._restore()
        logger.debug("Curses session closed")
        return False

    def _install_sigterm(self):
        try:
            self._prev_sigterm = signal.signal(signal.SIGTERM, _raise_exit)
        except ValueError:
            # Not the main thread; only clean exits restore the terminal
            self._prev_sigterm = None

    def _uninstall_sigterm(self):
        if self._prev_sigterm is not None:
            signal.signal(signal.SIGTERM, self._prev_sigterm)
            self._prev_sigterm = None

    def _restore(self):
        stdscr, self.stdscr = self.stdscr, None
        if stdscr is None:
            return
        stdscr.keypad(False)
        curses.echo()
        curses.nocbreak()
        try:
            curses.curs_set(1)
        except curses.error:
            pass
        curses.endwin()

    # ── Display surface ──────────────────────────────────────────────────
    def size(self):
        """(width, height) in character cells."""
        th, tw = self.stdscr.getmaxyx()
        return tw, th

    def clear(self):
        self.stdscr.erase()

    def put(self, row, col, char):
        try:
            self.stdscr.addch(row, col, char)
        except curses.error:
            # Off-grid, or the bottom-right cell where the cursor cannot advance
            pass

    def present(self):
        self.stdscr.refresh()

    def poll_key(self):
        """Next pending key as a one-character string, or None."""
        key = self.stdscr.getch()
        if 0 <= key < 256:
            return chr(key)
        return None


class BufferDisplay:
    """
    In-memory display surface for tests and headless runs.

    `keys` scripts what poll_key() returns, one item per call; None entries
    mean "no key" and an exhausted script keeps returning None. Every
    present() stores a snapshot of the grid in `frames`, which keeps only
    the latest `history` frames.
    """

    def __init__(self, width: int = 80, height: int = 24, keys=(), history: int = 100):
        self.width = width
        self.height = height
        self.keys = deque(keys)
        self.frames = deque(maxlen=history)
        self.polls = 0
        self.grid = self._blank()

    def _blank(self):
        return [[' '] * self.width for _ in range(self.height)]

    def size(self):
        return self.width, self.height

    def clear(self):
        self.grid = self._blank()

    def put(self, row, col, char):
        if 0 <= row < self.height and 0 <= col < self.width:
            self.grid[row][col] = char

    def present(self):
        self.frames.append([''.join(row) for row in self.grid])

    def poll_key(self):
        self.polls += 1
        if self.keys:
            return self.keys.popleft()
        return None
