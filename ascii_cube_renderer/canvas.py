#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

class Canvas:
    """One frame of glyphs, row-major, blank cells hold BLANK."""
    __slots__ = ['w', 'h', 'grid']

    BLANK = ' '

    def __init__(self, w, h):
        self.w, self.h = w, h
        self.grid = [[self.BLANK] * w for _ in range(h)]

    def put(self, x, y, glyph):
        if x < 0 or x >= self.w or y < 0 or y >= self.h: return
        self.grid[y][x] = glyph

    def get(self, x, y):
        if x < 0 or x >= self.w or y < 0 or y >= self.h: return None
        return self.grid[y][x]

    def rows(self):
        """Frame as a list of text lines."""
        return [''.join(row) for row in self.grid]

    def blit(self, display):
        """
        Copy the frame to a display surface and present it once.

        The display is cleared first so cells left blank this frame do not
        keep glyphs from the previous one.
        """
        display.clear()
        for y, row in enumerate(self.grid):
            for x, glyph in enumerate(row):
                if glyph != self.BLANK:
                    display.put(y, x, glyph)
        display.present()
