#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/shading.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

class DepthShader:
    """
    Maps camera distance to a display glyph:
    - intensity falls linearly from 1 at the camera to 0 at `max_dist`
    - intensity is split into five fixed bands, sparse to dense

    Intensity is not clamped, so points past `max_dist` keep the
    sparsest glyph and points closer than the camera keep the densest.
    """
    __slots__ = ('max_dist',)

    # (upper bound, glyph), checked low to high; anything above is DENSEST
    BANDS = (
        (0.2, '.'),
        (0.4, '+'),
        (0.6, '*'),
        (0.8, '#'),
    )
    DENSEST = '='
    GLYPHS = tuple(g for _, g in BANDS) + (DENSEST,)

    def __init__(self, max_dist: float = 30.0):
        if max_dist <= 0:
            raise ValueError(f"max_dist must be positive, got {max_dist}")
        self.max_dist = max_dist

    def intensity(self, depth: float) -> float:
        return 1.0 - depth / self.max_dist

    def get_glyph(self, depth: float) -> str:
        """Return the glyph for a point `depth` units from the camera."""
        intensity = self.intensity(depth)
        for bound, glyph in self.BANDS:
            if intensity < bound:
                return glyph
        # NaN fails every comparison and lands here too
        return self.DENSEST

    @classmethod
    def density(cls, glyph: str) -> int:
        """Rank of `glyph` in the ramp, 0 for the sparsest."""
        return cls.GLYPHS.index(glyph)


_default_shader = DepthShader()


def get_glyph(depth: float) -> str:
    """Shade `depth` with the default 30-unit falloff."""
    return _default_shader.get_glyph(depth)
