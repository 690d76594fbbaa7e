"""Positioned glyph representation.

Pixel coordinates use a y-down convention: the canvas origin is the top-left
corner and a glyph's baseline sits at its ``y`` position. Font units keep the
font's native y-up convention.
"""

import math
from collections.abc import Iterator
from dataclasses import dataclass, replace

from glyphbright.exceptions import GlyphLayoutError


@dataclass(frozen=True)
class PixelBox:
    """Integer pixel bounding box.

    ``min`` corners are inclusive and ``max`` corners exclusive, so the box
    covers ``width`` columns starting at ``min_x`` and ``height`` rows
    starting at ``min_y``.
    """

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        return self.max_y - self.min_y

    def is_empty(self) -> bool:
        """Check if the box covers no pixels."""
        return self.width <= 0 or self.height <= 0

    @classmethod
    def from_bounds(cls, x_min: float, y_min: float, x_max: float, y_max: float) -> "PixelBox":
        """Build the smallest integer box enclosing real-valued bounds.

        Args:
            x_min: Left edge in pixels
            y_min: Top edge in pixels
            x_max: Right edge in pixels
            y_max: Bottom edge in pixels

        Returns:
            PixelBox with floored minimums and ceiled maximums
        """
        return cls(
            min_x=math.floor(x_min),
            min_y=math.floor(y_min),
            max_x=math.ceil(x_max),
            max_y=math.ceil(y_max),
        )


@dataclass(frozen=True)
class PositionedGlyph:
    """A glyph placed on the pixel grid.

    Attributes:
        name: Glyph name in the font (e.g. "M", "period", ".notdef")
        codepoint: Unicode code point the glyph was laid out for
        x: Horizontal pen position in pixels
        y: Baseline position in pixels (y-down)
        scale_x: Pixels per font unit, horizontally
        scale_y: Pixels per font unit, vertically
    """

    name: str
    codepoint: int
    x: float
    y: float
    scale_x: float
    scale_y: float

    def to_pixel(self, font_x: float, font_y: float) -> tuple[float, float]:
        """Map a point in font units to pixel coordinates."""
        return (self.x + font_x * self.scale_x, self.y - font_y * self.scale_y)

    def standalone(self) -> "PositionedGlyph":
        """Return a copy detached from the layout that produced it."""
        return replace(self)


@dataclass(frozen=True)
class GlyphLayout:
    """Glyphs produced by laying out a string, in layout order."""

    text: str
    glyphs: tuple[PositionedGlyph, ...]

    def __len__(self) -> int:
        return len(self.glyphs)

    def __iter__(self) -> Iterator[PositionedGlyph]:
        return iter(self.glyphs)

    @property
    def is_single(self) -> bool:
        """Check if layout produced exactly one glyph."""
        return len(self.glyphs) == 1

    def last(self) -> PositionedGlyph:
        """Get the last glyph in layout order.

        Raises:
            GlyphLayoutError: If the layout is empty
        """
        if not self.glyphs:
            raise GlyphLayoutError(self.text, "layout produced no glyphs")
        return self.glyphs[-1]
