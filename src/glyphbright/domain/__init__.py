"""Domain models for glyphbright.

Value types shared by layout and rasterization. All are frozen dataclasses
and carry no reference to fontTools objects, so a positioned glyph stays
valid independently of the layout call that produced it.

Key classes:
- PixelBox: Integer pixel bounding box of a positioned glyph
- PositionedGlyph: A glyph placed at a pixel position and scale
- GlyphLayout: Ordered glyphs produced by laying out a string
"""

from glyphbright.domain.glyph import GlyphLayout, PixelBox, PositionedGlyph

__all__: list[str] = [
    "GlyphLayout",
    "PixelBox",
    "PositionedGlyph",
]
