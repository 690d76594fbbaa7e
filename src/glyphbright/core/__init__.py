"""Core algorithms for glyphbright.

This module contains:

- Layout: placing a character's glyph at a fixed pixel scale
- Rasterization: rendering glyph coverage into a clipped canvas
- Brightness: reducing the canvas to a single 0-255 score
- Tables: caching and ordering scores for character sets

Key classes:
- BrightnessEvaluator: Scores single characters
- BrightnessTable: Caches scores per character

Key functions:
- calculate_character_brightness: Score a character with the shared evaluator
- rank_characters: Order characters from darkest to brightest
- layout: Lay out a string as positioned glyphs
- rasterize: Render a positioned glyph into a coverage buffer
"""

from glyphbright.core.brightness import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    GLYPH_HEIGHT,
    WIDTH_FACTOR,
    BrightnessEvaluator,
    calculate_character_brightness,
    mean_brightness,
)
from glyphbright.core.layout import ascent_offset, layout_text, scale_factors
from glyphbright.core.raster import blit_clipped, draw_coverage, pixel_bounding_box, rasterize
from glyphbright.core.table import BrightnessTable, rank_characters

__all__ = [
    "CANVAS_HEIGHT",
    "CANVAS_WIDTH",
    "GLYPH_HEIGHT",
    "WIDTH_FACTOR",
    "BrightnessEvaluator",
    "BrightnessTable",
    "ascent_offset",
    "blit_clipped",
    "calculate_character_brightness",
    "draw_coverage",
    "layout_text",
    "mean_brightness",
    "pixel_bounding_box",
    "rank_characters",
    "rasterize",
    "scale_factors",
]
