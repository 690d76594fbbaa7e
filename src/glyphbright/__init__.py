"""Glyphbright - Character brightness scores for text-art rendering.

Glyphbright renders a character in a fixed, embedded monospace font and
averages the rasterized pixel coverage into a brightness score between 0
and 255. Image-to-text-art pipelines use these scores to pick the character
whose ink density best matches a source pixel.

Example:
    >>> from glyphbright import calculate_character_brightness
    >>> calculate_character_brightness(" ")
    0
"""

__version__ = "0.1.0"

from glyphbright.core import (
    BrightnessEvaluator,
    BrightnessTable,
    calculate_character_brightness,
    rank_characters,
)

__all__ = [
    "BrightnessEvaluator",
    "BrightnessTable",
    "__version__",
    "calculate_character_brightness",
    "rank_characters",
]
