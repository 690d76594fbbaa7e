"""Character brightness evaluation.

Brightness is the mean rasterized coverage of a character's glyph on a
fixed 50x50 canvas, scaled to [0, 255]. The glyph is drawn 50 pixels tall and
stretched to twice its natural width, with the baseline lowered by the
font's ascent so no glyph is clipped at the top. Glyphs spilling past the
canvas edges are cut off; the canvas never grows.
"""

import numpy as np

from glyphbright.core.layout import ascent_offset, layout_text
from glyphbright.core.raster import rasterize
from glyphbright.exceptions import InvalidCharacterError
from glyphbright.io import FontResource, get_shared_font
from glyphbright.utils.logging import get_logger

GLYPH_HEIGHT = 50.0
WIDTH_FACTOR = 2.0
CANVAS_WIDTH = 50
CANVAS_HEIGHT = 50

logger = get_logger(__name__)


def mean_brightness(buffer: np.ndarray) -> int:
    """Reduce a coverage buffer to its mean, truncated toward zero.

    Args:
        buffer: Coverage values in [0, 255]

    Returns:
        Integer mean in [0, 255]; 0 for an all-zero or empty buffer
    """
    # Sum in float64 whatever the buffer dtype.
    total = float(buffer.sum(dtype=np.float64))
    cells = buffer.size
    if total == 0.0 or cells == 0:
        return 0
    return int(total / cells)


class BrightnessEvaluator:
    """Scores characters by rendered ink coverage.

    The evaluator holds no per-call state, so one instance can be used from
    many threads at once.

    Example:
        evaluator = BrightnessEvaluator()
        evaluator.evaluate(" ")  # 0
    """

    def __init__(self, font: FontResource | None = None) -> None:
        """Initialize the evaluator.

        Args:
            font: Font to render with. Defaults to the shared embedded font,
                resolved on first evaluation.
        """
        self._font = font

    @property
    def font(self) -> FontResource:
        """Font resource used for rendering.

        Raises:
            FontDecodeError: If the embedded font cannot be decoded
        """
        if self._font is None:
            return get_shared_font()
        return self._font

    def coverage(self, character: str) -> np.ndarray:
        """Rasterize a character onto the brightness canvas.

        Args:
            character: A single character

        Returns:
            Array of shape (CANVAS_HEIGHT, CANVAS_WIDTH) with values in [0, 255]

        Raises:
            InvalidCharacterError: If ``character`` is not exactly one character
            FontDecodeError: If the embedded font cannot be decoded
        """
        if not isinstance(character, str) or len(character) != 1:
            raise InvalidCharacterError(character)

        font = self.font
        text = str(character)
        offset = ascent_offset(font, GLYPH_HEIGHT)
        glyphs = layout_text(
            font,
            text,
            scale_x=GLYPH_HEIGHT * WIDTH_FACTOR,
            scale_y=GLYPH_HEIGHT,
            origin=(0.0, offset),
        )
        glyph = glyphs.last().standalone()

        return rasterize(font, glyph, CANVAS_WIDTH, CANVAS_HEIGHT)

    def evaluate(self, character: str) -> int:
        """Calculate the brightness of a character.

        Args:
            character: A single character

        Returns:
            Brightness between 0 (no ink) and 255 (canvas fully covered)

        Raises:
            InvalidCharacterError: If ``character`` is not exactly one character
            FontDecodeError: If the embedded font cannot be decoded
        """
        brightness = mean_brightness(self.coverage(character))
        logger.debug("Character evaluated", character=character, codepoint=ord(character), brightness=brightness)
        return brightness


_default_evaluator = BrightnessEvaluator()


def calculate_character_brightness(character: str) -> int:
    """Return the brightness value between 0 and 255 for a character.

    The character is rendered in the embedded Source Code Pro font.

    Example:
        >>> calculate_character_brightness(" ")
        0
    """
    return _default_evaluator.evaluate(character)
