"""Glyph layout at a fixed pixel scale.

Scales follow the FreeType/stb_truetype convention: a scale of N pixels means
the font's ascent-to-descent span is N pixels tall. Horizontal and vertical
scales are independent, so a horizontal scale of twice the vertical one
stretches glyphs to double width.
"""

from glyphbright.domain import GlyphLayout, PositionedGlyph
from glyphbright.io import FontResource


def scale_factors(font: FontResource, scale_x: float, scale_y: float) -> tuple[float, float]:
    """Convert pixel scales to pixels-per-font-unit factors.

    Args:
        font: Font resource providing vertical metrics
        scale_x: Horizontal scale in pixels
        scale_y: Vertical scale in pixels

    Returns:
        Tuple of (horizontal factor, vertical factor)
    """
    span = font.line_height
    return scale_x / span, scale_y / span


def ascent_offset(font: FontResource, scale_y: float) -> float:
    """Baseline offset that keeps the font's tallest glyph inside the canvas.

    Args:
        font: Font resource providing vertical metrics
        scale_y: Vertical scale in pixels

    Returns:
        Ascent in pixels at the given scale
    """
    _, factor_y = scale_factors(font, scale_y, scale_y)
    return font.ascent * factor_y


def layout_text(
    font: FontResource,
    text: str,
    scale_x: float,
    scale_y: float,
    origin: tuple[float, float] = (0.0, 0.0),
) -> GlyphLayout:
    """Lay out a string as a row of positioned glyphs.

    One glyph is produced per code point. The caret starts at ``origin`` and
    advances by each glyph's advance width. Code points missing from the
    font are laid out with the ``.notdef`` glyph.

    Args:
        font: Font resource to lay out with
        text: String to lay out
        scale_x: Horizontal scale in pixels
        scale_y: Vertical scale in pixels
        origin: Pen position of the first glyph, baseline y in pixels (y-down)

    Returns:
        GlyphLayout with glyphs in text order
    """
    factor_x, factor_y = scale_factors(font, scale_x, scale_y)
    caret_x, baseline_y = origin

    glyphs: list[PositionedGlyph] = []
    for char in text:
        codepoint = ord(char)
        name = font.glyph_name_for(codepoint)
        glyphs.append(
            PositionedGlyph(
                name=name,
                codepoint=codepoint,
                x=caret_x,
                y=baseline_y,
                scale_x=factor_x,
                scale_y=factor_y,
            )
        )
        caret_x += font.advance_width(name) * factor_x

    return GlyphLayout(text=text, glyphs=tuple(glyphs))
