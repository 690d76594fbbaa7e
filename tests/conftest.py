"""Shared fixtures.

The synthetic font has a 1000-unit ascent-to-descent span (ascent 800,
descent -200), so at the brightness scale one font unit is 0.1 px wide and
0.05 px tall, and the baseline sits 40 px below the canvas top. Its glyphs
are pixel-aligned rectangles with exactly computable coverage.
"""

from io import BytesIO

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from glyphbright.io import FontResource, reset_shared_font

ASCENT = 800
DESCENT = -200

# name -> (codepoint, advance, rectangle in font units or None)
SYNTHETIC_GLYPHS = {
    ".notdef": (None, 500, (50, 0, 450, 700)),
    "space": (0x20, 500, None),
    "fullblock": (0x2588, 500, (0, -200, 500, 800)),
    "lefthalfblock": (0x258C, 500, (0, -200, 250, 800)),
    "offscreen": (ord("X"), 500, (1000, 0, 1500, 500)),
    "aboveascent": (ord("^"), 500, (0, 1000, 500, 1400)),
}


def _rect_glyph(rect):
    pen = TTGlyphPen(None)
    if rect is not None:
        x0, y0, x1, y1 = rect
        pen.moveTo((x0, y0))
        pen.lineTo((x0, y1))
        pen.lineTo((x1, y1))
        pen.lineTo((x1, y0))
        pen.closePath()
    return pen.glyph()


def build_synthetic_font() -> bytes:
    """Build a small TrueType font of rectangle glyphs."""
    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(list(SYNTHETIC_GLYPHS))
    fb.setupCharacterMap(
        {codepoint: name for name, (codepoint, _, _) in SYNTHETIC_GLYPHS.items() if codepoint is not None}
    )
    fb.setupGlyf({name: _rect_glyph(rect) for name, (_, _, rect) in SYNTHETIC_GLYPHS.items()})
    fb.setupHorizontalMetrics(
        {name: (advance, rect[0] if rect else 0) for name, (_, advance, rect) in SYNTHETIC_GLYPHS.items()}
    )
    fb.setupHorizontalHeader(ascent=ASCENT, descent=DESCENT)
    fb.setupNameTable({"familyName": "Glyphbright Test", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=ASCENT, sTypoDescender=DESCENT, usWinAscent=ASCENT, usWinDescent=-DESCENT)
    fb.setupPost()
    fb.setupMaxp()

    buf = BytesIO()
    fb.save(buf)
    return buf.getvalue()


@pytest.fixture(scope="session")
def synthetic_font_bytes() -> bytes:
    """Raw bytes of the synthetic rectangle font."""
    return build_synthetic_font()


@pytest.fixture(scope="session")
def synthetic_font(synthetic_font_bytes) -> FontResource:
    """Decoded synthetic rectangle font."""
    return FontResource.from_bytes(synthetic_font_bytes, asset="synthetic")


@pytest.fixture
def fresh_shared_font():
    """Drop the shared embedded font before and after a test."""
    reset_shared_font()
    yield
    reset_shared_font()
