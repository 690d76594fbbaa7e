"""Glyph rasterization into a fixed-size coverage buffer.

Coverage is computed by FreeType through fonttools' ``FreeTypePen``. Each
glyph is first rendered into a local patch the size of its pixel bounding
box, then copied into the canvas at the box origin. Patch pixels that land
outside the canvas are dropped rather than clamped or wrapped.
"""

import numpy as np
from fontTools.misc.transform import Transform
from fontTools.pens.boundsPen import BoundsPen
from fontTools.pens.freetypePen import FreeTypePen

from glyphbright.domain import PixelBox, PositionedGlyph
from glyphbright.io import FontResource

MAX_COVERAGE = 255.0


def pixel_bounding_box(font: FontResource, glyph: PositionedGlyph) -> PixelBox | None:
    """Compute the pixel-aligned bounding box of a positioned glyph.

    Args:
        font: Font resource holding the outline
        glyph: Glyph position and scale

    Returns:
        PixelBox enclosing the outline, or None if the glyph draws no ink
    """
    pen = BoundsPen(font.glyph_set)
    font.draw(glyph.name, pen)
    if pen.bounds is None:
        return None

    x_min, y_min, x_max, y_max = pen.bounds
    left, top = glyph.to_pixel(x_min, y_max)
    right, bottom = glyph.to_pixel(x_max, y_min)
    box = PixelBox.from_bounds(left, top, right, bottom)
    if box.is_empty():
        return None
    return box


def draw_coverage(font: FontResource, glyph: PositionedGlyph, box: PixelBox) -> np.ndarray:
    """Render a glyph's coverage inside its pixel bounding box.

    Args:
        font: Font resource holding the outline
        glyph: Glyph position and scale
        box: Pixel bounding box of the glyph

    Returns:
        Array of shape (box.height, box.width), row 0 at the top of the box,
        with coverage values in [0, 1]
    """
    pen = FreeTypePen(font.glyph_set)
    font.draw(glyph.name, pen)

    # FreeType bitmaps grow upward from y=0 at the bottom row; shift the
    # outline so the box's bottom-left corner lands on the bitmap origin.
    transform = Transform(
        glyph.scale_x,
        0,
        0,
        glyph.scale_y,
        glyph.x - box.min_x,
        box.max_y - glyph.y,
    )
    return pen.array(width=box.width, height=box.height, transform=transform, contain=False)


def blit_clipped(buffer: np.ndarray, patch: np.ndarray, origin_x: int, origin_y: int) -> None:
    """Write a coverage patch into a buffer, discarding out-of-range pixels.

    Negative coverage is clamped to zero and the rest scaled to [0, 255].
    Patch pixel (x, y) goes to buffer cell (origin_x + x, origin_y + y) when
    that cell exists, and is dropped otherwise.

    Args:
        buffer: Target array of shape (rows, columns), modified in place
        patch: Coverage values in [0, 1], shape (rows, columns)
        origin_x: Buffer column of the patch's left edge (may be negative)
        origin_y: Buffer row of the patch's top edge (may be negative)
    """
    rows, cols = buffer.shape
    patch_rows, patch_cols = patch.shape

    x0, y0 = max(origin_x, 0), max(origin_y, 0)
    x1, y1 = min(origin_x + patch_cols, cols), min(origin_y + patch_rows, rows)
    if x0 >= x1 or y0 >= y1:
        return

    visible = patch[y0 - origin_y : y1 - origin_y, x0 - origin_x : x1 - origin_x]
    buffer[y0:y1, x0:x1] = np.clip(visible, 0.0, None) * MAX_COVERAGE


def rasterize(font: FontResource, glyph: PositionedGlyph, width: int, height: int) -> np.ndarray:
    """Rasterize a positioned glyph into a fresh coverage buffer.

    Args:
        font: Font resource holding the outline
        glyph: Glyph position and scale
        width: Buffer width in pixels
        height: Buffer height in pixels

    Returns:
        Array of shape (height, width) with coverage in [0, 255]; all zeros
        for glyphs without ink
    """
    buffer = np.zeros((height, width), dtype=np.float64)

    box = pixel_bounding_box(font, glyph)
    if box is not None:
        patch = draw_coverage(font, glyph, box)
        blit_clipped(buffer, patch, box.min_x, box.min_y)

    return buffer
