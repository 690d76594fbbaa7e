"""Embedded font loading.

This module provides the FontResource class wrapping a fully decoded
fonttools ``TTFont``, and the process-wide shared instance built from the
font bundled in ``glyphbright/assets``.
"""

import threading
from importlib import resources
from io import BytesIO
from typing import Any

from fontTools.pens.basePen import AbstractPen
from fontTools.ttLib import TTFont

from glyphbright.exceptions import FontDecodeError
from glyphbright.utils.logging import get_logger

EMBEDDED_FONT_NAME = "SourceCodePro-Regular.ttf"
NOTDEF_GLYPH = ".notdef"

_REQUIRED_TABLES = ("head", "hhea", "hmtx", "cmap", "maxp")

logger = get_logger(__name__)


def read_embedded_font() -> bytes:
    """Read the bytes of the bundled font asset.

    Returns:
        Raw TrueType font data
    """
    return (resources.files("glyphbright") / "assets" / EMBEDDED_FONT_NAME).read_bytes()


class FontResource:
    """Immutable handle to a decoded font.

    All tables are decompiled up front, so once constructed the underlying
    ``TTFont`` is only ever read. That makes one instance safe to share
    between threads without locking.

    Example:
        font = FontResource.from_bytes(read_embedded_font())
        font.glyph_name_for(ord("M"))  # "M"
    """

    def __init__(self, font: TTFont, asset: str) -> None:
        """Initialize from an already decoded font.

        Args:
            font: Fully decompiled TTFont
            asset: Name of the asset the font was decoded from
        """
        self._font = font
        self._asset = asset
        self._cmap: dict[int, str] = dict(font.getBestCmap() or {})
        self._glyph_set = font.getGlyphSet()
        self._hmtx = font["hmtx"]
        hhea = font["hhea"]
        self._ascent: int = hhea.ascent  # type: ignore[attr-defined]
        self._descent: int = hhea.descent  # type: ignore[attr-defined]

    @classmethod
    def from_bytes(cls, data: bytes, asset: str = "<bytes>") -> "FontResource":
        """Decode a font from raw bytes.

        Args:
            data: TrueType/OpenType font data
            asset: Name used in error messages and logs

        Returns:
            Decoded FontResource

        Raises:
            FontDecodeError: If the data is not a usable font
        """
        try:
            font = TTFont(BytesIO(data), lazy=False)
            missing = [tag for tag in _REQUIRED_TABLES if tag not in font]
            if missing:
                raise ValueError(f"missing tables: {', '.join(missing)}")
            resource = cls(font, asset)
        except Exception as e:
            logger.error("Font decode failed", asset=asset, error=str(e), error_type=type(e).__name__)
            raise FontDecodeError(asset, str(e)) from e

        if resource.line_height <= 0:
            raise FontDecodeError(asset, "ascent and descent span no height")

        logger.info(
            "Font loaded",
            asset=asset,
            family=resource.family_name,
            glyphs=resource.glyph_count,
            upm=resource.units_per_em,
        )
        return resource

    @classmethod
    def load_embedded(cls) -> "FontResource":
        """Decode the font bundled with the package.

        Raises:
            FontDecodeError: If the bundled asset is missing or corrupt
        """
        try:
            data = read_embedded_font()
        except OSError as e:
            raise FontDecodeError(EMBEDDED_FONT_NAME, str(e)) from e
        return cls.from_bytes(data, asset=EMBEDDED_FONT_NAME)

    @property
    def asset(self) -> str:
        return self._asset

    @property
    def format(self) -> str:
        """Return font format.

        Returns:
            'TrueType' for glyf-based fonts, 'OpenType' for CFF-based fonts
        """
        if "CFF " in self._font or "CFF2" in self._font:
            return "OpenType"
        return "TrueType"

    @property
    def family_name(self) -> str:
        name = self._font["name"].getBestFamilyName() if "name" in self._font else None
        return name or self._asset

    @property
    def units_per_em(self) -> int:
        return self._font["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def glyph_count(self) -> int:
        return self._font["maxp"].numGlyphs  # type: ignore[attr-defined]

    @property
    def ascent(self) -> int:
        """Distance from baseline to the top of the tallest glyph, in font units."""
        return self._ascent

    @property
    def descent(self) -> int:
        """Distance from baseline to the lowest glyph edge, in font units (negative)."""
        return self._descent

    @property
    def line_height(self) -> int:
        """Ascent-to-descent span in font units."""
        return self._ascent - self._descent

    def has_codepoint(self, codepoint: int) -> bool:
        return codepoint in self._cmap

    def glyph_name_for(self, codepoint: int) -> str:
        """Map a code point to a glyph name.

        Code points the font does not cover map to ``.notdef``.
        """
        return self._cmap.get(codepoint, NOTDEF_GLYPH)

    def advance_width(self, glyph_name: str) -> int:
        """Horizontal advance of a glyph in font units."""
        advance, _lsb = self._hmtx[glyph_name]
        return advance

    def draw(self, glyph_name: str, pen: AbstractPen) -> None:
        """Draw a glyph outline onto a fonttools pen."""
        self._glyph_set[glyph_name].draw(pen)

    @property
    def glyph_set(self) -> Any:
        """The fonttools glyph set, used by pens that decompose components."""
        return self._glyph_set


_shared_font: FontResource | None = None
_shared_lock = threading.Lock()


def get_shared_font() -> FontResource:
    """Get the process-wide font resource.

    The embedded asset is decoded on first use, at most once even when
    several threads ask concurrently. Later calls return the same instance.

    Raises:
        FontDecodeError: If the embedded asset cannot be decoded
    """
    global _shared_font

    font = _shared_font
    if font is None:
        with _shared_lock:
            if _shared_font is None:
                _shared_font = FontResource.load_embedded()
            font = _shared_font
    return font


def reset_shared_font() -> None:
    """Drop the shared font so the next use decodes it again."""
    global _shared_font

    with _shared_lock:
        _shared_font = None
