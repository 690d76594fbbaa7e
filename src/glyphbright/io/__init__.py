"""Font I/O layer for glyphbright.

This module decodes the embedded font asset using fonttools and exposes it
as a read-only ``FontResource``. A single resource is shared by every
brightness evaluation in the process.

Key classes and functions:
- FontResource: Decoded, immutable font handle
- get_shared_font: Process-wide resource, decoded at most once
- read_embedded_font: Raw bytes of the bundled font asset
"""

from glyphbright.io.reader import (
    EMBEDDED_FONT_NAME,
    FontResource,
    get_shared_font,
    read_embedded_font,
    reset_shared_font,
)

__all__ = [
    "EMBEDDED_FONT_NAME",
    "FontResource",
    "get_shared_font",
    "read_embedded_font",
    "reset_shared_font",
]
