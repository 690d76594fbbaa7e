"""Exception hierarchy for Glyphbright."""


class GlyphBrightError(Exception):
    """Base exception for all Glyphbright errors."""

    pass


class FontError(GlyphBrightError):
    """Errors related to the embedded font resource."""

    pass


class FontDecodeError(FontError):
    """The embedded font asset could not be decoded.

    The asset ships inside the package, so this indicates a broken build
    or installation rather than bad user input.
    """

    def __init__(self, asset: str, reason: str) -> None:
        self.asset = asset
        self.reason = reason
        super().__init__(f"Failed to decode font asset '{asset}': {reason}")


class GlyphError(GlyphBrightError):
    """Errors related to glyph layout."""

    pass


class GlyphLayoutError(GlyphError):
    """Layout produced no usable glyph."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Layout failed for {text!r}: {reason}")


class InvalidCharacterError(GlyphBrightError, ValueError):
    """Input is not exactly one character."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Expected a single character, got {value!r}")
