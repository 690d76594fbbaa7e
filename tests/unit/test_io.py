"""Unit tests for the font I/O layer."""

import threading
from unittest.mock import patch

import pytest

from glyphbright.exceptions import FontDecodeError, FontError
from glyphbright.io import (
    EMBEDDED_FONT_NAME,
    FontResource,
    get_shared_font,
    read_embedded_font,
    reset_shared_font,
)
from glyphbright.io import reader as reader_module


class TestFontResource:
    """Tests for FontResource decoding and metrics."""

    def test_metrics(self, synthetic_font):
        """Test vertical metrics come from the hhea table."""
        assert synthetic_font.ascent == 800
        assert synthetic_font.descent == -200
        assert synthetic_font.line_height == 1000
        assert synthetic_font.units_per_em == 1000

    def test_font_facts(self, synthetic_font):
        """Test descriptive properties."""
        assert synthetic_font.format == "TrueType"
        assert synthetic_font.glyph_count == 6
        assert synthetic_font.family_name == "Glyphbright Test"
        assert synthetic_font.asset == "synthetic"

    def test_glyph_name_for_mapped_codepoint(self, synthetic_font):
        """Test cmap lookup."""
        assert synthetic_font.glyph_name_for(0x2588) == "fullblock"
        assert synthetic_font.has_codepoint(0x20)

    def test_glyph_name_for_unmapped_codepoint(self, synthetic_font):
        """Test unmapped code points fall back to .notdef."""
        assert not synthetic_font.has_codepoint(ord("Q"))
        assert synthetic_font.glyph_name_for(ord("Q")) == ".notdef"

    def test_advance_width(self, synthetic_font):
        """Test advance widths come from hmtx."""
        assert synthetic_font.advance_width("fullblock") == 500

    def test_garbage_bytes_raise_decode_error(self):
        """Test undecodable data raises FontDecodeError chained to the cause."""
        with pytest.raises(FontDecodeError) as exc_info:
            FontResource.from_bytes(b"definitely not a font", asset="garbage.ttf")

        error = exc_info.value
        assert isinstance(error, FontError)
        assert error.asset == "garbage.ttf"
        assert error.__cause__ is not None
        assert "garbage.ttf" in str(error)

    def test_empty_bytes_raise_decode_error(self):
        """Test empty data raises FontDecodeError."""
        with pytest.raises(FontDecodeError):
            FontResource.from_bytes(b"")

    def test_truncated_font_raises_decode_error(self, synthetic_font_bytes):
        """Test a truncated font raises FontDecodeError."""
        with pytest.raises(FontDecodeError):
            FontResource.from_bytes(synthetic_font_bytes[:64])


class TestEmbeddedFont:
    """Tests for the bundled font asset."""

    def test_asset_is_truetype(self):
        """Test the bundled asset has a TrueType signature."""
        data = read_embedded_font()
        assert data[:4] == b"\x00\x01\x00\x00"

    def test_load_embedded(self):
        """Test the bundled asset decodes."""
        font = FontResource.load_embedded()
        assert font.asset == EMBEDDED_FONT_NAME
        assert font.format == "TrueType"
        assert font.line_height > 0
        assert font.glyph_name_for(ord("M")) != ".notdef"

    def test_missing_asset_raises_decode_error(self):
        """Test an unreadable asset is reported as a decode failure."""
        with patch.object(reader_module, "read_embedded_font", side_effect=FileNotFoundError("gone")):
            with pytest.raises(FontDecodeError, match="gone"):
                FontResource.load_embedded()


class TestSharedFont:
    """Tests for the process-wide font handle."""

    def test_returns_same_instance(self, fresh_shared_font):  # noqa: ARG002
        """Test repeated calls share one decoded font."""
        assert get_shared_font() is get_shared_font()

    def test_reset_drops_instance(self, fresh_shared_font):  # noqa: ARG002
        """Test reset forces a new decode."""
        first = get_shared_font()
        reset_shared_font()
        assert get_shared_font() is not first

    def test_concurrent_first_use_decodes_once(self, fresh_shared_font):  # noqa: ARG002
        """Test racing threads trigger a single decode."""
        barrier = threading.Barrier(8)
        results: list[FontResource] = []
        results_lock = threading.Lock()

        def worker() -> None:
            barrier.wait()
            font = get_shared_font()
            with results_lock:
                results.append(font)

        with patch.object(FontResource, "load_embedded", wraps=FontResource.load_embedded) as mock_load:
            threads = [threading.Thread(target=worker) for _ in range(8)]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()

        assert mock_load.call_count == 1
        assert len(results) == 8
        assert all(font is results[0] for font in results)

    def test_decode_failure_propagates_and_is_not_cached(self, fresh_shared_font):  # noqa: ARG002
        """Test a failed decode raises and leaves no broken handle behind."""
        with patch.object(FontResource, "load_embedded", side_effect=FontDecodeError("x.ttf", "corrupt")):
            with pytest.raises(FontDecodeError, match="corrupt"):
                get_shared_font()

        assert get_shared_font().asset == EMBEDDED_FONT_NAME
