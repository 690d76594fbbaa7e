"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from glyphbright.config import GlyphBrightSettings, LoggingConfig, OutputConfig, get_default_settings


class TestSettings:
    """Tests for settings defaults and validation."""

    def test_defaults(self):
        """Test default settings."""
        settings = get_default_settings()
        assert isinstance(settings, GlyphBrightSettings)
        assert settings.logging.log_file is None
        assert settings.logging.log_level == "WARNING"
        assert settings.output == OutputConfig()

    def test_log_level_normalized(self):
        """Test log levels are accepted case-insensitively."""
        assert LoggingConfig(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            LoggingConfig(file_log_level="chatty")
