"""Configuration management for glyphbright.

Settings cover the command-line and logging layers only. The brightness
algorithm itself has no configuration: its font, scale and canvas size are
module-level constants in ``glyphbright.core``.

Key classes:
- LoggingConfig: Logging settings
- OutputConfig: CLI output settings
- GlyphBrightSettings: Main application settings
"""

from glyphbright.config.settings import (
    GlyphBrightSettings,
    LoggingConfig,
    OutputConfig,
    get_default_settings,
)

__all__ = [
    "GlyphBrightSettings",
    "LoggingConfig",
    "OutputConfig",
    "get_default_settings",
]
