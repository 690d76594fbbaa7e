"""Configuration settings for Glyphbright."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (no file logging when unset)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )

    @field_validator("log_level", "file_log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level '{value}', expected one of {', '.join(_LOG_LEVELS)}")
        return level


class OutputConfig(BaseModel):
    """Configuration for CLI output."""

    json_output: bool = Field(
        default=False,
        description="Emit JSON instead of rich tables",
    )
    show_glyph_names: bool = Field(
        default=True,
        description="Include the resolved glyph name in score tables",
    )


class GlyphBrightSettings(BaseModel):
    """Main application settings."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


def get_default_settings() -> GlyphBrightSettings:
    """Get default application settings."""
    return GlyphBrightSettings()
