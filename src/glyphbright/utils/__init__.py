"""Utility functions for glyphbright.

This module provides logging setup and configuration.
"""

from glyphbright.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
