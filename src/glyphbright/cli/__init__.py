"""Command-line interface for glyphbright.

This module provides the CLI using Typer with rich output for inspecting
character brightness scores.

Key features:
- Score tables for a set of characters
- Darkest-to-brightest ranking and ramp strings
- JSON output for scripting
"""

from glyphbright.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
