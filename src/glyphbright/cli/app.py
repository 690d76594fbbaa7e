"""CLI application entry point for glyphbright.

This module provides the main CLI interface using Typer.
"""

import string
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from glyphbright import __version__
from glyphbright.cli.output import (
    console,
    print_error,
    print_font_info,
    print_header,
    print_json,
    print_ranking,
    print_scores,
)
from glyphbright.config import GlyphBrightSettings, LoggingConfig, OutputConfig
from glyphbright.core import BrightnessTable, rank_characters
from glyphbright.exceptions import FontDecodeError, GlyphBrightError
from glyphbright.io import get_shared_font
from glyphbright.utils import configure_logging

# Printable ASCII without tabs and newlines
DEFAULT_CHARACTERS = "".join(c for c in string.printable if c == " " or not c.isspace())

app = typer.Typer(
    name="glyphbright",
    help="Score characters by the brightness of their rendered glyphs.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Glyphbright[/bold blue] v{__version__}")
        raise typer.Exit()


def _settings(ctx: typer.Context) -> GlyphBrightSettings:
    settings = ctx.obj
    if not isinstance(settings, GlyphBrightSettings):
        settings = GlyphBrightSettings()
    return settings


@app.callback()
def main_options(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only log errors to the console",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Score characters by the brightness of their rendered glyphs."""
    try:
        logging_config = LoggingConfig(log_file=log_file, log_level=log_level)
    except ValidationError as e:
        print_error(f"Invalid log level: {log_level}", details=e.errors()[0]["msg"])
        raise typer.Exit(code=1)

    configure_logging(
        log_file=logging_config.log_file,
        console_level=logging_config.log_level,
        file_level=logging_config.file_log_level,
        quiet=quiet,
    )
    ctx.obj = GlyphBrightSettings(logging=logging_config)


@app.command()
def score(
    ctx: typer.Context,
    characters: Annotated[
        str,
        typer.Argument(
            help="Characters to score",
            show_default=False,
        ),
    ],
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print scores as a JSON object",
        ),
    ] = False,
    glyph_names: Annotated[
        bool,
        typer.Option(
            "--glyph-names/--no-glyph-names",
            help="Show the glyph each character resolves to",
        ),
    ] = True,
) -> None:
    """Print the brightness of each distinct character.

    Example:
        glyphbright score " .:-=+*#%@"
    """
    settings = _settings(ctx)
    settings.output = OutputConfig(json_output=json_output, show_glyph_names=glyph_names)

    if not characters:
        print_error("No characters given")
        raise typer.Exit(code=1)

    try:
        scores = BrightnessTable().score_many(characters)
        if settings.output.json_output:
            print_json(scores)
            return

        font = get_shared_font()
        rows = [
            (character, font.glyph_name_for(ord(character)), brightness)
            for character, brightness in scores.items()
        ]
        print_scores(rows, show_glyph_names=settings.output.show_glyph_names)
    except FontDecodeError as e:
        print_error(f"Could not load embedded font: {e.reason}")
        raise typer.Exit(code=1)
    except GlyphBrightError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def rank(
    characters: Annotated[
        str,
        typer.Argument(
            help="Characters to rank (default: printable ASCII)",
            show_default=False,
        ),
    ] = DEFAULT_CHARACTERS,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print the ranking as a JSON list of [character, brightness] pairs",
        ),
    ] = False,
) -> None:
    """Order characters from darkest to brightest.

    Ties keep the order the characters were given in.
    """
    if not characters:
        print_error("No characters given")
        raise typer.Exit(code=1)

    try:
        ranking = rank_characters(characters)
    except FontDecodeError as e:
        print_error(f"Could not load embedded font: {e.reason}")
        raise typer.Exit(code=1)
    except GlyphBrightError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if json_output:
        print_json([[character, brightness] for character, brightness in ranking])
        return

    print_header(__version__)
    print_ranking(ranking)


@app.command()
def info(
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print font facts as a JSON object",
        ),
    ] = False,
) -> None:
    """Show the embedded font used for rendering."""
    try:
        font = get_shared_font()
    except FontDecodeError as e:
        print_error(f"Could not load embedded font: {e.reason}")
        raise typer.Exit(code=1)

    if json_output:
        print_json(
            {
                "asset": font.asset,
                "family": font.family_name,
                "format": font.format,
                "glyphs": font.glyph_count,
                "upm": font.units_per_em,
                "ascent": font.ascent,
                "descent": font.descent,
            }
        )
        return

    print_header(__version__)
    print_font_info(
        family=font.family_name,
        font_type=font.format,
        glyph_count=font.glyph_count,
        upm=font.units_per_em,
        ascent=font.ascent,
        descent=font.descent,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
