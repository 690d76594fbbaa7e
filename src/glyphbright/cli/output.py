"""Rich console output helpers for the CLI."""

import json

from rich.console import Console
from rich.table import Table
from rich.text import Text

console = Console()
error_console = Console(stderr=True)

SYM_STEP = "▸"  # Step indicator
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def describe_character(character: str) -> str:
    """Printable label for a character, naming whitespace and controls."""
    if character == " ":
        return "space"
    if not character.isprintable():
        return f"U+{ord(character):04X}"
    return character


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Glyphbright[/bold] v{version}")
    console.print("─" * 44)


def print_font_info(
    family: str,
    font_type: str,
    glyph_count: int,
    upm: int,
    ascent: int,
    descent: int,
) -> None:
    """Print embedded font information.

    Args:
        family: Font family name
        font_type: Font format type (e.g., "TrueType", "OpenType")
        glyph_count: Total number of glyphs in font
        upm: Units per em value
        ascent: hhea ascent in font units
        descent: hhea descent in font units
    """
    line = Text(f"{SYM_STEP} ")
    line.append(family, style="bold")
    line.append(f" ({font_type})")
    console.print(line)
    console.print(f"  {glyph_count:,} glyphs {SYM_DOT} {upm:,} UPM")
    console.print(f"  ascent {ascent} {SYM_DOT} descent {descent}")


def print_scores(rows: list[tuple[str, str, int]], show_glyph_names: bool = True) -> None:
    """Print a brightness table.

    Args:
        rows: (character, glyph name, brightness) triples
        show_glyph_names: Whether to include the glyph name column
    """
    table = Table(show_header=True, header_style="bold")
    table.add_column("Char")
    table.add_column("Code point")
    if show_glyph_names:
        table.add_column("Glyph")
    table.add_column("Brightness", justify="right")

    for character, glyph_name, brightness in rows:
        cells = [describe_character(character), f"U+{ord(character):04X}"]
        if show_glyph_names:
            cells.append(glyph_name)
        cells.append(str(brightness))
        table.add_row(*cells)

    console.print(table)


def print_ranking(ranking: list[tuple[str, int]]) -> None:
    """Print characters ordered from darkest to brightest, then the ramp string.

    Args:
        ranking: (character, brightness) pairs in ascending brightness
    """
    for position, (character, brightness) in enumerate(ranking, start=1):
        console.print(f"  {position:>3}  {describe_character(character):<8} {brightness:>3}")

    ramp = Text("\n  Ramp ", style="bold")
    ramp.append("".join(character for character, _ in ranking), style="")
    console.print(ramp)


def print_json(data: object) -> None:
    """Print data as JSON, bypassing rich markup."""
    console.print_json(json.dumps(data, ensure_ascii=False))


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    error_console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        error_console.print(f"  {details}")
