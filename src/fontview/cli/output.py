"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from fontview.domain.metrics import VMetrics

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]fontview[/bold] v{version}")
    console.print("─" * 44)


def print_font_info(
    font_path: str,
    full_name: str | None,
    glyph_count: int,
    upm: int | None,
    owned: bool,
    index: int,
    collection_size: int | None = None,
) -> None:
    """Print font identification.

    Args:
        font_path: Path to the font file
        full_name: Full font name from the name table
        glyph_count: Total number of glyphs in font
        upm: Units per em value, None if the font has no valid value
        owned: Whether the font owns its buffer
        index: Collection index the font was loaded from
        collection_size: Number of fonts in the file, None for single fonts
    """
    line1 = Text("  ")
    line1.append(font_path)
    if full_name:
        line1.append(f" ({full_name})")
    console.print(line1)

    upm_str = f"{upm:,} UPM" if upm is not None else "[red]invalid UPM[/red]"
    ownership = "owned" if owned else "borrowed"
    console.print(f"  {glyph_count:,} glyphs {SYM_DOT} {upm_str} {SYM_DOT} {ownership}")
    if collection_size is not None:
        console.print(f"  font {index} of {collection_size} in collection")


def print_v_metrics(v_metrics: VMetrics, label: str = "design units") -> None:
    """Print vertical metrics.

    Args:
        v_metrics: Metrics to print
        label: Unit description
    """
    console.print(f"\n{SYM_STEP} Vertical metrics ({label})")
    console.print(f"  Ascent     {v_metrics.ascent:g}")
    console.print(f"  Descent    {v_metrics.descent:g}")
    console.print(f"  Line gap   {v_metrics.line_gap:g}")


def create_layout_table() -> Table:
    """Create a table for positioned glyphs.

    Returns:
        Table with char, glyph, x, y, advance and kerning columns.
    """
    table = Table(show_edge=False, header_style="bold")
    table.add_column("Char")
    table.add_column("Glyph", justify="right")
    table.add_column("Name")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    table.add_column("Advance", justify="right")
    table.add_column("Kern", justify="right")
    return table


def format_char(char: str) -> str:
    """Printable representation of a laid out character."""
    if char.isprintable() and not char.isspace():
        return char
    return f"U+{ord(char):04X}"


def print_layout_summary(glyphs: int, total_advance: float, notdef: int) -> None:
    """Print layout totals.

    Args:
        glyphs: Number of glyphs produced
        total_advance: Width of the line in pixels
        notdef: Number of characters that fell back to .notdef
    """
    notdef_style = "yellow" if notdef > 0 else "green"
    console.print(
        f"\n[bold green]{SYM_OK}[/bold green] {glyphs} glyphs {SYM_DOT} "
        f"{total_advance:.2f}px wide {SYM_DOT} "
        f"[{notdef_style}]{notdef} unmapped[/{notdef_style}]"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
