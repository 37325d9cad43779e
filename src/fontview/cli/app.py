"""CLI application entry point for fontview.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import structlog
import typer

from fontview import __version__
from fontview.cli.output import (
    SYM_DOT,
    console,
    create_layout_table,
    format_char,
    print_error,
    print_font_info,
    print_header,
    print_layout_summary,
    print_v_metrics,
)
from fontview.config import (
    FontConfig,
    FontOwnership,
    FontViewSettings,
    LayoutConfig,
    LoggingConfig,
)
from fontview.core import NOTDEF, Font
from fontview.domain import GlyphId, Scale
from fontview.exceptions import FontLoadError, FontViewError, GlyphError
from fontview.io import ParsedFont
from fontview.io.reader import load_font
from fontview.utils import LayoutLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="fontview",
    help="Inspect font metrics, kerning and single-line glyph layout.",
    add_completion=False,
    no_args_is_help=True,
)

FontPathArg = Annotated[
    Path,
    typer.Argument(
        help="Path to a TTF/OTF font or TTC/OTC collection",
        show_default=False,
    ),
]
IndexOpt = Annotated[
    int,
    typer.Option(
        "--index",
        "-i",
        help="Font number inside a collection",
        min=0,
    ),
]
OwnedOpt = Annotated[
    bool,
    typer.Option(
        "--owned/--borrowed",
        help="Let the font own its buffer or borrow it",
    ),
]
SizeOpt = Annotated[
    float,
    typer.Option(
        "--size",
        "-s",
        help="Pixel height (lowest descender to highest ascender)",
        min=1.0,
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]fontview[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
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
    """Inspect font metrics, kerning and single-line glyph layout."""


def _open_font(
    font_path: Path,
    config: FontConfig,
    logger: structlog.stdlib.BoundLogger | None = None,
) -> tuple[Font, int | None]:
    """Load a font or exit with an error message.

    Returns:
        The font and the collection size (None for single fonts)
    """
    if not font_path.is_file():
        print_error(
            f"Input file not found: {font_path}",
            details="Please provide a path to a TTF, OTF, TTC or OTC font file.",
        )
        raise typer.Exit(code=1)

    try:
        font = load_font(
            font_path,
            index=config.collection_index,
            owned=config.owned,
            logger=logger,
        )
    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1) from e

    return font, ParsedFont.collection_size(font.parsed.source)


def _font_config(index: int, owned: bool) -> FontConfig:
    return FontConfig(
        collection_index=index,
        ownership=FontOwnership.OWNED if owned else FontOwnership.BORROWED,
    )


@app.command()
def info(
    font_path: FontPathArg,
    index: IndexOpt = 0,
    owned: OwnedOpt = True,
    size: Annotated[
        float | None,
        typer.Option(
            "--size",
            "-s",
            help="Also show metrics scaled to this pixel height",
            min=1.0,
        ),
    ] = None,
) -> None:
    """Show glyph count, units per em and vertical metrics of a font."""
    font, collection_size = _open_font(font_path, _font_config(index, owned))

    print_header(__version__)
    print_font_info(
        font_path=str(font_path),
        full_name=font.parsed.full_name,
        glyph_count=font.glyph_count(),
        upm=font.parsed.units_per_em(),
        owned=font.is_owned,
        index=index,
        collection_size=collection_size,
    )
    print_v_metrics(font.v_metrics_unscaled())
    if size is not None:
        try:
            scaled = font.v_metrics(Scale.uniform(size))
        except FontViewError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e
        print_v_metrics(scaled, label=f"{size:g}px")


@app.command()
def layout(
    font_path: FontPathArg,
    text: Annotated[
        str,
        typer.Argument(help="Text to lay out on a single line", show_default=False),
    ],
    size: SizeOpt = 24.0,
    x_scale: Annotated[
        float,
        typer.Option(
            "--x-scale",
            help="Horizontal stretch relative to the vertical scale",
            min=0.01,
        ),
    ] = 1.0,
    start_x: Annotated[
        float,
        typer.Option("--start-x", help="Baseline origin x in pixels"),
    ] = 0.0,
    start_y: Annotated[
        float | None,
        typer.Option("--start-y", help="Baseline y in pixels (default: scaled ascent)"),
    ] = None,
    index: IndexOpt = 0,
    owned: OwnedOpt = True,
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
) -> None:
    """Lay out TEXT left to right and print the positioned glyphs.

    Each character becomes one glyph (".notdef" when the font lacks it),
    kerned against the previous glyph. Line breaks are not interpreted.

    Example:
        fontview layout DejaVuSans.ttf "AVATAR" --size 48
    """
    settings = FontViewSettings(
        font=_font_config(index, owned),
        layout=LayoutConfig(
            pixel_height=size,
            x_scale_factor=x_scale,
            start_x=start_x,
            start_y=start_y,
        ),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )
    layout_logger = LayoutLogger(logger)

    font, _ = _open_font(font_path, settings.font, logger)

    try:
        scale = settings.layout.scale()
        start = settings.layout.start(font.v_metrics(scale).ascent)

        layout_logger.log_layout_start(text, settings.layout.pixel_height)
        table = create_layout_table()
        glyphs = font.layout(text, scale, start)
        previous: GlyphId | None = None

        for char, glyph in zip(text, glyphs):
            kerning = 0.0 if previous is None else font.pair_kerning(scale, previous, glyph.id)
            advance = glyph.unpositioned().h_metrics().advance_width
            if glyph.id == NOTDEF and font.glyph_index(char) is None:
                layout_logger.log_unmapped(char)
            layout_logger.log_glyph(char, int(glyph.id), glyph.position.x, kerning)

            table.add_row(
                format_char(char),
                str(int(glyph.id)),
                font.parsed.glyph_name(glyph.id) or "",
                f"{glyph.position.x:.2f}",
                f"{glyph.position.y:.2f}",
                f"{advance:.2f}",
                f"{kerning:+.2f}" if kerning else "",
            )
            previous = glyph.id

        layout_logger.log_layout_complete(glyphs.caret)
    except FontViewError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    console.print(f"\n{SYM_DOT} {size:g}px {SYM_DOT} start ({start.x:g}, {start.y:.2f})\n")
    console.print(table)
    stats = layout_logger.stats
    print_layout_summary(
        glyphs=stats.glyph_count,
        total_advance=stats.total_advance,
        notdef=stats.notdef_count,
    )


@app.command()
def kern(
    font_path: FontPathArg,
    left: Annotated[str, typer.Argument(help="First character (or glyph id with --ids)")],
    right: Annotated[str, typer.Argument(help="Second character (or glyph id with --ids)")],
    size: SizeOpt = 24.0,
    glyph_ids: Annotated[
        bool,
        typer.Option("--ids", help="Interpret LEFT and RIGHT as raw glyph ids"),
    ] = False,
    index: IndexOpt = 0,
) -> None:
    """Show the pair kerning between two glyphs."""
    font, _ = _open_font(font_path, _font_config(index, True))

    try:
        if glyph_ids:
            first = font.glyph(GlyphId(int(left))).id
            second = font.glyph(GlyphId(int(right))).id
        else:
            first = font.glyph(left).id
            second = font.glyph(right).id
    except (ValueError, GlyphError) as e:
        print_error(f"Invalid glyph: {e}")
        raise typer.Exit(code=1) from e

    try:
        units = font.pair_kerning(Scale.uniform(font_height_units(font)), first, second)
        pixels = font.pair_kerning(Scale.uniform(size), first, second)
    except FontViewError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    console.print(
        f"  {int(first)} {SYM_DOT} {int(second)}: "
        f"{units:g} units {SYM_DOT} {pixels:.3f}px at {size:g}px"
    )


def font_height_units(font: Font) -> float:
    """Font height in design units, the pixel size at which 1px == 1 unit."""
    v_metrics = font.v_metrics_unscaled()
    return v_metrics.ascent - v_metrics.descent


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
