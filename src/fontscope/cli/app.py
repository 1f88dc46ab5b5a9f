"""CLI application entry point for fontscope.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from fontscope import __version__
from fontscope.cli.output import (
    console,
    print_error,
    print_font_info,
    print_font_names,
    print_header,
    print_step,
    print_success,
)
from fontscope.config import FontConfig, FontScopeSettings, LoggingConfig
from fontscope.core import render_request
from fontscope.domain import ExportMode, RenderRequest, StrokeLayer
from fontscope.exceptions import (
    FontNotFoundError,
    FontParseError,
    FontReadError,
    FontScopeError,
    ShapingInitError,
)
from fontscope.io import FontResolver
from fontscope.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="fontscope",
    help="Typeset text with a font and export the glyph outlines as SVG paths.",
    add_completion=False,
    no_args_is_help=True,
)

FontDirOption = Annotated[
    list[Path] | None,
    typer.Option(
        "--font-dir",
        "-d",
        help="Directory to search for fonts (repeatable; default: system font directories)",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]fontscope[/bold blue] v{__version__}")
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
    """Typeset text with a font and export the glyph outlines as SVG paths."""


def parse_stroke(value: str) -> StrokeLayer:
    """Parse a ``WIDTH:COLOR`` stroke option into an enabled layer.

    Raises:
        ValueError: If the value is not ``WIDTH:COLOR`` with a numeric width
    """
    width_text, separator, color = value.partition(":")
    if not separator or not color:
        raise ValueError(f"Expected WIDTH:COLOR, got '{value}'")
    return StrokeLayer(enabled=True, width=float(width_text), color=color)


def _settings(
    font_dirs: list[Path] | None,
    log_file: Path | None,
    log_level: str,
    quiet: bool,
) -> FontScopeSettings:
    fonts = FontConfig(font_dirs=font_dirs) if font_dirs else FontConfig()
    return FontScopeSettings(
        fonts=fonts,
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "ERROR",
        ),
    )


def _report_font_error(error: FontScopeError, settings: FontScopeSettings) -> None:
    if isinstance(error, FontNotFoundError):
        searched = ", ".join(str(d) for d in settings.fonts.font_dirs) or "(none)"
        print_error(f"Font not found: {error.font_name}", details=f"Searched: {searched}")
    elif isinstance(error, FontReadError):
        print_error(f"Could not read font: {error.reason}", details=error.path)
    elif isinstance(error, FontParseError):
        print_error(f"Not a supported font: {error.reason}", details=error.source)
    elif isinstance(error, ShapingInitError):
        print_error(f"Vertical layout unavailable: {error.reason}")
    else:
        print_error(str(error))


@app.command()
def render(
    font: Annotated[
        str,
        typer.Argument(
            help="Font family name, or path to a TTF/OTF/TTC file",
            show_default=False,
        ),
    ],
    text: Annotated[
        str,
        typer.Option(
            "--text",
            "-t",
            help="Text to render; a literal \\n starts a new line",
        ),
    ] = "サンプルテキスト",
    size: Annotated[
        float,
        typer.Option(
            "--size",
            "-s",
            help="Font size in output units",
            min=0.1,
        ),
    ] = 48.0,
    color: Annotated[
        str,
        typer.Option(
            "--color",
            "-c",
            help="Fill color",
        ),
    ] = "#000000",
    stroke: Annotated[
        list[str] | None,
        typer.Option(
            "--stroke",
            help="Stroke layer as WIDTH:COLOR, innermost first (repeatable)",
        ),
    ] = None,
    mode: Annotated[
        str,
        typer.Option(
            "--mode",
            "-m",
            help="Export mode (path_only|fill|fill_and_stroke)",
        ),
    ] = "fill",
    vertical: Annotated[
        bool,
        typer.Option(
            "--vertical",
            help="Lay out lines as top-to-bottom columns, right to left",
        ),
    ] = False,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output SVG path (default: stdout)",
        ),
    ] = None,
    font_dir: FontDirOption = None,
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
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Render text as an SVG document of glyph outline paths.

    Example:
        fontscope render "Noto Sans JP" -t "縦書き\\nテスト" --vertical -o out.svg

    With --mode fill_and_stroke every --stroke layer is drawn beneath the
    fill, the last one outermost.
    """
    try:
        export_mode = ExportMode(mode.lower())
    except ValueError:
        print_error(
            f"Invalid mode: {mode}",
            details="Valid values: path_only, fill, fill_and_stroke",
        )
        raise typer.Exit(code=1)

    try:
        stroke_layers = [parse_stroke(value) for value in stroke or []]
    except (ValueError, ValidationError) as e:
        print_error("Invalid --stroke value", details=str(e))
        raise typer.Exit(code=1)

    settings = _settings(font_dir, log_file, log_level, quiet)
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    request = RenderRequest(
        font_name=font,
        text=text.replace("\\n", "\n"),
        font_size=size,
        text_color=color,
        stroke_layers=stroke_layers,
        export_mode=export_mode,
        vertical=vertical,
    )

    if not quiet and output is not None:
        print_header(__version__)
        print_step(f"Rendering with {font}")

    resolver = FontResolver(settings.fonts.font_dirs, settings.fonts.face_index)
    outcome = render_request(request, resolver, settings.layout, logger)
    if not outcome.ok:
        _report_font_error(outcome.error, settings)  # type: ignore[arg-type]
        raise typer.Exit(code=1)

    if output is None:
        typer.echo(outcome.svg, nl=False)
        return

    try:
        output.write_text(outcome.svg or "", encoding="utf-8")
    except OSError as e:
        print_error(f"Could not write output: {e}")
        raise typer.Exit(code=1)

    if not quiet and outcome.stats is not None:
        print_success(
            output_path=str(output),
            glyphs=outcome.stats.glyphs_emitted,
            paths=outcome.stats.paths_emitted,
            missing=outcome.stats.missing_count,
            total_time_s=outcome.stats.duration_seconds,
        )


@app.command()
def info(
    font: Annotated[
        str,
        typer.Argument(
            help="Font family name, or path to a TTF/OTF/TTC file",
            show_default=False,
        ),
    ],
    font_dir: FontDirOption = None,
) -> None:
    """Show format, size and vertical-metrics support of a font."""
    settings = _settings(font_dir, None, "WARNING", quiet=True)
    resolver = FontResolver(settings.fonts.font_dirs, settings.fonts.face_index)

    try:
        resolved = resolver.resolve(font)
        with resolved.load_face() as face:
            print_step("Font")
            print_font_info(
                font_source=str(resolved.path or resolved.name),
                font_type=face.format,
                glyph_count=face.glyph_count,
                upm=face.units_per_em,
                vertical_metrics=face.has_vertical_metrics,
                vertical_origins=face.has_vertical_origins,
            )
    except FontScopeError as e:
        _report_font_error(e, settings)
        raise typer.Exit(code=1)


@app.command()
def fonts(font_dir: FontDirOption = None) -> None:
    """List font family names found in the font directories."""
    settings = _settings(font_dir, None, "WARNING", quiet=True)
    resolver = FontResolver(settings.fonts.font_dirs, settings.fonts.face_index)
    print_font_names(resolver.family_names())


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
