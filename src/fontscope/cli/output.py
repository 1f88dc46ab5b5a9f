"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library.
Everything goes to stderr so SVG written to stdout can be piped.
"""

from rich.console import Console
from rich.text import Text

console = Console(stderr=True)

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
    console.print(f"\n[bold]fontscope[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(
    font_source: str,
    font_type: str,
    glyph_count: int,
    upm: int,
    vertical_metrics: bool,
    vertical_origins: bool,
) -> None:
    """Print font information.

    Args:
        font_source: Path or name of the font
        font_type: Font format type (e.g., "TrueType", "OpenType")
        glyph_count: Total number of glyphs in font
        upm: Units per em value
        vertical_metrics: Whether the font has vhea/vmtx
        vertical_origins: Whether the font has VORG
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(font_source)
    line1.append(f" ({font_type})")
    console.print(line1)
    console.print(f"  {glyph_count:,} glyphs {SYM_DOT} {upm:,} UPM")
    vmtx = "yes" if vertical_metrics else "no"
    vorg = "yes" if vertical_origins else "no"
    console.print(f"  vertical metrics {vmtx} {SYM_DOT} vertical origins {vorg}")


def print_font_names(names: list[str]) -> None:
    """Print discovered font family names."""
    console.print(f"\n[bold]{len(names)} fonts[/bold]\n")
    for name in names:
        console.print(Text(f"  {name}"))


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_success(
    output_path: str,
    glyphs: int,
    paths: int,
    missing: int,
    total_time_s: float,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        glyphs: Number of glyph groups written
        paths: Number of path elements written
        missing: Number of characters missing from the font
        total_time_s: Total generation time in seconds
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)

    missing_style = "yellow" if missing > 0 else "green"
    console.print(
        f"  {glyphs} glyphs {SYM_DOT} {paths} paths {SYM_DOT} "
        f"[{missing_style}]{missing} missing[/{missing_style}]"
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
