"""Configuration settings for fontscope."""

import sys
from pathlib import Path

from pydantic import BaseModel, Field


def _platform_font_dirs() -> list[Path]:
    """Return the usual font directories for the running platform."""
    home = Path.home()
    if sys.platform == "darwin":
        return [
            Path("/System/Library/Fonts"),
            Path("/Library/Fonts"),
            home / "Library" / "Fonts",
        ]
    if sys.platform.startswith("win"):
        return [
            Path("C:/Windows/Fonts"),
            home / "AppData" / "Local" / "Microsoft" / "Windows" / "Fonts",
        ]
    return [
        Path("/usr/share/fonts"),
        Path("/usr/local/share/fonts"),
        home / ".local" / "share" / "fonts",
        home / ".fonts",
    ]


class LayoutConfig(BaseModel):
    """Configuration for glyph layout and document geometry.

    Lengths are in output units (SVG user units). Ratios are relative to
    the requested font size.
    """

    padding: float = Field(
        default=20.0,
        ge=0.0,
        description="Canvas padding around the text block",
    )
    line_height_ratio: float = Field(
        default=1.2,
        gt=0.0,
        description="Line height (and vertical column pitch) as a multiple of font size",
    )
    vertical_padding_ratio: float = Field(
        default=0.5,
        ge=0.0,
        description="Extra vertical-mode padding as a multiple of font size",
    )
    coordinate_precision: int = Field(
        default=2,
        ge=0,
        le=6,
        description="Decimal digits kept in path coordinates",
    )

    def line_height(self, font_size: float) -> float:
        """Get line height (column pitch in vertical mode) for a font size."""
        return font_size * self.line_height_ratio

    def vertical_padding(self, font_size: float) -> float:
        """Get canvas padding for vertical layout.

        Wider than the horizontal padding so glyphs wider than their
        column are not clipped.
        """
        return font_size * self.vertical_padding_ratio + self.padding


class FontConfig(BaseModel):
    """Configuration for font resolution."""

    font_dirs: list[Path] = Field(
        default_factory=_platform_font_dirs,
        description="Directories scanned when resolving a font by name",
    )
    face_index: int = Field(
        default=0,
        ge=0,
        description="Face index used for font collections (TTC/OTC)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class FontScopeSettings(BaseModel):
    """Main application settings."""

    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    fonts: FontConfig = Field(default_factory=FontConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> FontScopeSettings:
    """Get default application settings."""
    return FontScopeSettings()
