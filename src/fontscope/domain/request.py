"""Request models for SVG generation.

Requests arrive from outside the core (CLI, UI bridge, JSON payloads), so
they are Pydantic models with field validation rather than plain
dataclasses.
"""

from enum import Enum

from pydantic import BaseModel, Field


class ExportMode(str, Enum):
    """Which path layers are emitted per glyph."""

    PATH_ONLY = "path_only"
    FILL = "fill"
    FILL_AND_STROKE = "fill_and_stroke"


class WritingDirection(str, Enum):
    """Writing direction of the text block."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class StrokeLayer(BaseModel):
    """One outline overlay drawn beneath the glyph fill.

    ``width`` is a per-side value: the emitted SVG stroke is twice as wide
    so that half of it lands outside the glyph edge.
    """

    enabled: bool = Field(default=False, description="Whether the layer is drawn")
    width: float = Field(default=2.0, ge=0.0, description="Per-side stroke width")
    color: str = Field(default="#000000", description="Stroke paint, passed through as-is")


def default_stroke_layers() -> list[StrokeLayer]:
    """Three disabled stroke layers, innermost first."""
    return [
        StrokeLayer(enabled=False, width=2, color="#000000"),
        StrokeLayer(enabled=False, width=4, color="#FFFFFF"),
        StrokeLayer(enabled=False, width=6, color="#000000"),
    ]


class LayoutRequest(BaseModel):
    """Text and styling for one generation call."""

    text: str = Field(default="サンプルテキスト", description="Text; line breaks are explicit")
    font_size: float = Field(default=48.0, gt=0.0, description="Output units per em")
    text_color: str = Field(default="#000000", description="Fill paint, passed through as-is")
    stroke_layers: list[StrokeLayer] = Field(default_factory=default_stroke_layers)
    export_mode: ExportMode = Field(default=ExportMode.FILL)
    vertical: bool = Field(default=False, description="Lay out as top-to-bottom columns")

    @property
    def direction(self) -> WritingDirection:
        return WritingDirection.VERTICAL if self.vertical else WritingDirection.HORIZONTAL


class RenderRequest(LayoutRequest):
    """Layout request plus the name of the font to render with."""

    font_name: str = Field(description="Font family name or path to a font file")
