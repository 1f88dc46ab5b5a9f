"""Domain models for fontscope.

This module contains the models passed between the layout stages. All
models are created fresh for each generation call and are independent
of fonttools implementation details.

Key classes:
- PathCommand variants: MoveTo, LineTo, QuadTo, CubicTo, ClosePath
- PositionedGlyph: Resolved glyph placement metrics
- PathLayer, GlyphGroup, Canvas: Document contents
- StrokeLayer, LayoutRequest, RenderRequest: Caller input
"""

from fontscope.domain.glyph import Canvas, GlyphGroup, PathLayer, PositionedGlyph
from fontscope.domain.path import (
    ClosePath,
    CubicTo,
    LineTo,
    MoveTo,
    PathCommand,
    QuadTo,
    format_number,
    path_data,
)
from fontscope.domain.request import (
    ExportMode,
    LayoutRequest,
    RenderRequest,
    StrokeLayer,
    WritingDirection,
    default_stroke_layers,
)

__all__: list[str] = [
    # Enums
    "ExportMode",
    "WritingDirection",
    # Path commands
    "ClosePath",
    "CubicTo",
    "LineTo",
    "MoveTo",
    "PathCommand",
    "QuadTo",
    "format_number",
    "path_data",
    # Layout results
    "Canvas",
    "GlyphGroup",
    "PathLayer",
    "PositionedGlyph",
    # Requests
    "LayoutRequest",
    "RenderRequest",
    "StrokeLayer",
    "default_stroke_layers",
]
