"""Core typesetting algorithms for fontscope.

This module contains the core algorithms for:

- Coordinate transforms (horizontal and vertical strategies)
- Outline walking (fonttools pen to path commands)
- Metric resolution (ordered fallback chains)
- Line splitting on explicit breaks
- Layout (horizontal lines, vertical columns)
- Path layering and SVG serialization

All services are designed to be:
- Stateless across calls (one instance set per request)
- Pure apart from logging

Key classes:
- HorizontalTransform / VerticalTransform: Font units to output space
- OutlinePen: Records transformed path commands
- MetricsResolver: Advances, vertical origin and height per glyph
- HorizontalLayoutEngine / VerticalLayoutEngine: Glyph placement
- StrokeCompositor: Path layers per export mode
- DocumentSerializer: Canvas to SVG markup
- SvgGenerator: Orchestrates one request
"""

from fontscope.core.compositor import StrokeCompositor
from fontscope.core.generator import (
    RenderOutcome,
    SvgGenerator,
    generate_svg,
    render_request,
)
from fontscope.core.horizontal import HorizontalLayoutEngine, LinePlacement
from fontscope.core.lines import split_lines
from fontscope.core.metrics import MetricsResolver
from fontscope.core.outline import OutlinePen, glyph_path_data, walk_outline
from fontscope.core.serializer import DocumentSerializer, escape_xml
from fontscope.core.transform import CoordinateTransform, HorizontalTransform, VerticalTransform
from fontscope.core.vertical import ColumnPlacement, VerticalLayoutEngine

__all__ = [
    # Transforms
    "CoordinateTransform",
    "HorizontalTransform",
    "VerticalTransform",
    # Outline walking
    "OutlinePen",
    "glyph_path_data",
    "walk_outline",
    # Metrics
    "MetricsResolver",
    # Layout
    "ColumnPlacement",
    "HorizontalLayoutEngine",
    "LinePlacement",
    "split_lines",
    "VerticalLayoutEngine",
    # Output
    "DocumentSerializer",
    "StrokeCompositor",
    "escape_xml",
    # Orchestration
    "RenderOutcome",
    "SvgGenerator",
    "generate_svg",
    "render_request",
]
