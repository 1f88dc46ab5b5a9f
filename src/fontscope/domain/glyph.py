"""Positioned glyphs and the canvas they are placed on.

This module defines the per-call layout results:
- PositionedGlyph: resolved placement metrics for one glyph
- PathLayer: one styled copy of a glyph's path
- GlyphGroup: all layers emitted for one visible character
- Canvas: document extent plus glyph groups in drawing order
"""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class PositionedGlyph:
    """Placement metrics of one glyph, already scaled to output units.

    Attributes:
        glyph_name: Glyph name in the font (e.g., "A", "uni3042")
        char: Source character the glyph was produced for
        horizontal_advance: Horizontal advance width
        vertical_advance: Vertical advance height
        vertical_origin: Distance from the glyph's top anchor to its baseline
        height: Bounding-box height
    """

    glyph_name: str
    char: str
    horizontal_advance: float
    vertical_advance: float
    vertical_origin: float
    height: float


@dataclass(frozen=True, slots=True)
class PathLayer:
    """One styled copy of a glyph path.

    A layer with neither ``fill`` nor ``stroke`` is emitted bare, with no
    paint attributes at all.

    Attributes:
        d: SVG path data
        fill: Fill paint, or None for no fill attribute
        stroke: Stroke paint, or None for no stroke
        stroke_width: Total stroke width (only meaningful with ``stroke``)
    """

    d: str
    fill: str | None = None
    stroke: str | None = None
    stroke_width: float = 0.0

    @property
    def is_stroke(self) -> bool:
        return self.stroke is not None


@dataclass
class GlyphGroup:
    """Layers emitted for one visible character.

    Attributes:
        index: Sequential character index in the source text
        char: Source character (unescaped)
        layers: Path layers in drawing order (bottom first)
    """

    index: int
    char: str
    layers: list[PathLayer] = field(default_factory=list)


@dataclass
class Canvas:
    """Document extent and glyph groups.

    Attributes:
        width: Canvas width in output units
        height: Canvas height in output units
        groups: Glyph groups in drawing order
    """

    width: float
    height: float
    groups: list[GlyphGroup] = field(default_factory=list)

    def add_group(self, group: GlyphGroup) -> None:
        self.groups.append(group)

    @property
    def glyph_count(self) -> int:
        return len(self.groups)
