"""Glyph outline walking.

The fonttools pen protocol is the visitor: the glyph calls moveTo,
lineTo, qCurveTo, curveTo and closePath in outline order, and
OutlinePen records each segment as a transformed PathCommand.
"""

from fontTools.pens.basePen import BasePen

from fontscope.core.transform import CoordinateTransform
from fontscope.domain.path import (
    ClosePath,
    CubicTo,
    LineTo,
    MoveTo,
    PathCommand,
    QuadTo,
    path_data,
)
from fontscope.io.face import FontFace


class OutlinePen(BasePen):
    """Pen that records transformed path commands.

    BasePen decomposes TrueType quadratic runs with implied on-curve points
    into single quadratic segments and resolves components through the
    glyph set, so only the one-segment callbacks are overridden here.
    """

    def __init__(self, transform: CoordinateTransform, glyph_set=None) -> None:
        super().__init__(glyph_set)
        self._transform = transform
        self.commands: list[PathCommand] = []

    def _moveTo(self, pt):
        x, y = self._transform.apply(*pt)
        self.commands.append(MoveTo(x, y))

    def _lineTo(self, pt):
        x, y = self._transform.apply(*pt)
        self.commands.append(LineTo(x, y))

    def _qCurveToOne(self, pt1, pt2):
        x1, y1 = self._transform.apply(*pt1)
        x, y = self._transform.apply(*pt2)
        self.commands.append(QuadTo(x1, y1, x, y))

    def _curveToOne(self, pt1, pt2, pt3):
        x1, y1 = self._transform.apply(*pt1)
        x2, y2 = self._transform.apply(*pt2)
        x, y = self._transform.apply(*pt3)
        self.commands.append(CubicTo(x1, y1, x2, y2, x, y))

    def _closePath(self):
        self.commands.append(ClosePath())

    def _endPath(self):
        # Open contours carry no closing segment
        pass


def walk_outline(face: FontFace, glyph_name: str, transform: CoordinateTransform) -> list[PathCommand]:
    """Visit a glyph's outline segments in order under a transform.

    Args:
        face: Font face owning the glyph
        glyph_name: Glyph to walk
        transform: Font-unit to output-space transform

    Returns:
        Commands in drawing order; empty for glyphs without outlines
    """
    pen = OutlinePen(transform, face.glyph_set)
    face.draw_glyph(glyph_name, pen)
    return pen.commands


def glyph_path_data(face: FontFace, glyph_name: str, transform: CoordinateTransform) -> str:
    """Build SVG path data for one glyph.

    Subpaths are concatenated without separators. Glyphs without outlines
    (spaces) yield an empty string.
    """
    return path_data(walk_outline(face, glyph_name, transform), transform.precision)
