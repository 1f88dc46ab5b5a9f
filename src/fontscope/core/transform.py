"""Font-unit to output-space coordinate transforms.

Two strategies exist, one per writing direction. A layout engine builds
one per glyph and hands it to the outline walker; the walker never knows
which direction it is drawing for.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class HorizontalTransform:
    """Uniform scale, pen offset and Y flip around a baseline.

    Attributes:
        scale: Output units per font unit
        cursor_x: Pen X position of the glyph origin
        baseline_y: Output Y of the baseline
        precision: Decimal digits kept in output coordinates
    """

    scale: float
    cursor_x: float
    baseline_y: float
    precision: int = 2

    def apply(self, x: float, y: float) -> tuple[float, float]:
        out_x = x * self.scale + self.cursor_x
        out_y = self.baseline_y - y * self.scale
        return round(out_x, self.precision), round(out_y, self.precision)


@dataclass(frozen=True, slots=True)
class VerticalTransform:
    """Uniform scale, column centering and vertical-origin offset.

    The glyph is centered in its column using its own horizontal advance,
    not the column pitch.

    Attributes:
        scale: Output units per font unit
        column_center_x: Output X of the column center line
        glyph_top_y: Column cursor plus the glyph's vertical origin
        horizontal_advance: Glyph advance width, already scaled
        precision: Decimal digits kept in output coordinates
    """

    scale: float
    column_center_x: float
    glyph_top_y: float
    horizontal_advance: float
    precision: int = 2

    def apply(self, x: float, y: float) -> tuple[float, float]:
        out_x = self.column_center_x + (x * self.scale - self.horizontal_advance / 2)
        out_y = self.glyph_top_y - y * self.scale
        return round(out_x, self.precision), round(out_y, self.precision)


CoordinateTransform = HorizontalTransform | VerticalTransform
