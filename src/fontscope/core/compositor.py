"""Per-glyph path layering by export mode."""

from fontscope.domain.glyph import PathLayer
from fontscope.domain.request import ExportMode, StrokeLayer


class StrokeCompositor:
    """Decides which styled copies of a glyph path are emitted, bottom first.

    - PATH_ONLY: one bare path, for post-processing in another editor
    - FILL: one path filled with the text color
    - FILL_AND_STROKE: one stroke copy per enabled layer, last declared
      first (outermost), then the fill copy on top

    Stroke widths are doubled: the declared width is per side and an SVG
    stroke straddles the outline.
    """

    def __init__(
        self,
        export_mode: ExportMode,
        fill_color: str,
        stroke_layers: list[StrokeLayer] | None = None,
    ) -> None:
        self.export_mode = export_mode
        self.fill_color = fill_color
        enabled = [layer for layer in (stroke_layers or []) if layer.enabled]
        self._strokes = list(reversed(enabled))

    @property
    def layers_per_glyph(self) -> int:
        if self.export_mode is ExportMode.FILL_AND_STROKE:
            return len(self._strokes) + 1
        return 1

    def compose(self, d: str) -> list[PathLayer]:
        """Build the layers for one glyph's path data.

        Args:
            d: Non-empty SVG path data

        Returns:
            Path layers in drawing order
        """
        if self.export_mode is ExportMode.PATH_ONLY:
            return [PathLayer(d=d)]

        layers: list[PathLayer] = []
        if self.export_mode is ExportMode.FILL_AND_STROKE:
            layers.extend(
                PathLayer(d=d, fill="none", stroke=layer.color, stroke_width=layer.width * 2)
                for layer in self._strokes
            )
        layers.append(PathLayer(d=d, fill=self.fill_color))
        return layers
