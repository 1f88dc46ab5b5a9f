"""Horizontal (left-to-right) layout.

Lines come from explicit line breaks only. Each line is measured from the
raw cmap advances and centered on its own width within the canvas.
"""

from dataclasses import dataclass

from fontscope.config import LayoutConfig
from fontscope.core.compositor import StrokeCompositor
from fontscope.core.lines import split_lines
from fontscope.core.metrics import MetricsResolver
from fontscope.core.outline import glyph_path_data
from fontscope.core.transform import HorizontalTransform
from fontscope.domain.glyph import Canvas, GlyphGroup
from fontscope.io.face import FontFace
from fontscope.utils.logging import GenerationLogger


@dataclass(frozen=True, slots=True)
class LinePlacement:
    """Where one line sits on the canvas.

    Attributes:
        text: Line text
        width: Sum of advances, whitespace included
        start_x: Pen X of the first character
        baseline_y: Output Y of the baseline
    """

    text: str
    width: float
    start_x: float
    baseline_y: float


class HorizontalLayoutEngine:
    """Lays out lines left to right, each centered in the canvas.

    Example:
        engine = HorizontalLayoutEngine(face, resolver, compositor, LayoutConfig())
        canvas = engine.layout("Hello\\nWorld")
    """

    def __init__(
        self,
        face: FontFace,
        resolver: MetricsResolver,
        compositor: StrokeCompositor,
        config: LayoutConfig,
        generation_logger: GenerationLogger | None = None,
    ) -> None:
        self._face = face
        self._resolver = resolver
        self._compositor = compositor
        self._config = config
        self._log = generation_logger or GenerationLogger()

    def char_advance(self, char: str) -> float:
        """Horizontal advance of a character; 0 when the font lacks it."""
        glyph_name = self._face.glyph_name_for_char(char)
        if glyph_name is None:
            return 0.0
        return self._resolver.horizontal_advance(glyph_name)

    def line_width(self, line: str) -> float:
        return sum(self.char_advance(char) for char in line)

    def plan(self, lines: list[str]) -> tuple[float, float, list[LinePlacement]]:
        """Compute the canvas size and per-line placement.

        Returns:
            Tuple of (canvas_width, canvas_height, placements)
        """
        padding = self._config.padding
        line_height = self._config.line_height(self._resolver.font_size)
        widths = [self.line_width(line) for line in lines]

        canvas_width = max(widths, default=0.0) + padding * 2
        canvas_height = len(lines) * line_height + padding * 2

        placements = [
            LinePlacement(
                text=line,
                width=width,
                start_x=(canvas_width - width) / 2,
                baseline_y=padding + (i + 1) * line_height,
            )
            for i, (line, width) in enumerate(zip(lines, widths))
        ]
        return canvas_width, canvas_height, placements

    def layout(self, text: str) -> Canvas:
        """Lay out text into a canvas of glyph groups."""
        canvas_width, canvas_height, placements = self.plan(split_lines(text))
        canvas = Canvas(width=canvas_width, height=canvas_height)

        index = 0
        for placement in placements:
            cursor_x = placement.start_x
            for char in placement.text:
                cursor_x += self._place_char(canvas, char, index, cursor_x, placement.baseline_y)
                index += 1

        return canvas

    def _place_char(
        self,
        canvas: Canvas,
        char: str,
        index: int,
        cursor_x: float,
        baseline_y: float,
    ) -> float:
        """Emit one character's group if it is visible.

        Returns:
            Advance to apply to the cursor
        """
        glyph_name = self._face.glyph_name_for_char(char)
        if glyph_name is None:
            self._log.log_missing_glyph(char, index)
            return 0.0

        advance = self._resolver.horizontal_advance(glyph_name)
        if char.isspace():
            self._log.log_whitespace(char, index, advance)
            return advance

        transform = HorizontalTransform(
            scale=self._resolver.scale,
            cursor_x=cursor_x,
            baseline_y=baseline_y,
            precision=self._config.coordinate_precision,
        )
        d = glyph_path_data(self._face, glyph_name, transform)
        if not d:
            self._log.log_empty_outline(char, glyph_name, index)
            return advance

        layers = self._compositor.compose(d)
        canvas.add_group(GlyphGroup(index=index, char=char, layers=layers))
        self._log.log_glyph_emitted(char, glyph_name, index, len(layers))
        return advance
