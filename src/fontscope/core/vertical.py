"""Vertical (top-to-bottom) layout.

Each line becomes a column; the first line is the rightmost column, as in
Japanese and Chinese vertical writing. Lines are shaped top-to-bottom so
vertical glyph forms and advances come from the font's own tables.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from fontscope.config import LayoutConfig
from fontscope.core.compositor import StrokeCompositor
from fontscope.core.lines import split_lines
from fontscope.core.metrics import MetricsResolver
from fontscope.core.outline import glyph_path_data
from fontscope.core.transform import VerticalTransform
from fontscope.domain.glyph import Canvas, GlyphGroup
from fontscope.io.face import FontFace
from fontscope.shaping.harfbuzz import HarfBuzzShaper, ShapedGlyph
from fontscope.utils.logging import GenerationLogger

PLACEHOLDER_CHAR = "?"
NOTDEF_GLYPH_ID = 0


@dataclass(frozen=True, slots=True)
class ColumnPlacement:
    """Where one column sits on the canvas.

    Attributes:
        text: Line text of the column
        center_x: Output X of the column center line
        extent: Total vertical advance of the column
    """

    text: str
    center_x: float
    extent: float


class VerticalLayoutEngine:
    """Lays out lines as columns, top to bottom, right to left.

    Shaped glyphs are paired with source characters by position in shaped
    order. When shaping yields more glyphs than characters, the extra
    glyphs are labelled with a placeholder character.
    """

    def __init__(
        self,
        face: FontFace,
        shaper: HarfBuzzShaper,
        resolver: MetricsResolver,
        compositor: StrokeCompositor,
        config: LayoutConfig,
        generation_logger: GenerationLogger | None = None,
    ) -> None:
        self._face = face
        self._shaper = shaper
        self._resolver = resolver
        self._compositor = compositor
        self._config = config
        self._log = generation_logger or GenerationLogger()
        self.columns: list[ColumnPlacement] = []

    @property
    def padding(self) -> float:
        return self._config.vertical_padding(self._resolver.font_size)

    @property
    def column_pitch(self) -> float:
        return self._config.line_height(self._resolver.font_size)

    def canvas_width(self, line_count: int) -> float:
        return line_count * self.column_pitch + self.padding * 2

    def column_center_x(self, column_index: int, canvas_width: float) -> float:
        """Center X of a column; column 0 is the rightmost."""
        return canvas_width - self.padding - (column_index + 0.5) * self.column_pitch

    def layout(self, text: str) -> Canvas:
        """Lay out text into a canvas of glyph groups."""
        lines = split_lines(text)
        canvas_width = self.canvas_width(len(lines))
        groups: list[GlyphGroup] = []
        self.columns = []

        base_index = 0
        for column_index, line in enumerate(lines):
            center_x = self.column_center_x(column_index, canvas_width)
            shaped = self._shaper.shape(line, direction="ttb")
            extent = self._layout_column(groups, line, shaped, center_x, base_index)
            self.columns.append(ColumnPlacement(text=line, center_x=center_x, extent=extent))
            base_index += max(len(line), len(shaped))

        max_extent = max((column.extent for column in self.columns), default=0.0)
        canvas = Canvas(width=canvas_width, height=max_extent + self.padding * 2)
        for group in groups:
            canvas.add_group(group)
        return canvas

    def _layout_column(
        self,
        groups: list[GlyphGroup],
        line: str,
        shaped: Sequence[ShapedGlyph],
        center_x: float,
        base_index: int,
    ) -> float:
        """Place one column's glyphs.

        Returns:
            Column extent (sum of resolved vertical advances)
        """
        start_y = self.padding
        cursor_y = start_y

        for position, shaped_glyph in enumerate(shaped):
            char = line[position] if position < len(line) else PLACEHOLDER_CHAR
            index = base_index + position

            glyph_name = None
            if shaped_glyph.glyph_id != NOTDEF_GLYPH_ID:
                glyph_name = self._face.glyph_name_for_id(shaped_glyph.glyph_id)
            if glyph_name is None:
                self._log.log_missing_glyph(char, index)
                continue

            glyph = self._resolver.resolve(glyph_name, char, shaped_glyph.y_advance)
            if char.isspace():
                self._log.log_whitespace(char, index, glyph.vertical_advance)
                cursor_y += glyph.vertical_advance
                continue

            transform = VerticalTransform(
                scale=self._resolver.scale,
                column_center_x=center_x,
                glyph_top_y=cursor_y + glyph.vertical_origin,
                horizontal_advance=glyph.horizontal_advance,
                precision=self._config.coordinate_precision,
            )
            d = glyph_path_data(self._face, glyph_name, transform)
            if d:
                layers = self._compositor.compose(d)
                groups.append(GlyphGroup(index=index, char=char, layers=layers))
                self._log.log_glyph_emitted(char, glyph_name, index, len(layers))
            else:
                self._log.log_empty_outline(char, glyph_name, index)
            cursor_y += glyph.vertical_advance

        return cursor_y - start_y
