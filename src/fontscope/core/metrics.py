"""Per-glyph metric resolution with ordered fallbacks.

Not every font format fills every metric table: TrueType CJK fonts carry
vmtx but no VORG, Latin fonts often have neither. Each metric is therefore
resolved through an ordered tuple of providers; the first provider that
returns a value wins. New font quirks are handled by adding a provider to
a chain, not by changing call sites.
"""

from collections.abc import Callable
from functools import cached_property

from fontscope.domain.glyph import PositionedGlyph
from fontscope.io.face import FontFace


class GlyphQuery:
    """Inputs available to metric providers for one glyph.

    Attributes:
        glyph_name: Glyph being resolved
        shaped_y_advance: Vertical advance reported by shaping, in font units
    """

    def __init__(self, face: FontFace, glyph_name: str, shaped_y_advance: int | None = None) -> None:
        self._face = face
        self.glyph_name = glyph_name
        self.shaped_y_advance = shaped_y_advance

    @cached_property
    def bounds(self) -> tuple[float, float, float, float] | None:
        return self._face.bounds(self.glyph_name)


MetricProvider = Callable[[GlyphQuery], float | None]


class MetricsResolver:
    """Resolves placement metrics in output units.

    All table values are multiplied by ``scale = font_size / units_per_em``.
    Fallbacks that use the font size are already in output units.

    Example:
        resolver = MetricsResolver(face, font_size=48)
        glyph = resolver.resolve("uni3042", "あ", shaped_y_advance=-1000)
        glyph.vertical_advance  # 48.0
    """

    def __init__(self, face: FontFace, font_size: float) -> None:
        self._face = face
        self.font_size = font_size
        self.scale = font_size / face.units_per_em

        self.horizontal_advance_chain: tuple[MetricProvider, ...] = (
            self._table_horizontal_advance,
            self._zero,
        )
        self.vertical_advance_chain: tuple[MetricProvider, ...] = (
            self._shaped_vertical_advance,
            self._table_vertical_advance,
            self._nominal_size,
        )
        self.vertical_origin_chain: tuple[MetricProvider, ...] = (
            self._table_vertical_origin,
            self._bounds_vertical_origin,
            self._ascender_vertical_origin,
        )
        self.height_chain: tuple[MetricProvider, ...] = (
            self._bounds_height,
            self._nominal_size,
        )

    def resolve(
        self,
        glyph_name: str,
        char: str,
        shaped_y_advance: int | None = None,
    ) -> PositionedGlyph:
        """Resolve all four metrics for one glyph.

        Args:
            glyph_name: Glyph to resolve
            char: Source character (carried through for output)
            shaped_y_advance: Vertical advance from shaping, if shaped

        Returns:
            PositionedGlyph in output units
        """
        query = GlyphQuery(self._face, glyph_name, shaped_y_advance)
        return PositionedGlyph(
            glyph_name=glyph_name,
            char=char,
            horizontal_advance=_first_resolved(self.horizontal_advance_chain, query),
            vertical_advance=_first_resolved(self.vertical_advance_chain, query),
            vertical_origin=_first_resolved(self.vertical_origin_chain, query),
            height=_first_resolved(self.height_chain, query),
        )

    def horizontal_advance(self, glyph_name: str) -> float:
        """Resolve only the horizontal advance."""
        return _first_resolved(self.horizontal_advance_chain, GlyphQuery(self._face, glyph_name))

    def _table_horizontal_advance(self, query: GlyphQuery) -> float | None:
        advance = self._face.horizontal_advance(query.glyph_name)
        return None if advance is None else advance * self.scale

    def _shaped_vertical_advance(self, query: GlyphQuery) -> float | None:
        # HarfBuzz reports top-to-bottom motion as negative y
        if not query.shaped_y_advance:
            return None
        return -query.shaped_y_advance * self.scale

    def _table_vertical_advance(self, query: GlyphQuery) -> float | None:
        advance = self._face.vertical_advance(query.glyph_name)
        return None if advance is None else advance * self.scale

    def _table_vertical_origin(self, query: GlyphQuery) -> float | None:
        origin = self._face.vertical_origin(query.glyph_name)
        return None if origin is None else origin * self.scale

    def _bounds_vertical_origin(self, query: GlyphQuery) -> float | None:
        bounds = query.bounds
        tsb = self._face.top_side_bearing(query.glyph_name)
        if bounds is None or tsb is None:
            return None
        return (bounds[3] + tsb) * self.scale

    def _ascender_vertical_origin(self, query: GlyphQuery) -> float | None:  # noqa: ARG002
        return self._face.ascender * self.scale

    def _bounds_height(self, query: GlyphQuery) -> float | None:
        bounds = query.bounds
        if bounds is None:
            return None
        return (bounds[3] - bounds[1]) * self.scale

    def _nominal_size(self, query: GlyphQuery) -> float | None:  # noqa: ARG002
        return self.font_size

    def _zero(self, query: GlyphQuery) -> float | None:  # noqa: ARG002
        return 0.0


def _first_resolved(chain: tuple[MetricProvider, ...], query: GlyphQuery) -> float:
    for provider in chain:
        value = provider(query)
        if value is not None:
            return value
    return 0.0
