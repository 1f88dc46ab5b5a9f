"""HarfBuzz text shaping wrapper.

Vertical layout needs real shaping: glyph substitution (vertical forms,
ligatures), reordering for combining marks, and per-glyph vertical
advances that the raw cmap walk cannot provide.
"""

from dataclasses import dataclass

import uharfbuzz as hb

from fontscope.exceptions import ShapingInitError


@dataclass(frozen=True, slots=True)
class ShapedGlyph:
    """One glyph of a shaping result, in font units.

    Attributes:
        glyph_id: Glyph index in the font (0 is .notdef)
        x_advance: Horizontal pen motion
        y_advance: Vertical pen motion; negative for top-to-bottom text
    """

    glyph_id: int
    x_advance: int
    y_advance: int


class HarfBuzzShaper:
    """Shapes text with HarfBuzz at font-unit scale.

    A shaper is built from the raw font bytes and holds no state between
    calls beyond the HarfBuzz font object, so each generation call builds
    its own.

    Example:
        shaper = HarfBuzzShaper(face.data)
        glyphs = shaper.shape("縦書き", direction="ttb")
    """

    def __init__(self, font_data: bytes, face_index: int = 0) -> None:
        """Build the HarfBuzz face and font.

        Args:
            font_data: Raw font file bytes
            face_index: Face index within a font collection

        Raises:
            ShapingInitError: If HarfBuzz cannot load a face from the bytes
        """
        if not font_data:
            raise ShapingInitError("no font data")
        try:
            face = hb.Face(hb.Blob(font_data), face_index)
            if face.glyph_count == 0:
                raise ShapingInitError("font has no glyphs HarfBuzz can read")
            font = hb.Font(face)
            font.scale = (face.upem, face.upem)
        except ShapingInitError:
            raise
        except Exception as e:
            raise ShapingInitError(str(e)) from e
        self._font = font

    def shape(
        self,
        text: str,
        direction: str = "ttb",
        features: dict[str, int] | None = None,
    ) -> list[ShapedGlyph]:
        """Shape one line of text.

        Args:
            text: Text without line breaks
            direction: HarfBuzz direction ("ltr", "rtl", "ttb", "btt")
            features: OpenType feature settings, e.g. {"vert": 1}

        Returns:
            Shaped glyphs in visual order
        """
        buf = hb.Buffer()
        buf.add_str(text)
        buf.guess_segment_properties()
        buf.direction = direction
        hb.shape(self._font, buf, features or {})
        return [
            ShapedGlyph(
                glyph_id=info.codepoint,
                x_advance=pos.x_advance,
                y_advance=pos.y_advance,
            )
            for info, pos in zip(buf.glyph_infos, buf.glyph_positions)
        ]
