"""Parsed font face backed by fontTools.

This module provides the FontFace class, a read-only view over a TTFont
exposing exactly the lookups the layout engines need: cmap lookups,
outline drawing, and the horizontal/vertical metric tables.
"""

from io import BytesIO
from pathlib import Path
from typing import Any

from fontTools.pens.boundsPen import BoundsPen
from fontTools.ttLib import TTFont

from fontscope.exceptions import FontParseError, FontReadError

_METRIC_TABLES = ("hhea", "hmtx", "vhea", "vmtx", "VORG", "OS/2", "cmap")


class FontFace:
    """Read-only font face for one generation call.

    Keeps the raw font bytes alongside the parsed TTFont because the
    HarfBuzz shaper is built from the same bytes.

    Example:
        face = FontFace.from_path(Path("NotoSansJP-Regular.otf"))
        name = face.glyph_name_for_char("あ")
        advance = face.horizontal_advance(name)
    """

    def __init__(
        self,
        font: TTFont,
        data: bytes = b"",
        source: str = "<memory>",
        face_index: int = 0,
    ) -> None:
        """Initialize the face.

        Args:
            font: Parsed fonttools font
            data: Raw font file bytes (needed for shaping)
            source: Path or label used in error messages
            face_index: Face index within a font collection
        """
        self._font = font
        self._data = data
        self._source = source
        self._face_index = face_index
        self._glyph_set = font.getGlyphSet()
        self._cmap: dict[int, str] = font.getBestCmap() or {}

    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        source: str = "<memory>",
        face_index: int = 0,
    ) -> "FontFace":
        """Parse font bytes.

        Args:
            data: Raw TTF/OTF/TTC bytes
            source: Path or label used in error messages
            face_index: Face index within a font collection

        Returns:
            Parsed FontFace

        Raises:
            FontParseError: If the bytes are not a supported font
        """
        try:
            font = TTFont(BytesIO(data), fontNumber=face_index)
            if "glyf" not in font and "CFF " not in font and "CFF2" not in font:
                raise ValueError("font has no glyf, CFF or CFF2 outlines")
            _ = font["head"].unitsPerEm
            # Tables load lazily; decode the metric tables up front
            for tag in _METRIC_TABLES:
                if tag in font:
                    _ = font[tag]
            return cls(font, data=data, source=source, face_index=face_index)
        except Exception as e:
            raise FontParseError(source, str(e)) from e

    @classmethod
    def from_path(cls, font_path: Path, face_index: int = 0) -> "FontFace":
        """Read and parse a font file.

        Raises:
            FontReadError: If the file cannot be read
            FontParseError: If the file is not a supported font
        """
        try:
            data = font_path.read_bytes()
        except OSError as e:
            raise FontReadError(str(font_path), str(e)) from e
        return cls.from_bytes(data, source=str(font_path), face_index=face_index)

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def glyph_set(self) -> Any:
        return self._glyph_set

    @property
    def source(self) -> str:
        return self._source

    @property
    def face_index(self) -> int:
        return self._face_index

    @property
    def format(self) -> str:
        """Return font format.

        Returns:
            'TrueType' for glyf fonts, 'OpenType' for CFF/CFF2 fonts
        """
        if "CFF " in self._font or "CFF2" in self._font:
            return "OpenType"
        return "TrueType"

    @property
    def units_per_em(self) -> int:
        return self._font["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def glyph_count(self) -> int:
        return len(self._font.getGlyphOrder())

    @property
    def family_name(self) -> str | None:
        name_table = self._font.get("name")
        if name_table is None:
            return None
        return name_table.getBestFamilyName()

    @property
    def ascender(self) -> int:
        """Return the typographic ascender in font units.

        Uses hhea, then OS/2, then the em size.
        """
        hhea = self._font.get("hhea")
        if hhea is not None:
            return hhea.ascent
        os2 = self._font.get("OS/2")
        if os2 is not None:
            return os2.sTypoAscender
        return self.units_per_em

    @property
    def has_vertical_metrics(self) -> bool:
        return "vmtx" in self._font

    @property
    def has_vertical_origins(self) -> bool:
        return "VORG" in self._font

    def glyph_name_for_char(self, char: str) -> str | None:
        """Map a character to its glyph name through the best cmap.

        Returns:
            Glyph name, or None when the font has no glyph for ``char``
        """
        return self._cmap.get(ord(char))

    def glyph_name_for_id(self, glyph_id: int) -> str | None:
        """Map a glyph id (as reported by shaping) to its glyph name."""
        glyph_order = self._font.getGlyphOrder()
        if 0 <= glyph_id < len(glyph_order):
            return glyph_order[glyph_id]
        return None

    def draw_glyph(self, glyph_name: str, pen: Any) -> None:
        """Draw a glyph outline (components included) onto a fonttools pen.

        Raises:
            FontParseError: If the glyph data cannot be decoded
        """
        try:
            self._glyph_set[glyph_name].draw(pen)
        except Exception as e:
            raise FontParseError(self._source, f"glyph '{glyph_name}': {e}") from e

    def horizontal_advance(self, glyph_name: str) -> int | None:
        """Advance width from hmtx, or None when hmtx has no entry."""
        hmtx = self._font.get("hmtx")
        if hmtx is not None and glyph_name in hmtx.metrics:
            return hmtx.metrics[glyph_name][0]
        return None

    def vertical_advance(self, glyph_name: str) -> int | None:
        """Advance height from vmtx, or None when vmtx is absent."""
        vmtx = self._font.get("vmtx")
        if vmtx is not None and glyph_name in vmtx.metrics:
            return vmtx.metrics[glyph_name][0]
        return None

    def top_side_bearing(self, glyph_name: str) -> int | None:
        """Top side bearing from vmtx, or None when vmtx is absent."""
        vmtx = self._font.get("vmtx")
        if vmtx is not None and glyph_name in vmtx.metrics:
            return vmtx.metrics[glyph_name][1]
        return None

    def vertical_origin(self, glyph_name: str) -> int | None:
        """Vertical origin Y from VORG.

        Glyphs without their own record get the table default. Returns None
        when the font has no VORG table (typical for TrueType fonts).
        """
        vorg = self._font.get("VORG")
        if vorg is None:
            return None
        return vorg.VOriginRecords.get(glyph_name, vorg.defaultVertOriginY)

    def bounds(self, glyph_name: str) -> tuple[float, float, float, float] | None:
        """Outline bounding box as (x_min, y_min, x_max, y_max).

        Returns:
            Bounds in font units, or None for glyphs without outlines
        """
        pen = BoundsPen(self._glyph_set)
        self.draw_glyph(glyph_name, pen)
        return pen.bounds

    def close(self) -> None:
        """Close the underlying font and free resources."""
        self._font.close()

    def __enter__(self) -> "FontFace":
        """Context manager entry."""
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
