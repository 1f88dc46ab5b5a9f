"""Unit tests for the font I/O layer.

Tests for FontFace and FontResolver.
"""

from io import BytesIO
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from fontTools.ttLib import TTFont

from fontscope.exceptions import (
    FontNotFoundError,
    FontParseError,
    FontReadError,
    FontUnavailableAsFileError,
)
from fontscope.io import FontFace, FontResolver, ResolvedFont


@pytest.fixture
def font_dir(tmp_path: Path, ttf_bytes: bytes, cff_vorg_bytes: bytes) -> Path:
    """Directory with one TrueType and one CFF font, nested one level."""
    root = tmp_path / "fonts"
    (root / "cff").mkdir(parents=True)
    (root / "TestSans.ttf").write_bytes(ttf_bytes)
    (root / "cff" / "TestSerif.otf").write_bytes(cff_vorg_bytes)
    (root / "readme.txt").write_text("not a font")
    return root


class TestFontFace:
    """Tests for FontFace class."""

    def test_from_bytes_invalid(self):
        """Test that garbage bytes raise FontParseError with the source."""
        with pytest.raises(FontParseError) as exc_info:
            FontFace.from_bytes(b"not a font", source="bad.ttf")
        assert exc_info.value.source == "bad.ttf"

    def test_from_path_missing(self, tmp_path):
        """Test that a missing file raises FontReadError."""
        with pytest.raises(FontReadError):
            FontFace.from_path(tmp_path / "missing.ttf")

    def test_from_path(self, tmp_path, ttf_bytes):
        path = tmp_path / "font.ttf"
        path.write_bytes(ttf_bytes)

        with FontFace.from_path(path) as face:
            assert face.source == str(path)
            assert face.data == ttf_bytes
            assert face.format == "TrueType"

    def test_format_cff(self, cff_face):
        assert cff_face.format == "OpenType"

    def test_basic_properties(self, ttf_face):
        assert ttf_face.units_per_em == 1000
        assert ttf_face.glyph_count == 12
        assert ttf_face.family_name == "FontScope Test"
        assert ttf_face.ascender == 880
        assert ttf_face.face_index == 0

    def test_glyph_name_for_char(self, ttf_face):
        assert ttf_face.glyph_name_for_char("あ") == "uni3042"
        assert ttf_face.glyph_name_for_char("A") == "A"
        assert ttf_face.glyph_name_for_char("Z") is None

    def test_glyph_name_for_id(self, ttf_face):
        assert ttf_face.glyph_name_for_id(0) == ".notdef"
        assert ttf_face.glyph_name_for_id(2) == "A"
        assert ttf_face.glyph_name_for_id(99) is None
        assert ttf_face.glyph_name_for_id(-1) is None

    def test_horizontal_metrics(self, ttf_face):
        assert ttf_face.horizontal_advance("A") == 600
        assert ttf_face.horizontal_advance("missing") is None

    def test_vertical_metrics(self, ttf_face):
        assert ttf_face.has_vertical_metrics
        assert ttf_face.vertical_advance("A") == 900
        assert ttf_face.top_side_bearing("A") == 180

    def test_no_vertical_metrics(self, horizontal_only_face):
        assert not horizontal_only_face.has_vertical_metrics
        assert horizontal_only_face.vertical_advance("A") is None
        assert horizontal_only_face.top_side_bearing("A") is None

    def test_vertical_origin_requires_vorg(self, ttf_face):
        assert not ttf_face.has_vertical_origins
        assert ttf_face.vertical_origin("uni3042") is None

    def test_vertical_origin_record_and_default(self, cff_face):
        assert cff_face.has_vertical_origins
        assert cff_face.vertical_origin("uni3042") == 900
        assert cff_face.vertical_origin("A") == 880

    def test_bounds(self, ttf_face, cff_face):
        assert ttf_face.bounds("I") == (100, 0, 200, 700)
        assert cff_face.bounds("uni3042") == (100, -120, 900, 780)

    def test_bounds_empty_glyph(self, ttf_face):
        assert ttf_face.bounds("space") is None

    def test_undecodable_glyph(self, ttf_face):
        """Test that glyph decoding errors surface as FontParseError."""
        broken = MagicMock()
        broken.draw.side_effect = IndexError("array index out of range")
        ttf_face._glyph_set = {"A": broken}

        with pytest.raises(FontParseError, match="glyph 'A'"):
            ttf_face.bounds("A")

    def test_metric_tables_decoded_up_front(self, cff_vorg_bytes):
        """Test that a truncated VORG table is rejected when parsing."""
        data = bytearray(cff_vorg_bytes)
        index = data.index(b"VORG", 12)
        data[index + 12 : index + 16] = (3).to_bytes(4, "big")

        with pytest.raises(FontParseError):
            FontFace.from_bytes(bytes(data), source="truncated.otf")

    def test_wrapped_font_has_no_bytes(self, ttf_bytes):
        face = FontFace(TTFont(BytesIO(ttf_bytes)))

        assert face.data == b""
        assert face.source == "<memory>"


class TestResolvedFont:
    """Tests for ResolvedFont."""

    def test_require_path_in_memory(self, ttf_bytes):
        resolved = ResolvedFont(name="Memory Font", data=ttf_bytes)

        with pytest.raises(FontUnavailableAsFileError) as exc_info:
            resolved.require_path()
        assert exc_info.value.font_name == "Memory Font"

    def test_require_path_file(self, ttf_bytes, tmp_path):
        path = tmp_path / "f.ttf"
        resolved = ResolvedFont(name="f", data=ttf_bytes, path=path)
        assert resolved.require_path() == path

    def test_load_face(self, ttf_bytes):
        face = ResolvedFont(name="Memory Font", data=ttf_bytes).load_face()

        assert face.source == "Memory Font"
        assert face.glyph_name_for_char("A") == "A"


class TestFontResolver:
    """Tests for FontResolver."""

    def test_iter_font_files(self, font_dir):
        resolver = FontResolver([font_dir])
        names = sorted(path.name for path in resolver.iter_font_files())

        assert names == ["TestSans.ttf", "TestSerif.otf"]

    def test_missing_directory_skipped(self, tmp_path, font_dir):
        resolver = FontResolver([tmp_path / "nope", font_dir])
        assert len(list(resolver.iter_font_files())) == 2

    def test_font_names(self, font_dir):
        names = FontResolver([font_dir]).font_names(font_dir / "TestSans.ttf")

        assert "testsans" in names
        assert "fontscope test" in names

    def test_font_names_unreadable_file(self, tmp_path):
        broken = tmp_path / "Broken.ttf"
        broken.write_bytes(b"garbage")

        assert FontResolver([tmp_path]).font_names(broken) == {"broken"}

    def test_resolve_by_family_name(self, font_dir, cff_vorg_bytes):
        resolved = FontResolver([font_dir]).resolve("FontScope Test CFF")

        assert resolved.path == font_dir / "cff" / "TestSerif.otf"
        assert resolved.data == cff_vorg_bytes
        assert resolved.name == "FontScope Test CFF"

    def test_resolve_ignores_case(self, font_dir):
        resolved = FontResolver([font_dir]).resolve("fontscope test")
        assert resolved.path == font_dir / "TestSans.ttf"

    def test_resolve_by_file_stem(self, font_dir):
        resolved = FontResolver([font_dir]).resolve("TestSerif")
        assert resolved.path == font_dir / "cff" / "TestSerif.otf"

    def test_resolve_direct_path(self, font_dir):
        path = font_dir / "TestSans.ttf"
        resolved = FontResolver([]).resolve(str(path))

        assert resolved.path == path

    def test_resolve_registered(self, ttf_bytes):
        resolver = FontResolver([])
        resolver.register("Memory Font", ttf_bytes)
        resolved = resolver.resolve("memory font")

        assert resolved.path is None
        assert resolved.data == ttf_bytes

    def test_registered_wins_over_files(self, font_dir, cff_vorg_bytes):
        resolver = FontResolver([font_dir])
        resolver.register("FontScope Test", cff_vorg_bytes)

        assert resolver.resolve("FontScope Test").path is None

    def test_resolve_not_found(self, font_dir):
        with pytest.raises(FontNotFoundError) as exc_info:
            FontResolver([font_dir]).resolve("No Such Font")
        assert exc_info.value.font_name == "No Such Font"

    def test_resolve_read_error(self, font_dir):
        path = font_dir / "TestSans.ttf"
        with patch.object(Path, "read_bytes", side_effect=PermissionError("denied")):
            with pytest.raises(FontReadError) as exc_info:
                FontResolver([]).resolve(str(path))
        assert "denied" in exc_info.value.reason

    def test_family_names(self, font_dir, ttf_bytes):
        resolver = FontResolver([font_dir])
        resolver.register("memory font", ttf_bytes)

        assert resolver.family_names() == ["FontScope Test", "FontScope Test CFF", "memory font"]
