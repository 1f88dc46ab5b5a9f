"""Shared fixtures: small fonts built in-process with fontTools FontBuilder.

All test fonts use 1000 units per em, so a font size of 100 gives a scale
of 0.1 and font-unit values divide by ten in output space.
"""

from collections.abc import Sequence
from io import BytesIO

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.t2CharStringPen import T2CharStringPen
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import newTable

from fontscope.io.face import FontFace
from fontscope.shaping.harfbuzz import ShapedGlyph

UPM = 1000
ASCENT = 880
DESCENT = -120

GLYPH_ORDER = [
    ".notdef",
    "space",
    "A",
    "I",
    "O",
    "question",
    "ampersand",
    "less",
    "greater",
    "quotedbl",
    "uni3042",
    "uni3000",
]

CMAP = {
    0x20: "space",
    0x41: "A",
    0x49: "I",
    0x4F: "O",
    0x3F: "question",
    0x26: "ampersand",
    0x3C: "less",
    0x3E: "greater",
    0x22: "quotedbl",
    0x3042: "uni3042",
    0x3000: "uni3000",
}

ADVANCE_WIDTHS = {
    ".notdef": 500,
    "space": 250,
    "A": 600,
    "I": 300,
    "O": 600,
    "question": 500,
    "ampersand": 500,
    "less": 500,
    "greater": 500,
    "quotedbl": 500,
    "uni3042": 1000,
    "uni3000": 1000,
}

# (advance height, top side bearing)
VERTICAL_METRICS = {name: (1000, 100) for name in GLYPH_ORDER}
VERTICAL_METRICS["A"] = (900, 180)
VERTICAL_METRICS["uni3042"] = (1000, 50)

VORG_DEFAULT = 880
VORG_RECORDS = {"uni3042": 900}


def _rect(pen, x0: int, y0: int, x1: int, y1: int) -> None:
    pen.moveTo((x0, y0))
    pen.lineTo((x0, y1))
    pen.lineTo((x1, y1))
    pen.lineTo((x1, y0))
    pen.closePath()


def _draw(name: str, pen, cubic: bool = False) -> None:
    """Draw a test glyph; empty glyphs draw nothing."""
    if name in ("space", "uni3000"):
        return
    if name == "A":
        pen.moveTo((0, 0))
        pen.lineTo((300, 700))
        pen.lineTo((600, 0))
        pen.closePath()
    elif name == "O":
        # Outer contour with a curved left side, inner rectangular hole
        pen.moveTo((100, 0))
        if cubic:
            pen.curveTo((100, 200), (100, 500), (100, 700))
        else:
            pen.qCurveTo((100, 350), (100, 700))
        pen.lineTo((500, 700))
        pen.lineTo((500, 0))
        pen.closePath()
        pen.moveTo((200, 100))
        pen.lineTo((400, 100))
        pen.lineTo((400, 600))
        pen.lineTo((200, 600))
        pen.closePath()
    elif name == "I":
        _rect(pen, 100, 0, 200, 700)
    elif name == "uni3042":
        _rect(pen, 100, -120, 900, 780)
    else:
        _rect(pen, 50, 0, 450, 700)


def build_test_font(cff: bool = False, vertical: bool = True, vorg: bool = False) -> bytes:
    """Build a small font and return its bytes.

    Args:
        cff: Build CFF (cubic) outlines instead of glyf (quadratic)
        vertical: Add vhea/vmtx tables
        vorg: Add a VORG table (CFF fonts only)
    """
    fb = FontBuilder(UPM, isTTF=not cff)
    fb.setupGlyphOrder(GLYPH_ORDER)
    fb.setupCharacterMap(CMAP)

    if cff:
        char_strings = {}
        for name in GLYPH_ORDER:
            pen = T2CharStringPen(ADVANCE_WIDTHS[name], None)
            _draw(name, pen, cubic=True)
            char_strings[name] = pen.getCharString()
        fb.setupCFF("FontScopeTestCFF-Regular", {"FullName": "FontScope Test CFF"}, char_strings, {})
    else:
        glyphs = {}
        for name in GLYPH_ORDER:
            pen = TTGlyphPen(None)
            _draw(name, pen)
            glyphs[name] = pen.glyph()
        fb.setupGlyf(glyphs)

    fb.setupHorizontalMetrics({name: (ADVANCE_WIDTHS[name], 0) for name in GLYPH_ORDER})
    fb.setupHorizontalHeader(ascent=ASCENT, descent=DESCENT)
    family = "FontScope Test CFF" if cff else "FontScope Test"
    fb.setupNameTable({"familyName": family, "styleName": "Regular"})
    fb.setupOS2(
        sTypoAscender=ASCENT,
        sTypoDescender=DESCENT,
        usWinAscent=ASCENT,
        usWinDescent=-DESCENT,
    )
    fb.setupPost()

    if vertical:
        fb.setupVerticalMetrics(dict(VERTICAL_METRICS))
        fb.setupVerticalHeader(ascent=UPM // 2, descent=-UPM // 2)

    if vorg:
        table = newTable("VORG")
        table.majorVersion = 1
        table.minorVersion = 0
        table.defaultVertOriginY = VORG_DEFAULT
        table.VOriginRecords = dict(VORG_RECORDS)
        fb.font["VORG"] = table

    buf = BytesIO()
    fb.save(buf)
    return buf.getvalue()


class StubShaper:
    """Shaper stand-in mapping characters through the test cmap.

    Every glyph gets the same vertical advance unless overridden per
    character.
    """

    def __init__(
        self,
        y_advance: int = -1000,
        overrides: dict[str, int] | None = None,
        extra_glyphs: Sequence[str] = (),
    ) -> None:
        self.y_advance = y_advance
        self.overrides = overrides or {}
        self.extra_glyphs = list(extra_glyphs)
        self.calls: list[tuple[str, str]] = []

    def shape(self, text: str, direction: str = "ttb") -> list[ShapedGlyph]:
        self.calls.append((text, direction))
        shaped = []
        for char in text:
            name = CMAP.get(ord(char))
            glyph_id = GLYPH_ORDER.index(name) if name else 0
            shaped.append(
                ShapedGlyph(
                    glyph_id=glyph_id,
                    x_advance=0,
                    y_advance=self.overrides.get(char, self.y_advance),
                )
            )
        for name in self.extra_glyphs:
            shaped.append(
                ShapedGlyph(
                    glyph_id=GLYPH_ORDER.index(name),
                    x_advance=0,
                    y_advance=self.y_advance,
                )
            )
        return shaped


@pytest.fixture(scope="session")
def ttf_bytes() -> bytes:
    """TrueType test font with vertical metrics, no VORG."""
    return build_test_font()


@pytest.fixture(scope="session")
def cff_vorg_bytes() -> bytes:
    """CFF test font with vertical metrics and VORG."""
    return build_test_font(cff=True, vorg=True)


@pytest.fixture(scope="session")
def horizontal_only_bytes() -> bytes:
    """TrueType test font without any vertical tables."""
    return build_test_font(vertical=False)


@pytest.fixture
def ttf_face(ttf_bytes: bytes) -> FontFace:
    return FontFace.from_bytes(ttf_bytes, source="test.ttf")


@pytest.fixture
def cff_face(cff_vorg_bytes: bytes) -> FontFace:
    return FontFace.from_bytes(cff_vorg_bytes, source="test.otf")


@pytest.fixture
def horizontal_only_face(horizontal_only_bytes: bytes) -> FontFace:
    return FontFace.from_bytes(horizontal_only_bytes, source="latin.ttf")


@pytest.fixture
def stub_shaper() -> StubShaper:
    return StubShaper()


@pytest.fixture
def make_shaper() -> type[StubShaper]:
    """Factory for stub shapers with custom advances."""
    return StubShaper
