"""Shared fixtures: small fonts built in memory with fonttools.

The test font has 1000 units per em, an hhea ascent of 800 and descent of
-200, so ``scale_for_pixel_height(h) == h / 1000``.

Glyph order: .notdef (0), space (1), A (2), B (3), V (4), odieresis (5).
"""

import struct
from collections.abc import Callable, Iterable
from io import BytesIO

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTCollection, TTFont, newTable
from fontTools.ttLib.tables._k_e_r_n import KernTable_format_0

from fontview import Font

UPM = 1000
ASCENT = 800
DESCENT = -200
LINE_GAP = 90
TYPO_ASCENT = 750
TYPO_DESCENT = -250
TYPO_LINE_GAP = 0

GLYPH_ORDER = [".notdef", "space", "A", "B", "V", "odieresis"]
ADVANCES = {
    ".notdef": 500,
    "space": 250,
    "A": 600,
    "B": 640,
    "V": 620,
    "odieresis": 550,
}
CMAP = {
    0x20: "space",
    0x41: "A",
    0x42: "B",
    0x56: "V",
    0xF6: "odieresis",
}
KERNING = {
    ("A", "V"): -80,
    ("V", "A"): -70,
}

# Glyph ids in GLYPH_ORDER
GID_NOTDEF = 0
GID_SPACE = 1
GID_A = 2
GID_B = 3
GID_V = 4
GID_ODIERESIS = 5

KernSubtable = tuple[int, dict[tuple[str, str], int]]


def _box_glyph(advance: int):
    pen = TTGlyphPen(None)
    pen.moveTo((50, 0))
    pen.lineTo((50, 700))
    pen.lineTo((advance - 50, 700))
    pen.lineTo((advance - 50, 0))
    pen.closePath()
    return pen.glyph()


def _kern_table(subtables: Iterable[KernSubtable], apple: bool = False):
    kern = newTable("kern")
    kern.version = 1.0 if apple else 0
    kern.kernTables = []
    for coverage, pairs in subtables:
        subtable = KernTable_format_0(apple=apple)
        subtable.coverage = coverage
        subtable.tupleIndex = 0 if apple else None
        subtable.kernTable = dict(pairs)
        kern.kernTables.append(subtable)
    return kern


def build_font_bytes(
    family: str = "Test Sans",
    ascent: int = ASCENT,
    descent: int = DESCENT,
    line_gap: int = LINE_GAP,
    use_typo_metrics: bool = False,
    kern_subtables: Iterable[KernSubtable] | None = ((0x01, KERNING),),
    apple_kern: bool = False,
) -> bytes:
    """Build a small TrueType font and return its binary data."""
    fb = FontBuilder(UPM, isTTF=True)
    fb.setupGlyphOrder(GLYPH_ORDER)
    fb.setupCharacterMap(CMAP)

    glyphs = {name: _box_glyph(advance) for name, advance in ADVANCES.items()}
    glyphs["space"] = TTGlyphPen(None).glyph()
    fb.setupGlyf(glyphs)

    metrics = {name: (advance, 50) for name, advance in ADVANCES.items()}
    metrics["space"] = (ADVANCES["space"], 0)
    fb.setupHorizontalMetrics(metrics)
    fb.setupHorizontalHeader(ascent=ascent, descent=descent, lineGap=line_gap)
    fb.setupNameTable(
        {
            "familyName": family,
            "styleName": "Regular",
            "uniqueFontIdentifier": f"{family}-Regular",
            "fullName": f"{family} Regular",
            "psName": f"{family.replace(' ', '')}-Regular",
            "version": "Version 1.000",
        }
    )
    fb.setupOS2(
        version=4,
        sTypoAscender=TYPO_ASCENT,
        sTypoDescender=TYPO_DESCENT,
        sTypoLineGap=TYPO_LINE_GAP,
        usWinAscent=ascent,
        usWinDescent=-descent,
        fsSelection=0x40 | (0x80 if use_typo_metrics else 0),
    )
    fb.setupPost()

    if kern_subtables:
        fb.font["kern"] = _kern_table(kern_subtables, apple=apple_kern)

    buf = BytesIO()
    fb.save(buf)
    return buf.getvalue()


def _table_record(data: bytes, tag: str) -> tuple[int, int]:
    """Position of the directory record for ``tag`` and the table offset."""
    (num_tables,) = struct.unpack(">H", data[4:6])
    for i in range(num_tables):
        pos = 12 + 16 * i
        record_tag, _checksum, offset, _length = struct.unpack(">4sLLL", data[pos : pos + 16])
        if record_tag == tag.encode("latin-1"):
            return pos, offset
    raise KeyError(tag)


def patch_table(data: bytes, tag: str, at: int, payload: bytes) -> bytes:
    """Overwrite bytes inside one table of a single font file."""
    _, offset = _table_record(data, tag)
    buf = bytearray(data)
    buf[offset + at : offset + at + len(payload)] = payload
    return bytes(buf)


def resize_table(data: bytes, tag: str, length: int) -> bytes:
    """Change the length the table directory records for one table."""
    pos, _ = _table_record(data, tag)
    buf = bytearray(data)
    buf[pos + 12 : pos + 16] = struct.pack(">L", length)
    return bytes(buf)


def build_collection_bytes(*fonts: bytes) -> bytes:
    """Pack several fonts into a TrueType collection."""
    collection = TTCollection()
    collection.fonts = [TTFont(BytesIO(data)) for data in fonts]
    buf = BytesIO()
    collection.save(buf)
    return buf.getvalue()


@pytest.fixture(scope="session")
def font_bytes() -> bytes:
    """Binary data of the default test font."""
    return build_font_bytes()


@pytest.fixture(scope="session")
def font_factory() -> Callable[..., bytes]:
    """Builder for test font variants."""
    return build_font_bytes


@pytest.fixture(scope="session")
def collection_bytes() -> bytes:
    """Two-font collection: the default font and a taller one."""
    return build_collection_bytes(
        build_font_bytes(),
        build_font_bytes(family="Test Tall", ascent=900, descent=-300, kern_subtables=None),
    )


@pytest.fixture
def font(font_bytes: bytes) -> Font:
    """Borrowed font over the default test font bytes."""
    result = Font.from_bytes(font_bytes)
    assert result is not None
    return result


@pytest.fixture
def owned_font(font_bytes: bytes) -> Font:
    """Owned font built from a private copy of the default test font."""
    result = Font.from_owned_buffer(bytearray(font_bytes))
    assert result is not None
    return result


@pytest.fixture(params=["borrowed", "owned"])
def any_font(request: pytest.FixtureRequest, font_bytes: bytes) -> Font:
    """The default test font in both ownership variants."""
    if request.param == "owned":
        result = Font.from_owned_buffer(bytearray(font_bytes))
    else:
        result = Font.from_bytes(font_bytes)
    assert result is not None
    return result
