"""Binary font decoder built on fonttools.

ParsedFont turns font bytes into the handful of tables the font handle
needs: vertical metrics, units per em, glyph count, horizontal metrics,
the Unicode character map and legacy ``kern`` pair kerning.

All table decoding happens inside ``ParsedFont.decode``. The fonttools
reader is closed before the view is returned, so a ParsedFont is plain
immutable data afterwards and can be read from several threads.
"""

import struct
from collections.abc import Mapping
from dataclasses import dataclass, field
from io import BytesIO
from typing import Any

from fontTools.ttLib import TTFont, TTLibError
from fontTools.ttLib.sfnt import readTTCHeader

from fontview.exceptions import FontDecodeError

# Tables without which a font cannot be measured
REQUIRED_TABLES = ("head", "hhea", "maxp", "hmtx")

# Valid head.unitsPerEm range
MIN_UNITS_PER_EM = 16
MAX_UNITS_PER_EM = 16384

# OS/2 fsSelection bit asking for the typographic metrics
USE_TYPO_METRICS = 1 << 7

# OpenType kern subtable coverage bits
KERN_HORIZONTAL = 0x01
KERN_MINIMUM = 0x02
KERN_CROSS_STREAM = 0x04

# Apple kern subtable coverage bits
AAT_KERN_VERTICAL = 0x80
AAT_KERN_CROSS_STREAM = 0x40
AAT_KERN_VARIATION = 0x20

# Exceptions fonttools raises on malformed data; the kern reader raises
# StopIteration when a subtable announces more pairs than it holds
_DECODE_ERRORS = (
    TTLibError,
    struct.error,
    AssertionError,
    EOFError,
    IndexError,
    KeyError,
    OverflowError,
    StopIteration,
    TypeError,
    ValueError,
    ZeroDivisionError,
)

BytesLike = bytes | bytearray | memoryview


@dataclass(frozen=True, eq=False)
class ParsedFont:
    """Decoded, read-only view of one font.

    Attributes:
        source: The bytes object the view was decoded from
        index: Collection index the view was decoded at
    """

    source: BytesLike = field(repr=False)
    index: int
    _ascender: int = field(repr=False)
    _descender: int = field(repr=False)
    _line_gap: int = field(repr=False)
    _units_per_em: int = field(repr=False)
    _glyph_order: tuple[str, ...] = field(repr=False)
    _h_metrics: tuple[tuple[int, int] | None, ...] = field(repr=False)
    _cmap: Mapping[int, int] = field(repr=False)
    _kerning: Mapping[tuple[int, int], int] = field(repr=False)
    _full_name: str | None = field(default=None, repr=False)

    @classmethod
    def decode(cls, data: BytesLike, index: int = 0) -> "ParsedFont":
        """Decode font tables from ``data``.

        Args:
            data: Raw font or font collection bytes
            index: Font number inside a collection, ignored for single fonts

        Returns:
            ParsedFont over ``data``

        Raises:
            FontDecodeError: If the data is not a usable font at ``index``
        """
        if index < 0:
            raise FontDecodeError(f"negative collection index {index}", index)

        try:
            with TTFont(BytesIO(data), fontNumber=index) as tt:
                return cls._from_ttfont(tt, data, index)
        except _DECODE_ERRORS as e:
            raise FontDecodeError(f"{type(e).__name__}: {e}", index) from e

    @classmethod
    def parse(cls, data: BytesLike, index: int = 0) -> "ParsedFont | None":
        """Decode font tables, returning None for invalid data."""
        try:
            return cls.decode(data, index)
        except FontDecodeError:
            return None

    @classmethod
    def _from_ttfont(cls, tt: TTFont, data: BytesLike, index: int) -> "ParsedFont":
        missing = [tag for tag in REQUIRED_TABLES if tag not in tt]
        if missing:
            raise FontDecodeError(f"missing required tables: {', '.join(missing)}", index)

        num_glyphs = tt["maxp"].numGlyphs
        if num_glyphs == 0:
            raise FontDecodeError("font has no glyphs", index)

        glyph_order = tuple(tt.getGlyphOrder())
        hmtx = tt["hmtx"].metrics
        h_metrics = tuple(
            _as_int_pair(hmtx.get(name)) for name in glyph_order[:num_glyphs]
        )

        ascender, descender, line_gap = _vertical_metrics(tt)

        return cls(
            source=data,
            index=index,
            _ascender=ascender,
            _descender=descender,
            _line_gap=line_gap,
            _units_per_em=tt["head"].unitsPerEm,
            _glyph_order=glyph_order[:num_glyphs],
            _h_metrics=h_metrics,
            _cmap=_unicode_cmap(tt),
            _kerning=_pair_kerning(tt),
            _full_name=tt["name"].getDebugName(4) if "name" in tt else None,
        )

    @staticmethod
    def collection_size(data: BytesLike) -> int | None:
        """Number of fonts in a collection, or None for a single font."""
        if bytes(data[:4]) != b"ttcf":
            return None
        try:
            return readTTCHeader(BytesIO(data)).numFonts
        except _DECODE_ERRORS:
            return None

    def ascender(self) -> int:
        return self._ascender

    def descender(self) -> int:
        return self._descender

    def line_gap(self) -> int:
        return self._line_gap

    def units_per_em(self) -> int | None:
        """Units per em, or None when outside the valid 16..16384 range."""
        if MIN_UNITS_PER_EM <= self._units_per_em <= MAX_UNITS_PER_EM:
            return self._units_per_em
        return None

    def number_of_glyphs(self) -> int:
        return len(self._glyph_order)

    def glyph_hor_advance(self, glyph_id: int) -> int | None:
        metrics = self._glyph_hor_metrics(glyph_id)
        return None if metrics is None else metrics[0]

    def glyph_hor_side_bearing(self, glyph_id: int) -> int | None:
        metrics = self._glyph_hor_metrics(glyph_id)
        return None if metrics is None else metrics[1]

    def _glyph_hor_metrics(self, glyph_id: int) -> tuple[int, int] | None:
        if 0 <= glyph_id < len(self._h_metrics):
            return self._h_metrics[glyph_id]
        return None

    def glyph_index(self, codepoint: int) -> int | None:
        """Glyph mapped to a Unicode scalar value, None if unmapped."""
        return self._cmap.get(codepoint)

    def glyph_name(self, glyph_id: int) -> str | None:
        if 0 <= glyph_id < len(self._glyph_order):
            return self._glyph_order[glyph_id]
        return None

    def glyphs_kerning(self, first: int, second: int) -> int | None:
        """Raw kerning between two glyphs in design units, None if absent."""
        return self._kerning.get((first, second))

    @property
    def full_name(self) -> str | None:
        return self._full_name


def _as_int_pair(metrics: Any) -> tuple[int, int] | None:
    if metrics is None:
        return None
    advance, lsb = metrics
    return int(advance), int(lsb)


def _vertical_metrics(tt: TTFont) -> tuple[int, int, int]:
    """Ascender, descender and line gap, preferring OS/2 when flagged."""
    if "OS/2" in tt:
        os2 = tt["OS/2"]
        if os2.fsSelection & USE_TYPO_METRICS:
            return os2.sTypoAscender, os2.sTypoDescender, os2.sTypoLineGap
    hhea = tt["hhea"]
    return hhea.ascent, hhea.descent, hhea.lineGap


def _unicode_cmap(tt: TTFont) -> dict[int, int]:
    """Map Unicode scalar values straight to glyph ids."""
    if "cmap" not in tt:
        return {}
    best = tt.getBestCmap() or {}
    reverse = tt.getReverseGlyphMap()
    return {
        codepoint: reverse[name]
        for codepoint, name in best.items()
        if name in reverse
    }


def _is_horizontal_kerning(subtable: Any) -> bool:
    coverage = getattr(subtable, "coverage", 0)
    if getattr(subtable, "apple", False):
        return not coverage & (AAT_KERN_VERTICAL | AAT_KERN_CROSS_STREAM | AAT_KERN_VARIATION)
    return bool(coverage & KERN_HORIZONTAL) and not coverage & (
        KERN_MINIMUM | KERN_CROSS_STREAM
    )


def _pair_kerning(tt: TTFont) -> dict[tuple[int, int], int]:
    """Collect glyph-pair kerning from the legacy ``kern`` table.

    Only format 0 subtables with plain horizontal coverage are used. When
    several subtables carry the same pair the first one wins. A ``kern``
    table that fails to decode gives no kerning at all.
    """
    if "kern" not in tt:
        return {}
    try:
        kern = tt["kern"]
    except _DECODE_ERRORS:
        return {}

    reverse = tt.getReverseGlyphMap()
    kerning: dict[tuple[int, int], int] = {}
    for subtable in getattr(kern, "kernTables", []):
        pairs = getattr(subtable, "kernTable", None)
        if pairs is None or not _is_horizontal_kerning(subtable):
            continue
        for (left, right), value in pairs.items():
            if left not in reverse or right not in reverse:
                continue
            kerning.setdefault((reverse[left], reverse[right]), int(value))
    return kerning
