"""Sequential glyph production.

- glyphs_for: lazy one-to-one mapping from identifiers to glyphs
- LayoutIter: single-line, left-to-right layout with kerning applied
"""

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from fontview.domain.geometry import Point, Scale, Vector
from fontview.domain.glyph import Glyph, GlyphId, PositionedGlyph

if TYPE_CHECKING:
    from fontview.core.font import Font
    from fontview.core.resolve import IntoGlyphId


def glyphs_for(font: "Font", ids: Iterable["IntoGlyphId"]) -> Iterator[Glyph]:
    """Yield ``font.glyph(i)`` for each ``i`` in ``ids``, one at a time."""
    for value in ids:
        yield font.glyph(value)


class LayoutIter:
    """Iterator of positioned glyphs for one line of text.

    Each character is resolved to a glyph (".notdef" when unmapped), kerned
    against the previous glyph and placed at ``start + (caret, 0)``; the
    caret then moves by the glyph's scaled advance width.

    The iterator is single pass. Calling ``Font.layout`` again with the same
    arguments produces an identical, independent sequence.

    Attributes:
        caret: Horizontal offset from ``start`` of the next glyph, i.e. the
            width of the text consumed so far
    """

    def __init__(self, font: "Font", text: str, scale: Scale, start: Point) -> None:
        self._font = font
        self._chars = iter(text)
        self._scale = scale
        self._start = start
        self.caret = 0.0
        self._last_glyph: GlyphId | None = None

    def __iter__(self) -> "LayoutIter":
        return self

    def __next__(self) -> PositionedGlyph:
        char = next(self._chars)
        glyph = self._font.glyph(char).scaled(self._scale)

        if self._last_glyph is not None:
            self.caret += self._font.pair_kerning(self._scale, self._last_glyph, glyph.id)

        advance = glyph.h_metrics().advance_width
        positioned = glyph.positioned(self._start + Vector(self.caret, 0.0))
        self._last_glyph = glyph.id
        self.caret += advance
        return positioned
