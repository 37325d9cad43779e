"""Font handle.

Font is a cheap, shareable handle over one decoded font. It either borrows
bytes the caller keeps (``Font.from_bytes``) or owns a buffer handed over to
it (``Font.from_owned_buffer``). Both variants expose the same API, and
callers never need to know which one they hold.

Cloning a handle shares the underlying holder; font data is never copied.
Owned data stays alive for as long as any clone, or any glyph created from
one, references it.

Example:
    font = Font.from_bytes(data)
    for glyph in font.layout("Hello", Scale.uniform(24.0), Point(0.0, 20.0)):
        print(glyph.id, glyph.position)
"""

from collections.abc import Iterable, Iterator

from fontview.core.layout import LayoutIter, glyphs_for
from fontview.core.resolve import IntoGlyphId, into_glyph_id
from fontview.domain.geometry import Point, Scale
from fontview.domain.glyph import Glyph, GlyphId
from fontview.domain.metrics import HMetrics, VMetrics
from fontview.exceptions import (
    GlyphIdOutOfRangeError,
    MissingUnitsPerEmError,
    ZeroFontHeightError,
)
from fontview.io.decoder import BytesLike, ParsedFont
from fontview.io.source import BorrowedFontData, FontData, OwnedFontData


class Font:
    """A single font, borrowing or owning its data."""

    __slots__ = ("_data",)

    def __init__(self, data: FontData) -> None:
        """Wrap an already decoded font data holder.

        Args:
            data: BorrowedFontData or OwnedFontData
        """
        self._data = data

    @classmethod
    def from_bytes(cls, data: BytesLike, index: int = 0) -> "Font | None":
        """Create a font borrowing caller-retained bytes.

        Args:
            data: Font or font collection bytes
            index: Font number inside a collection (0 for single fonts)

        Returns:
            Font, or None for invalid data
        """
        holder = BorrowedFontData.try_from_bytes(data, index)
        if holder is None:
            return None
        return cls(holder)

    @classmethod
    def from_owned_buffer(cls, buffer: BytesLike, index: int = 0) -> "Font | None":
        """Create a font that takes ownership of ``buffer``.

        Args:
            buffer: Font or font collection bytes; the caller gives up the
                right to mutate it
            index: Font number inside a collection (0 for single fonts)

        Returns:
            Font, or None for invalid data
        """
        holder = OwnedFontData.try_from_buffer(buffer, index)
        if holder is None:
            return None
        return cls(holder)

    @property
    def parsed(self) -> ParsedFont:
        """The decoded view, whichever holder owns it."""
        return self._data.view

    @property
    def is_owned(self) -> bool:
        return self._data.is_owned

    def clone(self) -> "Font":
        """Return another handle sharing the same font data."""
        return Font(self._data)

    __copy__ = clone

    def __deepcopy__(self, _memo: object) -> "Font":
        return self.clone()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Font):
            return NotImplemented
        return self._data is other._data

    def __hash__(self) -> int:
        return id(self._data)

    def __repr__(self) -> str:
        kind = "owned" if self.is_owned else "borrowed"
        name = self.parsed.full_name or "unnamed"
        return f"Font({name!r}, {kind}, glyphs={self.glyph_count()})"

    def v_metrics(self, scale: Scale) -> VMetrics:
        """Vertical metrics at ``scale``, shared by all glyphs of the font."""
        return self.v_metrics_unscaled() * self.scale_for_pixel_height(scale.y)

    def v_metrics_unscaled(self) -> VMetrics:
        """Vertical metrics in font design units."""
        view = self.parsed
        return VMetrics(
            ascent=float(view.ascender()),
            descent=float(view.descender()),
            line_gap=float(view.line_gap()),
        )

    def units_per_em(self) -> int:
        """Units per em square of this font.

        Raises:
            MissingUnitsPerEmError: If the font carries no valid value
        """
        upm = self.parsed.units_per_em()
        if upm is None:
            raise MissingUnitsPerEmError()
        return upm

    def glyph_count(self) -> int:
        """Number of glyphs; valid ids are ``range(glyph_count())``."""
        return self.parsed.number_of_glyphs()

    def glyph_index(self, codepoint: str | int) -> GlyphId | None:
        """Raw character map lookup, None when the font has no glyph."""
        if isinstance(codepoint, str):
            codepoint = ord(codepoint)
        glyph_id = self.parsed.glyph_index(codepoint)
        return None if glyph_id is None else GlyphId(glyph_id)

    def glyph(self, id: IntoGlyphId) -> Glyph:
        """Return the glyph for a character, codepoint or glyph id.

        Characters without a glyph in this font map to ".notdef", glyph 0.
        Raw glyph ids must be valid for this font: ids should come from
        looking something up in this same font.

        Raises:
            GlyphIdOutOfRangeError: If the resolved id is not in
                ``range(glyph_count())``
        """
        gid = into_glyph_id(id, self)
        count = self.glyph_count()
        if not 0 <= gid < count:
            raise GlyphIdOutOfRangeError(int(gid), count)
        return Glyph(font=self, id=gid)

    def glyphs_for(self, ids: Iterable[IntoGlyphId]) -> Iterator[Glyph]:
        """Lazily map ``font.glyph`` over ``ids``, consuming the iterable."""
        return glyphs_for(self, ids)

    def layout(self, text: str, scale: Scale, start: Point) -> LayoutIter:
        """Lay out ``text`` on a single horizontal line.

        Control characters such as line breaks are not treated specially,
        and no Unicode normalisation is done: a decomposed "o" + U+0308 is
        looked up as two characters even if the font has a glyph for "ö".
        Normalise the text first if that matters.

        Args:
            text: Text to lay out
            scale: Pixel scale of the glyphs
            start: Baseline origin of the first glyph

        Returns:
            Iterator of PositionedGlyph, left to right
        """
        return LayoutIter(self, text, scale, start)

    def h_metrics_unscaled(self, id: IntoGlyphId) -> HMetrics:
        """Horizontal metrics of one glyph in font design units.

        Raises:
            GlyphIdOutOfRangeError: If the resolved id is out of range
        """
        gid = self.glyph(id).id
        view = self.parsed
        return HMetrics(
            advance_width=float(view.glyph_hor_advance(gid) or 0),
            left_side_bearing=float(view.glyph_hor_side_bearing(gid) or 0),
        )

    def pair_kerning(self, scale: Scale, first: IntoGlyphId, second: IntoGlyphId) -> float:
        """Kerning to add between two glyphs, on top of their advances.

        Pairs the font has no kerning for yield 0.0.
        """
        first_id = into_glyph_id(first, self)
        second_id = into_glyph_id(second, self)

        factor = self.scale_for_pixel_height(scale.y) * (scale.x / scale.y)
        kern = self.parsed.glyphs_kerning(first_id, second_id) or 0
        return factor * kern

    def scale_for_pixel_height(self, height: float) -> float:
        """Scale factor that makes the font ``height`` pixels tall.

        Height is measured from the lowest descender to the highest ascender:
        ``scale = height / (ascender - descender)``.

        Raises:
            ZeroFontHeightError: If ascender and descender are equal
        """
        view = self.parsed
        font_height = float(view.ascender()) - float(view.descender())
        if font_height == 0.0:
            raise ZeroFontHeightError(view.ascender())
        return height / font_height
