"""Glyph identifier resolution.

Every metrics, kerning and layout entry point accepts anything that can
become a glyph id for a given font:

- a one-character ``str`` or a ``Codepoint``: looked up in the character
  map, falling back to glyph 0 (".notdef") when the font has no glyph for it
- a ``GlyphId`` or a plain ``int``: taken as a raw glyph index, unchanged
- a glyph handle (``Glyph``, ``ScaledGlyph``, ``PositionedGlyph``) or any
  object with an ``into_glyph_id(font)`` method
"""

from typing import TYPE_CHECKING, Protocol, Union, runtime_checkable

from fontview.domain.glyph import Codepoint, GlyphId

if TYPE_CHECKING:
    from fontview.core.font import Font

NOTDEF = GlyphId(0)


@runtime_checkable
class SupportsGlyphId(Protocol):
    """Objects that know their glyph id for a font."""

    def into_glyph_id(self, font: "Font") -> GlyphId: ...


IntoGlyphId = Union[str, int, SupportsGlyphId]


def into_glyph_id(value: IntoGlyphId, font: "Font") -> GlyphId:
    """Resolve ``value`` to a glyph id of ``font``.

    Raw ids are not range-checked here; ``Font.glyph`` does that.

    Args:
        value: Character, codepoint, raw glyph index or glyph handle
        font: Font whose id space to resolve into

    Returns:
        GlyphId for ``font``

    Raises:
        ValueError: If ``value`` is a string that is not exactly one character
        TypeError: If ``value`` cannot name a glyph
    """
    if isinstance(value, GlyphId):
        return value
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"Expected a single character, got {value!r}")
        return _lookup_codepoint(ord(value), font)
    if isinstance(value, Codepoint):
        return _lookup_codepoint(int(value), font)
    if isinstance(value, bool):
        raise TypeError("bool is not a glyph identifier")
    if isinstance(value, int):
        return GlyphId(value)
    if isinstance(value, SupportsGlyphId):
        return value.into_glyph_id(font)
    raise TypeError(f"Cannot resolve {type(value).__name__} to a glyph id")


def _lookup_codepoint(codepoint: int, font: "Font") -> GlyphId:
    glyph_id = font.glyph_index(codepoint)
    if glyph_id is None:
        return NOTDEF
    return GlyphId(glyph_id)
