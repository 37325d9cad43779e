"""Core font API for fontview.

This module contains:

- The Font handle (borrowed or owned data, one uniform API)
- Glyph identifier resolution (characters, codepoints, raw ids, handles)
- Lazy glyph sequences and single-line layout

Key classes:
- Font: Metrics, kerning, glyph lookup and layout
- LayoutIter: Positioned glyphs for a line of text

Key functions:
- into_glyph_id: Resolve any glyph identifier for a font
- glyphs_for: Lazily map identifiers to glyphs
"""

from fontview.core.font import Font
from fontview.core.layout import LayoutIter, glyphs_for
from fontview.core.resolve import NOTDEF, IntoGlyphId, SupportsGlyphId, into_glyph_id

__all__ = [
    "NOTDEF",
    "Font",
    "IntoGlyphId",
    "LayoutIter",
    "SupportsGlyphId",
    "glyphs_for",
    "into_glyph_id",
]
