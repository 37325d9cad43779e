"""fontview - Typed read-only views over TrueType/OpenType fonts.

fontview decodes font bytes (borrowed or owned) and answers the questions a
glyph rasterizer needs: which glyph renders a character, how tall the font
is at a pixel size, how far to advance and kern between glyphs, and where
each glyph of a line of text goes.

Example:
    >>> from fontview import Font, Point, Scale
    >>> font = Font.from_owned_buffer(open("DejaVuSans.ttf", "rb").read())
    >>> [g.position.x for g in font.layout("AV", Scale.uniform(32), Point(0, 24))]
"""

from fontview.core import Font, LayoutIter, into_glyph_id
from fontview.domain import (
    Codepoint,
    Glyph,
    GlyphId,
    HMetrics,
    Point,
    PositionedGlyph,
    Scale,
    ScaledGlyph,
    Vector,
    VMetrics,
)

__version__ = "0.1.0"

__all__ = [
    "Codepoint",
    "Font",
    "Glyph",
    "GlyphId",
    "HMetrics",
    "LayoutIter",
    "Point",
    "PositionedGlyph",
    "Scale",
    "ScaledGlyph",
    "VMetrics",
    "Vector",
    "__version__",
    "into_glyph_id",
]
