"""Domain models for fontview.

This module contains the value types exchanged between the font handle,
the layout code and downstream rasterizers. All models are:

- Immutable (frozen dataclasses)
- Independent of fonttools implementation details

Key classes:
- GlyphId / Codepoint: Ways of naming a glyph
- Glyph, ScaledGlyph, PositionedGlyph: Glyph handles
- Point, Vector, Scale: Pixel-space geometry
- VMetrics, HMetrics: Font-wide and per-glyph metrics
"""

from fontview.domain.geometry import Point, Scale, Vector
from fontview.domain.glyph import (
    Codepoint,
    Glyph,
    GlyphId,
    PositionedGlyph,
    ScaledGlyph,
)
from fontview.domain.metrics import HMetrics, VMetrics

__all__: list[str] = [
    # Identifiers
    "Codepoint",
    "GlyphId",
    # Glyph handles
    "Glyph",
    "PositionedGlyph",
    "ScaledGlyph",
    # Geometry
    "Point",
    "Scale",
    "Vector",
    # Metrics
    "HMetrics",
    "VMetrics",
]
