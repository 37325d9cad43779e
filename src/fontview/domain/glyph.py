"""Glyph identifiers and glyph handles.

A glyph id only means something relative to the font that produced it, so
every glyph handle carries a shared reference to its font. Handles never own
font data; cloning a font or a glyph shares the underlying buffer.

Handles form a chain of refinements:
- Glyph: font + id
- ScaledGlyph: Glyph + pixel scale
- PositionedGlyph: ScaledGlyph + pixel position
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from fontview.domain.geometry import Point, Scale
from fontview.domain.metrics import HMetrics

if TYPE_CHECKING:
    from fontview.core.font import Font


class GlyphId(int):
    """Index of a glyph within one font's glyph order."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"GlyphId({int(self)})"


class Codepoint(int):
    """A Unicode scalar value given as an integer.

    Looked up through the font's character map, unlike a plain ``int`` which
    is taken as a raw glyph index.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Codepoint(U+{int(self):04X})"


@dataclass(frozen=True, slots=True)
class Glyph:
    """A glyph of a specific font, not yet scaled.

    Attributes:
        font: Font the id belongs to
        id: Glyph index within ``font``
    """

    font: "Font"
    id: GlyphId

    def scaled(self, scale: Scale) -> "ScaledGlyph":
        """Augment this glyph with scaling information."""
        return ScaledGlyph(glyph=self, scale=scale)

    def into_glyph_id(self, _font: "Font") -> GlyphId:
        return self.id


@dataclass(frozen=True, slots=True)
class ScaledGlyph:
    """A glyph augmented with a pixel scale.

    Attributes:
        glyph: The unscaled glyph
        scale: Requested scale in pixels
    """

    glyph: Glyph
    scale: Scale

    @property
    def id(self) -> GlyphId:
        return self.glyph.id

    @property
    def font(self) -> "Font":
        return self.glyph.font

    def unscaled(self) -> Glyph:
        """Return the glyph without scaling information."""
        return self.glyph

    def h_metrics(self) -> HMetrics:
        """Horizontal metrics of this glyph at its scale.

        Design units are converted with ``scale_for_pixel_height(1.0)`` times
        the horizontal scale, so that the advance matches the factor used for
        pair kerning.

        Returns:
            Scaled HMetrics in pixels
        """
        unit_scale = self.font.scale_for_pixel_height(1.0) * self.scale.x
        return self.font.h_metrics_unscaled(self.id) * unit_scale

    def positioned(self, position: Point) -> "PositionedGlyph":
        """Augment this glyph with a pixel position.

        Args:
            position: Origin of the glyph on the baseline, in pixels

        Returns:
            PositionedGlyph at ``position``
        """
        return PositionedGlyph(scaled_glyph=self, position=position)

    def into_glyph_id(self, _font: "Font") -> GlyphId:
        return self.id


@dataclass(frozen=True, slots=True)
class PositionedGlyph:
    """A scaled glyph placed at a pixel position.

    This is the unit handed over to a rasterizer.

    Attributes:
        scaled_glyph: The scaled glyph
        position: Baseline origin in pixels
    """

    scaled_glyph: ScaledGlyph
    position: Point

    @property
    def id(self) -> GlyphId:
        return self.scaled_glyph.id

    @property
    def font(self) -> "Font":
        return self.scaled_glyph.font

    @property
    def scale(self) -> Scale:
        return self.scaled_glyph.scale

    def unpositioned(self) -> ScaledGlyph:
        """Return the scaled glyph without position information."""
        return self.scaled_glyph

    def with_position(self, position: Point) -> "PositionedGlyph":
        """Return the same glyph moved to another position."""
        return PositionedGlyph(scaled_glyph=self.scaled_glyph, position=position)

    def into_glyph_id(self, _font: "Font") -> GlyphId:
        return self.id
