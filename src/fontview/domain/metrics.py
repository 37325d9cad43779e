"""Font-wide and per-glyph metrics.

Values are either raw font design units (as floats) or pixel values after
multiplying by a scale factor.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class VMetrics:
    """Vertical metrics shared by all glyphs of a font.

    Attributes:
        ascent: Highest point any glyph reaches above the baseline
        descent: Lowest point any glyph reaches, usually negative
        line_gap: Extra spacing between the descent of one line and the
            ascent of the next
    """

    ascent: float
    descent: float
    line_gap: float

    def __mul__(self, factor: float) -> "VMetrics":
        return VMetrics(
            ascent=self.ascent * factor,
            descent=self.descent * factor,
            line_gap=self.line_gap * factor,
        )

    @property
    def line_height(self) -> float:
        """Distance between consecutive baselines."""
        return self.ascent - self.descent + self.line_gap

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with ascent, descent and line_gap
        """
        return {
            "ascent": self.ascent,
            "descent": self.descent,
            "line_gap": self.line_gap,
        }


@dataclass(frozen=True, slots=True)
class HMetrics:
    """Horizontal metrics of a single glyph.

    Attributes:
        advance_width: Distance to move the caret after placing the glyph
        left_side_bearing: Offset from the caret to the glyph's left edge
    """

    advance_width: float
    left_side_bearing: float

    def __mul__(self, factor: float) -> "HMetrics":
        return HMetrics(
            advance_width=self.advance_width * factor,
            left_side_bearing=self.left_side_bearing * factor,
        )
