"""Geometric value types for glyph placement.

This module defines the small immutable types passed between the font
handle and layout code:
- Point: A position in pixel space
- Vector: A displacement in pixel space
- Scale: Independent horizontal and vertical pixels-per-em factors
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vector:
    """A 2D displacement.

    Attributes:
        x: Horizontal component
        y: Vertical component
    """

    x: float
    y: float

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Vector":
        return Vector(self.x * factor, self.y * factor)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class Point:
    """A position in 2D pixel space.

    Points translate by vectors; the difference of two points is a vector.

    Attributes:
        x: X coordinate in pixels
        y: Y coordinate in pixels
    """

    x: float
    y: float

    def __add__(self, offset: Vector) -> "Point":
        if not isinstance(offset, Vector):
            return NotImplemented
        return Point(self.x + offset.x, self.y + offset.y)

    def __sub__(self, other: "Point | Vector") -> "Point | Vector":
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y)
        return NotImplemented

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class Scale:
    """Pixels-per-em factors along each axis.

    ``Scale(x=24, y=24)`` requests a font rendered 24 pixels tall (measured
    from the lowest descender to the highest ascender) at its natural width.

    Attributes:
        x: Horizontal scale in pixels
        y: Vertical scale in pixels
    """

    x: float
    y: float

    @classmethod
    def uniform(cls, s: float) -> "Scale":
        """Create a scale with the same factor on both axes."""
        return cls(s, s)
