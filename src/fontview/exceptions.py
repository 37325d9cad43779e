"""Exception hierarchy for fontview."""


class FontViewError(Exception):
    """Base exception for all fontview errors."""

    pass


class FontError(FontViewError):
    """Errors related to font loading or font-wide data."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class FontDecodeError(FontError):
    """Font bytes could not be decoded at the requested collection index."""

    def __init__(self, reason: str, index: int = 0) -> None:
        self.reason = reason
        self.index = index
        super().__init__(f"Cannot decode font at index {index}: {reason}")


class MissingUnitsPerEmError(FontError, ValueError):
    """The font carries no valid units-per-em value.

    A font that decoded successfully is expected to have one, so this is a
    broken precondition rather than a recoverable condition.
    """

    def __init__(self) -> None:
        super().__init__("Invalid font units_per_em")


class GlyphError(FontViewError):
    """Errors related to glyph lookup."""

    pass


class GlyphIdOutOfRangeError(GlyphError, IndexError):
    """A glyph id outside ``0..glyph_count`` was used against a font."""

    def __init__(self, glyph_id: int, glyph_count: int) -> None:
        self.glyph_id = glyph_id
        self.glyph_count = glyph_count
        super().__init__(
            f"Glyph id {glyph_id} out of range for font with {glyph_count} glyphs"
        )


class ZeroFontHeightError(FontError, ZeroDivisionError):
    """The font's ascender equals its descender, so it cannot be scaled."""

    def __init__(self, ascender: int) -> None:
        self.ascender = ascender
        super().__init__(f"Font has zero height (ascender == descender == {ascender})")
