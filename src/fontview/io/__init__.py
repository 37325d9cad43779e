"""Font data layer for fontview.

This module turns bytes into decoded font views using fonttools and keeps
those views together with the bytes they came from.

Key responsibilities:
- Decode the tables needed for metrics, kerning and cmap lookups
- Hold borrowed or owned font data behind one interface
- Read font files from disk

Key classes:
- ParsedFont: Decoded read-only font view
- BorrowedFontData: View over caller-retained bytes
- OwnedFontData: Owned bytes plus the view decoded from them

File loading (fontview.io.reader.load_font) builds Font handles and is
imported from its module directly.
"""

from fontview.io.decoder import ParsedFont
from fontview.io.source import BorrowedFontData, FontData, OwnedFontData

__all__ = [
    "BorrowedFontData",
    "FontData",
    "OwnedFontData",
    "ParsedFont",
]
