"""Loading fonts from the file system.

The core Font API only ever sees bytes already in memory; this module is
the thin layer that reads a file and reports failures with the path.
"""

from pathlib import Path

import structlog

from fontview.core.font import Font
from fontview.exceptions import FontDecodeError, FontLoadError
from fontview.io.source import BorrowedFontData, OwnedFontData


def load_font(
    font_path: Path,
    index: int = 0,
    owned: bool = True,
    logger: structlog.stdlib.BoundLogger | None = None,
) -> Font:
    """Read a font file into a Font handle.

    Args:
        font_path: Path to a TTF, OTF, TTC or OTC file
        index: Font number inside a collection
        owned: Let the font own its buffer (otherwise the returned font
            borrows the bytes read here)
        logger: Optional structlog logger for load diagnostics

    Returns:
        Font over the file contents

    Raises:
        FileNotFoundError: If the font file does not exist
        FontLoadError: If the file is not a usable font at ``index``
    """
    if not font_path.exists():
        raise FileNotFoundError(f"Font file not found: {font_path}")

    try:
        data = font_path.read_bytes()
    except OSError as e:
        raise FontLoadError(str(font_path), str(e)) from e

    try:
        if owned:
            holder: BorrowedFontData | OwnedFontData = OwnedFontData.from_buffer(data, index)
        else:
            holder = BorrowedFontData.from_bytes(data, index)
    except FontDecodeError as e:
        if logger is not None:
            logger.warning("Font decode failed", path=str(font_path), index=index, reason=e.reason)
        raise FontLoadError(str(font_path), e.reason) from e

    font = Font(holder)
    if logger is not None:
        logger.debug(
            "Font loaded",
            path=str(font_path),
            index=index,
            owned=owned,
            size=len(data),
            glyphs=font.glyph_count(),
        )
    return font
