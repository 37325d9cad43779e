"""Logging utilities for fontview."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class LayoutStats:
    """Statistics from a layout run."""

    glyph_count: int = 0
    notdef_count: int = 0
    kerned_pairs: int = 0
    unmapped: list[str] = field(default_factory=list)
    total_advance: float = 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("fontview")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class LayoutLogger:
    """Logger for tracking glyphs produced by a layout run."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = LayoutStats()

    def log_layout_start(self, text: str, pixel_height: float) -> None:
        """Log start of a layout run."""
        self._logger.debug("Layout started", chars=len(text), pixel_height=pixel_height)

    def log_glyph(self, char: str, glyph_id: int, x: float, kerning: float) -> None:
        """Log one positioned glyph."""
        self._logger.debug(
            "Glyph positioned",
            char=char,
            glyph_id=glyph_id,
            x=round(x, 3),
            kerning=round(kerning, 3),
        )
        self._stats.glyph_count += 1
        if kerning != 0.0:
            self._stats.kerned_pairs += 1

    def log_unmapped(self, char: str) -> None:
        """Log a character that fell back to .notdef."""
        self._logger.info("Character not in font", char=char, codepoint=f"U+{ord(char):04X}")
        self._stats.notdef_count += 1
        self._stats.unmapped.append(char)

    def log_layout_complete(self, total_advance: float) -> None:
        """Log end of a layout run."""
        self._stats.total_advance = total_advance
        self._logger.info(
            "Layout complete",
            glyphs=self._stats.glyph_count,
            notdef=self._stats.notdef_count,
            kerned_pairs=self._stats.kerned_pairs,
            total_advance=round(total_advance, 3),
        )

    @property
    def stats(self) -> LayoutStats:
        """Get current layout statistics."""
        return self._stats
