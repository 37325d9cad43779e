"""Configuration settings for fontview."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from fontview.domain.geometry import Point, Scale


class FontOwnership(str, Enum):
    """How a loaded font holds its bytes."""

    BORROWED = "borrowed"
    OWNED = "owned"


class FontConfig(BaseModel):
    """Configuration for opening a font."""

    collection_index: int = Field(
        default=0,
        ge=0,
        description="Font number inside a TTC/OTC collection (0 for single fonts)",
    )
    ownership: FontOwnership = Field(
        default=FontOwnership.OWNED,
        description="Whether the font owns its buffer or borrows it",
    )

    @property
    def owned(self) -> bool:
        return self.ownership == FontOwnership.OWNED


class LayoutConfig(BaseModel):
    """Configuration for single-line layout."""

    pixel_height: float = Field(
        default=24.0,
        gt=0.0,
        le=4096.0,
        description="Font height in pixels, from lowest descender to highest ascender",
    )
    x_scale_factor: float = Field(
        default=1.0,
        gt=0.0,
        le=16.0,
        description="Horizontal stretch relative to the vertical scale",
    )
    start_x: float = Field(
        default=0.0,
        description="Baseline origin x of the first glyph, in pixels",
    )
    start_y: float | None = Field(
        default=None,
        description="Baseline y in pixels (None = place baseline at the scaled ascent)",
    )

    def scale(self) -> Scale:
        """Get the pixel scale for layout."""
        return Scale(x=self.pixel_height * self.x_scale_factor, y=self.pixel_height)

    def start(self, ascent: float = 0.0) -> Point:
        """Get the layout start point.

        Args:
            ascent: Scaled ascent used as baseline when ``start_y`` is unset

        Returns:
            Baseline origin of the first glyph
        """
        return Point(self.start_x, ascent if self.start_y is None else self.start_y)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class FontViewSettings(BaseModel):
    """Main application settings."""

    font: FontConfig = Field(default_factory=FontConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> FontViewSettings:
    """Get default application settings."""
    return FontViewSettings()
