"""Configuration management for fontview.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- FontConfig: Collection index and buffer ownership
- LayoutConfig: Pixel size, stretch and start position for layout
- LoggingConfig: Logging settings
- FontViewSettings: Main application settings
"""

from fontview.config.settings import (
    FontConfig,
    FontOwnership,
    FontViewSettings,
    LayoutConfig,
    LoggingConfig,
    get_default_settings,
)

__all__ = [
    "FontConfig",
    "FontOwnership",
    "FontViewSettings",
    "LayoutConfig",
    "LoggingConfig",
    "get_default_settings",
]
