"""Utility functions for fontview.

This module provides utility functions including:

- Logging setup and configuration
- Layout run statistics
"""

from fontview.utils.logging import (
    LayoutLogger,
    LayoutStats,
    configure_logging,
)

__all__ = [
    "LayoutLogger",
    "LayoutStats",
    "configure_logging",
]
