"""Command-line interface for fontview.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Font identification and vertical metrics
- Single-line layout tables with kerning
- Pair kerning lookups
"""

from fontview.cli.app import cli, main

__all__ = ["cli", "main"]
