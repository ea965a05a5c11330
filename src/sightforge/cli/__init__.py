"""Command-line interface for sightforge.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Line budget and per-curve segment control
- User offset, scale and rotation
- Optional SVG preview
- Dry-run mode for checking line counts
"""

from sightforge.cli.app import cli, main

__all__ = ["cli", "main"]
