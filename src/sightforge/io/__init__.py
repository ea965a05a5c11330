"""Sight I/O layer for sightforge.

This module handles reading SVG outlines and producing sight output.

Key responsibilities:
- Load traced SVG outlines
- Render line sets as War Thunder sight files
- Render SVG previews of line sets
- Write output with a game-safe naming convention

Key classes:
- SvgReader: Load SVG outlines
- SightCodec: Render sight file text
- SightWriter: Save sights and previews
"""

from sightforge.io.codec import SightCodec, format_line, render_sight
from sightforge.io.preview import render_preview_svg
from sightforge.io.reader import SvgReader
from sightforge.io.writer import SightWriter, sanitize_sight_name

__all__ = [
    "SightCodec",
    "SightWriter",
    "SvgReader",
    "format_line",
    "render_preview_svg",
    "render_sight",
    "sanitize_sight_name",
]
