"""SVG outline reader.

This module provides the SvgReader class for loading traced outlines from
disk and handing their text to the parser.
"""

from pathlib import Path

from sightforge.domain import BezierCurve, LineSegment
from sightforge.core.parser import PathParser
from sightforge.exceptions import MalformedInputError


class SvgReader:
    """Loads SVG files produced by an outline tracer.

    Example:
        reader = SvgReader(Path("emblem.svg"))
        lines, curves = reader.read_primitives()
    """

    def __init__(self, svg_path: Path) -> None:
        """Initialize the reader.

        Args:
            svg_path: Path to the SVG file
        """
        self._svg_path = svg_path

    @property
    def path(self) -> Path:
        """Path of the SVG file."""
        return self._svg_path

    def read(self) -> str:
        """Read the SVG document text.

        Raises:
            FileNotFoundError: If the file does not exist
            MalformedInputError: If the file is not UTF-8 text
        """
        if not self._svg_path.exists():
            raise FileNotFoundError(f"SVG file not found: {self._svg_path}")

        try:
            return self._svg_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise MalformedInputError(f"{self._svg_path} is not UTF-8 text: {e}") from e

    def read_primitives(self) -> tuple[list[LineSegment], list[BezierCurve]]:
        """Read the file and parse its first path."""
        return PathParser().parse(self.read())
