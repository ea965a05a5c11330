"""Sight file writer.

This module provides the SightWriter class for saving rendered sights and
previews, and the naming convention War Thunder accepts for sight files.
"""

import re
from pathlib import Path

from sightforge.exceptions import SightWriteError

SIGHT_SUFFIX = "_sight"
SIGHT_EXTENSION = ".blk"
PREVIEW_SUFFIX = "_preview"

# The game only lists sight files whose names are letters and underscores
_INVALID_NAME_CHARS = re.compile(r"[^A-Za-z_]")


def sanitize_sight_name(name: str) -> str:
    """Reduce a name to characters War Thunder accepts in sight file names.

    Args:
        name: Proposed base name

    Returns:
        Name containing only ASCII letters and underscores ("sight" if
        nothing is left)
    """
    cleaned = _INVALID_NAME_CHARS.sub("", name)
    return cleaned or "sight"


class SightWriter:
    """Writes sight files and previews to disk.

    Example:
        writer = SightWriter(Path("emblem_sight.blk"))
        writer.write(content)
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the writer.

        Args:
            output_path: Path where the file will be saved
        """
        self._output_path = output_path

    @property
    def path(self) -> Path:
        """Destination path."""
        return self._output_path

    def write(self, content: str) -> Path:
        """Write text content to the output path.

        Parent directories are created as needed.

        Args:
            content: File content

        Returns:
            The path written

        Raises:
            SightWriteError: If the file cannot be written
        """
        try:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            self._output_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise SightWriteError(str(self._output_path), str(e)) from e
        return self._output_path

    @staticmethod
    def get_sight_path(input_path: Path) -> Path:
        """Generate the sight file path for an input outline.

        Converts: emblem.svg -> emblem_sight.blk
                  my-logo 2.svg -> mylogo_sight.blk

        Args:
            input_path: Input SVG path

        Returns:
            Path next to the input with a game-safe name
        """
        name = sanitize_sight_name(input_path.stem) + SIGHT_SUFFIX
        return input_path.parent / f"{name}{SIGHT_EXTENSION}"

    @staticmethod
    def get_preview_path(sight_path: Path) -> Path:
        """Generate the preview path for a sight file.

        Converts: emblem_sight.blk -> emblem_sight_preview.svg
                  emblem.blk -> emblem_preview.svg
        """
        return sight_path.with_name(f"{sight_path.stem}{PREVIEW_SUFFIX}.svg")
