"""SVG path command stream types."""

from dataclasses import dataclass
from enum import Enum


class CommandType(Enum):
    """Supported SVG path commands (absolute form only)."""

    MOVE = "M"
    LINE = "L"
    CURVE = "C"


@dataclass(frozen=True, slots=True)
class PathCommand:
    """A single command from an SVG path ``d`` attribute.

    The start point is implicit: every command after the first begins at
    the terminal point of the command before it.

    Attributes:
        command: Command type
        coords: Flat coordinate list as it appeared in the path
    """

    command: CommandType
    coords: tuple[float, ...]

    @property
    def end_x(self) -> float:
        """X coordinate of the command's terminal point."""
        return self.coords[-2]

    @property
    def end_y(self) -> float:
        """Y coordinate of the command's terminal point."""
        return self.coords[-1]
