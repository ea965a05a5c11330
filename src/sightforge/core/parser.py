"""SVG path parsing.

Turns the ``d`` attribute of the first ``<path>`` element of an SVG document
into explicit line segments and cubic Bezier curves. Only absolute ``M``,
``L`` and ``C`` commands are understood; any other command is skipped.
"""

import re

from sightforge.domain import BezierCurve, CommandType, LineSegment, PathCommand, Point
from sightforge.exceptions import MalformedInputError

_PATH_ELEMENT_RE = re.compile(r"<path\b[^>]*>", re.IGNORECASE)
_D_ATTRIBUTE_RE = re.compile(r"""\sd\s*=\s*(?:"([^"]*)"|'([^']*)')""")

# Every SVG path command letter; "e"/"E" are deliberately absent (exponents)
_COMMAND_RE = re.compile(r"([MmLlHhVvCcSsQqTtAaZz])([^MmLlHhVvCcSsQqTtAaZz]*)")
_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_SEPARATOR_RE = re.compile(r"[\s,]*")

# Accepted coordinate counts per command
_ARITY: dict[CommandType, tuple[int, ...]] = {
    CommandType.MOVE: (2,),
    CommandType.LINE: (2, 4),
    CommandType.CURVE: (6,),
}


def extract_path_data(svg_text: str) -> str:
    """Return the ``d`` attribute of the first ``<path>`` element.

    Args:
        svg_text: SVG document text

    Returns:
        Raw path data string

    Raises:
        MalformedInputError: If there is no path element or it has no ``d``
    """
    element = _PATH_ELEMENT_RE.search(svg_text)
    if element is None:
        raise MalformedInputError("no <path> element found")

    attribute = _D_ATTRIBUTE_RE.search(element.group(0))
    if attribute is None:
        raise MalformedInputError("first <path> element has no 'd' attribute")

    return attribute.group(1) if attribute.group(1) is not None else attribute.group(2)


def _parse_coords(text: str, segment: str) -> tuple[float, ...]:
    numbers = _NUMBER_RE.findall(text)
    leftover = _SEPARATOR_RE.sub("", _NUMBER_RE.sub(" ", text))
    if leftover:
        raise MalformedInputError(f"unexpected characters {leftover!r}", segment=segment)
    return tuple(float(n) for n in numbers)


def tokenize(path_data: str) -> list[PathCommand]:
    """Split path data into supported commands.

    The path is cut at every command letter, keeping the letter with the
    coordinates that follow it. Segments for commands other than absolute
    M, L and C are dropped.

    Args:
        path_data: Contents of a ``d`` attribute

    Returns:
        Commands in path order

    Raises:
        MalformedInputError: If a supported command has the wrong number of
            coordinates or contains something that is not a number
    """
    commands: list[PathCommand] = []

    for match in _COMMAND_RE.finditer(path_data):
        letter, body = match.groups()
        try:
            command = CommandType(letter)
        except ValueError:
            # Unsupported command letter
            continue

        segment = match.group(0).strip()
        coords = _parse_coords(body, segment)
        if len(coords) not in _ARITY[command]:
            expected = " or ".join(str(n) for n in _ARITY[command])
            raise MalformedInputError(
                f"'{letter}' takes {expected} coordinates, got {len(coords)}",
                segment=segment,
            )
        commands.append(PathCommand(command=command, coords=coords))

    return commands


class PathParser:
    """Parses SVG outlines into line segments and Bezier curves.

    The running point starts at the origin and is carried from command to
    command; each command begins where the previous one ended.

    Example:
        parser = PathParser()
        lines, curves = parser.parse(svg_text)
    """

    def parse(self, svg_text: str) -> tuple[list[LineSegment], list[BezierCurve]]:
        """Parse the first path of an SVG document.

        Args:
            svg_text: SVG document text

        Returns:
            Tuple of (lines, curves), each in path order

        Raises:
            MalformedInputError: If no path data is found or a command is
                malformed
        """
        return self.parse_path_data(extract_path_data(svg_text))

    def parse_path_data(self, path_data: str) -> tuple[list[LineSegment], list[BezierCurve]]:
        """Parse a raw ``d`` attribute value.

        Args:
            path_data: Contents of a ``d`` attribute

        Returns:
            Tuple of (lines, curves), each in path order
        """
        lines: list[LineSegment] = []
        curves: list[BezierCurve] = []
        cursor = Point(0.0, 0.0)

        for command in tokenize(path_data):
            cursor = self._apply(command, cursor, lines, curves)

        return lines, curves

    @staticmethod
    def _apply(
        command: PathCommand,
        cursor: Point,
        lines: list[LineSegment],
        curves: list[BezierCurve],
    ) -> Point:
        """Emit primitives for one command and return the new running point."""
        c = command.coords
        end = Point(command.end_x, command.end_y)

        if command.command is CommandType.LINE:
            if len(c) == 4:
                # Corner: running point -> corner -> end
                corner = Point(c[0], c[1])
                lines.append(LineSegment(cursor, corner))
                lines.append(LineSegment(corner, end))
            else:
                lines.append(LineSegment(cursor, end))
        elif command.command is CommandType.CURVE:
            curves.append(BezierCurve(cursor, Point(c[0], c[1]), Point(c[2], c[3]), end))

        return end


def parse_svg_path(svg_text: str) -> tuple[list[LineSegment], list[BezierCurve]]:
    """Parse the first path of an SVG document into lines and curves.

    Convenience wrapper around PathParser.parse.
    """
    return PathParser().parse(svg_text)
