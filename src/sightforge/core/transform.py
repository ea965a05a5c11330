"""Affine operations on line sets.

This module provides the placement stage of the pipeline:
- Bounding box calculation
- Translation, per-axis scaling and rotation
- Fitting a line set into the sight frame
- Applying user transform parameters
- Length-based trimming of lines and curves

All functions are pure. Operations that would not change anything return
their input list object unchanged; every other operation returns a new list.
"""

import math
from decimal import ROUND_HALF_UP, Decimal

from sightforge.config import TransformParameters
from sightforge.domain import SIGHT_FRAME, BezierCurve, Frame, LineSegment, Point
from sightforge.exceptions import DegenerateGeometryError


def bounding_box(lines: list[LineSegment]) -> tuple[float, float, float, float]:
    """Calculate the axis-aligned bounding box over all endpoints.

    Args:
        lines: Line segments (must not be empty)

    Returns:
        Tuple of (min_x, min_y, max_x, max_y)

    Raises:
        ValueError: If lines is empty
    """
    if not lines:
        raise ValueError("Cannot compute bounding box of an empty line set")

    min_x = min_y = math.inf
    max_x = max_y = -math.inf
    for line in lines:
        min_x = min(min_x, line.start.x, line.end.x)
        max_x = max(max_x, line.start.x, line.end.x)
        min_y = min(min_y, line.start.y, line.end.y)
        max_y = max(max_y, line.start.y, line.end.y)

    return (min_x, min_y, max_x, max_y)


def offset_lines(lines: list[LineSegment], dx: float, dy: float) -> list[LineSegment]:
    """Translate every endpoint by (dx, dy)."""
    if not lines or (dx == 0 and dy == 0):
        return lines

    return [
        LineSegment(
            Point(line.start.x + dx, line.start.y + dy),
            Point(line.end.x + dx, line.end.y + dy),
        )
        for line in lines
    ]


def scale_lines(lines: list[LineSegment], sx: float, sy: float) -> list[LineSegment]:
    """Multiply every x coordinate by sx and every y coordinate by sy."""
    if not lines or (sx == 1 and sy == 1):
        return lines

    return [
        LineSegment(
            Point(line.start.x * sx, line.start.y * sy),
            Point(line.end.x * sx, line.end.y * sy),
        )
        for line in lines
    ]


def _round3(value: float) -> float:
    # Half away from zero on the exact binary value
    return float(Decimal(value).quantize(Decimal("0.001"), rounding=ROUND_HALF_UP))


def rotate_point(point: Point, origin: Point, radians: float) -> Point:
    """Rotate a point counter-clockwise around origin.

    Args:
        point: Point to rotate
        origin: Center of rotation
        radians: Angle in radians

    Returns:
        Rotated point (the input point itself if the angle is 0)
    """
    if radians == 0:
        return point

    cos_a = math.cos(radians)
    sin_a = math.sin(radians)
    dx = point.x - origin.x
    dy = point.y - origin.y
    return Point(
        origin.x + cos_a * dx - sin_a * dy,
        origin.y + sin_a * dx + cos_a * dy,
    )


def rotate_lines(
    lines: list[LineSegment],
    degrees: float,
    origin: Point | None = None,
) -> list[LineSegment]:
    """Rotate all lines around an origin.

    Args:
        lines: Line segments to rotate
        degrees: Rotation angle in degrees
        origin: Center of rotation. If None, the center of the bounding box
            rounded to 3 decimals is used.

    Returns:
        Rotated line segments
    """
    if not lines or degrees == 0:
        return lines

    if origin is None:
        min_x, min_y, max_x, max_y = bounding_box(lines)
        origin = Point(
            _round3((max_x - min_x) / 2 + min_x),
            _round3((max_y - min_y) / 2 + min_y),
        )

    radians = degrees * (math.pi / 180)

    return [
        LineSegment(
            rotate_point(line.start, origin, radians),
            rotate_point(line.end, origin, radians),
        )
        for line in lines
    ]


def fit_to_frame(lines: list[LineSegment], frame: Frame = SIGHT_FRAME) -> list[LineSegment]:
    """Center lines on the origin and scale them to fit inside the frame.

    The same scale factor is used on both axes, chosen so the line set
    touches the frame on one axis and stays within it on the other.

    Args:
        lines: Line segments to fit
        frame: Target frame (the sight frame unless overridden)

    Returns:
        Fitted line segments (the input itself if empty)

    Raises:
        DegenerateGeometryError: If the bounding box has zero width or height

    Examples:
        A 2 x 1 box fitted into the 1.78 x 1.0 sight frame is scaled by
        min(1.78 / 2, 1.0 / 1) = 0.89.
    """
    if not lines:
        return lines

    min_x, min_y, max_x, max_y = bounding_box(lines)
    width = max_x - min_x
    height = max_y - min_y
    if width == 0 or height == 0:
        raise DegenerateGeometryError(width, height)

    centered = offset_lines(lines, -((max_x + min_x) / 2), -((max_y + min_y) / 2))

    scale = min(frame.height / height, frame.width / width)
    return scale_lines(centered, scale, scale)


def apply_user_transform(
    lines: list[LineSegment],
    params: TransformParameters,
) -> list[LineSegment]:
    """Apply user offset, scale and rotation, in that order.

    The offset is applied before scaling, so it is measured in the
    unscaled (fitted) frame.

    Args:
        lines: Fitted line segments
        params: User transform parameters

    Returns:
        Transformed line segments
    """
    if params.is_identity:
        return lines

    lines = offset_lines(lines, params.x_offset, params.y_offset)
    lines = scale_lines(lines, params.x_scale, params.y_scale)
    return rotate_lines(lines, params.rotation_degrees)


def trim_lines(lines: list[LineSegment], threshold: float = 0.0) -> list[LineSegment]:
    """Keep only lines at least ``threshold`` long."""
    return [line for line in lines if line.length() >= threshold]


def trim_curves(curves: list[BezierCurve], threshold: float = 0.0) -> list[BezierCurve]:
    """Keep only curves whose control polygon is at least ``threshold`` long."""
    return [curve for curve in curves if curve.chord_length() >= threshold]
