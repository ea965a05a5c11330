"""Internal Bezier curve flattening algorithms.

This is an internal module containing helper functions for the curve budgeter.
Not intended for public use.
"""

from sightforge.domain import BezierCurve, LineSegment


def flatten_cubic(curve: BezierCurve, segments: int) -> list[LineSegment]:
    """Flatten a cubic Bezier curve into a fixed number of straight lines.

    The parameter is advanced by repeated addition of 1/segments, and the
    loop bound carries half a step of slack so accumulated rounding never
    drops the final point. Each evaluated point is chained to the previous
    one, starting from p0.

    Args:
        curve: Curve to flatten
        segments: Number of lines to produce

    Returns:
        List of exactly ``segments`` chained line segments (empty if
        ``segments`` is 0 or less)
    """
    if segments <= 0:
        return []

    step = 1 / segments
    limit = 1 + 1 / (segments * 2)

    lines: list[LineSegment] = []
    prev = curve.p0
    t = step
    while t <= limit:
        point = curve.point_at(t)
        lines.append(LineSegment(prev, point))
        prev = point
        t += step

    return lines
