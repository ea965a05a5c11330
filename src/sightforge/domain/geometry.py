"""Core geometric types for outline representation.

This module defines the fundamental geometric types used throughout sightforge:
- Point: A 2D point
- LineSegment: A straight line between two points
- BezierCurve: A cubic Bezier curve defined by four control points
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.sqrt((other.x - self.x) ** 2 + (other.y - self.y) ** 2)


@dataclass(frozen=True, slots=True)
class LineSegment:
    """A straight line from start to end.

    Segments never reference each other; a polyline is just a list of
    segments whose endpoints happen to coincide.

    Attributes:
        start: First endpoint
        end: Second endpoint
    """

    start: Point
    end: Point

    @classmethod
    def from_coords(cls, x0: float, y0: float, x1: float, y1: float) -> "LineSegment":
        """Build a segment from raw coordinates."""
        return cls(Point(x0, y0), Point(x1, y1))

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (x0, y0, x1, y1) tuple."""
        return (self.start.x, self.start.y, self.end.x, self.end.y)

    def length(self) -> float:
        """Euclidean length of the segment."""
        return self.start.distance_to(self.end)


@dataclass(frozen=True, slots=True)
class BezierCurve:
    """A cubic Bezier curve.

    ``p0`` is always the end point of the preceding path command; the parser
    never creates it independently.

    Attributes:
        p0: Start point
        p1: First control point
        p2: Second control point
        p3: End point
    """

    p0: Point
    p1: Point
    p2: Point
    p3: Point

    @property
    def control_points(self) -> tuple[Point, Point, Point, Point]:
        """All four control points in order."""
        return (self.p0, self.p1, self.p2, self.p3)

    def chord_length(self) -> float:
        """Approximate length as the length of the control polygon.

        This is |P0P1| + |P1P2| + |P2P3|, an upper bound on the true arc
        length. Budget allocation ranks curves by this value.

        Returns:
            Sum of the three control polygon edge lengths
        """
        points = self.control_points
        return sum(a.distance_to(b) for a, b in zip(points, points[1:]))

    def point_at(self, t: float) -> Point:
        """Evaluate the curve at parameter t.

        B(t) = (1-t)^3 P0 + 3(1-t)^2 t P1 + 3(1-t) t^2 P2 + t^3 P3

        Args:
            t: Curve parameter, 0 at p0 and 1 at p3

        Returns:
            Point on the curve
        """
        mt = 1 - t
        a = mt**3
        b = 3 * mt**2 * t
        c = 3 * mt * t**2
        d = t**3
        return Point(
            a * self.p0.x + b * self.p1.x + c * self.p2.x + d * self.p3.x,
            a * self.p0.y + b * self.p1.y + c * self.p2.y + d * self.p3.y,
        )
