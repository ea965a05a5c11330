"""Domain models for sightforge.

This module contains the geometric models that flow through the conversion
pipeline. All models are immutable frozen dataclasses, so transform stages
can return new lists without copying segments.

Key classes:
- Point: A 2D point
- LineSegment: A straight line between two points
- BezierCurve: A cubic Bezier curve
- PathCommand: One command of an SVG path
- Frame: The fixed target box of a sight
"""

from sightforge.domain.frame import SIGHT_FRAME, Frame
from sightforge.domain.geometry import BezierCurve, LineSegment, Point
from sightforge.domain.path import CommandType, PathCommand

__all__: list[str] = [
    # Enums
    "CommandType",
    # Core types
    "Point",
    "LineSegment",
    "BezierCurve",
    "PathCommand",
    "Frame",
    # Constants
    "SIGHT_FRAME",
]
