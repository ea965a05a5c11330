"""Line budget allocation for Bezier curves.

War Thunder sights are limited to a fixed number of line primitives. The
budgeter decides how many straight segments each curve may be split into so
that the total never exceeds the budget, then flattens the curves.

Segments are handed out in rounds: while the remaining budget covers one more
segment for every curve, all curves get one. The leftover budget that cannot
cover a full round goes one segment at a time to the longest curves that have
not yet received the current round's segment.
"""

import math
from dataclasses import dataclass

from sightforge.config import DEFAULT_LINE_BUDGET
from sightforge.core._bezier import flatten_cubic
from sightforge.domain import BezierCurve, LineSegment


@dataclass
class CurveBudgetEntry:
    """Budget record for one curve.

    Attributes:
        curve: The curve being budgeted
        approx_length: Control polygon length used for ranking
        segment_count: Lines allocated so far (only ever increases)
    """

    curve: BezierCurve
    approx_length: float
    segment_count: int = 0


def resolve_max_lines(max_lines: int | None) -> int:
    """Fall back to the default budget for missing or non-positive values."""
    if max_lines is None or max_lines <= 0:
        return DEFAULT_LINE_BUDGET
    return max_lines


def default_segments_per_curve(line_count: int, curve_count: int, max_lines: int) -> int:
    """Segments per curve that spread the budget left after explicit lines.

    Args:
        line_count: Number of explicit lines
        curve_count: Number of curves
        max_lines: Total line budget

    Returns:
        ceil((max_lines - line_count) / curve_count), or 1 when there are
        no curves
    """
    if curve_count == 0:
        return 1
    return math.ceil((max_lines - line_count) / curve_count)


class CurveBudgeter:
    """Splits Bezier curves into straight lines under a global line budget.

    Example:
        budgeter = CurveBudgeter()
        lines = budgeter.allocate(curves, max_lines=2000)
    """

    def plan(
        self,
        curves: list[BezierCurve],
        max_lines: int | None = None,
        max_segments_per_curve: int | None = None,
    ) -> list[CurveBudgetEntry]:
        """Decide how many segments each curve gets.

        Args:
            curves: Curves to budget, in path order
            max_lines: Total lines available (default budget if None or <= 0)
            max_segments_per_curve: Cap on segments per curve (None or 0 means
                ceil(max_lines / len(curves)))

        Returns:
            One entry per input curve, in input order
        """
        if not curves:
            return []

        limit = resolve_max_lines(max_lines)
        if max_segments_per_curve is None or max_segments_per_curve == 0:
            max_segments_per_curve = math.ceil(limit / len(curves))

        entries = [CurveBudgetEntry(curve, curve.chord_length()) for curve in curves]
        count = len(entries)

        total = 0
        rounds = 0
        while total < limit and rounds < max_segments_per_curve:
            if total + count <= limit:
                for entry in entries:
                    entry.segment_count += 1
                total += count
                rounds += 1
                continue

            # Partial round: the budget left is smaller than the curve count,
            # so at least one eligible entry always exists here
            index = self._longest_eligible(entries, rounds + 1)
            entries[index].segment_count += 1
            total += 1

        return entries

    @staticmethod
    def _longest_eligible(entries: list[CurveBudgetEntry], round_target: int) -> int:
        """Index of the longest entry still below ``round_target`` segments.

        Strict comparison keeps the first entry on ties.
        """
        best: int | None = None
        for i, entry in enumerate(entries):
            if entry.segment_count >= round_target:
                continue
            if best is None or entry.approx_length > entries[best].approx_length:
                best = i

        if best is None:
            raise RuntimeError("No curve eligible for a partial-round segment")
        return best

    def flatten(self, entries: list[CurveBudgetEntry]) -> list[LineSegment]:
        """Flatten planned curves into lines, in entry order.

        Curves planned with zero segments contribute nothing.
        """
        lines: list[LineSegment] = []
        for entry in entries:
            lines.extend(flatten_cubic(entry.curve, entry.segment_count))
        return lines

    def allocate(
        self,
        curves: list[BezierCurve],
        max_lines: int | None = None,
        max_segments_per_curve: int | None = None,
    ) -> list[LineSegment]:
        """Plan and flatten curves in one step.

        Args:
            curves: Curves to flatten
            max_lines: Total lines available (default budget if None or <= 0)
            max_segments_per_curve: Cap on segments per curve (None or 0 for
                automatic)

        Returns:
            Line segments of all curves, in curve order; never more than
            the resolved ``max_lines``
        """
        return self.flatten(self.plan(curves, max_lines, max_segments_per_curve))


def allocate_curve_lines(
    curves: list[BezierCurve],
    max_lines: int | None = None,
    max_segments_per_curve: int | None = None,
) -> list[LineSegment]:
    """Convenience wrapper around CurveBudgeter.allocate."""
    return CurveBudgeter().allocate(curves, max_lines, max_segments_per_curve)
