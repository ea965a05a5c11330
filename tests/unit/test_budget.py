"""Unit tests for curve budget allocation and flattening."""

import pytest

from sightforge.core._bezier import flatten_cubic
from sightforge.core.budget import (
    CurveBudgeter,
    allocate_curve_lines,
    default_segments_per_curve,
    resolve_max_lines,
)
from sightforge.domain import BezierCurve, Point


def straight_curve(length: float, y: float = 0.0) -> BezierCurve:
    """Curve with evenly spaced collinear control points.

    Its chord length equals ``length`` and it is traced at constant speed.
    """
    step = length / 3
    return BezierCurve(
        Point(0, y), Point(step, y), Point(2 * step, y), Point(length, y)
    )


def arch(width: float) -> BezierCurve:
    """A curved arch of the given width."""
    return BezierCurve(Point(0, 0), Point(0, width), Point(width, width), Point(width, 0))


@pytest.fixture
def budgeter() -> CurveBudgeter:
    """Create a CurveBudgeter instance."""
    return CurveBudgeter()


@pytest.fixture
def mixed_curves() -> list[BezierCurve]:
    """Curves of distinct lengths in non-sorted order."""
    return [arch(3), straight_curve(9), arch(1), straight_curve(4), arch(7)]


class TestPlan:
    """Tests for CurveBudgeter.plan."""

    def test_empty(self, budgeter):
        """Test no curves yields no entries."""
        assert budgeter.plan([], 10) == []

    def test_two_curves_three_lines(self, budgeter):
        """Test leftover line goes to the longer curve."""
        long_curve, short_curve = straight_curve(10), straight_curve(2)
        entries = budgeter.plan([long_curve, short_curve], max_lines=3, max_segments_per_curve=0)
        assert [e.segment_count for e in entries] == [2, 1]

    def test_leftover_follows_length_not_position(self, budgeter):
        """Test the longer curve wins even when listed second."""
        entries = budgeter.plan([straight_curve(2), straight_curve(10)], max_lines=3)
        assert [e.segment_count for e in entries] == [1, 2]

    def test_tie_goes_to_first(self, budgeter):
        """Test equal lengths resolve to the first curve in input order."""
        entries = budgeter.plan([straight_curve(5), straight_curve(5, y=1)], max_lines=3)
        assert [e.segment_count for e in entries] == [2, 1]

    def test_leftover_spread_by_rank(self, budgeter, mixed_curves):
        """Test a partial round serves the longest curves, one each."""
        # 5 curves, 13 lines: two full rounds plus 3 leftovers
        entries = budgeter.plan(mixed_curves, max_lines=13)
        counts = [e.segment_count for e in entries]
        # lengths: 9, 9, 3, 4, 21 -> leftovers to 21, then the first 9, then the second 9
        assert counts == [3, 3, 2, 2, 3]

    def test_zero_length_curves_compete_last(self, budgeter):
        """Test a degenerate curve only gets leftovers after real curves."""
        point = BezierCurve(Point(1, 1), Point(1, 1), Point(1, 1), Point(1, 1))
        entries = budgeter.plan([point, straight_curve(1)], max_lines=3)
        assert [e.approx_length for e in entries] == [0.0, pytest.approx(1.0)]
        assert [e.segment_count for e in entries] == [1, 2]

    def test_all_zero_length(self, budgeter):
        """Test degenerate curves still consume the budget in input order."""
        point = BezierCurve(Point(1, 1), Point(1, 1), Point(1, 1), Point(1, 1))
        entries = budgeter.plan([point, point], max_lines=3)
        assert [e.segment_count for e in entries] == [2, 1]

    def test_default_max_lines(self, budgeter):
        """Test missing or non-positive budgets fall back to 2500."""
        for max_lines in (None, 0, -5):
            entries = budgeter.plan([straight_curve(1)], max_lines=max_lines)
            assert entries[0].segment_count == 2500

    def test_default_segments_per_curve(self, budgeter):
        """Test automatic per-curve cap is ceil(max_lines / curves)."""
        curves = [straight_curve(1), straight_curve(2), straight_curve(3)]
        entries = budgeter.plan(curves, max_lines=10)
        assert [e.segment_count for e in entries] == [3, 3, 4]

    def test_segments_per_curve_cap(self, budgeter):
        """Test an explicit per-curve cap stops allocation early."""
        entries = budgeter.plan([arch(1), arch(2)], max_lines=100, max_segments_per_curve=3)
        assert [e.segment_count for e in entries] == [3, 3]

    def test_budget_smaller_than_curve_count(self, budgeter, mixed_curves):
        """Test some curves are dropped when the budget cannot cover all."""
        entries = budgeter.plan(mixed_curves, max_lines=2)
        assert [e.segment_count for e in entries] == [1, 0, 0, 0, 1]

    def test_approx_length_is_chord_length(self, budgeter, mixed_curves):
        """Test entries carry the chord proxy of their curve."""
        entries = budgeter.plan(mixed_curves, max_lines=10)
        for entry, curve in zip(entries, mixed_curves):
            assert entry.curve is curve
            assert entry.approx_length == curve.chord_length()


class TestBudgetProperties:
    """Invariant checks over a range of budgets."""

    @pytest.mark.parametrize("max_lines", [1, 2, 4, 5, 7, 12, 25, 64])
    def test_never_exceeds_budget(self, budgeter, mixed_curves, max_lines):
        """Test output line count never exceeds max_lines."""
        assert len(budgeter.allocate(mixed_curves, max_lines)) <= max_lines

    @pytest.mark.parametrize("max_lines", [1, 3, 6, 11, 30])
    def test_counts_match_output(self, budgeter, mixed_curves, max_lines):
        """Test emitted segments equal the sum of planned counts."""
        entries = budgeter.plan(mixed_curves, max_lines)
        lines = budgeter.flatten(entries)
        assert len(lines) == sum(e.segment_count for e in entries)

    def test_monotonic_in_budget(self, budgeter, mixed_curves):
        """Test raising the budget never takes segments away from a curve."""
        previous = [0] * len(mixed_curves)
        for max_lines in range(1, 40):
            counts = [e.segment_count for e in budgeter.plan(mixed_curves, max_lines)]
            assert all(now >= before for now, before in zip(counts, previous))
            previous = counts


class TestFlatten:
    """Tests for flattening planned curves."""

    def test_zero_segments(self):
        """Test a curve with no segments emits nothing."""
        assert flatten_cubic(arch(1), 0) == []

    def test_segment_count(self):
        """Test exactly k segments are produced."""
        for k in (1, 2, 3, 7, 10, 100, 999):
            assert len(flatten_cubic(arch(1), k)) == k

    def test_chained_from_p0(self):
        """Test segments start at p0 and connect end to start."""
        curve = arch(2)
        lines = flatten_cubic(curve, 5)
        assert lines[0].start == curve.p0
        for a, b in zip(lines, lines[1:]):
            assert a.end == b.start
        assert lines[-1].end.x == pytest.approx(curve.p3.x)
        assert lines[-1].end.y == pytest.approx(curve.p3.y, abs=1e-12)

    def test_even_steps_on_straight_curve(self):
        """Test parameter steps of 1/k on a constant-speed curve."""
        lines = flatten_cubic(straight_curve(3), 3)
        assert [line.end.x for line in lines] == pytest.approx([1.0, 2.0, 3.0])

    def test_allocate_output_order(self, budgeter):
        """Test lines follow curve input order."""
        first = straight_curve(3, y=0)
        second = straight_curve(3, y=5)
        lines = budgeter.allocate([first, second], max_lines=4)
        assert [line.start.y for line in lines] == [0, 0, 5, 5]

    def test_allocate_empty(self, budgeter):
        """Test no curves yields no lines."""
        assert budgeter.allocate([]) == []

    def test_convenience_function(self, mixed_curves):
        """Test allocate_curve_lines matches CurveBudgeter.allocate."""
        assert allocate_curve_lines(mixed_curves, 9) == CurveBudgeter().allocate(mixed_curves, 9)


class TestHelpers:
    """Tests for budget helper functions."""

    def test_resolve_max_lines(self):
        """Test fallback to the default budget."""
        assert resolve_max_lines(None) == 2500
        assert resolve_max_lines(-1) == 2500
        assert resolve_max_lines(40) == 40

    def test_default_segments_per_curve(self):
        """Test spreading the budget left after explicit lines."""
        assert default_segments_per_curve(100, 4, 2500) == 600
        assert default_segments_per_curve(0, 3, 10) == 4

    def test_default_segments_without_curves(self):
        """Test one segment is reported when there are no curves."""
        assert default_segments_per_curve(0, 0, 2500) == 1
        assert default_segments_per_curve(12, 0, 2500) == 1
