"""Conversion orchestration for the sight pipeline.

This module runs a single SVG outline through every stage:
parse, trim, budget, fit, transform and render.

Key components:
- ConversionResult: Output lines, rendered sight and counts
- SightConverter: Main orchestrator class
"""

import time
import warnings
from dataclasses import dataclass, field

import structlog

from sightforge.config import SightforgeSettings, TransformParameters
from sightforge.core.budget import CurveBudgeter, default_segments_per_curve
from sightforge.core.parser import PathParser
from sightforge.core.transform import (
    apply_user_transform,
    fit_to_frame,
    trim_curves,
    trim_lines,
)
from sightforge.domain import LineSegment
from sightforge.exceptions import BudgetExhaustedWarning, SightforgeError
from sightforge.io.codec import SightCodec
from sightforge.utils import ConversionLogger, ConversionStats


@dataclass
class ConversionResult:
    """Outcome of converting one outline.

    Attributes:
        fitted_lines: All lines after fitting to the sight frame, before
            user transforms
        lines: Final lines written to the sight
        content: Rendered sight file text
        explicit_line_count: Straight lines taken directly from the path
        curve_count: Curves found in the path
        segment_counts: Segments allocated to each curve, in path order
        max_lines: Line budget in effect
        max_segments_per_curve: Per-curve segment cap used for planning
            (0 when the budget was exhausted)
        budget_exhausted: True if explicit lines left no budget for curves
        stats: Stage timings and counts
    """

    fitted_lines: list[LineSegment]
    lines: list[LineSegment]
    content: str
    explicit_line_count: int
    curve_count: int
    segment_counts: list[int]
    max_lines: int
    max_segments_per_curve: int = 0
    budget_exhausted: bool = False
    stats: ConversionStats = field(default_factory=ConversionStats)

    @property
    def curve_line_count(self) -> int:
        """Lines produced by flattening curves."""
        return sum(self.segment_counts)

    @property
    def line_count(self) -> int:
        """Total lines in the sight, excluding the fixture line."""
        return len(self.lines)

    @property
    def dropped_curve_count(self) -> int:
        """Curves that received no segments."""
        return sum(1 for n in self.segment_counts if n == 0)


class SightConverter:
    """Orchestrates conversion of an SVG outline into a sight.

    Manages the complete workflow:
    1. Parse the first SVG path into lines and curves
    2. Drop primitives shorter than the configured minimums
    3. Flatten curves with the budget left after explicit lines
    4. Fit everything into the sight frame
    5. Apply user offset, scale and rotation
    6. Render the sight file

    Example:
        converter = SightConverter(SightforgeSettings())
        result = converter.convert(svg_text)
        Path("emblem_sight.blk").write_text(result.content)
    """

    def __init__(
        self,
        config: SightforgeSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the converter.

        Args:
            config: Settings (defaults if None)
            logger: Logger to report to (module logger if None)
        """
        self.config = config if config is not None else SightforgeSettings()
        self.logger = logger if logger is not None else structlog.get_logger("sightforge")
        self.parser = PathParser()
        self.budgeter = CurveBudgeter()
        self.codec = SightCodec()

    def convert(
        self,
        svg_text: str,
        transform: TransformParameters | None = None,
    ) -> ConversionResult:
        """Convert SVG text into a sight.

        Args:
            svg_text: SVG document produced by the outline tracer
            transform: User placement (settings' transform if None)

        Returns:
            ConversionResult with final lines and rendered content

        Raises:
            MalformedInputError: If the SVG has no usable path
            DegenerateGeometryError: If the outline has zero width or height
        """
        budget = self.config.budget
        params = transform if transform is not None else self.config.transform
        conversion_logger = ConversionLogger(self.logger)
        stats = conversion_logger.stats
        stats.start_time = time.time()

        stage = "parse"
        try:
            stage_start = time.perf_counter()
            lines, curves = self.parser.parse(svg_text)
            conversion_logger.log_parse_complete(len(lines), len(curves))
            conversion_logger.log_stage(stage, _elapsed_ms(stage_start))

            stage = "trim"
            kept_lines = trim_lines(lines, budget.min_line_length)
            kept_curves = trim_curves(curves, budget.min_curve_length)
            conversion_logger.log_trimmed(
                len(lines) - len(kept_lines), len(curves) - len(kept_curves)
            )
            lines, curves = kept_lines, kept_curves

            stage = "budget"
            stage_start = time.perf_counter()
            remaining = budget.max_lines - len(lines)
            exhausted = remaining <= 0 and len(curves) > 0
            if exhausted:
                warnings.warn(
                    BudgetExhaustedWarning(len(lines), budget.max_lines), stacklevel=2
                )
                conversion_logger.log_budget_exhausted(
                    len(lines), budget.max_lines, len(curves)
                )
                segment_counts = [0] * len(curves)
                segment_cap = 0
                curve_lines: list[LineSegment] = []
            else:
                segment_cap = budget.max_segments_per_curve or default_segments_per_curve(
                    len(lines), len(curves), budget.max_lines
                )
                entries = self.budgeter.plan(curves, remaining, segment_cap)
                segment_counts = [entry.segment_count for entry in entries]
                curve_lines = self.budgeter.flatten(entries)
                conversion_logger.log_budget_allocation(
                    remaining,
                    len(curve_lines),
                    sum(1 for n in segment_counts if n == 0),
                )
            conversion_logger.log_stage(stage, _elapsed_ms(stage_start))

            stage = "fit"
            stage_start = time.perf_counter()
            fitted = fit_to_frame(lines + curve_lines)
            conversion_logger.log_stage(stage, _elapsed_ms(stage_start))

            stage = "transform"
            stage_start = time.perf_counter()
            final = apply_user_transform(fitted, params)
            conversion_logger.log_stage(stage, _elapsed_ms(stage_start))

            stage = "render"
            stage_start = time.perf_counter()
            content = self.codec.render(final)
            conversion_logger.log_stage(stage, _elapsed_ms(stage_start))
        except SightforgeError as e:
            conversion_logger.log_conversion_error(stage, e)
            raise

        stats.end_time = time.time()
        self.logger.info(
            "Sight converted",
            lines=len(final),
            explicit_lines=len(lines),
            curves=len(curves),
            budget_exhausted=exhausted,
        )

        return ConversionResult(
            fitted_lines=fitted,
            lines=final,
            content=content,
            explicit_line_count=len(lines),
            curve_count=len(curves),
            segment_counts=segment_counts,
            max_lines=budget.max_lines,
            max_segments_per_curve=segment_cap,
            budget_exhausted=exhausted,
            stats=stats,
        )

    def retransform(
        self,
        result: ConversionResult,
        transform: TransformParameters,
    ) -> ConversionResult:
        """Re-place an already converted outline with new user parameters.

        Parsing, budgeting and fitting are reused from ``result``.

        Args:
            result: A previous conversion
            transform: New user placement

        Returns:
            New ConversionResult sharing the fitted lines and counts
        """
        final = apply_user_transform(result.fitted_lines, transform)
        self.logger.debug("Sight re-transformed", lines=len(final))
        return ConversionResult(
            fitted_lines=result.fitted_lines,
            lines=final,
            content=self.codec.render(final),
            explicit_line_count=result.explicit_line_count,
            curve_count=result.curve_count,
            segment_counts=list(result.segment_counts),
            max_lines=result.max_lines,
            max_segments_per_curve=result.max_segments_per_curve,
            budget_exhausted=result.budget_exhausted,
            stats=result.stats,
        )


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


def convert_svg(
    svg_text: str,
    settings: SightforgeSettings | None = None,
    transform: TransformParameters | None = None,
) -> ConversionResult:
    """Convert SVG text into a sight with a one-off converter."""
    return SightConverter(settings).convert(svg_text, transform)
