"""Core processing algorithms for sightforge.

This module contains the core algorithms for:

- SVG path parsing (M, L and C commands)
- Line budget allocation and curve flattening
- Placement (fit to sight frame, offset, scale, rotate)
- Conversion orchestration

All functions are:
- Stateless (no state kept between calls)
- Pure (inputs are never mutated)

Key functions:
- parse_svg_path: SVG text to lines and curves
- allocate_curve_lines: Flatten curves under a line budget
- fit_to_frame: Center and scale lines into the sight frame
- apply_user_transform: Apply user offset, scale and rotation

Key classes:
- PathParser: Parses SVG paths
- CurveBudgeter: Plans and flattens curves under a line budget
- SightConverter: Runs the whole pipeline
"""

from sightforge.core.parser import PathParser, parse_svg_path, tokenize
from sightforge.core.budget import (
    CurveBudgeter,
    CurveBudgetEntry,
    allocate_curve_lines,
    default_segments_per_curve,
)
from sightforge.core.transform import (
    apply_user_transform,
    bounding_box,
    fit_to_frame,
    offset_lines,
    rotate_lines,
    scale_lines,
    trim_curves,
    trim_lines,
)
from sightforge.core.converter import ConversionResult, SightConverter, convert_svg

__all__ = [
    "ConversionResult",
    "CurveBudgetEntry",
    "CurveBudgeter",
    "PathParser",
    "SightConverter",
    "allocate_curve_lines",
    "apply_user_transform",
    "bounding_box",
    "convert_svg",
    "default_segments_per_curve",
    "fit_to_frame",
    "offset_lines",
    "parse_svg_path",
    "rotate_lines",
    "scale_lines",
    "tokenize",
    "trim_curves",
    "trim_lines",
]
