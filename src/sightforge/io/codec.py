"""War Thunder sight (``.blk``) rendering.

A sight file is a fixed block of display settings and ranging tables
followed by a ``drawLines`` block with one ``line`` directive per segment.
Everything except the generated line directives is a literal constant.
"""

from sightforge.domain import LineSegment

# Scalar and vector settings at the top of the file
PREAMBLE: tuple[str, ...] = (
    "crosshairHorVertSize:p2=3, 2",
    "rangefinderProgressBarColor1:c=0, 255, 0, 64",
    "rangefinderProgressBarColor2:c=255, 255, 255, 64",
    "rangefinderTextScale:r=0.7",
    "rangefinderUseThousandth:b=no",
    "rangefinderVerticalOffset:r=0.1",
    "rangefinderHorizontalOffset:r=5",
    "detectAllyTextScale:r=0.7",
    "detectAllyOffset:p2=4, 0.05",
    "fontSizeMult:r=1",
    "lineSizeMult:r=1",
    "drawCentralLineVert:b=yes",
    "drawCentralLineHorz:b=yes",
    "drawSightMask:b=yes",
    "useSmoothEdge:b=yes",
    "crosshairColor:c=0, 0, 0, 0",
    "crosshairLightColor:c=0, 0, 0, 0",
    "crosshairDistHorSizeMain:p2=0.03, 0.02",
    "crosshairDistHorSizeAdditional:p2=0.005, 0.003",
    "distanceCorrectionPos:p2=-0.26, -0.05",
    "drawDistanceCorrection:b=yes",
)

# (distance in meters, mark size, unused)
CROSSHAIR_DISTANCES: tuple[tuple[int, int, int], ...] = (
    (200, 0, 0),
    (400, 4, 0),
    (600, 0, 0),
    (800, 8, 0),
    (1000, 0, 0),
    (1200, 12, 0),
    (1400, 0, 0),
    (1600, 16, 0),
    (1800, 0, 0),
    (2000, 20, 0),
    (2200, 0, 0),
    (2400, 24, 0),
    (2600, 0, 0),
    (2800, 28, 0),
    (3000, 0, 0),
    (3200, 32, 0),
    (3400, 0, 0),
    (3600, 36, 0),
    (3800, 0, 0),
    (4000, 40, 0),
    (4200, 0, 0),
    (4400, 44, 0),
    (4600, 0, 0),
    (4800, 48, 0),
    (5000, 0, 0),
    (5200, 52, 0),
    (5400, 0, 0),
    (5600, 56, 0),
    (5800, 0, 0),
    (6000, 60, 0),
)

# (horizontal thousandths, label)
CROSSHAIR_HOR_RANGES: tuple[tuple[int, int], ...] = (
    (-32, 32),
    (-28, 0),
    (-24, 24),
    (-20, 0),
    (-16, 16),
    (-12, 0),
    (-8, 8),
    (-4, 0),
    (4, 0),
    (8, 8),
    (12, 0),
    (16, 16),
    (20, 0),
    (24, 24),
    (28, 0),
    (32, 32),
)

# Vehicle classes the sight applies to
MATCH_EXP_CLASS: tuple[str, ...] = (
    "exp_tank",
    "exp_heavy_tank",
    "exp_tank_destroyer",
    "exp_SPAA",
)

# Zero-length line that always opens the drawLines block
FIXTURE_LINE: tuple[str, ...] = (
    "  line{",
    "    line:p4=0, 0, 0, 0",
    "    move:b=no",
    "  }",
)


def _join_numbers(values: tuple[int, ...] | tuple[float, ...]) -> str:
    return ", ".join(str(v) for v in values)


def _build_header() -> str:
    parts = list(PREAMBLE)
    parts.append("")
    parts.append("crosshair_distances{")
    parts.extend(f"  distance:p3={_join_numbers(row)}" for row in CROSSHAIR_DISTANCES)
    parts.append("}")
    parts.append("")
    parts.append("crosshair_hor_ranges{")
    parts.extend(f"  range:p2={_join_numbers(row)}" for row in CROSSHAIR_HOR_RANGES)
    parts.append("}")
    parts.append("")
    parts.append("matchExpClass {")
    parts.extend(f"  {name}:b = yes" for name in MATCH_EXP_CLASS)
    parts.append("}")
    parts.append("")
    parts.append("drawLines{")
    parts.extend(FIXTURE_LINE)
    return "\n".join(parts)


# Everything up to and including the fixture line; identical for every sight
STATIC_HEADER = _build_header()
FOOTER = "}\n"


def format_bool(value: bool) -> str:
    """Render a boolean the way blk files spell it."""
    return "yes" if value else "no"


def format_number(value: float) -> str:
    """Render a coordinate with Python's default float text conversion.

    No rounding is applied, so the shortest string that round-trips to the
    same float is written (exponent notation for very small or large values).
    """
    return repr(float(value))


def format_line(segment: LineSegment, thousandth: bool = False, move: bool = False) -> str:
    """Render one ``line`` directive.

    Args:
        segment: Segment to draw
        thousandth: Coordinates are in thousandths instead of screen units
        move: Line moves with the rangefinder instead of being drawn fixed

    Returns:
        Single-line directive text
    """
    coords = ", ".join(format_number(v) for v in segment.to_tuple())
    return (
        f"line{{ line:p4 = {coords}; "
        f"thousandth:b = {format_bool(thousandth)}; "
        f"move:b = {format_bool(move)} }}"
    )


class SightCodec:
    """Renders line sets as War Thunder sight files.

    The codec does not enforce the line budget; it renders every segment
    it is given.

    Example:
        codec = SightCodec()
        content = codec.render(lines)
    """

    def render(
        self,
        lines: list[LineSegment],
        thousandth: bool = False,
        move: bool = False,
    ) -> str:
        """Render a complete sight file.

        Args:
            lines: Final line segments in sight coordinates
            thousandth: Value of every directive's thousandth flag
            move: Value of every directive's move flag

        Returns:
            Sight file text
        """
        body = [f"  {format_line(line, thousandth, move)}" for line in lines]
        return "\n".join([STATIC_HEADER, *body, FOOTER])

    def count_directives(self, content: str) -> int:
        """Count ``line`` directives in rendered sight text, fixture included."""
        return sum(1 for row in content.splitlines() if row.lstrip().startswith("line{"))


def render_sight(lines: list[LineSegment]) -> str:
    """Render a sight file with default flags.

    Convenience wrapper around SightCodec.render.
    """
    return SightCodec().render(lines)
