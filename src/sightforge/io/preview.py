"""SVG preview of a sight's line set."""

from sightforge.domain import SIGHT_FRAME, LineSegment

_PATH_STYLE = 'stroke="black" fill="none" fill-rule="evenodd"'


def render_preview_svg(
    lines: list[LineSegment],
    width: float = SIGHT_FRAME.width,
    height: float = SIGHT_FRAME.height,
) -> str:
    """Render sight lines as a single-path SVG document.

    Sight coordinates are centered on the origin with one unit equal to the
    sight height, so every point is scaled by ``height`` and shifted to the
    middle of the viewBox. A segment that starts where the previous one ended
    continues the current subpath; any other segment starts a new one.

    Args:
        lines: Line segments in sight coordinates
        width: viewBox width
        height: viewBox height

    Returns:
        SVG document text
    """
    scale = height
    half_w = width / 2
    half_h = height / 2

    parts: list[str] = []
    prev: tuple[float, float] | None = None
    for line in lines:
        x0 = line.start.x * scale + half_w
        y0 = line.start.y * scale + half_h
        x1 = line.end.x * scale + half_w
        y1 = line.end.y * scale + half_h

        if prev == (x0, y0):
            parts.append(f"L {x1} {y1}")
        else:
            parts.append(f"M {x0} {y0} L {x1} {y1}")
        prev = (x1, y1)

    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" height="100%" '
        f'viewBox="0 0 {width} {height}" version="1.1">'
        f'<path d="{" ".join(parts)}" {_PATH_STYLE}></path>'
        "</svg>"
    )
