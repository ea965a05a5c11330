"""Rich console output helpers for the CLI.

This module provides user-friendly console output using the Rich library.
"""

from rich.console import Console
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_WARN = "!"  # Warning
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Sightforge[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_outline_info(svg_path: str, line_count: int, curve_count: int) -> None:
    """Print what the parser found in the outline.

    Args:
        svg_path: Path to the SVG file
        line_count: Explicit lines in the path
        curve_count: Bezier curves in the path
    """
    line = Text("  ")
    line.append(svg_path)
    console.print(line)
    console.print(f"  {line_count:,} lines {SYM_DOT} {curve_count:,} curves")


def print_budget_info(
    max_lines: int,
    curve_lines: int,
    dropped_curves: int,
    verbose: bool,
    segment_counts: list[int] | None = None,
) -> None:
    """Print how the line budget was spent.

    Args:
        max_lines: Line budget in effect
        curve_lines: Lines produced from curves
        dropped_curves: Curves that received no segments
        verbose: Whether to show segment count range
        segment_counts: Segments per curve
    """
    console.print(
        f"  [green]{curve_lines:,}[/green] curve lines {SYM_DOT} budget {max_lines:,}"
    )
    if dropped_curves:
        console.print(f"  [yellow]{dropped_curves:,}[/yellow] curves dropped")
    if verbose and segment_counts:
        console.print(
            f"  {min(segment_counts)}–{max(segment_counts)} segments per curve"
        )


def print_warning(message: str) -> None:
    """Print a non-fatal warning."""
    console.print(f"\n[bold yellow]{SYM_WARN} Warning:[/bold yellow] {message}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output_path: str,
    file_size: str,
    total_time_s: float,
    total_lines: int,
    max_lines: int,
    preview_path: str | None = None,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to the sight file
        file_size: Human-readable file size string
        total_time_s: Total conversion time in seconds
        total_lines: Lines written to the sight
        max_lines: Line budget in effect
        preview_path: Path to the preview SVG, if one was written
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    if preview_path:
        preview = Text("  ")
        preview.append(preview_path)
        preview.append(" (preview)")
        console.print(preview)

    style = "red" if total_lines > max_lines else "green"
    console.print(f"  [{style}]{total_lines:,}[/{style}] of {max_lines:,} lines")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
