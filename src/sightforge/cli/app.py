"""CLI application entry point for sightforge.

This module provides the main CLI interface using Typer.
"""

import warnings
from pathlib import Path
from typing import Annotated

import typer

from sightforge import __version__
from sightforge.cli.output import (
    SYM_OK,
    console,
    print_budget_info,
    print_error,
    print_header,
    print_outline_info,
    print_step,
    print_success,
    print_warning,
)
from sightforge.config import (
    DEFAULT_LINE_BUDGET,
    BudgetConfig,
    LoggingConfig,
    LogLevel,
    SightforgeSettings,
    TransformParameters,
)
from sightforge.core import ConversionResult, SightConverter
from sightforge.exceptions import (
    BudgetExhaustedWarning,
    DegenerateGeometryError,
    MalformedInputError,
    SightforgeError,
    SightWriteError,
)
from sightforge.io import SightWriter, SvgReader, render_preview_svg
from sightforge.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="sightforge",
    help="Convert traced SVG outlines into War Thunder user sights.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Sightforge[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def convert(
    input_svg: Annotated[
        Path,
        typer.Argument(
            help="Path to traced SVG outline",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}_sight.blk)",
        ),
    ] = None,
    max_lines: Annotated[
        int,
        typer.Option(
            "--max-lines",
            "-m",
            help="Maximum number of lines in the sight",
            min=1,
        ),
    ] = DEFAULT_LINE_BUDGET,
    max_segments: Annotated[
        int,
        typer.Option(
            "--max-segments",
            "-s",
            help="Maximum segments per curve (0 = spread the remaining budget evenly)",
            min=0,
        ),
    ] = 0,
    x_offset: Annotated[
        float,
        typer.Option("--x-offset", help="Horizontal shift in sight units"),
    ] = 0.0,
    y_offset: Annotated[
        float,
        typer.Option("--y-offset", help="Vertical shift in sight units"),
    ] = 0.0,
    x_scale: Annotated[
        float,
        typer.Option("--x-scale", help="Horizontal scale factor"),
    ] = 1.0,
    y_scale: Annotated[
        float,
        typer.Option("--y-scale", help="Vertical scale factor"),
    ] = 1.0,
    rotation: Annotated[
        float,
        typer.Option("--rotate", "-r", help="Rotation in degrees"),
    ] = 0.0,
    min_line_length: Annotated[
        float,
        typer.Option(
            "--min-line-length",
            help="Drop lines shorter than this (SVG units)",
            min=0.0,
        ),
    ] = 0.0,
    min_curve_length: Annotated[
        float,
        typer.Option(
            "--min-curve-length",
            help="Drop curves shorter than this (SVG units)",
            min=0.0,
        ),
    ] = 0.0,
    preview: Annotated[
        bool,
        typer.Option(
            "--preview",
            help="Also write an SVG preview next to the sight",
        ),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Convert and report without writing any file",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        LogLevel,
        typer.Option(
            "--log-level",
            help="Console logging level",
            case_sensitive=False,
        ),
    ] = LogLevel.WARNING,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Convert a traced SVG outline into a War Thunder user sight.

    Curves are split into straight lines so the sight stays under the game's
    line limit, then the outline is centered and scaled to fill the sight.

    Example:
        sightforge emblem.svg --y-offset -0.1 --x-scale 0.75 --y-scale 0.75

    This will create emblem_sight.blk next to emblem.svg.
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not input_svg.exists():
        print_error(
            f"Input file not found: {input_svg}",
            details=f"The file '{input_svg}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_svg.is_file():
        print_error(
            f"Input path is not a file: {input_svg}",
            details="Please provide a path to an SVG file.",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = SightforgeSettings(
        budget=BudgetConfig(
            max_lines=max_lines,
            max_segments_per_curve=max_segments,
            min_line_length=min_line_length,
            min_curve_length=min_curve_length,
        ),
        transform=TransformParameters(
            x_offset=x_offset,
            y_offset=y_offset,
            x_scale=x_scale,
            y_scale=y_scale,
            rotation_degrees=rotation,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else LogLevel.WARNING,
        ),
    )

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level.value,
        file_level=settings.logging.file_log_level.value,
        quiet=quiet,
    )

    output_path = output if output is not None else SightWriter.get_sight_path(input_svg)
    preview_path = SightWriter.get_preview_path(output_path) if preview else None

    for target in (output_path, preview_path):
        if target is not None and target.resolve() == input_svg.resolve():
            print_error(
                f"Refusing to overwrite the input file: {input_svg}",
                details="Choose a different --output path.",
            )
            raise typer.Exit(code=1)

    try:
        if not quiet:
            print_step("Reading outline")

        svg_text = SvgReader(input_svg).read()
        converter = SightConverter(settings, logger=logger)

        with warnings.catch_warnings():
            # Reported below from the result instead
            warnings.simplefilter("ignore", BudgetExhaustedWarning)
            result = converter.convert(svg_text)

        if not quiet:
            print_outline_info(
                svg_path=str(input_svg),
                line_count=result.explicit_line_count,
                curve_count=result.curve_count,
            )
            print_step("Flattening curves")
            print_budget_info(
                max_lines=result.max_lines,
                curve_lines=result.curve_line_count,
                dropped_curves=result.dropped_curve_count,
                verbose=verbose,
                segment_counts=result.segment_counts,
            )

        if result.budget_exhausted:
            print_warning(
                f"{result.explicit_line_count:,} straight lines use the whole budget "
                f"of {result.max_lines:,}; all curves were dropped"
            )

        if dry_run:
            if not quiet:
                _print_dry_run(result, output_path)
            raise typer.Exit(code=0)

        if not quiet:
            print_step("Writing sight")

        SightWriter(output_path).write(result.content)

        if preview_path is not None:
            SightWriter(preview_path).write(
                render_preview_svg(
                    result.lines,
                    width=settings.preview.width,
                    height=settings.preview.height,
                )
            )

        if not quiet:
            print_success(
                output_path=str(output_path),
                file_size=_format_file_size(output_path),
                total_time_s=result.stats.duration_seconds,
                total_lines=result.line_count,
                max_lines=result.max_lines,
                preview_path=str(preview_path) if preview_path else None,
            )

    except MalformedInputError as e:
        print_error(f"Could not read outline: {e.reason}")
        raise typer.Exit(code=1)
    except DegenerateGeometryError as e:
        print_error(
            str(e),
            details="The outline is a point or a straight line; trace a larger image.",
        )
        raise typer.Exit(code=1)
    except SightWriteError as e:
        print_error(f"Could not save sight: {e.reason}")
        raise typer.Exit(code=1)
    except SightforgeError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _print_dry_run(result: ConversionResult, output_path: Path) -> None:
    """Print the dry-run summary.

    Args:
        result: Conversion result
        output_path: Path the sight would be written to
    """
    console.print("\n[bold]Analysis[/bold]\n")
    console.print(f"  Straight lines        {result.explicit_line_count}")
    console.print(f"  Curves                {result.curve_count}")
    console.print(f"  Curve lines           {result.curve_line_count}")
    console.print(f"  Max segments/curve    {result.max_segments_per_curve}")
    console.print(f"  Total lines           {result.line_count} of {result.max_lines}")
    console.print(f"  Output                {output_path}")
    console.print(f"\n[bold green]{SYM_OK} Dry run complete[/bold green] – nothing written")


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "84 KB")
    """
    try:
        size_bytes = path.stat().st_size
        if size_bytes < 1024:
            return f"{size_bytes} B"
        elif size_bytes < 1024 * 1024:
            return f"{size_bytes / 1024:.0f} KB"
        else:
            return f"{size_bytes / (1024 * 1024):.1f} MB"
    except OSError:
        return "unknown"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
