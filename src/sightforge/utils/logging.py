"""Logging utilities for Sightforge."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class ConversionStats:
    """Statistics from a conversion run."""

    explicit_lines: int = 0
    curves: int = 0
    curve_lines: int = 0
    trimmed_lines: int = 0
    trimmed_curves: int = 0
    dropped_curves: int = 0
    budget_exhausted: bool = False
    stage_times_ms: dict[str, float] = field(default_factory=dict)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def total_lines(self) -> int:
        """Number of lines written to the sight."""
        return self.explicit_lines + self.curve_lines

    @property
    def duration_seconds(self) -> float:
        """Calculate conversion duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(
        logging.ERROR if quiet else getattr(logging, console_level.upper())
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("sightforge")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ConversionLogger:
    """Logger for tracking conversion stages and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ConversionStats()

    def log_parse_complete(self, line_count: int, curve_count: int) -> None:
        """Log the primitives found in the SVG path."""
        self._logger.debug("Path parsed", lines=line_count, curves=curve_count)
        self._stats.explicit_lines = line_count
        self._stats.curves = curve_count

    def log_trimmed(self, lines_removed: int, curves_removed: int) -> None:
        """Log primitives removed by the minimum length filters."""
        if lines_removed or curves_removed:
            self._logger.debug(
                "Short primitives trimmed",
                lines=lines_removed,
                curves=curves_removed,
            )
        self._stats.trimmed_lines = lines_removed
        self._stats.trimmed_curves = curves_removed
        self._stats.explicit_lines -= lines_removed
        self._stats.curves -= curves_removed

    def log_budget_allocation(
        self,
        budget: int,
        curve_lines: int,
        dropped_curves: int,
    ) -> None:
        """Log how the remaining line budget was spent on curves."""
        self._logger.info(
            "Curves flattened",
            budget=budget,
            curve_lines=curve_lines,
            dropped_curves=dropped_curves,
        )
        self._stats.curve_lines = curve_lines
        self._stats.dropped_curves = dropped_curves

    def log_budget_exhausted(self, line_count: int, max_lines: int, curve_count: int) -> None:
        """Log that explicit lines left nothing for the curves."""
        self._logger.warning(
            "Line budget exhausted by explicit lines",
            lines=line_count,
            max_lines=max_lines,
            dropped_curves=curve_count,
        )
        self._stats.budget_exhausted = True
        self._stats.curve_lines = 0
        self._stats.dropped_curves = curve_count

    def log_stage(self, stage: str, duration_ms: float) -> None:
        """Log completion time of a pipeline stage."""
        self._logger.debug("Stage complete", stage=stage, duration_ms=round(duration_ms, 2))
        self._stats.stage_times_ms[stage] = duration_ms

    def log_conversion_error(self, stage: str, error: Exception) -> None:
        """Log a failed conversion."""
        self._logger.error(
            "Conversion failed",
            stage=stage,
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> ConversionStats:
        """Get current conversion statistics."""
        return self._stats
