"""Configuration settings for Sightforge."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

# War Thunder refuses to load sights with more line primitives than this
DEFAULT_LINE_BUDGET = 2500


class BudgetConfig(BaseModel):
    """Configuration for splitting curves into lines under the line budget."""

    max_lines: int = Field(
        default=DEFAULT_LINE_BUDGET,
        ge=1,
        description="Maximum number of lines in the sight (explicit lines plus flattened curves)",
    )
    max_segments_per_curve: int = Field(
        default=0,
        ge=0,
        description="Maximum segments per curve (0 = spread the whole budget)",
    )
    min_line_length: float = Field(
        default=0.0,
        ge=0.0,
        description="Drop explicit lines shorter than this, in SVG units",
    )
    min_curve_length: float = Field(
        default=0.0,
        ge=0.0,
        description="Drop curves whose control polygon is shorter than this, in SVG units",
    )


class TransformParameters(BaseModel):
    """User placement of the fitted outline inside the sight.

    Applied after the outline has been fitted to the sight frame, in the
    fixed order offset, scale, rotate.
    """

    model_config = ConfigDict(frozen=True)

    x_offset: float = Field(default=0.0, description="Horizontal shift in sight units")
    y_offset: float = Field(default=0.0, description="Vertical shift in sight units")
    x_scale: float = Field(default=1.0, description="Horizontal scale factor")
    y_scale: float = Field(default=1.0, description="Vertical scale factor")
    rotation_degrees: float = Field(
        default=0.0,
        description="Rotation around the outline center, in degrees",
    )

    @property
    def is_identity(self) -> bool:
        """True when applying these parameters changes nothing."""
        return (
            self.x_offset == 0
            and self.y_offset == 0
            and self.x_scale == 1
            and self.y_scale == 1
            and self.rotation_degrees == 0
        )


class PreviewConfig(BaseModel):
    """Configuration for the SVG preview of the final lines."""

    width: float = Field(
        default=1777.0,
        gt=0.0,
        description="Preview viewBox width",
    )
    height: float = Field(
        default=1000.0,
        gt=0.0,
        description="Preview viewBox height (one sight unit maps to this many pixels)",
    )


class LogLevel(str, Enum):
    """Accepted logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default=LogLevel.DEBUG,
        description="File log level (more verbose)",
    )


class SightforgeSettings(BaseModel):
    """Main application settings."""

    budget: BudgetConfig = Field(default_factory=BudgetConfig)
    transform: TransformParameters = Field(default_factory=TransformParameters)
    preview: PreviewConfig = Field(default_factory=PreviewConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> SightforgeSettings:
    """Get default application settings."""
    return SightforgeSettings()
