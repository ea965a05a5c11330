"""Configuration management for sightforge.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- BudgetConfig: Line budget and curve subdivision settings
- TransformParameters: User offset, scale and rotation
- PreviewConfig: SVG preview settings
- LogLevel: Accepted logging levels
- LoggingConfig: Logging settings
- SightforgeSettings: Main application settings
"""

from sightforge.config.settings import (
    DEFAULT_LINE_BUDGET,
    BudgetConfig,
    LoggingConfig,
    LogLevel,
    PreviewConfig,
    SightforgeSettings,
    TransformParameters,
    get_default_settings,
)

__all__ = [
    "DEFAULT_LINE_BUDGET",
    "BudgetConfig",
    "LoggingConfig",
    "LogLevel",
    "PreviewConfig",
    "SightforgeSettings",
    "TransformParameters",
    "get_default_settings",
]
