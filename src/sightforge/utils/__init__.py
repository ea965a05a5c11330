"""Utility functions for sightforge.

This module provides utility functions including:

- Logging setup and configuration
- Conversion statistics tracking
"""

from sightforge.utils.logging import (
    ConversionLogger,
    ConversionStats,
    configure_logging,
)

__all__ = [
    "ConversionLogger",
    "ConversionStats",
    "configure_logging",
]
