"""Utility functions for unistyler.

This module provides utility functions including:

- Logging setup and configuration
- Validation run statistics
"""

from unistyler.utils.logging import (
    ValidationLogger,
    ValidationStats,
    configure_logging,
)

__all__ = [
    "ValidationLogger",
    "ValidationStats",
    "configure_logging",
]
