"""Utility functions for fontscope.

This module provides utility functions including:

- Logging setup and configuration
- Per-call generation statistics
"""

from fontscope.utils.logging import (
    GenerationLogger,
    GenerationStats,
    configure_logging,
    get_logger,
)

__all__ = [
    "GenerationLogger",
    "GenerationStats",
    "configure_logging",
    "get_logger",
]
