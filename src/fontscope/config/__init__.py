"""Configuration management for fontscope.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- LayoutConfig: Padding, line height and coordinate precision
- FontConfig: Font directories and collection face index
- LoggingConfig: Logging settings
- FontScopeSettings: Main application settings
"""

from fontscope.config.settings import (
    FontConfig,
    FontScopeSettings,
    LayoutConfig,
    LoggingConfig,
    get_default_settings,
)

__all__ = [
    "FontConfig",
    "FontScopeSettings",
    "LayoutConfig",
    "LoggingConfig",
    "get_default_settings",
]
