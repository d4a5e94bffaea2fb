"""Configuration management for unistyler.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ValidationConfig: Pack validation strictness
- EngineConfig: Style engine defaults and input limits
- PacksConfig: Pack file location
- LoggingConfig: Logging settings
- UnistylerSettings: Main application settings
"""

from unistyler.config.settings import (
    BUNDLED_PACKS_DIR,
    EngineConfig,
    LoggingConfig,
    PacksConfig,
    UnistylerSettings,
    ValidationConfig,
    get_default_settings,
)

__all__ = [
    "BUNDLED_PACKS_DIR",
    "EngineConfig",
    "LoggingConfig",
    "PacksConfig",
    "UnistylerSettings",
    "ValidationConfig",
    "get_default_settings",
]
