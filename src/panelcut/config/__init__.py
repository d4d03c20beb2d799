"""Configuration management for panelcut.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- JointConfig: Finger-joint settings for one polygon edge
- LanternConfig: Laser-cut lantern template settings
- CardboardConfig: Foldable cardboard template settings
- LoggingConfig: Logging settings
- PanelcutSettings: Main application settings
"""

from panelcut.config.settings import (
    CardboardConfig,
    JointConfig,
    LanternConfig,
    LanternMode,
    LoggingConfig,
    PanelcutSettings,
    get_default_settings,
)

__all__ = [
    "CardboardConfig",
    "JointConfig",
    "LanternConfig",
    "LanternMode",
    "LoggingConfig",
    "PanelcutSettings",
    "get_default_settings",
]
