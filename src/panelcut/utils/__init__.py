"""Utility functions for panelcut.

This module provides utility functions including:

- Logging setup and configuration
- Layout statistics tracking
"""

from panelcut.utils.logging import (
    LayoutLogger,
    LayoutStats,
    configure_logging,
)

__all__ = [
    "LayoutLogger",
    "LayoutStats",
    "configure_logging",
]
