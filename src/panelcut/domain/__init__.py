"""Domain models for panelcut.

This module contains the value types the layout engine works with. All
models are immutable (frozen dataclasses).

Key classes:
- Vector: A 2D point or direction in millimeters
- StyleProfile: Stroke style of a drawn shape (cut, fold, debug)
- PathShape: A polyline with a style profile
- CircleShape: A circle with a style profile
"""

from panelcut.domain.shapes import CircleShape, PathShape, Shape, StyleProfile, format_number
from panelcut.domain.vector import ORIGIN, Vector

__all__: list[str] = [
    # Enums
    "StyleProfile",
    # Core types
    "ORIGIN",
    "Vector",
    "PathShape",
    "CircleShape",
    "Shape",
    "format_number",
]
