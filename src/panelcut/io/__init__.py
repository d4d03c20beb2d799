"""Template I/O layer for panelcut.

This module turns accumulated shapes into SVG documents using svgwrite
and writes them to disk.

Key responsibilities:
- Collect path and circle shapes grouped by kind
- Serialize with a physical size in millimeters
- Write files with the default naming convention

Key classes:
- DrawingSurface: Append-only shape collection with SVG serialization
- TemplateWriter: Save a surface to an SVG file
"""

from panelcut.io.surface import DrawingSurface
from panelcut.io.writer import TemplateWriter

__all__ = [
    "DrawingSurface",
    "TemplateWriter",
]
