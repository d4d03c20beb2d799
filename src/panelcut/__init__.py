"""Panelcut - Vector templates with finger joints for construction panels.

Panelcut lays out laser-cut and foldable cardboard panels as SVG documents.
The geometry engine turns polygon outlines into outlines with interlocking
finger joints ("teeth"), builds regular polygons for multi-sided plates and
serializes everything with a declared physical size in millimeters.

Example:
    $ panelcut lantern --mode print-once

This will create lantern-print-once.svg with the base, top and end plates.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
