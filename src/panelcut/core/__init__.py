"""Core layout algorithms for panelcut.

This module contains the geometry engine and the template layouts:

- Regular polygon geometry (radius/edge conversions, vertex rings)
- Finger-joint generation (tooth patterns, tooth spans)
- Shape assembly (rectangle strips, points along lines, shape builders)
- Template layouts (laser-cut lantern, foldable cardboard lantern)

The geometry functions are:
- Stateless
- Pure (no side effects)

Key functions:
- radius_for_sides: Circumradius for a given edge length
- edge_length_for_sides: Edge length for a given circumradius
- apothem: Center-to-edge distance
- polygon_vertices: Closed vertex ring of a regular polygon
- apply_teeth: Replace polyline edges by finger-joint patterns
- tooth_spans: Start/end points of each tooth along an edge
- rectangle_strip: Oriented rectangle along a segment
- point_along_line: Point at a fixed distance towards another point
- path_of / circle_of: Wrap geometry as drawable shapes

Key classes:
- LanternLayout: Laser-cut lantern parts
- CardboardLayout: Foldable cardboard lantern
- TemplateGenerator: Build, log and save a template
"""

from panelcut.core.assembly import circle_of, path_of, point_along_line, rectangle_strip
from panelcut.core.cardboard import CardboardLayout
from panelcut.core.generator import TemplateGenerator, TemplateKind
from panelcut.core.lantern import LanternLayout
from panelcut.core.regularoid import (
    apothem,
    edge_length_for_sides,
    polygon_vertices,
    radius_for_sides,
)
from panelcut.core.teeth import apply_teeth, edge_teeth, tooth_spans

__all__ = [
    # Layout classes
    "CardboardLayout",
    "LanternLayout",
    "TemplateGenerator",
    "TemplateKind",
    # Geometry functions
    "apothem",
    "apply_teeth",
    "circle_of",
    "edge_length_for_sides",
    "edge_teeth",
    "path_of",
    "point_along_line",
    "polygon_vertices",
    "radius_for_sides",
    "rectangle_strip",
    "tooth_spans",
]
