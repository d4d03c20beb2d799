"""Drawable shape descriptors.

A template is a collection of shapes:
- PathShape: an open or closed polyline drawn with a style profile
- CircleShape: a circle (center holes)
- StyleProfile: the stroke style, which tells the cutter what to do with it
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Literal

from panelcut.domain.vector import Vector


class StyleProfile(Enum):
    """Stroke style of a shape.

    The exact attribute values are what downstream laser-cutting jobs
    key on, so they must not change.
    """

    CUT = ("#000000", "fill:none;stroke-width:1.5")
    FOLD = ("#ff0000", "fill:none;stroke-width:1")
    DEBUG = ("#33ff00", "fill:none;stroke-width:3")

    def __init__(self, stroke: str, style: str) -> None:
        self.stroke = stroke
        self.style = style

    def attributes(self) -> dict[str, str]:
        """SVG presentation attributes for this profile."""
        return {
            "stroke": self.stroke,
            "stroke-width": "0.001mm",
            "style": self.style,
        }


def format_number(value: float) -> str:
    """Format a coordinate the way it appears in path data.

    Integral values lose their decimal part (``10.0`` -> ``"10"``), other
    values use the shortest round-tripping representation.
    """
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return repr(float(value))


@dataclass(frozen=True)
class PathShape:
    """A polyline drawn with a style profile.

    Attributes:
        points: Vertices in drawing order
        style: Stroke style
    """

    points: tuple[Vector, ...]
    style: StyleProfile = StyleProfile.FOLD
    kind: Literal["path"] = "path"

    def path_data(self) -> str:
        """Build the SVG ``d`` attribute: move to the first point, line to the rest."""
        d = "M"
        for i, point in enumerate(self.points):
            d += " "
            if i == 1:
                d += "L"
            d += f"{format_number(point.x)} {format_number(point.y)}"
        return d


@dataclass(frozen=True)
class CircleShape:
    """A circle drawn with a style profile.

    Attributes:
        center: Circle center
        radius: Circle radius, always positive
        style: Stroke style
    """

    center: Vector
    radius: float
    style: StyleProfile = StyleProfile.FOLD
    kind: Literal["circle"] = "circle"


Shape = PathShape | CircleShape
