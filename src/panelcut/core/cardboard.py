"""Foldable cardboard lantern template.

Each side of the lantern is one strip of cardboard, folded along red lines:

    crown plate     (holds the lid)
    crown base      (narrow trapezoid)
    front top       (trapezoid, widest ring at its bottom edge)
    front bottom    (trapezoid, narrowing down to the base)

The strips are laid out as a fan: every strip is rotated by the angle its
sides lean in, so neighbouring strips share an edge. The bottom plate hangs
off the second strip and the top plate off the last one; both get insert
flaps. Glue flaps and cut slits are added along the shared edges.
"""

import logging
import math
from collections.abc import Callable, Iterable

from panelcut.config import CardboardConfig
from panelcut.core.assembly import path_of, point_along_line, rectangle_strip
from panelcut.core.regularoid import apothem, edge_length_for_sides, polygon_vertices
from panelcut.domain import ORIGIN, StyleProfile, Vector
from panelcut.exceptions import LayoutError
from panelcut.io import DrawingSurface

logger = logging.getLogger(__name__)


class CardboardLayout:
    """Lays out the foldable cardboard lantern on one sheet.

    Example:
        layout = CardboardLayout(CardboardConfig.a4())
        surface = layout.build()
    """

    def __init__(self, config: CardboardConfig) -> None:
        """Initialize the layout.

        Args:
            config: Cardboard lantern dimensions
        """
        self.config = config
        self.parts: list[str] = []
        self._surface = DrawingSurface(config.canvas_width, config.canvas_height)

    @property
    def surface(self) -> DrawingSurface:
        """Surface the parts are drawn on."""
        return self._surface

    @property
    def mid_width(self) -> float:
        """Edge length of the widest ring."""
        return edge_length_for_sides(self.config.number_of_sides, self.config.mid_diameter)

    @property
    def crown_radius(self) -> float:
        """Circumradius of the crown ring and the top plate."""
        return self.config.top_diameter - self.config.minirect_width

    def build(self) -> DrawingSurface:
        """Lay out all strips, plates and flaps.

        Each call starts from an empty surface.

        Returns:
            Surface holding the template

        Raises:
            LayoutError: If the crown ring would have no size
        """
        if self.crown_radius < 1:
            raise LayoutError(
                "cardboard",
                f"top diameter {self.config.top_diameter} must exceed the crown base "
                f"width {self.config.minirect_width}",
            )

        self.parts = []
        self._surface = DrawingSurface(self.config.canvas_width, self.config.canvas_height)
        self._add_foldable_plates()
        logger.debug("Cardboard layout built: sides=%d, parts=%d",
                     self.config.number_of_sides, len(self.parts))
        return self._surface

    def _add_foldable_plates(self) -> None:
        config = self.config
        n = config.number_of_sides
        origin = Vector(config.origin_x, config.origin_y)

        front_bottom = self.front_plate_bottom()
        front_top = self.front_plate_top()
        crown_base = self.crown_base()
        crown_plate = self.crown_plate()
        rotation = self.plate_rotation()

        turn_point = Vector(-self.mid_width, 0)
        for i in range(n):
            turn_point = turn_point.add(Vector(self.mid_width, 0))

            def move(v: Vector, i: int = i, turn_point: Vector = turn_point) -> Vector:
                return v.rotate(-i * rotation).add(turn_point).add(origin)

            self._add(front_bottom, move)
            self._add(front_top, move)
            self._add(crown_base, move)
            self._add(crown_plate, move)
            self.parts.append("side")

            # Flaps on the crown plate
            a, b = crown_plate[1], crown_plate[2]
            a_opp, b_opp = crown_plate[3], crown_plate[0]
            self._add(rectangle_strip(a, b, 5, centered=False), move)
            self._add(
                [point_along_line(a, b, 5), point_along_line(b, a, 5)], move, StyleProfile.CUT
            )
            self._add(
                rectangle_strip(
                    point_along_line(a_opp, b_opp, 6),
                    point_along_line(b_opp, a_opp, 6),
                    10,
                    centered=False,
                ),
                move,
                StyleProfile.CUT,
            )

            if i + 1 == n:
                self._add_top_plate(move)
            else:
                a, b = crown_plate[2], crown_plate[3]
                self._add(rectangle_strip(a, b, 5, centered=False), move)
                self._add(
                    [point_along_line(a, b, 10), point_along_line(b, a, 10)],
                    move,
                    StyleProfile.CUT,
                )

            if i == 1:
                self._add_bottom_plate(move)
            else:
                a, b = front_bottom[2], front_bottom[3]
                self._add(
                    rectangle_strip(
                        point_along_line(a, b, 5), point_along_line(b, a, 5), 5, centered=False
                    ),
                    move,
                )
                self._add(
                    [point_along_line(a, b, 15), point_along_line(b, a, 15)],
                    move,
                    StyleProfile.CUT,
                )

            turn_point = turn_point.rotate(-rotation)

    def _add(
        self,
        points: Iterable[Vector],
        move: Callable[[Vector], Vector],
        style: StyleProfile = StyleProfile.FOLD,
    ) -> None:
        self._surface.append(path_of([move(v) for v in points], style))

    def _add_top_plate(self, move: Callable[[Vector], Vector]) -> None:
        top = self.top_plate()
        offset = Vector(0, -self.config.minirect_width)

        def shifted(v: Vector) -> Vector:
            return move(v.add(offset))

        self._add(top, shifted)
        for j in range(1, self.config.number_of_sides):
            a = top[j]
            b = top[(j + 1) % len(top)]
            self._add(
                rectangle_strip(
                    point_along_line(a, b, 11), point_along_line(b, a, 11), 10, centered=False
                ),
                shifted,
                StyleProfile.CUT,
            )
        self.parts.append("top_plate")

    def _add_bottom_plate(self, move: Callable[[Vector], Vector]) -> None:
        bottom = self.bottom_plate()
        self._add(bottom, move)
        for j in range(1, self.config.number_of_sides):
            a = bottom[j]
            b = bottom[(j + 1) % len(bottom)]
            self._add(
                rectangle_strip(
                    point_along_line(a, b, 16), point_along_line(b, a, 16), 15, centered=False
                ),
                move,
            )
        self.parts.append("bottom_plate")

    def plate_rotation(self) -> float:
        """Angle in degrees between neighbouring strips of the fan."""
        config = self.config
        width = self.mid_width - edge_length_for_sides(config.number_of_sides, config.base_diameter)
        return math.atan(width / self.bottom_plate_height()) * 180 / math.pi

    def crown_width(self) -> float:
        """Edge length of the crown ring."""
        return edge_length_for_sides(self.config.number_of_sides, self.crown_radius)

    def crown_base(self) -> list[Vector]:
        """Trapezoid between the top ring and the crown ring."""
        config = self.config
        center_x = self.mid_width / 2
        top_width = edge_length_for_sides(config.number_of_sides, config.top_diameter)
        crown_width = self.crown_width()
        y_offset = self.top_plate_height()
        return [
            v.add_xy(0, -y_offset)
            for v in [
                Vector(center_x + top_width / 2, 0),
                Vector(center_x - top_width / 2, 0),
                Vector(center_x - crown_width / 2, -config.minirect_width),
                Vector(center_x + crown_width / 2, -config.minirect_width),
                Vector(center_x + top_width / 2, 0),
            ]
        ]

    def crown_plate(self) -> list[Vector]:
        """Rectangle above the crown base."""
        config = self.config
        crown_width = self.crown_width()
        center_x = self.mid_width / 2
        y_offset = self.top_plate_height() + config.minirect_width
        return [
            v.add_xy(0, -y_offset)
            for v in [
                Vector(center_x + crown_width / 2, 0),
                Vector(center_x - crown_width / 2, 0),
                Vector(center_x - crown_width / 2, -config.crown_height),
                Vector(center_x + crown_width / 2, -config.crown_height),
                Vector(center_x + crown_width / 2, 0),
            ]
        ]

    def top_plate(self) -> list[Vector]:
        """Regular polygon above the crown plate, first edge horizontal."""
        config = self.config
        n = config.number_of_sides
        y_offset = (
            self.top_plate_height() + config.crown_height + apothem(n, self.crown_radius)
        )
        offset = Vector(self.mid_width / 2, -y_offset)
        plate = polygon_vertices(ORIGIN, n, self.crown_radius, phase_shift=True)
        return [v.rotate(180).add(offset) for v in plate]

    def bottom_plate(self) -> list[Vector]:
        """Regular polygon below the front bottom, first edge horizontal."""
        config = self.config
        n = config.number_of_sides
        y_offset = self.bottom_plate_height() + apothem(n, config.base_diameter)
        offset = Vector(self.mid_width / 2, y_offset)
        plate = polygon_vertices(ORIGIN, n, config.base_diameter, phase_shift=True)
        return [v.add(offset) for v in plate]

    def bottom_plate_height(self) -> float:
        """Slanted height of the front bottom trapezoid.

        The vertical height is the adjacent side of a right triangle whose
        opposite side is the difference between the mid and base diameters.
        """
        config = self.config
        ab = config.mid_diameter - config.base_diameter
        bc = config.base_to_mid_height
        return bc / math.cos(math.atan(ab / bc))

    def top_plate_height(self) -> float:
        """Slanted height of the front top trapezoid."""
        config = self.config
        ab = config.top_diameter - config.mid_diameter
        bc = config.mid_to_top_height
        return bc / math.cos(math.atan(ab / bc))

    def front_plate_top(self) -> list[Vector]:
        """Trapezoid from the widest ring up to the top ring."""
        config = self.config
        center_x = self.mid_width / 2
        top_width = edge_length_for_sides(config.number_of_sides, config.top_diameter)
        height = self.top_plate_height()
        return [
            Vector(0, 0),
            Vector(self.mid_width, 0),
            Vector(center_x + top_width / 2, -height),
            Vector(center_x - top_width / 2, -height),
            Vector(0, 0),
        ]

    def front_plate_bottom(self) -> list[Vector]:
        """Trapezoid from the widest ring down to the base. Origin is top left."""
        config = self.config
        center_x = self.mid_width / 2
        base_width = edge_length_for_sides(config.number_of_sides, config.base_diameter)
        bottom_y = self.bottom_plate_height()
        return [
            Vector(0, 0),
            Vector(self.mid_width, 0),
            Vector(center_x + base_width / 2, bottom_y),
            Vector(center_x - base_width / 2, bottom_y),
            Vector(0, 0),
        ]
