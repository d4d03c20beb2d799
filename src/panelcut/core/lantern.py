"""Laser-cut lantern template.

The lantern is a pentagonal prism: a base plate and a top plate hold five
side panels through finger joints, and crown plates connect the top to a lid.

Two sets of parts can be laid out:
- print-once: base plate, top plate and the two end plates (cut once)
- print-five: top rectangle, main plate, triangles and crown plates (cut
  once per side)
"""

import logging
import math
from collections.abc import Sequence

from panelcut.config import JointConfig, LanternConfig, LanternMode
from panelcut.core.assembly import circle_of, path_of, rectangle_strip
from panelcut.core.regularoid import apothem, polygon_vertices, radius_for_sides
from panelcut.core.teeth import apply_teeth, tooth_spans
from panelcut.domain import ORIGIN, Vector
from panelcut.exceptions import LayoutError
from panelcut.io import DrawingSurface

logger = logging.getLogger(__name__)

SIDES = 5

# Inset of the crown slots from the corners of the crown ring
CROWN_INSET = math.sin(math.pi * 2 / SIDES)


class LanternLayout:
    """Lays out the parts of the laser-cut lantern on one sheet.

    Example:
        layout = LanternLayout(LanternConfig(mode=LanternMode.PRINT_FIVE))
        surface = layout.build()
    """

    def __init__(self, config: LanternConfig) -> None:
        """Initialize the layout.

        Args:
            config: Lantern settings (dimensions, mode, papercraft)
        """
        self.config = config
        self.parts: list[str] = []
        self._surface = DrawingSurface(config.canvas_width, config.canvas_height)

    @property
    def surface(self) -> DrawingSurface:
        """Surface the parts are drawn on."""
        return self._surface

    def build(self) -> DrawingSurface:
        """Lay out all parts of the configured mode.

        Each call starts from an empty surface.

        Returns:
            Surface holding the parts

        Raises:
            LayoutError: If the central hole does not fit the top plate
        """
        self._validate()
        config = self.config
        self.parts = []
        self._surface = DrawingSurface(config.canvas_width, config.canvas_height)

        ltop = self.crown_plate_length(config.top_plate_length)
        lbottom = self.crown_plate_length(config.base_plate_length)

        if config.mode == LanternMode.PRINT_FIVE:
            self.add_top_rect(Vector(28.5, 0))
            self.add_main_plate(Vector(0, 64 - config.depth))
            self.add_triangles(Vector(28.5 + 93, 6))
            self.add_crown_plate(50, lbottom, 8, Vector(180, 0))
            self.add_crown_plate(50, ltop, 8, Vector(180, 60))
        else:
            self.add_base_plate(ORIGIN, config.base_plate_length)
            self.add_top_plate(Vector(0, 200), config.top_plate_length)
            self.add_end_plate(lbottom, Vector(200, 0))
            self.add_end_plate(ltop, Vector(200, 200))

        logger.debug("Lantern layout built: mode=%s, parts=%d", config.mode.value, len(self.parts))
        return self._surface

    def _validate(self) -> None:
        config = self.config
        crown_radius = radius_for_sides(SIDES, config.top_plate_length - 10)
        if config.central_circle_radius >= apothem(SIDES, crown_radius):
            raise LayoutError(
                "lantern",
                f"central hole radius {config.central_circle_radius} overlaps the crown slots",
            )

    def _joint(self, **overrides: object) -> JointConfig:
        return self.config.joint(**overrides)

    def _teeth(
        self, coordinates: Sequence[Vector], configs: Sequence[JointConfig | None]
    ) -> list[Vector]:
        if self.config.papercraft:
            return list(coordinates)
        return apply_teeth(coordinates, configs)

    def crown_plate_length(self, plate_length: float) -> float:
        """Distance between the two crown slots on one side of a plate.

        Args:
            plate_length: Edge length of the pentagonal plate

        Returns:
            Width the crown plate must have
        """
        crown = polygon_vertices(
            ORIGIN, SIDES, radius_for_sides(SIDES, plate_length - 10), phase_shift=True
        )
        rot = crown[1].sub(crown[0]).normalize()
        start = crown[0].add(rot.scale(CROWN_INSET))
        end = crown[1].sub(rot.scale(CROWN_INSET))
        return start.distance(end)

    def _add_crown_slots(self, crown: list[Vector]) -> None:
        width = self.config.crown_connect_width
        thickness = self.config.plate_width
        for i in range(SIDES):
            crown_start = crown[i]
            crown_end = crown[i + 1]
            rot = crown_end.sub(crown_start).normalize()
            self._surface.append(path_of(rectangle_strip(
                crown_start.add(rot.scale(CROWN_INSET)),
                crown_start.add(rot.scale(CROWN_INSET + width)),
                thickness,
            )))
            self._surface.append(path_of(rectangle_strip(
                crown_end.sub(rot.scale(CROWN_INSET)),
                crown_end.sub(rot.scale(CROWN_INSET + width)),
                thickness,
            )))

    def add_end_plate(self, length: float, offset: Vector) -> None:
        """Pentagon closing one end of the crown, with a small center hole."""
        r = radius_for_sides(SIDES, length)
        center = Vector(r, r).add(offset)
        self._surface.append(path_of(polygon_vertices(center, SIDES, r, phase_shift=True)))
        self._surface.append(circle_of(center, self.config.small_hole_radius))
        self.parts.append("end_plate")

    def add_crown_plate(self, h: float, w: float, corner_round: float, offset: Vector) -> None:
        """Crown plate with chamfered top corners and two legs at the bottom."""
        connect = self.config.crown_connect_width
        thickness = self.config.plate_width
        outline = [
            (corner_round, 0),
            (w - corner_round, 0),
            (w, corner_round),
            (w, h + thickness),
            (w - connect, h + thickness),
            (w - connect, h),
            (connect, h),
            (connect, h + thickness),
            (0, h + thickness),
            (0, corner_round),
            (corner_round, 0),
        ]
        self._surface.append(path_of(Vector(x, y).add(offset) for x, y in outline))
        self.parts.append("crown_plate")

    def add_top_plate(self, offset: Vector, top_length: float) -> None:
        """Pentagonal top plate with a toothed outline, center hole and crown slots."""
        r = radius_for_sides(SIDES, top_length)
        center = offset.add_xy(r, r)
        outer = polygon_vertices(center, SIDES, r, phase_shift=True)
        crown = polygon_vertices(
            center, SIDES, radius_for_sides(SIDES, top_length - 10), phase_shift=True
        )

        joint = self._joint(depth=self.config.plate_width * 1.5)
        self._surface.append(path_of(self._teeth(outer, [joint] * SIDES)))
        self._surface.append(circle_of(center, self.config.central_circle_radius))
        self._add_crown_slots(crown)
        self.parts.append("top_plate")

    def add_base_plate(self, offset: Vector, bottom_length: float) -> None:
        """Pentagonal base plate with slot rows for the side panels."""
        config = self.config
        r = radius_for_sides(SIDES, bottom_length + 5)
        center = offset.add_xy(r, r)
        outer = polygon_vertices(center, SIDES, r, phase_shift=True)
        # +0.1: without it the last slot of each row is lost to rounding
        connect = polygon_vertices(
            center, SIDES, radius_for_sides(SIDES, bottom_length + 0.1), phase_shift=True
        )
        crown = polygon_vertices(
            center, SIDES, radius_for_sides(SIDES, bottom_length - 10), phase_shift=True
        )

        self._surface.append(path_of(outer))
        self._surface.append(circle_of(center, config.central_circle_radius))
        for i in range(SIDES):
            spans = tooth_spans(connect[i], connect[i + 1], config.tooth_width, config.gap_width)
            for tooth_start, tooth_end in spans:
                self._surface.append(
                    path_of(rectangle_strip(tooth_start, tooth_end, config.plate_width * 1.4))
                )
        self._add_crown_slots(crown)
        self.parts.append("base_plate")

    def add_triangles(self, offset: Vector) -> None:
        """Two side triangles, toothed along their base, nested head to tail."""
        triangle = [
            Vector(28.5 + x, y) for x, y in [(-28.5, 0), (28.5, 0), (0, 57), (-28.5, 0)]
        ]

        flipped = self._teeth(triangle, [self._joint(reversed=True, no_gap=True), None, None])
        self._surface.append(
            path_of(v.rotate(180).add(offset).add_xy(57, 57) for v in flipped)
        )

        upright = self._teeth(triangle, [self._joint(), None, None])
        self._surface.append(path_of(v.add_xy(0, 60).add(offset) for v in upright))
        self.parts.extend(["triangle", "triangle"])

    def add_top_rect(self, offset: Vector) -> None:
        """Rectangle between two side panels, toothed on both long sides."""
        rect = [Vector(0, 0), Vector(0, 66), Vector(93, 66), Vector(93, 0), Vector(0, 0)]
        toothed = self._teeth(rect, [None, self._joint(), None, self._joint()])
        self._surface.append(path_of(v.add(offset) for v in toothed))
        self.parts.append("top_rect")

    def add_main_plate(self, offset: Vector) -> None:
        """Front panel, toothed along its top and bottom edges."""
        outline = [
            (21, 215),
            (0, 57),
            (28.5, 0),
            (150 - 28.5, 0),
            (150, 57),
            (150 - 21, 215),
            (21, 215),
        ]
        points = [Vector(x, y + 5).add(offset) for x, y in outline]
        joint = self._joint()
        toothed = self._teeth(points, [None, None, joint, None, None, joint])
        self._surface.append(path_of(toothed))
        self.parts.append("main_plate")
