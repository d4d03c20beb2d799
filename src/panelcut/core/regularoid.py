"""Regular polygon ("regularoid") geometry.

Multi-sided plates are laid out as regular polygons. The helpers convert
between edge length and circumradius and generate the closed vertex ring.

All functions are pure and stateless.
"""

import math

from panelcut.domain import Vector
from panelcut.exceptions import DegenerateGeometryError

MIN_RADIUS = 1.0


def radius_for_sides(n: int, edge_length: float) -> float:
    """Circumradius of a regular n-gon whose edges are ``edge_length`` long.

    Half an edge and the radius to one of its corners form a right triangle
    with angle 180/n at the center, so ``sin(pi/n) = (edge/2) / radius``.

    Args:
        n: Number of sides
        edge_length: Desired edge length

    Returns:
        Circumradius

    Examples:
        >>> round(radius_for_sides(6, 10.0), 6)
        10.0
    """
    return edge_length / (math.sin(math.pi / n) * 2)


def edge_length_for_sides(n: int, radius: float) -> float:
    """Edge length of a regular n-gon with circumradius ``radius``."""
    return radius * (math.sin(math.pi / n) * 2)


def apothem(n: int, radius: float) -> float:
    """Distance from the center of a regular n-gon to the middle of an edge."""
    return radius * math.cos(math.pi / n)


def polygon_vertices(
    center: Vector, n: int, radius: float, phase_shift: bool = False
) -> list[Vector]:
    """Generate the closed vertex ring of a regular n-gon.

    The first vertex lies straight up from the center (negative y). With
    ``phase_shift`` the ring is turned by half a step so that an edge,
    rather than a corner, faces up. Each following vertex is the previous
    one rotated by ``-360/n`` degrees about the center.

    Args:
        center: Polygon center
        n: Number of sides
        radius: Circumradius, at least 1
        phase_shift: Turn the ring by half a step

    Returns:
        ``n + 1`` points; the last one is the first again

    Raises:
        DegenerateGeometryError: If radius is below 1
    """
    if radius < MIN_RADIUS:
        raise DegenerateGeometryError(radius)

    up = Vector(0.0, -radius)
    degrees = 360 / n
    offset = degrees / 2 if phase_shift else 0.0
    points = [center.add(up.rotate(offset - i * degrees)) for i in range(n)]
    points.append(points[0])
    return points
