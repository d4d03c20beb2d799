"""Shape assembly helpers.

Turns vertex lists into drawable shapes and builds the small auxiliary
outlines templates are made of (slots, flaps, glue strips).

All functions are pure and stateless.
"""

from collections.abc import Iterable

from panelcut.domain import CircleShape, PathShape, StyleProfile, Vector


def rectangle_strip(
    c1: Vector, c2: Vector, width: float, centered: bool = True
) -> list[Vector]:
    """Build a rectangle whose long axis runs from ``c1`` to ``c2``.

    Args:
        c1: Start of the long axis
        c2: End of the long axis
        width: Length of the short sides
        centered: Straddle the axis (True) or lie entirely on one side of
            it (False), e.g. for a flap that must sit flush against a fold

    Returns:
        Five points forming a closed rectangle
    """
    axis = c2.sub(c1)
    length = c2.distance(c1)

    if centered:
        m = axis.rotate(-90).scale(width / 2 / length)
        m0 = axis.rotate(90).scale(width / 2 / length)
    else:
        m = axis.rotate(90).scale(width / length)
        m0 = Vector(0.0, 0.0)

    return [c1.add(m), c2.add(m), c2.add(m0), c1.add(m0), c1.add(m)]


def point_along_line(a: Vector, b: Vector, distance: float) -> Vector:
    """Point at ``distance`` from ``a`` in the direction of ``b``.

    The result does not depend on how far away ``b`` is.
    """
    return b.sub(a).normalize().scale(distance).add(a)


def path_of(points: Iterable[Vector], style: StyleProfile = StyleProfile.FOLD) -> PathShape:
    """Wrap a polyline as a drawable path."""
    return PathShape(points=tuple(points), style=style)


def circle_of(
    center: Vector, radius: float, style: StyleProfile = StyleProfile.FOLD
) -> CircleShape | None:
    """Build a circle, or None when ``radius`` is not positive."""
    if radius <= 0:
        return None
    return CircleShape(center=center, radius=radius, style=style)
