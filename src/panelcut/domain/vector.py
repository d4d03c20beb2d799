"""Two-dimensional vector type used for all layout coordinates.

Coordinates are design units (millimeters) in screen orientation: x grows to
the right and y grows downwards, so "up" is negative y.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vector:
    """An immutable point or direction in 2D space.

    Every operation returns a new Vector.

    Attributes:
        x: X coordinate in millimeters
        y: Y coordinate in millimeters
    """

    x: float
    y: float

    def add(self, other: "Vector") -> "Vector":
        """Componentwise sum."""
        return Vector(self.x + other.x, self.y + other.y)

    def add_xy(self, x: float, y: float) -> "Vector":
        """Offset by the given amounts."""
        return Vector(self.x + x, self.y + y)

    def sub(self, other: "Vector") -> "Vector":
        """Componentwise difference."""
        return Vector(self.x - other.x, self.y - other.y)

    def scale(self, n: float) -> "Vector":
        """Multiply both components by ``n``."""
        return Vector(self.x * n, self.y * n)

    def distance(self, to: "Vector | None" = None) -> float:
        """Euclidean distance to ``to``, or to the origin when omitted."""
        ox = to.x if to is not None else 0.0
        oy = to.y if to is not None else 0.0
        return math.sqrt((self.x - ox) ** 2 + (self.y - oy) ** 2)

    def normalize(self) -> "Vector":
        """Unit vector in the same direction.

        The vector must not have zero length.
        """
        return self.scale(1 / self.distance())

    def rotate(self, degrees: float) -> "Vector":
        """Rotate about the origin.

        Positive angles turn clockwise on screen (y pointing down), e.g.
        ``Vector(1, 0).rotate(90)`` is ``Vector(0, -1)``.

        Args:
            degrees: Rotation angle in degrees

        Returns:
            Rotated vector
        """
        radians = degrees * math.pi / 180
        cos = math.cos(radians)
        sin = math.sin(radians)
        return Vector(cos * self.x + sin * self.y, cos * self.y - sin * self.x)

    def __add__(self, other: "Vector") -> "Vector":
        return self.add(other)

    def __sub__(self, other: "Vector") -> "Vector":
        return self.sub(other)

    def __mul__(self, n: float) -> "Vector":
        return self.scale(n)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y)

    def is_close(self, other: "Vector", tolerance: float = 1e-9) -> bool:
        """Check whether two vectors coincide within ``tolerance``."""
        return math.isclose(self.x, other.x, abs_tol=tolerance) and math.isclose(
            self.y, other.y, abs_tol=tolerance
        )

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


ORIGIN = Vector(0.0, 0.0)
