"""Point value type."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace

from ..scalar import Scalar


@dataclass(frozen=True, slots=True)
class Point:
    """A single point in the plane.

    Points are immutable values: the setters return a new point and leave
    the original untouched. Equality is exact component equality.

    Example:
        >>> p = Point(1.234, 2.345)
        >>> p.set_x(9.876).x
        9.876
        >>> p.x
        1.234
    """

    x: Scalar
    y: Scalar

    @classmethod
    def from_coords(cls, coords: Sequence[Scalar]) -> "Point":
        """Create a point from an (x, y) pair or a 2-element list.

        Raises:
            ValueError: If ``coords`` does not hold exactly two values
        """
        if len(coords) != 2:
            raise ValueError(f"Point needs exactly 2 coordinates, got {len(coords)}")
        return cls(coords[0], coords[1])

    def set_x(self, x: Scalar) -> "Point":
        """Return a copy of this point with a new x component."""
        return replace(self, x=x)

    def set_y(self, y: Scalar) -> "Point":
        """Return a copy of this point with a new y component."""
        return replace(self, y=y)

    @property
    def lng(self) -> Scalar:
        """Longitude alias for x."""
        return self.x

    @property
    def lat(self) -> Scalar:
        """Latitude alias for y."""
        return self.y

    def set_lng(self, lng: Scalar) -> "Point":
        return self.set_x(lng)

    def set_lat(self, lat: Scalar) -> "Point":
        return self.set_y(lat)

    def coords(self) -> tuple[Scalar, Scalar]:
        return (self.x, self.y)

    def dot(self, other: "Point") -> Scalar:
        """Dot product: x1 * x2 + y1 * y2."""
        return self.x * other.x + self.y * other.y

    def cross_prod(self, point_b: "Point", point_c: "Point") -> Scalar:
        """Cross product of self -> point_b -> point_c.

        Positive means the three points turn counter-clockwise, negative
        means clockwise, zero means they are collinear.
        """
        return (point_b.x - self.x) * (point_c.y - self.y) - (
            point_b.y - self.y
        ) * (point_c.x - self.x)

    def intersects(self, other) -> bool:
        """Check if this point intersects another geometry."""
        from ..geometry.intersects import intersects
        return intersects(self, other)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)


def as_point(value: Point | Sequence[Scalar]) -> Point:
    """Coerce a Point or an (x, y) pair into a Point."""
    if isinstance(value, Point):
        return value
    return Point.from_coords(value)
