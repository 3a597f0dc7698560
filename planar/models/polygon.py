"""Polygon and axis-aligned box value types."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from ..scalar import Scalar
from .linestring import LineString, PointLike, _as_linestring
from .point import Point, as_point

# Type aliases
RingLike = LineString | Iterable[PointLike]


@dataclass(frozen=True, slots=True)
class Polygon:
    """Polygon with one exterior ring and zero or more interior rings (holes).

    Rings are expected to be closed (first point == last point) but this is
    not validated. Exterior and interior roles are never swapped.

    Example:
        >>> square = Polygon([(0, 0), (0, 4), (4, 4), (4, 0), (0, 0)])
        >>> square.exterior.is_closed
        True
    """

    exterior: LineString = field(default_factory=LineString)
    interiors: tuple[LineString, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "exterior", _as_linestring(self.exterior))
        object.__setattr__(
            self, "interiors", tuple(_as_linestring(r) for r in self.interiors)
        )

    @property
    def has_holes(self) -> bool:
        return len(self.interiors) > 0

    def rings(self) -> Iterator[LineString]:
        """Yield the exterior ring followed by every interior ring."""
        yield self.exterior
        yield from self.interiors

    def contains(self, point: Point) -> bool:
        """Check if a point is strictly inside (holes and boundary excluded)."""
        from ..geometry.containment import polygon_contains_point
        return polygon_contains_point(self, point)

    def intersects(self, other) -> bool:
        """Check if this polygon intersects another geometry."""
        from ..geometry.intersects import intersects
        return intersects(self, other)

    def simplify(self, epsilon: Scalar) -> "Polygon":
        """Simplify every ring independently (topology is not preserved)."""
        from ..simplify import simplify
        return simplify(self, epsilon)


@dataclass(frozen=True, slots=True)
class MultiPolygon:
    """Ordered collection of polygons.

    Members may be given as polygons or as exterior-ring coordinate lists.
    """

    members: tuple[Polygon, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", tuple(_as_polygon(m) for m in self.members))

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[Polygon]:
        return iter(self.members)

    def simplify(self, epsilon: Scalar) -> "MultiPolygon":
        from ..simplify import simplify
        return simplify(self, epsilon)


def _as_polygon(value: Polygon | RingLike) -> Polygon:
    """Coerce a Polygon, or the coordinates of an exterior ring, into a Polygon."""
    if isinstance(value, Polygon):
        return value
    return Polygon(value)


@dataclass(frozen=True, slots=True)
class Bbox:
    """Axis-aligned rectangle.

    Boxes are not normalized: callers must supply xmin <= xmax and
    ymin <= ymax.
    """

    xmin: Scalar
    xmax: Scalar
    ymin: Scalar
    ymax: Scalar

    @classmethod
    def from_points(cls, points: Iterable[PointLike]) -> "Bbox":
        """Create the smallest box enclosing the given points.

        Raises:
            ValueError: If no points are given
        """
        pts = [as_point(p) for p in points]
        if not pts:
            raise ValueError("Cannot create Bbox from empty point list")
        xs = [p.x for p in pts]
        ys = [p.y for p in pts]
        return cls(min(xs), max(xs), min(ys), max(ys))

    @property
    def width(self) -> Scalar:
        return self.xmax - self.xmin

    @property
    def height(self) -> Scalar:
        return self.ymax - self.ymin

    def contains(self, other: "Bbox") -> bool:
        """Check if another box lies inside this one (edges inclusive)."""
        from ..geometry.containment import bbox_contains_bbox
        return bbox_contains_bbox(self, other)

    def contains_point(self, point: Point) -> bool:
        from ..geometry.containment import bbox_contains_point
        return bbox_contains_point(self, point)

    def to_polygon(self) -> Polygon:
        """Convert to a polygon with a closed 5-point ring and no holes."""
        return Polygon(
            LineString([
                (self.xmin, self.ymin),
                (self.xmin, self.ymax),
                (self.xmax, self.ymax),
                (self.xmax, self.ymin),
                (self.xmin, self.ymin),
            ])
        )

    def intersects(self, other) -> bool:
        """Check if this box intersects another geometry.

        Note that a box fully containing (or contained by) another box does
        NOT intersect it.
        """
        from ..geometry.intersects import intersects
        return intersects(self, other)
