"""Line segment and polyline value types."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from ..scalar import Scalar
from .point import Point, as_point

# Type aliases
PointLike = Point | Sequence[Scalar]


@dataclass(frozen=True, slots=True)
class Line:
    """Directed line segment from ``start`` to ``end``.

    A line whose start and end coincide is degenerate (dx == dy == 0).
    """

    start: Point
    end: Point

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", as_point(self.start))
        object.__setattr__(self, "end", as_point(self.end))

    @classmethod
    def from_coords(cls, start: Sequence[Scalar], end: Sequence[Scalar]) -> "Line":
        return cls(Point.from_coords(start), Point.from_coords(end))

    @property
    def dx(self) -> Scalar:
        return self.end.x - self.start.x

    @property
    def dy(self) -> Scalar:
        return self.end.y - self.start.y

    @property
    def is_degenerate(self) -> bool:
        return self.dx == 0 and self.dy == 0

    def start_point(self) -> Point:
        return self.start

    def end_point(self) -> Point:
        return self.end

    def points(self) -> tuple[Point, Point]:
        return (self.start, self.end)

    def intersects(self, other) -> bool:
        """Check if this segment intersects another geometry."""
        from ..geometry.intersects import intersects
        return intersects(self, other)


@dataclass(frozen=True, slots=True)
class LineString:
    """Ordered sequence of points forming a polyline.

    Point order is the path order and duplicates are allowed. The segments
    are produced lazily by :meth:`lines`; an empty or single-point line
    string has no segments.

    Example:
        >>> ls = LineString([(0, 0), (1, 1), (2, 0)])
        >>> len(list(ls.lines()))
        2
    """

    points: tuple[Point, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(as_point(p) for p in self.points))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    @property
    def is_empty(self) -> bool:
        return not self.points

    @property
    def is_closed(self) -> bool:
        """Check if first point equals last point (empty strings are not closed)."""
        return bool(self.points) and self.points[0] == self.points[-1]

    def points_iter(self) -> Iterator[Point]:
        return iter(self.points)

    def lines(self) -> Iterator[Line]:
        """Yield one segment per adjacent pair of points.

        Every call returns a fresh generator, so the sequence can be
        walked any number of times.
        """
        for start, end in zip(self.points, self.points[1:]):
            yield Line(start, end)

    def coords(self) -> list[tuple[Scalar, Scalar]]:
        return [p.coords() for p in self.points]

    def intersects(self, other) -> bool:
        """Check if this line string intersects another geometry."""
        from ..geometry.intersects import intersects
        return intersects(self, other)

    def simplify(self, epsilon: Scalar) -> "LineString":
        """Simplify with Ramer-Douglas-Peucker (see :func:`planar.simplify.simplify`)."""
        from ..simplify import simplify
        return simplify(self, epsilon)


@dataclass(frozen=True, slots=True)
class MultiLineString:
    """Ordered collection of line strings."""

    members: tuple[LineString, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", tuple(_as_linestring(m) for m in self.members))

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[LineString]:
        return iter(self.members)

    def simplify(self, epsilon: Scalar) -> "MultiLineString":
        from ..simplify import simplify
        return simplify(self, epsilon)


def _as_linestring(value: LineString | Iterable[PointLike]) -> LineString:
    if isinstance(value, LineString):
        return value
    return LineString(tuple(value))
