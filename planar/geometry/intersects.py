"""Pairwise intersection predicates.

Every supported (left type, right type) combination is an independent,
named rule with its own numeric policy. The rules are registered in an
explicit matrix and looked up by the exact types of both operands; the
matrix is never derived from a single general algorithm, because each pair
deliberately handles degenerate and boundary cases in its own way.

Both directions of a symmetric pair are registered separately, and the
two directions must always agree.

Known limitation: two collinear segments that overlap without either one
containing an endpoint of the other are not detected by the segment/segment
rule, since the parallel fallback only tests endpoints.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..models import Bbox, Line, LineString, Point, Polygon
from ..scalar import epsilon, in_unit_interval
from .containment import bbox_contains_bbox, polygon_contains_point


# Type aliases
Rule = Callable[[Any, Any], bool]

_MATRIX: dict[tuple[type, type], Rule] = {}


class UnsupportedGeometryPair(TypeError):
    """Raised when no intersection rule exists for a pair of types."""

    def __init__(self, left: type, right: type):
        self.left = left
        self.right = right
        super().__init__(
            f"No intersects rule for ({left.__name__}, {right.__name__})"
        )


def _register(left: type, right: type) -> Callable[[Rule], Rule]:
    """Register a rule for the ordered pair (left, right)."""
    def decorator(rule: Rule) -> Rule:
        _MATRIX[(left, right)] = rule
        return rule
    return decorator


def intersects(a: Any, b: Any) -> bool:
    """Check if geometry ``a`` intersects geometry ``b``.

    Args:
        a: Left operand (Point, Line, LineString, Polygon or Bbox)
        b: Right operand

    Returns:
        True if the geometries intersect under the pair's rule

    Raises:
        UnsupportedGeometryPair: If the pair has no registered rule

    Example:
        >>> ls = LineString([(3., 2.), (7., 6.)])
        >>> intersects(ls, LineString([(3., 4.), (8., 4.)]))
        True
    """
    try:
        rule = _MATRIX[(type(a), type(b))]
    except KeyError:
        raise UnsupportedGeometryPair(type(a), type(b)) from None
    return rule(a, b)


def supported_pairs() -> list[tuple[type, type]]:
    """List every ordered (left, right) type pair with a rule."""
    return list(_MATRIX)


# ============================================================================
# Point x Line
# ============================================================================

@_register(Line, Point)
def line_intersects_point(line: Line, point: Point) -> bool:
    """Check if a point lies on a segment.

    Uses the parametric positions tx, ty of the point along each axis,
    computed only where that axis' delta is non-zero:
    - degenerate segment: exact equality with its single point
    - axis-aligned segment: exact equality on the constant axis and
      0 <= t <= 1 on the other
    - otherwise: |tx - ty| <= epsilon and 0 <= tx <= 1
    """
    dx, dy = line.dx, line.dy
    tx = (point.x - line.start.x) / dx if dx != 0 else None
    ty = (point.y - line.start.y) / dy if dy != 0 else None

    if tx is None and ty is None:
        return point == line.start
    if ty is None:
        # Horizontal
        return point.y == line.start.y and in_unit_interval(tx)
    if tx is None:
        # Vertical
        return point.x == line.start.x and in_unit_interval(ty)
    return abs(tx - ty) <= epsilon(tx, ty) and in_unit_interval(tx)


@_register(Point, Line)
def point_intersects_line(point: Point, line: Line) -> bool:
    return line_intersects_point(line, point)


# ============================================================================
# Line x Line
# ============================================================================

@_register(Line, Line)
def line_intersects_line(a: Line, b: Line) -> bool:
    """Check if two segments intersect, solving for (s, t) with Cramer's rule.

    A zero determinant (parallel or collinear segments, or a degenerate
    one) falls back to testing every endpoint against the other segment.
    """
    a1 = a.dx
    a2 = a.dy
    b1 = -b.dx
    b2 = -b.dy
    c1 = b.start.x - a.start.x
    c2 = b.start.y - a.start.y

    d = a1 * b2 - a2 * b1
    if d == 0:
        return (
            line_intersects_point(b, a.start)
            or line_intersects_point(b, a.end)
            or line_intersects_point(a, b.start)
            or line_intersects_point(a, b.end)
        )

    s = (c1 * b2 - c2 * b1) / d
    t = (a1 * c2 - a2 * c1) / d
    return in_unit_interval(s) and in_unit_interval(t)


# ============================================================================
# Line x LineString
# ============================================================================

@_register(Line, LineString)
def line_intersects_linestring(line: Line, linestring: LineString) -> bool:
    return any(line_intersects_line(line, segment) for segment in linestring.lines())


@_register(LineString, Line)
def linestring_intersects_line(linestring: LineString, line: Line) -> bool:
    return line_intersects_linestring(line, linestring)


# ============================================================================
# Line x Polygon
# ============================================================================

@_register(Line, Polygon)
def line_intersects_polygon(line: Line, polygon: Polygon) -> bool:
    """Check if a segment crosses any ring or has an endpoint inside the polygon.

    The containment test catches segments lying entirely within the
    polygon without touching a ring.
    """
    return (
        line_intersects_linestring(line, polygon.exterior)
        or any(line_intersects_linestring(line, hole) for hole in polygon.interiors)
        or polygon_contains_point(polygon, line.start_point())
        or polygon_contains_point(polygon, line.end_point())
    )


@_register(Polygon, Line)
def polygon_intersects_line(polygon: Polygon, line: Line) -> bool:
    return line_intersects_polygon(line, polygon)


# ============================================================================
# LineString x LineString
# ============================================================================

@_register(LineString, LineString)
def linestring_intersects_linestring(a: LineString, b: LineString) -> bool:
    """Check every segment pair for a parametric crossing.

    Segment pairs with a zero denominator (parallel, collinear or
    degenerate) are skipped rather than resolved.
    """
    if a.is_empty or b.is_empty:
        return False

    for seg_a in a.lines():
        for seg_b in b.lines():
            denom = seg_b.dy * seg_a.dx - seg_b.dx * seg_a.dy
            if denom == 0:
                continue
            offset_x = seg_a.start.x - seg_b.start.x
            offset_y = seg_a.start.y - seg_b.start.y
            u_a = (seg_b.dx * offset_y - seg_b.dy * offset_x) / denom
            u_b = (seg_a.dx * offset_y - seg_a.dy * offset_x) / denom
            if in_unit_interval(u_a) and in_unit_interval(u_b):
                return True
    return False


# ============================================================================
# Polygon x LineString
# ============================================================================

@_register(Polygon, LineString)
def polygon_intersects_linestring(polygon: Polygon, linestring: LineString) -> bool:
    """Check if a line string crosses any ring or has a point inside the polygon."""
    if any(linestring_intersects_linestring(ring, linestring) for ring in polygon.rings()):
        return True
    return any(polygon_contains_point(polygon, p) for p in linestring.points_iter())


@_register(LineString, Polygon)
def linestring_intersects_polygon(linestring: LineString, polygon: Polygon) -> bool:
    return polygon_intersects_linestring(polygon, linestring)


# ============================================================================
# Bbox x Bbox
# ============================================================================

def _ranges_overlap(amin, amax, bmin, bmax) -> bool:
    """Check if either range's min or max falls within the other range."""
    return (
        bmin <= amin <= bmax
        or bmin <= amax <= bmax
        or amin <= bmin <= amax
        or amin <= bmax <= amax
    )


@_register(Bbox, Bbox)
def bbox_intersects_bbox(a: Bbox, b: Bbox) -> bool:
    """Check if two boxes overlap without either containing the other.

    A box that fully contains the other (edges inclusive) does NOT
    intersect it; identical boxes therefore do not intersect either.
    """
    if bbox_contains_bbox(a, b) or bbox_contains_bbox(b, a):
        return False
    return (
        _ranges_overlap(a.xmin, a.xmax, b.xmin, b.xmax)
        and _ranges_overlap(a.ymin, a.ymax, b.ymin, b.ymax)
    )


# ============================================================================
# Polygon x Polygon, Bbox x Polygon
# ============================================================================

@_register(Polygon, Polygon)
def polygon_intersects_polygon(a: Polygon, b: Polygon) -> bool:
    """Check if two polygons intersect.

    True if ``a`` intersects the exterior of ``b``, or any hole of ``b``,
    or ``b`` intersects the exterior of ``a``. Together these cover
    crossing boundaries and either polygon containing the other.
    """
    return (
        polygon_intersects_linestring(a, b.exterior)
        or any(polygon_intersects_linestring(a, hole) for hole in b.interiors)
        or polygon_intersects_linestring(b, a.exterior)
    )


@_register(Polygon, Bbox)
def polygon_intersects_bbox(polygon: Polygon, bbox: Bbox) -> bool:
    return polygon_intersects_polygon(polygon, bbox.to_polygon())


@_register(Bbox, Polygon)
def bbox_intersects_polygon(bbox: Bbox, polygon: Polygon) -> bool:
    return polygon_intersects_bbox(polygon, bbox)
