"""Containment checks for points in rings, polygons and boxes."""

from enum import Enum

from ..models import Bbox, LineString, Point, Polygon


class PointPosition(Enum):
    """Position of a point relative to a ring."""
    INSIDE = "inside"
    OUTSIDE = "outside"
    ON_BOUNDARY = "on_boundary"


def ring_position(point: Point, ring: LineString) -> PointPosition:
    """Classify a point against a ring using crossing-number ray casting.

    Only the ring's own segments are walked; an unclosed ring is not closed
    implicitly. A point lying on any segment (by the point/segment
    intersection rule) is on the boundary. Rings with fewer than three
    points are never INSIDE.

    Args:
        point: Point to classify
        ring: Ring to test against (closed or open)

    Returns:
        PointPosition for the point
    """
    from .intersects import line_intersects_point

    if ring.is_empty:
        return PointPosition.OUTSIDE

    if any(line_intersects_point(line, point) for line in ring.lines()):
        return PointPosition.ON_BOUNDARY

    # A ring needs three points to enclose anything
    if len(ring) < 3:
        return PointPosition.OUTSIDE

    crossings = 0
    for line in ring.lines():
        start, end = line.start, line.end
        if not (min(start.y, end.y) < point.y <= max(start.y, end.y)):
            continue
        if point.x > max(start.x, end.x):
            continue
        # Horizontal segments cannot satisfy the strict y test above
        x_int = (point.y - start.y) * (end.x - start.x) / (end.y - start.y) + start.x
        if start.x == end.x or point.x <= x_int:
            crossings += 1

    if crossings % 2 == 1:
        return PointPosition.INSIDE
    return PointPosition.OUTSIDE


def polygon_contains_point(polygon: Polygon, point: Point) -> bool:
    """Check if a point is inside a polygon.

    CRITICAL: Returns True only if inside the exterior AND outside every
    hole. Points on the exterior boundary or on a hole boundary are not
    contained.

    Args:
        point: Point to test
        polygon: Polygon with exterior ring and optional holes

    Returns:
        True if point is strictly inside the polygon area
    """
    if ring_position(point, polygon.exterior) != PointPosition.INSIDE:
        return False

    return all(
        ring_position(point, hole) == PointPosition.OUTSIDE
        for hole in polygon.interiors
    )


def bbox_contains_bbox(outer: Bbox, inner: Bbox) -> bool:
    """Check if ``inner`` lies within ``outer`` (edges inclusive)."""
    return (
        outer.xmin <= inner.xmin
        and outer.xmax >= inner.xmax
        and outer.ymin <= inner.ymin
        and outer.ymax >= inner.ymax
    )


def bbox_contains_point(bbox: Bbox, point: Point) -> bool:
    """Check if point is inside bbox (inclusive)."""
    return bbox.xmin <= point.x <= bbox.xmax and bbox.ymin <= point.y <= bbox.ymax
