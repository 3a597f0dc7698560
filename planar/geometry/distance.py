"""Euclidean distance between points and segments.

The segment distance used by simplification is clamped to the segment:
points beyond either end measure to that endpoint, not to the infinite
line through the segment.
"""

import math

from ..models import Line, Point


def point_distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a.x - b.x, a.y - b.y)


def point_line_distance(point: Point, line: Line) -> float:
    """Compute minimum distance from a point to a line segment.

    Projects the point onto the segment with parameter
    r = ((p - start) . (end - start)) / |end - start|^2 and clamps:
    r <= 0 measures to ``start``, r >= 1 measures to ``end``, anything in
    between is the perpendicular distance.

    Args:
        point: The point
        line: Segment to measure against (may be degenerate)

    Returns:
        Non-negative distance
    """
    dx, dy = line.dx, line.dy
    if dx == 0 and dy == 0:
        return point_distance(point, line.start)

    length_sq = dx * dx + dy * dy
    r = ((point.x - line.start.x) * dx + (point.y - line.start.y) * dy) / length_sq
    if r <= 0:
        return point_distance(point, line.start)
    if r >= 1:
        return point_distance(point, line.end)

    cross = (point.x - line.start.x) * dy - (point.y - line.start.y) * dx
    return abs(cross) / math.sqrt(length_sq)
