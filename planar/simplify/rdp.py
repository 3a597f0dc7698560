"""Ramer-Douglas-Peucker point reduction.

Works over index ranges with an explicit stack instead of recursing on
copied slices, so very long paths neither copy sub-lists at every level nor
grow the call stack. Point selection matches the recursive formulation
exactly: each range splits at the first interior index attaining the
strictly greatest distance from the chord between the range endpoints, and
only when that distance is strictly greater than epsilon.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..geometry.distance import point_line_distance
from ..models import Line, Point
from ..scalar import Scalar

logger = logging.getLogger(__name__)


def _farthest_point(
    points: Sequence[Point], first: int, last: int
) -> tuple[int | None, Scalar]:
    """Find the interior point farthest from the chord points[first] -> points[last].

    Returns:
        Tuple of (index, distance); index is None when no interior point is
        at a positive distance
    """
    chord = Line(points[first], points[last])
    dmax: Scalar = 0.0
    index = None
    for i in range(first + 1, last):
        distance = point_line_distance(points[i], chord)
        if distance > dmax:
            index = i
            dmax = distance
    return index, dmax


def rdp(points: Sequence[Point], epsilon: Scalar) -> list[Point]:
    """Simplify an open path with the Ramer-Douglas-Peucker algorithm.

    The first and last points are always kept and the output is never
    longer than the input. Empty and single-point inputs are returned
    unchanged.

    Args:
        points: Ordered path points
        epsilon: Maximum distance a dropped point may lie from the
            simplified path

    Returns:
        Retained points, in their original order

    Example:
        >>> pts = [Point(0, 0), Point(5, 4), Point(11, 5.5), Point(17.3, 3.2), Point(27.8, 0.1)]
        >>> [p.coords() for p in rdp(pts, 1.0)]
        [(0, 0), (5, 4), (11, 5.5), (27.8, 0.1)]
    """
    points = list(points)
    if len(points) < 3:
        return points

    keep = [False] * len(points)
    keep[0] = keep[-1] = True

    stack = [(0, len(points) - 1)]
    while stack:
        first, last = stack.pop()
        index, dmax = _farthest_point(points, first, last)
        if index is not None and dmax > epsilon:
            keep[index] = True
            stack.append((index, last))
            stack.append((first, index))

    result = [p for p, kept in zip(points, keep) if kept]
    logger.debug(f"RDP reduced {len(points)} points to {len(result)} (epsilon={epsilon})")
    return result
