"""Geometric predicates and measures: containment, distance and intersection."""

from .containment import (
    PointPosition,
    bbox_contains_bbox,
    bbox_contains_point,
    polygon_contains_point,
    ring_position,
)
from .distance import (
    point_distance,
    point_line_distance,
)
from .intersects import (
    UnsupportedGeometryPair,
    intersects,
    supported_pairs,
)

__all__ = [
    # Containment checks
    "PointPosition",
    "ring_position",
    "polygon_contains_point",
    "bbox_contains_bbox",
    "bbox_contains_point",
    # Distance calculations
    "point_distance",
    "point_line_distance",
    # Intersection predicates
    "intersects",
    "supported_pairs",
    "UnsupportedGeometryPair",
]
