"""Planar - a 2D computational-geometry kernel.

This package provides:
- Value types: Point, Line, LineString, Polygon, Bbox and multi-geometries
- An intersects predicate matrix over every supported pair of types
- Ramer-Douglas-Peucker simplification for paths, rings and collections
- YAML settings presets validated with pydantic

Geometry is generic over the coordinate type (Python floats, NumPy floating
scalars, exact rationals). Coordinates must be finite.

Typical use:
    from planar import LineString, intersects
    from planar.simplify import simplify

    ls = LineString([(0, 0), (5, 4), (11, 5.5)])
    simplify(ls, 1.0)
"""

__version__ = "0.1.0"

from .geometry import (
    PointPosition,
    UnsupportedGeometryPair,
    intersects,
    point_line_distance,
    polygon_contains_point,
)
from .models import (
    Bbox,
    KernelSettings,
    Line,
    LineString,
    MultiLineString,
    MultiPolygon,
    Point,
    Polygon,
    SimplifyOptions,
)
from .simplify import UnsupportedGeometry, rdp, simplify_many

__all__ = [
    "__version__",
    # Geometry types
    "Point",
    "Line",
    "LineString",
    "Polygon",
    "Bbox",
    "MultiLineString",
    "MultiPolygon",
    # Predicates and measures
    "intersects",
    "polygon_contains_point",
    "point_line_distance",
    "PointPosition",
    "UnsupportedGeometryPair",
    # Simplification
    "rdp",
    "simplify_many",
    "UnsupportedGeometry",
    # Settings
    "KernelSettings",
    "SimplifyOptions",
]
