"""Geometry value types and settings models for planar."""

from .linestring import Line, LineString, MultiLineString
from .point import Point
from .polygon import Bbox, MultiPolygon, Polygon
from .settings import KernelSettings, SimplifyOptions

__all__ = [
    # Primitives
    "Point",
    "Line",
    "LineString",
    "Polygon",
    "Bbox",
    # Aggregates
    "MultiLineString",
    "MultiPolygon",
    # Settings
    "KernelSettings",
    "SimplifyOptions",
]
