"""Ramer-Douglas-Peucker simplification for line strings, polygons and collections."""

from .dispatch import (
    UnsupportedGeometry,
    simplify,
    simplify_many,
    simplify_with_settings,
)
from .rdp import rdp

__all__ = [
    "rdp",
    "simplify",
    "simplify_many",
    "simplify_with_settings",
    "UnsupportedGeometry",
]
