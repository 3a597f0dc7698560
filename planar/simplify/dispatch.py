"""Simplification of whole geometries.

Line strings are reduced directly. Polygons reduce every ring on its own
and multi-geometries reduce every member on its own; nothing coordinates
across rings or members, so the result may self-intersect or have crossing
rings. Topology is not repaired.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import TypeVar, Union

from ..models import KernelSettings, LineString, MultiLineString, MultiPolygon, Polygon
from ..presets import load_preset
from ..scalar import Scalar
from .rdp import rdp

logger = logging.getLogger(__name__)

# Type aliases
Simplifiable = Union[LineString, Polygon, MultiLineString, MultiPolygon]
G = TypeVar("G", LineString, Polygon, MultiLineString, MultiPolygon)


class UnsupportedGeometry(TypeError):
    """Raised when a geometry has no point sequence to simplify."""


def simplify(geometry: G, epsilon: Scalar) -> G:
    """Simplify a geometry with the Ramer-Douglas-Peucker algorithm.

    Args:
        geometry: LineString, Polygon, MultiLineString or MultiPolygon
        epsilon: Maximum allowed deviation of a dropped point

    Returns:
        New geometry of the same type

    Raises:
        UnsupportedGeometry: For points, lines, boxes and other types
    """
    if isinstance(geometry, LineString):
        return LineString(tuple(rdp(geometry.points, epsilon)))

    if isinstance(geometry, Polygon):
        return Polygon(
            simplify(geometry.exterior, epsilon),
            tuple(simplify(hole, epsilon) for hole in geometry.interiors),
        )

    if isinstance(geometry, MultiLineString):
        return MultiLineString(tuple(simplify(m, epsilon) for m in geometry.members))

    if isinstance(geometry, MultiPolygon):
        return MultiPolygon(tuple(simplify(m, epsilon) for m in geometry.members))

    raise UnsupportedGeometry(f"Cannot simplify {type(geometry).__name__}")


def simplify_many(
    geometries: Iterable[Simplifiable],
    epsilon: Scalar,
    max_workers: int | None = None,
) -> list[Simplifiable]:
    """Simplify independent geometries, optionally in parallel.

    Geometries share no state, so they can be fanned out over a thread
    pool. Output order always matches input order. The reduction is pure
    Python and holds the GIL, so extra workers run concurrently but give no
    speedup on CPU-bound batches.

    Args:
        geometries: Geometries to simplify
        epsilon: Maximum allowed deviation of a dropped point
        max_workers: Thread count; None or 1 runs sequentially

    Returns:
        Simplified geometries in input order
    """
    geometries = list(geometries)
    reduce = partial(simplify, epsilon=epsilon)

    if not max_workers or max_workers <= 1 or len(geometries) <= 1:
        return [reduce(g) for g in geometries]

    logger.debug(
        f"Simplifying {len(geometries)} geometries with {max_workers} workers"
    )
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(reduce, geometries))


def simplify_with_settings(
    geometry: Simplifiable | Iterable[Simplifiable],
    settings: KernelSettings | str | None = None,
) -> Simplifiable | list[Simplifiable]:
    """Simplify one geometry, or many, using kernel settings.

    A single geometry uses ``settings.simplify.epsilon``; an iterable of
    geometries additionally honours ``settings.simplify.max_workers``.

    Args:
        geometry: A geometry or an iterable of geometries
        settings: Kernel settings, the name of a bundled preset, or None
            for the defaults

    Returns:
        The simplified geometry, or a list in input order
    """
    if isinstance(settings, str):
        settings = load_preset(settings)
    elif settings is None:
        settings = KernelSettings()
    options = settings.simplify

    if isinstance(geometry, (LineString, Polygon, MultiLineString, MultiPolygon)):
        return simplify(geometry, options.epsilon)
    return simplify_many(geometry, options.epsilon, max_workers=options.max_workers)
