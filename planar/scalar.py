"""Numeric scalar capability shared by every geometry type.

Geometry is generic over the coordinate type: plain Python floats, NumPy
floating scalars (float32, float64, longdouble) and exact rationals all work.
The helpers here resolve the constants an algorithm needs (zero, one, machine
epsilon) from the type of the values it is working with, so a float32
geometry is compared with float32 tolerance and an exact Fraction geometry
with none at all.

Coordinates must be finite. NaN and infinities are not rejected; comparisons
involving NaN are always false, so predicates tend to report no intersection
and simplification keeps more points than it otherwise would.
"""

from __future__ import annotations

import numbers
from fractions import Fraction
from functools import lru_cache
from typing import Union

import numpy as np

# Type aliases
Scalar = Union[float, int, Fraction, np.floating]


@lru_cache(maxsize=None)
def _epsilon_for_type(kind: type) -> Scalar:
    """Machine epsilon for a scalar type (0 for exact types)."""
    if issubclass(kind, (float, np.floating)):
        return kind(np.finfo(kind).eps)
    if issubclass(kind, (numbers.Rational, np.integer)):
        return 0
    # Decimal and other real types: fall back to double precision
    return np.finfo(float).eps


def epsilon(*values: Scalar) -> Scalar:
    """Get the comparison tolerance for the given values.

    The loosest epsilon among the value types wins, so mixing float32 and
    float64 compares with float32 tolerance.

    Args:
        values: Scalars taking part in a comparison

    Returns:
        Machine epsilon of the widest-tolerance value type
    """
    if not values:
        return np.finfo(float).eps
    return max(_epsilon_for_type(type(v)) for v in values)


def zero(like: Scalar) -> Scalar:
    """Zero in the same scalar type as ``like``."""
    return type(like)(0)


def one(like: Scalar) -> Scalar:
    """One in the same scalar type as ``like``."""
    return type(like)(1)


def in_unit_interval(t: Scalar) -> bool:
    """Check 0 <= t <= 1 (inclusive on both ends)."""
    return zero(t) <= t <= one(t)
