"""Global configuration and numeric type definitions for latlng.

This module centralizes the constants and type aliases shared by the angle
utilities and the geographic point types. It fixes the spherical Earth model,
the numeric precisions the library computes in, and the bound used by angle
normalization.

Type Definitions:
    Number: Union of scalar types accepted wherever an angle or coordinate
            is expected. Covers Python native types (int, float) and NumPy
            floating scalars.
    FloatT: Type variable for functions that return a value in the same
            precision they were given.

Constants:
    EARTH_RADIUS: Sphere radius in meters (equatorial radius of WGS84 used
                  as a spherical approximation).
    NORMALIZE_LIMIT: Magnitude above which angle normalization gives up and
                     returns zero.
    DEFAULT_DTYPE: Double precision, the primary precision.
    SINGLE_DTYPE: Single precision.

Example:
    >>> from latlng.config import pi_for
    >>> import numpy as np
    >>> type(pi_for(np.float32(1.0)))
    <class 'numpy.float32'>
    >>> pi_for(2.0)
    3.141592653589793
"""

from __future__ import annotations

import math
from typing import TypeVar

import numpy as np

Number = int | float | np.floating
FloatT = TypeVar("FloatT", float, np.floating)

EARTH_RADIUS = 6378137.0
NORMALIZE_LIMIT = 1e9

DEFAULT_DTYPE: type[np.floating] = np.float64
SINGLE_DTYPE: type[np.floating] = np.float32


def float_type(value: Number | type) -> type:
    """Return the floating type arithmetic on ``value`` should stay in.

    NumPy floating scalars (or NumPy floating types) keep their own type;
    everything else is computed as a Python float.
    """
    kind = value if isinstance(value, type) else type(value)
    if issubclass(kind, np.floating):
        return kind
    return float


def pi_for(value: Number | type):
    """Return π at the precision of ``value`` (a scalar or a float type)."""
    kind = float_type(value)
    if kind is float:
        return math.pi
    return kind(np.pi)
