"""Geographic point value types with spherical distance and bearing.

This module defines the coordinate value type used across latlng. A point is
an immutable latitude/longitude pair in degrees, stored in a fixed NumPy
floating precision. Distances and bearings are computed on a sphere of radius
``EARTH_RADIUS`` using closed-form spherical trigonometry, in the point's own
precision.

The generic type is ``BasicGeoPoint``; each precision is a subclass that sets
``dtype``. Two specializations are predefined:

    GeoPoint: double precision (numpy.float64), the primary type
    GeoPointF: single precision (numpy.float32)

Other precisions are obtained with ``BasicGeoPoint.of(dtype)``.

Coordinates are not validated. Out-of-range latitudes or longitudes flow
through the formulas unchanged, and numerical domain problems (coincident or
antipodal points, poles) surface as NaN rather than as exceptions.

Example:
    >>> tokyo_tower = GeoPoint(35.6586, 139.7454)
    >>> osaka_castle = GeoPoint(34.6873, 135.5259)
    >>> round(float(tokyo_tower.distance_to(osaka_castle)) / 1000)
    399
    >>> float(GeoPoint(0.0, 0.0).bearing_to(GeoPoint(0.0, 90.0)))
    90.0
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, ClassVar

import numpy as np

from .angle import from_radian, normalize_absolute, to_radian
from .config import DEFAULT_DTYPE, EARTH_RADIUS, SINGLE_DTYPE, Number

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BasicGeoPoint:
    """Geographic point with latitude and longitude in degrees.

    The class is a frozen dataclass: points are hashable, compare by value,
    and cannot be modified after construction. Both coordinates are cast to
    the class ``dtype`` on construction, so every formula runs in that
    precision. Points of different precision classes never compare equal.

    Subclasses fix the precision by setting ``dtype``; each subclass is
    registered so that ``BasicGeoPoint.of`` returns it for its dtype.

    Attributes:
        lat: Latitude in degrees, expected in [-90, 90] but not checked.
        lng: Longitude in degrees, expected in [-180, 180] but not checked.
        dtype (ClassVar[type[np.floating]]): Precision of the coordinates.
    """

    lat: Any
    lng: Any

    dtype: ClassVar[type[np.floating]] = DEFAULT_DTYPE

    _registry: ClassVar[dict[type[np.floating], type[BasicGeoPoint]]] = {}
    _registry_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init_subclass__(cls, **kwargs):
        """Register subclasses that declare their own ``dtype``."""
        super().__init_subclass__(**kwargs)
        if "dtype" not in cls.__dict__:
            return
        _check_float_dtype(cls.dtype)
        BasicGeoPoint._registry.setdefault(cls.dtype, cls)

    def __post_init__(self):
        object.__setattr__(self, "lat", self.dtype(self.lat))
        object.__setattr__(self, "lng", self.dtype(self.lng))

    @classmethod
    def of(cls, dtype: type[np.floating]) -> type[BasicGeoPoint]:
        """Return the point class computing in ``dtype``.

        Predefined specializations are returned as is, so
        ``BasicGeoPoint.of(np.float64) is GeoPoint``. Other NumPy floating
        types get a class created on first use and cached afterwards.

        Args:
            dtype: A NumPy floating scalar type such as ``np.longdouble``, or
                anything ``np.dtype`` accepts for one (``"float32"``).

        Returns:
            type[BasicGeoPoint]: Point class with that precision.

        Raises:
            TypeError: If ``dtype`` is not a NumPy floating type, or is too
                narrow to hold distances in meters (``np.float16``).
        """
        dtype = np.dtype(dtype).type
        _check_float_dtype(dtype)
        with cls._registry_lock:
            point_type = BasicGeoPoint._registry.get(dtype)
            if point_type is None:
                logger.debug("Creating point class for %s", dtype.__name__)
                point_type = type(
                    f"GeoPoint_{dtype.__name__}", (BasicGeoPoint,), {"dtype": dtype}
                )
        return point_type

    @classmethod
    def from_rad(cls, lat: Number, lng: Number) -> BasicGeoPoint:
        """Create a point from latitude and longitude in radians.

        Args:
            lat: Latitude in radians.
            lng: Longitude in radians.

        Returns:
            BasicGeoPoint: Point of this class with the coordinates in degrees.
        """
        return cls(from_radian(cls.dtype(lat)), from_radian(cls.dtype(lng)))

    def astype(self, target: type) -> BasicGeoPoint:
        """Return the same coordinates in another precision.

        Args:
            target: A point class (``GeoPointF``) or a NumPy floating type
                (``np.float32``).

        Returns:
            BasicGeoPoint: New point with both coordinates cast to the target.
        """
        if isinstance(target, type) and issubclass(target, BasicGeoPoint):
            point_type = target
        else:
            point_type = BasicGeoPoint.of(target)
        return point_type(self.lat, self.lng)

    def _check_same_precision(self, other: BasicGeoPoint):
        """Ensure ``other`` is a point computing in the same precision.

        Raises:
            TypeError: If ``other`` is not an instance of this exact class.
        """
        if type(other) is not type(self):
            msg = f"TypeError: {type(self).__name__, type(other).__name__}"
            raise TypeError(msg)

    def _radians(self) -> tuple[Any, Any]:
        return to_radian(self.lat), to_radian(self.lng)

    def distance_to(self, other: BasicGeoPoint):
        """Great-circle distance to another point, in meters.

        Uses the spherical law of cosines on a sphere of radius
        ``EARTH_RADIUS``. The acos argument is not clamped: when rounding
        pushes it past 1 (nearly coincident points) or below -1 (nearly
        antipodal points) the result is NaN.

        Args:
            other: Point of the same precision class.

        Returns:
            Distance in meters as a scalar of this point's dtype.

        Raises:
            TypeError: If ``other`` has a different precision.

        Example:
            >>> float(GeoPoint(0.0, 0.0).distance_to(GeoPoint(0.0, 0.0)))
            0.0
        """
        self._check_same_precision(other)
        lat, lng = self._radians()
        other_lat, other_lng = other._radians()
        lng_diff = other_lng - lng

        with np.errstate(invalid="ignore", over="ignore"):
            central_angle = np.arccos(
                np.sin(lat) * np.sin(other_lat)
                + np.cos(lat) * np.cos(other_lat) * np.cos(lng_diff)
            )
        return self.dtype(EARTH_RADIUS) * central_angle

    def bearing_from(self, other: BasicGeoPoint):
        """Azimuth of the arrow drawn from ``other`` to this point.

        The direction is read at this point, in degrees clockwise from north,
        normalized into [0, 360). ``atan2`` yields the initial bearing from
        this point toward ``other``; adding 180° reverses it into the heading
        an arrow coming from ``other`` has on arrival.

        Poles and coincident points are not special-cased: a pole makes
        ``tan`` blow up and coincident points reduce to ``atan2(0, 0)``.

        Args:
            other: Point of the same precision class.

        Returns:
            Azimuth in degrees as a scalar of this point's dtype.

        Raises:
            TypeError: If ``other`` has a different precision.
        """
        self._check_same_precision(other)
        lat, lng = self._radians()
        other_lat, other_lng = other._radians()
        lng_diff = other_lng - lng

        with np.errstate(invalid="ignore", divide="ignore", over="ignore"):
            y = np.sin(lng_diff)
            x = np.cos(lat) * np.tan(other_lat) - np.sin(lat) * np.cos(lng_diff)
            azimuth = from_radian(np.arctan2(y, x)) + self.dtype(180.0)
        return normalize_absolute(azimuth)

    def bearing_to(self, other: BasicGeoPoint):
        """Initial bearing from this point toward ``other``.

        The heading is measured at this point, where the great circle toward
        ``other`` starts, in degrees clockwise from north, normalized into
        [0, 360). It is ``bearing_from`` turned around by 180°. Bearings are not
        symmetric: ``a.bearing_to(b)`` and ``b.bearing_to(a)`` differ by
        about 180° plus the convergence of meridians between them.

        Args:
            other: Point of the same precision class.

        Returns:
            Azimuth in degrees as a scalar of this point's dtype.

        Raises:
            TypeError: If ``other`` has a different precision.

        Example:
            >>> origin = GeoPoint(0.0, 0.0)
            >>> float(origin.bearing_to(GeoPoint(0.0, 90.0)))  # due east
            90.0
            >>> float(origin.bearing_to(GeoPoint(90.0, 0.0)))  # due north
            0.0
        """
        return normalize_absolute(self.bearing_from(other) + self.dtype(180.0))


def _check_float_dtype(dtype):
    if not (isinstance(dtype, type) and issubclass(dtype, np.floating)):
        msg = f"TypeError: {dtype!r} is not a numpy floating type"
        raise TypeError(msg)
    # half a circumference in meters must be representable
    if np.finfo(dtype).max < EARTH_RADIUS * np.pi:
        msg = f"TypeError: {dtype.__name__} cannot hold distances in meters"
        raise TypeError(msg)


class GeoPoint(BasicGeoPoint):
    """Geographic point in double precision (numpy.float64)."""

    dtype = DEFAULT_DTYPE


class GeoPointF(BasicGeoPoint):
    """Geographic point in single precision (numpy.float32)."""

    dtype = SINGLE_DTYPE
