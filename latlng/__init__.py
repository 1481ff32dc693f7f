"""Great-circle distance and bearing on a spherical Earth.

latlng is a small geometry primitive for applications that need distances
and bearings between latitude/longitude pairs without a full GIS stack. It
models Earth as a sphere of radius ``EARTH_RADIUS`` (6378137 m) and works in
a selectable floating-point precision.

Components:
    Angle utilities (latlng.angle):
        • to_radian / from_radian: degree and radian conversion
        • normalize_relative: wrap an angle into [-180, 180)
        • normalize_absolute: wrap an angle into [0, 360)

    Geographic points (latlng.geo_point):
        • BasicGeoPoint: immutable lat/lng value type, generic over precision
        • GeoPoint: double precision points (numpy.float64)
        • GeoPointF: single precision points (numpy.float32)
        • distance_to, bearing_to, bearing_from

Example:
    >>> from latlng import GeoPoint
    >>> tokyo_tower = GeoPoint(35.6586, 139.7454)
    >>> osaka_castle = GeoPoint(34.6873, 135.5259)
    >>> meters = tokyo_tower.distance_to(osaka_castle)
    >>> heading = tokyo_tower.bearing_to(osaka_castle)
"""

from .angle import from_radian, normalize_absolute, normalize_relative, to_radian
from .config import EARTH_RADIUS
from .geo_point import BasicGeoPoint, GeoPoint, GeoPointF

__all__ = [
    # Angle utilities
    "to_radian",
    "from_radian",
    "normalize_relative",
    "normalize_absolute",
    # Points
    "BasicGeoPoint",
    "GeoPoint",
    "GeoPointF",
    # Model constants
    "EARTH_RADIUS",
]
