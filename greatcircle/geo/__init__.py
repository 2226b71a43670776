"""Geographic points and great-circle geodesy on a sphere.

Components:
    GeoPoint: Immutable point with latitude/longitude in radians and a height
    Latitude: Degree unit family for latitudes
    Longitude: Degree unit family for longitudes
    great_circle_ground_distance: Haversine distance in meters
    great_circle_initial_bearing: Initial bearing in radians, [0, 2π)
    great_circle_destination: Destination after a distance along a bearing

Typical Usage:
    >>> from greatcircle.geo import GeoPoint
    >>> from greatcircle.unit import Degree, Kilometer
    >>>
    >>> home = GeoPoint.from_deg(37.5665, 126.9780)
    >>> checkpoint = home.forward(Degree(45), Kilometer(5))
    >>> round(float(home.distance_to(checkpoint)))
    5000
"""

from .geo_point import GeoPoint, Latitude, Longitude
from .spherical import (
    great_circle_destination,
    great_circle_ground_distance,
    great_circle_initial_bearing,
)

__all__ = [
    "GeoPoint",
    "Latitude",
    "Longitude",
    "great_circle_ground_distance",
    "great_circle_initial_bearing",
    "great_circle_destination",
]
