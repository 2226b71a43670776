"""Great-circle geodesy on a spherical Earth.

greatcircle answers three questions about points on a sphere, which is
usually close enough to the Earth for navigation, mapping and simulation
work that does not need an ellipsoid:

    • How far apart are two points along the surface?     great_circle_ground_distance
    • Which way do I set off to get from one to the other? great_circle_initial_bearing
    • Where do I end up after traveling so far that way?  great_circle_destination

All angles are radians and all lengths meters. The radius defaults to
MEAN_EARTH_RADIUS (6 371 000 m). Every function is pure and thread-safe and
none of them raise on numeric input.

Package Components:
    Geographic Systems (greatcircle.geo):
        • GeoPoint: immutable (latitude, longitude, height) value
        • The three spherical formulas

    Measurement Framework (greatcircle.unit):
        • Radian/Degree and Meter/Kilometer units stored in SI
        • zero_to_two_pi / negative_pi_to_pi angle normalisation

    Configuration (greatcircle.config):
        • MEAN_EARTH_RADIUS and other constants

Notes:
    Destination longitudes are not folded back into (-π, π]; call
    GeoPoint.normalized() when a canonical range is needed. Bearings are
    always in [0, 2π).

Example:
    >>> from greatcircle import GeoPoint, great_circle_initial_bearing
    >>> from math import degrees
    >>> lizard = GeoPoint.from_deg(50.0667, -5.7167)
    >>> groats = GeoPoint.from_deg(58.6439, -3.07)
    >>> round(degrees(great_circle_initial_bearing(lizard, groats)), 1)
    9.1
"""

from greatcircle.config import MEAN_EARTH_RADIUS
from greatcircle.geo import (
    GeoPoint,
    great_circle_destination,
    great_circle_ground_distance,
    great_circle_initial_bearing,
)
from greatcircle.unit import negative_pi_to_pi, zero_to_two_pi

__all__ = [
    "MEAN_EARTH_RADIUS",
    "GeoPoint",
    "great_circle_ground_distance",
    "great_circle_initial_bearing",
    "great_circle_destination",
    "zero_to_two_pi",
    "negative_pi_to_pi",
]
