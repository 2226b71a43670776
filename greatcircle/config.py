"""Package-wide constants for spherical geodesy.

All formulas work in SI: angles in radians, lengths in meters. The sphere
used when a caller does not pass an explicit radius is the mean Earth
sphere below.

Constants:
    MEAN_EARTH_RADIUS: Radius of the mean Earth sphere in meters.
    TWO_PI: One full turn in radians.
    BASE_TYPE: Numeric types accepted wherever an angle or a length is expected.

Example:
    >>> from greatcircle.config import MEAN_EARTH_RADIUS
    >>> MEAN_EARTH_RADIUS
    6371000.0
"""

from math import pi

MEAN_EARTH_RADIUS = 6371000.0

TWO_PI = 2.0 * pi

BASE_TYPE = int | float
