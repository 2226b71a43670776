"""Great-circle formulas on a perfect sphere.

Three closed-form relations between points on a sphere of radius ``radius``
(the mean Earth sphere unless told otherwise):

    great_circle_ground_distance: Haversine surface distance in meters.
    great_circle_initial_bearing: Initial heading in radians, [0, 2π), clockwise from north.
    great_circle_destination: Point reached after traveling a distance along a bearing.

Inputs are ``GeoPoint`` values (or anything exposing ``latitude`` and
``longitude`` in radians). None of the functions validate ranges or raise;
NaN and infinities propagate. Formulas follow Chris Veness' movable-type
geodesy scripts:

    a = sin²(Δφ/2) + cos φ1 · cos φ2 · sin²(Δλ/2)
    θ = atan2(sin Δλ · cos φ2, cos φ1 · sin φ2 − sin φ1 · cos φ2 · cos Δλ)
    φ2 = asin(sin φ1 · cos δ + cos φ1 · sin δ · cos θ)
    λ2 = λ1 + atan2(sin θ · sin δ · cos φ1, cos δ − sin φ1 · sin φ2)
"""

from __future__ import annotations

import logging
from math import asin, atan2, cos, sin, sqrt

from ..config import MEAN_EARTH_RADIUS
from ..unit import zero_to_two_pi
from .geo_point import GeoPoint

logger = logging.getLogger(__name__)


def _clamp(value: float, low: float, high: float) -> float:
    # NaN falls through unchanged
    if value < low:
        return low
    if value > high:
        return high
    return value


def great_circle_ground_distance(
    p1: GeoPoint, p2: GeoPoint, radius: float = MEAN_EARTH_RADIUS
) -> float:
    """Surface distance between two points along the great circle (Haversine).

    Args:
        p1: First point.
        p2: Second point.
        radius: Sphere radius in meters.

    Returns:
        float: Non-negative distance in meters; 0 for identical points and
        ``π · radius`` for antipodal ones.
    """
    phi1 = float(p1.latitude)
    phi2 = float(p2.latitude)
    d_phi = phi2 - phi1
    d_lambda = float(p2.longitude) - float(p1.longitude)

    a = sin(d_phi / 2) ** 2 + cos(phi1) * cos(phi2) * sin(d_lambda / 2) ** 2
    # rounding pushes a just outside [0, 1] for coincident and antipodal points
    a = _clamp(a, 0.0, 1.0)
    c = 2 * atan2(sqrt(a), sqrt(1 - a))

    return float(radius) * c


def great_circle_initial_bearing(p1: GeoPoint, p2: GeoPoint) -> float:
    """Heading to set off on the great circle from ``p1`` towards ``p2``.

    The bearing is measured clockwise from true north: 0 north, π/2 east,
    π south, 3π/2 west. The heading changes along the path; this is the one
    at ``p1``.

    Coincident points, or ``p1`` at a pole, leave the direction undefined;
    the result is then whatever ``atan2`` gives for a (near) zero vector,
    normally 0.0.

    Returns:
        float: Bearing in radians in [0, 2π).
    """
    phi1 = float(p1.latitude)
    phi2 = float(p2.latitude)
    d_lambda = float(p2.longitude) - float(p1.longitude)

    x = cos(phi1) * sin(phi2) - sin(phi1) * cos(phi2) * cos(d_lambda)
    y = sin(d_lambda) * cos(phi2)
    if x == 0.0 and y == 0.0:
        logger.debug("Degenerate bearing from %s to %s", p1, p2)
    theta = atan2(y, x)

    return zero_to_two_pi(theta)


def great_circle_destination(
    p: GeoPoint,
    distance: float,
    initial_bearing: float,
    radius: float = MEAN_EARTH_RADIUS,
) -> GeoPoint:
    """Point reached by traveling ``distance`` along ``initial_bearing`` from ``p``.

    A negative distance travels backwards, i.e. along ``initial_bearing + π``.
    The returned longitude is ``p.longitude`` plus the longitude offset and is
    not folded back into (-π, π]; use ``GeoPoint.normalized`` when a canonical
    range is needed. Near the poles the longitude is numerically unstable.

    Args:
        p: Starting point. Its height is ignored.
        distance: Distance to travel in meters.
        initial_bearing: Heading in radians, clockwise from north.
        radius: Sphere radius in meters.

    Returns:
        GeoPoint: The destination, with ``height`` set to 0.
    """
    delta = float(distance) / float(radius)  # angular distance
    theta = float(initial_bearing)

    phi1 = float(p.latitude)
    lambda1 = float(p.longitude)

    sin_phi2 = sin(phi1) * cos(delta) + cos(phi1) * sin(delta) * cos(theta)
    # can exceed ±1 by an ulp at the poles
    phi2 = asin(_clamp(sin_phi2, -1.0, 1.0))
    y = sin(theta) * sin(delta) * cos(phi1)
    x = cos(delta) - sin(phi1) * sin_phi2
    lambda2 = lambda1 + atan2(y, x)

    return GeoPoint(latitude=phi2, longitude=lambda2, height=0.0)
