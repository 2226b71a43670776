"""Angular units and angle normalisation.

Angles are stored in radians. Bearings come out of the formulas in [0, 2π);
longitudes may leave (-π, π] and can be folded back with
``negative_pi_to_pi``.

Classes:
    Radian: Base angular unit (SI).
    Degree: Angular unit in degrees, converted to radians on construction.

Functions:
    zero_to_two_pi: Map any radian angle into [0, 2π).
    negative_pi_to_pi: Map any radian angle into [-π, π].

Example:
    >>> heading = Degree(90)
    >>> round(float(heading), 6)
    1.570796
    >>> round(zero_to_two_pi(-pi / 2), 6)
    4.712389
"""

from __future__ import annotations

from math import pi

from ..config import TWO_PI
from .unit_float import UnitFloat


class Radian(UnitFloat):
    """Angular unit: Radian (SI base unit for angles).

    Example:
        >>> angle = Radian(pi / 2)
        >>> round(angle.to(Degree), 6)
        90.0
    """

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "rad"


class Degree(Radian):
    """Angular unit: Degree, stored internally as radians.

    Example:
        >>> bearing = Degree(180)
        >>> round(bearing.to(Radian), 6)
        3.141593
    """

    SCALE_TO_SI = pi / 180
    SYMBOL = "°"


Angle = Radian | Degree


def zero_to_two_pi(angle: float) -> float:
    """Map an angle in radians into [0, 2π).

    The result is strictly below 2π: a tiny negative angle whose modulo rounds
    up to exactly 2π is folded to 0.0. NaN and infinities yield NaN.

    Args:
        angle: Any real angle in radians.

    Returns:
        float: Equivalent angle in [0, 2π).
    """
    mod = float(angle) % TWO_PI
    if mod >= TWO_PI:
        return 0.0
    return mod


def negative_pi_to_pi(angle: float) -> float:
    """Map an angle in radians into [-π, π].

    Angles already inside the interval are returned unchanged, so both -π and
    π survive as-is.
    """
    angle = float(angle)
    if -pi <= angle <= pi:
        return angle
    return zero_to_two_pi(angle + pi) - pi
