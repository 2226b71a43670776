"""Type-safe units for angles and lengths.

Units are ``float`` subclasses holding their value in SI (radians, meters),
so they can be passed wherever the spherical formulas expect a plain number.
Units of different families (angle vs. length) cannot be combined.

Modules:
    - unit_base: Unit family bookkeeping
    - unit_float: Float units with SI conversion and arithmetic
    - unit_angle: Radian, Degree and angle normalisation helpers
    - unit_distance: Meter, Kilometer

Example:
    >>> from greatcircle.unit import Degree, Kilometer, Meter
    >>> round(float(Degree(180)), 6)
    3.141593
    >>> Meter(500) + Kilometer(1)
    1500 m (= 1500 SI)
"""

from .unit_angle import Angle, Degree, Radian, negative_pi_to_pi, zero_to_two_pi
from .unit_base import Unit
from .unit_distance import Kilometer, Length, Meter
from .unit_float import UnitFloat

__all__ = [
    # Base classes
    "Unit",
    "UnitFloat",
    # Angular units
    "Radian",
    "Degree",
    "Angle",
    "zero_to_two_pi",
    "negative_pi_to_pi",
    # Distance units
    "Meter",
    "Kilometer",
    "Length",
]
