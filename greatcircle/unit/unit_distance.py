"""Length units used for radii and travel distances.

Classes:
    Meter: Base length unit (SI).
    Kilometer: 1000 meters.

Example:
    >>> radius = Kilometer(6371)
    >>> float(radius)
    6371000.0
    >>> print(Meter(1500).to(Kilometer))
    1.5
"""

from __future__ import annotations

from .unit_float import UnitFloat


class Meter(UnitFloat):
    """Length unit: Meter (SI base unit for length)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m"


class Kilometer(Meter):
    """Length unit: Kilometer, stored internally as meters."""

    SCALE_TO_SI = 1000.0
    SYMBOL = "km"


Length = Meter | Kilometer
