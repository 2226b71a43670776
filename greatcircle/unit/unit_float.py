"""Float-based units with automatic SI conversion.

UnitFloat is a ``float`` subclass whose value is always held in SI units
(radians for angles, meters for lengths). Because it *is* a float, a unit
instance can be handed straight to ``math`` functions and to the spherical
formulas, which work in SI throughout.

Example:
    >>> class Meter(UnitFloat):
    ...     IS_FAMILY_ROOT = True
    ...     SYMBOL = "m"
    >>> class Kilometer(Meter):
    ...     SCALE_TO_SI = 1000.0
    ...     SYMBOL = "km"
    >>> float(Kilometer(2.5))
    2500.0
"""

from __future__ import annotations

from typing import ClassVar

from .unit_base import Number, Unit


class UnitFloat(float, Unit):
    """Base class for float units stored in SI.

    Attributes:
        SCALE_TO_SI (ClassVar[float]): Factor converting the native scale to SI.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
    """

    SCALE_TO_SI: ClassVar[float] = 1.0
    IS_FAMILY_ROOT: ClassVar[bool] = True

    def __new__(cls, value: Number):
        """Create an instance from a value expressed in the unit's native scale."""
        si_val = float(value) * cls.SCALE_TO_SI
        return float.__new__(cls, si_val)

    @classmethod
    def from_si(cls, si_value: float) -> UnitFloat:
        """Create an instance directly from an SI value.

        Args:
            si_value: Value already in SI units.

        Returns:
            UnitFloat: New instance holding ``si_value``.
        """
        return float.__new__(cls, si_value)

    def to(self, unit_type: type[UnitFloat]) -> float:
        """Return the value expressed in the native scale of ``unit_type``.

        Raises:
            TypeError: If ``unit_type`` is from another unit family.
        """
        self._check_same_root(unit_type)
        return float(self) / unit_type.SCALE_TO_SI

    def as_unit(self, unit_type: type[UnitFloat]) -> UnitFloat:
        """Re-tag the value as ``unit_type`` without changing its SI value."""
        self._check_same_root(unit_type)
        return unit_type.from_si(float(self))

    # -------------------------------- Arithmetic --------------------------------
    def __add__(self, other: UnitFloat | Number) -> UnitFloat:
        """Add a unit of the same family, or a plain number taken as SI.

        Raises:
            TypeError: If ``other`` is from another unit family.
        """
        self._check_same_root(type(other))
        return type(self).from_si(float(self) + float(other))

    def __radd__(self, other: UnitFloat | Number) -> UnitFloat:
        """Right-side addition; see ``__add__``."""
        return self.__add__(other)

    def __sub__(self, other: UnitFloat | Number) -> UnitFloat:
        """Subtract a unit of the same family, or a plain number taken as SI.

        Raises:
            TypeError: If ``other`` is from another unit family.
        """
        self._check_same_root(type(other))
        return type(self).from_si(float(self) - float(other))

    def __rsub__(self, other: UnitFloat | Number) -> UnitFloat:
        """Right-side subtraction, with ``other`` as the minuend.

        Raises:
            TypeError: If ``other`` is from another unit family.
        """
        self._check_same_root(type(other))
        return type(self).from_si(float(other) - float(self))

    def __mul__(self, k: Number) -> UnitFloat:
        """Scale by a plain number.

        Raises:
            TypeError: If ``k`` is not numeric or is itself a unit.
        """
        if isinstance(k, Number) and not isinstance(k, Unit):
            return type(self).from_si(float(self) * float(k))
        raise TypeError(f"cannot scale {type(self).__name__} by {type(k).__name__}")

    def __rmul__(self, k: Number) -> UnitFloat:
        """Right-side scaling; see ``__mul__``."""
        return self.__mul__(k)

    def __truediv__(self, k: Number) -> UnitFloat:
        """Divide by a plain number.

        Raises:
            TypeError: If ``k`` is not numeric or is itself a unit.
        """
        if isinstance(k, Number) and not isinstance(k, Unit):
            return type(self).from_si(float(self) / float(k))
        raise TypeError(f"cannot divide {type(self).__name__} by {type(k).__name__}")

    def __neg__(self) -> UnitFloat:
        """Negate, keeping the unit type."""
        return type(self).from_si(-float(self))

    # -------------------------------- Comparison --------------------------------
    def __lt__(self, other: UnitFloat | Number) -> bool:
        """Less-than within one family.

        Raises:
            TypeError: If ``other`` is from another unit family.
        """
        self._check_same_root(type(other))
        return float(self) < float(other)

    def __le__(self, other: UnitFloat | Number) -> bool:
        """Less-than-or-equal within one family.

        Raises:
            TypeError: If ``other`` is from another unit family.
        """
        self._check_same_root(type(other))
        return float(self) <= float(other)

    def __gt__(self, other: UnitFloat | Number) -> bool:
        """Greater-than within one family.

        Raises:
            TypeError: If ``other`` is from another unit family.
        """
        self._check_same_root(type(other))
        return float(self) > float(other)

    def __ge__(self, other: UnitFloat | Number) -> bool:
        """Greater-than-or-equal within one family.

        Raises:
            TypeError: If ``other`` is from another unit family.
        """
        self._check_same_root(type(other))
        return float(self) >= float(other)

    def __eq__(self, other: object) -> bool:
        """Equality of SI values.

        Units of different families are never equal; plain numbers compare
        as SI values.
        """
        if not isinstance(other, Number):
            return NotImplemented
        if isinstance(other, Unit) and other.ROOT is not type(self).ROOT:
            return False
        return float(self) == float(other)

    def __ne__(self, other: object) -> bool:
        """Inverse of ``__eq__``."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = float.__hash__

    def __str__(self) -> str:
        """Value in the unit's native scale followed by its symbol (e.g. ``"90.0 °"``)."""
        return f"{self.to(type(self))} {type(self).SYMBOL}".strip()

    def __repr__(self) -> str:
        """Native value and symbol, with the SI value (e.g. ``"90 ° (= 1.5708 SI)"``)."""
        return f"{self.to(type(self)):g} {type(self).SYMBOL} (= {float(self):g} SI)"
