"""Base unit class for type-safe geodesic quantities.

Every unit belongs to a "family" (angle, length, ...) identified by its ROOT
class. Values of the same family can be combined; mixing families raises
TypeError. The ROOT of a subclass is resolved automatically from the first
ancestor flagged with IS_FAMILY_ROOT.

Example:
    >>> class Radian(Unit):
    ...     IS_FAMILY_ROOT = True
    >>> class Degree(Radian):
    ...     pass  # ROOT = Radian
"""

from __future__ import annotations

from typing import ClassVar

from ..config import BASE_TYPE

Number = BASE_TYPE


class Unit:
    """Base class for all unit types.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class defining the unit family.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
    """

    __slots__ = ()

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "ROOT" in cls.__dict__ and cls.ROOT is not None:
            return

        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            cls.ROOT = cls
            return

        for base in cls.mro()[1:]:
            if base.__dict__.get("IS_FAMILY_ROOT", False):
                cls.ROOT = base
                return

        cls.ROOT = cls

    @classmethod
    def _check_same_root(cls, unit_type: type):
        """Check that ``unit_type`` belongs to the same family as this unit.

        Plain numbers carry no family and are accepted as SI scalars.

        Raises:
            TypeError: If the two types belong to different unit families.
        """
        if not issubclass(unit_type, Unit):
            if issubclass(unit_type, Number):
                return
            msg = f"cannot combine {cls.__name__} with {unit_type.__name__}"
            raise TypeError(msg)
        if cls.ROOT is not unit_type.ROOT:
            msg = f"incompatible unit families: {cls.ROOT.__name__} and {unit_type.ROOT.__name__}"
            raise TypeError(msg)
