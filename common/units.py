"""
Unit Registry and Typed Quantities for Geodetic Computations.

This module provides a centralized unit system using the `pint` library and two
strongly-typed value classes built on top of it: `Angle` and `Length`. Every
angular or linear parameter that enters a coordinate operation is carried as one
of these types, so a degree is never mistaken for a radian and a Clarke's foot is
never mistaken for a metre.

Scientific Context
------------------
Geodetic parameter sets are published in a mixture of units: sexagesimal
degrees, grads, arc-seconds, metres, US survey feet, Clarke's feet and links.
Formulas, however, work on plain doubles. Each typed value therefore exposes a
canonical `base_value` (radians for angles, metres for lengths) that formulas
consume directly.

Note that pint treats the radian as dimensionless, so a bare quantity cannot tell
an angle from a scale factor. The typed wrappers close that gap.

Example Usage
-------------
>>> from common.units import Angle, Length
>>> Angle.from_degree(49, 30).base_value
0.8639379797371932
>>> Length.from_clarkes_foot(20926348).to('metre').value
6378293.645208759
"""

from functools import total_ordering
from typing import Union

import numpy as np
import pint
from pint import UnitRegistry as PintUnitRegistry

# Create the global unit registry
ureg = PintUnitRegistry()

# Convenience alias for creating quantities
Q_ = ureg.Quantity


class UnitRegistry:
    """Wrapper around pint UnitRegistry with surveying extensions.

    The defaults shipped with pint lack several historical units still used
    by national grids. They are added here, once, on the shared registry.

    Attributes
    ----------
    registry : pint.UnitRegistry
        The underlying pint unit registry.

    Examples
    --------
    >>> units = UnitRegistry()
    >>> units.quantity(66, 'clarkes_link').to('clarkes_foot')
    <Quantity(43.56, 'clarkes_foot')>
    """

    SURVEY_UNITS = (
        "clarkes_foot = 0.3047972654 * meter",
        "clarkes_link = 0.66 * clarkes_foot",
        "us_survey_foot = 1200 / 3937 * meter",
        "german_legal_metre = 1.0000135965 * meter",
    )

    def __init__(self):
        """Initialize the unit registry with surveying units."""
        self._registry = ureg
        self._setup_survey_units()

    def _setup_survey_units(self) -> None:
        """Define survey units that pint does not know about."""
        for definition in self.SURVEY_UNITS:
            name = definition.split("=")[0].strip()
            if name in self._registry:
                continue
            try:
                self._registry.define(definition)
            except pint.errors.RedefinitionError:
                # Defined concurrently by another instance
                pass

    @property
    def registry(self) -> PintUnitRegistry:
        """Access the underlying pint registry."""
        return self._registry

    def quantity(self, value: float, unit: str) -> pint.Quantity:
        """Create a quantity with units.

        Parameters
        ----------
        value : float
            The numerical value.
        unit : str
            The unit string (e.g., 'degree', 'clarkes_foot').

        Returns
        -------
        pint.Quantity
            A quantity object with associated units.
        """
        return self._registry.Quantity(value, unit)

    def unit(self, name: Union[str, pint.Unit]) -> pint.Unit:
        """Resolve a unit name to a pint unit."""
        return self._registry.Unit(name)

    def is_angular(self, unit: pint.Unit) -> bool:
        """Whether a unit converts to radians."""
        return (unit.dimensionality == self._registry.radian.dimensionality
                and unit != self._registry.dimensionless)

    def is_linear(self, unit: pint.Unit) -> bool:
        """Whether a unit has the dimension of length."""
        return unit.dimensionality == self._registry.meter.dimensionality


units = UnitRegistry()


@total_ordering
class _Measure:
    """Immutable magnitude paired with a pint unit.

    Subclasses fix the base unit and the accepted dimensionality.
    """

    __slots__ = ("_value", "_unit", "_base_value")

    BASE_UNIT = ""

    def __init__(self, value: float, unit: Union[str, pint.Unit, None] = None):
        resolved = units.unit(unit if unit is not None else self.BASE_UNIT)
        if not self._accepts(resolved):
            raise ValueError(
                f"{type(self).__name__} cannot be measured in '{resolved}'"
            )
        value = float(value)
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_unit", resolved)
        if resolved == units.unit(self.BASE_UNIT):
            base_value = value
        else:
            base_value = float(Q_(value, resolved).to(self.BASE_UNIT).magnitude)
        object.__setattr__(self, "_base_value", base_value)

    @classmethod
    def _accepts(cls, unit: pint.Unit) -> bool:
        raise NotImplementedError

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def value(self) -> float:
        """Magnitude in `unit`."""
        return self._value

    @property
    def unit(self) -> pint.Unit:
        """The unit the magnitude is expressed in."""
        return self._unit

    @property
    def base_value(self) -> float:
        """Magnitude converted to the base unit."""
        return self._base_value

    @property
    def quantity(self) -> pint.Quantity:
        """The value as a pint quantity."""
        return Q_(self._value, self._unit)

    def to(self, unit: Union[str, pint.Unit]) -> "_Measure":
        """Convert to another unit of the same kind."""
        target = units.unit(unit)
        if target == self._unit:
            return self
        return type(self)(Q_(self._value, self._unit).to(target).magnitude, target)

    def _same_kind(self, other) -> bool:
        return isinstance(other, type(self)) or isinstance(self, type(other))

    def __eq__(self, other):
        if not isinstance(other, _Measure) or not self._same_kind(other):
            return NotImplemented
        return self._base_value == other._base_value

    def __lt__(self, other):
        if not isinstance(other, _Measure) or not self._same_kind(other):
            return NotImplemented
        return self._base_value < other._base_value

    def __hash__(self):
        return hash((type(self).__name__, self._base_value))

    def __add__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return type(self)(self._value + other.to(self._unit).value, self._unit)

    def __sub__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return type(self)(self._value - other.to(self._unit).value, self._unit)

    def __neg__(self):
        return type(self)(-self._value, self._unit)

    def __abs__(self):
        return type(self)(abs(self._value), self._unit)

    def __mul__(self, factor):
        if not isinstance(factor, (int, float, np.floating, np.integer)):
            return NotImplemented
        return type(self)(self._value * factor, self._unit)

    __rmul__ = __mul__

    def __truediv__(self, divisor):
        if isinstance(divisor, type(self)):
            return self._base_value / divisor._base_value
        if not isinstance(divisor, (int, float, np.floating, np.integer)):
            return NotImplemented
        return type(self)(self._value / divisor, self._unit)

    def __float__(self):
        return self._base_value

    def __repr__(self):
        return f"{type(self).__name__}({self._value!r}, '{self._unit}')"

    def __str__(self):
        return f"{self._value:g} {self._unit:~}"


class Angle(_Measure):
    """An angular quantity.

    The base value is expressed in radians.

    Examples
    --------
    >>> Angle.from_degree(-2).degrees
    -2.0
    >>> Angle.from_arc_second(3600) == Angle.from_degree(1)
    True
    """

    __slots__ = ()

    BASE_UNIT = "radian"

    @classmethod
    def _accepts(cls, unit: pint.Unit) -> bool:
        return units.is_angular(unit)

    @property
    def degrees(self) -> float:
        """Magnitude in decimal degrees."""
        if self._unit == units.unit("degree"):
            return self._value
        return float(np.degrees(self._base_value))

    @classmethod
    def from_radian(cls, value: float) -> "Angle":
        """Create an angle from radians."""
        return cls(value, "radian")

    @classmethod
    def from_degree(cls, degrees: float, minutes: float = 0.0, seconds: float = 0.0) -> "Angle":
        """Create an angle from degrees, minutes and seconds.

        The sign of `degrees` applies to the whole value, so
        ``from_degree(-2, 30)`` is -2.5 degrees.

        Parameters
        ----------
        degrees : float
            Whole or decimal degrees.
        minutes : float, optional
            Arc-minutes.
        seconds : float, optional
            Arc-seconds.

        Returns
        -------
        Angle
            Angle measured in decimal degrees.
        """
        sign = -1.0 if degrees < 0 or (degrees == 0 and np.signbit(degrees)) else 1.0
        value = abs(degrees) + minutes / 60.0 + seconds / 3600.0
        return cls(sign * value, "degree")

    @classmethod
    def from_arc_second(cls, value: float) -> "Angle":
        """Create an angle from arc-seconds."""
        return cls(value, "arcsecond")

    @classmethod
    def from_grad(cls, value: float) -> "Angle":
        """Create an angle from grads (gons)."""
        return cls(value, "gradian")


class Length(_Measure):
    """A linear quantity.

    The base value is expressed in metres.

    Examples
    --------
    >>> round(Length.from_us_survey_foot(3937).base_value, 6)
    1200.0
    """

    __slots__ = ()

    BASE_UNIT = "meter"

    @classmethod
    def _accepts(cls, unit: pint.Unit) -> bool:
        return units.is_linear(unit)

    @classmethod
    def from_metre(cls, value: float) -> "Length":
        """Create a length from metres."""
        return cls(value, "meter")

    @classmethod
    def from_kilometre(cls, value: float) -> "Length":
        """Create a length from kilometres."""
        return cls(value, "kilometer")

    @classmethod
    def from_foot(cls, value: float) -> "Length":
        """Create a length from international feet."""
        return cls(value, "foot")

    @classmethod
    def from_us_survey_foot(cls, value: float) -> "Length":
        """Create a length from US survey feet."""
        return cls(value, "us_survey_foot")

    @classmethod
    def from_clarkes_foot(cls, value: float) -> "Length":
        """Create a length from Clarke's feet."""
        return cls(value, "clarkes_foot")

    @classmethod
    def from_clarkes_link(cls, value: float) -> "Length":
        """Create a length from Clarke's links."""
        return cls(value, "clarkes_link")


def as_length(value: Union[float, Length]) -> Length:
    """Wrap a bare number as a length in metres."""
    if isinstance(value, Length):
        return value
    return Length.from_metre(value)


def as_angle(value: Union[float, Angle]) -> Angle:
    """Wrap a bare number as an angle in radians."""
    if isinstance(value, Angle):
        return value
    return Angle.from_radian(value)
