"""
Coordinate Systems and Axes.

A coordinate system is an ordered, non-repeating sequence of axes. The axis
order is the order in which coordinate tuples are recorded.
"""

from enum import Enum
from typing import Optional, Sequence, Tuple

from reference.base import IdentifiedObject


class AxisDirection(Enum):
    """Direction of a coordinate system axis."""
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    UP = "up"
    DOWN = "down"
    GEOCENTRIC_X = "geocentricX"
    GEOCENTRIC_Y = "geocentricY"
    GEOCENTRIC_Z = "geocentricZ"
    COLUMN_POSITIVE = "columnPositive"
    ROW_POSITIVE = "rowPositive"
    NORTH_EAST = "northEast"
    SOUTH_WEST = "southWest"


class CoordinateSystemType(Enum):
    """Kind of a coordinate system."""
    ELLIPSOIDAL = "ellipsoidal"
    CARTESIAN = "Cartesian"
    VERTICAL = "vertical"
    AFFINE = "affine"


class CoordinateSystemAxis(IdentifiedObject):
    """A named axis with direction, unit and optional value range."""

    def __init__(
        self,
        identifier: str,
        name: str,
        direction: AxisDirection,
        unit: str,
        minimum: Optional[float] = None,
        maximum: Optional[float] = None,
        abbreviation: Optional[str] = None
    ):
        super().__init__(identifier, name)
        if minimum is not None and maximum is not None and minimum > maximum:
            raise ValueError(f"The axis '{name}' has a minimum greater than its maximum.")
        self._direction = direction
        self._unit = unit
        self._minimum = minimum
        self._maximum = maximum
        self._abbreviation = abbreviation

    @property
    def direction(self) -> AxisDirection:
        return self._direction

    @property
    def unit(self) -> str:
        return self._unit

    @property
    def minimum(self) -> Optional[float]:
        return self._minimum

    @property
    def maximum(self) -> Optional[float]:
        return self._maximum

    @property
    def abbreviation(self) -> Optional[str]:
        return self._abbreviation

    def __eq__(self, other):
        if not isinstance(other, CoordinateSystemAxis):
            return NotImplemented
        return (self.identifier, self._direction, self._unit) == \
            (other.identifier, other._direction, other._unit)

    def __hash__(self):
        return hash((self.identifier, self._direction, self._unit))


class CoordinateSystem(IdentifiedObject):
    """An ordered sequence of axes.

    Raises
    ------
    ValueError
        If no axes are given or an axis repeats.
    """

    def __init__(
        self,
        identifier: str,
        name: str,
        type: CoordinateSystemType,
        axes: Sequence[CoordinateSystemAxis],
        remarks: Optional[str] = None,
        aliases: Sequence[str] = ()
    ):
        super().__init__(identifier, name, remarks, aliases)
        axes = tuple(axes or ())
        if not axes:
            raise ValueError(f"The coordinate system '{name}' has no axes.")
        if len(set(axes)) != len(axes):
            raise ValueError(f"The coordinate system '{name}' has repeating axes.")
        self._type = type
        self._axes = axes

    @property
    def type(self) -> CoordinateSystemType:
        return self._type

    @property
    def axes(self) -> Tuple[CoordinateSystemAxis, ...]:
        return self._axes

    @property
    def dimension(self) -> int:
        return len(self._axes)

    def __getitem__(self, index: int) -> CoordinateSystemAxis:
        return self._axes[index]
