"""
Areas of Use.

An area of use is the geographic bounding box within which a reference system
or coordinate operation is valid. Boxes are stored as west/east/south/north
angles; a box whose western bound is greater than its eastern bound crosses the
±180° meridian.
"""

from typing import Optional, Sequence

import numpy as np

from common.types import GeographicCoordinate
from common.units import Angle
from reference.base import IdentifiedObject


class AreaOfUse(IdentifiedObject):
    """A west/east/south/north bounding box with descriptive metadata.

    Examples
    --------
    >>> area = AreaOfUse.from_degrees("X::1", "Fiji", 170, -170, -20, -10)
    >>> area.is_crossing_antimeridian
    True
    >>> area.contains(GeographicCoordinate.from_degrees(-15, 179))
    True
    """

    def __init__(
        self,
        identifier: str,
        name: str,
        west: Angle,
        east: Angle,
        south: Angle,
        north: Angle,
        description: Optional[str] = None,
        remarks: Optional[str] = None,
        aliases: Sequence[str] = ()
    ):
        super().__init__(identifier, name, remarks, aliases)
        if south > north:
            raise ValueError(
                f"The southern bound ({south.degrees}°) is north of the northern bound ({north.degrees}°)."
            )
        self._west = west
        self._east = east
        self._south = south
        self._north = north
        self._description = description or name

    @classmethod
    def from_degrees(
        cls,
        identifier: str,
        name: str,
        west: float,
        east: float,
        south: float,
        north: float,
        description: Optional[str] = None,
        remarks: Optional[str] = None
    ) -> "AreaOfUse":
        """Create an area of use from bounds in decimal degrees."""
        return cls(
            identifier, name,
            Angle.from_degree(west), Angle.from_degree(east),
            Angle.from_degree(south), Angle.from_degree(north),
            description, remarks
        )

    @property
    def west(self) -> Angle:
        return self._west

    @property
    def east(self) -> Angle:
        return self._east

    @property
    def south(self) -> Angle:
        return self._south

    @property
    def north(self) -> Angle:
        return self._north

    @property
    def description(self) -> str:
        return self._description

    @property
    def is_crossing_antimeridian(self) -> bool:
        return self._west > self._east

    @property
    def is_global(self) -> bool:
        """Whether the area covers every longitude and latitude."""
        return (
            self._east.base_value - self._west.base_value >= 2 * np.pi - 1e-12
            and self._south.base_value <= -np.pi/2 + 1e-12
            and self._north.base_value >= np.pi/2 - 1e-12
        )

    def contains(self, coordinate: GeographicCoordinate) -> bool:
        """Determine whether a geographic coordinate lies inside the area.

        Bounds are inclusive. For a box crossing the antimeridian the
        longitude must lie east of the western bound or west of the eastern
        bound.
        """
        latitude = coordinate.latitude
        longitude = coordinate.longitude
        if not self._south.base_value <= latitude <= self._north.base_value:
            return False
        west = self._west.base_value
        east = self._east.base_value
        if self.is_crossing_antimeridian:
            return longitude >= west or longitude <= east
        return west <= longitude <= east

    def __repr__(self):
        return (
            f"AreaOfUse('{self.identifier}', '{self.name}', W={self._west.degrees:g}, "
            f"E={self._east.degrees:g}, S={self._south.degrees:g}, N={self._north.degrees:g})"
        )


AreaOfUse.WORLD = AreaOfUse.from_degrees("EPSG::1262", "World", -180, 180, -90, 90)
AreaOfUse.UNDEFINED = AreaOfUse.from_degrees("UNDEFINED::0", "Undefined", -180, 180, -90, 90)
