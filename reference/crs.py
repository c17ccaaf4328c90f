"""
Coordinate Reference Systems.

A coordinate reference system composes a coordinate system, a datum and an area
of use under an identified name. The closed set of variants is:

- `Geographic2DCRS` / `Geographic3DCRS`: ellipsoidal coordinates on a geodetic datum
- `GeocentricCRS`: earth-centred cartesian coordinates on a geodetic datum
- `ProjectedCRS`: a base geographic system plus a map projection
- `VerticalCRS`: heights on a vertical datum
- `CompoundCRS`: an ordered combination of two or more systems
- `GridCRS`: a projected system plus an affine grid operation
"""

from typing import TYPE_CHECKING, Optional, Sequence, Tuple

from common.types import Coordinate, GeographicCoordinate
from reference.area_of_use import AreaOfUse
from reference.base import IdentifiedObject
from reference.coordinate_system import CoordinateSystem, CoordinateSystemType
from reference.datum import Datum, GeodeticDatum, VerticalDatum
from reference.ellipsoid import Ellipsoid

if TYPE_CHECKING:
    from operations.base import CoordinateOperation, CoordinateProjection


class CoordinateReferenceSystem(IdentifiedObject):
    """Base class of coordinate reference systems."""

    def __init__(
        self,
        identifier: str,
        name: str,
        area_of_use: Optional[AreaOfUse] = None,
        scope: Optional[str] = None,
        remarks: Optional[str] = None,
        aliases: Sequence[str] = ()
    ):
        super().__init__(identifier, name, remarks, aliases)
        self._area_of_use = area_of_use or AreaOfUse.UNDEFINED
        self._scope = scope

    @property
    def area_of_use(self) -> AreaOfUse:
        return self._area_of_use

    @property
    def scope(self) -> Optional[str]:
        return self._scope

    @property
    def dimension(self) -> int:
        raise NotImplementedError


class SingleCRS(CoordinateReferenceSystem):
    """A reference system made of one coordinate system and one datum."""

    EXPECTED_TYPE: Optional[CoordinateSystemType] = None
    EXPECTED_DIMENSIONS: Tuple[int, ...] = ()

    def __init__(
        self,
        identifier: str,
        name: str,
        coordinate_system: CoordinateSystem,
        datum: Datum,
        area_of_use: Optional[AreaOfUse] = None,
        **kwargs
    ):
        super().__init__(identifier, name, area_of_use, **kwargs)
        if coordinate_system is None:
            raise ValueError(f"The coordinate system of '{name}' is not specified.")
        if datum is None:
            raise ValueError(f"The datum of '{name}' is not specified.")
        if self.EXPECTED_TYPE is not None and coordinate_system.type != self.EXPECTED_TYPE:
            raise ValueError(
                f"'{name}' requires a {self.EXPECTED_TYPE.value} coordinate system, "
                f"got {coordinate_system.type.value}."
            )
        if self.EXPECTED_DIMENSIONS and coordinate_system.dimension not in self.EXPECTED_DIMENSIONS:
            raise ValueError(
                f"'{name}' requires a coordinate system of dimension "
                f"{' or '.join(map(str, self.EXPECTED_DIMENSIONS))}, got {coordinate_system.dimension}."
            )
        self._coordinate_system = coordinate_system
        self._datum = datum

    @property
    def coordinate_system(self) -> CoordinateSystem:
        return self._coordinate_system

    @property
    def datum(self) -> Datum:
        return self._datum

    @property
    def dimension(self) -> int:
        return self._coordinate_system.dimension


class GeographicCRS(SingleCRS):
    """A geographic reference system on a geodetic datum."""

    EXPECTED_TYPE = CoordinateSystemType.ELLIPSOIDAL
    EXPECTED_DIMENSIONS = (2, 3)

    def __init__(self, identifier, name, coordinate_system, datum: GeodeticDatum, area_of_use=None, **kwargs):
        if datum is not None and not isinstance(datum, GeodeticDatum):
            raise TypeError("A geographic reference system requires a geodetic datum.")
        super().__init__(identifier, name, coordinate_system, datum, area_of_use, **kwargs)

    @property
    def ellipsoid(self) -> Ellipsoid:
        return self._datum.ellipsoid


class Geographic2DCRS(GeographicCRS):
    """Latitude and longitude on a geodetic datum."""

    EXPECTED_DIMENSIONS = (2,)


class Geographic3DCRS(GeographicCRS):
    """Latitude, longitude and ellipsoidal height on a geodetic datum."""

    EXPECTED_DIMENSIONS = (3,)


class GeocentricCRS(SingleCRS):
    """Earth-centred, earth-fixed cartesian coordinates on a geodetic datum."""

    EXPECTED_TYPE = CoordinateSystemType.CARTESIAN
    EXPECTED_DIMENSIONS = (3,)

    def __init__(self, identifier, name, coordinate_system, datum: GeodeticDatum, area_of_use=None, **kwargs):
        if datum is not None and not isinstance(datum, GeodeticDatum):
            raise TypeError("A geocentric reference system requires a geodetic datum.")
        super().__init__(identifier, name, coordinate_system, datum, area_of_use, **kwargs)

    @property
    def ellipsoid(self) -> Ellipsoid:
        return self._datum.ellipsoid


class VerticalCRS(SingleCRS):
    """Heights on a vertical datum."""

    EXPECTED_TYPE = CoordinateSystemType.VERTICAL
    EXPECTED_DIMENSIONS = (1,)

    def __init__(self, identifier, name, coordinate_system, datum: VerticalDatum, area_of_use=None, **kwargs):
        if datum is not None and not isinstance(datum, VerticalDatum):
            raise TypeError("A vertical reference system requires a vertical datum.")
        super().__init__(identifier, name, coordinate_system, datum, area_of_use, **kwargs)


class ProjectedCRS(SingleCRS):
    """A map grid derived from a geographic system through a projection.

    Parameters
    ----------
    base : GeographicCRS
        The geographic system projected coordinates are derived from.
    projection : CoordinateProjection
        The map projection; its ellipsoid must be the base ellipsoid.
    """

    EXPECTED_TYPE = CoordinateSystemType.CARTESIAN
    EXPECTED_DIMENSIONS = (2, 3)

    def __init__(
        self,
        identifier: str,
        name: str,
        base: GeographicCRS,
        coordinate_system: CoordinateSystem,
        projection: "CoordinateProjection",
        area_of_use: Optional[AreaOfUse] = None,
        **kwargs
    ):
        if base is None:
            raise ValueError(f"The base reference system of '{name}' is not specified.")
        if projection is None:
            raise ValueError(f"The projection of '{name}' is not specified.")
        if projection.ellipsoid != base.ellipsoid:
            raise ValueError(
                f"The projection of '{name}' is bound to '{projection.ellipsoid.name}', "
                f"the base reference system to '{base.ellipsoid.name}'."
            )
        super().__init__(identifier, name, coordinate_system, base.datum, area_of_use, **kwargs)
        self._base = base
        self._projection = projection

    @property
    def base(self) -> GeographicCRS:
        return self._base

    @property
    def projection(self) -> "CoordinateProjection":
        return self._projection

    @property
    def ellipsoid(self) -> Ellipsoid:
        return self._base.ellipsoid

    def forward(self, coordinate: GeographicCoordinate) -> Coordinate:
        """Project a coordinate of the base system."""
        return self._projection.forward(coordinate)

    def reverse(self, coordinate: Coordinate) -> GeographicCoordinate:
        """Return the base system coordinate of a projected coordinate."""
        return self._projection.reverse(coordinate)


class CompoundCRS(CoordinateReferenceSystem):
    """An ordered combination of reference systems whose dimensions sum."""

    def __init__(
        self,
        identifier: str,
        name: str,
        components: Sequence[CoordinateReferenceSystem],
        area_of_use: Optional[AreaOfUse] = None,
        **kwargs
    ):
        super().__init__(identifier, name, area_of_use, **kwargs)
        components = tuple(components or ())
        if len(components) < 2:
            raise ValueError(f"The compound reference system '{name}' needs at least two components.")
        if any(component is None for component in components):
            raise ValueError(f"The compound reference system '{name}' has an unspecified component.")
        self._components = components

    @property
    def components(self) -> Tuple[CoordinateReferenceSystem, ...]:
        return self._components

    @property
    def dimension(self) -> int:
        return sum(component.dimension for component in self._components)


class GridCRS(CoordinateReferenceSystem):
    """A grid (for example a seismic bin grid) defined over a projected system.

    Parameters
    ----------
    base : ProjectedCRS
        The projected system grid coordinates are derived from.
    projection : CoordinateOperation
        Operation mapping projected coordinates to grid coordinates.
    """

    def __init__(
        self,
        identifier: str,
        name: str,
        base: ProjectedCRS,
        coordinate_system: CoordinateSystem,
        projection: "CoordinateOperation",
        area_of_use: Optional[AreaOfUse] = None,
        **kwargs
    ):
        super().__init__(identifier, name, area_of_use or base.area_of_use, **kwargs)
        if coordinate_system is None or coordinate_system.type != CoordinateSystemType.AFFINE:
            raise ValueError(f"The grid reference system '{name}' requires an affine coordinate system.")
        if projection is None:
            raise ValueError(f"The grid operation of '{name}' is not specified.")
        self._base = base
        self._coordinate_system = coordinate_system
        self._projection = projection

    @property
    def base(self) -> ProjectedCRS:
        return self._base

    @property
    def coordinate_system(self) -> CoordinateSystem:
        return self._coordinate_system

    @property
    def projection(self) -> "CoordinateOperation":
        return self._projection

    @property
    def dimension(self) -> int:
        return self._coordinate_system.dimension

    def forward(self, coordinate: Coordinate) -> Coordinate:
        """Map a projected coordinate to grid coordinates."""
        return self._projection.forward(coordinate)

    def reverse(self, coordinate: Coordinate) -> Coordinate:
        """Map grid coordinates back to the projected system."""
        return self._projection.reverse(coordinate)
