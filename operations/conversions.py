"""
Coordinate Conversions Between Coordinate Types.

Conversions that change the kind of coordinate without changing the datum:

- Geographic/geocentric conversions, EPSG 9602
- Geographic/topocentric conversions, EPSG 9837
- Geocentric/topocentric conversions, EPSG 9836
- Affine parametric transformation, EPSG 9624, between planar grids

Geocentric and topocentric coordinates are `Coordinate` triples in the unit
of the ellipsoid; geographic coordinates carry their ellipsoidal height in
the same unit.

References
----------
- IOGP Publication 373-7-2, sections 4.1.1, 4.1.2, 4.1.3 and 4.2.1.
"""

from typing import Tuple

import numpy as np

from common.caching import locked_cached_property
from common.logging_config import get_logger
from common.types import Coordinate, GeographicCoordinate
from geodesy.coordinate_models import (
    GeocentricConfig,
    geocentric_to_geographic,
    geocentric_to_topocentric,
    geographic_to_geocentric,
    topocentric_to_geocentric,
)
from geodesy.latitudes import normalize_longitude
from operations import methods
from operations import parameters as p
from operations.base import CoordinateConversion

logger = get_logger(__name__)


def _check_type(coordinate, expected, operation: str) -> None:
    if not isinstance(coordinate, expected):
        raise TypeError(f"The operation '{operation}' expects a {expected.__name__}.")


class _EllipsoidalConversion(CoordinateConversion):
    """A conversion that requires an ellipsoid."""

    METHOD = None

    def __init__(self, identifier, name, parameters, ellipsoid, area_of_use=None, config=None, **kwargs):
        if ellipsoid is None:
            raise ValueError(f"The ellipsoid of '{name}' is not specified.")
        super().__init__(identifier, name, self.METHOD, parameters, ellipsoid, area_of_use, config, **kwargs)

    @locked_cached_property
    def _geocentric_config(self) -> GeocentricConfig:
        return GeocentricConfig(self._config.max_iterations, self._config.tolerance)


class GeographicGeocentricConversion(_EllipsoidalConversion):
    """Geographic/geocentric conversions, EPSG method 9602.

    Forward maps (φ, λ, h) to (X, Y, Z); reverse applies Bowring's iteration.

    Examples
    --------
    >>> from reference.ellipsoids import WGS_1984
    >>> conversion = GeographicGeocentricConversion("GEODESY::9602", "WGS 84", None, WGS_1984)
    >>> conversion.forward(GeographicCoordinate(0.0, 0.0)).x
    6378137.0
    """

    METHOD = methods.GEOGRAPHIC_GEOCENTRIC_CONVERSION

    def _compute_forward(self, coordinate: GeographicCoordinate) -> Coordinate:
        _check_type(coordinate, GeographicCoordinate, self.name)
        return Coordinate(*geographic_to_geocentric(
            coordinate.latitude, coordinate.longitude, coordinate.height, self._ellipsoid
        ))

    def _compute_reverse(self, coordinate: Coordinate) -> GeographicCoordinate:
        _check_type(coordinate, Coordinate, self.name)
        latitude, longitude, height = geocentric_to_geographic(
            coordinate.x, coordinate.y, coordinate.z, self._ellipsoid, self._geocentric_config
        )
        return GeographicCoordinate(latitude, longitude, height)


class GeographicTopocentricConversion(_EllipsoidalConversion):
    """Geographic/topocentric conversions, EPSG method 9837.

    Topocentric coordinates are east, north and up offsets from an origin
    given by its geographic position and ellipsoidal height.
    """

    METHOD = methods.GEOGRAPHIC_TOPOCENTRIC_CONVERSION

    @locked_cached_property
    def _origin(self) -> Tuple[np.ndarray, float, float]:
        latitude = self._angle(p.LATITUDE_OF_TOPOCENTRIC_ORIGIN)
        longitude = self._angle(p.LONGITUDE_OF_TOPOCENTRIC_ORIGIN)
        height = self._length(p.ELLIPSOIDAL_HEIGHT_OF_TOPOCENTRIC_ORIGIN)
        geocentric = np.array(geographic_to_geocentric(latitude, longitude, height, self._ellipsoid))
        return geocentric, latitude, longitude

    def _compute_forward(self, coordinate: GeographicCoordinate) -> Coordinate:
        _check_type(coordinate, GeographicCoordinate, self.name)
        origin, latitude, longitude = self._origin
        geocentric = geographic_to_geocentric(
            coordinate.latitude, coordinate.longitude, coordinate.height, self._ellipsoid
        )
        return Coordinate.from_array(geocentric_to_topocentric(geocentric, origin, latitude, longitude))

    def _compute_reverse(self, coordinate: Coordinate) -> GeographicCoordinate:
        _check_type(coordinate, Coordinate, self.name)
        origin, latitude, longitude = self._origin
        x, y, z = topocentric_to_geocentric(coordinate.to_array(), origin, latitude, longitude)
        result = geocentric_to_geographic(x, y, z, self._ellipsoid, self._geocentric_config)
        return GeographicCoordinate(result[0], normalize_longitude(result[1]), result[2])


class GeocentricTopocentricConversion(_EllipsoidalConversion):
    """Geocentric/topocentric conversions, EPSG method 9836.

    The origin is given by geocentric coordinates; its geographic position,
    which orients the east-north-up axes, follows from the ellipsoid.
    """

    METHOD = methods.GEOCENTRIC_TOPOCENTRIC_CONVERSION

    @locked_cached_property
    def _origin(self) -> Tuple[np.ndarray, float, float]:
        origin = np.array([
            self._length(p.GEOCENTRIC_X_OF_TOPOCENTRIC_ORIGIN),
            self._length(p.GEOCENTRIC_Y_OF_TOPOCENTRIC_ORIGIN),
            self._length(p.GEOCENTRIC_Z_OF_TOPOCENTRIC_ORIGIN),
        ])
        latitude, longitude, _ = geocentric_to_geographic(*origin, self._ellipsoid, self._geocentric_config)
        return origin, latitude, longitude

    def _compute_forward(self, coordinate: Coordinate) -> Coordinate:
        _check_type(coordinate, Coordinate, self.name)
        origin, latitude, longitude = self._origin
        return Coordinate.from_array(geocentric_to_topocentric(coordinate.to_array(), origin, latitude, longitude))

    def _compute_reverse(self, coordinate: Coordinate) -> Coordinate:
        _check_type(coordinate, Coordinate, self.name)
        origin, latitude, longitude = self._origin
        return Coordinate.from_array(topocentric_to_geocentric(coordinate.to_array(), origin, latitude, longitude))


class AffineParametricTransformation(CoordinateConversion):
    """Affine parametric transformation, EPSG method 9624.

    X' = A0 + A1 X + A2 Y
    Y' = B0 + B1 X + B2 Y

    The reverse solves the 2x2 system; a singular matrix raises ValueError.
    Used by grid CRSs such as seismic bin grids.
    """

    METHOD = methods.AFFINE_PARAMETRIC_TRANSFORMATION

    def __init__(self, identifier, name, parameters, area_of_use=None, config=None, **kwargs):
        super().__init__(identifier, name, self.METHOD, parameters, None, area_of_use, config, **kwargs)

    @locked_cached_property
    def _matrix(self) -> Tuple[np.ndarray, np.ndarray]:
        offset = np.array([self._scale(p.A0), self._scale(p.B0)])
        matrix = np.array([
            [self._scale(p.A1), self._scale(p.A2)],
            [self._scale(p.B1), self._scale(p.B2)],
        ])
        return offset, matrix

    def _compute_forward(self, coordinate: Coordinate) -> Coordinate:
        _check_type(coordinate, Coordinate, self.name)
        offset, matrix = self._matrix
        x, y = offset + matrix @ np.array([coordinate.x, coordinate.y])
        return Coordinate(float(x), float(y), coordinate.z)

    def _compute_reverse(self, coordinate: Coordinate) -> Coordinate:
        _check_type(coordinate, Coordinate, self.name)
        offset, matrix = self._matrix
        try:
            x, y = np.linalg.solve(matrix, np.array([coordinate.x, coordinate.y]) - offset)
        except np.linalg.LinAlgError as error:
            raise ValueError(f"The affine transformation '{self.name}' is not invertible.") from error
        return Coordinate(float(x), float(y), coordinate.z)
