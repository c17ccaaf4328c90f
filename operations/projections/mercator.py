"""
Mercator Projections.

Normal-aspect cylindrical conformal projections.

- Mercator (variant A): scale factor given at the equator
- Mercator (variant B): scale defined by a standard parallel
- Mercator (Spherical): the sphere-only form
- Popular Visualisation Pseudo Mercator: spherical formulas applied to
  ellipsoidal coordinates (web mapping)

The poles map to infinity; projecting a pole raises ValueError.

References
----------
- IOGP Publication 373-7-2, sections 1.3.3 and 1.3.3.2.
"""

from typing import Tuple

import numpy as np

from common.caching import locked_cached_property
from geodesy.latitudes import conformal_t, latitude_from_conformal_t, m_factor
from operations import methods
from operations import parameters as p
from operations.base import CoordinateProjection


def _check_not_pole(latitude: float) -> None:
    if np.isclose(abs(latitude), np.pi / 2, rtol=0.0, atol=1e-12):
        raise ValueError("The Mercator projection is undefined at the poles.")


class MercatorAProjection(CoordinateProjection):
    """Mercator (variant A), EPSG method 9804.

    E = FE + a k0 (λ - λ0)
    N = FN - a k0 ln t(φ)

    Examples
    --------
    >>> from operations.factory import world_mercator
    >>> from common.types import GeographicCoordinate
    >>> round(world_mercator().forward(GeographicCoordinate.from_degrees(45, 90)).x, 2)
    10018754.17
    """

    METHOD = methods.MERCATOR_A

    @locked_cached_property
    def _longitude_of_origin(self) -> float:
        return self._angle(p.LONGITUDE_OF_NATURAL_ORIGIN)

    @locked_cached_property
    def _scale_factor(self) -> float:
        return self._scale(p.SCALE_FACTOR_AT_NATURAL_ORIGIN)

    @locked_cached_property
    def _false_easting(self) -> float:
        return self._length(p.FALSE_EASTING)

    @locked_cached_property
    def _false_northing(self) -> float:
        return self._length(p.FALSE_NORTHING)

    def _compute_forward(self, latitude: float, longitude: float) -> Tuple[float, float]:
        _check_not_pole(latitude)
        ak0 = self._a * self._scale_factor
        easting = self._false_easting + ak0 * self._delta_longitude(longitude, self._longitude_of_origin)
        northing = self._false_northing - ak0 * np.log(conformal_t(latitude, self._ellipsoid))
        return easting, northing

    def _compute_reverse(self, easting: float, northing: float) -> Tuple[float, float]:
        ak0 = self._a * self._scale_factor
        t = np.exp((self._false_northing - northing) / ak0)
        latitude = latitude_from_conformal_t(
            t, self._ellipsoid, self._config.max_iterations, self._config.tolerance,
            {"operation": self.identifier}
        )
        longitude = (easting - self._false_easting) / ak0 + self._longitude_of_origin
        return latitude, longitude

    def _proj4_parameters(self):
        return [
            ("proj", "merc"),
            ("lon_0", self._degrees(p.LONGITUDE_OF_NATURAL_ORIGIN)),
            ("k_0", self._scale_factor),
            ("x_0", self._metres(p.FALSE_EASTING)),
            ("y_0", self._metres(p.FALSE_NORTHING)),
        ]


class MercatorBProjection(MercatorAProjection):
    """Mercator (variant B), EPSG method 9805.

    The scale factor at the equator follows from the standard parallel φ1:
    k0 = cos φ1 / √(1 - e² sin² φ1).
    """

    METHOD = methods.MERCATOR_B

    @locked_cached_property
    def _scale_factor(self) -> float:
        return m_factor(self._angle(p.LATITUDE_OF_1ST_STANDARD_PARALLEL), self._ellipsoid)

    def _proj4_parameters(self):
        return [
            ("proj", "merc"),
            ("lat_ts", self._degrees(p.LATITUDE_OF_1ST_STANDARD_PARALLEL)),
            ("lon_0", self._degrees(p.LONGITUDE_OF_NATURAL_ORIGIN)),
            ("x_0", self._metres(p.FALSE_EASTING)),
            ("y_0", self._metres(p.FALSE_NORTHING)),
        ]


class MercatorSphericalProjection(CoordinateProjection):
    """Mercator (Spherical), EPSG method 1026.

    E = FE + R (λ - λ0)
    N = FN + R ln tan(π/4 + φ/2)
    """

    METHOD = methods.MERCATOR_SPHERICAL
    REQUIRES_SPHERE = True

    @locked_cached_property
    def _origin(self) -> Tuple[float, float, float]:
        return (
            self._angle(p.LONGITUDE_OF_NATURAL_ORIGIN),
            self._length(p.FALSE_EASTING),
            self._length(p.FALSE_NORTHING),
        )

    def _compute_forward(self, latitude: float, longitude: float) -> Tuple[float, float]:
        _check_not_pole(latitude)
        lambda0, false_easting, false_northing = self._origin
        easting = false_easting + self._a * self._delta_longitude(longitude, lambda0)
        northing = false_northing + self._a * np.log(np.tan(np.pi / 4 + latitude / 2))
        return easting, northing

    def _compute_reverse(self, easting: float, northing: float) -> Tuple[float, float]:
        lambda0, false_easting, false_northing = self._origin
        latitude = np.pi / 2 - 2 * np.arctan(np.exp((false_northing - northing) / self._a))
        longitude = (easting - false_easting) / self._a + lambda0
        return latitude, longitude

    def _proj4_parameters(self):
        return [
            ("proj", "merc"),
            ("lon_0", self._degrees(p.LONGITUDE_OF_NATURAL_ORIGIN)),
            ("x_0", self._metres(p.FALSE_EASTING)),
            ("y_0", self._metres(p.FALSE_NORTHING)),
        ]


class PseudoMercatorProjection(MercatorSphericalProjection):
    """Popular Visualisation Pseudo Mercator, EPSG method 1024.

    Applies the spherical formulas with R = a to coordinates referenced to
    an ellipsoid. Not conformal.
    """

    METHOD = methods.POPULAR_VISUALISATION_PSEUDO_MERCATOR
    REQUIRES_SPHERE = False

    def _proj4_parameters(self):
        return None
