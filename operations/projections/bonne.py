"""
Bonne Projections.

Pseudoconic equal-area projections: parallels are concentric arcs spaced by
their true meridian distance, and each parallel keeps its true length.

- Bonne, EPSG 9827
- Bonne (South Orientated), EPSG 9828

A natural origin on the equator degenerates into the Sinusoidal projection
and is rejected.

References
----------
- IOGP Publication 373-7-2, section 1.3.6.
- Snyder (1987), chapter 19.
"""

from typing import Tuple

import numpy as np

from common.caching import locked_cached_property
from geodesy.latitudes import footpoint_latitude, m_factor, meridian_arc
from operations import methods
from operations import parameters as p
from operations.base import CoordinateProjection


class BonneProjection(CoordinateProjection):
    """Bonne, EPSG method 9827.

    ρ = a m_O / sin φ_O + M_O - M
    T = a m (λ - λ0) / ρ
    E = FE + ρ sin T
    N = FN + a m_O / sin φ_O - ρ cos T
    """

    METHOD = methods.BONNE
    # -1 for the south orientated grid
    _AXIS_SIGN = 1.0

    def __init__(self, identifier, name, parameters, ellipsoid, area_of_use=None, config=None, **kwargs):
        super().__init__(identifier, name, parameters, ellipsoid, area_of_use, config, **kwargs)
        if np.isclose(self._angle(p.LATITUDE_OF_NATURAL_ORIGIN), 0.0, rtol=0.0, atol=1e-15):
            raise ValueError("The latitude of natural origin of a Bonne projection must not be zero.")

    @locked_cached_property
    def _origin(self) -> Tuple[float, float, float]:
        phi0 = self._angle(p.LATITUDE_OF_NATURAL_ORIGIN)
        apex = self._a * m_factor(phi0, self._ellipsoid) / np.sin(phi0)
        return float(phi0), float(apex), meridian_arc(phi0, self._ellipsoid)

    def _compute_forward(self, latitude: float, longitude: float) -> Tuple[float, float]:
        phi0, apex, arc0 = self._origin
        rho = apex + arc0 - meridian_arc(latitude, self._ellipsoid)
        if rho == 0:
            t = 0.0
        else:
            t = self._a * m_factor(latitude, self._ellipsoid) * (
                self._delta_longitude(longitude, self._angle(p.LONGITUDE_OF_NATURAL_ORIGIN))
            ) / rho
        easting = self._length(p.FALSE_EASTING) + self._AXIS_SIGN * rho * np.sin(t)
        northing = self._length(p.FALSE_NORTHING) + self._AXIS_SIGN * (apex - rho * np.cos(t))
        return easting, northing

    def _compute_reverse(self, easting: float, northing: float) -> Tuple[float, float]:
        phi0, apex, arc0 = self._origin
        lambda0 = self._angle(p.LONGITUDE_OF_NATURAL_ORIGIN)
        dx = self._AXIS_SIGN * (easting - self._length(p.FALSE_EASTING))
        dy = apex - self._AXIS_SIGN * (northing - self._length(p.FALSE_NORTHING))
        sign = np.sign(phi0)
        rho = sign * np.hypot(dx, dy)
        latitude = footpoint_latitude(
            apex + arc0 - rho, self._ellipsoid, self._config.max_iterations, self._config.tolerance,
            {"operation": self.identifier}
        )
        m = m_factor(latitude, self._ellipsoid)
        if np.isclose(m, 0.0, rtol=0.0, atol=1e-15):
            return latitude, lambda0
        longitude = lambda0 + rho * np.arctan2(sign * dx, sign * dy) / (self._a * m)
        return latitude, longitude

    def _proj4_parameters(self):
        return [
            ("proj", "bonne"),
            ("lat_1", self._degrees(p.LATITUDE_OF_NATURAL_ORIGIN)),
            ("lon_0", self._degrees(p.LONGITUDE_OF_NATURAL_ORIGIN)),
            ("x_0", self._metres(p.FALSE_EASTING)),
            ("y_0", self._metres(p.FALSE_NORTHING)),
        ]


class BonneSouthOrientatedProjection(BonneProjection):
    """Bonne (South Orientated), EPSG method 9828.

    Axes increase westwards and southwards:
    W = FE - ρ sin T, S = FN - (a m_O / sin φ_O - ρ cos T).
    """

    METHOD = methods.BONNE_SOUTH_ORIENTATED
    _AXIS_SIGN = -1.0

    def _proj4_parameters(self):
        return None
