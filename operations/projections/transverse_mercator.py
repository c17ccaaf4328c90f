"""
Transverse Mercator Projections.

Scientific Context
------------------
Domain: Map projections, transverse cylindrical conformal family

The projection follows the JHS formulas (Poder and Engsager), a series in
the third flattening n = f / (2 - f) that stays at sub-millimetre accuracy
within several zones of the central meridian:

    Q = asinh(tan φ) - e atanh(e sin φ),  β = atan(sinh Q)
    η0 = atanh(cos β sin(λ - λ0)),        ξ0 = asin(sin β cosh η0)
    ξ = ξ0 + Σ h_i sin(2i ξ0) cosh(2i η0)
    η = η0 + Σ h_i cos(2i ξ0) sinh(2i η0)
    E = FE + k0 B η,  N = FN + k0 (B ξ - M0)

Variants implemented:
- Transverse Mercator, EPSG 9807
- Transverse Mercator (South Orientated), EPSG 9808
- Transverse Mercator Zoned Grid System, EPSG 9824

References
----------
- IOGP Publication 373-7-2, section 3.3.5.
"""

from typing import Tuple

import numpy as np

from common.caching import locked_cached_property
from operations import methods
from operations import parameters as p
from operations.base import CoordinateProjection


class TransverseMercatorProjection(CoordinateProjection):
    """Transverse Mercator, EPSG method 9807.

    Examples
    --------
    >>> from operations.factory import british_national_grid
    >>> from common.types import GeographicCoordinate
    >>> point = british_national_grid().forward(GeographicCoordinate.from_degrees(50.5, 0.5))
    >>> round(point.x, 2), round(point.y, 2)
    (577274.99, 69740.5)
    """

    METHOD = methods.TRANSVERSE_MERCATOR
    # -1 for the south orientated grid
    _AXIS_SIGN = 1.0

    @locked_cached_property
    def _series(self) -> Tuple[float, np.ndarray, np.ndarray]:
        """Return B and the forward and reverse coefficients h1..h4."""
        f = self._ellipsoid.flattening
        n = f / (2 - f)
        b = self._a / (1 + n) * (1 + n**2 / 4 + n**4 / 64)
        forward = np.array([
            n / 2 - 2 * n**2 / 3 + 5 * n**3 / 16 + 41 * n**4 / 180,
            13 * n**2 / 48 - 3 * n**3 / 5 + 557 * n**4 / 1440,
            61 * n**3 / 240 - 103 * n**4 / 140,
            49561 * n**4 / 161280,
        ])
        reverse = np.array([
            n / 2 - 2 * n**2 / 3 + 37 * n**3 / 96 - n**4 / 360,
            n**2 / 48 + n**3 / 15 - 437 * n**4 / 1440,
            17 * n**3 / 480 - 37 * n**4 / 840,
            4397 * n**4 / 161280,
        ])
        return float(b), forward, reverse

    @locked_cached_property
    def _arc_of_origin(self) -> float:
        """M0, the rectified meridian distance of the natural origin latitude."""
        b, forward, _ = self._series
        phi0 = self._angle(p.LATITUDE_OF_NATURAL_ORIGIN)
        if phi0 == 0:
            return 0.0
        if np.isclose(abs(phi0), np.pi / 2, rtol=0.0, atol=1e-15):
            return float(np.sign(phi0) * b * np.pi / 2)
        q = np.arcsinh(np.tan(phi0)) - self._e * np.arctanh(self._e * np.sin(phi0))
        xi0 = np.arctan(np.sinh(q))
        orders = 2 * np.arange(1, 5)
        return float(b * (xi0 + np.sum(forward * np.sin(orders * xi0))))

    def _scale_factor(self) -> float:
        return self._scale(p.SCALE_FACTOR_AT_NATURAL_ORIGIN)

    def _project(self, latitude: float, dlambda: float) -> Tuple[float, float]:
        """Return the grid offsets (E - FE, N - FN) of a position."""
        b, forward, _ = self._series
        k0 = self._scale_factor()
        e = self._e
        q = np.arcsinh(np.tan(latitude)) - e * np.arctanh(e * np.sin(latitude))
        beta = np.arctan(np.sinh(q))
        argument = np.cos(beta) * np.sin(dlambda)
        if np.isclose(abs(argument), 1.0, rtol=0.0, atol=1e-15):
            raise ValueError("The Transverse Mercator projection is undefined 90° from the central meridian.")
        eta0 = np.arctanh(argument)
        xi0 = np.arcsin(np.clip(np.sin(beta) * np.cosh(eta0), -1.0, 1.0))
        orders = 2 * np.arange(1, 5)
        xi = xi0 + np.sum(forward * np.sin(orders * xi0) * np.cosh(orders * eta0))
        eta = eta0 + np.sum(forward * np.cos(orders * xi0) * np.sinh(orders * eta0))
        return float(k0 * b * eta), float(k0 * (b * xi - self._arc_of_origin))

    def _unproject(self, dx: float, dy: float) -> Tuple[float, float]:
        """Return (φ, λ - λ0) of grid offsets from the false origin."""
        b, _, reverse = self._series
        k0 = self._scale_factor()
        e = self._e
        eta = dx / (b * k0)
        xi = (dy + k0 * self._arc_of_origin) / (b * k0)
        orders = 2 * np.arange(1, 5)
        xi0 = xi - np.sum(reverse * np.sin(orders * xi) * np.cosh(orders * eta))
        eta0 = eta - np.sum(reverse * np.cos(orders * xi) * np.sinh(orders * eta))
        beta = np.arcsin(np.clip(np.sin(xi0) / np.cosh(eta0), -1.0, 1.0))
        dlambda = float(np.arcsin(np.clip(np.tanh(eta0) / np.cos(beta), -1.0, 1.0)))
        if np.isclose(abs(beta), np.pi / 2, rtol=0.0, atol=1e-15):
            return float(beta), 0.0
        q_prime = np.arcsinh(np.tan(beta))
        if e == 0:
            return float(beta), dlambda

        def step(q: float) -> float:
            return float(q_prime + e * np.arctanh(e * np.tanh(q)))

        q = self._iterate(step, q_prime, easting=dx, northing=dy)
        return float(np.arctan(np.sinh(q))), dlambda

    def _compute_forward(self, latitude: float, longitude: float) -> Tuple[float, float]:
        dx, dy = self._project(latitude, self._delta_longitude(longitude, self._angle(p.LONGITUDE_OF_NATURAL_ORIGIN)))
        easting = self._length(p.FALSE_EASTING) + self._AXIS_SIGN * dx
        northing = self._length(p.FALSE_NORTHING) + self._AXIS_SIGN * dy
        return easting, northing

    def _compute_reverse(self, easting: float, northing: float) -> Tuple[float, float]:
        latitude, dlambda = self._unproject(
            self._AXIS_SIGN * (easting - self._length(p.FALSE_EASTING)),
            self._AXIS_SIGN * (northing - self._length(p.FALSE_NORTHING)),
        )
        return latitude, self._angle(p.LONGITUDE_OF_NATURAL_ORIGIN) + dlambda

    def _proj4_parameters(self):
        return [
            ("proj", "tmerc"),
            ("lat_0", self._degrees(p.LATITUDE_OF_NATURAL_ORIGIN)),
            ("lon_0", self._degrees(p.LONGITUDE_OF_NATURAL_ORIGIN)),
            ("k_0", self._scale(p.SCALE_FACTOR_AT_NATURAL_ORIGIN)),
            ("x_0", self._metres(p.FALSE_EASTING)),
            ("y_0", self._metres(p.FALSE_NORTHING)),
        ]


class TransverseMercatorSouthOrientatedProjection(TransverseMercatorProjection):
    """Transverse Mercator (South Orientated), EPSG method 9808.

    Axes increase westwards and southwards: W = FE - E', S = FN - N'.
    """

    METHOD = methods.TRANSVERSE_MERCATOR_SOUTH_ORIENTATED
    _AXIS_SIGN = -1.0

    def _proj4_parameters(self):
        parameters = super()._proj4_parameters()
        parameters.insert(1, ("axis", "wsu"))
        return parameters


class TransverseMercatorZonedProjection(TransverseMercatorProjection):
    """Transverse Mercator Zoned Grid System, EPSG method 9824.

    The zone of a point is Z = ⌊(λ - λI + W) / W⌋ for initial longitude λI
    and zone width W. The zone's central meridian is λI + Z W - W/2 and its
    number prefixes the easting: E = Z · 10⁶ + FE + E'.
    """

    METHOD = methods.TRANSVERSE_MERCATOR_ZONED_GRID_SYSTEM
    ZONE_PREFIX = 1e6

    def zone(self, longitude: float) -> int:
        """Return the zone number of a longitude in radians."""
        width = self._angle(p.ZONE_WIDTH)
        initial = self._angle(p.INITIAL_LONGITUDE)
        return int(np.floor((longitude - initial + width) / width))

    def central_meridian(self, zone: int) -> float:
        """Return the central meridian of a zone in radians."""
        width = self._angle(p.ZONE_WIDTH)
        return self._angle(p.INITIAL_LONGITUDE) + zone * width - width / 2

    def _compute_forward(self, latitude: float, longitude: float) -> Tuple[float, float]:
        zone = self.zone(longitude)
        dx, dy = self._project(latitude, self._delta_longitude(longitude, self.central_meridian(zone)))
        easting = zone * self.ZONE_PREFIX + self._length(p.FALSE_EASTING) + dx
        return easting, self._length(p.FALSE_NORTHING) + dy

    def _compute_reverse(self, easting: float, northing: float) -> Tuple[float, float]:
        zone = int(np.floor(easting / self.ZONE_PREFIX))
        latitude, dlambda = self._unproject(
            easting - zone * self.ZONE_PREFIX - self._length(p.FALSE_EASTING),
            northing - self._length(p.FALSE_NORTHING),
        )
        return latitude, self.central_meridian(zone) + dlambda

    def _proj4_parameters(self):
        return None
