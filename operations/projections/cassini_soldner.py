"""
Cassini-Soldner Projections.

Transverse cylindrical equidistant projections, historically used for
cadastral grids of small territories.

- Cassini-Soldner, EPSG 9806
- Hyperbolic Cassini-Soldner, EPSG 9833 (Vanua Levu, Fiji)

Scientific Context
------------------
With A = (λ - λ0) cos φ, T = tan² φ, C = e² cos² φ / (1 - e²):

    X = M - M0 + ν tan φ (A²/2 + (5 - T + 6C) A⁴/24)
    E = FE + ν (A - T A³/6 - (8 - T + 8C) T A⁵/120)
    N = FN + X

The hyperbolic form replaces N by FN + X - X³/(6ρν), with the radii taken at
the projected latitude.

References
----------
- IOGP Publication 373-7-2, sections 3.2.2.1 and 3.2.2.2.
"""

from typing import Tuple

import numpy as np

from common.caching import locked_cached_property
from geodesy.latitudes import footpoint_latitude, meridian_arc
from operations import methods
from operations import parameters as p
from operations.base import CoordinateProjection


class CassiniSoldnerProjection(CoordinateProjection):
    """Cassini-Soldner, EPSG method 9806.

    Examples
    --------
    Trinidad 1903 / Trinidad Grid, coordinates in Clarke's feet:

    >>> from operations.factory import trinidad_grid
    >>> from common.types import GeographicCoordinate
    >>> point = trinidad_grid().forward(GeographicCoordinate.from_degrees(10, -62))
    >>> round(point.x / 0.66, 1), round(point.y / 0.66, 1)
    (66644.9, 82536.2)
    """

    METHOD = methods.CASSINI_SOLDNER

    @locked_cached_property
    def _arc_of_origin(self) -> float:
        return meridian_arc(self._angle(p.LATITUDE_OF_NATURAL_ORIGIN), self._ellipsoid)

    def _series(self, latitude: float, longitude: float) -> Tuple[float, float]:
        """Return (E - FE, X) of a geographic position."""
        e2 = self._e2
        a_term = self._delta_longitude(longitude, self._angle(p.LONGITUDE_OF_NATURAL_ORIGIN)) * np.cos(latitude)
        t = np.tan(latitude) ** 2
        c = e2 * np.cos(latitude) ** 2 / (1 - e2)
        nu = self._ellipsoid.radius_of_prime_vertical_curvature(latitude)
        x = meridian_arc(latitude, self._ellipsoid) - self._arc_of_origin + nu * np.tan(latitude) * (
            a_term**2 / 2 + (5 - t + 6 * c) * a_term**4 / 24
        )
        dx = nu * (a_term - t * a_term**3 / 6 - (8 - t + 8 * c) * t * a_term**5 / 120)
        return dx, x

    def _compute_forward(self, latitude: float, longitude: float) -> Tuple[float, float]:
        dx, x = self._series(latitude, longitude)
        return self._length(p.FALSE_EASTING) + dx, self._length(p.FALSE_NORTHING) + x

    def _reverse_from_arc(self, easting: float, x: float) -> Tuple[float, float]:
        phi1 = footpoint_latitude(
            self._arc_of_origin + x, self._ellipsoid,
            self._config.max_iterations, self._config.tolerance, {"operation": self.identifier}
        )
        lambda0 = self._angle(p.LONGITUDE_OF_NATURAL_ORIGIN)
        if np.isclose(abs(phi1), np.pi / 2, rtol=0.0, atol=1e-12):
            return phi1, lambda0
        nu1 = self._ellipsoid.radius_of_prime_vertical_curvature(phi1)
        rho1 = self._ellipsoid.radius_of_meridian_curvature(phi1)
        t1 = np.tan(phi1) ** 2
        d = (easting - self._length(p.FALSE_EASTING)) / nu1
        latitude = phi1 - (nu1 * np.tan(phi1) / rho1) * (d**2 / 2 - (1 + 3 * t1) * d**4 / 24)
        longitude = lambda0 + (d - t1 * d**3 / 3 + (1 + 3 * t1) * t1 * d**5 / 15) / np.cos(phi1)
        return latitude, longitude

    def _compute_reverse(self, easting: float, northing: float) -> Tuple[float, float]:
        return self._reverse_from_arc(easting, northing - self._length(p.FALSE_NORTHING))

    def _proj4_parameters(self):
        return [
            ("proj", "cass"),
            ("lat_0", self._degrees(p.LATITUDE_OF_NATURAL_ORIGIN)),
            ("lon_0", self._degrees(p.LONGITUDE_OF_NATURAL_ORIGIN)),
            ("x_0", self._metres(p.FALSE_EASTING)),
            ("y_0", self._metres(p.FALSE_NORTHING)),
        ]


class HyperbolicCassiniSoldnerProjection(CassiniSoldnerProjection):
    """Hyperbolic Cassini-Soldner, EPSG method 9833.

    The reverse solves X = (N - FN) + X³/(6ρν) by fixed-point iteration,
    evaluating ρ and ν at the latitude the Cassini reverse gives for the
    current X. The Vanua Levu Grid of Fiji is defined with this method.
    """

    METHOD = methods.HYPERBOLIC_CASSINI_SOLDNER

    def _compute_forward(self, latitude: float, longitude: float) -> Tuple[float, float]:
        dx, x = self._series(latitude, longitude)
        rho = self._ellipsoid.radius_of_meridian_curvature(latitude)
        nu = self._ellipsoid.radius_of_prime_vertical_curvature(latitude)
        northing = self._length(p.FALSE_NORTHING) + x - x**3 / (6 * rho * nu)
        return self._length(p.FALSE_EASTING) + dx, northing

    def _compute_reverse(self, easting: float, northing: float) -> Tuple[float, float]:
        dy = northing - self._length(p.FALSE_NORTHING)
        a = self._a

        # Iterated on X/a so the tolerance does not depend on the length unit
        def step(ratio: float) -> float:
            x = ratio * a
            latitude, _ = self._reverse_from_arc(easting, x)
            rho = self._ellipsoid.radius_of_meridian_curvature(latitude)
            nu = self._ellipsoid.radius_of_prime_vertical_curvature(latitude)
            return (dy + x**3 / (6 * rho * nu)) / a

        x = self._iterate(step, dy / a, easting=easting, northing=northing) * a
        return self._reverse_from_arc(easting, x)

    def _proj4_parameters(self):
        return [
            ("proj", "cass"),
            ("hyperbolic", None),
            ("lat_0", self._degrees(p.LATITUDE_OF_NATURAL_ORIGIN)),
            ("lon_0", self._degrees(p.LONGITUDE_OF_NATURAL_ORIGIN)),
            ("x_0", self._metres(p.FALSE_EASTING)),
            ("y_0", self._metres(p.FALSE_NORTHING)),
        ]
