"""
American Polyconic Projection, EPSG method 9818.

Every parallel is the development of its own tangent cone, so parallels are
non-concentric circular arcs true to scale, and the central meridian is
true to scale.

References
----------
- IOGP Publication 373-7-2, section 1.3.5.
- Snyder (1987), chapter 18, equations 18-17 to 18-19 (ellipsoidal reverse).
"""

from typing import Tuple

import numpy as np

from common.caching import locked_cached_property
from geodesy.latitudes import meridian_arc
from operations import methods
from operations import parameters as p
from operations.base import CoordinateProjection


class AmericanPolyconicProjection(CoordinateProjection):
    """American Polyconic, EPSG method 9818.

    For φ ≠ 0, with L = (λ - λ0) sin φ:

        E = FE + ν cot φ sin L
        N = FN + M - M0 + ν cot φ (1 - cos L)

    On the equator E = FE + a (λ - λ0) and N = FN - M0. The reverse is the
    Newton-Raphson iteration of Snyder, started at the rectified ordinate.
    """

    METHOD = methods.AMERICAN_POLYCONIC

    @locked_cached_property
    def _arc_of_origin(self) -> float:
        return meridian_arc(self._angle(p.LATITUDE_OF_NATURAL_ORIGIN), self._ellipsoid)

    def _compute_forward(self, latitude: float, longitude: float) -> Tuple[float, float]:
        dlambda = self._delta_longitude(longitude, self._angle(p.LONGITUDE_OF_NATURAL_ORIGIN))
        false_easting = self._length(p.FALSE_EASTING)
        false_northing = self._length(p.FALSE_NORTHING)
        if latitude == 0:
            return false_easting + self._a * dlambda, false_northing - self._arc_of_origin

        nu = self._ellipsoid.radius_of_prime_vertical_curvature(latitude)
        cot = 1 / np.tan(latitude)
        angle = dlambda * np.sin(latitude)
        easting = false_easting + nu * cot * np.sin(angle)
        northing = (
            false_northing + meridian_arc(latitude, self._ellipsoid) - self._arc_of_origin
            + nu * cot * (1 - np.cos(angle))
        )
        return easting, northing

    def _arc_derivative(self, latitude: float) -> float:
        """d(M/a)/dφ of the e⁶ meridian arc series."""
        e2 = self._e2
        e4 = e2 * e2
        e6 = e4 * e2
        return float(
            1 - e2 / 4 - 3 * e4 / 64 - 5 * e6 / 256
            - 2 * (3 * e2 / 8 + 3 * e4 / 32 + 45 * e6 / 1024) * np.cos(2 * latitude)
            + 4 * (15 * e4 / 256 + 45 * e6 / 1024) * np.cos(4 * latitude)
            - 6 * (35 * e6 / 3072) * np.cos(6 * latitude)
        )

    def _compute_reverse(self, easting: float, northing: float) -> Tuple[float, float]:
        lambda0 = self._angle(p.LONGITUDE_OF_NATURAL_ORIGIN)
        x = easting - self._length(p.FALSE_EASTING)
        y = northing - self._length(p.FALSE_NORTHING)
        e2 = self._e2

        if np.isclose(y + self._arc_of_origin, 0.0, rtol=0.0, atol=1e-9):
            return 0.0, lambda0 + x / self._a

        a_ratio = (self._arc_of_origin + y) / self._a
        b_ratio = a_ratio**2 + (x / self._a) ** 2

        def step(phi: float) -> float:
            c = np.sqrt(1 - e2 * np.sin(phi) ** 2) * np.tan(phi)
            ma = meridian_arc(phi, self._ellipsoid) / self._a
            mn = self._arc_derivative(phi)
            sin2 = np.sin(2 * phi)
            numerator = a_ratio * (c * ma + 1) - ma - 0.5 * (ma**2 + b_ratio) * c
            denominator = (
                e2 * sin2 * (ma**2 + b_ratio - 2 * a_ratio * ma) / (4 * c)
                + (a_ratio - ma) * (c * mn - 2 / sin2) - mn
            )
            return phi - numerator / denominator

        latitude = self._iterate(step, a_ratio, easting=easting, northing=northing)
        c = np.sqrt(1 - e2 * np.sin(latitude) ** 2) * np.tan(latitude)
        longitude = lambda0 + np.arcsin(np.clip(x * c / self._a, -1.0, 1.0)) / np.sin(latitude)
        return latitude, longitude

    def _proj4_parameters(self):
        return [
            ("proj", "poly"),
            ("lat_0", self._degrees(p.LATITUDE_OF_NATURAL_ORIGIN)),
            ("lon_0", self._degrees(p.LONGITUDE_OF_NATURAL_ORIGIN)),
            ("x_0", self._metres(p.FALSE_EASTING)),
            ("y_0", self._metres(p.FALSE_NORTHING)),
        ]
