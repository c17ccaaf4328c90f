"""
Laborde Oblique Mercator Projection.

The ellipsoid is mapped conformally onto a sphere (as for Hotine), the
sphere is rotated so that the projection centre lies on its equator, and
the rotated sphere is developed by a transverse Mercator whose complex
cubic term G H³ bends the grid towards the azimuth of the initial line.
Used by the Madagascar Laborde grid.

References
----------
- IOGP Publication 373-7-2, section 3.2.4.4.
"""

from typing import Tuple

import numpy as np

from common.caching import locked_cached_property
from geodesy.latitudes import conformal_t, latitude_from_conformal_t
from operations import methods
from operations import parameters as p
from operations.base import CoordinateProjection


class LabordeObliqueMercatorProjection(CoordinateProjection):
    """Laborde Oblique Mercator, EPSG method 9813.

        B = √(1 + e² cos⁴ φc / (1 - e²)),  φs = asin(sin φc / B)
        R = a kc √(1 - e²) / (1 - e² sin² φc)
        C = ln tan(π/4 + φs/2) + B ln t(φc)
        G = (1 - cos 2αc)/12 + i sin 2αc / 12

    A point with spherical coordinates (P, L) on the rotated sphere gives
    H = -L' + i ln tan(π/4 + P'/2) and E + i N = FE + i FN + R (i conj)
    of H + G H³; the reverse solves H + G H³ = H0 by Newton's method.
    """

    METHOD = methods.LABORDE_OBLIQUE_MERCATOR

    @locked_cached_property
    def _sphere(self) -> Tuple[float, float, float, float, complex]:
        """Return (B, φs, R, C, G)."""
        phi_c = self._angle(p.LATITUDE_OF_PROJECTION_CENTRE)
        alpha_c = self._angle(p.AZIMUTH_OF_INITIAL_LINE)
        k_c = self._scale(p.SCALE_FACTOR_ON_INITIAL_LINE)
        e2 = self._e2
        b = np.sqrt(1 + e2 * np.cos(phi_c) ** 4 / (1 - e2))
        phi_s = np.arcsin(np.sin(phi_c) / b)
        radius = self._a * k_c * np.sqrt(1 - e2) / (1 - e2 * np.sin(phi_c) ** 2)
        c = np.log(np.tan(np.pi / 4 + phi_s / 2)) + b * np.log(conformal_t(phi_c, self._ellipsoid))
        g = complex((1 - np.cos(2 * alpha_c)) / 12, np.sin(2 * alpha_c) / 12)
        return float(b), float(phi_s), float(radius), float(c), g

    def _compute_forward(self, latitude: float, longitude: float) -> Tuple[float, float]:
        b, phi_s, radius, c, g = self._sphere
        big_l = b * self._delta_longitude(longitude, self._angle(p.LONGITUDE_OF_PROJECTION_CENTRE))
        if np.isclose(abs(latitude), np.pi / 2, rtol=0.0, atol=1e-15):
            big_p = float(np.sign(latitude)) * np.pi / 2
        else:
            q = c - b * np.log(conformal_t(latitude, self._ellipsoid))
            big_p = 2 * np.arctan(np.exp(q)) - np.pi / 2

        u = np.cos(big_p) * np.cos(big_l) * np.cos(phi_s) + np.sin(big_p) * np.sin(phi_s)
        v = np.cos(big_p) * np.cos(big_l) * np.sin(phi_s) - np.sin(big_p) * np.cos(phi_s)
        w = np.cos(big_p) * np.sin(big_l)
        d = np.hypot(u, v)
        if d < 1e-12:
            raise ValueError("The Laborde projection is undefined 90° from the initial line.")
        rotated_l = 2 * np.arctan(v / (u + d))
        rotated_p = np.arctan(w / d)

        h = complex(-rotated_l, np.log(np.tan(np.pi / 4 + rotated_p / 2)))
        z = h + g * h**3
        return self._length(p.FALSE_EASTING) + radius * z.imag, self._length(p.FALSE_NORTHING) + radius * z.real

    def _compute_reverse(self, easting: float, northing: float) -> Tuple[float, float]:
        b, phi_s, radius, c, g = self._sphere
        lambda_c = self._angle(p.LONGITUDE_OF_PROJECTION_CENTRE)
        h0 = complex(
            (northing - self._length(p.FALSE_NORTHING)) / radius,
            (easting - self._length(p.FALSE_EASTING)) / radius,
        )
        h1 = self._iterate_array(
            lambda h: (h0 + 2 * g * h**3) / (3 * g * h**2 + 1), np.array([h0]),
            easting=easting, northing=northing
        )[0]

        rotated_l = -h1.real
        rotated_p = 2 * np.arctan(np.exp(h1.imag)) - np.pi / 2
        u = (
            np.cos(rotated_p) * np.cos(rotated_l) * np.cos(phi_s)
            + np.cos(rotated_p) * np.sin(rotated_l) * np.sin(phi_s)
        )
        v = np.sin(rotated_p)
        w = (
            np.cos(rotated_p) * np.cos(rotated_l) * np.sin(phi_s)
            - np.cos(rotated_p) * np.sin(rotated_l) * np.cos(phi_s)
        )
        d = np.hypot(u, v)
        if d < 1e-12:
            return float(np.sign(w)) * np.pi / 2, lambda_c
        big_l = 2 * np.arctan(v / (u + d))
        big_p = np.arctan(w / d)

        q = (np.log(np.tan(np.pi / 4 + big_p / 2)) - c) / b
        latitude = latitude_from_conformal_t(
            float(np.exp(-q)), self._ellipsoid, self._config.max_iterations, self._config.tolerance,
            {"operation": self.identifier}
        )
        return latitude, lambda_c + big_l / b

    def _proj4_parameters(self):
        return [
            ("proj", "labrd"),
            ("lat_0", self._degrees(p.LATITUDE_OF_PROJECTION_CENTRE)),
            ("lon_0", self._degrees(p.LONGITUDE_OF_PROJECTION_CENTRE)),
            ("azi", self._degrees(p.AZIMUTH_OF_INITIAL_LINE)),
            ("k_0", self._scale(p.SCALE_FACTOR_ON_INITIAL_LINE)),
            ("x_0", self._metres(p.FALSE_EASTING)),
            ("y_0", self._metres(p.FALSE_NORTHING)),
        ]
