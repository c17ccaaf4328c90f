"""
Hotine Oblique Mercator Projections.

The ellipsoid is mapped conformally onto an aposphere of constant total
curvature, which is projected onto a cylinder tangent along a great circle
through the projection centre at azimuth αc. The rectified skew
coordinates (u, v) are rotated onto the grid by γc.

- Hotine Oblique Mercator (variant A), EPSG 9812: false origin at the
  natural origin of the skew coordinates
- Hotine Oblique Mercator (variant B), EPSG 9815: grid coordinates given at
  the projection centre

References
----------
- IOGP Publication 373-7-2, section 3.2.4.
"""

from typing import Tuple

import numpy as np

from common.caching import locked_cached_property
from geodesy.latitudes import conformal_t, latitude_from_conformal_t
from operations import methods
from operations import parameters as p
from operations.base import CoordinateProjection


class HotineObliqueMercatorAProjection(CoordinateProjection):
    """Hotine Oblique Mercator (variant A), EPSG method 9812.

    Constants of the aposphere:

        B = √(1 + e² cos⁴ φc / (1 - e²))
        A = a B kc √(1 - e²) / (1 - e² sin² φc)
        D = B √(1 - e²) / (cos φc √(1 - e² sin² φc))
        F = D + √(D² - 1) sign(φc),  H = F t(φc)^B
        γ0 = asin(sin αc / D),  λ0 = λc - asin(G tan γ0) / B
    """

    METHOD = methods.HOTINE_OBLIQUE_MERCATOR_A

    @locked_cached_property
    def _aposphere(self) -> Tuple[float, float, float, float, float]:
        """Return (A, B, H, γ0, λ0)."""
        phi_c = self._angle(p.LATITUDE_OF_PROJECTION_CENTRE)
        lambda_c = self._angle(p.LONGITUDE_OF_PROJECTION_CENTRE)
        alpha_c = self._angle(p.AZIMUTH_OF_INITIAL_LINE)
        k_c = self._scale(p.SCALE_FACTOR_ON_INITIAL_LINE)
        e2 = self._e2
        if np.isclose(abs(phi_c), np.pi / 2, rtol=0.0, atol=1e-12):
            raise ValueError("The projection centre of an oblique Mercator projection must not be a pole.")

        w = 1 - e2 * np.sin(phi_c) ** 2
        b = np.sqrt(1 + e2 * np.cos(phi_c) ** 4 / (1 - e2))
        a = self._a * b * k_c * np.sqrt(1 - e2) / w
        d = b * np.sqrt(1 - e2) / (np.cos(phi_c) * np.sqrt(w))
        d = max(d, 1.0)
        f = d + np.sqrt(d**2 - 1) * (1.0 if phi_c >= 0 else -1.0)
        h = f * conformal_t(phi_c, self._ellipsoid) ** b
        g = (f - 1 / f) / 2
        gamma0 = np.arcsin(np.clip(np.sin(alpha_c) / d, -1.0, 1.0))
        lambda0 = lambda_c - np.arcsin(np.clip(g * np.tan(gamma0), -1.0, 1.0)) / b
        return float(a), float(b), float(h), float(gamma0), float(lambda0)

    def _skew(self, latitude: float, longitude: float) -> Tuple[float, float]:
        """Return the skew coordinates (u, v) from the natural origin."""
        a, b, h, gamma0, lambda0 = self._aposphere
        if np.isclose(abs(latitude), np.pi / 2, rtol=0.0, atol=1e-12):
            raise ValueError("The oblique Mercator projection is not evaluated at the poles.")
        q = h / conformal_t(latitude, self._ellipsoid) ** b
        s = (q - 1 / q) / 2
        t = (q + 1 / q) / 2
        dlambda = b * self._delta_longitude(longitude, lambda0)
        v_term = np.sin(dlambda)
        u_term = (-v_term * np.cos(gamma0) + s * np.sin(gamma0)) / t
        if np.isclose(abs(u_term), 1.0, rtol=0.0, atol=1e-15):
            raise ValueError("The point lies at a pole of the oblique Mercator aposphere.")
        v = a * np.log((1 - u_term) / (1 + u_term)) / (2 * b)
        u = a * np.arctan2(s * np.cos(gamma0) + v_term * np.sin(gamma0), np.cos(dlambda)) / b
        return float(u), float(v)

    def _from_skew(self, u: float, v: float) -> Tuple[float, float]:
        a, b, h, gamma0, lambda0 = self._aposphere
        q = np.exp(-b * v / a)
        s = (q - 1 / q) / 2
        t = (q + 1 / q) / 2
        v_term = np.sin(b * u / a)
        u_term = (v_term * np.cos(gamma0) + s * np.sin(gamma0)) / t
        if np.isclose(abs(u_term), 1.0, rtol=0.0, atol=1e-15):
            latitude = float(np.sign(u_term) * np.pi / 2)
            return latitude, lambda0
        t_prime = (h / np.sqrt((1 + u_term) / (1 - u_term))) ** (1 / b)
        latitude = latitude_from_conformal_t(
            t_prime, self._ellipsoid, self._config.max_iterations, self._config.tolerance,
            {"operation": self.identifier}
        )
        longitude = lambda0 - np.arctan2(s * np.cos(gamma0) - v_term * np.sin(gamma0), np.cos(b * u / a)) / b
        return latitude, longitude

    @locked_cached_property
    def _centre_offset(self) -> float:
        """u of the projection centre; zero for variant A."""
        return 0.0

    def _false_origin(self) -> Tuple[float, float]:
        return self._length(p.FALSE_EASTING), self._length(p.FALSE_NORTHING)

    def _compute_forward(self, latitude: float, longitude: float) -> Tuple[float, float]:
        u, v = self._skew(latitude, longitude)
        u -= self._centre_offset
        gamma_c = self._angle(p.ANGLE_FROM_RECTIFIED_TO_SKEW_GRID)
        false_easting, false_northing = self._false_origin()
        easting = v * np.cos(gamma_c) + u * np.sin(gamma_c) + false_easting
        northing = u * np.cos(gamma_c) - v * np.sin(gamma_c) + false_northing
        return easting, northing

    def _compute_reverse(self, easting: float, northing: float) -> Tuple[float, float]:
        gamma_c = self._angle(p.ANGLE_FROM_RECTIFIED_TO_SKEW_GRID)
        false_easting, false_northing = self._false_origin()
        dx = easting - false_easting
        dy = northing - false_northing
        v = dx * np.cos(gamma_c) - dy * np.sin(gamma_c)
        u = dy * np.cos(gamma_c) + dx * np.sin(gamma_c) + self._centre_offset
        return self._from_skew(u, v)

    def _proj4_common(self):
        return [
            ("proj", "omerc"),
            ("lat_0", self._degrees(p.LATITUDE_OF_PROJECTION_CENTRE)),
            ("lonc", self._degrees(p.LONGITUDE_OF_PROJECTION_CENTRE)),
            ("alpha", self._degrees(p.AZIMUTH_OF_INITIAL_LINE)),
            ("gamma", self._degrees(p.ANGLE_FROM_RECTIFIED_TO_SKEW_GRID)),
            ("k", self._scale(p.SCALE_FACTOR_ON_INITIAL_LINE)),
        ]

    def _proj4_parameters(self):
        return self._proj4_common() + [
            ("x_0", self._metres(p.FALSE_EASTING)),
            ("y_0", self._metres(p.FALSE_NORTHING)),
            ("no_uoff", None),
        ]


class HotineObliqueMercatorBProjection(HotineObliqueMercatorAProjection):
    """Hotine Oblique Mercator (variant B), EPSG method 9815.

    Skew coordinates are measured from the projection centre, whose grid
    coordinates are (Ec, Nc).

    Examples
    --------
    >>> from operations.factory import hungarian_eov
    >>> from common.types import GeographicCoordinate
    >>> eov = hungarian_eov()
    >>> centre = eov.forward(GeographicCoordinate.from_degrees(47.144393722, 19.048571778))
    >>> round(centre.x, 3), round(centre.y, 3)
    (650000.0, 200000.0)
    """

    METHOD = methods.HOTINE_OBLIQUE_MERCATOR_B

    @locked_cached_property
    def _centre_offset(self) -> float:
        u, _ = self._skew(
            self._angle(p.LATITUDE_OF_PROJECTION_CENTRE), self._angle(p.LONGITUDE_OF_PROJECTION_CENTRE)
        )
        return u

    def _false_origin(self) -> Tuple[float, float]:
        return self._length(p.EASTING_AT_PROJECTION_CENTRE), self._length(p.NORTHING_AT_PROJECTION_CENTRE)

    def _proj4_parameters(self):
        return self._proj4_common() + [
            ("x_0", self._metres(p.EASTING_AT_PROJECTION_CENTRE)),
            ("y_0", self._metres(p.NORTHING_AT_PROJECTION_CENTRE)),
        ]
