"""
Equal-Area Projections.

Projections preserving area, built on the authalic function q(φ):

- Albers Equal Area (conic), EPSG 9822
- Lambert Azimuthal Equal Area, EPSG 9820, and its spherical form, EPSG 1027
- Lambert Cylindrical Equal Area, EPSG 9835, and its spherical form, EPSG 9834

Scientific Context
------------------
The authalic latitude β = asin(q / q_P) maps the ellipsoid onto a sphere of
equal area (radius R_q = a √(q_P / 2)). Reverse formulas recover φ from β by
a series in e².

References
----------
- IOGP Publication 373-7-2, sections 3.3.2, 3.3.3 and 3.4.
- Snyder (1987), chapters 10, 14 and 24.
"""

from typing import Tuple

import numpy as np

from common.caching import locked_cached_property
from geodesy.latitudes import authalic_q, latitude_from_authalic, m_factor
from operations import methods
from operations import parameters as p
from operations.base import CoordinateProjection


class _AuthalicMixin:
    """Authalic quantities of the bound ellipsoid."""

    @locked_cached_property
    def _q_p(self) -> float:
        return authalic_q(np.pi / 2, self._ellipsoid)

    def _beta(self, latitude: float) -> float:
        ratio = authalic_q(latitude, self._ellipsoid) / self._q_p
        return float(np.arcsin(np.clip(ratio, -1.0, 1.0)))


class AlbersEqualAreaProjection(_AuthalicMixin, CoordinateProjection):
    """Albers Equal Area, EPSG method 9822.

    n = (m1² - m2²) / (α2 - α1), C = m1² + n α1,
    ρ = a √(C - n α) / n, θ = n (λ - λ0).
    """

    METHOD = methods.ALBERS_EQUAL_AREA

    @locked_cached_property
    def _cone(self) -> Tuple[float, float, float]:
        phi0 = self._angle(p.LATITUDE_OF_FALSE_ORIGIN)
        phi1 = self._angle(p.LATITUDE_OF_1ST_STANDARD_PARALLEL)
        phi2 = self._angle(p.LATITUDE_OF_2ND_STANDARD_PARALLEL)
        m1 = m_factor(phi1, self._ellipsoid)
        m2 = m_factor(phi2, self._ellipsoid)
        alpha1 = authalic_q(phi1, self._ellipsoid)
        alpha2 = authalic_q(phi2, self._ellipsoid)
        if np.isclose(phi1, phi2, rtol=0.0, atol=1e-15):
            n = np.sin(phi1)
        else:
            n = (m1**2 - m2**2) / (alpha2 - alpha1)
        if n == 0:
            raise ValueError("The standard parallels of an Albers projection must not be symmetric about the equator.")
        c = m1**2 + n * alpha1
        rho0 = self._a * np.sqrt(c - n * authalic_q(phi0, self._ellipsoid)) / n
        return float(n), float(c), float(rho0)

    def _compute_forward(self, latitude: float, longitude: float) -> Tuple[float, float]:
        n, c, rho0 = self._cone
        alpha = authalic_q(latitude, self._ellipsoid)
        rho = self._a * np.sqrt(c - n * alpha) / n
        theta = n * self._delta_longitude(longitude, self._angle(p.LONGITUDE_OF_FALSE_ORIGIN))
        easting = self._length(p.EASTING_AT_FALSE_ORIGIN) + rho * np.sin(theta)
        northing = self._length(p.NORTHING_AT_FALSE_ORIGIN) + rho0 - rho * np.cos(theta)
        return easting, northing

    def _compute_reverse(self, easting: float, northing: float) -> Tuple[float, float]:
        n, c, rho0 = self._cone
        dx = easting - self._length(p.EASTING_AT_FALSE_ORIGIN)
        dy = rho0 - (northing - self._length(p.NORTHING_AT_FALSE_ORIGIN))
        if n < 0:
            dx, dy = -dx, -dy
        rho = np.hypot(dx, dy)
        theta = np.arctan2(dx, dy)
        alpha = (c - rho**2 * n**2 / self._a**2) / n
        beta = np.arcsin(np.clip(alpha / self._q_p, -1.0, 1.0))
        latitude = latitude_from_authalic(beta, self._ellipsoid)
        longitude = self._angle(p.LONGITUDE_OF_FALSE_ORIGIN) + theta / n
        return latitude, longitude

    def _proj4_parameters(self):
        return [
            ("proj", "aea"),
            ("lat_1", self._degrees(p.LATITUDE_OF_1ST_STANDARD_PARALLEL)),
            ("lat_2", self._degrees(p.LATITUDE_OF_2ND_STANDARD_PARALLEL)),
            ("lat_0", self._degrees(p.LATITUDE_OF_FALSE_ORIGIN)),
            ("lon_0", self._degrees(p.LONGITUDE_OF_FALSE_ORIGIN)),
            ("x_0", self._metres(p.EASTING_AT_FALSE_ORIGIN)),
            ("y_0", self._metres(p.NORTHING_AT_FALSE_ORIGIN)),
        ]


class LambertAzimuthalEqualAreaProjection(_AuthalicMixin, CoordinateProjection):
    """Lambert Azimuthal Equal Area, EPSG method 9820.

    Oblique and equatorial aspects use the EPSG oblique formulas; a natural
    origin at a pole uses the polar aspect formulas. The point antipodal to
    the origin cannot be projected (ValueError).

    On the ETRS89 Europe grid (origin 52°N 10°E, FE 4321000 m, FN 3210000 m)
    the point 50°N 5°E projects to E 3962799.45 m, N 2999718.85 m.
    """

    METHOD = methods.LAMBERT_AZIMUTHAL_EQUAL_AREA

    @locked_cached_property
    def _origin(self) -> Tuple[float, float, float, float, float, float]:
        phi0 = self._angle(p.LATITUDE_OF_NATURAL_ORIGIN)
        beta0 = self._beta(phi0)
        r_q = self._a * np.sqrt(self._q_p / 2)
        if np.isclose(np.cos(phi0), 0.0, atol=1e-12):
            d = 1.0
        else:
            d = self._a * m_factor(phi0, self._ellipsoid) / (r_q * np.cos(beta0))
        return (
            phi0, self._angle(p.LONGITUDE_OF_NATURAL_ORIGIN), float(beta0), float(r_q), float(d),
            float(np.sign(phi0)) if np.isclose(abs(phi0), np.pi / 2, rtol=0.0, atol=1e-12) else 0.0,
        )

    def _compute_forward(self, latitude: float, longitude: float) -> Tuple[float, float]:
        phi0, lambda0, beta0, r_q, d, pole = self._origin
        false_easting = self._length(p.FALSE_EASTING)
        false_northing = self._length(p.FALSE_NORTHING)
        dlambda = self._delta_longitude(longitude, lambda0)

        if pole:
            q = authalic_q(latitude, self._ellipsoid)
            rho = self._a * np.sqrt(max(self._q_p - pole * q, 0.0))
            easting = false_easting + rho * np.sin(dlambda)
            northing = false_northing - pole * rho * np.cos(dlambda)
            return easting, northing

        beta = self._beta(latitude)
        denominator = 1 + np.sin(beta0) * np.sin(beta) + np.cos(beta0) * np.cos(beta) * np.cos(dlambda)
        if denominator <= 1e-15:
            raise ValueError("The point antipodal to the natural origin cannot be projected.")
        b = r_q * np.sqrt(2 / denominator)
        easting = false_easting + b * d * np.cos(beta) * np.sin(dlambda)
        northing = false_northing + (b / d) * (
            np.cos(beta0) * np.sin(beta) - np.sin(beta0) * np.cos(beta) * np.cos(dlambda)
        )
        return easting, northing

    def _compute_reverse(self, easting: float, northing: float) -> Tuple[float, float]:
        phi0, lambda0, beta0, r_q, d, pole = self._origin
        dx = easting - self._length(p.FALSE_EASTING)
        dy = northing - self._length(p.FALSE_NORTHING)

        if pole:
            rho = np.hypot(dx, dy)
            q = pole * (self._q_p - (rho / self._a) ** 2)
            beta = np.arcsin(np.clip(q / self._q_p, -1.0, 1.0))
            longitude = lambda0 + np.arctan2(dx, -pole * dy)
            return latitude_from_authalic(beta, self._ellipsoid), longitude

        rho = np.hypot(dx / d, d * dy)
        if rho == 0:
            return phi0, lambda0
        c = 2 * np.arcsin(np.clip(rho / (2 * r_q), -1.0, 1.0))
        beta = np.arcsin(np.clip(
            np.cos(c) * np.sin(beta0) + d * dy * np.sin(c) * np.cos(beta0) / rho, -1.0, 1.0
        ))
        longitude = lambda0 + np.arctan2(
            dx * np.sin(c),
            d * rho * np.cos(beta0) * np.cos(c) - d**2 * dy * np.sin(beta0) * np.sin(c)
        )
        return latitude_from_authalic(beta, self._ellipsoid), longitude

    def _proj4_parameters(self):
        return [
            ("proj", "laea"),
            ("lat_0", self._degrees(p.LATITUDE_OF_NATURAL_ORIGIN)),
            ("lon_0", self._degrees(p.LONGITUDE_OF_NATURAL_ORIGIN)),
            ("x_0", self._metres(p.FALSE_EASTING)),
            ("y_0", self._metres(p.FALSE_NORTHING)),
        ]


class LambertAzimuthalEqualAreaSphericalProjection(CoordinateProjection):
    """Lambert Azimuthal Equal Area (Spherical), EPSG method 1027.

    k' = √(2 / (1 + sin φ0 sin φ + cos φ0 cos φ cos(λ - λ0)))
    E = FE + R k' cos φ sin(λ - λ0)
    N = FN + R k' (cos φ0 sin φ - sin φ0 cos φ cos(λ - λ0))
    """

    METHOD = methods.LAMBERT_AZIMUTHAL_EQUAL_AREA_SPHERICAL
    REQUIRES_SPHERE = True

    def _compute_forward(self, latitude: float, longitude: float) -> Tuple[float, float]:
        phi0 = self._angle(p.LATITUDE_OF_NATURAL_ORIGIN)
        dlambda = self._delta_longitude(longitude, self._angle(p.LONGITUDE_OF_NATURAL_ORIGIN))
        denominator = 1 + np.sin(phi0) * np.sin(latitude) + np.cos(phi0) * np.cos(latitude) * np.cos(dlambda)
        if denominator <= 1e-15:
            raise ValueError("The point antipodal to the natural origin cannot be projected.")
        k = np.sqrt(2 / denominator)
        easting = self._length(p.FALSE_EASTING) + self._a * k * np.cos(latitude) * np.sin(dlambda)
        northing = self._length(p.FALSE_NORTHING) + self._a * k * (
            np.cos(phi0) * np.sin(latitude) - np.sin(phi0) * np.cos(latitude) * np.cos(dlambda)
        )
        return easting, northing

    def _compute_reverse(self, easting: float, northing: float) -> Tuple[float, float]:
        phi0 = self._angle(p.LATITUDE_OF_NATURAL_ORIGIN)
        lambda0 = self._angle(p.LONGITUDE_OF_NATURAL_ORIGIN)
        x = easting - self._length(p.FALSE_EASTING)
        y = northing - self._length(p.FALSE_NORTHING)
        rho = np.hypot(x, y)
        if rho == 0:
            return phi0, lambda0
        c = 2 * np.arcsin(np.clip(rho / (2 * self._a), -1.0, 1.0))
        latitude = np.arcsin(np.clip(
            np.cos(c) * np.sin(phi0) + y * np.sin(c) * np.cos(phi0) / rho, -1.0, 1.0
        ))
        longitude = lambda0 + np.arctan2(
            x * np.sin(c), rho * np.cos(phi0) * np.cos(c) - y * np.sin(phi0) * np.sin(c)
        )
        return latitude, longitude

    def _proj4_parameters(self):
        return [
            ("proj", "laea"),
            ("lat_0", self._degrees(p.LATITUDE_OF_NATURAL_ORIGIN)),
            ("lon_0", self._degrees(p.LONGITUDE_OF_NATURAL_ORIGIN)),
            ("x_0", self._metres(p.FALSE_EASTING)),
            ("y_0", self._metres(p.FALSE_NORTHING)),
        ]


class LambertCylindricalEqualAreaProjection(_AuthalicMixin, CoordinateProjection):
    """Lambert Cylindrical Equal Area (ellipsoidal case), EPSG method 9835.

    k0 = cos φ1 / √(1 - e² sin² φ1)
    E = FE + a k0 (λ - λ0)
    N = FN + a q / (2 k0)
    """

    METHOD = methods.LAMBERT_CYLINDRICAL_EQUAL_AREA

    @locked_cached_property
    def _k0(self) -> float:
        return m_factor(self._angle(p.LATITUDE_OF_1ST_STANDARD_PARALLEL), self._ellipsoid)

    def _compute_forward(self, latitude: float, longitude: float) -> Tuple[float, float]:
        easting = self._length(p.FALSE_EASTING) + self._a * self._k0 * (
            self._delta_longitude(longitude, self._angle(p.LONGITUDE_OF_NATURAL_ORIGIN))
        )
        northing = self._length(p.FALSE_NORTHING) + self._a * authalic_q(latitude, self._ellipsoid) / (2 * self._k0)
        return easting, northing

    def _compute_reverse(self, easting: float, northing: float) -> Tuple[float, float]:
        ratio = 2 * (northing - self._length(p.FALSE_NORTHING)) * self._k0 / (self._a * self._q_p)
        beta = np.arcsin(np.clip(ratio, -1.0, 1.0))
        latitude = latitude_from_authalic(beta, self._ellipsoid)
        longitude = self._angle(p.LONGITUDE_OF_NATURAL_ORIGIN) + (
            easting - self._length(p.FALSE_EASTING)
        ) / (self._a * self._k0)
        return latitude, longitude

    def _proj4_parameters(self):
        return [
            ("proj", "cea"),
            ("lat_ts", self._degrees(p.LATITUDE_OF_1ST_STANDARD_PARALLEL)),
            ("lon_0", self._degrees(p.LONGITUDE_OF_NATURAL_ORIGIN)),
            ("x_0", self._metres(p.FALSE_EASTING)),
            ("y_0", self._metres(p.FALSE_NORTHING)),
        ]


class LambertCylindricalEqualAreaSphericalProjection(LambertCylindricalEqualAreaProjection):
    """Lambert Cylindrical Equal Area (spherical case), EPSG method 9834.

    E = FE + R (λ - λ0) cos φ1
    N = FN + R sin φ / cos φ1
    """

    METHOD = methods.LAMBERT_CYLINDRICAL_EQUAL_AREA_SPHERICAL
    REQUIRES_SPHERE = True
