"""
Lambert Conic Conformal Projections.

Scientific Context
------------------
Domain: Map projections, conic conformal family

The ellipsoid is developed onto a cone touching (1SP) or secant to (2SP)
the ellipsoid. With the conformal function t(φ), the cone constant n and
F = m / (n tⁿ) the radius of a parallel is r = a F tⁿ (times k0 for 1SP),
and

    E = FE + r sin θ
    N = FN + r0 - r cos θ,     θ = n (λ - λ0)

The reverse recovers t from the radius and φ from t by iteration.

Variants implemented:
- Lambert Conic Conformal (1SP), EPSG 9801
- Lambert Conic Conformal (West Orientated), EPSG 9826
- Lambert Conic Conformal (2SP), EPSG 9802
- Lambert Conic Conformal (2SP Belgium), EPSG 9803
- Lambert Conic Near-Conformal, EPSG 9817: meridian-distance form truncated
  after the cubic term, used by legacy grids of the Levant

References
----------
- IOGP Publication 373-7-2, section 3.2.1.
"""

from typing import Tuple

import numpy as np

from common.caching import locked_cached_property
from common.units import Angle
from geodesy.latitudes import conformal_t, latitude_from_conformal_t, m_factor
from operations import methods
from operations import parameters as p
from operations.base import CoordinateProjection


class _LambertConicConformal(CoordinateProjection):
    """Shared forward and reverse of the conic conformal variants.

    Subclasses provide the cone constants through `_cone`, returning
    (n, aF, r0, λ0, FE, FN) where aF already includes any scale factor.
    """

    # Rotation of the grid applied to θ (Belgium)
    _THETA_CORRECTION = 0.0
    # -1 for a west orientated easting axis
    _EASTING_SIGN = 1.0

    @property
    def _cone(self) -> Tuple[float, float, float, float, float, float]:
        raise NotImplementedError

    def _compute_forward(self, latitude: float, longitude: float) -> Tuple[float, float]:
        n, a_f, r0, lambda0, false_easting, false_northing = self._cone
        if np.isclose(latitude, -np.sign(n) * np.pi / 2, rtol=0.0, atol=1e-12):
            raise ValueError("The Lambert Conic Conformal projection is undefined at the opposite pole.")
        r = a_f * conformal_t(latitude, self._ellipsoid) ** n
        theta = n * self._delta_longitude(longitude, lambda0) - self._THETA_CORRECTION
        easting = false_easting + self._EASTING_SIGN * r * np.sin(theta)
        northing = false_northing + r0 - r * np.cos(theta)
        return easting, northing

    def _compute_reverse(self, easting: float, northing: float) -> Tuple[float, float]:
        n, a_f, r0, lambda0, false_easting, false_northing = self._cone
        dx = self._EASTING_SIGN * (easting - false_easting)
        dy = r0 - (northing - false_northing)
        if n < 0:
            dx, dy = -dx, -dy
        r = np.copysign(np.hypot(dx, dy), n)
        theta = np.arctan2(dx, dy)
        t = (r / a_f) ** (1 / n)
        latitude = latitude_from_conformal_t(
            t, self._ellipsoid, self._config.max_iterations, self._config.tolerance,
            {"operation": self.identifier}
        )
        longitude = (theta + self._THETA_CORRECTION) / n + lambda0
        return latitude, longitude


class LambertConicConformal1SPProjection(_LambertConicConformal):
    """Lambert Conic Conformal (1SP), EPSG method 9801.

    The cone touches the ellipsoid at the latitude of natural origin, where
    the scale factor k0 applies; n = sin φ0.
    """

    METHOD = methods.LAMBERT_CONIC_CONFORMAL_1SP

    @locked_cached_property
    def _cone(self) -> Tuple[float, float, float, float, float, float]:
        phi0 = self._angle(p.LATITUDE_OF_NATURAL_ORIGIN)
        if phi0 == 0:
            raise ValueError("The latitude of natural origin of a tangent cone must not be zero.")
        k0 = self._scale(p.SCALE_FACTOR_AT_NATURAL_ORIGIN)
        n = np.sin(phi0)
        t0 = conformal_t(phi0, self._ellipsoid)
        f = m_factor(phi0, self._ellipsoid) / (n * t0 ** n)
        a_f = self._a * f * k0
        r0 = a_f * t0 ** n
        return (
            float(n), float(a_f), float(r0),
            self._angle(p.LONGITUDE_OF_NATURAL_ORIGIN),
            self._length(p.FALSE_EASTING), self._length(p.FALSE_NORTHING),
        )

    def _proj4_parameters(self):
        latitude = self._degrees(p.LATITUDE_OF_NATURAL_ORIGIN)
        return [
            ("proj", "lcc"),
            ("lat_1", latitude),
            ("lat_0", latitude),
            ("lon_0", self._degrees(p.LONGITUDE_OF_NATURAL_ORIGIN)),
            ("k_0", self._scale(p.SCALE_FACTOR_AT_NATURAL_ORIGIN)),
            ("x_0", self._metres(p.FALSE_EASTING)),
            ("y_0", self._metres(p.FALSE_NORTHING)),
        ]


class LambertConicConformalWestOrientatedProjection(LambertConicConformal1SPProjection):
    """Lambert Conic Conformal (West Orientated), EPSG method 9826.

    The first axis increases westwards: W = FE - r sin θ.
    """

    METHOD = methods.LAMBERT_CONIC_CONFORMAL_WEST_ORIENTATED
    _EASTING_SIGN = -1.0

    def _proj4_parameters(self):
        return None


class LambertConicConformal2SPProjection(_LambertConicConformal):
    """Lambert Conic Conformal (2SP), EPSG method 9802.

    n = (ln m1 - ln m2) / (ln t1 - ln t2), F = m1 / (n t1ⁿ). The false origin
    need not lie on a standard parallel.
    """

    METHOD = methods.LAMBERT_CONIC_CONFORMAL_2SP

    @locked_cached_property
    def _cone(self) -> Tuple[float, float, float, float, float, float]:
        phi_f = self._angle(p.LATITUDE_OF_FALSE_ORIGIN)
        phi1 = self._angle(p.LATITUDE_OF_1ST_STANDARD_PARALLEL)
        phi2 = self._angle(p.LATITUDE_OF_2ND_STANDARD_PARALLEL)
        m1 = m_factor(phi1, self._ellipsoid)
        m2 = m_factor(phi2, self._ellipsoid)
        t1 = conformal_t(phi1, self._ellipsoid)
        t2 = conformal_t(phi2, self._ellipsoid)
        if np.isclose(phi1, phi2, rtol=0.0, atol=1e-15):
            n = np.sin(phi1)
        else:
            n = (np.log(m1) - np.log(m2)) / (np.log(t1) - np.log(t2))
        if n == 0:
            raise ValueError("The standard parallels define a cylinder, not a cone.")
        a_f = self._a * m1 / (n * t1 ** n)
        r_f = a_f * conformal_t(phi_f, self._ellipsoid) ** n
        return (
            float(n), float(a_f), float(r_f),
            self._angle(p.LONGITUDE_OF_FALSE_ORIGIN),
            self._length(p.EASTING_AT_FALSE_ORIGIN), self._length(p.NORTHING_AT_FALSE_ORIGIN),
        )

    def _proj4_parameters(self):
        return [
            ("proj", "lcc"),
            ("lat_1", self._degrees(p.LATITUDE_OF_1ST_STANDARD_PARALLEL)),
            ("lat_2", self._degrees(p.LATITUDE_OF_2ND_STANDARD_PARALLEL)),
            ("lat_0", self._degrees(p.LATITUDE_OF_FALSE_ORIGIN)),
            ("lon_0", self._degrees(p.LONGITUDE_OF_FALSE_ORIGIN)),
            ("x_0", self._metres(p.EASTING_AT_FALSE_ORIGIN)),
            ("y_0", self._metres(p.NORTHING_AT_FALSE_ORIGIN)),
        ]


class LambertConicConformal2SPBelgiumProjection(LambertConicConformal2SPProjection):
    """Lambert Conic Conformal (2SP Belgium), EPSG method 9803.

    The 1972 Belgian grid rotates θ by 29.2985 arc-seconds.
    """

    METHOD = methods.LAMBERT_CONIC_CONFORMAL_2SP_BELGIUM
    _THETA_CORRECTION = Angle.from_arc_second(29.2985).base_value

    def _proj4_parameters(self):
        return None


class LambertConicNearConformalProjection(CoordinateProjection):
    """Lambert Conic Near-Conformal, EPSG method 9817.

    A 1SP cone whose radii are taken from the meridian distance m = s - s0
    from the natural origin, truncated after the cubic term:

        M = k0 (m + A m³),   A = 1 / (6 ρ0 ν0)
        r = r0 - M,          r0 = k0 ν0 / tan φ0,   θ = (λ - λ0) sin φ0
        E = FE + r sin θ
        N = FN + M + r sin θ tan(θ/2)

    The meridian distance s is the rectifying series in the third
    flattening n = f / (2 - f).
    """

    METHOD = methods.LAMBERT_CONIC_NEAR_CONFORMAL

    def __init__(self, identifier, name, parameters, ellipsoid, area_of_use=None, config=None, **kwargs):
        super().__init__(identifier, name, parameters, ellipsoid, area_of_use, config, **kwargs)
        if np.isclose(self._angle(p.LATITUDE_OF_NATURAL_ORIGIN), 0.0, rtol=0.0, atol=1e-15):
            raise ValueError("The latitude of natural origin of a near-conformal cone must not be zero.")

    @locked_cached_property
    def _series(self) -> Tuple[float, float, float, float, float]:
        """Return the coefficients (A', B', C', D', E') of s(φ), A' per radian."""
        f = self._ellipsoid.flattening
        n = f / (2 - f)
        a = self._a
        return (
            float(a * (1 - n + 5 * (n**2 - n**3) / 4 + 81 * (n**4 - n**5) / 64)),
            float(3 * a * (n - n**2 + 7 * (n**3 - n**4) / 8 + 55 * n**5 / 64) / 2),
            float(15 * a * (n**2 - n**3 + 3 * (n**4 - n**5) / 4) / 16),
            float(35 * a * (n**3 - n**4 + 11 * n**5 / 16) / 48),
            float(315 * a * (n**4 - n**5) / 512),
        )

    def _arc(self, latitude: float) -> float:
        a1, b1, c1, d1, e1 = self._series
        return float(
            a1 * latitude - b1 * np.sin(2 * latitude) + c1 * np.sin(4 * latitude)
            - d1 * np.sin(6 * latitude) + e1 * np.sin(8 * latitude)
        )

    def _arc_derivative(self, latitude: float) -> float:
        a1, b1, c1, d1, e1 = self._series
        return float(
            a1 - 2 * b1 * np.cos(2 * latitude) + 4 * c1 * np.cos(4 * latitude)
            - 6 * d1 * np.cos(6 * latitude) + 8 * e1 * np.cos(8 * latitude)
        )

    @locked_cached_property
    def _cone(self) -> Tuple[float, float, float, float, float]:
        """Return (φ0, k0, A, r0, s0)."""
        phi0 = self._angle(p.LATITUDE_OF_NATURAL_ORIGIN)
        k0 = self._scale(p.SCALE_FACTOR_AT_NATURAL_ORIGIN)
        rho0 = self._ellipsoid.radius_of_meridian_curvature(phi0)
        nu0 = self._ellipsoid.radius_of_prime_vertical_curvature(phi0)
        return float(phi0), k0, float(1 / (6 * rho0 * nu0)), float(k0 * nu0 / np.tan(phi0)), self._arc(phi0)

    def _compute_forward(self, latitude: float, longitude: float) -> Tuple[float, float]:
        phi0, k0, big_a, r0, s0 = self._cone
        m = self._arc(latitude) - s0
        big_m = k0 * (m + big_a * m**3)
        r = r0 - big_m
        theta = self._delta_longitude(longitude, self._angle(p.LONGITUDE_OF_NATURAL_ORIGIN)) * np.sin(phi0)
        easting = self._length(p.FALSE_EASTING) + r * np.sin(theta)
        northing = self._length(p.FALSE_NORTHING) + big_m + r * np.sin(theta) * np.tan(theta / 2)
        return easting, northing

    def _compute_reverse(self, easting: float, northing: float) -> Tuple[float, float]:
        phi0, k0, big_a, r0, s0 = self._cone
        dx = easting - self._length(p.FALSE_EASTING)
        dy = r0 - (northing - self._length(p.FALSE_NORTHING))
        sign = np.sign(phi0)
        theta = np.arctan2(sign * dx, sign * dy)
        big_m = r0 - sign * np.hypot(dx, dy)

        def cubic_step(m: float) -> float:
            return float(m - (k0 * (m + big_a * m**3) - big_m) / (k0 * (1 + 3 * big_a * m**2)))

        m = self._iterate(cubic_step, big_m / k0, easting=easting, northing=northing)

        def arc_step(phi: float) -> float:
            return phi + (m + s0 - self._arc(phi)) / self._arc_derivative(phi)

        latitude = self._iterate(arc_step, phi0 + m / self._series[0], easting=easting, northing=northing)
        longitude = self._angle(p.LONGITUDE_OF_NATURAL_ORIGIN) + theta / np.sin(phi0)
        return latitude, longitude
