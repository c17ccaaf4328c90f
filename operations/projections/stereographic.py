"""
Stereographic Projections.

Azimuthal conformal projections:

- Oblique Stereographic, EPSG 9809: double projection through the conformal
  sphere (Roussilhe), used by RD New and several national grids
- Polar Stereographic (variant A), EPSG 9810: scale factor at the pole
- Polar Stereographic (variant B), EPSG 9829: defined by a standard parallel
- Polar Stereographic (variant C), EPSG 9830: standard parallel and a false
  origin on it

The point antipodal to the origin (the opposite pole for polar aspects)
cannot be projected.

References
----------
- IOGP Publication 373-7-2, sections 3.3.4 and 3.4.1.
"""

from typing import Tuple

import numpy as np

from common.caching import locked_cached_property
from geodesy.latitudes import (
    conformal_t,
    gauss_conformal,
    gauss_sphere,
    latitude_from_conformal_t,
    latitude_from_gauss_conformal,
    m_factor,
)
from operations import methods
from operations import parameters as p
from operations.base import CoordinateProjection


class ObliqueStereographicProjection(CoordinateProjection):
    """Oblique Stereographic, EPSG method 9809.

    The ellipsoid is mapped conformally onto a sphere of radius
    R = √(ρ0 ν0) by χ = asin((w - 1)/(w + 1)) and Λ = n (λ - λ0) + λ0; the
    sphere is then projected stereographically from the antipode of
    (χ0, λ0).

    Examples
    --------
    >>> from operations.factory import rd_new
    >>> from common.types import GeographicCoordinate
    >>> point = rd_new().forward(GeographicCoordinate.from_degrees(53, 6))
    >>> round(point.x, 3), round(point.y, 3)
    (196105.283, 557057.739)
    """

    METHOD = methods.OBLIQUE_STEREOGRAPHIC

    @locked_cached_property
    def _sphere(self) -> Tuple[float, float, float, float]:
        """Return (R, n, c, χ0) of the conformal sphere."""
        return gauss_sphere(self._angle(p.LATITUDE_OF_NATURAL_ORIGIN), self._ellipsoid)

    def _conformal(self, latitude: float) -> float:
        """Return the conformal latitude χ on the sphere."""
        _, n, c, _ = self._sphere
        return gauss_conformal(latitude, n, c, self._ellipsoid)

    def _compute_forward(self, latitude: float, longitude: float) -> Tuple[float, float]:
        radius, n, _, chi0 = self._sphere
        k0 = self._scale(p.SCALE_FACTOR_AT_NATURAL_ORIGIN)
        chi = self._conformal(latitude)
        dlambda = n * self._delta_longitude(longitude, self._angle(p.LONGITUDE_OF_NATURAL_ORIGIN))
        b = 1 + np.sin(chi) * np.sin(chi0) + np.cos(chi) * np.cos(chi0) * np.cos(dlambda)
        if b <= 1e-15:
            raise ValueError("The point antipodal to the natural origin cannot be projected.")
        easting = self._length(p.FALSE_EASTING) + 2 * radius * k0 * np.cos(chi) * np.sin(dlambda) / b
        northing = self._length(p.FALSE_NORTHING) + 2 * radius * k0 * (
            np.sin(chi) * np.cos(chi0) - np.cos(chi) * np.sin(chi0) * np.cos(dlambda)
        ) / b
        return easting, northing

    def _compute_reverse(self, easting: float, northing: float) -> Tuple[float, float]:
        radius, n, c, chi0 = self._sphere
        k0 = self._scale(p.SCALE_FACTOR_AT_NATURAL_ORIGIN)
        lambda0 = self._angle(p.LONGITUDE_OF_NATURAL_ORIGIN)
        dx = easting - self._length(p.FALSE_EASTING)
        dy = northing - self._length(p.FALSE_NORTHING)

        g = 2 * radius * k0 * np.tan(np.pi / 4 - chi0 / 2)
        h = 4 * radius * k0 * np.tan(chi0) + g
        i = np.arctan2(dx, h + dy)
        j = np.arctan2(dx, g - dy) - i
        chi = chi0 + 2 * np.arctan((dy - dx * np.tan(j / 2)) / (2 * radius * k0))
        big_lambda = j + 2 * i + lambda0
        longitude = (big_lambda - lambda0) / n + lambda0

        if np.isclose(abs(chi), np.pi / 2, rtol=0.0, atol=1e-15):
            return float(chi), lambda0
        latitude = latitude_from_gauss_conformal(
            chi, n, c, self._ellipsoid, self._config.max_iterations, self._config.tolerance,
            {"operation": self.identifier, "easting": easting, "northing": northing}
        )
        return latitude, longitude

    def _proj4_parameters(self):
        return [
            ("proj", "sterea"),
            ("lat_0", self._degrees(p.LATITUDE_OF_NATURAL_ORIGIN)),
            ("lon_0", self._degrees(p.LONGITUDE_OF_NATURAL_ORIGIN)),
            ("k_0", self._scale(p.SCALE_FACTOR_AT_NATURAL_ORIGIN)),
            ("x_0", self._metres(p.FALSE_EASTING)),
            ("y_0", self._metres(p.FALSE_NORTHING)),
        ]


class _PolarStereographic(CoordinateProjection):
    """Shared formulas of the polar aspects.

    With s = +1 for the north pole and -1 for the south pole, t = t(s φ):

        ρ = C t,  E = E_P + ρ sin(λ - λ0),  N = N_P - s ρ cos(λ - λ0)

    where (E_P, N_P) is the grid position of the pole. Subclasses provide
    (s, C, λ0, E_P, N_P) through `_polar`.
    """

    @property
    def _polar(self) -> Tuple[float, float, float, float, float]:
        raise NotImplementedError

    @locked_cached_property
    def _eccentricity_term(self) -> float:
        e = self._e
        return float(np.sqrt((1 + e) ** (1 + e) * (1 - e) ** (1 - e)))

    def _compute_forward(self, latitude: float, longitude: float) -> Tuple[float, float]:
        sign, c, lambda0, pole_easting, pole_northing = self._polar
        if np.isclose(sign * latitude, -np.pi / 2, rtol=0.0, atol=1e-12):
            raise ValueError("The polar stereographic projection is undefined at the opposite pole.")
        rho = c * conformal_t(sign * latitude, self._ellipsoid)
        dlambda = self._delta_longitude(longitude, lambda0)
        return pole_easting + rho * np.sin(dlambda), pole_northing - sign * rho * np.cos(dlambda)

    def _compute_reverse(self, easting: float, northing: float) -> Tuple[float, float]:
        sign, c, lambda0, pole_easting, pole_northing = self._polar
        dx = easting - pole_easting
        dy = northing - pole_northing
        t = np.hypot(dx, dy) / c
        latitude = sign * latitude_from_conformal_t(
            t, self._ellipsoid, self._config.max_iterations, self._config.tolerance,
            {"operation": self.identifier}
        )
        if dx == 0 and dy == 0:
            return latitude, lambda0
        return latitude, lambda0 + np.arctan2(dx, -sign * dy)


class PolarStereographicAProjection(_PolarStereographic):
    """Polar Stereographic (variant A), EPSG method 9810.

    The latitude of natural origin must be a pole; k0 applies there and
    C = 2 a k0 / √((1 + e)^(1 + e) (1 - e)^(1 - e)).
    """

    METHOD = methods.POLAR_STEREOGRAPHIC_A

    @locked_cached_property
    def _polar(self) -> Tuple[float, float, float, float, float]:
        phi0 = self._angle(p.LATITUDE_OF_NATURAL_ORIGIN)
        if not np.isclose(abs(phi0), np.pi / 2, rtol=0.0, atol=1e-12):
            raise ValueError("The latitude of natural origin of a polar stereographic projection must be a pole.")
        c = 2 * self._a * self._scale(p.SCALE_FACTOR_AT_NATURAL_ORIGIN) / self._eccentricity_term
        return (
            float(np.sign(phi0)), float(c), self._angle(p.LONGITUDE_OF_NATURAL_ORIGIN),
            self._length(p.FALSE_EASTING), self._length(p.FALSE_NORTHING),
        )

    def _proj4_parameters(self):
        return [
            ("proj", "stere"),
            ("lat_0", self._degrees(p.LATITUDE_OF_NATURAL_ORIGIN)),
            ("lon_0", self._degrees(p.LONGITUDE_OF_NATURAL_ORIGIN)),
            ("k_0", self._scale(p.SCALE_FACTOR_AT_NATURAL_ORIGIN)),
            ("x_0", self._metres(p.FALSE_EASTING)),
            ("y_0", self._metres(p.FALSE_NORTHING)),
        ]


class PolarStereographicBProjection(_PolarStereographic):
    """Polar Stereographic (variant B), EPSG method 9829.

    The sign of the standard parallel φc selects the pole; the scale is true
    along φc: C = a m_c / t_c.
    """

    METHOD = methods.POLAR_STEREOGRAPHIC_B

    @locked_cached_property
    def _polar(self) -> Tuple[float, float, float, float, float]:
        phi_c = self._angle(p.LATITUDE_OF_STANDARD_PARALLEL)
        if phi_c == 0:
            raise ValueError("The standard parallel of a polar stereographic projection must not be the equator.")
        sign = float(np.sign(phi_c))
        if np.isclose(abs(phi_c), np.pi / 2, rtol=0.0, atol=1e-12):
            c = 2 * self._a / self._eccentricity_term
        else:
            c = self._a * m_factor(phi_c, self._ellipsoid) / conformal_t(sign * phi_c, self._ellipsoid)
        return (
            sign, float(c), self._angle(p.LONGITUDE_OF_ORIGIN),
            self._length(p.FALSE_EASTING), self._length(p.FALSE_NORTHING),
        )

    def _proj4_parameters(self):
        latitude = self._degrees(p.LATITUDE_OF_STANDARD_PARALLEL)
        return [
            ("proj", "stere"),
            ("lat_0", 90.0 if latitude > 0 else -90.0),
            ("lat_ts", latitude),
            ("lon_0", self._degrees(p.LONGITUDE_OF_ORIGIN)),
            ("x_0", self._metres(p.FALSE_EASTING)),
            ("y_0", self._metres(p.FALSE_NORTHING)),
        ]


class PolarStereographicCProjection(_PolarStereographic):
    """Polar Stereographic (variant C), EPSG method 9830.

    As variant B, but the false origin lies where the standard parallel
    meets the longitude of origin: the pole sits at N_P = N_F + s ρ_F with
    ρ_F = a m_F.
    """

    METHOD = methods.POLAR_STEREOGRAPHIC_C

    @locked_cached_property
    def _polar(self) -> Tuple[float, float, float, float, float]:
        phi_f = self._angle(p.LATITUDE_OF_STANDARD_PARALLEL)
        if phi_f == 0 or np.isclose(abs(phi_f), np.pi / 2, rtol=0.0, atol=1e-12):
            raise ValueError("The standard parallel of a polar stereographic (variant C) projection must not be the equator or a pole.")
        sign = float(np.sign(phi_f))
        rho_f = self._a * m_factor(phi_f, self._ellipsoid)
        c = rho_f / conformal_t(sign * phi_f, self._ellipsoid)
        return (
            sign, float(c), self._angle(p.LONGITUDE_OF_ORIGIN),
            self._length(p.EASTING_AT_FALSE_ORIGIN),
            self._length(p.NORTHING_AT_FALSE_ORIGIN) + sign * rho_f,
        )

    def _proj4_parameters(self):
        return None
