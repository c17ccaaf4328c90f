"""
Krovak Projections.

Oblique conformal conic projection of Czechoslovakia: the ellipsoid is
mapped onto the Gaussian conformal sphere, rotated so that the cone axis
passes through the pseudo-pole at colatitude αc, and developed onto a cone
secant along the pseudo standard parallel φp.

- Krovak, EPSG 9819: southing and westing, both positive
- Krovak (North Orientated), EPSG 1041: easting = -westing,
  northing = -southing
- Krovak Modified, EPSG 1042: adds the S-JTSK/05 polynomial correction
- Krovak Modified (North Orientated), EPSG 1043

Coordinates are returned in (westing, southing) order, matching the axis
order of the S-JTSK grid.

References
----------
- IOGP Publication 373-7-2, section 3.2.3.
"""

from typing import Tuple

import numpy as np

from common.caching import locked_cached_property
from operations import methods
from operations import parameters as p
from operations.base import CoordinateProjection


class KrovakProjection(CoordinateProjection):
    """Krovak, EPSG method 9819.

    Examples
    --------
    S-JTSK (Ferro) / Krovak, with the longitude of origin referred to
    Greenwich:

    >>> from operations.factory import krovak_sjtsk
    >>> from common.types import GeographicCoordinate
    >>> from common.units import Angle
    >>> point = GeographicCoordinate.from_angles(
    ...     Angle.from_degree(50, 12, 32.442), Angle.from_degree(16, 50, 59.179))
    >>> grid = krovak_sjtsk().forward(point)
    >>> round(grid.x, 2), round(grid.y, 2)
    (568990.99, 1050538.63)
    """

    METHOD = methods.KROVAK
    # -1 for the north orientated grid
    _AXIS_SIGN = 1.0
    _PROJ4_AXIS = [("czech", None)]

    @locked_cached_property
    def _cone(self) -> Tuple[float, float, float, float, float]:
        """Return (B, t0, n, r0, tan(π/4 + φp/2)^n)."""
        phi_c = self._angle(p.LATITUDE_OF_PROJECTION_CENTRE)
        phi_p = self._angle(p.LATITUDE_OF_PSEUDO_STANDARD_PARALLEL)
        k_p = self._scale(p.SCALE_FACTOR_ON_PSEUDO_STANDARD_PARALLEL)
        e = self._e
        e2 = self._e2
        b = np.sqrt(1 + e2 * np.cos(phi_c) ** 4 / (1 - e2))
        a = self._a * b * np.sqrt(1 - e2) / (1 - e2 * np.sin(phi_c) ** 2)
        gamma0 = np.arcsin(np.sin(phi_c) / b)
        e_sin = e * np.sin(phi_c)
        t0 = (
            np.tan(np.pi / 4 + gamma0 / 2) * ((1 + e_sin) / (1 - e_sin)) ** (e * b / 2)
            / np.tan(np.pi / 4 + phi_c / 2) ** b
        )
        n = np.sin(phi_p)
        r0 = k_p * a / np.tan(phi_p)
        return float(b), float(t0), float(n), float(r0), float(np.tan(np.pi / 4 + phi_p / 2) ** n)

    def _correction(self, xp: float, yp: float) -> Tuple[float, float]:
        """Return the (dX, dY) subtracted from the southing and westing."""
        return 0.0, 0.0

    def _compute_forward(self, latitude: float, longitude: float) -> Tuple[float, float]:
        b, t0, n, r0, pseudo = self._cone
        alpha_c = self._angle(p.COLATITUDE_OF_CONE_AXIS)
        e = self._e
        e_sin = e * np.sin(latitude)
        u = 2 * (np.arctan(
            t0 * np.tan(latitude / 2 + np.pi / 4) ** b / ((1 + e_sin) / (1 - e_sin)) ** (e * b / 2)
        ) - np.pi / 4)
        v = -b * self._delta_longitude(longitude, self._angle(p.LONGITUDE_OF_ORIGIN))
        t = np.arcsin(np.clip(np.cos(alpha_c) * np.sin(u) + np.sin(alpha_c) * np.cos(u) * np.cos(v), -1.0, 1.0))
        if np.isclose(np.cos(t), 0.0, rtol=0.0, atol=1e-15):
            raise ValueError("The Krovak projection is undefined at the pseudo-pole.")
        d = np.arcsin(np.clip(np.cos(u) * np.sin(v) / np.cos(t), -1.0, 1.0))
        theta = n * d
        r = r0 * pseudo / np.tan(t / 2 + np.pi / 4) ** n
        xp, yp = r * np.cos(theta), r * np.sin(theta)
        dx, dy = self._correction(xp, yp)
        southing = xp - dx + self._length(p.FALSE_NORTHING)
        westing = yp - dy + self._length(p.FALSE_EASTING)
        return self._AXIS_SIGN * westing, self._AXIS_SIGN * southing

    def _compute_reverse(self, easting: float, northing: float) -> Tuple[float, float]:
        b, t0, n, r0, pseudo = self._cone
        alpha_c = self._angle(p.COLATITUDE_OF_CONE_AXIS)
        phi_p = self._angle(p.LATITUDE_OF_PSEUDO_STANDARD_PARALLEL)
        e = self._e
        xp = self._AXIS_SIGN * northing - self._length(p.FALSE_NORTHING)
        yp = self._AXIS_SIGN * easting - self._length(p.FALSE_EASTING)
        dx, dy = self._correction(xp, yp)
        xp, yp = xp + dx, yp + dy
        r = np.hypot(xp, yp)
        theta = np.arctan2(yp, xp)
        d = theta / np.sin(phi_p)
        t = 2 * (np.arctan((r0 / r) ** (1 / n) * np.tan(np.pi / 4 + phi_p / 2)) - np.pi / 4)
        u = np.arcsin(np.clip(np.cos(alpha_c) * np.sin(t) - np.sin(alpha_c) * np.cos(t) * np.cos(d), -1.0, 1.0))
        v = np.arcsin(np.clip(np.cos(t) * np.sin(d) / np.cos(u), -1.0, 1.0))
        longitude = self._angle(p.LONGITUDE_OF_ORIGIN) - v / b
        conformal = t0 ** (-1 / b) * np.tan(u / 2 + np.pi / 4) ** (1 / b)

        def step(phi: float) -> float:
            e_sin = e * np.sin(phi)
            return float(2 * (np.arctan(conformal * ((1 + e_sin) / (1 - e_sin)) ** (e / 2)) - np.pi / 4))

        latitude = self._iterate(step, u, easting=easting, northing=northing)
        return latitude, longitude

    def _proj4_parameters(self):
        return [
            ("proj", "krovak"),
            ("lat_0", self._degrees(p.LATITUDE_OF_PROJECTION_CENTRE)),
            ("lon_0", self._degrees(p.LONGITUDE_OF_ORIGIN)),
            ("lat_ts", self._degrees(p.LATITUDE_OF_PSEUDO_STANDARD_PARALLEL)),
            ("k_0", self._scale(p.SCALE_FACTOR_ON_PSEUDO_STANDARD_PARALLEL)),
            ("x_0", self._metres(p.FALSE_EASTING)),
            ("y_0", self._metres(p.FALSE_NORTHING)),
        ] + self._PROJ4_AXIS


class KrovakNorthOrientatedProjection(KrovakProjection):
    """Krovak (North Orientated), EPSG method 1041."""

    METHOD = methods.KROVAK_NORTH_ORIENTATED
    _AXIS_SIGN = -1.0
    _PROJ4_AXIS = []


class KrovakModifiedProjection(KrovakProjection):
    """Krovak Modified, EPSG method 1042.

    The S-JTSK/05 grid adds a fifth-degree complex polynomial to the Krovak
    southing and westing, evaluated about the point (X0, Y0):

        Xr = Xp - X0,   Yr = Yp - Y0
        dX = C1 + C3 Xr - C4 Yr - 2 C6 Xr Yr + C5 (Xr² - Yr²)
             + C7 Xr (Xr² - 3 Yr²) - C8 Yr (3 Xr² - Yr²)
             + 4 C9 Xr Yr (Xr² - Yr²) + C10 (Xr⁴ + Yr⁴ - 6 Xr² Yr²)
        dY = C2 + C3 Yr + C4 Xr - 2 C5 Xr Yr + C6 (Xr² - Yr²)
             + C8 Xr (Xr² - 3 Yr²) + C7 Yr (3 Xr² - Yr²)
             - 4 C10 Xr Yr (Xr² - Yr²) + C9 (Xr⁴ + Yr⁴ - 6 Xr² Yr²)

    and S = Xp - dX + FN, W = Yp - dY + FE. The reverse evaluates the
    polynomial at the grid coordinates, which differs from the forward
    evaluation point by decimetres only.
    """

    METHOD = methods.KROVAK_MODIFIED

    @locked_cached_property
    def _coefficients(self) -> Tuple[float, ...]:
        return tuple(self._scale(parameter) for parameter in (
            p.C1, p.C2, p.C3, p.C4, p.C5, p.C6, p.C7, p.C8, p.C9, p.C10,
        ))

    def _correction(self, xp: float, yp: float) -> Tuple[float, float]:
        c1, c2, c3, c4, c5, c6, c7, c8, c9, c10 = self._coefficients
        xr = xp - self._length(p.ORDINATE_1_OF_EVALUATION_POINT)
        yr = yp - self._length(p.ORDINATE_2_OF_EVALUATION_POINT)
        xr2, yr2 = xr * xr, yr * yr
        quartic = xr2 * xr2 + yr2 * yr2 - 6 * xr2 * yr2
        dx = (
            c1 + c3 * xr - c4 * yr - 2 * c6 * xr * yr + c5 * (xr2 - yr2)
            + c7 * xr * (xr2 - 3 * yr2) - c8 * yr * (3 * xr2 - yr2)
            + 4 * c9 * xr * yr * (xr2 - yr2) + c10 * quartic
        )
        dy = (
            c2 + c3 * yr + c4 * xr - 2 * c5 * xr * yr + c6 * (xr2 - yr2)
            + c8 * xr * (xr2 - 3 * yr2) + c7 * yr * (3 * xr2 - yr2)
            - 4 * c10 * xr * yr * (xr2 - yr2) + c9 * quartic
        )
        return dx, dy

    def _proj4_parameters(self):
        return None


class KrovakModifiedNorthOrientatedProjection(KrovakModifiedProjection):
    """Krovak Modified (North Orientated), EPSG method 1043."""

    METHOD = methods.KROVAK_MODIFIED_NORTH_ORIENTATED
    _AXIS_SIGN = -1.0
