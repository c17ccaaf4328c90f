"""
Equidistant Cylindrical and Sinusoidal Projections.

Both keep meridian distances true: northings are the meridian arc M(φ).

- Equidistant Cylindrical, EPSG 1028, and its spherical form, EPSG 1029
- Sinusoidal, ESRI 53008: parallels true to length, meridians sinusoids

References
----------
- IOGP Publication 373-7-2, section 3.2.5.
- Snyder (1987), chapters 12 and 30.
"""

from typing import Tuple

import numpy as np

from common.caching import locked_cached_property
from geodesy.latitudes import footpoint_latitude, meridian_arc
from operations import methods
from operations import parameters as p
from operations.base import CoordinateProjection


class EquidistantCylindricalProjection(CoordinateProjection):
    """Equidistant Cylindrical, EPSG method 1028.

    E = FE + ν1 cos φ1 (λ - λ0)
    N = FN + M(φ)
    """

    METHOD = methods.EQUIDISTANT_CYLINDRICAL

    @locked_cached_property
    def _parallel_radius(self) -> float:
        phi1 = self._angle(p.LATITUDE_OF_1ST_STANDARD_PARALLEL)
        return float(self._ellipsoid.radius_of_prime_vertical_curvature(phi1) * np.cos(phi1))

    def _compute_forward(self, latitude: float, longitude: float) -> Tuple[float, float]:
        easting = self._length(p.FALSE_EASTING) + self._parallel_radius * (
            self._delta_longitude(longitude, self._angle(p.LONGITUDE_OF_NATURAL_ORIGIN))
        )
        northing = self._length(p.FALSE_NORTHING) + meridian_arc(latitude, self._ellipsoid)
        return easting, northing

    def _compute_reverse(self, easting: float, northing: float) -> Tuple[float, float]:
        latitude = footpoint_latitude(
            northing - self._length(p.FALSE_NORTHING), self._ellipsoid,
            self._config.max_iterations, self._config.tolerance, {"operation": self.identifier}
        )
        longitude = self._angle(p.LONGITUDE_OF_NATURAL_ORIGIN) + (
            easting - self._length(p.FALSE_EASTING)
        ) / self._parallel_radius
        return latitude, longitude

    def _proj4_parameters(self):
        return [
            ("proj", "eqc"),
            ("lat_ts", self._degrees(p.LATITUDE_OF_1ST_STANDARD_PARALLEL)),
            ("lon_0", self._degrees(p.LONGITUDE_OF_NATURAL_ORIGIN)),
            ("x_0", self._metres(p.FALSE_EASTING)),
            ("y_0", self._metres(p.FALSE_NORTHING)),
        ]


class EquidistantCylindricalSphericalProjection(EquidistantCylindricalProjection):
    """Equidistant Cylindrical (Spherical), EPSG method 1029.

    E = FE + R cos φ1 (λ - λ0), N = FN + R φ.
    """

    METHOD = methods.EQUIDISTANT_CYLINDRICAL_SPHERICAL
    REQUIRES_SPHERE = True


class SinusoidalProjection(CoordinateProjection):
    """Sinusoidal, ESRI method 53008.

    E = FE + a (λ - λ0) cos φ / √(1 - e² sin² φ)
    N = FN + M(φ)

    On a sphere M(φ) = R φ. At the poles the longitude is indeterminate and
    the reverse returns the central meridian.
    """

    METHOD = methods.SINUSOIDAL

    def _compute_forward(self, latitude: float, longitude: float) -> Tuple[float, float]:
        w = np.sqrt(1 - self._e2 * np.sin(latitude) ** 2)
        easting = self._length(p.FALSE_EASTING) + self._a * (
            self._delta_longitude(longitude, self._angle(p.LONGITUDE_OF_NATURAL_ORIGIN))
        ) * np.cos(latitude) / w
        northing = self._length(p.FALSE_NORTHING) + meridian_arc(latitude, self._ellipsoid)
        return easting, northing

    def _compute_reverse(self, easting: float, northing: float) -> Tuple[float, float]:
        lambda0 = self._angle(p.LONGITUDE_OF_NATURAL_ORIGIN)
        latitude = footpoint_latitude(
            northing - self._length(p.FALSE_NORTHING), self._ellipsoid,
            self._config.max_iterations, self._config.tolerance, {"operation": self.identifier}
        )
        if np.isclose(abs(latitude), np.pi / 2, rtol=0.0, atol=1e-12):
            return latitude, lambda0
        w = np.sqrt(1 - self._e2 * np.sin(latitude) ** 2)
        longitude = lambda0 + (easting - self._length(p.FALSE_EASTING)) * w / (self._a * np.cos(latitude))
        return latitude, longitude

    def _proj4_parameters(self):
        return [
            ("proj", "sinu"),
            ("lon_0", self._degrees(p.LONGITUDE_OF_NATURAL_ORIGIN)),
            ("x_0", self._metres(p.FALSE_EASTING)),
            ("y_0", self._metres(p.FALSE_NORTHING)),
        ]
