"""
Guam Projection, EPSG method 9831.

A simplified ellipsoidal azimuthal equidistant projection for small islands.

References
----------
- IOGP Publication 373-7-2, section 3.5.2.2.
"""

from typing import Tuple

import numpy as np

from common.caching import locked_cached_property
from geodesy.latitudes import footpoint_latitude, meridian_arc
from operations import methods
from operations import parameters as p
from operations.base import CoordinateProjection


class GuamProjection(CoordinateProjection):
    """Guam Projection.

    x = a (λ - λ0) cos φ / √(1 - e² sin² φ)
    E = FE + x
    N = FN + M - M0 + x² tan φ √(1 - e² sin² φ) / (2a)

    The reverse iterates the footpoint latitude of
    M = M0 + (N - FN) - (E - FE)² tan φ √(1 - e² sin² φ) / (2a).
    """

    METHOD = methods.GUAM_PROJECTION

    @locked_cached_property
    def _arc_of_origin(self) -> float:
        return meridian_arc(self._angle(p.LATITUDE_OF_NATURAL_ORIGIN), self._ellipsoid)

    def _compute_forward(self, latitude: float, longitude: float) -> Tuple[float, float]:
        w = np.sqrt(1 - self._e2 * np.sin(latitude) ** 2)
        x = self._a * self._delta_longitude(longitude, self._angle(p.LONGITUDE_OF_NATURAL_ORIGIN)) * np.cos(latitude) / w
        easting = self._length(p.FALSE_EASTING) + x
        northing = (
            self._length(p.FALSE_NORTHING) + meridian_arc(latitude, self._ellipsoid)
            - self._arc_of_origin + x**2 * np.tan(latitude) * w / (2 * self._a)
        )
        return easting, northing

    def _compute_reverse(self, easting: float, northing: float) -> Tuple[float, float]:
        dx = easting - self._length(p.FALSE_EASTING)
        dy = northing - self._length(p.FALSE_NORTHING)
        context = {"operation": self.identifier}

        def step(phi: float) -> float:
            w = np.sqrt(1 - self._e2 * np.sin(phi) ** 2)
            arc = self._arc_of_origin + dy - dx**2 * np.tan(phi) * w / (2 * self._a)
            return footpoint_latitude(
                arc, self._ellipsoid, self._config.max_iterations, self._config.tolerance, context
            )

        latitude = self._iterate(step, self._angle(p.LATITUDE_OF_NATURAL_ORIGIN), easting=easting, northing=northing)
        w = np.sqrt(1 - self._e2 * np.sin(latitude) ** 2)
        longitude = self._angle(p.LONGITUDE_OF_NATURAL_ORIGIN) + dx * w / (self._a * np.cos(latitude))
        return latitude, longitude

    def _proj4_parameters(self):
        return [
            ("proj", "aeqd"),
            ("guam", None),
            ("lat_0", self._degrees(p.LATITUDE_OF_NATURAL_ORIGIN)),
            ("lon_0", self._degrees(p.LONGITUDE_OF_NATURAL_ORIGIN)),
            ("x_0", self._metres(p.FALSE_EASTING)),
            ("y_0", self._metres(p.FALSE_NORTHING)),
        ]
