"""
Coordinate Types for Geodetic Computations.

This module defines the coordinate value types exchanged between the reference
model and the coordinate operation engine.

Design Rationale
----------------
Formulas work on radians and on lengths in the unit of the ellipsoid they are
bound to. Coordinates therefore store plain floats:

1. `GeographicCoordinate` - latitude/longitude in RADIANS plus an ellipsoidal
   height, validated on construction.
2. `Coordinate` - a cartesian tuple used both for planar map coordinates
   (easting, northing) and for geocentric or topocentric (X, Y, Z) positions.

Both are frozen; operations never mutate their input.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from common.units import Angle, Length


@dataclass(frozen=True)
class GeographicCoordinate:
    """A geographic coordinate on an ellipsoid.

    Attributes
    ----------
    latitude : float
        Geodetic latitude in RADIANS (not degrees). Range: [-π/2, π/2].
    longitude : float
        Geodetic longitude in RADIANS (not degrees). Range: [-π, π].
    height : float, optional
        Height above the ellipsoid, in the ellipsoid's unit. Default is 0.

    Notes
    -----
    - Latitude is positive north, negative south.
    - Longitude is positive east, negative west.
    - For display, use the `to_degrees()` method.

    Examples
    --------
    >>> coord = GeographicCoordinate.from_degrees(53.0, 6.0)
    >>> lat_deg, lon_deg = coord.to_degrees()
    """
    latitude: float  # radians
    longitude: float  # radians
    height: float = 0.0

    def __post_init__(self):
        """Validate coordinate ranges."""
        if not -np.pi/2 <= self.latitude <= np.pi/2:
            raise ValueError(
                f"Latitude {self.latitude} rad out of range [-π/2, π/2]. "
                f"Did you pass degrees instead of radians?"
            )
        if not -np.pi <= self.longitude <= np.pi:
            # Normalize longitude to [-π, π]
            object.__setattr__(
                self, "longitude",
                float(np.arctan2(np.sin(self.longitude), np.cos(self.longitude)))
            )

    def to_degrees(self) -> Tuple[float, float]:
        """Convert to degrees for display.

        Returns
        -------
        Tuple[float, float]
            (latitude_degrees, longitude_degrees)
        """
        return float(np.degrees(self.latitude)), float(np.degrees(self.longitude))

    @classmethod
    def from_degrees(cls, lat_deg: float, lon_deg: float, height: float = 0.0) -> 'GeographicCoordinate':
        """Create coordinate from degrees (convenience constructor).

        Parameters
        ----------
        lat_deg : float
            Latitude in degrees.
        lon_deg : float
            Longitude in degrees.
        height : float, optional
            Ellipsoidal height.

        Returns
        -------
        GeographicCoordinate
            Coordinate with internally stored radians.
        """
        return cls(
            latitude=float(np.radians(lat_deg)),
            longitude=float(np.radians(lon_deg)),
            height=height
        )

    @classmethod
    def from_angles(
        cls,
        latitude: Angle,
        longitude: Angle,
        height: Optional[Length] = None
    ) -> 'GeographicCoordinate':
        """Create coordinate from typed angles and an optional typed height."""
        return cls(
            latitude=latitude.base_value,
            longitude=longitude.base_value,
            height=height.value if height is not None else 0.0
        )


@dataclass(frozen=True)
class Coordinate:
    """A cartesian coordinate.

    Planar map coordinates use `x` for easting and `y` for northing.
    Geocentric and topocentric coordinates use all three axes.
    """
    x: float
    y: float
    z: float = 0.0

    def to_array(self) -> NDArray[np.float64]:
        """Return the coordinate as an array of shape (3,)."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, values: NDArray[np.float64]) -> 'Coordinate':
        """Create a coordinate from an array of two or three values."""
        z = float(values[2]) if len(values) > 2 else 0.0
        return cls(float(values[0]), float(values[1]), z)
