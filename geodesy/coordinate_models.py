"""
Coordinate Models for Ellipsoidal Earth Geometry.

This module implements conversions between geographic, geocentric (earth
centred, earth fixed) and topocentric (local east-north-up) coordinates on
any reference ellipsoid.

Scientific Context
------------------
Domain: Geodesy, Earth geometry
Model: Biaxial ellipsoid of revolution (or sphere)

The geocentric frame has:
- Origin at the centre of the ellipsoid
- X-axis through the prime meridian at the equator
- Y-axis through 90°E at the equator
- Z-axis through the north pole

Lengths are expressed in the unit of the ellipsoid's semi-major axis.

References
----------
- IOGP Publication 373-7-2, sections 4.1.1 and 4.1.2.
- Bowring, B.R. (1976). Transformation from spatial to geographical
  coordinates. Survey Review, 23(181), 323-327.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from common.logging_config import get_logger
from reference.ellipsoid import Ellipsoid

logger = get_logger(__name__)


@dataclass
class GeocentricConfig:
    """Configuration for the geocentric to geographic iteration.

    Attributes
    ----------
    max_iterations : int
        Maximum iterations for convergence.
    tolerance : float
        Convergence tolerance in radians.
    """
    max_iterations: int = 10
    tolerance: float = 1e-12


def geographic_to_geocentric(
    latitude: float,
    longitude: float,
    height: float,
    ellipsoid: Ellipsoid
) -> Tuple[float, float, float]:
    """Convert geographic coordinates to geocentric cartesian coordinates.

    Parameters
    ----------
    latitude, longitude : float
        Geodetic latitude and longitude in radians.
    height : float
        Height above the ellipsoid.
    ellipsoid : Ellipsoid
        Reference ellipsoid.

    Returns
    -------
    Tuple[float, float, float]
        (X, Y, Z) in the ellipsoid unit.

    Notes
    -----
    X = (ν + h) cos φ cos λ
    Y = (ν + h) cos φ sin λ
    Z = ((1 - e²) ν + h) sin φ
    """
    sin_lat = np.sin(latitude)
    cos_lat = np.cos(latitude)

    nu = ellipsoid.radius_of_prime_vertical_curvature(latitude)

    x = (nu + height) * cos_lat * np.cos(longitude)
    y = (nu + height) * cos_lat * np.sin(longitude)
    z = (nu * (1 - ellipsoid.eccentricity_squared) + height) * sin_lat

    return float(x), float(y), float(z)


def geocentric_to_geographic(
    x: float,
    y: float,
    z: float,
    ellipsoid: Ellipsoid,
    config: GeocentricConfig = None
) -> Tuple[float, float, float]:
    """Convert geocentric cartesian coordinates to geographic coordinates.

    Uses Bowring's iterative method, which typically converges in 2-3
    iterations for points on or near the surface.

    Parameters
    ----------
    x, y, z : float
        Geocentric coordinates in the ellipsoid unit.
    ellipsoid : Ellipsoid
        Reference ellipsoid.
    config : GeocentricConfig, optional
        Iteration limits.

    Returns
    -------
    Tuple[float, float, float]
        (latitude, longitude, height) with angles in radians.
    """
    config = config or GeocentricConfig()
    e2 = ellipsoid.eccentricity_squared

    longitude = np.arctan2(y, x)
    p = np.sqrt(x**2 + y**2)

    # Polar axis
    if p < 1e-10:
        latitude = np.pi / 2 if z >= 0 else -np.pi / 2
        height = abs(z) - ellipsoid.semi_minor_axis.value
        return float(latitude), float(longitude), float(height)

    latitude = np.arctan2(z, p * (1 - e2))

    for _ in range(config.max_iterations):
        nu = ellipsoid.radius_of_prime_vertical_curvature(latitude)
        latitude_new = np.arctan2(z + e2 * nu * np.sin(latitude), p)

        if abs(latitude_new - latitude) < config.tolerance:
            latitude = latitude_new
            break

        latitude = latitude_new
    else:
        logger.warning(
            f"Geocentric to geographic conversion did not converge in "
            f"{config.max_iterations} iterations"
        )

    sin_lat = np.sin(latitude)
    cos_lat = np.cos(latitude)
    nu = ellipsoid.radius_of_prime_vertical_curvature(latitude)

    if abs(cos_lat) > 1e-10:
        height = p / cos_lat - nu
    else:
        height = abs(z) / abs(sin_lat) - nu * (1 - e2)

    return float(latitude), float(longitude), float(height)


def enu_rotation(origin_latitude: float, origin_longitude: float) -> NDArray[np.float64]:
    """Return the matrix rotating geocentric offsets into east-north-up axes.

    The transpose rotates back.
    """
    sin_lat = np.sin(origin_latitude)
    cos_lat = np.cos(origin_latitude)
    sin_lon = np.sin(origin_longitude)
    cos_lon = np.cos(origin_longitude)
    return np.array([
        [-sin_lon, cos_lon, 0.0],
        [-sin_lat * cos_lon, -sin_lat * sin_lon, cos_lat],
        [cos_lat * cos_lon, cos_lat * sin_lon, sin_lat],
    ])


def geocentric_to_topocentric(
    geocentric: NDArray[np.float64],
    origin: NDArray[np.float64],
    origin_latitude: float,
    origin_longitude: float
) -> NDArray[np.float64]:
    """Convert a geocentric position to east-north-up offsets from an origin.

    Parameters
    ----------
    geocentric : ndarray of shape (3,)
        Target position (X, Y, Z).
    origin : ndarray of shape (3,)
        Geocentric position of the topocentric origin.
    origin_latitude, origin_longitude : float
        Geographic position of the origin in radians, defining the axes.

    Returns
    -------
    ndarray of shape (3,)
        (East, North, Up).
    """
    rotation = enu_rotation(origin_latitude, origin_longitude)
    return rotation @ (np.asarray(geocentric, dtype=np.float64) - origin)


def topocentric_to_geocentric(
    topocentric: NDArray[np.float64],
    origin: NDArray[np.float64],
    origin_latitude: float,
    origin_longitude: float
) -> NDArray[np.float64]:
    """Convert east-north-up offsets from an origin back to a geocentric position."""
    rotation = enu_rotation(origin_latitude, origin_longitude)
    return origin + rotation.T @ np.asarray(topocentric, dtype=np.float64)
