"""
Ellipsoid-generic geodetic computations.

This package provides the numerical building blocks of coordinate operations:
- Geographic, geocentric and topocentric conversions
- Meridian arc length and footpoint latitude
- Conformal and authalic latitude functions
- The shared fixed-point iteration

All functions take a `reference.Ellipsoid` and work in radians and in the
ellipsoid's linear unit.
"""

from geodesy.coordinate_models import (
    GeocentricConfig,
    enu_rotation,
    geocentric_to_geographic,
    geocentric_to_topocentric,
    geographic_to_geocentric,
    topocentric_to_geocentric,
)
from geodesy.iteration import fixed_point, fixed_point_array
from geodesy.latitudes import (
    authalic_q,
    conformal_t,
    footpoint_latitude,
    gauss_conformal,
    gauss_sphere,
    latitude_from_authalic,
    latitude_from_conformal_t,
    latitude_from_gauss_conformal,
    m_factor,
    meridian_arc,
    normalize_longitude,
)

__all__ = [
    "GeocentricConfig",
    "enu_rotation",
    "geocentric_to_geographic",
    "geocentric_to_topocentric",
    "geographic_to_geocentric",
    "topocentric_to_geocentric",
    "fixed_point",
    "fixed_point_array",
    "authalic_q",
    "conformal_t",
    "footpoint_latitude",
    "gauss_conformal",
    "gauss_sphere",
    "latitude_from_authalic",
    "latitude_from_conformal_t",
    "latitude_from_gauss_conformal",
    "m_factor",
    "meridian_arc",
    "normalize_longitude",
]
