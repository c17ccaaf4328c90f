"""
Meridian Arcs and Auxiliary Latitudes.

Building blocks shared by the ellipsoidal projection formulas: the meridian
arc length, the footpoint latitude that inverts it, the conformal function
``t`` used by Mercator, Lambert and stereographic projections, the
authalic function ``q`` used by equal-area projections, and the Gauss
conformal sphere of the oblique stereographic projection.

Scientific Context
------------------
Domain: Geodesy, map projections
Model: Biaxial ellipsoid, series truncated after e⁶

All lengths are in the unit of the ellipsoid's semi-major axis and all
angles in radians.

References
----------
- Snyder, J.P. (1987). Map Projections - A Working Manual. USGS Prof. Paper 1395.
  Equations 3-21 (meridian arc), 3-26 (footpoint), 7-7 and 7-9 (conformal),
  3-12 and 3-18 (authalic).
- IOGP Publication 373-7-2, Geomatics Guidance Note number 7, part 2.
"""

from typing import Any, Dict, Optional, Tuple

import numpy as np

from geodesy.iteration import fixed_point
from reference.ellipsoid import Ellipsoid


def normalize_longitude(longitude: float) -> float:
    """Wrap a longitude in radians into [-π, π]."""
    if -np.pi <= longitude <= np.pi:
        return float(longitude)
    return float(np.arctan2(np.sin(longitude), np.cos(longitude)))


def meridian_arc(latitude: float, ellipsoid: Ellipsoid) -> float:
    """Compute the distance along the meridian from the equator.

    Parameters
    ----------
    latitude : float
        Geodetic latitude in radians.
    ellipsoid : Ellipsoid
        Reference ellipsoid.

    Returns
    -------
    float
        M(φ) in the ellipsoid unit; negative south of the equator.

    Notes
    -----
    M = a[(1 - e²/4 - 3e⁴/64 - 5e⁶/256)φ - (3e²/8 + 3e⁴/32 + 45e⁶/1024) sin 2φ
          + (15e⁴/256 + 45e⁶/1024) sin 4φ - (35e⁶/3072) sin 6φ]
    """
    a = ellipsoid.semi_major_axis.value
    e2 = ellipsoid.eccentricity_squared
    e4 = e2 * e2
    e6 = e4 * e2
    return float(a * (
        (1 - e2 / 4 - 3 * e4 / 64 - 5 * e6 / 256) * latitude
        - (3 * e2 / 8 + 3 * e4 / 32 + 45 * e6 / 1024) * np.sin(2 * latitude)
        + (15 * e4 / 256 + 45 * e6 / 1024) * np.sin(4 * latitude)
        - (35 * e6 / 3072) * np.sin(6 * latitude)
    ))


def footpoint_latitude(
    arc: float,
    ellipsoid: Ellipsoid,
    max_iterations: int = 20,
    tolerance: float = 1e-12,
    context: Optional[Dict[str, Any]] = None
) -> float:
    """Compute the latitude at which the meridian arc equals `arc`.

    The rectifying-latitude series gives a first estimate that Newton steps
    (dM/dφ = ρ) refine to the iteration tolerance.

    Parameters
    ----------
    arc : float
        Meridian distance from the equator, in the ellipsoid unit.
    ellipsoid : Ellipsoid
        Reference ellipsoid.

    Returns
    -------
    float
        Footpoint latitude φ1 in radians.
    """
    a = ellipsoid.semi_major_axis.value
    e2 = ellipsoid.eccentricity_squared
    e4 = e2 * e2
    e6 = e4 * e2
    mu = arc / (a * (1 - e2 / 4 - 3 * e4 / 64 - 5 * e6 / 256))
    if ellipsoid.is_sphere:
        return float(mu)
    root = np.sqrt(1 - e2)
    e1 = (1 - root) / (1 + root)
    phi = (
        mu
        + (3 * e1 / 2 - 27 * e1**3 / 32) * np.sin(2 * mu)
        + (21 * e1**2 / 16 - 55 * e1**4 / 32) * np.sin(4 * mu)
        + (151 * e1**3 / 96) * np.sin(6 * mu)
        + (1097 * e1**4 / 512) * np.sin(8 * mu)
    )

    def newton(current: float) -> float:
        current = float(np.clip(current, -np.pi / 2, np.pi / 2))
        rho = ellipsoid.radius_of_meridian_curvature(current)
        return current - (meridian_arc(current, ellipsoid) - arc) / rho

    return fixed_point(newton, phi, max_iterations, tolerance, context)


def m_factor(latitude: float, ellipsoid: Ellipsoid) -> float:
    """Compute m = cos φ / √(1 - e² sin² φ)."""
    e2 = ellipsoid.eccentricity_squared
    return float(np.cos(latitude) / np.sqrt(1 - e2 * np.sin(latitude)**2))


def conformal_t(latitude: float, ellipsoid: Ellipsoid) -> float:
    """Compute t = tan(π/4 - φ/2) / [(1 - e sin φ)/(1 + e sin φ)]^(e/2)."""
    e = ellipsoid.eccentricity
    e_sin = e * np.sin(latitude)
    return float(np.tan(np.pi / 4 - latitude / 2) / ((1 - e_sin) / (1 + e_sin)) ** (e / 2))


def latitude_from_conformal_t(
    t: float,
    ellipsoid: Ellipsoid,
    max_iterations: int = 20,
    tolerance: float = 1e-12,
    context: Optional[Dict[str, Any]] = None
) -> float:
    """Invert `conformal_t`.

    Iterates φ = π/2 - 2 atan(t [(1 - e sin φ)/(1 + e sin φ)]^(e/2)) starting
    from the spherical solution.
    """
    e = ellipsoid.eccentricity
    initial = np.pi / 2 - 2 * np.arctan(t)
    if e == 0:
        return float(initial)

    def step(phi: float) -> float:
        e_sin = e * np.sin(phi)
        return float(np.pi / 2 - 2 * np.arctan(t * ((1 - e_sin) / (1 + e_sin)) ** (e / 2)))

    return fixed_point(step, initial, max_iterations, tolerance, context)


def authalic_q(latitude: float, ellipsoid: Ellipsoid) -> float:
    """Compute q = (1 - e²)[sin φ/(1 - e² sin² φ) - 1/(2e) ln((1 - e sin φ)/(1 + e sin φ))].

    For a sphere q = 2 sin φ.
    """
    e = ellipsoid.eccentricity
    e2 = ellipsoid.eccentricity_squared
    sin_phi = np.sin(latitude)
    if e == 0:
        return float(2 * sin_phi)
    return float((1 - e2) * (
        sin_phi / (1 - e2 * sin_phi**2)
        - 1 / (2 * e) * np.log((1 - e * sin_phi) / (1 + e * sin_phi))
    ))


def latitude_from_authalic(beta: float, ellipsoid: Ellipsoid) -> float:
    """Compute the geodetic latitude of an authalic latitude β.

    The e⁶ series is refined by two Newton steps on q (Snyder 3-16), which
    removes the truncation error of the series.
    """
    e = ellipsoid.eccentricity
    e2 = ellipsoid.eccentricity_squared
    e4 = e2 * e2
    e6 = e4 * e2
    phi = (
        beta
        + (e2 / 3 + 31 * e4 / 180 + 517 * e6 / 5040) * np.sin(2 * beta)
        + (23 * e4 / 360 + 251 * e6 / 3780) * np.sin(4 * beta)
        + (761 * e6 / 45360) * np.sin(6 * beta)
    )
    if e == 0 or np.isclose(abs(phi), np.pi / 2, rtol=0.0, atol=1e-10):
        return float(phi)

    q = authalic_q(np.pi / 2, ellipsoid) * np.sin(beta)
    for _ in range(2):
        sin_phi = np.sin(phi)
        w = 1 - e2 * sin_phi**2
        phi += w**2 / (2 * np.cos(phi)) * (
            q / (1 - e2) - sin_phi / w + 1 / (2 * e) * np.log((1 - e * sin_phi) / (1 + e * sin_phi))
        )
    return float(phi)


def gauss_sphere(latitude: float, ellipsoid: Ellipsoid) -> Tuple[float, float, float, float]:
    """Constants of the Gauss conformal sphere touching the ellipsoid at `latitude`.

    Returns
    -------
    tuple
        (R, n, c, χ0): radius √(ρ0 ν0), longitude ratio n, the constant c of
        `gauss_conformal`, and the conformal latitude of the tangent parallel.
    """
    e = ellipsoid.eccentricity
    e2 = ellipsoid.eccentricity_squared
    radius = np.sqrt(
        ellipsoid.radius_of_meridian_curvature(latitude) * ellipsoid.radius_of_prime_vertical_curvature(latitude)
    )
    n = np.sqrt(1 + e2 * np.cos(latitude) ** 4 / (1 - e2))
    if np.isclose(abs(latitude), np.pi / 2, rtol=0.0, atol=1e-15):
        return float(radius), float(n), 1.0, float(latitude)
    s1 = (1 + np.sin(latitude)) / (1 - np.sin(latitude))
    s2 = (1 - e * np.sin(latitude)) / (1 + e * np.sin(latitude))
    w1 = (s1 * s2**e) ** n
    sin_chi0 = (w1 - 1) / (w1 + 1)
    c = (n + np.sin(latitude)) * (1 - sin_chi0) / ((n - np.sin(latitude)) * (1 + sin_chi0))
    w2 = c * w1
    return float(radius), float(n), float(c), float(np.arcsin((w2 - 1) / (w2 + 1)))


def gauss_conformal(latitude: float, n: float, c: float, ellipsoid: Ellipsoid) -> float:
    """Conformal latitude χ = asin((w - 1)/(w + 1)) on the Gauss sphere."""
    if np.isclose(abs(latitude), np.pi / 2, rtol=0.0, atol=1e-15):
        return float(latitude)
    e = ellipsoid.eccentricity
    sa = (1 + np.sin(latitude)) / (1 - np.sin(latitude))
    sb = (1 - e * np.sin(latitude)) / (1 + e * np.sin(latitude))
    w = c * (sa * sb**e) ** n
    return float(np.arcsin((w - 1) / (w + 1)))


def latitude_from_gauss_conformal(
    chi: float,
    n: float,
    c: float,
    ellipsoid: Ellipsoid,
    max_iterations: int = 20,
    tolerance: float = 1e-12,
    context: Optional[Dict[str, Any]] = None
) -> float:
    """Invert `gauss_conformal` by Newton iteration on the isometric latitude."""
    if np.isclose(abs(chi), np.pi / 2, rtol=0.0, atol=1e-15):
        return float(chi)
    e = ellipsoid.eccentricity
    e2 = ellipsoid.eccentricity_squared
    psi = 0.5 * np.log((1 + np.sin(chi)) / (c * (1 - np.sin(chi)))) / n
    initial = 2 * np.arctan(np.exp(psi)) - np.pi / 2
    if e == 0:
        return float(initial)

    def step(phi: float) -> float:
        e_sin = e * np.sin(phi)
        psi_i = np.log(np.tan(phi / 2 + np.pi / 4) * ((1 - e_sin) / (1 + e_sin)) ** (e / 2))
        return float(phi - (psi_i - psi) * np.cos(phi) * (1 - e_sin**2) / (1 - e2))

    return fixed_point(step, initial, max_iterations, tolerance, context)
