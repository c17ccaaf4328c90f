"""
Geodetic Constants.

This module provides defining constants of the reference ellipsoids and a few
conversion factors, each with its uncertainty and source.

References
----------
- WGS84 parameters: NIMA TR8350.2, Third Edition, 2000
- GRS80 parameters: Moritz, H. (2000). Geodetic Reference System 1980.
- EPSG Guidance Note 7-2: Coordinate Conversions and Transformations
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class Constant:
    """A constant with uncertainty and provenance.

    Attributes
    ----------
    value : float
        The nominal value of the constant.
    uncertainty : float
        The standard uncertainty (1-sigma) of the constant.
    unit : str
        The unit of the constant.
    source : str
        Reference for the constant value.
    description : str
        Human-readable description of the constant.
    """
    value: float
    uncertainty: float
    unit: str
    source: str
    description: str


class GeodeticConstants:
    """Registry of geodetic constants used throughout the system.

    Reference Ellipsoids
    --------------------
    Defining parameters of the global ellipsoids. Every other shape
    descriptor is derived by `reference.ellipsoid.Ellipsoid`.
    """

    # =========================================================================
    # WGS84 Ellipsoid Parameters
    # Reference: NIMA TR8350.2, Third Edition, 2000
    # =========================================================================

    WGS84_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_137.0,
        uncertainty=0.0,  # Defined exactly
        unit="m",
        source="WGS84, NIMA TR8350.2",
        description="Semi-major axis (equatorial radius) of WGS84 ellipsoid"
    )

    WGS84_INVERSE_FLATTENING: Final[Constant] = Constant(
        value=298.257223563,
        uncertainty=0.0,  # Defined exactly
        unit="dimensionless",
        source="WGS84, NIMA TR8350.2",
        description="Inverse flattening of WGS84 ellipsoid: 1/f = a / (a - b)"
    )

    WGS84_ECCENTRICITY_SQUARED: Final[Constant] = Constant(
        value=0.00669437999014,
        uncertainty=1e-14,
        unit="dimensionless",
        source="WGS84, NIMA TR8350.2 (derived)",
        description="First eccentricity squared: e² = (a² - b²) / a²"
    )

    # =========================================================================
    # GRS80 Ellipsoid Parameters
    # =========================================================================

    GRS80_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_137.0,
        uncertainty=0.0,  # Defined exactly
        unit="m",
        source="Moritz (2000)",
        description="Semi-major axis of GRS80 ellipsoid"
    )

    GRS80_INVERSE_FLATTENING: Final[Constant] = Constant(
        value=298.257222101,
        uncertainty=1e-9,
        unit="dimensionless",
        source="Moritz (2000) (derived)",
        description="Inverse flattening of GRS80 ellipsoid"
    )

    # =========================================================================
    # Conversion factors
    # =========================================================================

    ARC_SECOND_TO_RADIAN: Final[Constant] = Constant(
        value=4.84813681109536e-06,
        uncertainty=0.0,  # Defined exactly
        unit="rad per arc-second",
        source="π / 648000",
        description="Conversion factor from arc-seconds to radians"
    )

    PARTS_PER_MILLION: Final[Constant] = Constant(
        value=1e-6,
        uncertainty=0.0,  # Defined exactly
        unit="dimensionless per ppm",
        source="EPSG unit 9202",
        description="Scale difference unit used by Helmert transformations"
    )

    # =========================================================================
    # EPSG code ranges
    # =========================================================================

    # Vertical datum codes in [5000, 5100) describe ellipsoidal heights
    ELLIPSOIDAL_VERTICAL_DATUM_CODES: Final[range] = range(5000, 5100)
