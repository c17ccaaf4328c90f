"""
Reference Ellipsoids.

This module implements the oblate spheroid (or sphere) that approximates the
figure of a planetary body. An ellipsoid is fully described by its semi-major
axis and one shape parameter; every other shape descriptor is derived once, at
construction, and never changes.

Scientific Context
------------------
Domain: Geodesy, Earth geometry
Model: Biaxial ellipsoid of revolution

Shape parameters and their relations:

    f  = (a - b) / a                 flattening
    1/f                              inverse flattening
    e² = (a² - b²) / a² = f(2 - f)   first eccentricity squared
    e'² = (a² - b²) / b²             second eccentricity squared

A sphere is recorded with inverse flattening 1 and flattening 0. All radius
computations special-case the sphere instead of evaluating the eccentricity
terms.

Lengths returned by this module are expressed in the unit of the semi-major
axis.

References
----------
- IOGP Publication 373-7-2, Geomatics Guidance Note number 7, part 2.
- Snyder, J.P. (1987). Map Projections - A Working Manual. USGS Prof. Paper 1395.
"""

from typing import Optional, Sequence, Union

import numpy as np

from common.logging_config import get_logger
from common.units import Angle, Length, as_length
from reference.base import IdentifiedObject

logger = get_logger(__name__)

LatitudeLike = Union[float, Angle]
LengthLike = Union[float, Length]


def _latitude(latitude: LatitudeLike) -> float:
    """Return the latitude in radians, checking its range."""
    value = latitude.base_value if isinstance(latitude, Angle) else float(latitude)
    if not -np.pi/2 <= value <= np.pi/2:
        raise ValueError(f"Latitude {value} rad out of range [-π/2, π/2].")
    return value


class Ellipsoid(IdentifiedObject):
    """An oblate spheroid or sphere model of a planetary body.

    Instances are created through the five factory methods, one per
    parameterization: `from_semi_minor_axis`, `from_inverse_flattening`,
    `from_flattening`, `from_eccentricity` and `from_sphere`.

    Attributes
    ----------
    semi_major_axis : Length
        Equatorial radius.
    semi_minor_axis : Length
        Polar radius, in the same unit.
    inverse_flattening : float
        1/f, or 1 for a sphere.
    eccentricity : float
        First eccentricity.
    second_eccentricity : float
        Second eccentricity.
    radius_of_authalic_sphere : float
        Radius of the sphere with the same surface area.
    """

    def __init__(
        self,
        identifier: str,
        name: str,
        semi_major_axis: Length,
        semi_minor_axis: Length,
        inverse_flattening: float,
        is_sphere: bool,
        remarks: Optional[str] = None,
        aliases: Sequence[str] = ()
    ):
        super().__init__(identifier, name, remarks, aliases)
        self._semi_major_axis = semi_major_axis
        self._semi_minor_axis = semi_minor_axis.to(semi_major_axis.unit)
        self._is_sphere = is_sphere

        a = self._semi_major_axis.value
        if is_sphere:
            self._inverse_flattening = 1.0
            self._flattening = 0.0
            self._eccentricity_squared = 0.0
            self._second_eccentricity_squared = 0.0
            self._radius_of_authalic_sphere = a
        else:
            b = self._semi_minor_axis.value
            self._inverse_flattening = inverse_flattening
            self._flattening = 1.0 / inverse_flattening
            self._eccentricity_squared = (a**2 - b**2) / a**2
            self._second_eccentricity_squared = (a**2 - b**2) / b**2
            e = np.sqrt(self._eccentricity_squared)
            # q at the pole, EPSG GN7-2 section 1.3.2.3
            q_p = (1 - self._eccentricity_squared) * (
                1 / (1 - self._eccentricity_squared)
                - 1 / (2 * e) * np.log((1 - e) / (1 + e))
            )
            self._radius_of_authalic_sphere = float(a * np.sqrt(q_p / 2))

        self._eccentricity = float(np.sqrt(self._eccentricity_squared))
        self._second_eccentricity = float(np.sqrt(self._second_eccentricity_squared))

    # =========================================================================
    # Factories
    # =========================================================================

    @staticmethod
    def _semi_major(value: LengthLike) -> Length:
        semi_major_axis = as_length(value)
        if not semi_major_axis.value > 0:
            raise ValueError(
                f"semi_major_axis must be greater than zero, got {semi_major_axis.value}"
            )
        return semi_major_axis

    @classmethod
    def from_semi_minor_axis(
        cls,
        identifier: str,
        name: str,
        semi_major_axis: LengthLike,
        semi_minor_axis: LengthLike,
        **kwargs
    ) -> "Ellipsoid":
        """Create an ellipsoid from its two semi-axes.

        Parameters
        ----------
        identifier, name : str
            Identification of the ellipsoid.
        semi_major_axis : float or Length
            Equatorial radius (float values are metres).
        semi_minor_axis : float or Length
            Polar radius (float values are metres).

        Raises
        ------
        ValueError
            If either axis is not positive or the semi-minor axis exceeds
            the semi-major axis.
        """
        a = cls._semi_major(semi_major_axis)
        b = as_length(semi_minor_axis).to(a.unit)
        if not b.value > 0:
            raise ValueError(f"semi_minor_axis must be greater than zero, got {b.value}")
        if b.value > a.value:
            raise ValueError(
                f"semi_minor_axis ({b.value}) must not exceed semi_major_axis ({a.value})"
            )
        if b.value == a.value:
            return cls(identifier, name, a, b, 1.0, True, **kwargs)
        return cls(identifier, name, a, b, a.value / (a.value - b.value), False, **kwargs)

    @classmethod
    def from_inverse_flattening(
        cls,
        identifier: str,
        name: str,
        semi_major_axis: LengthLike,
        inverse_flattening: float,
        **kwargs
    ) -> "Ellipsoid":
        """Create an ellipsoid from the semi-major axis and inverse flattening.

        An inverse flattening of exactly 1 denotes a sphere.

        Raises
        ------
        ValueError
            If the semi-major axis is not positive or the inverse flattening
            is less than 1.
        """
        a = cls._semi_major(semi_major_axis)
        if not inverse_flattening >= 1:
            raise ValueError(
                f"inverse_flattening must be at least 1, got {inverse_flattening}"
            )
        if inverse_flattening == 1:
            return cls(identifier, name, a, a, 1.0, True, **kwargs)
        b = Length(a.value * (1 - 1 / inverse_flattening), a.unit)
        return cls(identifier, name, a, b, float(inverse_flattening), False, **kwargs)

    @classmethod
    def from_flattening(
        cls,
        identifier: str,
        name: str,
        semi_major_axis: LengthLike,
        flattening: float,
        **kwargs
    ) -> "Ellipsoid":
        """Create an ellipsoid from the semi-major axis and flattening.

        Raises
        ------
        ValueError
            If the semi-major axis is not positive or the flattening is not
            in (0, 1].
        """
        a = cls._semi_major(semi_major_axis)
        if not 0 < flattening <= 1:
            raise ValueError(f"flattening must be in (0, 1], got {flattening}")
        return cls.from_inverse_flattening(identifier, name, a, 1 / flattening, **kwargs)

    @classmethod
    def from_eccentricity(
        cls,
        identifier: str,
        name: str,
        semi_major_axis: LengthLike,
        eccentricity: float,
        **kwargs
    ) -> "Ellipsoid":
        """Create an ellipsoid from the semi-major axis and eccentricity.

        Raises
        ------
        ValueError
            If the semi-major axis is not positive or the eccentricity is not
            in (0, 1].
        """
        a = cls._semi_major(semi_major_axis)
        if not 0 < eccentricity <= 1:
            raise ValueError(f"eccentricity must be in (0, 1], got {eccentricity}")
        flattening = 1 - np.sqrt(1 - eccentricity**2)
        return cls.from_inverse_flattening(identifier, name, a, float(1 / flattening), **kwargs)

    @classmethod
    def from_sphere(
        cls,
        identifier: str,
        name: str,
        radius: LengthLike,
        **kwargs
    ) -> "Ellipsoid":
        """Create a sphere of the given radius.

        Raises
        ------
        ValueError
            If the radius is not positive.
        """
        a = cls._semi_major(radius)
        return cls(identifier, name, a, a, 1.0, True, **kwargs)

    # =========================================================================
    # Shape descriptors
    # =========================================================================

    @property
    def semi_major_axis(self) -> Length:
        return self._semi_major_axis

    @property
    def semi_minor_axis(self) -> Length:
        return self._semi_minor_axis

    @property
    def unit(self):
        """Linear unit of the axes."""
        return self._semi_major_axis.unit

    @property
    def inverse_flattening(self) -> float:
        return self._inverse_flattening

    @property
    def flattening(self) -> float:
        return self._flattening

    @property
    def eccentricity(self) -> float:
        return self._eccentricity

    @property
    def eccentricity_squared(self) -> float:
        return self._eccentricity_squared

    @property
    def second_eccentricity(self) -> float:
        return self._second_eccentricity

    @property
    def second_eccentricity_squared(self) -> float:
        return self._second_eccentricity_squared

    @property
    def radius_of_authalic_sphere(self) -> float:
        """Radius of the sphere having the surface area of the ellipsoid."""
        return self._radius_of_authalic_sphere

    @property
    def is_sphere(self) -> bool:
        return self._is_sphere

    # =========================================================================
    # Radii of curvature
    # =========================================================================

    def radius_of_meridian_curvature(self, latitude: LatitudeLike) -> float:
        """Compute the radius of curvature in the meridian plane.

        Parameters
        ----------
        latitude : float or Angle
            Geodetic latitude (float values are radians).

        Returns
        -------
        float
            ρ = a(1 - e²) / (1 - e² sin²φ)^(3/2), or a for a sphere.

        Raises
        ------
        ValueError
            If |latitude| > π/2.
        """
        phi = _latitude(latitude)
        a = self._semi_major_axis.value
        if self._is_sphere:
            return a
        return float(
            a * (1 - self._eccentricity_squared)
            / (1 - self._eccentricity_squared * np.sin(phi)**2) ** 1.5
        )

    def radius_of_prime_vertical_curvature(self, latitude: LatitudeLike) -> float:
        """Compute the radius of curvature in the prime vertical.

        Returns
        -------
        float
            ν = a / (1 - e² sin²φ)^(1/2), or a for a sphere.
        """
        phi = _latitude(latitude)
        a = self._semi_major_axis.value
        if self._is_sphere:
            return a
        return float(a / np.sqrt(1 - self._eccentricity_squared * np.sin(phi)**2))

    def radius_of_parallel_curvature(self, latitude: LatitudeLike) -> float:
        """Compute the radius of the parallel circle, ν cos φ."""
        phi = _latitude(latitude)
        if self._is_sphere:
            return float(self._semi_major_axis.value * np.cos(phi))
        return float(self.radius_of_prime_vertical_curvature(phi) * np.cos(phi))

    def radius_of_conformal_sphere(self, latitude: LatitudeLike) -> float:
        """Compute the radius of the conformal sphere, √(ρν)."""
        phi = _latitude(latitude)
        if self._is_sphere:
            return self._semi_major_axis.value
        return float(np.sqrt(
            self.radius_of_meridian_curvature(phi) * self.radius_of_prime_vertical_curvature(phi)
        ))

    def radius_of_curvature_in_azimuth(self, latitude: LatitudeLike, azimuth: LatitudeLike) -> float:
        """Compute the radius of curvature of the normal section in an azimuth.

        Notes
        -----
        Uses Euler's formula: 1/R = cos²α/ρ + sin²α/ν
        """
        phi = _latitude(latitude)
        alpha = azimuth.base_value if isinstance(azimuth, Angle) else float(azimuth)
        rho = self.radius_of_meridian_curvature(phi)
        nu = self.radius_of_prime_vertical_curvature(phi)
        return float(1.0 / (np.cos(alpha)**2 / rho + np.sin(alpha)**2 / nu))

    def to_sphere(self) -> "Ellipsoid":
        """Return the authalic sphere of this ellipsoid."""
        if self._is_sphere:
            return self
        return Ellipsoid.from_sphere(
            f"{self.identifier}::authalic",
            f"{self.name} Authalic Sphere",
            Length(self._radius_of_authalic_sphere, self.unit)
        )

    def __repr__(self):
        return (
            f"Ellipsoid('{self.identifier}', '{self.name}', "
            f"a={self._semi_major_axis.value}, 1/f={self._inverse_flattening})"
        )
