"""
Datum Transformations.

Empirically derived operations between two geodetic reference frames:

- Helmert family in the geocentric domain: Geocentric translations (1031),
  Coordinate Frame rotation (1032), Position Vector transformation (1033)
- The same methods applied to geographic coordinates (9603, 9607, 9606):
  geographic -> geocentric on the source ellipsoid, Helmert, geocentric ->
  geographic on the target ellipsoid
- Molodensky (9604)
- Geographic2D offsets (9619)
- Ellipsoid to sphere: the Gauss conformal mapping onto the sphere that
  touches the ellipsoid at a natural origin

Scientific Context
------------------
The seven-parameter Helmert transformation (Position Vector convention) is

    X' = M R X + T,   M = 1 + dS·10⁻⁶

        | 1   -rZ   rY |
    R = | rZ   1   -rX |
        | -rY  rX   1  |

The Coordinate Frame convention uses the transposed rotation. Translations
are in metres; geocentric coordinates of ellipsoids in other units are
converted to metres around the Helmert step. Rotations are small, so the
reverse solves the linear system exactly rather than negating parameters.

References
----------
- IOGP Publication 373-7-2, sections 2.4.3 and 2.4.4.
"""

from typing import Tuple

import numpy as np

from common.caching import locked_cached_property
from common.logging_config import get_logger
from common.types import Coordinate, GeographicCoordinate
from geodesy.coordinate_models import GeocentricConfig, geocentric_to_geographic, geographic_to_geocentric
from geodesy.latitudes import gauss_conformal, gauss_sphere, latitude_from_gauss_conformal, normalize_longitude
from operations import methods
from operations import parameters as p
from operations.base import CoordinateTransformation
from reference.ellipsoid import Ellipsoid

logger = get_logger(__name__)

_POSITION_VECTOR_METHODS = (
    methods.POSITION_VECTOR_TRANSFORMATION.identifier,
    methods.POSITION_VECTOR_TRANSFORMATION_GEOG2D.identifier,
)
_COORDINATE_FRAME_METHODS = (
    methods.COORDINATE_FRAME_ROTATION.identifier,
    methods.COORDINATE_FRAME_ROTATION_GEOG2D.identifier,
)


def _ellipsoid_of(reference, role: str, name: str) -> Ellipsoid:
    ellipsoid = getattr(reference, "ellipsoid", None)
    if ellipsoid is None:
        raise ValueError(f"The {role} of '{name}' does not define an ellipsoid.")
    return ellipsoid


def _metres_per_unit(ellipsoid: Ellipsoid) -> float:
    return ellipsoid.semi_major_axis.base_value / ellipsoid.semi_major_axis.value


class HelmertTransformation(CoordinateTransformation):
    """Helmert transformations in the geocentric domain.

    Parameters
    ----------
    method : OperationMethod
        One of the geocentric translations, Coordinate Frame rotation or
        Position Vector transformation methods.

    Examples
    --------
    >>> from reference.catalogs import WGS84_GEOCENTRIC, ETRS89_GEOCENTRIC
    >>> from common.units import Length
    >>> shift = HelmertTransformation(
    ...     "GEODESY::1", "Shift", methods.GEOCENTRIC_TRANSLATIONS,
    ...     {p.X_AXIS_TRANSLATION: Length(1.0), p.Y_AXIS_TRANSLATION: Length(0.0),
    ...      p.Z_AXIS_TRANSLATION: Length(0.0)},
    ...     ETRS89_GEOCENTRIC, WGS84_GEOCENTRIC)
    >>> shift.forward(Coordinate(6378137.0, 0.0, 0.0)).x
    6378138.0
    """

    SUPPORTED_METHODS = (
        methods.GEOCENTRIC_TRANSLATIONS,
        methods.COORDINATE_FRAME_ROTATION,
        methods.POSITION_VECTOR_TRANSFORMATION,
    )

    def __init__(self, identifier, name, method, parameters, source, target, area_of_use=None, config=None, **kwargs):
        if method not in self.SUPPORTED_METHODS:
            raise ValueError(f"The method '{method.name}' is not a {type(self).__name__} method.")
        super().__init__(identifier, name, method, parameters, source, target, area_of_use, config, **kwargs)

    @locked_cached_property
    def _helmert(self) -> Tuple[np.ndarray, np.ndarray]:
        """Return the translation vector and the matrix M R."""
        translation = np.array([
            self._length(p.X_AXIS_TRANSLATION),
            self._length(p.Y_AXIS_TRANSLATION),
            self._length(p.Z_AXIS_TRANSLATION),
        ])
        if p.X_AXIS_ROTATION not in self._method.parameters:
            return translation, np.identity(3)

        rx = self._angle(p.X_AXIS_ROTATION)
        ry = self._angle(p.Y_AXIS_ROTATION)
        rz = self._angle(p.Z_AXIS_ROTATION)
        if self._method.identifier in _COORDINATE_FRAME_METHODS:
            rx, ry, rz = -rx, -ry, -rz
        rotation = np.array([
            [1.0, -rz, ry],
            [rz, 1.0, -rx],
            [-ry, rx, 1.0],
        ])
        scale = 1 + self._scale(p.SCALE_DIFFERENCE) * 1e-6
        return translation, scale * rotation

    def _apply(self, geocentric: np.ndarray) -> np.ndarray:
        translation, matrix = self._helmert
        return matrix @ geocentric + translation

    def _apply_reverse(self, geocentric: np.ndarray) -> np.ndarray:
        translation, matrix = self._helmert
        return np.linalg.solve(matrix, geocentric - translation)

    def _compute_forward(self, coordinate: Coordinate) -> Coordinate:
        if not isinstance(coordinate, Coordinate):
            raise TypeError("A geocentric transformation maps geocentric coordinates.")
        return Coordinate.from_array(self._apply(coordinate.to_array()))

    def _compute_reverse(self, coordinate: Coordinate) -> Coordinate:
        if not isinstance(coordinate, Coordinate):
            raise TypeError("A geocentric transformation maps geocentric coordinates.")
        return Coordinate.from_array(self._apply_reverse(coordinate.to_array()))


class GeographicHelmertTransformation(HelmertTransformation):
    """Helmert transformations in the geographic 2D domain (9603, 9606, 9607).

    Source and target must define ellipsoids (geographic reference systems
    or geodetic datums). Ellipsoidal heights are carried through the
    geocentric step.

    Examples
    --------
    >>> from operations.transformation_catalog import HD72_TO_WGS84_2
    >>> from common.types import GeographicCoordinate
    >>> wgs84 = HD72_TO_WGS84_2.forward(GeographicCoordinate.from_degrees(47.5, 19.0))
    """

    SUPPORTED_METHODS = (
        methods.GEOCENTRIC_TRANSLATIONS_GEOG2D,
        methods.COORDINATE_FRAME_ROTATION_GEOG2D,
        methods.POSITION_VECTOR_TRANSFORMATION_GEOG2D,
    )

    def __init__(self, identifier, name, method, parameters, source, target, area_of_use=None, config=None, **kwargs):
        self._source_ellipsoid = _ellipsoid_of(source, "source", name)
        self._target_ellipsoid = _ellipsoid_of(target, "target", name)
        super().__init__(identifier, name, method, parameters, source, target, area_of_use, config, **kwargs)

    @locked_cached_property
    def _geocentric_config(self) -> GeocentricConfig:
        return GeocentricConfig(self._config.max_iterations, self._config.tolerance)

    def _to_geocentric(self, coordinate: GeographicCoordinate, ellipsoid: Ellipsoid) -> np.ndarray:
        geocentric = geographic_to_geocentric(coordinate.latitude, coordinate.longitude, coordinate.height, ellipsoid)
        return np.array(geocentric) * _metres_per_unit(ellipsoid)

    def _to_geographic(self, geocentric: np.ndarray, ellipsoid: Ellipsoid) -> GeographicCoordinate:
        x, y, z = geocentric / _metres_per_unit(ellipsoid)
        return GeographicCoordinate(*geocentric_to_geographic(x, y, z, ellipsoid, self._geocentric_config))

    def _compute_forward(self, coordinate: GeographicCoordinate) -> GeographicCoordinate:
        if not isinstance(coordinate, GeographicCoordinate):
            raise TypeError("A geographic transformation maps geographic coordinates.")
        geocentric = self._apply(self._to_geocentric(coordinate, self._source_ellipsoid))
        return self._to_geographic(geocentric, self._target_ellipsoid)

    def _compute_reverse(self, coordinate: GeographicCoordinate) -> GeographicCoordinate:
        if not isinstance(coordinate, GeographicCoordinate):
            raise TypeError("A geographic transformation maps geographic coordinates.")
        geocentric = self._apply_reverse(self._to_geocentric(coordinate, self._target_ellipsoid))
        return self._to_geographic(geocentric, self._source_ellipsoid)


class MolodenskyTransformation(CoordinateTransformation):
    """Molodensky transformation, EPSG method 9604.

    With ρ and ν of the source ellipsoid at φ, and b the semi-minor axis:

        Δφ = [-tX sin φ cos λ - tY sin φ sin λ + tZ cos φ
              + Δa ν e² sin φ cos φ / a
              + Δf (ρ a/b + ν b/a) sin φ cos φ] / (ρ + h)
        Δλ = (-tX sin λ + tY cos λ) / ((ν + h) cos φ)
        Δh = tX cos φ cos λ + tY cos φ sin λ + tZ sin φ
             - Δa a / ν + Δf (b/a) ν sin² φ

    The reverse finds the source position whose forward image is the given
    coordinate by fixed-point iteration on all three components.
    """

    def __init__(self, identifier, name, parameters, source, target, area_of_use=None, config=None, **kwargs):
        self._source_ellipsoid = _ellipsoid_of(source, "source", name)
        super().__init__(
            identifier, name, methods.MOLODENSKY, parameters, source, target, area_of_use, config, **kwargs
        )

    def _shifts(self, latitude: float, longitude: float, height: float) -> Tuple[float, float, float]:
        ellipsoid = self._source_ellipsoid
        factor = _metres_per_unit(ellipsoid)
        a = ellipsoid.semi_major_axis.base_value
        b = ellipsoid.semi_minor_axis.base_value
        e2 = ellipsoid.eccentricity_squared
        rho = ellipsoid.radius_of_meridian_curvature(latitude) * factor
        nu = ellipsoid.radius_of_prime_vertical_curvature(latitude) * factor
        h = height * factor
        tx = self._length(p.X_AXIS_TRANSLATION)
        ty = self._length(p.Y_AXIS_TRANSLATION)
        tz = self._length(p.Z_AXIS_TRANSLATION)
        da = self._length(p.SEMI_MAJOR_AXIS_LENGTH_DIFFERENCE)
        df = self._scale(p.FLATTENING_DIFFERENCE)

        sin_lat, cos_lat = np.sin(latitude), np.cos(latitude)
        sin_lon, cos_lon = np.sin(longitude), np.cos(longitude)
        dlat = (
            -tx * sin_lat * cos_lon - ty * sin_lat * sin_lon + tz * cos_lat
            + da * nu * e2 * sin_lat * cos_lat / a
            + df * (rho * a / b + nu * b / a) * sin_lat * cos_lat
        ) / (rho + h)
        dlon = (-tx * sin_lon + ty * cos_lon) / ((nu + h) * cos_lat)
        dh = (
            tx * cos_lat * cos_lon + ty * cos_lat * sin_lon + tz * sin_lat
            - da * a / nu + df * (b / a) * nu * sin_lat**2
        )
        return float(dlat), float(dlon), float(dh / factor)

    def _compute_forward(self, coordinate: GeographicCoordinate) -> GeographicCoordinate:
        if not isinstance(coordinate, GeographicCoordinate):
            raise TypeError("A geographic transformation maps geographic coordinates.")
        dlat, dlon, dh = self._shifts(coordinate.latitude, coordinate.longitude, coordinate.height)
        return GeographicCoordinate(
            float(np.clip(coordinate.latitude + dlat, -np.pi / 2, np.pi / 2)),
            coordinate.longitude + dlon,
            coordinate.height + dh,
        )

    def _compute_reverse(self, coordinate: GeographicCoordinate) -> GeographicCoordinate:
        if not isinstance(coordinate, GeographicCoordinate):
            raise TypeError("A geographic transformation maps geographic coordinates.")
        # height is carried in units of the semi-major axis to share the angular tolerance
        a = self._source_ellipsoid.semi_major_axis.value

        def step(state: np.ndarray) -> np.ndarray:
            dlat, dlon, dh = self._shifts(state[0], state[1], state[2] * a)
            return np.array([coordinate.latitude - dlat, coordinate.longitude - dlon, (coordinate.height - dh) / a])

        latitude, longitude, height = self._iterate_array(
            step, np.array([coordinate.latitude, coordinate.longitude, coordinate.height / a]),
            latitude=coordinate.latitude, longitude=coordinate.longitude
        )
        return GeographicCoordinate(float(np.clip(latitude, -np.pi / 2, np.pi / 2)), float(longitude), float(height * a))


class GeographicOffsetTransformation(CoordinateTransformation):
    """Geographic2D offsets, EPSG method 9619.

    φ' = φ + Δφ, λ' = λ + Δλ; the height is unchanged.
    """

    def __init__(self, identifier, name, parameters, source, target, area_of_use=None, config=None, **kwargs):
        super().__init__(
            identifier, name, methods.GEOGRAPHIC2D_OFFSETS, parameters, source, target, area_of_use, config, **kwargs
        )

    def _offset(self, coordinate: GeographicCoordinate, sign: float) -> GeographicCoordinate:
        if not isinstance(coordinate, GeographicCoordinate):
            raise TypeError("A geographic transformation maps geographic coordinates.")
        latitude = coordinate.latitude + sign * self._angle(p.LATITUDE_OFFSET)
        if not -np.pi / 2 <= latitude <= np.pi / 2:
            raise ValueError(f"The offset latitude {latitude} rad is beyond a pole.")
        return GeographicCoordinate(
            latitude, coordinate.longitude + sign * self._angle(p.LONGITUDE_OFFSET), coordinate.height
        )

    def _compute_forward(self, coordinate: GeographicCoordinate) -> GeographicCoordinate:
        return self._offset(coordinate, 1.0)

    def _compute_reverse(self, coordinate: GeographicCoordinate) -> GeographicCoordinate:
        return self._offset(coordinate, -1.0)


class EllipsoidToSphereTransformation(CoordinateTransformation):
    """Ellipsoid to sphere transformation (Gauss conformal mapping).

    Maps geographic coordinates on the source ellipsoid onto the conformal
    sphere of radius R = √(ρ0 ν0) touching it at the natural origin:

        χ = asin((w - 1)/(w + 1)),  w = c (Sa Sb^e)^n
        Λ = n (λ - λ0) + λ0

    The mapping is conformal and scale is true at the natural origin. On a
    sphere n = c = 1 and the mapping is the identity. Heights are carried
    through unchanged.
    """

    def __init__(self, identifier, name, parameters, source, target, area_of_use=None, config=None, **kwargs):
        self._source_ellipsoid = _ellipsoid_of(source, "source", name)
        super().__init__(
            identifier, name, methods.ELLIPSOID_TO_SPHERE, parameters, source, target, area_of_use, config, **kwargs
        )

    @locked_cached_property
    def _sphere(self) -> Tuple[float, float, float, float]:
        return gauss_sphere(self._angle(p.LATITUDE_OF_NATURAL_ORIGIN), self._source_ellipsoid)

    @property
    def radius(self) -> float:
        """Radius of the conformal sphere, in the unit of the source ellipsoid."""
        return self._sphere[0]

    def _compute_forward(self, coordinate: GeographicCoordinate) -> GeographicCoordinate:
        if not isinstance(coordinate, GeographicCoordinate):
            raise TypeError("A geographic transformation maps geographic coordinates.")
        _, n, c, _ = self._sphere
        lambda0 = self._angle(p.LONGITUDE_OF_NATURAL_ORIGIN)
        chi = gauss_conformal(coordinate.latitude, n, c, self._source_ellipsoid)
        longitude = n * normalize_longitude(coordinate.longitude - lambda0) + lambda0
        return GeographicCoordinate(chi, longitude, coordinate.height)

    def _compute_reverse(self, coordinate: GeographicCoordinate) -> GeographicCoordinate:
        if not isinstance(coordinate, GeographicCoordinate):
            raise TypeError("A geographic transformation maps geographic coordinates.")
        _, n, c, _ = self._sphere
        lambda0 = self._angle(p.LONGITUDE_OF_NATURAL_ORIGIN)
        latitude = latitude_from_gauss_conformal(
            coordinate.latitude, n, c, self._source_ellipsoid, self._config.max_iterations, self._config.tolerance,
            {"operation": self.identifier, "latitude": coordinate.latitude}
        )
        longitude = normalize_longitude(coordinate.longitude - lambda0) / n + lambda0
        return GeographicCoordinate(latitude, longitude, coordinate.height)


TRANSFORMATION_CLASSES = {
    methods.GEOCENTRIC_TRANSLATIONS.identifier: HelmertTransformation,
    methods.COORDINATE_FRAME_ROTATION.identifier: HelmertTransformation,
    methods.POSITION_VECTOR_TRANSFORMATION.identifier: HelmertTransformation,
    methods.GEOCENTRIC_TRANSLATIONS_GEOG2D.identifier: GeographicHelmertTransformation,
    methods.COORDINATE_FRAME_ROTATION_GEOG2D.identifier: GeographicHelmertTransformation,
    methods.POSITION_VECTOR_TRANSFORMATION_GEOG2D.identifier: GeographicHelmertTransformation,
    methods.MOLODENSKY.identifier: MolodenskyTransformation,
    methods.GEOGRAPHIC2D_OFFSETS.identifier: GeographicOffsetTransformation,
    methods.ELLIPSOID_TO_SPHERE.identifier: EllipsoidToSphereTransformation,
}
