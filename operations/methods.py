"""
Coordinate Operation Methods.

A method names an algorithm and declares the parameters an operation using it
must be given. Methods are shared, immutable descriptors; operation classes
are bound to exactly one of them.
"""

from typing import Optional, Sequence, Tuple

from operations import parameters as p
from operations.parameters import OperationParameter
from reference.base import IdentifiedObject
from reference.catalog import Catalog


class OperationMethod(IdentifiedObject):
    """Descriptor of a coordinate operation algorithm.

    Parameters
    ----------
    parameters : sequence of OperationParameter
        Parameters every operation using the method must supply.
    is_reversible : bool
        Whether the method defines a reverse computation.
    """

    def __init__(
        self,
        identifier: str,
        name: str,
        parameters: Sequence[OperationParameter] = (),
        is_reversible: bool = True,
        remarks: Optional[str] = None,
        aliases: Sequence[str] = ()
    ):
        super().__init__(identifier, name, remarks, aliases)
        self._parameters = tuple(parameters)
        self._is_reversible = is_reversible

    @property
    def parameters(self) -> Tuple[OperationParameter, ...]:
        return self._parameters

    @property
    def is_reversible(self) -> bool:
        return self._is_reversible


def _method(code: str, name: str, *parameters: OperationParameter, **kwargs) -> OperationMethod:
    identifier = code if "::" in code else f"EPSG::{code}"
    return OperationMethod(identifier, name, parameters, **kwargs)


_NATURAL_ORIGIN = (
    p.LATITUDE_OF_NATURAL_ORIGIN, p.LONGITUDE_OF_NATURAL_ORIGIN,
    p.FALSE_EASTING, p.FALSE_NORTHING,
)
_NATURAL_ORIGIN_WITH_SCALE = (
    p.LATITUDE_OF_NATURAL_ORIGIN, p.LONGITUDE_OF_NATURAL_ORIGIN,
    p.SCALE_FACTOR_AT_NATURAL_ORIGIN, p.FALSE_EASTING, p.FALSE_NORTHING,
)
_FALSE_ORIGIN_TWO_PARALLELS = (
    p.LATITUDE_OF_FALSE_ORIGIN, p.LONGITUDE_OF_FALSE_ORIGIN,
    p.LATITUDE_OF_1ST_STANDARD_PARALLEL, p.LATITUDE_OF_2ND_STANDARD_PARALLEL,
    p.EASTING_AT_FALSE_ORIGIN, p.NORTHING_AT_FALSE_ORIGIN,
)
_STANDARD_PARALLEL = (
    p.LATITUDE_OF_1ST_STANDARD_PARALLEL, p.LONGITUDE_OF_NATURAL_ORIGIN,
    p.FALSE_EASTING, p.FALSE_NORTHING,
)
_TRANSLATIONS = (p.X_AXIS_TRANSLATION, p.Y_AXIS_TRANSLATION, p.Z_AXIS_TRANSLATION)
_HELMERT = _TRANSLATIONS + (
    p.X_AXIS_ROTATION, p.Y_AXIS_ROTATION, p.Z_AXIS_ROTATION, p.SCALE_DIFFERENCE,
)
_HOTINE = (
    p.LATITUDE_OF_PROJECTION_CENTRE, p.LONGITUDE_OF_PROJECTION_CENTRE,
    p.AZIMUTH_OF_INITIAL_LINE, p.ANGLE_FROM_RECTIFIED_TO_SKEW_GRID,
    p.SCALE_FACTOR_ON_INITIAL_LINE,
)
_KROVAK = (
    p.LATITUDE_OF_PROJECTION_CENTRE, p.LONGITUDE_OF_ORIGIN, p.COLATITUDE_OF_CONE_AXIS,
    p.LATITUDE_OF_PSEUDO_STANDARD_PARALLEL, p.SCALE_FACTOR_ON_PSEUDO_STANDARD_PARALLEL,
    p.FALSE_EASTING, p.FALSE_NORTHING,
)
_KROVAK_MODIFIED = _KROVAK + (
    p.ORDINATE_1_OF_EVALUATION_POINT, p.ORDINATE_2_OF_EVALUATION_POINT,
    p.C1, p.C2, p.C3, p.C4, p.C5, p.C6, p.C7, p.C8, p.C9, p.C10,
)
_TOPOCENTRIC_ORIGIN = (
    p.LATITUDE_OF_TOPOCENTRIC_ORIGIN, p.LONGITUDE_OF_TOPOCENTRIC_ORIGIN,
    p.ELLIPSOIDAL_HEIGHT_OF_TOPOCENTRIC_ORIGIN,
)

# Conversions
AFFINE_PARAMETRIC_TRANSFORMATION = _method(
    "9624", "Affine parametric transformation", p.A0, p.A1, p.A2, p.B0, p.B1, p.B2
)
GEOGRAPHIC_GEOCENTRIC_CONVERSION = _method("9602", "Geographic/geocentric conversions")
GEOCENTRIC_TOPOCENTRIC_CONVERSION = _method(
    "9836", "Geocentric/topocentric conversions",
    p.GEOCENTRIC_X_OF_TOPOCENTRIC_ORIGIN, p.GEOCENTRIC_Y_OF_TOPOCENTRIC_ORIGIN,
    p.GEOCENTRIC_Z_OF_TOPOCENTRIC_ORIGIN,
)
GEOGRAPHIC_TOPOCENTRIC_CONVERSION = _method(
    "9837", "Geographic/topocentric conversions", *_TOPOCENTRIC_ORIGIN
)

# Transformations
GEOCENTRIC_TRANSLATIONS = _method("1031", "Geocentric translations (geocentric domain)", *_TRANSLATIONS)
COORDINATE_FRAME_ROTATION = _method("1032", "Coordinate Frame rotation (geocentric domain)", *_HELMERT)
POSITION_VECTOR_TRANSFORMATION = _method("1033", "Position Vector transformation (geocentric domain)", *_HELMERT)
GEOCENTRIC_TRANSLATIONS_GEOG2D = _method("9603", "Geocentric translations (geog2D domain)", *_TRANSLATIONS)
POSITION_VECTOR_TRANSFORMATION_GEOG2D = _method("9606", "Position Vector transformation (geog2D domain)", *_HELMERT)
COORDINATE_FRAME_ROTATION_GEOG2D = _method("9607", "Coordinate Frame rotation (geog2D domain)", *_HELMERT)
MOLODENSKY = _method(
    "9604", "Molodensky", *_TRANSLATIONS,
    p.SEMI_MAJOR_AXIS_LENGTH_DIFFERENCE, p.FLATTENING_DIFFERENCE
)
GEOGRAPHIC2D_OFFSETS = _method("9619", "Geographic2D offsets", p.LATITUDE_OFFSET, p.LONGITUDE_OFFSET)
ELLIPSOID_TO_SPHERE = _method(
    "GEODESY::1002", "Ellipsoid to sphere transformation",
    p.LATITUDE_OF_NATURAL_ORIGIN, p.LONGITUDE_OF_NATURAL_ORIGIN,
    remarks="Gauss conformal mapping onto the sphere of radius √(ρ0 ν0) at the natural origin."
)

# Projections
ALBERS_EQUAL_AREA = _method("9822", "Albers Equal Area", *_FALSE_ORIGIN_TWO_PARALLELS)
AMERICAN_POLYCONIC = _method("9818", "American Polyconic", *_NATURAL_ORIGIN)
BONNE = _method("9827", "Bonne", *_NATURAL_ORIGIN)
BONNE_SOUTH_ORIENTATED = _method("9828", "Bonne (South Orientated)", *_NATURAL_ORIGIN)
CASSINI_SOLDNER = _method("9806", "Cassini-Soldner", *_NATURAL_ORIGIN)
HYPERBOLIC_CASSINI_SOLDNER = _method("9833", "Hyperbolic Cassini-Soldner", *_NATURAL_ORIGIN)
EQUIDISTANT_CYLINDRICAL = _method("1028", "Equidistant Cylindrical", *_STANDARD_PARALLEL)
EQUIDISTANT_CYLINDRICAL_SPHERICAL = _method("1029", "Equidistant Cylindrical (Spherical)", *_STANDARD_PARALLEL)
GNOMONIC = _method(
    "GEODESY::1001", "Gnomonic", *_NATURAL_ORIGIN,
    remarks="Spherical form; Snyder (1987) equations 22-4 and 22-5."
)
GUAM_PROJECTION = _method("9831", "Guam Projection", *_NATURAL_ORIGIN)
HOTINE_OBLIQUE_MERCATOR_A = _method(
    "9812", "Hotine Oblique Mercator (variant A)", *_HOTINE, p.FALSE_EASTING, p.FALSE_NORTHING
)
HOTINE_OBLIQUE_MERCATOR_B = _method(
    "9815", "Hotine Oblique Mercator (variant B)", *_HOTINE,
    p.EASTING_AT_PROJECTION_CENTRE, p.NORTHING_AT_PROJECTION_CENTRE
)
KROVAK = _method("9819", "Krovak", *_KROVAK)
KROVAK_NORTH_ORIENTATED = _method("1041", "Krovak (North Orientated)", *_KROVAK)
KROVAK_MODIFIED = _method("1042", "Krovak Modified", *_KROVAK_MODIFIED)
KROVAK_MODIFIED_NORTH_ORIENTATED = _method(
    "1043", "Krovak Modified (North Orientated)", *_KROVAK_MODIFIED
)
LABORDE_OBLIQUE_MERCATOR = _method(
    "9813", "Laborde Oblique Mercator",
    p.LATITUDE_OF_PROJECTION_CENTRE, p.LONGITUDE_OF_PROJECTION_CENTRE, p.AZIMUTH_OF_INITIAL_LINE,
    p.SCALE_FACTOR_ON_INITIAL_LINE, p.FALSE_EASTING, p.FALSE_NORTHING
)
LAMBERT_AZIMUTHAL_EQUAL_AREA = _method("9820", "Lambert Azimuthal Equal Area", *_NATURAL_ORIGIN)
LAMBERT_AZIMUTHAL_EQUAL_AREA_SPHERICAL = _method(
    "1027", "Lambert Azimuthal Equal Area (Spherical)", *_NATURAL_ORIGIN
)
LAMBERT_CONIC_CONFORMAL_1SP = _method("9801", "Lambert Conic Conformal (1SP)", *_NATURAL_ORIGIN_WITH_SCALE)
LAMBERT_CONIC_CONFORMAL_WEST_ORIENTATED = _method(
    "9826", "Lambert Conic Conformal (West Orientated)", *_NATURAL_ORIGIN_WITH_SCALE
)
LAMBERT_CONIC_CONFORMAL_2SP = _method("9802", "Lambert Conic Conformal (2SP)", *_FALSE_ORIGIN_TWO_PARALLELS)
LAMBERT_CONIC_CONFORMAL_2SP_BELGIUM = _method(
    "9803", "Lambert Conic Conformal (2SP Belgium)", *_FALSE_ORIGIN_TWO_PARALLELS
)
LAMBERT_CONIC_NEAR_CONFORMAL = _method("9817", "Lambert Conic Near-Conformal", *_NATURAL_ORIGIN_WITH_SCALE)
LAMBERT_CYLINDRICAL_EQUAL_AREA = _method(
    "9835", "Lambert Cylindrical Equal Area", *_STANDARD_PARALLEL
)
LAMBERT_CYLINDRICAL_EQUAL_AREA_SPHERICAL = _method(
    "9834", "Lambert Cylindrical Equal Area (Spherical)", *_STANDARD_PARALLEL
)
MERCATOR_A = _method("9804", "Mercator (variant A)", *_NATURAL_ORIGIN_WITH_SCALE, aliases=("Mercator (1SP)",))
MERCATOR_B = _method("9805", "Mercator (variant B)", *_STANDARD_PARALLEL, aliases=("Mercator (2SP)",))
MERCATOR_SPHERICAL = _method("1026", "Mercator (Spherical)", *_NATURAL_ORIGIN)
MODIFIED_AZIMUTHAL_EQUIDISTANT = _method("9832", "Modified Azimuthal Equidistant", *_NATURAL_ORIGIN)
POPULAR_VISUALISATION_PSEUDO_MERCATOR = _method(
    "1024", "Popular Visualisation Pseudo Mercator", *_NATURAL_ORIGIN
)
OBLIQUE_STEREOGRAPHIC = _method("9809", "Oblique Stereographic", *_NATURAL_ORIGIN_WITH_SCALE)
POLAR_STEREOGRAPHIC_A = _method("9810", "Polar Stereographic (variant A)", *_NATURAL_ORIGIN_WITH_SCALE)
POLAR_STEREOGRAPHIC_B = _method(
    "9829", "Polar Stereographic (variant B)",
    p.LATITUDE_OF_STANDARD_PARALLEL, p.LONGITUDE_OF_ORIGIN, p.FALSE_EASTING, p.FALSE_NORTHING
)
POLAR_STEREOGRAPHIC_C = _method(
    "9830", "Polar Stereographic (variant C)",
    p.LATITUDE_OF_STANDARD_PARALLEL, p.LONGITUDE_OF_ORIGIN,
    p.EASTING_AT_FALSE_ORIGIN, p.NORTHING_AT_FALSE_ORIGIN
)
SINUSOIDAL = _method(
    "ESRI::53008", "Sinusoidal", p.LONGITUDE_OF_NATURAL_ORIGIN, p.FALSE_EASTING, p.FALSE_NORTHING
)
TRANSVERSE_MERCATOR = _method("9807", "Transverse Mercator", *_NATURAL_ORIGIN_WITH_SCALE)
TRANSVERSE_MERCATOR_SOUTH_ORIENTATED = _method(
    "9808", "Transverse Mercator (South Orientated)", *_NATURAL_ORIGIN_WITH_SCALE
)
TRANSVERSE_MERCATOR_ZONED_GRID_SYSTEM = _method(
    "9824", "Transverse Mercator Zoned Grid System",
    p.LATITUDE_OF_NATURAL_ORIGIN, p.INITIAL_LONGITUDE, p.ZONE_WIDTH,
    p.SCALE_FACTOR_AT_NATURAL_ORIGIN, p.FALSE_EASTING, p.FALSE_NORTHING
)
VERTICAL_PERSPECTIVE = _method(
    "9838", "Vertical Perspective", *_TOPOCENTRIC_ORIGIN, p.VIEWPOINT_HEIGHT,
    is_reversible=False
)
VERTICAL_PERSPECTIVE_ORTHOGRAPHIC = _method(
    "9839", "Vertical Perspective (orthographic case)", *_TOPOCENTRIC_ORIGIN,
    is_reversible=False
)

METHODS = Catalog("operation methods", lambda: [
    AFFINE_PARAMETRIC_TRANSFORMATION, GEOGRAPHIC_GEOCENTRIC_CONVERSION,
    GEOCENTRIC_TOPOCENTRIC_CONVERSION, GEOGRAPHIC_TOPOCENTRIC_CONVERSION,
    GEOCENTRIC_TRANSLATIONS, COORDINATE_FRAME_ROTATION, POSITION_VECTOR_TRANSFORMATION,
    GEOCENTRIC_TRANSLATIONS_GEOG2D, POSITION_VECTOR_TRANSFORMATION_GEOG2D,
    COORDINATE_FRAME_ROTATION_GEOG2D, MOLODENSKY, GEOGRAPHIC2D_OFFSETS, ELLIPSOID_TO_SPHERE,
    ALBERS_EQUAL_AREA, AMERICAN_POLYCONIC, BONNE, BONNE_SOUTH_ORIENTATED,
    CASSINI_SOLDNER, HYPERBOLIC_CASSINI_SOLDNER,
    EQUIDISTANT_CYLINDRICAL, EQUIDISTANT_CYLINDRICAL_SPHERICAL, GNOMONIC, GUAM_PROJECTION,
    HOTINE_OBLIQUE_MERCATOR_A, HOTINE_OBLIQUE_MERCATOR_B, KROVAK, KROVAK_NORTH_ORIENTATED,
    KROVAK_MODIFIED, KROVAK_MODIFIED_NORTH_ORIENTATED, LABORDE_OBLIQUE_MERCATOR,
    LAMBERT_AZIMUTHAL_EQUAL_AREA, LAMBERT_AZIMUTHAL_EQUAL_AREA_SPHERICAL,
    LAMBERT_CONIC_CONFORMAL_1SP, LAMBERT_CONIC_CONFORMAL_WEST_ORIENTATED,
    LAMBERT_CONIC_CONFORMAL_2SP, LAMBERT_CONIC_CONFORMAL_2SP_BELGIUM, LAMBERT_CONIC_NEAR_CONFORMAL,
    LAMBERT_CYLINDRICAL_EQUAL_AREA, LAMBERT_CYLINDRICAL_EQUAL_AREA_SPHERICAL,
    MERCATOR_A, MERCATOR_B, MERCATOR_SPHERICAL, MODIFIED_AZIMUTHAL_EQUIDISTANT,
    POPULAR_VISUALISATION_PSEUDO_MERCATOR,
    OBLIQUE_STEREOGRAPHIC, POLAR_STEREOGRAPHIC_A, POLAR_STEREOGRAPHIC_B, POLAR_STEREOGRAPHIC_C,
    SINUSOIDAL, TRANSVERSE_MERCATOR, TRANSVERSE_MERCATOR_SOUTH_ORIENTATED,
    TRANSVERSE_MERCATOR_ZONED_GRID_SYSTEM, VERTICAL_PERSPECTIVE,
    VERTICAL_PERSPECTIVE_ORTHOGRAPHIC,
])
