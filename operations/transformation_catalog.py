"""
Catalog of datum transformations.

Several transformations may link the same pair of reference systems, for
different realizations or accuracies; `between` returns all of them and the
caller chooses by area of use or accuracy.
"""

from typing import List

from common.logging_config import get_logger
from common.units import Angle, Length
from operations import methods
from operations import parameters as p
from operations.methods import OperationMethod
from operations.transformations import GeographicHelmertTransformation
from reference import catalogs
from reference.base import IdentifiedObject
from reference.catalog import Catalog

logger = get_logger(__name__)


def _translations(tx: float, ty: float, tz: float) -> dict:
    return {
        p.X_AXIS_TRANSLATION: Length.from_metre(tx),
        p.Y_AXIS_TRANSLATION: Length.from_metre(ty),
        p.Z_AXIS_TRANSLATION: Length.from_metre(tz),
    }


def _helmert(tx, ty, tz, rx, ry, rz, ds) -> dict:
    """Seven parameters; rotations in arc-seconds, scale difference in ppm."""
    parameters = _translations(tx, ty, tz)
    parameters.update({
        p.X_AXIS_ROTATION: Angle.from_arc_second(rx),
        p.Y_AXIS_ROTATION: Angle.from_arc_second(ry),
        p.Z_AXIS_ROTATION: Angle.from_arc_second(rz),
        p.SCALE_DIFFERENCE: ds,
    })
    return parameters


HD72_TO_WGS84_1 = GeographicHelmertTransformation(
    "EPSG::1242", "HD72 to WGS 84 (1)", methods.GEOCENTRIC_TRANSLATIONS_GEOG2D,
    _translations(52.17, -71.82, -14.9),
    catalogs.HD72_GEOGRAPHIC, catalogs.WGS84_GEOGRAPHIC, catalogs.HUNGARY,
    remarks="Parameter values from HD72 to ETRS89 (1). Accuracy 1 m."
)
HD72_TO_WGS84_2 = GeographicHelmertTransformation(
    "EPSG::1448", "HD72 to WGS 84 (2)", methods.COORDINATE_FRAME_ROTATION_GEOG2D,
    _helmert(52.684, -71.194, -13.975, 0.312, 0.1063, 0.3729, 1.0191),
    catalogs.HD72_GEOGRAPHIC, catalogs.WGS84_GEOGRAPHIC, catalogs.HUNGARY,
    remarks="Parameter values from HD72 to ETRS89 (2). Accuracy 0.5 m."
)
HD72_TO_WGS84_3 = GeographicHelmertTransformation(
    "EPSG::1830", "HD72 to WGS 84 (3)", methods.COORDINATE_FRAME_ROTATION_GEOG2D,
    _helmert(56.0, -75.77, -15.31, 0.37, 0.2, 0.21, 1.01),
    catalogs.HD72_GEOGRAPHIC, catalogs.WGS84_GEOGRAPHIC, catalogs.HUNGARY,
    remarks="Parameter values from HD72 to ETRS89 (3). Accuracy 1 m."
)
HD72_TO_WGS84_4 = GeographicHelmertTransformation(
    "EPSG::1831", "HD72 to WGS 84 (4)", methods.GEOCENTRIC_TRANSLATIONS_GEOG2D,
    _translations(57.01, -69.97, -9.29),
    catalogs.HD72_GEOGRAPHIC, catalogs.WGS84_GEOGRAPHIC, catalogs.HUNGARY,
    remarks="Parameter values from HD72 to ETRS89 (4). Accuracy 1.5 m."
)
ETRS89_TO_WGS84_1 = GeographicHelmertTransformation(
    "EPSG::1149", "ETRS89 to WGS 84 (1)", methods.GEOCENTRIC_TRANSLATIONS_GEOG2D,
    _translations(0.0, 0.0, 0.0),
    catalogs.ETRS89_GEOGRAPHIC, catalogs.WGS84_GEOGRAPHIC, catalogs.EUROPE_ETRS89,
    remarks="ETRS89 and WGS 84 are realizations of ITRS coincident to within 1 metre."
)
OSGB36_TO_WGS84_6 = GeographicHelmertTransformation(
    "EPSG::1314", "OSGB36 to WGS 84 (6)", methods.POSITION_VECTOR_TRANSFORMATION_GEOG2D,
    _helmert(446.448, -125.157, 542.06, 0.15, 0.247, 0.842, -20.489),
    catalogs.OSGB36_GEOGRAPHIC, catalogs.WGS84_GEOGRAPHIC, catalogs.GREAT_BRITAIN,
    remarks="Parameter values taken from OSGB36 to ETRS89 (1). Accuracy 2 m."
)
NAD27_TO_WGS84_4 = GeographicHelmertTransformation(
    "EPSG::1173", "NAD27 to WGS 84 (4)", methods.GEOCENTRIC_TRANSLATIONS_GEOG2D,
    _translations(-8.0, 160.0, 176.0),
    catalogs.NAD27_GEOGRAPHIC, catalogs.WGS84_GEOGRAPHIC, catalogs.USA_CONUS_ONSHORE,
    remarks="Derived at 405 stations. Accuracy 10 m."
)
GGRS87_TO_WGS84_1 = GeographicHelmertTransformation(
    "EPSG::1272", "GGRS87 to WGS 84 (1)", methods.GEOCENTRIC_TRANSLATIONS_GEOG2D,
    _translations(-199.87, 74.79, 246.62),
    catalogs.GGRS87_GEOGRAPHIC, catalogs.WGS84_GEOGRAPHIC, catalogs.GREECE_ONSHORE,
    remarks="Accuracy 1 m."
)

TRANSFORMATIONS = Catalog("transformations", lambda: [
    HD72_TO_WGS84_1, HD72_TO_WGS84_2, HD72_TO_WGS84_3, HD72_TO_WGS84_4,
    ETRS89_TO_WGS84_1, OSGB36_TO_WGS84_6, NAD27_TO_WGS84_4, GGRS87_TO_WGS84_1,
])


def from_method(method: OperationMethod) -> List[GeographicHelmertTransformation]:
    """Return the cataloged transformations applying a method."""
    return [transformation for transformation in TRANSFORMATIONS if transformation.method == method]


def between(source: IdentifiedObject, target: IdentifiedObject) -> List[GeographicHelmertTransformation]:
    """Return every cataloged transformation from `source` to `target`.

    Examples
    --------
    >>> from reference.catalogs import HD72_GEOGRAPHIC, WGS84_GEOGRAPHIC
    >>> [t.name for t in between(HD72_GEOGRAPHIC, WGS84_GEOGRAPHIC)]
    ['HD72 to WGS 84 (1)', 'HD72 to WGS 84 (2)', 'HD72 to WGS 84 (3)', 'HD72 to WGS 84 (4)']
    """
    matches = [
        transformation for transformation in TRANSFORMATIONS
        if transformation.source == source and transformation.target == target
    ]
    logger.debug(f"Found {len(matches)} transformations from '{source.name}' to '{target.name}'")
    return matches
