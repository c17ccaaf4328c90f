"""
Coordinate Operation Parameters.

Named, typed parameter descriptors from the EPSG dataset. Each coordinate
operation method declares the parameters it needs; operation instances bind a
value to each of them and are validated against the declared kind.
"""

from enum import Enum
from typing import Optional, Sequence

from reference.base import IdentifiedObject
from reference.catalog import Catalog


class ParameterKind(Enum):
    """Quantity kind of a parameter value."""
    ANGLE = "angle"
    LENGTH = "length"
    SCALE = "scale"
    OTHER = "other"


class OperationParameter(IdentifiedObject):
    """Descriptor of a coordinate operation parameter.

    Parameters
    ----------
    kind : ParameterKind
        Quantity kind the bound value must have: an `Angle`, a `Length` or a
        plain number.
    """

    def __init__(
        self,
        identifier: str,
        name: str,
        kind: ParameterKind,
        remarks: Optional[str] = None,
        aliases: Sequence[str] = ()
    ):
        super().__init__(identifier, name, remarks, aliases)
        self._kind = kind

    @property
    def kind(self) -> ParameterKind:
        return self._kind


def _angle(code: int, name: str, **kwargs) -> OperationParameter:
    return OperationParameter(f"EPSG::{code}", name, ParameterKind.ANGLE, **kwargs)


def _length(code: int, name: str, **kwargs) -> OperationParameter:
    return OperationParameter(f"EPSG::{code}", name, ParameterKind.LENGTH, **kwargs)


def _scale(code: int, name: str, **kwargs) -> OperationParameter:
    return OperationParameter(f"EPSG::{code}", name, ParameterKind.SCALE, **kwargs)


C1 = _scale(1026, "C1")
C2 = _scale(1027, "C2")
C3 = _scale(1028, "C3")
C4 = _scale(1029, "C4")
C5 = _scale(1030, "C5")
C6 = _scale(1031, "C6")
C7 = _scale(1032, "C7")
C8 = _scale(1033, "C8")
C9 = _scale(1034, "C9")
C10 = _scale(1035, "C10")
COLATITUDE_OF_CONE_AXIS = _angle(1036, "Co-latitude of cone axis")
LATITUDE_OFFSET = _angle(8601, "Latitude offset")
LONGITUDE_OFFSET = _angle(8602, "Longitude offset")
VERTICAL_OFFSET = _length(8603, "Vertical offset")
X_AXIS_TRANSLATION = _length(8605, "X-axis translation")
Y_AXIS_TRANSLATION = _length(8606, "Y-axis translation")
Z_AXIS_TRANSLATION = _length(8607, "Z-axis translation")
X_AXIS_ROTATION = _angle(8608, "X-axis rotation")
Y_AXIS_ROTATION = _angle(8609, "Y-axis rotation")
Z_AXIS_ROTATION = _angle(8610, "Z-axis rotation")
SCALE_DIFFERENCE = _scale(8611, "Scale difference", remarks="Expressed in parts per million.")
ORDINATE_1_OF_EVALUATION_POINT = _length(8617, "Ordinate 1 of evaluation point")
ORDINATE_2_OF_EVALUATION_POINT = _length(8618, "Ordinate 2 of evaluation point")
A0 = _scale(8623, "A0")
A1 = _scale(8624, "A1")
A2 = _scale(8625, "A2")
B0 = _scale(8639, "B0")
B1 = _scale(8640, "B1")
B2 = _scale(8641, "B2")
SEMI_MAJOR_AXIS_LENGTH_DIFFERENCE = _length(8654, "Semi-major axis length difference")
FLATTENING_DIFFERENCE = _scale(8655, "Flattening difference")
LATITUDE_OF_NATURAL_ORIGIN = _angle(8801, "Latitude of natural origin")
LONGITUDE_OF_NATURAL_ORIGIN = _angle(8802, "Longitude of natural origin")
SCALE_FACTOR_AT_NATURAL_ORIGIN = _scale(8805, "Scale factor at natural origin")
FALSE_EASTING = _length(8806, "False easting")
FALSE_NORTHING = _length(8807, "False northing")
LATITUDE_OF_PROJECTION_CENTRE = _angle(8811, "Latitude of projection centre")
LONGITUDE_OF_PROJECTION_CENTRE = _angle(8812, "Longitude of projection centre")
AZIMUTH_OF_INITIAL_LINE = _angle(8813, "Azimuth of initial line")
ANGLE_FROM_RECTIFIED_TO_SKEW_GRID = _angle(8814, "Angle from Rectified to Skew Grid")
SCALE_FACTOR_ON_INITIAL_LINE = _scale(8815, "Scale factor on initial line")
EASTING_AT_PROJECTION_CENTRE = _length(8816, "Easting at projection centre")
NORTHING_AT_PROJECTION_CENTRE = _length(8817, "Northing at projection centre")
LATITUDE_OF_PSEUDO_STANDARD_PARALLEL = _angle(8818, "Latitude of pseudo standard parallel")
SCALE_FACTOR_ON_PSEUDO_STANDARD_PARALLEL = _scale(8819, "Scale factor on pseudo standard parallel")
LATITUDE_OF_FALSE_ORIGIN = _angle(8821, "Latitude of false origin")
LONGITUDE_OF_FALSE_ORIGIN = _angle(8822, "Longitude of false origin")
LATITUDE_OF_1ST_STANDARD_PARALLEL = _angle(8823, "Latitude of 1st standard parallel")
LATITUDE_OF_2ND_STANDARD_PARALLEL = _angle(8824, "Latitude of 2nd standard parallel")
EASTING_AT_FALSE_ORIGIN = _length(8826, "Easting at false origin")
NORTHING_AT_FALSE_ORIGIN = _length(8827, "Northing at false origin")
ZONE_WIDTH = _angle(8830, "Zone width")
INITIAL_LONGITUDE = _angle(8831, "Initial longitude")
LATITUDE_OF_STANDARD_PARALLEL = _angle(8832, "Latitude of standard parallel")
LONGITUDE_OF_ORIGIN = _angle(8833, "Longitude of origin")
LATITUDE_OF_TOPOCENTRIC_ORIGIN = _angle(8834, "Latitude of topocentric origin")
LONGITUDE_OF_TOPOCENTRIC_ORIGIN = _angle(8835, "Longitude of topocentric origin")
ELLIPSOIDAL_HEIGHT_OF_TOPOCENTRIC_ORIGIN = _length(8836, "Ellipsoidal height of topocentric origin")
GEOCENTRIC_X_OF_TOPOCENTRIC_ORIGIN = _length(8837, "Geocentric X of topocentric origin")
GEOCENTRIC_Y_OF_TOPOCENTRIC_ORIGIN = _length(8838, "Geocentric Y of topocentric origin")
GEOCENTRIC_Z_OF_TOPOCENTRIC_ORIGIN = _length(8839, "Geocentric Z of topocentric origin")
VIEWPOINT_HEIGHT = _length(8840, "Viewpoint height")

PARAMETERS = Catalog("operation parameters", lambda: [
    C1, C2, C3, C4, C5, C6, C7, C8, C9, C10,
    COLATITUDE_OF_CONE_AXIS, LATITUDE_OFFSET, LONGITUDE_OFFSET, VERTICAL_OFFSET,
    X_AXIS_TRANSLATION, Y_AXIS_TRANSLATION, Z_AXIS_TRANSLATION,
    X_AXIS_ROTATION, Y_AXIS_ROTATION, Z_AXIS_ROTATION, SCALE_DIFFERENCE,
    ORDINATE_1_OF_EVALUATION_POINT, ORDINATE_2_OF_EVALUATION_POINT,
    A0, A1, A2, B0, B1, B2,
    SEMI_MAJOR_AXIS_LENGTH_DIFFERENCE, FLATTENING_DIFFERENCE,
    LATITUDE_OF_NATURAL_ORIGIN, LONGITUDE_OF_NATURAL_ORIGIN, SCALE_FACTOR_AT_NATURAL_ORIGIN,
    FALSE_EASTING, FALSE_NORTHING,
    LATITUDE_OF_PROJECTION_CENTRE, LONGITUDE_OF_PROJECTION_CENTRE, AZIMUTH_OF_INITIAL_LINE,
    ANGLE_FROM_RECTIFIED_TO_SKEW_GRID, SCALE_FACTOR_ON_INITIAL_LINE,
    EASTING_AT_PROJECTION_CENTRE, NORTHING_AT_PROJECTION_CENTRE,
    LATITUDE_OF_PSEUDO_STANDARD_PARALLEL, SCALE_FACTOR_ON_PSEUDO_STANDARD_PARALLEL,
    LATITUDE_OF_FALSE_ORIGIN, LONGITUDE_OF_FALSE_ORIGIN,
    LATITUDE_OF_1ST_STANDARD_PARALLEL, LATITUDE_OF_2ND_STANDARD_PARALLEL,
    EASTING_AT_FALSE_ORIGIN, NORTHING_AT_FALSE_ORIGIN,
    ZONE_WIDTH, INITIAL_LONGITUDE, LATITUDE_OF_STANDARD_PARALLEL, LONGITUDE_OF_ORIGIN,
    LATITUDE_OF_TOPOCENTRIC_ORIGIN, LONGITUDE_OF_TOPOCENTRIC_ORIGIN,
    ELLIPSOIDAL_HEIGHT_OF_TOPOCENTRIC_ORIGIN,
    GEOCENTRIC_X_OF_TOPOCENTRIC_ORIGIN, GEOCENTRIC_Y_OF_TOPOCENTRIC_ORIGIN,
    GEOCENTRIC_Z_OF_TOPOCENTRIC_ORIGIN, VIEWPOINT_HEIGHT,
])
