"""
Coordinate operations.

This package provides the coordinate projection and transformation engine:
- Operation parameters and method descriptors
- Validated operation base types with forward/reverse mapping
- Map projections, conversions and datum transformations
- Named projections and transformation catalogs
"""

from operations.parameters import PARAMETERS, OperationParameter, ParameterKind
from operations.methods import METHODS, OperationMethod
from operations.base import (
    CoordinateConversion,
    CoordinateOperation,
    CoordinateProjection,
    CoordinateTransformation,
    OperationConfig,
    ReverseCoordinateOperation,
)
from operations.projections import PROJECTION_CLASSES
from operations.conversions import (
    AffineParametricTransformation,
    GeocentricTopocentricConversion,
    GeographicGeocentricConversion,
    GeographicTopocentricConversion,
)
from operations.transformations import (
    TRANSFORMATION_CLASSES,
    GeographicHelmertTransformation,
    GeographicOffsetTransformation,
    HelmertTransformation,
    MolodenskyTransformation,
)
from operations.transformation_catalog import TRANSFORMATIONS, between
from operations.factory import (
    PROJECTED_CRS,
    PROJECTIONS,
    from_method,
    from_method_identifier,
    from_method_name,
    utm_zone,
)

__all__ = [
    "PARAMETERS",
    "OperationParameter",
    "ParameterKind",
    "METHODS",
    "OperationMethod",
    "CoordinateOperation",
    "CoordinateConversion",
    "CoordinateProjection",
    "CoordinateTransformation",
    "OperationConfig",
    "ReverseCoordinateOperation",
    "PROJECTION_CLASSES",
    "AffineParametricTransformation",
    "GeocentricTopocentricConversion",
    "GeographicGeocentricConversion",
    "GeographicTopocentricConversion",
    "TRANSFORMATION_CLASSES",
    "GeographicHelmertTransformation",
    "GeographicOffsetTransformation",
    "HelmertTransformation",
    "MolodenskyTransformation",
    "TRANSFORMATIONS",
    "between",
    "PROJECTED_CRS",
    "PROJECTIONS",
    "from_method",
    "from_method_identifier",
    "from_method_name",
    "utm_zone",
]
