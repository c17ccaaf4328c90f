"""
Geodetic reference model.

This package defines the identified objects a coordinate is referenced to:
ellipsoids, prime meridians, areas of use, datums, coordinate systems and
coordinate reference systems, plus read-only catalogs of EPSG entries.
"""

from reference.base import IdentifiedObject
from reference.catalog import Catalog
from reference.ellipsoid import Ellipsoid
from reference.meridian import PrimeMeridian
from reference.area_of_use import AreaOfUse
from reference.datum import Datum, GeodeticDatum, VerticalDatum, VerticalDatumType
from reference.coordinate_system import (
    AxisDirection,
    CoordinateSystem,
    CoordinateSystemAxis,
    CoordinateSystemType,
)
from reference.crs import (
    CompoundCRS,
    CoordinateReferenceSystem,
    GeocentricCRS,
    GeographicCRS,
    Geographic2DCRS,
    Geographic3DCRS,
    GridCRS,
    ProjectedCRS,
    SingleCRS,
    VerticalCRS,
)
from reference.ellipsoids import ELLIPSOIDS
from reference.catalogs import (
    AREAS_OF_USE,
    COMPOUND_CRS,
    COORDINATE_SYSTEMS,
    GEOCENTRIC_CRS,
    GEODETIC_DATUMS,
    GEOGRAPHIC_CRS,
    MERIDIANS,
    VERTICAL_CRS,
    VERTICAL_DATUMS,
)

__all__ = [
    "IdentifiedObject",
    "Catalog",
    "Ellipsoid",
    "PrimeMeridian",
    "AreaOfUse",
    "Datum",
    "GeodeticDatum",
    "VerticalDatum",
    "VerticalDatumType",
    "AxisDirection",
    "CoordinateSystem",
    "CoordinateSystemAxis",
    "CoordinateSystemType",
    "CoordinateReferenceSystem",
    "SingleCRS",
    "GeographicCRS",
    "Geographic2DCRS",
    "Geographic3DCRS",
    "GeocentricCRS",
    "VerticalCRS",
    "ProjectedCRS",
    "CompoundCRS",
    "GridCRS",
    "ELLIPSOIDS",
    "MERIDIANS",
    "AREAS_OF_USE",
    "GEODETIC_DATUMS",
    "VERTICAL_DATUMS",
    "COORDINATE_SYSTEMS",
    "GEOGRAPHIC_CRS",
    "GEOCENTRIC_CRS",
    "VERTICAL_CRS",
    "COMPOUND_CRS",
]
