"""
Tests for identified objects, areas of use, datums, coordinate systems and
coordinate reference systems.
"""

import pytest

from common.types import Coordinate, GeographicCoordinate
from common.units import Angle
from operations import parameters as p
from operations.conversions import AffineParametricTransformation
from operations.factory import PROJECTED_CRS, british_national_grid, world_mercator
from reference import catalogs, ellipsoids
from reference.area_of_use import AreaOfUse
from reference.base import IdentifiedObject
from reference.coordinate_system import (
    AxisDirection,
    CoordinateSystem,
    CoordinateSystemAxis,
    CoordinateSystemType,
)
from reference.crs import (
    CompoundCRS,
    Geographic2DCRS,
    Geographic3DCRS,
    GridCRS,
    ProjectedCRS,
    VerticalCRS,
)
from reference.datum import GeodeticDatum, VerticalDatum, VerticalDatumType
from reference.meridian import PrimeMeridian


class TestIdentifiedObject:
    """Tests for identification and equality."""

    def test_authority_and_code(self):
        obj = IdentifiedObject("EPSG::4326", "WGS 84")
        assert obj.authority == "EPSG"
        assert obj.code == 4326

    def test_non_numeric_code(self):
        obj = IdentifiedObject("ESRI::Sinusoidal", "Sinusoidal")
        assert obj.code is None

    def test_identifier_required(self):
        with pytest.raises(ValueError):
            IdentifiedObject("", "Nameless")

    def test_equality_by_type_and_identifier(self):
        assert IdentifiedObject("X::1", "a") == IdentifiedObject("X::1", "b")
        assert IdentifiedObject("X::1", "a") != IdentifiedObject("X::2", "a")
        assert catalogs.WGS84_GEOGRAPHIC != catalogs.WGS84


class TestAreaOfUse:
    """Tests for bounding boxes."""

    def test_contains(self):
        point = GeographicCoordinate.from_degrees(52.0, -1.0)
        assert catalogs.GREAT_BRITAIN.contains(point)
        assert not catalogs.HUNGARY.contains(point)

    def test_bounds_are_inclusive(self):
        area = AreaOfUse.from_degrees("X::1", "Box", 0, 10, 0, 10)
        assert area.contains(GeographicCoordinate.from_degrees(5.0, 0.0))

    def test_crossing_antimeridian(self):
        area = AreaOfUse.from_degrees("X::2", "Pacific", 170, -170, -20, 20)
        assert area.is_crossing_antimeridian
        assert area.contains(GeographicCoordinate.from_degrees(0.0, 179.0))
        assert area.contains(GeographicCoordinate.from_degrees(0.0, -175.0))
        assert not area.contains(GeographicCoordinate.from_degrees(0.0, 0.0))

    def test_north_america_crosses_antimeridian(self):
        assert catalogs.NORTH_AMERICA_NAD27.is_crossing_antimeridian
        assert catalogs.NORTH_AMERICA_NAD27.contains(GeographicCoordinate.from_degrees(52.0, 178.0))

    def test_south_of_north_rejected(self):
        with pytest.raises(ValueError):
            AreaOfUse.from_degrees("X::3", "Inverted", 0, 10, 20, 10)

    def test_world_is_global(self):
        assert AreaOfUse.WORLD.is_global
        assert not catalogs.HUNGARY.is_global

    def test_world_zone(self):
        zone = catalogs.world_zone(31)
        assert zone.west.degrees == 0
        assert zone.east.degrees == 6
        assert zone.south.degrees == 0
        assert catalogs.world_zone(31, north=False).north.degrees == 0

    @pytest.mark.parametrize("zone", [0, 61])
    def test_world_zone_out_of_range(self, zone):
        with pytest.raises(ValueError):
            catalogs.world_zone(zone)

    def test_catalog_holds_zones(self):
        assert catalogs.world_zone(31) in catalogs.AREAS_OF_USE
        assert catalogs.AREAS_OF_USE.from_name("Trinidad") == [catalogs.TRINIDAD]


class TestPrimeMeridian:
    """Tests for prime meridians."""

    def test_paris_in_grads(self):
        assert catalogs.PARIS.longitude.degrees == pytest.approx(2.33722917, abs=1e-8)

    def test_longitude_must_be_angle(self):
        with pytest.raises(TypeError):
            PrimeMeridian("X::1", "Bad", 2.33)

    def test_catalog(self):
        assert catalogs.MERIDIANS["EPSG::8901"] is catalogs.GREENWICH
        assert len(catalogs.MERIDIANS) == 13


class TestDatum:
    """Tests for geodetic and vertical datums."""

    def test_geodetic_datum(self):
        assert catalogs.OSGB_1936.ellipsoid is ellipsoids.AIRY_1830
        assert catalogs.OSGB_1936.prime_meridian is catalogs.GREENWICH

    @pytest.mark.parametrize("ellipsoid,meridian", [
        (None, catalogs.GREENWICH),
        (ellipsoids.WGS_1984, None),
    ])
    def test_geodetic_datum_requires_components(self, ellipsoid, meridian):
        with pytest.raises(ValueError):
            GeodeticDatum("X::1", "Incomplete", ellipsoid, meridian)

    def test_vertical_datum_type_from_code(self):
        assert catalogs.ELLIPSOID.type == VerticalDatumType.ELLIPSOIDAL
        assert catalogs.EGM96.type == VerticalDatumType.ORTHOMETRIC
        assert VerticalDatum("EPSG::5099", "Edge").type == VerticalDatumType.ELLIPSOIDAL
        assert VerticalDatum("EPSG::5100", "Edge").type == VerticalDatumType.ORTHOMETRIC

    def test_catalog_aliases(self):
        assert catalogs.GEODETIC_DATUMS.from_name("WGS84") == [catalogs.WGS84]
        assert catalogs.VERTICAL_DATUMS.from_name("Earth Gravity Model 1996") == [catalogs.EGM96]


class TestCoordinateSystem:
    """Tests for axes and coordinate systems."""

    def test_dimension_and_axes(self):
        cs = catalogs.CARTESIAN_GEOCENTRIC
        assert cs.dimension == 3
        assert cs[0].direction == AxisDirection.GEOCENTRIC_X

    def test_axis_range(self):
        with pytest.raises(ValueError):
            CoordinateSystemAxis("X::1", "Lat", AxisDirection.NORTH, "degree", 90.0, -90.0)

    def test_no_axes(self):
        with pytest.raises(ValueError):
            CoordinateSystem("X::1", "Empty", CoordinateSystemType.CARTESIAN, [])

    def test_repeating_axes(self):
        with pytest.raises(ValueError):
            CoordinateSystem(
                "X::2", "Twice", CoordinateSystemType.CARTESIAN, [catalogs.EASTING, catalogs.EASTING]
            )

    def test_same_code_different_unit_are_distinct_axes(self):
        assert catalogs.EASTING != catalogs.EASTING_US_FOOT


class TestCoordinateReferenceSystems:
    """Tests for the reference system kinds."""

    def test_geographic(self):
        crs = catalogs.WGS84_GEOGRAPHIC
        assert crs.dimension == 2
        assert crs.ellipsoid is ellipsoids.WGS_1984
        assert catalogs.WGS84_GEOGRAPHIC_3D.dimension == 3

    def test_geographic_dimension_checked(self):
        with pytest.raises(ValueError):
            Geographic2DCRS("X::1", "Bad", catalogs.ELLIPSOIDAL_LAT_LON_HEIGHT, catalogs.WGS84)
        with pytest.raises(ValueError):
            Geographic3DCRS("X::2", "Bad", catalogs.ELLIPSOIDAL_LAT_LON, catalogs.WGS84)

    def test_geographic_requires_ellipsoidal_cs(self):
        with pytest.raises(ValueError):
            Geographic2DCRS("X::3", "Bad", catalogs.CARTESIAN_EN_METRE, catalogs.WGS84)

    def test_geographic_requires_geodetic_datum(self):
        with pytest.raises(TypeError):
            Geographic2DCRS("X::4", "Bad", catalogs.ELLIPSOIDAL_LAT_LON, catalogs.EGM96)

    def test_vertical_requires_vertical_datum(self):
        with pytest.raises(TypeError):
            VerticalCRS("X::5", "Bad", catalogs.VERTICAL_HEIGHT, catalogs.WGS84)

    def test_geocentric(self):
        assert catalogs.WGS84_GEOCENTRIC.dimension == 3
        assert catalogs.GEOCENTRIC_CRS["EPSG::4978"].ellipsoid is ellipsoids.WGS_1984

    def test_compound_dimension(self):
        assert catalogs.WGS84_EGM96_HEIGHT.dimension == 3
        assert catalogs.COMPOUND_CRS.from_name("EVRF2000") == [catalogs.ETRS89_EVRF2000_HEIGHT]

    def test_compound_needs_two_components(self):
        with pytest.raises(ValueError):
            CompoundCRS("X::6", "Single", [catalogs.WGS84_GEOGRAPHIC])

    def test_projected(self):
        crs = PROJECTED_CRS["EPSG::27700"]
        assert crs.base is catalogs.OSGB36_GEOGRAPHIC
        point = crs.forward(GeographicCoordinate.from_degrees(50.5, 0.5))
        assert point.x == pytest.approx(577274.99, abs=0.01)
        assert crs.reverse(point).to_degrees() == pytest.approx((50.5, 0.5), abs=1e-9)

    def test_projected_ellipsoid_must_match(self):
        with pytest.raises(ValueError):
            ProjectedCRS(
                "X::7", "Mismatch", catalogs.WGS84_GEOGRAPHIC,
                catalogs.CARTESIAN_EN_METRE, british_national_grid()
            )

    def test_projected_catalog_holds_utm(self):
        assert "EPSG::32631" in PROJECTED_CRS
        assert len(PROJECTED_CRS.from_name("UTM zone")) == 60

    def test_grid_crs(self):
        base = ProjectedCRS(
            "EPSG::3395", "WGS 84 / World Mercator", catalogs.WGS84_GEOGRAPHIC,
            catalogs.CARTESIAN_EN_METRE, world_mercator()
        )
        bins = AffineParametricTransformation(
            "X::8", "Bin grid", {p.A0: 1000.0, p.A1: 25.0, p.A2: 0.0, p.B0: 2000.0, p.B1: 0.0, p.B2: 12.5}
        )
        grid = GridCRS("X::9", "Survey bins", base, catalogs.AFFINE_BIN_GRID, bins)
        assert grid.dimension == 2
        assert grid.area_of_use == base.area_of_use
        point = grid.forward(Coordinate(4.0, 8.0))
        assert (point.x, point.y) == pytest.approx((1100.0, 2100.0))
        assert (grid.reverse(point).x, grid.reverse(point).y) == pytest.approx((4.0, 8.0))

    def test_grid_crs_requires_affine_cs(self):
        bins = AffineParametricTransformation(
            "X::10", "Bins", {p.A0: 0.0, p.A1: 1.0, p.A2: 0.0, p.B0: 0.0, p.B1: 0.0, p.B2: 1.0}
        )
        with pytest.raises(ValueError):
            GridCRS("X::11", "Bad", PROJECTED_CRS["EPSG::3395"], catalogs.CARTESIAN_EN_METRE, bins)

    def test_catalog_lookup(self):
        assert catalogs.GEOGRAPHIC_CRS.from_identifier("4326") == [catalogs.WGS84_GEOGRAPHIC]
        assert catalogs.VERTICAL_CRS["EPSG::5773"].datum is catalogs.EGM96
        assert Angle.from_degree(0) == catalogs.GREENWICH.longitude
