"""
Tests for the map projections.

Published points come from the worked examples of IOGP Geomatics Guidance
Note 7-2; they are reproduced to the centimetre unless noted.
"""

import numpy as np
import pytest

from common.types import Coordinate, GeographicCoordinate
from common.units import Angle, Length
from operations import parameters as p
from operations.factory import (
    PROJECTIONS,
    australian_antarctic_polar_stereographic,
    borneo_rso,
    british_national_grid,
    europe_equal_area,
    hungarian_eov,
    jamaica_national_grid,
    krovak_sjtsk,
    popular_visualisation_pseudo_mercator,
    rd_new,
    terre_adelie_polar_stereographic,
    texas_cs27_south_central,
    trinidad_grid,
    ups_north,
    utm_zone,
    world_mercator,
)
from operations.projections import (
    PROJECTION_CLASSES,
    AlbersEqualAreaProjection,
    AmericanPolyconicProjection,
    BonneProjection,
    BonneSouthOrientatedProjection,
    CassiniSoldnerProjection,
    EquidistantCylindricalProjection,
    EquidistantCylindricalSphericalProjection,
    GnomonicProjection,
    GuamProjection,
    HotineObliqueMercatorAProjection,
    HyperbolicCassiniSoldnerProjection,
    KrovakModifiedNorthOrientatedProjection,
    KrovakModifiedProjection,
    KrovakNorthOrientatedProjection,
    LabordeObliqueMercatorProjection,
    LambertAzimuthalEqualAreaSphericalProjection,
    LambertConicConformal1SPProjection,
    LambertConicConformal2SPBelgiumProjection,
    LambertConicConformal2SPProjection,
    LambertConicConformalWestOrientatedProjection,
    LambertConicNearConformalProjection,
    LambertCylindricalEqualAreaProjection,
    LambertCylindricalEqualAreaSphericalProjection,
    MercatorAProjection,
    MercatorBProjection,
    MercatorSphericalProjection,
    ModifiedAzimuthalEquidistantProjection,
    PolarStereographicAProjection,
    PolarStereographicBProjection,
    SinusoidalProjection,
    TransverseMercatorSouthOrientatedProjection,
    TransverseMercatorZonedProjection,
)
from reference import ellipsoids
from reference.ellipsoid import Ellipsoid
from validation.accuracy import AccuracyChecker, RoundTripConfig

SPHERE = ellipsoids.CLARKE_1866_AUTHALIC_SPHERE


def _point(latitude: Angle, longitude: Angle) -> GeographicCoordinate:
    return GeographicCoordinate.from_angles(latitude, longitude)


def _origin(latitude=0.0, longitude=0.0, false_easting=0.0, false_northing=0.0, scale=None) -> dict:
    parameters = {
        p.LATITUDE_OF_NATURAL_ORIGIN: Angle.from_degree(latitude),
        p.LONGITUDE_OF_NATURAL_ORIGIN: Angle.from_degree(longitude),
        p.FALSE_EASTING: Length.from_metre(false_easting),
        p.FALSE_NORTHING: Length.from_metre(false_northing),
    }
    if scale is not None:
        parameters[p.SCALE_FACTOR_AT_NATURAL_ORIGIN] = scale
    return parameters


def _standard_parallel(latitude=0.0, longitude=0.0) -> dict:
    return {
        p.LATITUDE_OF_1ST_STANDARD_PARALLEL: Angle.from_degree(latitude),
        p.LONGITUDE_OF_NATURAL_ORIGIN: Angle.from_degree(longitude),
        p.FALSE_EASTING: Length.from_metre(0),
        p.FALSE_NORTHING: Length.from_metre(0),
    }


def _two_parallels(origin, longitude, first, second, easting=0.0, northing=0.0) -> dict:
    return {
        p.LATITUDE_OF_FALSE_ORIGIN: Angle.from_degree(origin),
        p.LONGITUDE_OF_FALSE_ORIGIN: Angle.from_degree(longitude),
        p.LATITUDE_OF_1ST_STANDARD_PARALLEL: Angle.from_degree(first),
        p.LATITUDE_OF_2ND_STANDARD_PARALLEL: Angle.from_degree(second),
        p.EASTING_AT_FALSE_ORIGIN: Length.from_metre(easting),
        p.NORTHING_AT_FALSE_ORIGIN: Length.from_metre(northing),
    }


def _grid(*coordinates):
    return [GeographicCoordinate.from_degrees(lat, lon) for lat, lon in coordinates]


def _assert_round_trip(projection, coordinates=None):
    result = AccuracyChecker(RoundTripConfig(samples=25)).check_round_trip(projection, coordinates)
    assert result.passed, f"{projection.name}: {result.max_residual:.3e} deg"


class TestMercator:
    """Mercator variants."""

    def test_world_mercator_origin(self):
        point = world_mercator().forward(GeographicCoordinate.from_degrees(0.0, 0.0))
        assert (point.x, point.y) == pytest.approx((0.0, 0.0), abs=1e-9)

    def test_world_mercator_easting_is_equatorial_arc(self):
        point = world_mercator().forward(GeographicCoordinate.from_degrees(45.0, 90.0))
        assert point.x == pytest.approx(10018754.17, abs=0.01)

    def test_variant_a(self):
        projection = MercatorAProjection(
            "TEST::1", "Makassar / NEIEZ",
            _origin(0, 110, 3900000, 900000, 0.997), ellipsoids.BESSEL_1841
        )
        point = projection.forward(GeographicCoordinate.from_degrees(-3.0, 120.0))
        assert (point.x, point.y) == pytest.approx((5009726.58, 569150.82), abs=0.01)

    def test_variant_b(self):
        projection = MercatorBProjection(
            "TEST::2", "Pulkovo 1942 / Caspian Sea Mercator",
            _standard_parallel(42, 51), ellipsoids.KRASSOWSKY_1940
        )
        point = projection.forward(GeographicCoordinate.from_degrees(53.0, 53.0))
        assert (point.x, point.y) == pytest.approx((165704.29, 5171848.07), abs=0.01)

    def test_pseudo_mercator(self):
        point = popular_visualisation_pseudo_mercator().forward(
            _point(Angle.from_degree(24, 22, 54.433), Angle.from_degree(-100, 20))
        )
        assert (point.x, point.y) == pytest.approx((-11169055.58, 2800000.00), abs=0.01)

    def test_spherical_easting_is_arc(self):
        projection = MercatorSphericalProjection("TEST::3", "Sphere", _origin(), SPHERE)
        point = projection.forward(GeographicCoordinate.from_degrees(30.0, 10.0))
        assert point.x == pytest.approx(6370997.0 * np.radians(10.0))
        assert point.y == pytest.approx(6370997.0 * np.log(np.tan(np.pi / 4 + np.radians(15.0))))

    def test_pole_is_undefined(self):
        with pytest.raises(ValueError):
            world_mercator().forward(GeographicCoordinate.from_degrees(90.0, 0.0))


class TestLambertConicConformal:
    """Lambert Conic Conformal variants."""

    def test_one_standard_parallel(self):
        point = jamaica_national_grid().forward(
            _point(Angle.from_degree(17, 55, 55.80), Angle.from_degree(-76, 56, 37.26))
        )
        assert (point.x, point.y) == pytest.approx((255966.58, 142493.51), abs=0.01)

    def test_two_standard_parallels_in_us_survey_feet(self):
        point = texas_cs27_south_central().forward(GeographicCoordinate.from_degrees(28.5, -96.0))
        assert (point.x, point.y) == pytest.approx((2963503.91, 254759.80), abs=0.01)

    def test_belgium(self):
        parameters = _two_parallels(90, 0, 49 + 50 / 60, 51 + 10 / 60, 150000.01, 5400088.44)
        parameters[p.LONGITUDE_OF_FALSE_ORIGIN] = Angle.from_degree(4, 21, 24.983)
        projection = LambertConicConformal2SPBelgiumProjection(
            "TEST::4", "Belge Lambert 72", parameters, ellipsoids.INTERNATIONAL_1924
        )
        point = projection.forward(_point(Angle.from_degree(50, 40, 46.461), Angle.from_degree(5, 48, 26.533)))
        assert (point.x, point.y) == pytest.approx((251763.20, 153034.13), abs=0.01)
        _assert_round_trip(projection, _grid((50.5, 4.0), (51.2, 5.9), (49.6, 2.7)))

    def test_west_orientated_mirrors_easting(self):
        parameters = _origin(18, -77, 0, 150000, 1.0)
        east = LambertConicConformal1SPProjection("TEST::5", "East", parameters, ellipsoids.CLARKE_1866)
        west = LambertConicConformalWestOrientatedProjection("TEST::6", "West", parameters, ellipsoids.CLARKE_1866)
        point = GeographicCoordinate.from_degrees(17.5, -76.0)
        assert west.forward(point).x == pytest.approx(-east.forward(point).x)
        assert west.forward(point).y == pytest.approx(east.forward(point).y)
        assert west.to_proj4() is None
        _assert_round_trip(west, _grid((17.5, -76.0), (18.4, -78.3)))

    def test_tangent_cone_on_equator(self):
        with pytest.raises(ValueError):
            LambertConicConformal1SPProjection(
                "TEST::7", "Flat", _origin(0, 0, 0, 0, 1.0), ellipsoids.WGS_1984
            ).forward(GeographicCoordinate.from_degrees(10.0, 0.0))

    def test_parallels_symmetric_about_equator(self):
        with pytest.raises(ValueError):
            LambertConicConformal2SPProjection(
                "TEST::8", "Cylinder", _two_parallels(0, 0, -30, 30), ellipsoids.WGS_1984
            ).forward(GeographicCoordinate.from_degrees(10.0, 0.0))

    def test_opposite_pole_is_undefined(self):
        with pytest.raises(ValueError):
            jamaica_national_grid().forward(GeographicCoordinate.from_degrees(-90.0, 0.0))


class TestTransverseMercator:
    """Transverse Mercator variants."""

    def test_british_national_grid(self):
        point = british_national_grid().forward(GeographicCoordinate.from_degrees(50.5, 0.5))
        assert (point.x, point.y) == pytest.approx((577274.99, 69740.50), abs=0.01)

    def test_utm_central_meridian(self):
        projection = utm_zone(31)
        point = projection.forward(GeographicCoordinate.from_degrees(0.0, 3.0))
        assert (point.x, point.y) == pytest.approx((500000.0, 0.0), abs=1e-6)
        assert projection.identifier == "EPSG::16031"
        assert utm_zone(31, north=False).identifier == "EPSG::16131"

    def test_utm_southern_false_northing(self):
        point = utm_zone(31, north=False).forward(GeographicCoordinate.from_degrees(0.0, 3.0))
        assert point.y == pytest.approx(10000000.0, abs=1e-6)

    @pytest.mark.parametrize("zone", [0, 61])
    def test_utm_zone_range(self, zone):
        with pytest.raises(ValueError):
            utm_zone(zone)

    def test_south_orientated(self):
        projection = TransverseMercatorSouthOrientatedProjection(
            "TEST::9", "Hartebeesthoek94 / Lo29", _origin(0, 29, 0, 0, 1.0), ellipsoids.WGS_1984
        )
        point = projection.forward(_point(Angle.from_degree(-25, 43, 55.302), Angle.from_degree(28, 16, 57.479)))
        assert (point.x, point.y) == pytest.approx((71984.49, 2847342.74), abs=0.01)
        assert "+axis=wsu" in projection.to_proj4()
        _assert_round_trip(projection, _grid((-25.7, 28.3), (-30.0, 30.1)))

    def test_zoned_grid_system_prefixes_zone(self):
        parameters = {
            p.LATITUDE_OF_NATURAL_ORIGIN: Angle.from_degree(0),
            p.INITIAL_LONGITUDE: Angle.from_degree(-180),
            p.ZONE_WIDTH: Angle.from_degree(6),
            p.SCALE_FACTOR_AT_NATURAL_ORIGIN: 0.9996,
            p.FALSE_EASTING: Length.from_metre(500000),
            p.FALSE_NORTHING: Length.from_metre(0),
        }
        projection = TransverseMercatorZonedProjection("TEST::10", "UTM zoned", parameters, ellipsoids.WGS_1984)
        assert projection.zone(np.radians(2.0)) == 31
        assert np.degrees(projection.central_meridian(31)) == pytest.approx(3.0)
        point = GeographicCoordinate.from_degrees(48.0, 2.0)
        zoned = projection.forward(point)
        plain = utm_zone(31).forward(point)
        assert zoned.x == pytest.approx(31e6 + plain.x, abs=1e-6)
        assert zoned.y == pytest.approx(plain.y, abs=1e-6)
        _assert_round_trip(projection, _grid((48.0, 2.0), (-33.9, 151.2), (64.1, -21.9)))

    def test_ninety_degrees_from_central_meridian(self):
        with pytest.raises(ValueError):
            utm_zone(31).forward(GeographicCoordinate.from_degrees(0.0, 93.0))


class TestObliqueProjections:
    """Oblique stereographic, Hotine and Krovak."""

    def test_rd_new(self):
        point = rd_new().forward(GeographicCoordinate.from_degrees(53.0, 6.0))
        assert (point.x, point.y) == pytest.approx((196105.283, 557057.739), abs=0.001)

    def test_borneo_rso(self):
        point = borneo_rso().forward(
            _point(Angle.from_degree(5, 23, 14.1129), Angle.from_degree(115, 48, 19.8196))
        )
        assert (point.x, point.y) == pytest.approx((679245.73, 596562.78), abs=0.01)

    def test_eov_projection_centre(self):
        centre = _point(Angle.from_degree(47, 8, 39.8174), Angle.from_degree(19, 2, 54.8584))
        point = hungarian_eov().forward(centre)
        assert (point.x, point.y) == pytest.approx((650000.0, 200000.0), abs=0.01)

    def test_hotine_variant_a_round_trip(self):
        projection = HotineObliqueMercatorAProjection(
            "TEST::11", "RSO Borneo (variant A)",
            {
                p.LATITUDE_OF_PROJECTION_CENTRE: Angle.from_degree(4),
                p.LONGITUDE_OF_PROJECTION_CENTRE: Angle.from_degree(115),
                p.AZIMUTH_OF_INITIAL_LINE: Angle.from_degree(53, 18, 56.9537),
                p.ANGLE_FROM_RECTIFIED_TO_SKEW_GRID: Angle.from_degree(53, 7, 48.3685),
                p.SCALE_FACTOR_ON_INITIAL_LINE: 0.99984,
                p.FALSE_EASTING: Length.from_metre(0),
                p.FALSE_NORTHING: Length.from_metre(0),
            },
            ellipsoids.EVEREST_1830_1967_DEFINITION
        )
        _assert_round_trip(projection, _grid((5.4, 115.8), (2.0, 111.0), (6.9, 118.0)))

    def test_hotine_variant_a_borneo(self):
        parameters = {
            p.LATITUDE_OF_PROJECTION_CENTRE: Angle.from_degree(4),
            p.LONGITUDE_OF_PROJECTION_CENTRE: Angle.from_degree(115),
            p.AZIMUTH_OF_INITIAL_LINE: Angle.from_degree(53, 18, 56.9537),
            p.ANGLE_FROM_RECTIFIED_TO_SKEW_GRID: Angle.from_degree(53, 7, 48.3685),
            p.SCALE_FACTOR_ON_INITIAL_LINE: 0.99984,
            p.FALSE_EASTING: Length.from_metre(0),
            p.FALSE_NORTHING: Length.from_metre(0),
        }
        projection = HotineObliqueMercatorAProjection(
            "TEST::35", "RSO Borneo (variant A)", parameters, ellipsoids.EVEREST_1830_1967_DEFINITION
        )
        point = projection.forward(
            _point(Angle.from_degree(5, 23, 14.1129), Angle.from_degree(115, 48, 19.8196))
        )
        assert (point.x, point.y) == pytest.approx((679245.73, 596562.78), abs=0.01)
        centre = projection.forward(GeographicCoordinate.from_degrees(4.0, 115.0))
        assert (centre.x, centre.y) == pytest.approx((590476.87, 442857.65), abs=0.01)

    def test_hotine_pole_is_undefined(self):
        with pytest.raises(ValueError):
            hungarian_eov().forward(GeographicCoordinate.from_degrees(90.0, 19.0))

    def test_krovak(self):
        point = krovak_sjtsk().forward(
            _point(Angle.from_degree(50, 12, 32.442), Angle.from_degree(16, 50, 59.179))
        )
        assert (point.x, point.y) == pytest.approx((568990.99, 1050538.63), abs=0.01)

    def test_krovak_north_orientated(self):
        projection = krovak_sjtsk()
        north = KrovakNorthOrientatedProjection(
            "TEST::12", "Krovak East North", dict(projection.parameters), ellipsoids.BESSEL_1841
        )
        point = north.forward(_point(Angle.from_degree(50, 12, 32.442), Angle.from_degree(16, 50, 59.179)))
        assert (point.x, point.y) == pytest.approx((-568990.99, -1050538.63), abs=0.01)
        _assert_round_trip(north, _grid((50.2, 16.8), (48.7, 21.3)))


class TestPolarStereographic:
    """Polar stereographic variants."""

    def test_variant_a(self):
        point = ups_north().forward(GeographicCoordinate.from_degrees(73.0, 44.0))
        assert (point.x, point.y) == pytest.approx((3320416.75, 632668.43), abs=0.01)

    def test_variant_b(self):
        point = australian_antarctic_polar_stereographic().forward(GeographicCoordinate.from_degrees(-75.0, 120.0))
        assert (point.x, point.y) == pytest.approx((7255380.79, 7053389.56), abs=0.01)

    def test_variant_c(self):
        point = terre_adelie_polar_stereographic().forward(
            _point(Angle.from_degree(-66, 36, 18.820), Angle.from_degree(140, 4, 17.040))
        )
        assert (point.x, point.y) == pytest.approx((303169.52, 244055.72), abs=0.01)

    def test_pole_maps_to_false_origin(self):
        point = ups_north().forward(GeographicCoordinate.from_degrees(90.0, 0.0))
        assert (point.x, point.y) == pytest.approx((2000000.0, 2000000.0), abs=1e-6)

    def test_origin_must_be_a_pole(self):
        with pytest.raises(ValueError):
            PolarStereographicAProjection(
                "TEST::13", "Not polar", _origin(60, 0, 0, 0, 0.994), ellipsoids.WGS_1984
            ).forward(GeographicCoordinate.from_degrees(70.0, 0.0))

    def test_standard_parallel_on_equator(self):
        parameters = {
            p.LATITUDE_OF_STANDARD_PARALLEL: Angle.from_degree(0),
            p.LONGITUDE_OF_ORIGIN: Angle.from_degree(0),
            p.FALSE_EASTING: Length.from_metre(0),
            p.FALSE_NORTHING: Length.from_metre(0),
        }
        with pytest.raises(ValueError):
            PolarStereographicBProjection("TEST::14", "Equator", parameters, ellipsoids.WGS_1984).forward(
                GeographicCoordinate.from_degrees(70.0, 0.0)
            )

    def test_opposite_pole(self):
        with pytest.raises(ValueError):
            ups_north().forward(GeographicCoordinate.from_degrees(-90.0, 0.0))


class TestCassini:
    """Cassini-Soldner and its hyperbolic form."""

    def test_trinidad_in_links(self):
        point = trinidad_grid().forward(GeographicCoordinate.from_degrees(10.0, -62.0))
        assert (point.x / 0.66, point.y / 0.66) == pytest.approx((66644.94, 82536.22), abs=0.01)

    def test_vanua_levu(self):
        ellipsoid = Ellipsoid.from_inverse_flattening(
            "EPSG::7055", "Clarke 1880 (international foot)", Length.from_foot(20926202), 293.4663077
        )
        projection = HyperbolicCassiniSoldnerProjection(
            "TEST::15", "Vanua Levu Grid",
            {
                p.LATITUDE_OF_NATURAL_ORIGIN: Angle.from_degree(-16, 15),
                p.LONGITUDE_OF_NATURAL_ORIGIN: Angle.from_degree(179, 20),
                p.FALSE_EASTING: Length.from_foot(1251331.8 * 0.66),
                p.FALSE_NORTHING: Length.from_foot(1662888.5 * 0.66),
            },
            ellipsoid
        )
        point = projection.forward(_point(Angle.from_degree(-16, 50, 29.2435), Angle.from_degree(179, 59, 39.6115)))
        assert (point.x / 0.66, point.y / 0.66) == pytest.approx((1601528.90, 1336966.01), abs=0.05)
        _assert_round_trip(projection, _grid((-16.84, 179.99), (-16.3, 179.1), (-16.6, -179.9)))


class TestEqualArea:
    """Albers, Lambert azimuthal and cylindrical equal area."""

    def test_lambert_azimuthal(self):
        point = europe_equal_area().forward(GeographicCoordinate.from_degrees(50.0, 5.0))
        assert (point.x, point.y) == pytest.approx((3962799.45, 2999718.85), abs=0.01)

    def test_lambert_azimuthal_spherical(self):
        projection = LambertAzimuthalEqualAreaSphericalProjection("TEST::16", "Sphere", _origin(), SPHERE)
        point = projection.forward(GeographicCoordinate.from_degrees(0.0, 90.0))
        assert point.x == pytest.approx(6370997.0 * np.sqrt(2.0))
        assert point.y == pytest.approx(0.0, abs=1e-6)
        _assert_round_trip(projection, _grid((10.0, 20.0), (-45.0, -120.0), (80.0, 5.0)))

    def test_lambert_azimuthal_antipode(self):
        projection = LambertAzimuthalEqualAreaSphericalProjection("TEST::17", "Sphere", _origin(), SPHERE)
        with pytest.raises(ValueError):
            projection.forward(GeographicCoordinate.from_degrees(0.0, 180.0))

    def test_albers_round_trip(self):
        projection = AlbersEqualAreaProjection(
            "TEST::18", "Conus Albers", _two_parallels(23, -96, 29.5, 45.5), ellipsoids.CLARKE_1866
        )
        _assert_round_trip(projection, _grid((35.0, -75.0), (48.0, -122.0), (25.0, -81.0)))

    def test_albers_symmetric_parallels(self):
        with pytest.raises(ValueError):
            AlbersEqualAreaProjection(
                "TEST::19", "Symmetric", _two_parallels(0, 0, -20, 20), ellipsoids.WGS_1984
            ).forward(GeographicCoordinate.from_degrees(10.0, 0.0))

    def test_cylindrical_spherical(self):
        projection = LambertCylindricalEqualAreaSphericalProjection("TEST::20", "Sphere", _standard_parallel(), SPHERE)
        point = projection.forward(GeographicCoordinate.from_degrees(30.0, 10.0))
        assert point.x == pytest.approx(6370997.0 * np.radians(10.0))
        assert point.y == pytest.approx(6370997.0 * 0.5)

    def test_cylindrical_requires_sphere(self):
        with pytest.raises(ValueError):
            LambertCylindricalEqualAreaSphericalProjection(
                "TEST::21", "Ellipsoid", _standard_parallel(), ellipsoids.WGS_1984
            )

    def test_cylindrical_round_trip(self):
        projection = LambertCylindricalEqualAreaProjection(
            "TEST::22", "Cylindrical", _standard_parallel(30, 0), ellipsoids.WGS_1984
        )
        _assert_round_trip(projection, _grid((0.0, 0.0), (45.0, 100.0), (-70.0, -160.0)))


class TestCylindricalAndPseudoCylindrical:
    """Equidistant cylindrical and sinusoidal."""

    def test_equidistant_cylindrical(self):
        projection = EquidistantCylindricalProjection(
            "TEST::23", "World Equidistant Cylindrical", _standard_parallel(), ellipsoids.WGS_1984
        )
        point = projection.forward(GeographicCoordinate.from_degrees(55.0, 10.0))
        assert (point.x, point.y) == pytest.approx((1113194.91, 6097230.31), abs=0.05)
        _assert_round_trip(projection, _grid((55.0, 10.0), (-80.0, -170.0)))

    def test_equidistant_cylindrical_spherical(self):
        projection = EquidistantCylindricalSphericalProjection(
            "TEST::24", "Sphere", _standard_parallel(60, 0), SPHERE
        )
        point = projection.forward(GeographicCoordinate.from_degrees(45.0, 90.0))
        assert point.x == pytest.approx(6370997.0 * 0.5 * np.pi / 2)
        assert point.y == pytest.approx(6370997.0 * np.pi / 4)

    def test_sinusoidal_on_sphere(self):
        parameters = {
            p.LONGITUDE_OF_NATURAL_ORIGIN: Angle.from_degree(0),
            p.FALSE_EASTING: Length.from_metre(0),
            p.FALSE_NORTHING: Length.from_metre(0),
        }
        projection = SinusoidalProjection("TEST::25", "Sinusoidal", parameters, SPHERE)
        point = projection.forward(GeographicCoordinate.from_degrees(60.0, 90.0))
        assert point.x == pytest.approx(6370997.0 * np.pi / 2 * 0.5)
        assert point.y == pytest.approx(6370997.0 * np.pi / 3)
        ellipsoidal = SinusoidalProjection("TEST::26", "Sinusoidal", parameters, ellipsoids.WGS_1984)
        _assert_round_trip(ellipsoidal, _grid((60.0, 90.0), (-30.0, -150.0), (0.0, 0.0)))


class TestOtherProjections:
    """Gnomonic, Guam, Bonne and American Polyconic."""

    def test_gnomonic(self):
        projection = GnomonicProjection("TEST::27", "Gnomonic", _origin(), SPHERE)
        point = projection.forward(GeographicCoordinate.from_degrees(0.0, 45.0))
        assert point.x == pytest.approx(6370997.0)
        _assert_round_trip(projection, _grid((10.0, 20.0), (-40.0, 30.0), (60.0, -10.0)))

    def test_gnomonic_hemisphere_limit(self):
        projection = GnomonicProjection("TEST::28", "Gnomonic", _origin(), SPHERE)
        with pytest.raises(ValueError):
            projection.forward(GeographicCoordinate.from_degrees(0.0, 90.0))

    def test_guam(self):
        parameters = _origin(0, 0, 40000, 60000)
        parameters[p.LATITUDE_OF_NATURAL_ORIGIN] = Angle.from_degree(9, 32, 48.15)
        parameters[p.LONGITUDE_OF_NATURAL_ORIGIN] = Angle.from_degree(138, 10, 7.48)
        projection = GuamProjection("TEST::29", "Yap Islands", parameters, ellipsoids.CLARKE_1866)
        point = projection.forward(_point(Angle.from_degree(9, 35, 47.493), Angle.from_degree(138, 11, 34.908)))
        assert (point.x, point.y) == pytest.approx((42665.90, 65509.82), abs=0.01)
        _assert_round_trip(projection, _grid((9.6, 138.19), (9.45, 138.05)))

    def test_bonne_south_orientated_mirrors_both_axes(self):
        parameters = _origin(60, 10)
        bonne = BonneProjection("TEST::30", "Bonne", parameters, ellipsoids.WGS_1984)
        south = BonneSouthOrientatedProjection("TEST::31", "Bonne south", parameters, ellipsoids.WGS_1984)
        point = GeographicCoordinate.from_degrees(50.0, 30.0)
        assert south.forward(point).x == pytest.approx(-bonne.forward(point).x)
        assert south.forward(point).y == pytest.approx(-bonne.forward(point).y)
        _assert_round_trip(bonne, _grid((50.0, 30.0), (70.0, -20.0)))
        _assert_round_trip(south, _grid((50.0, 30.0), (70.0, -20.0)))

    def test_bonne_origin_on_equator_is_rejected_at_construction(self):
        with pytest.raises(ValueError):
            BonneProjection("TEST::32", "Bonne", _origin(0, 0), ellipsoids.WGS_1984)
        with pytest.raises(ValueError):
            BonneSouthOrientatedProjection("TEST::32", "Bonne south", _origin(0, 0), ellipsoids.WGS_1984)

    def test_bonne_south_orientated_on_sphere(self):
        south = BonneSouthOrientatedProjection("TEST::34", "Bonne south", _origin(60, 10), SPHERE)
        point = south.forward(GeographicCoordinate.from_degrees(50.0, 30.0))
        radius = 6370997.0
        apex = radius / np.tan(np.radians(60.0))
        rho = apex + radius * np.radians(10.0)
        t = radius * np.cos(np.radians(50.0)) * np.radians(20.0) / rho
        assert point.x == pytest.approx(-rho * np.sin(t), abs=1e-6)
        assert point.y == pytest.approx(-(apex - rho * np.cos(t)), abs=1e-6)

    def test_american_polyconic(self):
        projection = AmericanPolyconicProjection("TEST::33", "Polyconic", _origin(0, -54), ellipsoids.GRS_1980)
        point = projection.forward(GeographicCoordinate.from_degrees(0.0, -53.0))
        assert point.x == pytest.approx(6378137.0 * np.radians(1.0))
        assert point.y == pytest.approx(0.0, abs=1e-6)
        on_meridian = projection.forward(GeographicCoordinate.from_degrees(-10.0, -54.0))
        assert on_meridian.x == pytest.approx(0.0, abs=1e-6)
        _assert_round_trip(projection, _grid((-10.0, -50.0), (5.0, -60.0), (-30.0, -44.0)))


class TestAntimeridian:
    """Longitude differences are wrapped across ±180°."""

    @staticmethod
    def _fiji_cassini(cls):
        return cls(
            "TEST::36", "Cassini across the antimeridian",
            _origin(-16.25, 179.333, 2000000, 4000000), ellipsoids.CLARKE_1866
        )

    def test_hyperbolic_cassini_easting_stays_near_origin(self):
        projection = self._fiji_cassini(HyperbolicCassiniSoldnerProjection)
        east = projection.forward(GeographicCoordinate.from_degrees(-17.0, -179.0))
        assert 2000000.0 < east.x < 2200000.0
        before = projection.forward(GeographicCoordinate.from_degrees(-17.0, 179.99))
        after = projection.forward(GeographicCoordinate.from_degrees(-17.0, -179.99))
        assert after.x - before.x == pytest.approx(2130.0, abs=50.0)

    def test_cassini_round_trip_across_antimeridian(self):
        projection = self._fiji_cassini(CassiniSoldnerProjection)
        points = _grid((-16.25, -179.9), (-16.8, 179.95), (-15.8, -179.95), (-16.6, -179.99))
        _assert_round_trip(projection, points)
        _assert_round_trip(self._fiji_cassini(HyperbolicCassiniSoldnerProjection), points)

    def test_mercator_east_of_antimeridian(self):
        projection = MercatorAProjection("TEST::37", "Mercator", _origin(0, 178.75, 0, 0, 1.0), ellipsoids.WGS_1984)
        point = projection.forward(GeographicCoordinate.from_degrees(-17.0, -179.0))
        assert point.x == pytest.approx(6378137.0 * np.radians(2.25))
        _assert_round_trip(projection, _grid((-17.0, -179.0), (10.0, 175.0)))

    def test_transverse_mercator_is_symmetric_about_central_meridian(self):
        projection = utm_zone(60, north=False)
        east = projection.forward(GeographicCoordinate.from_degrees(-17.0, -179.5))
        west = projection.forward(GeographicCoordinate.from_degrees(-17.0, 173.5))
        assert east.x - 500000.0 == pytest.approx(-(west.x - 500000.0), abs=1e-6)
        assert east.y == pytest.approx(west.y, abs=1e-6)

    def test_lambert_conic_across_antimeridian(self):
        projection = LambertConicConformal1SPProjection(
            "TEST::38", "Lambert", _origin(-17.0, 179.0, 0, 0, 1.0), ellipsoids.WGS_1984
        )
        east = projection.forward(GeographicCoordinate.from_degrees(-17.0, -179.0))
        west = projection.forward(GeographicCoordinate.from_degrees(-17.0, 177.0))
        assert east.x == pytest.approx(-west.x, abs=1e-6)
        _assert_round_trip(projection, _grid((-17.0, -179.0), (-15.0, 177.5)))


def _krovak_modified(cls, coefficients=None, false_easting=5000000, false_northing=5000000):
    parameters = dict(krovak_sjtsk().parameters)
    parameters[p.FALSE_EASTING] = Length.from_metre(false_easting)
    parameters[p.FALSE_NORTHING] = Length.from_metre(false_northing)
    parameters[p.ORDINATE_1_OF_EVALUATION_POINT] = Length.from_metre(1089000)
    parameters[p.ORDINATE_2_OF_EVALUATION_POINT] = Length.from_metre(654000)
    if coefficients is None:
        coefficients = (
            2.946529277e-02, 2.515965696e-02, 1.193845912e-07, -4.668270147e-07, 9.233980362e-12,
            1.523735715e-12, 1.696780024e-18, 4.408314235e-18, -8.331083518e-24, -3.689471323e-24,
        )
    for parameter, value in zip((p.C1, p.C2, p.C3, p.C4, p.C5, p.C6, p.C7, p.C8, p.C9, p.C10), coefficients):
        parameters[parameter] = value
    return cls("TEST::39", "S-JTSK/05 Modified Krovak", parameters, ellipsoids.BESSEL_1841)


class TestLegacyGridMethods:
    """Laborde, Krovak Modified, Lambert near-conformal and modified azimuthal equidistant."""

    @staticmethod
    def _laborde():
        return LabordeObliqueMercatorProjection(
            "TEST::40", "Laborde Grid",
            {
                p.LATITUDE_OF_PROJECTION_CENTRE: Angle.from_degree(-18.9),
                p.LONGITUDE_OF_PROJECTION_CENTRE: Angle.from_degree(46.4372291),
                p.AZIMUTH_OF_INITIAL_LINE: Angle.from_degree(18.9),
                p.SCALE_FACTOR_ON_INITIAL_LINE: 0.9995,
                p.FALSE_EASTING: Length.from_metre(400000),
                p.FALSE_NORTHING: Length.from_metre(800000),
            },
            ellipsoids.INTERNATIONAL_1924
        )

    def test_laborde_centre_maps_to_false_origin(self):
        point = self._laborde().forward(GeographicCoordinate.from_degrees(-18.9, 46.4372291))
        assert (point.x, point.y) == pytest.approx((400000.0, 800000.0), abs=1e-6)

    def test_laborde_axes(self):
        projection = self._laborde()
        north = projection.forward(GeographicCoordinate.from_degrees(-17.9, 46.4372291))
        east = projection.forward(GeographicCoordinate.from_degrees(-18.9, 47.4372291))
        assert north.y - 800000.0 == pytest.approx(110700.0, rel=0.01)
        assert east.x - 400000.0 == pytest.approx(105300.0, rel=0.01)

    def test_laborde_round_trip(self):
        _assert_round_trip(self._laborde(), _grid((-12.0, 49.0), (-25.5, 45.0), (-18.9, 44.0), (-20.0, 48.0)))

    def test_krovak_modified_round_trip(self):
        projection = _krovak_modified(KrovakModifiedProjection)
        _assert_round_trip(projection, _grid((50.2, 16.8), (48.7, 21.3), (49.5, 14.5)))
        north = _krovak_modified(KrovakModifiedNorthOrientatedProjection)
        _assert_round_trip(north, _grid((50.2, 16.8), (48.7, 21.3)))

    def test_krovak_modified_without_coefficients_is_krovak(self):
        projection = _krovak_modified(KrovakModifiedProjection, (0.0,) * 10, 0, 0)
        point = projection.forward(_point(Angle.from_degree(50, 12, 32.442), Angle.from_degree(16, 50, 59.179)))
        assert (point.x, point.y) == pytest.approx((568990.99, 1050538.63), abs=0.01)

    def test_krovak_modified_constant_terms_shift_grid(self):
        point = _point(Angle.from_degree(50, 12, 32.442), Angle.from_degree(16, 50, 59.179))
        plain = _krovak_modified(KrovakModifiedProjection, (0.0,) * 10).forward(point)
        shifted = _krovak_modified(KrovakModifiedProjection, (1.5, -2.5) + (0.0,) * 8).forward(point)
        assert shifted.x - plain.x == pytest.approx(2.5, abs=1e-6)
        assert shifted.y - plain.y == pytest.approx(-1.5, abs=1e-6)

    def test_krovak_modified_correction_is_decimetric(self):
        point = _point(Angle.from_degree(50, 12, 32.442), Angle.from_degree(16, 50, 59.179))
        plain = _krovak_modified(KrovakModifiedProjection, (0.0,) * 10).forward(point)
        modified = _krovak_modified(KrovakModifiedProjection).forward(point)
        assert 0.0 < np.hypot(modified.x - plain.x, modified.y - plain.y) < 1.0
        assert (plain.x, plain.y) == pytest.approx((5568990.99, 6050538.63), abs=0.01)

    def test_krovak_modified_has_no_proj_definition(self):
        assert _krovak_modified(KrovakModifiedProjection).to_proj4() is None

    def test_lambert_near_conformal(self):
        parameters = _origin(34.65, 37.35, 300000, 300000, 0.9996256)
        projection = LambertConicNearConformalProjection(
            "TEST::41", "Levant Zone", parameters, ellipsoids.CLARKE_1880_IGN
        )
        point = projection.forward(_point(Angle.from_degree(37, 31, 17.625), Angle.from_degree(34, 8, 11.291)))
        assert (point.x, point.y) == pytest.approx((15707.96, 623165.96), abs=0.01)
        _assert_round_trip(projection, _grid((37.52, 34.14), (33.0, 36.0), (36.0, 39.0)))

    def test_lambert_near_conformal_origin_on_equator(self):
        with pytest.raises(ValueError):
            LambertConicNearConformalProjection("TEST::42", "Equator", _origin(0, 0, 0, 0, 1.0), ellipsoids.WGS_1984)

    def test_modified_azimuthal_equidistant(self):
        parameters = _origin(0, 0, 40000, 60000)
        parameters[p.LATITUDE_OF_NATURAL_ORIGIN] = Angle.from_degree(9, 32, 48.15)
        parameters[p.LONGITUDE_OF_NATURAL_ORIGIN] = Angle.from_degree(138, 10, 7.48)
        projection = ModifiedAzimuthalEquidistantProjection(
            "TEST::43", "Yap Islands", parameters, ellipsoids.CLARKE_1866
        )
        point = projection.forward(_point(Angle.from_degree(9, 35, 47.493), Angle.from_degree(138, 11, 34.908)))
        assert (point.x, point.y) == pytest.approx((42665.90, 65509.82), abs=0.01)
        _assert_round_trip(projection, _grid((9.6, 138.19), (9.45, 138.05), (9.2, 138.17)))

    def test_modified_azimuthal_equidistant_on_central_meridian(self):
        parameters = _origin(9.5, 138.0, 40000, 60000)
        projection = ModifiedAzimuthalEquidistantProjection(
            "TEST::44", "Meridian", parameters, ellipsoids.CLARKE_1866
        )
        south = projection.forward(GeographicCoordinate.from_degrees(9.0, 138.0))
        assert south.x == pytest.approx(40000.0, abs=1e-6)
        assert south.y < 60000.0

    @pytest.mark.parametrize("cls", [
        KrovakModifiedNorthOrientatedProjection,
        KrovakModifiedProjection,
        LabordeObliqueMercatorProjection,
        LambertConicNearConformalProjection,
        ModifiedAzimuthalEquidistantProjection,
    ], ids=lambda cls: cls.__name__)
    def test_registered(self, cls):
        assert PROJECTION_CLASSES[cls.METHOD.identifier] is cls



class TestRoundTrips:
    """Every named projection reverses its forward over its area of use."""

    @pytest.mark.parametrize("identifier", [projection.identifier for projection in PROJECTIONS])
    def test_named_projection(self, identifier):
        _assert_round_trip(PROJECTIONS[identifier])

    def test_reverse_returns_geographic(self):
        coordinate = british_national_grid().reverse(Coordinate(400000.0, -100000.0))
        assert coordinate.to_degrees() == pytest.approx((49.0, -2.0), abs=1e-9)
