"""
Cross-checks of forward projections against PROJ through pyproj.
"""

import pytest

from common.types import GeographicCoordinate
from common.units import Angle, Length
from operations import parameters as p
from operations.factory import (
    british_national_grid,
    europe_equal_area,
    jamaica_national_grid,
    rd_new,
    utm_zone,
    world_mercator,
)
from operations.projections import (
    CassiniSoldnerProjection,
    LabordeObliqueMercatorProjection,
    VerticalPerspectiveOrthographicProjection,
)
from reference import ellipsoids
from validation import AccuracyChecker, RoundTripConfig


def _cassini():
    return CassiniSoldnerProjection(
        "TEST::1", "Cassini",
        {
            p.LATITUDE_OF_NATURAL_ORIGIN: Angle.from_degree(10, 30),
            p.LONGITUDE_OF_NATURAL_ORIGIN: Angle.from_degree(-61, 20),
            p.FALSE_EASTING: Length.from_metre(100000),
            p.FALSE_NORTHING: Length.from_metre(200000),
        },
        ellipsoids.WGS_1984
    )


def _points(*latlon):
    return [GeographicCoordinate.from_degrees(lat, lon) for lat, lon in latlon]


@pytest.fixture
def checker():
    return AccuracyChecker(RoundTripConfig(samples=20))


class TestAgainstPyproj:
    """Forward results agree with PROJ to the millimetre."""

    @pytest.mark.parametrize("build", [
        world_mercator,
        british_national_grid,
        jamaica_national_grid,
        rd_new,
        europe_equal_area,
    ], ids=lambda build: build.__name__)
    def test_named_projection(self, checker, build):
        result = checker.check_against_pyproj(build())
        assert result.passed, result.max_residual
        assert result.details["samples"] == 20

    def test_utm(self, checker):
        points = _points((0.0, 3.0), (45.0, 1.0), (70.0, 5.5), (10.0, 0.5))
        result = checker.check_against_pyproj(utm_zone(31), points)
        assert result.passed, result.max_residual

    def test_cassini_near_origin(self, checker):
        points = _points((10.5, -61.3), (10.7, -61.0), (10.1, -61.6))
        result = checker.check_against_pyproj(_cassini(), points)
        assert result.passed, result.max_residual

    def test_laborde_near_centre(self, checker):
        projection = LabordeObliqueMercatorProjection(
            "TEST::3", "Laborde Grid",
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
        points = _points((-18.7, 46.5), (-19.1, 46.3), (-18.9, 46.6))
        # PROJ develops the cubic term as a longer series; they agree to centimetres here
        result = checker.check_against_pyproj(projection, points, tolerance=0.05)
        assert result.passed, result.max_residual

    def test_definition_is_reported(self, checker):
        result = checker.check_against_pyproj(world_mercator(), _points((10.0, 10.0)))
        assert result.details["definition"].startswith("+proj=merc")

    def test_projection_without_proj_definition(self, checker):
        projection = VerticalPerspectiveOrthographicProjection(
            "TEST::2", "View",
            {
                p.LATITUDE_OF_TOPOCENTRIC_ORIGIN: Angle.from_degree(55),
                p.LONGITUDE_OF_TOPOCENTRIC_ORIGIN: Angle.from_degree(5),
                p.ELLIPSOIDAL_HEIGHT_OF_TOPOCENTRIC_ORIGIN: Length.from_metre(200),
            },
            ellipsoids.WGS_1984
        )
        assert projection.to_proj4() is None
        with pytest.raises(NotImplementedError):
            checker.check_against_pyproj(projection)
