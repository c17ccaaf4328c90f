"""
Tests for conversions between coordinate types: geocentric, topocentric,
vertical perspective and affine grids.
"""

import numpy as np
import pytest

from common.types import Coordinate, GeographicCoordinate
from common.units import Angle, Length
from operations import parameters as p
from operations.conversions import (
    AffineParametricTransformation,
    GeocentricTopocentricConversion,
    GeographicGeocentricConversion,
    GeographicTopocentricConversion,
)
from operations.projections import VerticalPerspectiveOrthographicProjection, VerticalPerspectiveProjection
from reference.ellipsoids import WGS_1984

# 53°48'33.820"N 2°07'46.380"E, h = 73 m
POINT = GeographicCoordinate.from_angles(
    Angle.from_degree(53, 48, 33.820), Angle.from_degree(2, 7, 46.380), Length.from_metre(73.0)
)

TOPOCENTRIC_ORIGIN = {
    p.LATITUDE_OF_TOPOCENTRIC_ORIGIN: Angle.from_degree(55),
    p.LONGITUDE_OF_TOPOCENTRIC_ORIGIN: Angle.from_degree(5),
    p.ELLIPSOIDAL_HEIGHT_OF_TOPOCENTRIC_ORIGIN: Length.from_metre(200),
}


def _affine(a0, a1, a2, b0, b1, b2) -> AffineParametricTransformation:
    return AffineParametricTransformation(
        "TEST::1", "Affine", {p.A0: a0, p.A1: a1, p.A2: a2, p.B0: b0, p.B1: b1, p.B2: b2}
    )


class TestGeographicGeocentric:
    """Geographic/geocentric conversions."""

    conversion = GeographicGeocentricConversion("TEST::2", "WGS 84", None, WGS_1984)

    def test_forward(self):
        result = self.conversion.forward(POINT)
        assert (result.x, result.y, result.z) == pytest.approx(
            (3771793.968, 140253.342, 5124304.349), abs=0.001
        )

    def test_reverse(self):
        result = self.conversion.reverse(Coordinate(3771793.968, 140253.342, 5124304.349))
        assert result.latitude == pytest.approx(POINT.latitude, abs=1e-10)
        assert result.longitude == pytest.approx(POINT.longitude, abs=1e-10)
        assert result.height == pytest.approx(73.0, abs=0.001)

    @pytest.mark.parametrize("latitude,longitude,height", [
        (90.0, 0.0, 0.0),
        (-90.0, 45.0, 1000.0),
        (0.0, 180.0, -50.0),
    ])
    def test_round_trip_at_poles_and_equator(self, latitude, longitude, height):
        point = GeographicCoordinate.from_degrees(latitude, longitude, height)
        result = self.conversion.reverse(self.conversion.forward(point))
        assert result.latitude == pytest.approx(point.latitude, abs=1e-10)
        assert result.height == pytest.approx(height, abs=1e-4)
        if abs(latitude) < 90.0:
            assert np.cos(result.longitude - point.longitude) == pytest.approx(1.0)

    def test_wrong_input_type(self):
        with pytest.raises(TypeError):
            self.conversion.forward(Coordinate(0.0, 0.0, 0.0))
        with pytest.raises(TypeError):
            self.conversion.reverse(POINT)

    def test_ellipsoid_required(self):
        with pytest.raises(ValueError):
            GeographicGeocentricConversion("TEST::3", "None", None, None)


class TestTopocentric:
    """Geographic/topocentric and geocentric/topocentric conversions."""

    def test_geographic_topocentric(self):
        conversion = GeographicTopocentricConversion("TEST::4", "Topocentric", TOPOCENTRIC_ORIGIN, WGS_1984)
        result = conversion.forward(POINT)
        assert (result.x, result.y, result.z) == pytest.approx(
            (-189013.869, -128642.040, -4220.171), abs=0.001
        )
        back = conversion.reverse(result)
        assert back.latitude == pytest.approx(POINT.latitude, abs=1e-10)
        assert back.longitude == pytest.approx(POINT.longitude, abs=1e-10)
        assert back.height == pytest.approx(73.0, abs=0.001)

    def test_geocentric_topocentric(self):
        parameters = {
            p.GEOCENTRIC_X_OF_TOPOCENTRIC_ORIGIN: Length.from_metre(3652755.3058),
            p.GEOCENTRIC_Y_OF_TOPOCENTRIC_ORIGIN: Length.from_metre(319574.6799),
            p.GEOCENTRIC_Z_OF_TOPOCENTRIC_ORIGIN: Length.from_metre(5201547.3536),
        }
        conversion = GeocentricTopocentricConversion("TEST::5", "Topocentric", parameters, WGS_1984)
        geocentric = Coordinate(3771793.968, 140253.342, 5124304.349)
        result = conversion.forward(geocentric)
        assert (result.x, result.y, result.z) == pytest.approx(
            (-189013.869, -128642.040, -4220.171), abs=0.001
        )
        back = conversion.reverse(result)
        assert (back.x, back.y, back.z) == pytest.approx((geocentric.x, geocentric.y, geocentric.z), abs=1e-6)

    def test_origin_maps_to_zero(self):
        conversion = GeographicTopocentricConversion("TEST::6", "Topocentric", TOPOCENTRIC_ORIGIN, WGS_1984)
        origin = GeographicCoordinate.from_degrees(55.0, 5.0, 200.0)
        result = conversion.forward(origin)
        assert (result.x, result.y, result.z) == pytest.approx((0.0, 0.0, 0.0), abs=1e-6)


class TestVerticalPerspective:
    """Vertical perspective projections of a topocentric frame."""

    def test_orthographic_case(self):
        projection = VerticalPerspectiveOrthographicProjection(
            "TEST::7", "Orthographic", TOPOCENTRIC_ORIGIN, WGS_1984
        )
        result = projection.forward(POINT)
        assert (result.x, result.y) == pytest.approx((-189013.869, -128642.040), abs=0.001)

    def test_perspective(self):
        parameters = dict(TOPOCENTRIC_ORIGIN)
        parameters[p.VIEWPOINT_HEIGHT] = Length.from_metre(5900000)
        projection = VerticalPerspectiveProjection("TEST::8", "Perspective", parameters, WGS_1984)
        result = projection.forward(POINT)
        assert (result.x, result.y) == pytest.approx((-188878.767, -128550.090), abs=0.001)

    def test_point_above_viewpoint(self):
        parameters = dict(TOPOCENTRIC_ORIGIN)
        parameters[p.VIEWPOINT_HEIGHT] = Length.from_metre(1000)
        projection = VerticalPerspectiveProjection("TEST::9", "Low viewpoint", parameters, WGS_1984)
        with pytest.raises(ValueError):
            projection.forward(GeographicCoordinate.from_degrees(55.0, 5.0, 5000.0))

    def test_no_reverse(self):
        projection = VerticalPerspectiveOrthographicProjection(
            "TEST::10", "Orthographic", TOPOCENTRIC_ORIGIN, WGS_1984
        )
        with pytest.raises(NotImplementedError):
            projection.reverse(Coordinate(0.0, 0.0))


class TestAffineParametric:
    """Affine parametric transformation between planar grids."""

    def test_forward_and_reverse(self):
        affine = _affine(1000.0, 2.0, -0.5, 2000.0, 0.5, 2.0)
        result = affine.forward(Coordinate(10.0, 20.0, 5.0))
        assert (result.x, result.y, result.z) == pytest.approx((1010.0, 2045.0, 5.0))
        back = affine.reverse(result)
        assert (back.x, back.y) == pytest.approx((10.0, 20.0))

    def test_singular_matrix(self):
        affine = _affine(0.0, 1.0, 1.0, 0.0, 1.0, 1.0)
        with pytest.raises(ValueError):
            affine.reverse(Coordinate(1.0, 1.0))

    def test_coefficients_must_be_numbers(self):
        with pytest.raises(TypeError):
            _affine(Length.from_metre(1.0), 1.0, 0.0, 0.0, 0.0, 1.0)

    def test_wrong_input_type(self):
        with pytest.raises(TypeError):
            _affine(0.0, 1.0, 0.0, 0.0, 0.0, 1.0).forward(GeographicCoordinate(0.0, 0.0))
