"""
Tests for datum transformations and the transformation catalog.
"""

import numpy as np
import pytest

from common.types import Coordinate, GeographicCoordinate
from common.units import Angle, Length
from geodesy.latitudes import gauss_sphere
from operations import methods
from operations import parameters as p
from operations import transformation_catalog
from operations.transformations import (
    TRANSFORMATION_CLASSES,
    EllipsoidToSphereTransformation,
    GeographicHelmertTransformation,
    GeographicOffsetTransformation,
    HelmertTransformation,
    MolodenskyTransformation,
)
from reference import catalogs, ellipsoids
from reference.base import IdentifiedObject
from reference.datum import GeodeticDatum

WGS72 = IdentifiedObject("EPSG::4985", "WGS 72")
ED50 = IdentifiedObject("EPSG::4230", "ED50")

POINT = GeographicCoordinate.from_angles(
    Angle.from_degree(53, 48, 33.820), Angle.from_degree(2, 7, 46.380), Length.from_metre(73.0)
)


def _seven_parameters(tx=0.0, ty=0.0, tz=0.0, rx=0.0, ry=0.0, rz=0.0, ds=0.0) -> dict:
    return {
        p.X_AXIS_TRANSLATION: Length.from_metre(tx),
        p.Y_AXIS_TRANSLATION: Length.from_metre(ty),
        p.Z_AXIS_TRANSLATION: Length.from_metre(tz),
        p.X_AXIS_ROTATION: Angle.from_arc_second(rx),
        p.Y_AXIS_ROTATION: Angle.from_arc_second(ry),
        p.Z_AXIS_ROTATION: Angle.from_arc_second(rz),
        p.SCALE_DIFFERENCE: ds,
    }


def _molodensky() -> MolodenskyTransformation:
    return MolodenskyTransformation(
        "TEST::1", "WGS 84 to ED50",
        {
            p.X_AXIS_TRANSLATION: Length.from_metre(84.87),
            p.Y_AXIS_TRANSLATION: Length.from_metre(96.49),
            p.Z_AXIS_TRANSLATION: Length.from_metre(116.95),
            p.SEMI_MAJOR_AXIS_LENGTH_DIFFERENCE: Length.from_metre(251),
            p.FLATTENING_DIFFERENCE: 1.41927e-05,
        },
        catalogs.WGS84_GEOGRAPHIC_3D, ED50
    )


class TestHelmert:
    """Helmert transformations in the geocentric domain."""

    def test_position_vector(self):
        transformation = HelmertTransformation(
            "TEST::2", "WGS 72 to WGS 84", methods.POSITION_VECTOR_TRANSFORMATION,
            _seven_parameters(tz=4.5, rz=0.554, ds=0.219), WGS72, catalogs.WGS84_GEOCENTRIC
        )
        result = transformation.forward(Coordinate(3657660.66, 255768.55, 5201382.11))
        assert (result.x, result.y, result.z) == pytest.approx((3657660.78, 255778.43, 5201387.75), abs=0.01)

    def test_coordinate_frame_is_transposed_rotation(self):
        parameters = _seven_parameters(tz=4.5, rz=0.554, ds=0.219)
        position_vector = HelmertTransformation(
            "TEST::3", "PV", methods.POSITION_VECTOR_TRANSFORMATION, parameters, WGS72, catalogs.WGS84_GEOCENTRIC
        )
        coordinate_frame = HelmertTransformation(
            "TEST::4", "CF", methods.COORDINATE_FRAME_ROTATION, parameters, WGS72, catalogs.WGS84_GEOCENTRIC
        )
        point = Coordinate(3657660.66, 255768.55, 5201382.11)
        pv = position_vector.forward(point)
        cf = coordinate_frame.forward(point)
        assert pv.z == pytest.approx(cf.z)
        # rZ moves Y in opposite directions under the two conventions
        assert (pv.y - point.y) * (cf.y - point.y) < 0

    def test_reverse(self):
        transformation = HelmertTransformation(
            "TEST::5", "Seven parameters", methods.COORDINATE_FRAME_ROTATION,
            _seven_parameters(446.448, -125.157, 542.06, 0.15, 0.247, 0.842, -20.489),
            catalogs.OSGB36_GEOGRAPHIC, catalogs.WGS84_GEOCENTRIC
        )
        point = Coordinate(3909833.018, -147097.138, 5020322.478)
        back = transformation.reverse(transformation.forward(point))
        assert (back.x, back.y, back.z) == pytest.approx((point.x, point.y, point.z), abs=1e-6)

    def test_translations_only(self):
        translations = {
            p.X_AXIS_TRANSLATION: Length.from_metre(1.0),
            p.Y_AXIS_TRANSLATION: Length.from_metre(-2.0),
            p.Z_AXIS_TRANSLATION: Length.from_metre(3.0),
        }
        transformation = HelmertTransformation(
            "TEST::6", "Shift", methods.GEOCENTRIC_TRANSLATIONS, translations, WGS72, catalogs.WGS84_GEOCENTRIC
        )
        result = transformation.forward(Coordinate(0.0, 0.0, 0.0))
        assert (result.x, result.y, result.z) == pytest.approx((1.0, -2.0, 3.0))

    def test_unsupported_method(self):
        with pytest.raises(ValueError):
            HelmertTransformation(
                "TEST::7", "Wrong", methods.MOLODENSKY, _seven_parameters(), WGS72, catalogs.WGS84_GEOCENTRIC
            )

    def test_geographic_method_is_not_geocentric(self):
        with pytest.raises(ValueError):
            HelmertTransformation(
                "TEST::8", "Wrong", methods.POSITION_VECTOR_TRANSFORMATION_GEOG2D,
                _seven_parameters(), WGS72, catalogs.WGS84_GEOCENTRIC
            )

    def test_requires_geocentric_coordinate(self):
        transformation = HelmertTransformation(
            "TEST::9", "PV", methods.POSITION_VECTOR_TRANSFORMATION, _seven_parameters(), WGS72,
            catalogs.WGS84_GEOCENTRIC
        )
        with pytest.raises(TypeError):
            transformation.forward(POINT)

    def test_source_and_target_required(self):
        with pytest.raises(ValueError):
            HelmertTransformation(
                "TEST::10", "Orphan", methods.POSITION_VECTOR_TRANSFORMATION, _seven_parameters(), None, None
            )


class TestGeographicHelmert:
    """Helmert transformations applied to geographic coordinates."""

    def test_identity_between_coincident_frames(self):
        result = transformation_catalog.ETRS89_TO_WGS84_1.forward(POINT)
        assert result.latitude == pytest.approx(POINT.latitude, abs=1e-9)
        assert result.longitude == pytest.approx(POINT.longitude, abs=1e-9)

    def test_round_trip(self):
        transformation = transformation_catalog.OSGB36_TO_WGS84_6
        point = GeographicCoordinate.from_degrees(52.0, -1.5, 100.0)
        back = transformation.reverse(transformation.forward(point))
        assert back.latitude == pytest.approx(point.latitude, abs=1e-10)
        assert back.longitude == pytest.approx(point.longitude, abs=1e-10)
        assert back.height == pytest.approx(100.0, abs=1e-4)

    def test_shift_is_metre_level(self):
        point = GeographicCoordinate.from_degrees(47.5, 19.0)
        result = transformation_catalog.HD72_TO_WGS84_2.forward(point)
        shift = np.hypot(
            (result.latitude - point.latitude) * 6.37e6,
            (result.longitude - point.longitude) * 6.37e6 * np.cos(point.latitude)
        )
        assert 10.0 < shift < 200.0

    def test_source_must_define_ellipsoid(self):
        with pytest.raises(ValueError):
            GeographicHelmertTransformation(
                "TEST::11", "No ellipsoid", methods.GEOCENTRIC_TRANSLATIONS_GEOG2D,
                _seven_parameters(), WGS72, catalogs.WGS84_GEOGRAPHIC
            )

    def test_requires_geographic_coordinate(self):
        with pytest.raises(TypeError):
            transformation_catalog.HD72_TO_WGS84_1.forward(Coordinate(0.0, 0.0, 0.0))


class TestMolodensky:
    """Molodensky transformation."""

    def test_forward(self):
        result = _molodensky().forward(POINT)
        expected_latitude = Angle.from_degree(53, 48, 36.563).base_value
        expected_longitude = Angle.from_degree(2, 7, 51.477).base_value
        assert result.latitude == pytest.approx(expected_latitude, abs=5e-8)
        assert result.longitude == pytest.approx(expected_longitude, abs=5e-8)
        assert result.height == pytest.approx(28.09, abs=0.2)

    def test_reverse_undoes_forward(self):
        transformation = _molodensky()
        back = transformation.reverse(transformation.forward(POINT))
        assert back.latitude == pytest.approx(POINT.latitude, abs=1e-11)
        assert back.longitude == pytest.approx(POINT.longitude, abs=1e-11)
        assert back.height == pytest.approx(73.0, abs=1e-4)

    def test_source_must_define_ellipsoid(self):
        with pytest.raises(ValueError):
            MolodenskyTransformation("TEST::12", "No ellipsoid", {}, ED50, catalogs.WGS84_GEOGRAPHIC)


class TestGeographicOffsets:
    """Geographic2D offsets."""

    @staticmethod
    def _offsets(latitude_seconds, longitude_seconds):
        return GeographicOffsetTransformation(
            "TEST::13", "Offsets",
            {
                p.LATITUDE_OFFSET: Angle.from_arc_second(latitude_seconds),
                p.LONGITUDE_OFFSET: Angle.from_arc_second(longitude_seconds),
            },
            catalogs.NAD27_GEOGRAPHIC, catalogs.NAD83_GEOGRAPHIC
        )

    def test_forward_and_reverse(self):
        transformation = self._offsets(-5.86, 0.28)
        point = GeographicCoordinate.from_degrees(38.0, 23.0, 12.0)
        result = transformation.forward(point)
        assert result.latitude == pytest.approx(point.latitude + Angle.from_arc_second(-5.86).base_value)
        assert result.longitude == pytest.approx(point.longitude + Angle.from_arc_second(0.28).base_value)
        assert result.height == 12.0
        back = transformation.reverse(result)
        assert back.to_degrees() == pytest.approx((38.0, 23.0))

    def test_offset_beyond_pole(self):
        with pytest.raises(ValueError):
            self._offsets(3600.0, 0.0).forward(GeographicCoordinate.from_degrees(89.9, 0.0))


class TestEllipsoidToSphere:
    """Gauss conformal mapping onto the sphere."""

    @staticmethod
    def _to_sphere(source=catalogs.AMERSFOORT, latitude=52.156160556, longitude=5.387638889):
        return EllipsoidToSphereTransformation(
            "TEST::14", "Bessel to conformal sphere",
            {
                p.LATITUDE_OF_NATURAL_ORIGIN: Angle.from_degree(latitude),
                p.LONGITUDE_OF_NATURAL_ORIGIN: Angle.from_degree(longitude),
            },
            source, IdentifiedObject("TEST::15", "Conformal sphere")
        )

    def test_origin_maps_to_conformal_latitude(self):
        transformation = self._to_sphere()
        origin = GeographicCoordinate.from_degrees(52.156160556, 5.387638889, 10.0)
        result = transformation.forward(origin)
        chi0 = gauss_sphere(origin.latitude, ellipsoids.BESSEL_1841)[3]
        assert result.latitude == pytest.approx(chi0, abs=1e-12)
        assert result.longitude == pytest.approx(origin.longitude, abs=1e-12)
        assert result.height == 10.0

    def test_radius_is_geometric_mean(self):
        transformation = self._to_sphere()
        phi0 = np.radians(52.156160556)
        expected = np.sqrt(
            ellipsoids.BESSEL_1841.radius_of_meridian_curvature(phi0)
            * ellipsoids.BESSEL_1841.radius_of_prime_vertical_curvature(phi0)
        )
        assert transformation.radius == pytest.approx(expected)

    def test_reverse_undoes_forward(self):
        transformation = self._to_sphere()
        for latitude, longitude in ((53.0, 6.0), (50.8, 3.3), (-10.0, 120.0), (80.0, -170.0)):
            point = GeographicCoordinate.from_degrees(latitude, longitude)
            back = transformation.reverse(transformation.forward(point))
            assert back.to_degrees() == pytest.approx((latitude, longitude), abs=1e-10)

    def test_sphere_is_unchanged(self):
        datum = GeodeticDatum("TEST::16", "Sphere", ellipsoids.CLARKE_1866_AUTHALIC_SPHERE, catalogs.GREENWICH)
        transformation = self._to_sphere(datum, 40.0, 10.0)
        point = GeographicCoordinate.from_degrees(35.0, -20.0)
        result = transformation.forward(point)
        assert result.to_degrees() == pytest.approx((35.0, -20.0), abs=1e-12)

    def test_requires_geographic_coordinate(self):
        with pytest.raises(TypeError):
            self._to_sphere().forward(Coordinate(1.0, 2.0))

    def test_registered(self):
        assert TRANSFORMATION_CLASSES["GEODESY::1002"] is EllipsoidToSphereTransformation


class TestTransformationCatalog:
    """Lookup of cataloged transformations."""

    def test_between(self):
        found = transformation_catalog.between(catalogs.HD72_GEOGRAPHIC, catalogs.WGS84_GEOGRAPHIC)
        assert [t.name for t in found] == [
            "HD72 to WGS 84 (1)", "HD72 to WGS 84 (2)", "HD72 to WGS 84 (3)", "HD72 to WGS 84 (4)"
        ]

    def test_between_is_directional(self):
        assert transformation_catalog.between(catalogs.WGS84_GEOGRAPHIC, catalogs.HD72_GEOGRAPHIC) == []

    def test_from_method(self):
        found = transformation_catalog.from_method(methods.POSITION_VECTOR_TRANSFORMATION_GEOG2D)
        assert found == [transformation_catalog.OSGB36_TO_WGS84_6]

    def test_lookup_by_identifier(self):
        assert transformation_catalog.TRANSFORMATIONS["EPSG::1314"] is transformation_catalog.OSGB36_TO_WGS84_6
        assert len(transformation_catalog.TRANSFORMATIONS) == 8

    def test_class_registry(self):
        assert TRANSFORMATION_CLASSES[methods.MOLODENSKY.identifier] is MolodenskyTransformation
        assert TRANSFORMATION_CLASSES["EPSG::9606"] is GeographicHelmertTransformation
