"""
Tests for the accuracy checker and the audit trail.
"""

import json

import numpy as np
import pytest

from common.logging_config import AuditLogger
from common.types import Coordinate, GeographicCoordinate
from common.units import Angle
from geodesy.iteration import fixed_point, fixed_point_array
from operations.factory import british_national_grid, utm_zone
from validation import AccuracyChecker, RoundTripConfig, ValidationResult, angular_residual

BNG_TEST_POINT = GeographicCoordinate.from_angles(Angle.from_degree(50, 30), Angle.from_degree(0, 30))
BNG_EXPECTED = Coordinate(577274.99, 69740.50)


class TestAuditLogger:
    """Tests for the audit trail."""

    def test_singleton(self):
        assert AuditLogger() is AuditLogger()

    def test_run_summary(self):
        audit = AuditLogger()
        with audit.run_context("test_run_summary", {"tolerance": 0.01}) as run:
            assert audit.log_accuracy_residual("test_point", "EPSG::1", 0.004, 0.01)
            assert not audit.log_accuracy_residual("test_point", "EPSG::1", 0.02, 0.01)
            audit.log_accuracy_residual("test_point", "EPSG::2", 0.001, 0.01)
        assert len(run.config_hash) == 16

        summary = audit.get_run_summary("test_run_summary")
        assert summary["total_checks"] == 3
        assert summary["failed_checks"] == 1
        assert summary["worst_residual_by_operation"] == {"EPSG::1": 0.02, "EPSG::2": 0.001}
        assert summary["convergence_failures"] == 0
        assert summary["end_time"] is not None

    def test_config_hash_is_deterministic(self):
        audit = AuditLogger()
        with audit.run_context("test_hash_a", {"a": 1, "b": 2}) as first:
            pass
        with audit.run_context("test_hash_b", {"b": 2, "a": 1}) as second:
            pass
        assert first.config_hash == second.config_hash

    def test_unknown_run(self):
        with pytest.raises(KeyError):
            AuditLogger().get_run_summary("no_such_run")

    def test_residuals_outside_a_run_are_not_recorded(self):
        audit = AuditLogger()
        with audit.run_context("test_outside"):
            pass
        audit.log_accuracy_residual("test_point", "EPSG::1", 1.0, 0.01)
        assert audit.get_run_summary("test_outside")["total_checks"] == 0

    def test_export(self, tmp_path):
        audit = AuditLogger()
        with audit.run_context("test_export"):
            audit.log_accuracy_residual("round_trip", "EPSG::3", 1e-10, 1e-9, {"latitude": 0.5})
            audit.log_convergence_failure("EPSG::3", 20, 1e-6, {"northing": 100.0})
        path = tmp_path / "audit.json"
        audit.export_run_artifacts("test_export", path)

        artifacts = json.loads(path.read_text())
        assert artifacts["run_id"] == "test_export"
        assert artifacts["accuracy_residuals"][0]["context"] == {"latitude": 0.5}
        assert artifacts["convergence_failures"][0]["iterations"] == 20


class TestFixedPoint:
    """Tests for the shared fixed-point iteration."""

    def test_converges(self):
        assert fixed_point(np.cos, 1.0, max_iterations=200, tolerance=1e-14) == pytest.approx(0.7390851332151607)

    def test_non_convergence_is_audited(self):
        audit = AuditLogger()
        with audit.run_context("test_fixed_point"):
            # oscillates between two values
            result = fixed_point(lambda x: -x, 1.0, max_iterations=5, tolerance=1e-12,
                                 context={"operation": "TEST::1"})
        assert result == -1.0
        assert audit.get_run_summary("test_fixed_point")["convergence_failures"] == 1

    def test_array_converges_componentwise(self):
        result = fixed_point_array(np.cos, np.array([1.0, 0.0, -1.0]), max_iterations=200, tolerance=1e-14)
        assert result.tolist() == pytest.approx([0.7390851332151607] * 3)

    def test_array_accepts_complex_unknowns(self):
        target = complex(0.1, 0.05)
        g = complex(0.02, 0.08)
        result = fixed_point_array(
            lambda h: (target + 2 * g * h**3) / (3 * g * h**2 + 1), np.array([target]), tolerance=1e-15
        )
        root = result[0]
        assert abs(root + g * root**3 - target) < 1e-14

    def test_array_non_convergence_is_audited(self):
        audit = AuditLogger()
        with audit.run_context("test_fixed_point_array"):
            result = fixed_point_array(lambda x: -x, np.array([1.0, 2.0]), max_iterations=3,
                                       context={"operation": "TEST::2"})
        assert result.tolist() == [-1.0, -2.0]
        assert audit.get_run_summary("test_fixed_point_array")["convergence_failures"] == 1


class TestAccuracyChecker:
    """Tests for the accuracy checks."""

    def test_angular_residual_wraps_longitude(self):
        first = GeographicCoordinate.from_degrees(0.0, 180.0)
        second = GeographicCoordinate.from_degrees(0.0, -180.0)
        assert angular_residual(first, second) == pytest.approx(0.0, abs=1e-12)

    def test_sample_is_inside_area_and_reproducible(self):
        projection = british_national_grid()
        checker = AccuracyChecker(RoundTripConfig(samples=50))
        samples = checker.sample(projection)
        assert len(samples) == 50
        area = projection.area_of_use
        for point in samples:
            latitude, longitude = point.to_degrees()
            assert area.south.degrees <= latitude <= area.north.degrees
            assert area.west.degrees <= longitude <= area.east.degrees
        again = checker.sample(projection)
        assert [point.to_degrees() for point in again] == [point.to_degrees() for point in samples]

    def test_sample_respects_latitude_limit(self):
        checker = AccuracyChecker(RoundTripConfig(samples=50, latitude_limit=60.0))
        for point in checker.sample(utm_zone(31)):
            assert abs(point.to_degrees()[0]) <= 60.0

    def test_round_trip(self):
        checker = AccuracyChecker(RoundTripConfig(samples=20))
        result = checker.check_round_trip(british_national_grid())
        assert isinstance(result, ValidationResult)
        assert result.passed
        assert result.check_name == "round_trip"
        assert result.operation == "EPSG::19916"
        assert result.details["samples"] == 20

    def test_round_trip_on_given_points(self):
        checker = AccuracyChecker()
        points = [GeographicCoordinate.from_degrees(52.0, -1.0), GeographicCoordinate.from_degrees(57.0, -4.0)]
        result = checker.check_round_trip(british_national_grid(), points)
        assert result.passed
        assert result.details["samples"] == 2

    def test_published_test_point(self):
        checker = AccuracyChecker()
        result = checker.check_test_point(british_national_grid(), BNG_TEST_POINT, BNG_EXPECTED)
        assert result.passed
        assert result.max_residual < 0.01

    def test_failing_test_point(self):
        checker = AccuracyChecker()
        wrong = Coordinate(BNG_EXPECTED.x + 1.0, BNG_EXPECTED.y)
        result = checker.check_test_point(british_national_grid(), BNG_TEST_POINT, wrong)
        assert not result.passed
        assert result.max_residual == pytest.approx(1.0, abs=0.01)

    def test_checks_are_audited(self):
        audit = AuditLogger()
        with audit.run_context("test_checks_are_audited"):
            AccuracyChecker(RoundTripConfig(samples=5)).check_round_trip(british_national_grid())
        summary = audit.get_run_summary("test_checks_are_audited")
        assert summary["total_checks"] == 5
        assert summary["failed_checks"] == 0
