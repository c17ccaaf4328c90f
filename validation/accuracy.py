"""
Accuracy Checks for Coordinate Operations.

This module verifies coordinate operations against their correctness
contracts and records every residual in the audit trail.

Check Categories
----------------
1. Round trip: reverse(forward(g)) returns g over the area of use
2. Published test points: forward reproduces a documented grid coordinate
3. Cross-check: forward agrees with PROJ through pyproj
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import numpy as np
from pyproj import Proj

from common.logging_config import AuditLogger, get_logger
from common.types import Coordinate, GeographicCoordinate
from operations.base import CoordinateOperation, CoordinateProjection

logger = get_logger(__name__)


@dataclass
class RoundTripConfig:
    """Configuration of round-trip sampling.

    Attributes
    ----------
    tolerance_degrees : float
        Largest acceptable angular residual; the operation's own accuracy
        is used when it is larger.
    samples : int
        Number of coordinates sampled in the area of use.
    seed : int
        Seed of the random generator, for reproducible runs.
    latitude_limit : float
        Samples are restricted to |latitude| <= limit, in degrees.
    """
    tolerance_degrees: float = 1e-9
    samples: int = 100
    seed: int = 42
    latitude_limit: float = 89.0


@dataclass
class ValidationResult:
    """Result of an accuracy check.

    Attributes
    ----------
    check_name : str
        Name of the check.
    operation : str
        Identifier of the operation checked.
    passed : bool
        Whether every residual is within tolerance.
    max_residual : float
        Largest residual found.
    tolerance : float
        Tolerance applied.
    details : dict
        Additional details.
    """
    check_name: str
    operation: str
    passed: bool
    max_residual: float
    tolerance: float
    details: Dict[str, Any] = field(default_factory=dict)


def angular_residual(first: GeographicCoordinate, second: GeographicCoordinate) -> float:
    """Largest of the latitude and scaled longitude differences, in degrees."""
    dlat = abs(first.latitude - second.latitude)
    dlon = abs(np.remainder(first.longitude - second.longitude + np.pi, 2 * np.pi) - np.pi)
    return float(np.degrees(max(dlat, dlon * np.cos(first.latitude))))


class AccuracyChecker:
    """Checker for the accuracy of coordinate operations.

    Parameters
    ----------
    config : RoundTripConfig, optional
        Sampling configuration of round-trip checks.

    Examples
    --------
    >>> from operations.factory import british_national_grid
    >>> checker = AccuracyChecker(RoundTripConfig(samples=10))
    >>> checker.check_round_trip(british_national_grid()).passed
    True
    """

    def __init__(self, config: Optional[RoundTripConfig] = None):
        self.config = config or RoundTripConfig()
        self._audit = AuditLogger()

    def sample(self, operation: CoordinateOperation) -> List[GeographicCoordinate]:
        """Draw coordinates uniformly inside the operation's area of use."""
        area = operation.area_of_use
        limit = self.config.latitude_limit
        south = max(area.south.degrees, -limit)
        north = min(area.north.degrees, limit)
        west = area.west.degrees
        east = area.east.degrees
        if area.is_crossing_antimeridian:
            east += 360.0
        rng = np.random.default_rng(self.config.seed)
        latitudes = rng.uniform(south, north, self.config.samples)
        longitudes = rng.uniform(west, east, self.config.samples)
        return [
            GeographicCoordinate.from_degrees(float(lat), float(lon))
            for lat, lon in zip(latitudes, longitudes)
        ]

    def check_round_trip(
        self,
        operation: CoordinateOperation,
        coordinates: Optional[List[GeographicCoordinate]] = None
    ) -> ValidationResult:
        """Check that the reverse undoes the forward.

        Parameters
        ----------
        operation : CoordinateOperation
            A reversible operation taking geographic coordinates.
        coordinates : list of GeographicCoordinate, optional
            Points to test; sampled from the area of use when omitted.

        Returns
        -------
        ValidationResult
            Result with the worst angular residual in degrees.
        """
        tolerance = max(self.config.tolerance_degrees, getattr(operation, "ACCURACY", 0.0))
        points = coordinates if coordinates is not None else self.sample(operation)
        residuals = []
        for point in points:
            result = operation.reverse(operation.forward(point))
            residual = angular_residual(point, result)
            residuals.append(residual)
            self._audit.log_accuracy_residual(
                check="round_trip",
                operation=operation.identifier,
                residual_value=residual,
                tolerance=tolerance,
                context={"latitude": point.latitude, "longitude": point.longitude}
            )

        max_residual = max(residuals, default=0.0)
        passed = max_residual <= tolerance
        if not passed:
            logger.warning(f"Round trip of {operation.identifier} exceeds tolerance: {max_residual:.3e} deg")
        return ValidationResult(
            check_name="round_trip",
            operation=operation.identifier,
            passed=passed,
            max_residual=max_residual,
            tolerance=tolerance,
            details={"samples": len(points)}
        )

    def check_test_point(
        self,
        operation: CoordinateOperation,
        geographic: GeographicCoordinate,
        expected: Coordinate,
        tolerance: float = 0.01
    ) -> ValidationResult:
        """Check a forward result against a published coordinate.

        The residual is the planar distance in the unit of `expected`.
        """
        result = operation.forward(geographic)
        residual = float(np.hypot(result.x - expected.x, result.y - expected.y))
        passed = self._audit.log_accuracy_residual(
            check="test_point",
            operation=operation.identifier,
            residual_value=residual,
            tolerance=tolerance,
            context={"expected": (expected.x, expected.y), "computed": (result.x, result.y)}
        )
        return ValidationResult(
            check_name="test_point",
            operation=operation.identifier,
            passed=passed,
            max_residual=residual,
            tolerance=tolerance,
            details={"computed": result}
        )

    def check_against_pyproj(
        self,
        projection: CoordinateProjection,
        coordinates: Optional[List[GeographicCoordinate]] = None,
        tolerance: float = 1e-3
    ) -> ValidationResult:
        """Compare forward results with PROJ, in metres.

        Raises
        ------
        NotImplementedError
            If the projection has no PROJ equivalent.
        """
        definition = projection.to_proj4()
        if definition is None:
            raise NotImplementedError(f"The projection '{projection.name}' has no PROJ definition.")
        transformer = Proj(definition)
        metres = projection.ellipsoid.semi_major_axis.base_value / projection.ellipsoid.semi_major_axis.value

        points = coordinates if coordinates is not None else self.sample(projection)
        residuals = []
        for point in points:
            result = projection.forward(point)
            latitude, longitude = point.to_degrees()
            x, y = transformer(longitude, latitude)
            residual = float(np.hypot(result.x * metres - x, result.y * metres - y))
            residuals.append(residual)
            self._audit.log_accuracy_residual(
                check="pyproj",
                operation=projection.identifier,
                residual_value=residual,
                tolerance=tolerance,
                context={"latitude": latitude, "longitude": longitude}
            )

        max_residual = max(residuals, default=0.0)
        return ValidationResult(
            check_name="pyproj",
            operation=projection.identifier,
            passed=max_residual <= tolerance,
            max_residual=max_residual,
            tolerance=tolerance,
            details={"definition": definition, "samples": len(points)}
        )
