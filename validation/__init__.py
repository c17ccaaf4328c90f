"""
Accuracy validation of coordinate operations.

Round trips over areas of use, published test points and cross-checks
against PROJ.
"""

from validation.accuracy import (
    AccuracyChecker,
    RoundTripConfig,
    ValidationResult,
    angular_residual,
)

__all__ = [
    "AccuracyChecker",
    "RoundTripConfig",
    "ValidationResult",
    "angular_residual",
]
