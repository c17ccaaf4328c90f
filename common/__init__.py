"""
Common utilities and infrastructure for the geodetic reference engine.

This package provides foundational components used across all modules:
- Geodetic constants with provenance
- Unit registry and typed angles and lengths
- Coordinate value types
- Thread-safe lazy attributes
- Logging and audit trail infrastructure
"""

from common.constants import Constant, GeodeticConstants
from common.units import Angle, Length, UnitRegistry, units, ureg
from common.types import Coordinate, GeographicCoordinate
from common.caching import locked_cached_property
from common.logging_config import get_logger, AuditLogger

__all__ = [
    "Constant",
    "GeodeticConstants",
    "Angle",
    "Length",
    "UnitRegistry",
    "units",
    "ureg",
    "Coordinate",
    "GeographicCoordinate",
    "locked_cached_property",
    "get_logger",
    "AuditLogger",
]
