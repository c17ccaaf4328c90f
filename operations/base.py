"""
Coordinate Operation Base Types.

A coordinate operation binds a method descriptor to a concrete set of
parameter values and maps coordinates forward and, where the method allows,
in reverse. Operations are immutable after construction; constants derived
from the parameters are computed on first use under a lock and reused, so one
instance may serve many threads.

Class hierarchy
---------------
- `CoordinateOperation`: validated parameters, forward/reverse dispatch
- `CoordinateConversion`: an operation optionally bound to an ellipsoid
- `CoordinateProjection`: a conversion from geographic to planar coordinates
- `CoordinateTransformation`: an operation between two datums

Parameter Validation
--------------------
Construction fails when the method declares a parameter that is missing
(ValueError), when a value has the wrong quantity kind (TypeError), or when a
length is not expressed in the unit of the bound ellipsoid (ValueError).
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from common.logging_config import get_logger
from common.types import Coordinate, GeographicCoordinate
from common.units import Angle, Length
from geodesy.iteration import fixed_point, fixed_point_array
from geodesy.latitudes import normalize_longitude
from operations.methods import OperationMethod
from operations.parameters import OperationParameter, ParameterKind
from reference.area_of_use import AreaOfUse
from reference.base import IdentifiedObject
from reference.ellipsoid import Ellipsoid

logger = get_logger(__name__)

ParameterValue = Any


@dataclass
class OperationConfig:
    """Configuration of iterative reverse formulas.

    Attributes
    ----------
    max_iterations : int
        Upper bound on the number of iterations of any reverse formula.
    tolerance : float
        Convergence threshold; radians for latitude iterations.
    """
    max_iterations: int = 20
    tolerance: float = 1e-12


class CoordinateOperation(IdentifiedObject):
    """Base class of coordinate operations.

    Parameters
    ----------
    identifier, name : str
        Identification of the operation.
    method : OperationMethod
        The algorithm; declares the required parameters.
    parameters : mapping
        Value for every parameter of the method. Entries for parameters the
        method does not declare are ignored.
    area_of_use : AreaOfUse, optional
        Validity region; the undefined area when omitted.
    config : OperationConfig, optional
        Iteration limits for reverse formulas.

    Raises
    ------
    ValueError
        If a required parameter is missing or a length has the wrong unit.
    TypeError
        If a parameter value has the wrong quantity kind.
    """

    def __init__(
        self,
        identifier: str,
        name: str,
        method: OperationMethod,
        parameters: Optional[Mapping[OperationParameter, ParameterValue]],
        area_of_use: Optional[AreaOfUse] = None,
        config: Optional[OperationConfig] = None,
        remarks: Optional[str] = None,
        aliases: Sequence[str] = ()
    ):
        super().__init__(identifier, name, remarks, aliases)
        if method is None:
            raise ValueError(f"The method of '{name}' is not specified.")
        self._method = method
        self._area_of_use = area_of_use or AreaOfUse.UNDEFINED
        self._config = config or OperationConfig()
        self._parameters = MappingProxyType(self._validate(parameters or {}))
        logger.debug(f"Created {type(self).__name__} {self.identifier} ({method.name})")

    def _validate(self, parameters: Mapping[OperationParameter, ParameterValue]) -> Dict[OperationParameter, ParameterValue]:
        retained: Dict[OperationParameter, ParameterValue] = {}
        for parameter in self._method.parameters:
            value = parameters.get(parameter)
            if value is None:
                raise ValueError(
                    f"The parameter '{parameter.name}' ({parameter.identifier}) "
                    f"is required by '{self._method.name}'."
                )
            self._check_kind(parameter, value)
            retained[parameter] = value
        return retained

    def _check_kind(self, parameter: OperationParameter, value: ParameterValue) -> None:
        if parameter.kind == ParameterKind.ANGLE:
            if not isinstance(value, Angle):
                raise TypeError(f"The parameter '{parameter.name}' must be an angle.")
        elif parameter.kind == ParameterKind.LENGTH:
            if not isinstance(value, Length):
                raise TypeError(f"The parameter '{parameter.name}' must be a length.")
            self._check_length(parameter, value)
        elif parameter.kind == ParameterKind.SCALE:
            if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
                raise TypeError(f"The parameter '{parameter.name}' must be a number.")

    def _check_length(self, parameter: OperationParameter, value: Length) -> None:
        """Hook for unit checks of length parameters."""

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def method(self) -> OperationMethod:
        return self._method

    @property
    def parameters(self) -> Mapping[OperationParameter, ParameterValue]:
        """Read-only parameter map."""
        return self._parameters

    @property
    def area_of_use(self) -> AreaOfUse:
        return self._area_of_use

    @property
    def config(self) -> OperationConfig:
        return self._config

    @property
    def is_reversible(self) -> bool:
        return self._method.is_reversible

    # =========================================================================
    # Parameter values as floats
    # =========================================================================

    def _angle(self, parameter: OperationParameter) -> float:
        """Value of an angular parameter in radians."""
        return self._parameters[parameter].base_value

    def _length(self, parameter: OperationParameter) -> float:
        """Value of a length parameter in metres."""
        return self._parameters[parameter].base_value

    def _scale(self, parameter: OperationParameter) -> float:
        return float(self._parameters[parameter])

    def _iterate(self, step: Callable[[float], float], initial: float, **context) -> float:
        """Run a fixed-point iteration with the configured limits."""
        context["operation"] = self.identifier
        return fixed_point(step, initial, self._config.max_iterations, self._config.tolerance, context)

    def _iterate_array(self, step: Callable[[np.ndarray], np.ndarray], initial: np.ndarray, **context) -> np.ndarray:
        """Run a fixed-point iteration on several unknowns with the configured limits."""
        context["operation"] = self.identifier
        return fixed_point_array(step, initial, self._config.max_iterations, self._config.tolerance, context)

    # =========================================================================
    # Forward / reverse
    # =========================================================================

    def forward(self, coordinate):
        """Apply the operation."""
        return self._compute_forward(coordinate)

    def reverse(self, coordinate):
        """Apply the inverse of the operation.

        Raises
        ------
        NotImplementedError
            If the method is not reversible.
        """
        if not self.is_reversible:
            raise NotImplementedError(f"The method '{self._method.name}' has no reverse computation.")
        return self._compute_reverse(coordinate)

    def reverse_operation(self) -> "ReverseCoordinateOperation":
        """Return an operation whose forward direction is this reverse."""
        if not self.is_reversible:
            raise NotImplementedError(f"The method '{self._method.name}' has no reverse computation.")
        return ReverseCoordinateOperation(self)

    def _compute_forward(self, coordinate):
        raise NotImplementedError

    def _compute_reverse(self, coordinate):
        raise NotImplementedError


class ReverseCoordinateOperation:
    """The inverse direction of a reversible operation."""

    def __init__(self, operation: CoordinateOperation):
        self._operation = operation

    @property
    def operation(self) -> CoordinateOperation:
        return self._operation

    @property
    def identifier(self) -> str:
        return self._operation.identifier

    @property
    def name(self) -> str:
        return self._operation.name

    @property
    def method(self) -> OperationMethod:
        return self._operation.method

    @property
    def parameters(self) -> Mapping[OperationParameter, ParameterValue]:
        return self._operation.parameters

    @property
    def area_of_use(self) -> AreaOfUse:
        return self._operation.area_of_use

    @property
    def is_reversible(self) -> bool:
        return True

    def forward(self, coordinate):
        return self._operation.reverse(coordinate)

    def reverse(self, coordinate):
        return self._operation.forward(coordinate)

    def reverse_operation(self) -> CoordinateOperation:
        return self._operation

    def __repr__(self):
        return f"ReverseCoordinateOperation({self._operation!r})"


class CoordinateConversion(CoordinateOperation):
    """An operation defined analytically rather than empirically.

    Conversions bound to an ellipsoid require length parameters in the
    ellipsoid's unit and read them back in that unit.
    """

    def __init__(
        self,
        identifier: str,
        name: str,
        method: OperationMethod,
        parameters: Optional[Mapping[OperationParameter, ParameterValue]],
        ellipsoid: Optional[Ellipsoid] = None,
        area_of_use: Optional[AreaOfUse] = None,
        config: Optional[OperationConfig] = None,
        **kwargs
    ):
        self._ellipsoid = ellipsoid
        super().__init__(identifier, name, method, parameters, area_of_use, config, **kwargs)

    @property
    def ellipsoid(self) -> Optional[Ellipsoid]:
        return self._ellipsoid

    def _check_length(self, parameter: OperationParameter, value: Length) -> None:
        if self._ellipsoid is not None and value.unit != self._ellipsoid.unit:
            raise ValueError(
                f"The parameter '{parameter.name}' is measured in '{value.unit}', "
                f"the ellipsoid '{self._ellipsoid.name}' in '{self._ellipsoid.unit}'."
            )

    def _length(self, parameter: OperationParameter) -> float:
        """Value of a length parameter in the ellipsoid unit."""
        if self._ellipsoid is None:
            return super()._length(parameter)
        return self._parameters[parameter].value


class CoordinateProjection(CoordinateConversion):
    """A map projection from geographic to planar coordinates.

    Subclasses fix `METHOD`, implement `_compute_forward` and
    `_compute_reverse` on floats, and may declare:

    - ``REQUIRES_SPHERE``: the method is defined for spheres only
    - ``ACCURACY``: round-trip tolerance in degrees
    - ``_proj4_parameters()``: the equivalent PROJ definition

    Parameters
    ----------
    identifier, name : str
        Identification of the projection.
    parameters : mapping
        Parameter values; lengths in the unit of `ellipsoid`.
    ellipsoid : Ellipsoid
        The ellipsoid the projection is defined on.
    area_of_use : AreaOfUse, optional
        Validity region.
    config : OperationConfig, optional
        Iteration limits for reverse formulas.
    method : OperationMethod, optional
        Overrides `METHOD`, for variants sharing one implementation.
    """

    METHOD: Optional[OperationMethod] = None
    REQUIRES_SPHERE = False
    ACCURACY = 1e-9

    def __init__(
        self,
        identifier: str,
        name: str,
        parameters: Optional[Mapping[OperationParameter, ParameterValue]],
        ellipsoid: Ellipsoid,
        area_of_use: Optional[AreaOfUse] = None,
        config: Optional[OperationConfig] = None,
        method: Optional[OperationMethod] = None,
        **kwargs
    ):
        if ellipsoid is None:
            raise ValueError(f"The ellipsoid of '{name}' is not specified.")
        if self.REQUIRES_SPHERE and not ellipsoid.is_sphere:
            raise ValueError(f"The ellipsoid '{ellipsoid.name}' is not spherical.")
        super().__init__(
            identifier, name, method or self.METHOD, parameters, ellipsoid,
            area_of_use, config, **kwargs
        )

    @property
    def ellipsoid(self) -> Ellipsoid:
        return self._ellipsoid

    @property
    def _a(self) -> float:
        return self._ellipsoid.semi_major_axis.value

    @property
    def _e(self) -> float:
        return self._ellipsoid.eccentricity

    @property
    def _e2(self) -> float:
        return self._ellipsoid.eccentricity_squared

    def forward(self, coordinate: GeographicCoordinate) -> Coordinate:
        """Project a geographic coordinate.

        Raises
        ------
        TypeError
            If the input is not a `GeographicCoordinate`.
        """
        if not isinstance(coordinate, GeographicCoordinate):
            raise TypeError("A projection maps geographic coordinates.")
        easting, northing = self._compute_forward(coordinate.latitude, coordinate.longitude)
        return Coordinate(float(easting), float(northing))

    def reverse(self, coordinate: Coordinate) -> GeographicCoordinate:
        """Return the geographic coordinate of a projected coordinate."""
        if not self.is_reversible:
            raise NotImplementedError(f"The method '{self._method.name}' has no reverse computation.")
        if not isinstance(coordinate, Coordinate):
            raise TypeError("A projection reverse maps planar coordinates.")
        latitude, longitude = self._compute_reverse(coordinate.x, coordinate.y)
        return self._geographic(latitude, longitude)

    @staticmethod
    def _geographic(latitude: float, longitude: float) -> GeographicCoordinate:
        """Build a geographic coordinate, absorbing rounding beyond the poles."""
        latitude = float(np.clip(latitude, -np.pi / 2, np.pi / 2))
        return GeographicCoordinate(latitude, normalize_longitude(longitude))

    @staticmethod
    def _delta_longitude(longitude: float, origin: float) -> float:
        """Longitude difference from `origin` wrapped into [-π, π]."""
        return normalize_longitude(longitude - origin)

    def _compute_forward(self, latitude: float, longitude: float) -> Tuple[float, float]:
        raise NotImplementedError

    def _compute_reverse(self, easting: float, northing: float) -> Tuple[float, float]:
        raise NotImplementedError

    # =========================================================================
    # PROJ definition
    # =========================================================================

    def _proj4_parameters(self) -> Optional[List[Tuple[str, Any]]]:
        """Return PROJ key/value pairs for the method, or None if unsupported."""
        return None

    def _degrees(self, parameter: OperationParameter) -> float:
        return float(np.degrees(self._angle(parameter)))

    def _metres(self, parameter: OperationParameter) -> float:
        return self._parameters[parameter].base_value

    def to_proj4(self) -> Optional[str]:
        """Return an equivalent PROJ string in metres, or None.

        Examples
        --------
        >>> from operations.factory import world_mercator
        >>> world_mercator().to_proj4()
        '+proj=merc +lon_0=0 +k_0=1 +x_0=0 +y_0=0 +a=6378137 +b=6356752.31424518 +units=m +no_defs'
        """
        parameters = self._proj4_parameters()
        if parameters is None:
            return None
        a = self._ellipsoid.semi_major_axis.base_value
        b = self._ellipsoid.semi_minor_axis.base_value
        parts = []
        for key, value in parameters:
            if value is None:
                parts.append(f"+{key}")
            elif isinstance(value, float):
                parts.append(f"+{key}={value:.15g}")
            else:
                parts.append(f"+{key}={value}")
        parts += [f"+a={a:.15g}", f"+b={b:.15g}", "+units=m", "+no_defs"]
        return " ".join(parts)


class CoordinateTransformation(CoordinateOperation):
    """An empirically derived operation between two reference frames.

    Parameters
    ----------
    source, target : IdentifiedObject
        Source and target reference systems (or datums).
    """

    def __init__(
        self,
        identifier: str,
        name: str,
        method: OperationMethod,
        parameters: Optional[Mapping[OperationParameter, ParameterValue]],
        source: IdentifiedObject,
        target: IdentifiedObject,
        area_of_use: Optional[AreaOfUse] = None,
        config: Optional[OperationConfig] = None,
        **kwargs
    ):
        if source is None or target is None:
            raise ValueError(f"The source and target of '{name}' must be specified.")
        self._source = source
        self._target = target
        super().__init__(identifier, name, method, parameters, area_of_use, config, **kwargs)

    @property
    def source(self) -> IdentifiedObject:
        return self._source

    @property
    def target(self) -> IdentifiedObject:
        return self._target
