"""
Fixed-point iteration for reverse projection formulas.

Many reverse formulas recover latitude (or several unknowns at once) by
repeating a correction until the update becomes negligible. They share one
loop here so that the iteration limits come from a single configuration and a
non-converging loop is reported the same way everywhere.
"""

from typing import Any, Callable, Dict, Optional

import numpy as np

from common.logging_config import AuditLogger, get_logger

logger = get_logger(__name__)


def fixed_point(
    step: Callable[[float], float],
    initial: float,
    max_iterations: int = 20,
    tolerance: float = 1e-12,
    context: Optional[Dict[str, Any]] = None
) -> float:
    """Iterate ``x = step(x)`` until two estimates differ by less than `tolerance`.

    Parameters
    ----------
    step : callable
        Function producing the next estimate from the current one.
    initial : float
        First estimate.
    max_iterations : int
        Upper bound on the number of steps.
    tolerance : float
        Convergence threshold on |x_{n+1} - x_n|.
    context : dict, optional
        Identifies the caller in the warning emitted on non-convergence.
        The key ``"operation"`` is used as the operation name.

    Returns
    -------
    float
        The converged value, or the last estimate when the limit is reached.
    """
    current = float(initial)
    change = np.inf
    for _ in range(max_iterations):
        following = float(step(current))
        change = abs(following - current)
        current = following
        if change < tolerance:
            return current

    context = dict(context or {})
    operation = str(context.pop("operation", "unknown"))
    AuditLogger().log_convergence_failure(operation, max_iterations, change, context)
    return current


def fixed_point_array(
    step: Callable[[np.ndarray], np.ndarray],
    initial: np.ndarray,
    max_iterations: int = 20,
    tolerance: float = 1e-12,
    context: Optional[Dict[str, Any]] = None
) -> np.ndarray:
    """Iterate ``x = step(x)`` on an array of unknowns solved together.

    Convergence is reached when no component moves by `tolerance` or more,
    so the components should share a scale. Complex arrays are accepted;
    the change is then measured by modulus.

    Returns
    -------
    numpy.ndarray
        The converged estimate, or the last one when the limit is reached.
    """
    current = np.asarray(initial)
    change = np.inf
    for _ in range(max_iterations):
        following = np.asarray(step(current))
        change = float(np.max(np.abs(following - current)))
        current = following
        if change < tolerance:
            return current

    context = dict(context or {})
    operation = str(context.pop("operation", "unknown"))
    AuditLogger().log_convergence_failure(operation, max_iterations, change, context)
    return current
