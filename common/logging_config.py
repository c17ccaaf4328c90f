"""
Logging Configuration and Audit Trail Infrastructure.

This module provides structured logging for the geodetic engine and an audit
trail of accuracy checks. Accuracy runs (round trips, published test points,
cross-checks against an external library) record every residual so a failing
operation can be traced afterwards.

Audit Requirements
------------------
Every accuracy run produces:
- Configuration hash
- Residual summaries per coordinate operation
- Counts of non-converging iterations
"""

import hashlib
import json
import logging
import sys
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional
from contextlib import contextmanager
import threading


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Get a logger configured for the geodetic engine.

    Parameters
    ----------
    name : str
        Logger name (typically __name__).
    level : int
        Logging level.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            '%(asctime)s | %(name)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


@dataclass
class ConvergenceFailure:
    """Record of an iteration that stopped before reaching its tolerance.

    Attributes
    ----------
    timestamp : datetime
        When the iteration gave up.
    operation : str
        Identifier of the coordinate operation.
    iterations : int
        Number of iterations performed.
    last_change : float
        Magnitude of the last update.
    context : dict
        Additional context (input coordinate, direction).
    """
    timestamp: datetime
    operation: str
    iterations: int
    last_change: float
    context: Dict[str, Any] = field(default_factory=dict)


@dataclass
class AccuracyResidual:
    """Record of an accuracy check.

    Attributes
    ----------
    timestamp : datetime
        When the residual was computed.
    check : str
        Kind of check ('round_trip', 'test_point', 'pyproj').
    operation : str
        Identifier of the coordinate operation checked.
    residual_value : float
        The residual magnitude.
    tolerance : float
        The acceptable tolerance.
    passed : bool
        Whether the residual is within tolerance.
    context : dict
        Additional context.
    """
    timestamp: datetime
    check: str
    operation: str
    residual_value: float
    tolerance: float
    passed: bool
    context: Dict[str, Any] = field(default_factory=dict)


@dataclass
class RunMetadata:
    """Metadata for an accuracy run."""
    run_id: str
    start_time: datetime
    end_time: Optional[datetime] = None
    config_hash: str = ""
    convergence_failures: List[ConvergenceFailure] = field(default_factory=list)
    accuracy_residuals: List[AccuracyResidual] = field(default_factory=list)

    def compute_config_hash(self, config: Dict[str, Any]) -> str:
        """Compute a deterministic hash of the configuration.

        Parameters
        ----------
        config : dict
            The configuration dictionary.

        Returns
        -------
        str
            SHA-256 hash of the configuration.
        """
        config_str = json.dumps(config, sort_keys=True, default=str)
        self.config_hash = hashlib.sha256(config_str.encode()).hexdigest()[:16]
        return self.config_hash


class AuditLogger:
    """Central logging facility for accuracy audit trails.

    Thread Safety
    -------------
    The instance is a process-wide singleton created under a lock; records
    are appended under the same lock.

    Examples
    --------
    >>> audit = AuditLogger()
    >>> with audit.run_context("epsg_test_points") as run:
    ...     passed = audit.log_accuracy_residual(
    ...         check="test_point",
    ...         operation="EPSG::19916",
    ...         residual_value=0.004,
    ...         tolerance=0.01
    ...     )
    >>> summary = audit.get_run_summary("epsg_test_points")
    """

    _instance: Optional['AuditLogger'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'AuditLogger':
        """Singleton pattern for global audit logger."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        """Initialize the audit logger."""
        if self._initialized:
            return

        self._runs: Dict[str, RunMetadata] = {}
        self._current_run_id: Optional[str] = None
        self._logger = get_logger("audit")
        self._initialized = True

    @contextmanager
    def run_context(self, run_id: str, config: Optional[Dict[str, Any]] = None):
        """Context manager for an accuracy run.

        Parameters
        ----------
        run_id : str
            Unique identifier for this run.
        config : dict, optional
            Configuration to compute hash from.

        Yields
        ------
        RunMetadata
            The metadata object for this run.
        """
        metadata = RunMetadata(run_id=run_id, start_time=datetime.now())

        if config:
            metadata.compute_config_hash(config)

        with self._lock:
            self._runs[run_id] = metadata
            self._current_run_id = run_id

        self._logger.info(f"Starting run {run_id} with config hash {metadata.config_hash}")

        try:
            yield metadata
        finally:
            metadata.end_time = datetime.now()
            with self._lock:
                self._current_run_id = None
            self._logger.info(
                f"Completed run {run_id}. "
                f"Accuracy checks: {len(metadata.accuracy_residuals)}, "
                f"Convergence failures: {len(metadata.convergence_failures)}"
            )

    def _current_run(self) -> Optional[RunMetadata]:
        if self._current_run_id is None:
            return None
        return self._runs.get(self._current_run_id)

    def log_convergence_failure(
        self,
        operation: str,
        iterations: int,
        last_change: float,
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log an iteration that did not converge.

        Parameters
        ----------
        operation : str
            Identifier of the coordinate operation.
        iterations : int
            Number of iterations performed.
        last_change : float
            Magnitude of the last update.
        context : dict, optional
            Additional context.
        """
        failure = ConvergenceFailure(
            timestamp=datetime.now(),
            operation=operation,
            iterations=iterations,
            last_change=last_change,
            context=context or {}
        )

        with self._lock:
            run = self._current_run()
            if run is not None:
                run.convergence_failures.append(failure)

        self._logger.warning(
            f"NO CONVERGENCE | {operation} | iterations={iterations} | "
            f"last change={last_change:.3e}"
        )

    def log_accuracy_residual(
        self,
        check: str,
        operation: str,
        residual_value: float,
        tolerance: float,
        context: Optional[Dict[str, Any]] = None
    ) -> bool:
        """Log an accuracy residual.

        Parameters
        ----------
        check : str
            Kind of check performed.
        operation : str
            Identifier of the coordinate operation.
        residual_value : float
            The computed residual.
        tolerance : float
            The acceptable tolerance.
        context : dict, optional
            Additional context.

        Returns
        -------
        bool
            Whether the residual is within tolerance.
        """
        passed = abs(residual_value) <= tolerance

        residual = AccuracyResidual(
            timestamp=datetime.now(),
            check=check,
            operation=operation,
            residual_value=residual_value,
            tolerance=tolerance,
            passed=passed,
            context=context or {}
        )

        with self._lock:
            run = self._current_run()
            if run is not None:
                run.accuracy_residuals.append(residual)

        status = "PASS" if passed else "FAIL"
        log_msg = (
            f"ACCURACY CHECK | {check} | {operation} | {status} | "
            f"residual={residual_value:.6e} (tolerance={tolerance:.6e})"
        )

        if passed:
            self._logger.debug(log_msg)
        else:
            self._logger.warning(log_msg)
        return passed

    def get_run_summary(self, run_id: str) -> Dict[str, Any]:
        """Get a summary of an accuracy run.

        Parameters
        ----------
        run_id : str
            The run identifier.

        Returns
        -------
        dict
            Summary including pass/fail counts and the worst residual per operation.
        """
        if run_id not in self._runs:
            raise KeyError(f"No run found with ID {run_id}")

        metadata = self._runs[run_id]

        worst: Dict[str, float] = {}
        for r in metadata.accuracy_residuals:
            worst[r.operation] = max(worst.get(r.operation, 0.0), abs(r.residual_value))

        return {
            "run_id": run_id,
            "config_hash": metadata.config_hash,
            "start_time": metadata.start_time.isoformat(),
            "end_time": metadata.end_time.isoformat() if metadata.end_time else None,
            "total_checks": len(metadata.accuracy_residuals),
            "failed_checks": sum(1 for r in metadata.accuracy_residuals if not r.passed),
            "worst_residual_by_operation": worst,
            "convergence_failures": len(metadata.convergence_failures),
        }

    def export_run_artifacts(self, run_id: str, output_path: Path) -> None:
        """Export all audit artifacts for a run to JSON.

        Parameters
        ----------
        run_id : str
            The run identifier.
        output_path : Path
            Path to write the JSON file.
        """
        if run_id not in self._runs:
            raise KeyError(f"No run found with ID {run_id}")

        metadata = self._runs[run_id]

        artifacts = {
            "run_id": metadata.run_id,
            "config_hash": metadata.config_hash,
            "start_time": metadata.start_time.isoformat(),
            "end_time": metadata.end_time.isoformat() if metadata.end_time else None,
            "convergence_failures": [
                {
                    "timestamp": f.timestamp.isoformat(),
                    "operation": f.operation,
                    "iterations": f.iterations,
                    "last_change": f.last_change,
                    "context": f.context
                }
                for f in metadata.convergence_failures
            ],
            "accuracy_residuals": [
                {
                    "timestamp": r.timestamp.isoformat(),
                    "check": r.check,
                    "operation": r.operation,
                    "residual_value": r.residual_value,
                    "tolerance": r.tolerance,
                    "passed": r.passed,
                    "context": r.context
                }
                for r in metadata.accuracy_residuals
            ]
        }

        with open(output_path, 'w') as f:
            json.dump(artifacts, f, indent=2, default=str)

        self._logger.info(f"Exported audit artifacts to {output_path}")
