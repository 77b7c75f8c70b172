# forgemath/__init__.py
"""Numerical engine behind the training and quantum visualisation widgets."""
from .matrix import Matrix
from .complex_number import Complex
from .state import QuantumState
from .circuit import Circuit, GateOp, RunResult
from .optimizers import OptimizerState
from .errors import (
    ForgeMathError,
    DimensionMismatchError,
    QubitIndexError,
    NormalizationError,
    UnknownGateError,
    UnknownBackendError,
)
from . import (
    activations,
    bloch,
    gates,
    information,
    losses,
    metrics,
    optimizers,
    regularization,
    schedulers,
    statistics,
)

__version__ = "0.1.0"

__all__ = [
    "Matrix",
    "Complex",
    "QuantumState",
    "Circuit",
    "GateOp",
    "RunResult",
    "OptimizerState",
    "ForgeMathError",
    "DimensionMismatchError",
    "QubitIndexError",
    "NormalizationError",
    "UnknownGateError",
    "UnknownBackendError",
    "activations",
    "bloch",
    "gates",
    "information",
    "losses",
    "metrics",
    "optimizers",
    "regularization",
    "schedulers",
    "statistics",
]
