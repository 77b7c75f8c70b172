# forgemath/errors.py


class ForgeMathError(Exception):
    """Base class for every error raised by forgemath."""


class DimensionMismatchError(ForgeMathError, ValueError):
    """Operands have incompatible shapes or lengths."""


class QubitIndexError(ForgeMathError, IndexError):
    """Qubit index outside [0, n) or a repeated qubit in a two-qubit gate."""


class NormalizationError(ForgeMathError, ArithmeticError):
    """Statevector norm is off, or zero and cannot be rescaled."""


class UnknownGateError(ForgeMathError, ValueError):
    """Gate name not recognised."""


class UnknownBackendError(ForgeMathError, ValueError):
    """Kernel backend name not recognised."""


def check_same_length(a, b, what: str = "sequences"):
    if len(a) != len(b):
        raise DimensionMismatchError(f"{what} must have equal length, got {len(a)} and {len(b)}")
