# forgemath/matrix.py
"""Dense 2-D matrix with value semantics.

Every arithmetic method returns a new Matrix; the stored array is a private
read-only copy, so no operation can change its receiver.
"""
from typing import Callable, List, Optional

import numpy as np

from .backend import kernels
from .errors import DimensionMismatchError
from .rng import RngLike, get_rng


def _as_2d(data) -> np.ndarray:
    if isinstance(data, Matrix):
        return data._a
    try:
        arr = np.array(data, dtype=np.float64)
    except ValueError as e:
        raise DimensionMismatchError("Matrix rows must all have the same length") from e
    if arr.ndim == 1 and arr.size == 0:
        return np.zeros((0, 0), dtype=np.float64)
    if arr.ndim != 2:
        raise DimensionMismatchError(f"Matrix data must be 2-D, got {arr.ndim}-D")
    return arr


class Matrix:
    __slots__ = ("_a",)

    def __init__(self, data):
        a = np.array(_as_2d(data), dtype=np.float64, copy=True)
        a.setflags(write=False)
        self._a = a

    # ---------------------------- construction ----------------------------

    @staticmethod
    def zeros(rows: int, cols: int) -> "Matrix":
        return Matrix(np.zeros((rows, cols)))

    @staticmethod
    def ones(rows: int, cols: int) -> "Matrix":
        return Matrix(np.ones((rows, cols)))

    @staticmethod
    def identity(n: int) -> "Matrix":
        return Matrix(np.eye(n))

    @staticmethod
    def random(rows: int, cols: int, scale: float = 1.0, rng: RngLike = None) -> "Matrix":
        """Uniform entries in [-scale, scale)."""
        u = get_rng(rng).random((rows, cols))
        return Matrix((u - 0.5) * 2.0 * scale)

    @staticmethod
    def xavier(rows: int, cols: int, rng: RngLike = None) -> "Matrix":
        """Xavier/Glorot init: scale sqrt(2 / (rows + cols))."""
        return Matrix.random(rows, cols, np.sqrt(2.0 / (rows + cols)), rng=rng)

    @staticmethod
    def he(rows: int, cols: int, rng: RngLike = None) -> "Matrix":
        """He init (ReLU layers): scale sqrt(2 / rows)."""
        return Matrix.random(rows, cols, np.sqrt(2.0 / rows), rng=rng)

    # ----------------------------- properties -----------------------------

    @property
    def rows(self) -> int:
        return self._a.shape[0]

    @property
    def cols(self) -> int:
        return self._a.shape[1]

    @property
    def shape(self):
        return self._a.shape

    @property
    def data(self) -> np.ndarray:
        return self._a

    def tolist(self) -> List[List[float]]:
        return self._a.tolist()

    # ----------------------------- arithmetic -----------------------------

    def _check_same_shape(self, other: "Matrix", op: str):
        if self.shape != other.shape:
            raise DimensionMismatchError(
                f"Matrix dimensions must match for {op}: "
                f"{self.rows}x{self.cols} vs {other.rows}x{other.cols}")

    def add(self, other: "Matrix") -> "Matrix":
        self._check_same_shape(other, "addition")
        return Matrix(self._a + other._a)

    def subtract(self, other: "Matrix") -> "Matrix":
        self._check_same_shape(other, "subtraction")
        return Matrix(self._a - other._a)

    def hadamard(self, other: "Matrix") -> "Matrix":
        """Element-wise product."""
        self._check_same_shape(other, "hadamard product")
        return Matrix(self._a * other._a)

    def multiply(self, other: "Matrix", backend: Optional[str] = None) -> "Matrix":
        if self.cols != other.rows:
            raise DimensionMismatchError(
                f"Cannot multiply {self.rows}x{self.cols} with {other.rows}x{other.cols}")
        return Matrix(kernels(backend).matmul(self._a, other._a))

    def scale(self, scalar: float) -> "Matrix":
        return Matrix(self._a * scalar)

    def transpose(self) -> "Matrix":
        return Matrix(self._a.T)

    def map(self, fn: Callable[[float], float]) -> "Matrix":
        out = np.empty_like(self._a)
        for idx, val in np.ndenumerate(self._a):
            out[idx] = fn(float(val))
        return Matrix(out)

    def clone(self) -> "Matrix":
        return Matrix(self._a)

    # ----------------------------- reductions -----------------------------

    def norm(self) -> float:
        """Frobenius norm."""
        return float(np.sqrt(np.sum(self._a * self._a)))

    def trace(self) -> float:
        n = min(self.rows, self.cols)
        return float(sum(self._a[i, i] for i in range(n)))

    def sum(self) -> float:
        return float(self._a.sum())

    def mean(self) -> float:
        return self.sum() / (self.rows * self.cols)

    def flatten(self) -> List[float]:
        return self._a.ravel().tolist()

    def allclose(self, other: "Matrix", atol: float = 1e-9) -> bool:
        return self.shape == other.shape and bool(np.allclose(self._a, other._a, atol=atol, rtol=0))

    # ------------------------------ operators ------------------------------

    def __add__(self, other): return self.add(other)
    def __sub__(self, other): return self.subtract(other)
    def __matmul__(self, other): return self.multiply(other)
    def __neg__(self): return self.scale(-1.0)

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return self.hadamard(other)
        return self.scale(other)

    __rmul__ = __mul__

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._a, other._a))

    __hash__ = None

    def __repr__(self):
        return f"Matrix({self.rows}x{self.cols}, {self._a.tolist()!r})"
