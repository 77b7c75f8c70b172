# forgemath/state.py
"""Statevector of n qubits, little-endian: bit i of a basis index is qubit i."""
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np

from .backend import kernels
from .bloch import bloch_angles
from .complex_number import Complex
from .config import DEFAULT_DTYPE, NORM_TOL
from .errors import DimensionMismatchError, NormalizationError, QubitIndexError
from .logger import get_logger
from .rng import RngLike, get_rng

log = get_logger(__name__)


def as_gate(gate, size: int, dtype) -> np.ndarray:
    """Coerce a numpy array or nested sequence of numbers/Complex to a size x size array."""
    if isinstance(gate, np.ndarray):
        U = gate.astype(dtype, copy=False)
    else:
        try:
            U = np.array([[complex(g) for g in row] for row in gate], dtype=dtype)
        except (TypeError, ValueError) as e:
            raise DimensionMismatchError(f"gate must be a {size}x{size} matrix") from e
    if U.shape != (size, size):
        raise DimensionMismatchError(f"gate must be {size}x{size}, got {'x'.join(map(str, U.shape))}")
    return U


@dataclass(eq=False)
class QuantumState:
    n: int
    psi: Optional[np.ndarray] = None  # shape (2**n,), dtype complex64/128

    def __post_init__(self):
        if self.n < 0:
            raise ValueError(f"number of qubits must be >= 0, got {self.n}")
        N = 1 << self.n
        if self.psi is None:
            psi = np.zeros(N, dtype=DEFAULT_DTYPE)
            psi[0] = 1.0 + 0.0j
            self.psi = psi
        else:
            self.psi = np.asarray(self.psi)
            if not np.iscomplexobj(self.psi):
                self.psi = self.psi.astype(DEFAULT_DTYPE)
            if self.psi.shape != (N,):
                raise DimensionMismatchError(f"{self.n} qubits need {N} amplitudes, got {self.psi.shape}")

    @staticmethod
    def zero(n: int, dtype=DEFAULT_DTYPE) -> "QuantumState":
        N = 1 << n
        psi = np.zeros(N, dtype=dtype)
        psi[0] = 1.0 + 0.0j
        return QuantumState(n=n, psi=psi)

    @property
    def num_qubits(self) -> int:
        return self.n

    @property
    def dtype(self):
        return self.psi.dtype

    @property
    def amplitudes(self) -> Tuple[Complex, ...]:
        return tuple(Complex(float(a.real), float(a.imag)) for a in self.psi)

    def as_numpy(self) -> np.ndarray:
        return self.psi

    def copy(self) -> "QuantumState":
        return QuantumState(self.n, self.psi.copy())

    def basis_label(self, index: int) -> str:
        """'|q_{n-1}...q_0>' bit string, most significant qubit first."""
        return format(index, f"0{self.n}b") if self.n else ""

    # ------------------------------ norms ------------------------------

    def probabilities(self) -> np.ndarray:
        return np.abs(self.psi)**2

    def norm2(self) -> float:
        return float(np.vdot(self.psi, self.psi).real)

    def normalize(self):
        n2 = self.norm2()
        if n2 == 0.0:
            raise NormalizationError("cannot normalize the zero vector")
        self.psi /= np.sqrt(n2)

    def check_normalized(self, tol: Optional[float] = None, strict: bool = True) -> bool:
        tol = NORM_TOL if tol is None else tol
        n2 = self.norm2()
        if abs(1.0 - n2) <= tol:
            return True
        if strict:
            raise NormalizationError(f"Normalization failed: ||psi||^2={n2}")
        log.warning("statevector drifted from unit norm: ||psi||^2=%r", n2)
        return False

    # ------------------------------ gates ------------------------------

    def _check_qubit(self, q: int):
        if not 0 <= q < self.n:
            raise QubitIndexError(f"qubit index out of range: {q} (state has {self.n} qubits)")

    def _check_pair(self, a: int, b: int, what: str):
        self._check_qubit(a)
        self._check_qubit(b)
        if a == b:
            raise QubitIndexError(f"{what} qubits must differ, got {a} twice")

    def apply_gate(self, gate, qubit: int, backend: Optional[str] = None) -> "QuantumState":
        """Apply a 2x2 gate to `qubit` in place. The state is not renormalized."""
        self._check_qubit(qubit)
        U = as_gate(gate, 2, self.dtype)
        kernels(backend).apply_single_qubit(self, U, qubit)
        return self

    def apply_two_qubit(self, gate, k: int, l: int, backend: Optional[str] = None) -> "QuantumState":
        """Apply a 4x4 gate; rows ordered 00,01,10,11 with max(k,l) as the high bit."""
        self._check_pair(k, l, "two-qubit gate")
        U = as_gate(gate, 4, self.dtype)
        kernels(backend).apply_two_qubit_4x4(self, U, k, l)
        return self

    def apply_cnot(self, control: int, target: int, backend: Optional[str] = None) -> "QuantumState":
        self._check_pair(control, target, "control and target")
        kernels(backend).apply_CNOT(self, control, target)
        return self

    def apply_swap(self, a: int, b: int, backend: Optional[str] = None) -> "QuantumState":
        self._check_pair(a, b, "swapped")
        kernels(backend).apply_SWAP(self, a, b)
        return self

    # --------------------------- measurement ---------------------------

    def measure(self, rng: RngLike = None) -> int:
        """Sample a basis index and collapse onto it. Destructive."""
        probs = self.probabilities()
        draw = get_rng(rng).random()
        outcome = len(probs) - 1
        cumulative = 0.0
        for i, p in enumerate(probs):
            cumulative += p
            if draw < cumulative:
                outcome = i
                break
        self.psi[:] = 0
        self.psi[outcome] = 1.0
        log.debug("measured |%s> (draw=%.6f)", self.basis_label(outcome), draw)
        return outcome

    def sample(self, shots: int, rng: RngLike = None) -> Dict[str, int]:
        """Counts of `shots` measurements without touching the state."""
        probs = self.probabilities().astype(np.float64)
        total = probs.sum()
        if total == 0.0:
            raise NormalizationError("cannot sample from the zero vector")
        idx = get_rng(rng).choice(len(probs), size=shots, p=probs / total)
        return dict(Counter(self.basis_label(int(i)) for i in idx))

    def bloch_angles(self) -> Tuple[float, float]:
        """(theta, phi) from amplitudes 0 and 1, the view the widget draws for qubit 0.

        A 0-qubit state has no second amplitude and sits at the north pole (0, 0).
        """
        if self.n < 1:
            return 0.0, 0.0
        return bloch_angles(self.psi[0], self.psi[1])
