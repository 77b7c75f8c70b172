# forgemath/circuit.py
from dataclasses import dataclass, field
from typing import Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from .backend import kernels
from .config import DEFAULT_BACKEND, DEFAULT_DTYPE, NORM_TOL, NUM_THREADS
from .errors import QubitIndexError, UnknownGateError
from .logger import get_logger
from .rng import RngLike, get_rng
from .state import QuantumState
from . import gates as G

log = get_logger(__name__)

MEASURE = "MEASURE"
GATE_TYPES = tuple(G.SINGLE_QUBIT) + tuple(G.PARAMETRIC) + tuple(G.TWO_QUBIT) + (MEASURE,)


@dataclass(frozen=True)
class GateOp:
    """One step of a gate sequence, e.g. GateOp("CNOT", (0, 1)) or GateOp("RX", (0,), (theta,))."""
    type: str
    qubits: Tuple[int, ...]
    params: Tuple[float, ...] = ()

    @staticmethod
    def from_dict(d: Mapping) -> "GateOp":
        return GateOp(str(d["type"]).upper(), tuple(d["qubits"]), tuple(d.get("params") or ()))

    def arity(self) -> int:
        return 2 if self.type in G.TWO_QUBIT else 1


@dataclass
class RunResult:
    state: QuantumState
    measurements: List[Tuple[int, int]] = field(default_factory=list)  # (qubit, bit)


@dataclass
class Circuit:
    n: int
    ops: List[GateOp]

    @staticmethod
    def empty(n: int) -> "Circuit":
        return Circuit(n, [])

    @staticmethod
    def from_ops(n: int, ops: Sequence[Union[GateOp, Mapping]]) -> "Circuit":
        c = Circuit(n, [op if isinstance(op, GateOp) else GateOp.from_dict(op) for op in ops])
        c.validate()
        return c

    def _add(self, name: str, qubits, params=()):
        self.ops.append(GateOp(name, tuple(qubits), tuple(params)))
        return self

    def h(self, k: int): return self._add("H", (k,))
    def x(self, k: int): return self._add("X", (k,))
    def y(self, k: int): return self._add("Y", (k,))
    def z(self, k: int): return self._add("Z", (k,))
    def s(self, k: int): return self._add("S", (k,))
    def t(self, k: int): return self._add("T", (k,))
    def rx(self, k: int, theta: float): return self._add("RX", (k,), (theta,))
    def ry(self, k: int, theta: float): return self._add("RY", (k,), (theta,))
    def rz(self, k: int, theta: float): return self._add("RZ", (k,), (theta,))
    def cnot(self, c: int, t: int): return self._add("CNOT", (c, t))
    def swap(self, a: int, b: int): return self._add("SWAP", (a, b))
    def measure(self, k: int): return self._add(MEASURE, (k,))

    def validate(self):
        """Check every op before anything runs: known type, qubit count and range, params."""
        for i, op in enumerate(self.ops):
            if op.type not in GATE_TYPES:
                raise UnknownGateError(f"Unknown gate {op.type!r} at step {i}")
            if len(op.qubits) != op.arity():
                raise QubitIndexError(f"{op.type} at step {i} takes {op.arity()} qubit(s), got {len(op.qubits)}")
            for q in op.qubits:
                if not 0 <= q < self.n:
                    raise QubitIndexError(f"qubit index out of range: {q} at step {i} ({self.n} qubits)")
            if op.arity() == 2 and op.qubits[0] == op.qubits[1]:
                raise QubitIndexError(f"{op.type} at step {i} uses qubit {op.qubits[0]} twice")
            if op.type in G.PARAMETRIC and len(op.params) != 1:
                raise ValueError(f"{op.type} at step {i} takes one angle, got {len(op.params)}")

    def steps(self, backend: Optional[str] = None, dtype=None, num_threads: Optional[int] = None,
              rng: RngLike = None) -> Iterator[Tuple[int, GateOp, QuantumState, Optional[int]]]:
        """Yield (index, op, state, measured_bit) after each op; one op per redraw tick."""
        self.validate()
        backend = backend or DEFAULT_BACKEND
        kern = kernels(backend)
        st = QuantumState.zero(self.n, dtype=dtype or DEFAULT_DTYPE)

        num_threads = num_threads if num_threads is not None else NUM_THREADS
        if backend == "numba" and num_threads is not None:
            kern.set_threads(int(num_threads))
        gen = get_rng(rng)
        log.debug("running %d ops on %d qubits (backend=%s)", len(self.ops), self.n, backend)

        for i, op in enumerate(self.ops):
            bit = None
            # H and X have dedicated kernels; qubits were checked by validate()
            if op.type == "H":
                kern.apply_H(st, op.qubits[0])
            elif op.type == "X":
                kern.apply_X(st, op.qubits[0])
            elif op.type in G.SINGLE_QUBIT:
                st.apply_gate(G.SINGLE_QUBIT[op.type](dtype=st.dtype), op.qubits[0], backend=backend)
            elif op.type in G.PARAMETRIC:
                st.apply_gate(G.PARAMETRIC[op.type](op.params[0], dtype=st.dtype), op.qubits[0], backend=backend)
            elif op.type == "CNOT":
                st.apply_cnot(*op.qubits, backend=backend)
            elif op.type == "SWAP":
                st.apply_swap(*op.qubits, backend=backend)
            else:
                outcome = st.measure(rng=gen)
                bit = (outcome >> op.qubits[0]) & 1
            yield i, op, st, bit

    def run(self, backend: Optional[str] = None, dtype=None, check_norm=True, num_threads=None,
            check_norm_tol=None, rng: RngLike = None) -> RunResult:
        result = None
        measurements = []
        for _, op, st, bit in self.steps(backend=backend, dtype=dtype, num_threads=num_threads, rng=rng):
            result = st
            if bit is not None:
                measurements.append((op.qubits[0], bit))
        if result is None:
            result = QuantumState.zero(self.n, dtype=dtype or DEFAULT_DTYPE)

        if check_norm:
            result.check_normalized(tol=NORM_TOL if check_norm_tol is None else check_norm_tol)
        return RunResult(result, measurements)
