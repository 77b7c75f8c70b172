# forgemath/apply_serial.py
"""Reference kernels in plain Python loops. Same addressing as apply_numba."""
import numpy as np
from .state import QuantumState

def apply_single_qubit(state: QuantumState, U2: np.ndarray, k: int):
    """Apply 2x2 gate U2 to qubit k (little-endian: bit k)."""
    psi = state.psi
    N = psi.shape[0]
    step = 1 << k
    block = step << 1
    # blocks of size 2^(k+1); pair (i0, i1=i0+step) differs only in bit k
    for base in range(0, N, block):
        for off in range(step):
            i0 = base + off
            i1 = i0 + step
            a0 = psi[i0]
            a1 = psi[i1]
            psi[i0] = U2[0,0]*a0 + U2[0,1]*a1
            psi[i1] = U2[1,0]*a0 + U2[1,1]*a1

def apply_two_qubit_4x4(state: QuantumState, U4: np.ndarray, k: int, l: int):
    """Apply 4x4 gate U4 to qubits k<l (little-endian, row order 00,01,10,11 as (l,k))."""
    if k > l:
        k, l = l, k
    psi = state.psi
    N = psi.shape[0]
    mk = 1 << k
    ml = 1 << l
    # i00 = base, i01 = base|mk, i10 = base|ml, i11 = base|mk|ml
    for base in range(0, N, 1 << (l+1)):
        for chunk in range(0, 1 << l, 1 << (k+1)):
            for off in range(1 << k):
                i00 = base + chunk + off
                i01 = i00 | mk
                i10 = i00 | ml
                i11 = i00 | mk | ml
                a00, a01, a10, a11 = psi[i00], psi[i01], psi[i10], psi[i11]
                psi[i00] = U4[0,0]*a00 + U4[0,1]*a01 + U4[0,2]*a10 + U4[0,3]*a11
                psi[i01] = U4[1,0]*a00 + U4[1,1]*a01 + U4[1,2]*a10 + U4[1,3]*a11
                psi[i10] = U4[2,0]*a00 + U4[2,1]*a01 + U4[2,2]*a10 + U4[2,3]*a11
                psi[i11] = U4[3,0]*a00 + U4[3,1]*a01 + U4[3,2]*a10 + U4[3,3]*a11

def apply_X(state: QuantumState, k: int):
    U = np.array([[0,1],[1,0]], dtype=state.dtype)
    apply_single_qubit(state, U, k)

def apply_H(state: QuantumState, k: int):
    s = np.sqrt(0.5)
    U = np.array([[s,s],[s,-s]], dtype=state.dtype)
    apply_single_qubit(state, U, k)

def apply_CNOT(state: QuantumState, control: int, target: int):
    """Flip the target bit of every index whose control bit is set."""
    psi = state.psi
    mt = 1 << target
    for i in range(psi.shape[0]):
        if (i >> control) & 1:
            j = i ^ mt
            if j > i:   # each pair once
                psi[i], psi[j] = psi[j], psi[i]

def apply_SWAP(state: QuantumState, a: int, b: int):
    psi = state.psi
    ma = 1 << a
    mb = 1 << b
    for i in range(psi.shape[0]):
        # bit a set, bit b clear -> partner has them exchanged
        if (i & ma) and not (i & mb):
            j = (i ^ ma) | mb
            psi[i], psi[j] = psi[j], psi[i]

def matmul(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Canonical triple-loop product of a (r x m) and b (m x c)."""
    rows, inner = a.shape
    cols = b.shape[1]
    out = np.zeros((rows, cols), dtype=np.float64)
    for i in range(rows):
        for j in range(cols):
            acc = 0.0
            for k in range(inner):
                acc += a[i, k] * b[k, j]
            out[i, j] = acc
    return out
