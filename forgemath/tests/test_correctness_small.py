import numpy as np
import pytest
from forgemath.circuit import Circuit
from forgemath.complex_number import Complex
from forgemath.errors import DimensionMismatchError, NormalizationError, QubitIndexError, UnknownBackendError, UnknownGateError
from forgemath.state import QuantumState
from forgemath import gates as G

S2 = 1 / np.sqrt(2)

def almost(p, q, tol=1e-6):
    return np.allclose(p, q, atol=tol, rtol=0)

def probs(psi):
    return np.abs(psi)**2

def test_fresh_state_is_all_zero_basis():
    st = QuantumState(3)
    expect = np.zeros(8); expect[0] = 1.0
    assert almost(st.as_numpy(), expect)
    assert st.num_qubits == 3

def test_h_on_zero():
    c = Circuit.empty(1).h(0)
    st = c.run(dtype=np.complex64).state
    p = probs(st.as_numpy())
    assert almost(p, np.array([0.5, 0.5], dtype=np.float32))

def test_h_is_self_inverse():
    st = QuantumState(1)
    st.apply_gate(G.H(), 0).apply_gate(G.H(), 0)
    assert almost(st.as_numpy(), [1, 0], tol=1e-9)

def test_x_flips():
    # |0> -> X -> |1>
    c = Circuit.empty(1).x(0)
    st = c.run(dtype=np.complex64).state
    p = probs(st.as_numpy())
    assert almost(p, np.array([0.0, 1.0], dtype=np.float32))

def test_gate_on_high_qubit_uses_bit_pairing():
    # X on qubit 2 of 3: |000> -> |100>, index 4
    st = QuantumState(3).apply_gate(G.X(), 2)
    expect = np.zeros(8); expect[4] = 1.0
    assert almost(probs(st.as_numpy()), expect)

def test_cnot_control_off_noop():
    # |00> --(CNOT c=1,t=0)--> stays |00>
    c = Circuit.empty(2).cnot(1,0)
    st = c.run(dtype=np.complex64).state
    p = probs(st.as_numpy())
    expect = np.zeros(4, dtype=np.float32); expect[0]=1.0
    assert almost(p, expect)

def test_cnot_control_on_flips():
    # Prepare |10> by X on qubit 1 (control), then CNOT(1->0): |10> -> |11>
    c = Circuit.empty(2).x(1).cnot(1,0)
    st = c.run(dtype=np.complex64).state
    p = probs(st.as_numpy())
    expect = np.zeros(4, dtype=np.float32); expect[3]=1.0
    assert almost(p, expect)

def test_bell_state():
    st = QuantumState(2).apply_gate(G.H(), 0).apply_cnot(0, 1)
    assert almost(st.as_numpy(), [S2, 0, 0, S2], tol=1e-9)

def test_swap_moves_excitation():
    st = QuantumState(2).apply_gate(G.X(), 0).apply_swap(0, 1)
    assert almost(probs(st.as_numpy()), [0, 0, 1, 0])

def test_two_qubit_cnot_matrix_matches_cnot():
    # rows ordered (high, low) = (control=1, target=0)
    a = QuantumState(2).apply_gate(G.H(), 1).apply_two_qubit(G.CNOT(), 0, 1)
    b = QuantumState(2).apply_gate(G.H(), 1).apply_cnot(1, 0)
    assert almost(a.as_numpy(), b.as_numpy())

def test_gate_accepts_nested_complex():
    x = [[Complex(0), Complex(1)], [Complex(1), Complex(0)]]
    st = QuantumState(1).apply_gate(x, 0)
    assert almost(probs(st.as_numpy()), [0, 1])

def test_rotations():
    st = QuantumState(1).apply_gate(G.RY(np.pi), 0)
    assert almost(probs(st.as_numpy()), [0, 1])
    st = QuantumState(1).apply_gate(G.RX(np.pi / 2), 0)
    assert almost(probs(st.as_numpy()), [0.5, 0.5])
    st = QuantumState(1).apply_gate(G.RZ(1.3), 0)
    assert almost(probs(st.as_numpy()), [1, 0])

def test_t_squared_is_s():
    assert almost(G.T() @ G.T(), G.S())

def test_normalization():
    c = Circuit.empty(2).h(0).h(1).cnot(1,0)
    st = c.run(dtype=np.complex64).state
    n2 = float((st.as_numpy().conj()*st.as_numpy()).sum().real)
    assert abs(1.0 - n2) < 1e-6

def test_normalize_rescales_and_rejects_zero():
    st = QuantumState(1, np.array([3.0, 4.0]))
    with pytest.raises(NormalizationError):
        st.check_normalized()
    st.normalize()
    assert almost(st.as_numpy(), [0.6, 0.8])
    with pytest.raises(NormalizationError):
        QuantumState(1, np.zeros(2)).normalize()

def test_qubit_out_of_range():
    st = QuantumState(2)
    with pytest.raises(QubitIndexError):
        st.apply_gate(G.H(), 2)
    with pytest.raises(QubitIndexError):
        st.apply_gate(G.H(), -1)
    with pytest.raises(QubitIndexError):
        st.apply_cnot(0, 0)
    # nothing touched
    assert almost(st.as_numpy(), [1, 0, 0, 0])

def test_bad_gate_shape():
    with pytest.raises(DimensionMismatchError):
        QuantumState(1).apply_gate(np.eye(3), 0)

def test_unknown_backend():
    with pytest.raises(UnknownBackendError):
        QuantumState(1).apply_gate(G.H(), 0, backend="gpu")
    with pytest.raises(UnknownBackendError):
        Circuit.empty(1).h(0).run(backend="gpu")

def test_circuit_from_dict_ops():
    c = Circuit.from_ops(2, [{"type": "H", "qubits": [0]}, {"type": "CNOT", "qubits": [0, 1]}])
    st = c.run().state
    assert almost(st.as_numpy(), [S2, 0, 0, S2])

def test_circuit_validation():
    with pytest.raises(UnknownGateError):
        Circuit.from_ops(1, [{"type": "FOO", "qubits": [0]}])
    with pytest.raises(QubitIndexError):
        Circuit.from_ops(2, [{"type": "CNOT", "qubits": [0]}])
    with pytest.raises(QubitIndexError):
        Circuit.empty(2).h(5).run()
    with pytest.raises(ValueError):
        Circuit.from_ops(1, [{"type": "RX", "qubits": [0]}])

def test_circuit_steps_yield_each_op():
    c = Circuit.empty(2).h(0).cnot(0, 1)
    seen = [(i, op.type) for i, op, _, _ in c.steps()]
    assert seen == [(0, "H"), (1, "CNOT")]

def test_empty_circuit_returns_zero_state():
    st = Circuit.empty(2).run().state
    assert almost(st.as_numpy(), [1, 0, 0, 0])
