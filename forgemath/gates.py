# forgemath/gates.py
import numpy as np

from .config import DEFAULT_DTYPE

def X(dtype=DEFAULT_DTYPE) -> np.ndarray:
    return np.array([[0, 1],
                     [1, 0]], dtype=dtype)

def Y(dtype=DEFAULT_DTYPE) -> np.ndarray:
    return np.array([[0, -1j],
                     [1j, 0]], dtype=dtype)

def Z(dtype=DEFAULT_DTYPE) -> np.ndarray:
    return np.array([[1, 0],
                     [0, -1]], dtype=dtype)

def H(dtype=DEFAULT_DTYPE) -> np.ndarray:
    s = 1.0 / np.sqrt(2.0)
    return np.array([[s, s],
                     [s, -s]], dtype=dtype)

def S(dtype=DEFAULT_DTYPE) -> np.ndarray:
    return np.array([[1, 0],
                     [0, 1j]], dtype=dtype)

def T(dtype=DEFAULT_DTYPE) -> np.ndarray:
    return np.array([[1, 0],
                     [0, np.exp(0.25j*np.pi)]], dtype=dtype)

def RX(theta: float, dtype=DEFAULT_DTYPE) -> np.ndarray:
    c = np.cos(theta/2.0)
    s = -1j*np.sin(theta/2.0)
    return np.array([[c, s],
                     [s, c]], dtype=dtype)

def RY(theta: float, dtype=DEFAULT_DTYPE) -> np.ndarray:
    c = np.cos(theta/2.0)
    s = np.sin(theta/2.0)
    return np.array([[c, -s],
                     [s, c]], dtype=dtype)

def RZ(theta: float, dtype=DEFAULT_DTYPE) -> np.ndarray:
    return np.array([[np.exp(-0.5j*theta), 0],
                     [0, np.exp(+0.5j*theta)]], dtype=dtype)

def CNOT(dtype=DEFAULT_DTYPE) -> np.ndarray:
    # 4x4 in order 00,01,10,11 (target is LSB if you use k=target in apply)
    mat = np.eye(4, dtype=dtype)
    # swap |10> <-> |11>
    mat[2,2] = 0; mat[3,3] = 0
    mat[2,3] = 1; mat[3,2] = 1
    return mat

def SWAP(dtype=DEFAULT_DTYPE) -> np.ndarray:
    mat = np.eye(4, dtype=dtype)
    # swap |01> <-> |10>
    mat[1,1] = 0; mat[2,2] = 0
    mat[1,2] = 1; mat[2,1] = 1
    return mat

# name -> factory, used by the circuit runner
SINGLE_QUBIT = {"H": H, "X": X, "Y": Y, "Z": Z, "S": S, "T": T}
PARAMETRIC = {"RX": RX, "RY": RY, "RZ": RZ}
TWO_QUBIT = {"CNOT": CNOT, "SWAP": SWAP}
