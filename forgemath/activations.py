# forgemath/activations.py
"""Activation functions and their derivatives.

Each accepts a scalar or an array and follows numpy broadcasting.
"""
import numpy as np

_GELU_C = np.sqrt(2.0 / np.pi)


def sigmoid(x):
    return 1.0 / (1.0 + np.exp(-np.asarray(x, dtype=np.float64)))

def sigmoid_derivative(x):
    s = sigmoid(x)
    return s * (1.0 - s)

def tanh(x):
    return np.tanh(x)

def tanh_derivative(x):
    return 1.0 - np.tanh(x)**2

def relu(x):
    return np.maximum(0.0, x)

def relu_derivative(x):
    return np.where(np.asarray(x) > 0, 1.0, 0.0)

def leaky_relu(x, alpha: float = 0.01):
    x = np.asarray(x, dtype=np.float64)
    return np.where(x > 0, x, alpha * x)

def leaky_relu_derivative(x, alpha: float = 0.01):
    return np.where(np.asarray(x) > 0, 1.0, alpha)

def elu(x, alpha: float = 1.0):
    x = np.asarray(x, dtype=np.float64)
    return np.where(x > 0, x, alpha * np.expm1(np.minimum(x, 0.0)))

def elu_derivative(x, alpha: float = 1.0):
    x = np.asarray(x, dtype=np.float64)
    return np.where(x > 0, 1.0, elu(x, alpha) + alpha)

def swish(x):
    return x * sigmoid(x)

def swish_derivative(x):
    s = sigmoid(x)
    return s + x * s * (1.0 - s)

def gelu(x):
    """Tanh approximation of GELU (not the exact erf form)."""
    x = np.asarray(x, dtype=np.float64)
    return 0.5 * x * (1.0 + np.tanh(_GELU_C * (x + 0.044715 * x**3)))

def softmax(values) -> np.ndarray:
    v = np.asarray(values, dtype=np.float64)
    exps = np.exp(v - np.max(v))
    return exps / exps.sum()
