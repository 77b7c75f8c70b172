# forgemath/optimizers.py
"""Optimizer update rules as pure functions.

Each call takes the previous OptimizerState and returns the update delta
together with the next state; the caller adds the delta to its weights and
threads the state into the next call. Nothing here holds or mutates weights.
"""
from dataclasses import dataclass
from typing import NamedTuple, Optional

import numpy as np

from .errors import DimensionMismatchError
from .matrix import Matrix


@dataclass(frozen=True)
class OptimizerState:
    step: int = 0
    m: Optional[Matrix] = None  # first moment
    v: Optional[Matrix] = None  # second moment


class OptimizerResult(NamedTuple):
    update: Matrix
    state: OptimizerState


class MomentumResult(NamedTuple):
    update: Matrix
    velocity: Matrix


def _require_shape(gradient: Matrix, other: Optional[Matrix], name: str):
    if other is not None and other.shape != gradient.shape:
        raise DimensionMismatchError(
            f"{name} shape {other.rows}x{other.cols} does not match gradient {gradient.rows}x{gradient.cols}")


def sgd(gradient: Matrix, lr: float) -> Matrix:
    return gradient.scale(-lr)


def sgd_momentum(gradient: Matrix, lr: float, momentum: float, velocity: Matrix) -> MomentumResult:
    _require_shape(gradient, velocity, "velocity")
    new_velocity = velocity.scale(momentum).subtract(gradient.scale(lr))
    return MomentumResult(new_velocity, new_velocity)


def adam(gradient: Matrix, state: OptimizerState, lr: float = 0.001, beta1: float = 0.9,
         beta2: float = 0.999, epsilon: float = 1e-8) -> OptimizerResult:
    _require_shape(gradient, state.m, "first moment")
    _require_shape(gradient, state.v, "second moment")
    t = state.step + 1

    m = state.m if state.m is not None else Matrix.zeros(gradient.rows, gradient.cols)
    v = state.v if state.v is not None else Matrix.zeros(gradient.rows, gradient.cols)

    new_m = m.scale(beta1).add(gradient.scale(1 - beta1))
    new_v = v.scale(beta2).add(gradient.hadamard(gradient).scale(1 - beta2))

    # bias correction
    m_hat = new_m.data / (1 - beta1**t)
    v_hat = new_v.data / (1 - beta2**t)

    update = Matrix(-lr * m_hat / (np.sqrt(v_hat) + epsilon))
    return OptimizerResult(update, OptimizerState(step=t, m=new_m, v=new_v))


def adamw(gradient: Matrix, weights: Matrix, state: OptimizerState, lr: float = 0.001,
          beta1: float = 0.9, beta2: float = 0.999, epsilon: float = 1e-8,
          weight_decay: float = 0.01) -> OptimizerResult:
    """Adam with decoupled weight decay: adds -lr * weight_decay * weights."""
    _require_shape(gradient, weights, "weights")
    update, next_state = adam(gradient, state, lr, beta1, beta2, epsilon)
    return OptimizerResult(update.add(weights.scale(-lr * weight_decay)), next_state)
