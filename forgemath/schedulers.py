# forgemath/schedulers.py
"""Learning-rate schedules. Each factory returns a `step -> lr` function."""
import math
from typing import Callable

Schedule = Callable[[int], float]


def constant(base_lr: float) -> Schedule:
    return lambda step: base_lr

def step_decay(base_lr: float, drop_factor: float, steps_per_drop: int) -> Schedule:
    return lambda step: base_lr * drop_factor ** math.floor(step / steps_per_drop)

def exponential_decay(base_lr: float, decay_rate: float) -> Schedule:
    return lambda step: base_lr * math.exp(-decay_rate * step)

def cosine_annealing(base_lr: float, min_lr: float, total_steps: int) -> Schedule:
    return lambda step: min_lr + (base_lr - min_lr) * (1 + math.cos(math.pi * step / total_steps)) / 2

def warmup_cosine(base_lr: float, warmup_steps: int, total_steps: int) -> Schedule:
    def schedule(step: int) -> float:
        if step < warmup_steps:
            return base_lr * step / warmup_steps
        progress = (step - warmup_steps) / (total_steps - warmup_steps)
        return base_lr * (1 + math.cos(math.pi * progress)) / 2
    return schedule

def cyclic_lr(base_lr: float, max_lr: float, step_size: int) -> Schedule:
    """Triangular cycle between base_lr and max_lr, half-period step_size."""
    def schedule(step: int) -> float:
        cycle = math.floor(1 + step / (2 * step_size))
        x = abs(step / step_size - 2 * cycle + 1)
        return base_lr + (max_lr - base_lr) * max(0.0, 1 - x)
    return schedule

def one_cycle_lr(max_lr: float, total_steps: int, div_factor: float = 25) -> Schedule:
    initial_lr = max_lr / div_factor
    mid_point = total_steps * 0.3

    def schedule(step: int) -> float:
        if step < mid_point:
            return initial_lr + (max_lr - initial_lr) * step / mid_point
        return max_lr - (max_lr - initial_lr / 100) * (step - mid_point) / (total_steps - mid_point)
    return schedule
