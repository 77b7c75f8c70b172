# forgemath/rng.py
from typing import Optional, Union

import numpy as np

from .config import SEED

RngLike = Optional[Union[int, np.random.Generator]]

_global_rng = np.random.default_rng(SEED)


def get_rng(rng: RngLike = None) -> np.random.Generator:
    """Resolve `rng` to a Generator: pass one through, seed an int, or use the shared one."""
    if rng is None:
        return _global_rng
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def reseed(seed: Optional[int]):
    """Replace the shared generator (tests and reproducible demos)."""
    global _global_rng
    _global_rng = np.random.default_rng(seed)
