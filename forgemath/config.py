# forgemath/config.py
"""Runtime settings for forgemath, read from environment variables."""
import os
from typing import Optional

import numpy as np

# Kernels
DEFAULT_BACKEND = os.getenv("FORGEMATH_BACKEND", "serial")
BACKENDS = ("serial", "numba")

_DTYPES = {"complex64": np.complex64, "complex128": np.complex128}


def parse_dtype(name: str):
    if name not in _DTYPES:
        raise ValueError(f"FORGEMATH_DTYPE must be one of {sorted(_DTYPES)}, got {name!r}")
    return _DTYPES[name]


DEFAULT_DTYPE = parse_dtype(os.getenv("FORGEMATH_DTYPE", "complex128"))

NORM_TOL = float(os.getenv("FORGEMATH_NORM_TOL", "1e-6"))

_threads = os.getenv("FORGEMATH_NUM_THREADS")
NUM_THREADS: Optional[int] = int(_threads) if _threads else None

# Randomness
_seed = os.getenv("FORGEMATH_SEED")
SEED: Optional[int] = int(_seed) if _seed else None

# Logging
LOG_LEVEL = os.getenv("FORGEMATH_LOG_LEVEL", "WARNING")
LOG_FORMAT = os.getenv("FORGEMATH_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

__all__ = [
    "DEFAULT_BACKEND",
    "BACKENDS",
    "DEFAULT_DTYPE",
    "NORM_TOL",
    "NUM_THREADS",
    "SEED",
    "LOG_LEVEL",
    "LOG_FORMAT",
]
