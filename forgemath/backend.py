# forgemath/backend.py
from typing import Optional

from .config import BACKENDS, DEFAULT_BACKEND
from .errors import UnknownBackendError


def kernels(backend: Optional[str] = None):
    """Resolve a backend name to its kernel module (apply_serial or apply_numba)."""
    backend = backend or DEFAULT_BACKEND
    if backend == "serial":
        from . import apply_serial as mod
    elif backend == "numba":
        try:
            from . import apply_numba as mod
        except ImportError as e:
            raise RuntimeError("Numba backend not available. Did you `pip install numba`?") from e
    else:
        raise UnknownBackendError(f"Unknown backend: {backend} (expected one of {BACKENDS})")
    return mod
