# forgemath/bloch.py
"""Bloch sphere angles and the 2-D point the widget draws for them."""
import math
from typing import Tuple


def bloch_angles(alpha, beta) -> Tuple[float, float]:
    """(theta, phi) for alpha|0> + beta|1>.

    theta = 2 acos(min(1, |alpha|)), phi = arg(beta) - arg(alpha).
    The clamp keeps acos defined when rounding pushes |alpha| past 1.
    """
    alpha = complex(alpha)
    beta = complex(beta)
    theta = 2.0 * math.acos(min(1.0, abs(alpha)))
    phi = math.atan2(beta.imag, beta.real) - math.atan2(alpha.imag, alpha.real)
    return theta, phi


def bloch_vector(theta: float, phi: float) -> Tuple[float, float, float]:
    return (math.sin(theta) * math.cos(phi),
            math.sin(theta) * math.sin(phi),
            math.cos(theta))


def project_isometric(x: float, y: float, z: float, size: float = 200) -> Tuple[float, float]:
    """Isometric view of a sphere point, in pixel coordinates of a size x size box."""
    radius = size / 2.5
    px = (x - y) * 0.866 * radius
    py = (x + y) * 0.5 - z * radius
    return size / 2 + px, size / 2 + py
