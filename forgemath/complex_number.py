# forgemath/complex_number.py
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Complex:
    """Immutable complex amplitude; arithmetic returns new instances."""
    real: float
    imag: float = 0.0

    @staticmethod
    def from_polar(r: float, theta: float) -> "Complex":
        return Complex(r * math.cos(theta), r * math.sin(theta))

    @staticmethod
    def from_complex(z) -> "Complex":
        z = complex(z)
        return Complex(z.real, z.imag)

    def add(self, other: "Complex") -> "Complex":
        return Complex(self.real + other.real, self.imag + other.imag)

    def subtract(self, other: "Complex") -> "Complex":
        return Complex(self.real - other.real, self.imag - other.imag)

    def multiply(self, other: "Complex") -> "Complex":
        return Complex(self.real * other.real - self.imag * other.imag,
                       self.real * other.imag + self.imag * other.real)

    def conjugate(self) -> "Complex":
        return Complex(self.real, -self.imag)

    def scale(self, s: float) -> "Complex":
        return Complex(self.real * s, self.imag * s)

    def magnitude(self) -> float:
        return math.hypot(self.real, self.imag)

    def phase(self) -> float:
        return math.atan2(self.imag, self.real)

    def __complex__(self):
        return complex(self.real, self.imag)

    def __abs__(self):
        return self.magnitude()

    def __add__(self, other): return self.add(_coerce(other))
    def __sub__(self, other): return self.subtract(_coerce(other))
    def __mul__(self, other): return self.multiply(_coerce(other))

    __radd__ = __add__
    __rmul__ = __mul__


def _coerce(x) -> Complex:
    return x if isinstance(x, Complex) else Complex.from_complex(x)
