"""
Fundamental value types and error taxonomies shared by all models.
"""
from __future__ import annotations

from dataclasses import dataclass
from numbers import Number
from typing import Sequence, Tuple, Union

import numpy as np


@dataclass(frozen=True)
class RefractiveIndex:
    """
    Complex refractive index n + ik.

    :param real: Real part n (phase velocity factor)
    :param imaginary: Imaginary part k (extinction coefficient)
    """
    real: float
    imaginary: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'real', float(self.real))
        object.__setattr__(self, 'imaginary', float(self.imaginary))

    @classmethod
    def from_complex(cls, value: complex) -> 'RefractiveIndex':
        value = complex(value)
        return cls(value.real, value.imag)

    def to_complex(self) -> complex:
        return complex(self.real, self.imaginary)

    def to_permittivity(self) -> complex:
        """Relative permittivity eps = (n + ik)^2 of a non-magnetic material."""
        n = self.to_complex()
        return n * n

    def is_finite(self) -> bool:
        return bool(np.isfinite(self.real) and np.isfinite(self.imaginary))

    def __str__(self) -> str:
        return f"{self.real:.4f} + {self.imaginary:.4f}i"


IndexLike = Union[RefractiveIndex, complex, float, Sequence[float]]


def as_refractive_index(value: IndexLike) -> RefractiveIndex:
    """Coerce a RefractiveIndex, a number or an (n, k) pair into a RefractiveIndex."""
    if isinstance(value, RefractiveIndex):
        return value
    if isinstance(value, Number):
        return RefractiveIndex.from_complex(value)
    if isinstance(value, (list, tuple, np.ndarray)) and len(value) == 2:
        n, k = value
        return RefractiveIndex(n, k)
    raise TypeError(f"Cannot interpret {value!r} as a refractive index")


# ---------------------------------------------------------------------------
# Validation errors: parameter-shape problems detected before any math
# ---------------------------------------------------------------------------

class ValidationError(ValueError):
    """Base class for invalid model parameters."""


class OutOfRange(ValidationError):
    def __init__(self, value: float, min: float, max: float):
        self.value = value
        self.min = min
        self.max = max
        super().__init__(f"Value {value} is out of valid range [{min}, {max}]")

    def __reduce__(self):
        return (self.__class__, (self.value, self.min, self.max))


class InvalidParameter(ValidationError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid parameter: {reason}")

    def __reduce__(self):
        return (self.__class__, (self.reason,))


class PhysicsViolation(ValidationError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Physical constraint violated: {reason}")

    def __reduce__(self):
        return (self.__class__, (self.reason,))


# ---------------------------------------------------------------------------
# Calculation errors: math-stage problems, including wrapped validation failures
# ---------------------------------------------------------------------------

class CalculationError(Exception):
    """Base class for failures raised by ``calculate`` and the sweep methods."""


class ConvergenceFailed(CalculationError):
    def __init__(self, iterations: int):
        self.iterations = iterations
        super().__init__(f"Convergence failed after {iterations} iterations")

    def __reduce__(self):
        return (self.__class__, (self.iterations,))


class NumericalInstability(CalculationError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Numerical instability detected: {reason}")

    def __reduce__(self):
        return (self.__class__, (self.reason,))


class InvalidInput(CalculationError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid input: {reason}")

    def __reduce__(self):
        return (self.__class__, (self.reason,))


class ModelNotApplicable(CalculationError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Model not applicable: {reason}")

    def __reduce__(self):
        return (self.__class__, (self.reason,))


class ValidationFailed(CalculationError):
    """A ValidationError surfaced through the calculation channel."""

    def __init__(self, error: ValidationError):
        self.error = error
        super().__init__(f"Validation error: {error}")

    def __reduce__(self):
        return (self.__class__, (self.error,))


__all__ = [
    'RefractiveIndex', 'IndexLike', 'as_refractive_index',
    'ValidationError', 'OutOfRange', 'InvalidParameter', 'PhysicsViolation',
    'CalculationError', 'ConvergenceFailed', 'NumericalInstability', 'InvalidInput',
    'ModelNotApplicable', 'ValidationFailed',
]
