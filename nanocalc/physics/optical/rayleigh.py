"""
Small-particle (Rayleigh) limit of scattering by a homogeneous sphere.

Only the dipole term of the Mie series is kept, which is accurate for size
parameters x = 2*pi*r/lambda well below one. Larger particles are still
computed but flagged through ``warnings()``.
"""
from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

import numpy as np

from nanocalc.core.models import Cacheable, OpticalModel, Parallelizable
from nanocalc.core.results import OpticalMetadata, OpticalResult
from nanocalc.core.types import (
    InvalidParameter, NumericalInstability, RefractiveIndex, ValidationError,
    ValidationFailed, as_refractive_index,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RayleighModel(OpticalModel, Cacheable, Parallelizable):
    """
    Rayleigh scattering by a sphere embedded in a non-absorbing medium.

    :param radius: Particle radius in nm
    :param wavelength: Vacuum wavelength in nm
    :param n_particle: Complex refractive index of the particle (n + ik)
    :param n_medium: Real refractive index of the surrounding medium
    """
    radius: float
    wavelength: float
    n_particle: RefractiveIndex
    n_medium: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, 'radius', float(self.radius))
        object.__setattr__(self, 'wavelength', float(self.wavelength))
        object.__setattr__(self, 'n_particle', as_refractive_index(self.n_particle))
        object.__setattr__(self, 'n_medium', float(self.n_medium))

    def name(self) -> str:
        return "Mie Scattering (Rayleigh Approximation)"

    def description(self) -> str:
        return "Calculate scattering and absorption for spherical nanoparticles (x < 1)"

    def size_parameter(self) -> float:
        """x = 2*pi*r/lambda."""
        return 2.0 * np.pi * self.radius / self.wavelength

    def relative_index(self) -> complex:
        """Particle index relative to the medium, m = n_particle / n_medium."""
        return self.n_particle.to_complex() / self.n_medium

    def polarizability_factor(self) -> complex:
        """Clausius-Mossotti factor F = (m^2 - 1) / (m^2 + 2)."""
        m = self.relative_index()
        m2 = m * m
        try:
            return (m2 - 1.0) / (m2 + 2.0)
        except ZeroDivisionError:
            raise NumericalInstability(f"polarizability diverges for m^2 = {m2}") from None

    def validate(self) -> None:
        if not self.radius > 0.0:
            raise InvalidParameter("Radius must be positive")
        if not self.wavelength > 0.0:
            raise InvalidParameter("Wavelength must be positive")
        if not self.n_medium > 0.0:
            raise InvalidParameter("Medium refractive index must be positive")

    def warnings(self) -> List[str]:
        # x is undefined without a positive wavelength
        if not self.wavelength > 0.0:
            return []
        x = self.size_parameter()
        if x > 1.0:
            return [
                f"Size parameter x={x:.2f} > 1. Rayleigh approximation may be inaccurate. "
                f"Full Mie theory recommended."
            ]
        return []

    def calculate(self) -> OpticalResult:
        try:
            self.validate()
        except ValidationError as e:
            raise ValidationFailed(e) from e
        return self._rayleigh_approximation()

    def calculate_spectrum(self, wavelengths: Sequence[float]) -> List[OpticalResult]:
        # Each point runs on its own copy; the first failure aborts the spectrum.
        return [self.with_params(wavelength=wl).calculate() for wl in wavelengths]

    def _rayleigh_approximation(self) -> OpticalResult:
        x = self.size_parameter()
        factor = self.polarizability_factor()

        # float64 powers overflow to inf instead of raising
        with np.errstate(over='ignore', invalid='ignore'):
            q_sca = float((8.0 / 3.0) * np.float64(x) ** 4 * (factor.real ** 2 + factor.imag ** 2))
            q_abs = float(4.0 * np.float64(x) * factor.imag)
            q_ext = q_sca + q_abs
            geometric_area = float(np.pi * np.float64(self.radius) ** 2)

        if not (np.isfinite(q_ext) and np.isfinite(q_ext * geometric_area)):
            raise NumericalInstability(
                f"non-finite efficiencies for n_particle={self.n_particle}, n_medium={self.n_medium}, "
                f"x={x:.4g}")

        logger.debug("Rayleigh point wl=%g nm r=%g nm x=%.4g q_ext=%.6g",
                     self.wavelength, self.radius, x, q_ext)

        return OpticalResult(
            wavelength=self.wavelength,
            q_sca=q_sca,
            q_abs=q_abs,
            q_ext=q_ext,
            c_sca=q_sca * geometric_area,
            c_abs=q_abs * geometric_area,
            c_ext=q_ext * geometric_area,
            metadata=OpticalMetadata(
                num_terms=1,
                converged=True,
                size_parameter=x,
                notes=("Rayleigh approximation",),
            ),
        )

    def with_params(self, **params: Any) -> 'RayleighModel':
        names = {f.name for f in dataclasses.fields(self)}
        for key in params:
            if key not in names:
                raise InvalidParameter(f"Unknown parameter '{key}' for {self.__class__.__name__}")
        return dataclasses.replace(self, **params)

    def cache_params(self) -> Dict[str, Any]:
        return {
            'radius': self.radius,
            'wavelength': self.wavelength,
            'n_real': self.n_particle.real,
            'n_imag': self.n_particle.imaginary,
            'n_medium': self.n_medium,
        }


__all__ = ['RayleighModel']
