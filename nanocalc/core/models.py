"""
Physics model interfaces.

New physical theories are added by subclassing the relevant domain base class
(``OpticalModel``, ``ThermalModel``, ``ElectronicModel``); the sweep driver and
the ``simulate`` facade only rely on the methods declared here.
"""
from __future__ import annotations

import hashlib
import json
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence

from nanocalc.core.results import ElectronicResult, OpticalResult, ThermalResult
from nanocalc.core.types import ValidationError

DEFAULT_CHUNK_SIZE = 100


class PhysicsModel(ABC):
    """
    Base class for all physics models.

    Each model must be able to:
    1. Describe itself (``name``, ``description``)
    2. Validate its parameters before any math (``validate`` raises ValidationError)
    3. Report non-fatal advisories about its regime of validity (``warnings``)
    """

    @abstractmethod
    def name(self) -> str:
        """Human-readable name of the model."""

    @abstractmethod
    def description(self) -> str:
        """Short description of what the model calculates."""

    @abstractmethod
    def validate(self) -> None:
        """Raise a ValidationError if the parameters are not usable."""

    def is_applicable(self) -> bool:
        try:
            self.validate()
        except ValidationError:
            return False
        return True

    def warnings(self) -> List[str]:
        """Advisory messages about parameter ranges. Never blocks a calculation."""
        return []

    def with_params(self, **params: Any) -> 'PhysicsModel':
        """Return a copy of the model with some parameters replaced."""
        raise NotImplementedError(f"{self.__class__.__name__} does not support parameter updates")


class OpticalModel(PhysicsModel):
    """Models computing scattering, absorption and extinction."""

    @abstractmethod
    def calculate(self) -> OpticalResult:
        """Optical properties at the model's own wavelength."""

    @abstractmethod
    def calculate_spectrum(self, wavelengths: Sequence[float]) -> List[OpticalResult]:
        """One result per wavelength (nm), in input order."""


class ThermalModel(PhysicsModel):
    """Models computing effective thermal transport."""

    @abstractmethod
    def calculate(self) -> ThermalResult:
        pass

    @abstractmethod
    def calculate_temperature_sweep(self, temperatures: Sequence[float]) -> List[ThermalResult]:
        """One result per temperature (K), in input order."""


class ElectronicModel(PhysicsModel):
    """Models computing size-dependent electronic structure."""

    @abstractmethod
    def calculate(self) -> ElectronicResult:
        pass

    @abstractmethod
    def calculate_size_sweep(self, sizes: Sequence[float]) -> List[ElectronicResult]:
        """One result per particle diameter (nm), in input order."""


class Cacheable(ABC):
    """Marker for models whose results can be memoized by callers."""

    @abstractmethod
    def cache_params(self) -> Dict[str, Any]:
        """Parameters that fully determine the model output."""

    def cache_key(self) -> str:
        """
        Generate a deterministic key for caching purposes.

        :return: Hash string uniquely identifying this model configuration
        """
        key_dict = {
            'class': self.__class__.__name__,
            'params': sorted(self.cache_params().items()),
        }
        key_str = json.dumps(key_dict, sort_keys=True, default=repr)
        return hashlib.md5(key_str.encode()).hexdigest()


class Parallelizable:
    """Marker for models whose per-point work may be split across workers."""

    def can_parallelize(self) -> bool:
        return True

    def recommended_chunk_size(self) -> int:
        return DEFAULT_CHUNK_SIZE


__all__ = [
    'PhysicsModel', 'OpticalModel', 'ThermalModel', 'ElectronicModel',
    'Cacheable', 'Parallelizable', 'DEFAULT_CHUNK_SIZE',
]
