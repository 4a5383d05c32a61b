"""
Scene configuration.

A scene describes one particle calculation (and optionally a spectrum) in a
YAML file, for example::

    radius: 20            # nm
    wavelength: 520       # nm
    material: Au          # or n_particle: {n: 0.47, k: 2.40}
    n_medium: 1.33
    spectrum: {start: 300, stop: 800, step: 5}
    backend: serial

Missing keys fall back to the defaults below. The input ranges are caller-side
guardrails: the physics models only reject non-physical values.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Tuple

import numpy as np
import yaml

from nanocalc.core.types import OutOfRange, RefractiveIndex, as_refractive_index
from nanocalc.model.material import get_preset
from nanocalc.physics.optical.rayleigh import RayleighModel

INPUT_RANGES: Dict[str, Tuple[float, float]] = {
    'radius': (1.0, 1000.0),
    'wavelength': (200.0, 2000.0),
    'n_real': (-10.0, 10.0),
    'n_imag': (0.0, 10.0),
    'n_medium': (1.0, 3.0),
}


@dataclass
class SpectrumRange:
    """Inclusive wavelength grid in nm."""
    start: float = 300.0
    stop: float = 800.0
    step: float = 5.0

    def wavelengths(self) -> List[float]:
        if self.step <= 0:
            raise ValueError("spectrum step must be positive")
        if self.stop < self.start:
            raise ValueError("spectrum stop must not be below start")
        count = int(np.floor((self.stop - self.start) / self.step + 1e-9)) + 1
        return [float(self.start + i * self.step) for i in range(count)]


@dataclass
class Scene:
    radius: float = 50.0
    wavelength: float = 500.0
    n_particle: RefractiveIndex = field(default_factory=lambda: RefractiveIndex(0.5, 2.5))
    n_medium: float = 1.33
    spectrum: SpectrumRange = field(default_factory=SpectrumRange)
    backend: str = 'serial'

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Scene':
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ValueError("Scene must be a mapping of parameter names to values")
        data = dict(data)
        known = {'radius', 'wavelength', 'n_particle', 'material', 'n_medium', 'spectrum', 'backend'}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown scene keys: {sorted(map(str, unknown))}")
        if 'n_particle' in data and 'material' in data:
            raise ValueError("Specify either 'n_particle' or 'material', not both")

        scene = cls()
        if 'radius' in data:
            scene.radius = _as_float('radius', data['radius'])
        if 'wavelength' in data:
            scene.wavelength = _as_float('wavelength', data['wavelength'])
        if 'n_medium' in data:
            scene.n_medium = _as_float('n_medium', data['n_medium'])
        if 'material' in data:
            scene.n_particle = get_preset(str(data['material'])).refractive_index
        if 'n_particle' in data:
            scene.n_particle = _parse_index(data['n_particle'])
        if 'spectrum' in data:
            rng = data['spectrum'] or {}
            if not isinstance(rng, Mapping):
                raise ValueError("'spectrum' must be a mapping with start/stop/step")
            unknown = set(rng) - {'start', 'stop', 'step'}
            if unknown:
                raise ValueError(f"Unknown spectrum keys: {sorted(map(str, unknown))}")
            scene.spectrum = SpectrumRange(**{k: _as_float(f"spectrum.{k}", v) for k, v in rng.items()})
        if 'backend' in data:
            scene.backend = str(data['backend'])
        return scene

    def check_ranges(self) -> None:
        """Raise OutOfRange if any input lies outside the usual guardrails."""
        values = {
            'radius': self.radius,
            'wavelength': self.wavelength,
            'n_real': self.n_particle.real,
            'n_imag': self.n_particle.imaginary,
            'n_medium': self.n_medium,
        }
        for key, value in values.items():
            lo, hi = INPUT_RANGES[key]
            if not lo <= value <= hi:
                raise OutOfRange(value, lo, hi)
        lo, hi = INPUT_RANGES['wavelength']
        for wl in (self.spectrum.start, self.spectrum.stop):
            if not lo <= wl <= hi:
                raise OutOfRange(wl, lo, hi)

    def to_model(self) -> RayleighModel:
        return RayleighModel(self.radius, self.wavelength, self.n_particle, self.n_medium)


def _as_float(key: str, value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"'{key}' must be a number, got {value!r}") from None


def _parse_index(value: Any) -> RefractiveIndex:
    if isinstance(value, Mapping):
        if 'n' not in value:
            raise ValueError("'n_particle' mapping needs at least an 'n' entry")
        return RefractiveIndex(_as_float('n_particle.n', value['n']), _as_float('n_particle.k', value.get('k', 0.0)))
    try:
        return as_refractive_index(value)
    except TypeError as e:
        raise ValueError(str(e)) from e


def load_scene(path: str) -> Scene:
    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Malformed scene file {path}: {e}") from e
    return Scene.from_dict(data)


__all__ = ['INPUT_RANGES', 'SpectrumRange', 'Scene', 'load_scene']
