from __future__ import annotations

import warnings
from typing import Any, Dict, Sequence, Union

import numpy as np

from nanocalc.core.results import OpticalResult
from nanocalc.core.types import IndexLike
from nanocalc.physics.optical.rayleigh import RayleighModel
from nanocalc.solve.results import ResultGrid
from nanocalc.solve.sweep import Sweep


class RegimeWarning(UserWarning):
    """Emitted when a model is used outside its regime of accuracy."""


def _is_seq(x: Any) -> bool:
    return isinstance(x, (list, tuple, np.ndarray)) and not isinstance(x, (str, bytes))


def _first(x: Any, name: str) -> Any:
    if not _is_seq(x):
        return x
    values = np.asarray(x).ravel()
    if values.size == 0:
        raise ValueError(f"{name} sequence must not be empty")
    return float(values[0])


def simulate(
    radius: Union[float, Sequence[float], np.ndarray],
    wavelength: Union[float, Sequence[float], np.ndarray],
    n_particle: IndexLike,
    n_medium: float = 1.0,
    *,
    backend: str = 'serial',
    n_jobs: int = -1,
    warn: bool = True,
) -> Union[OpticalResult, ResultGrid]:
    """High-level one-liner simulation API.

    - For scalar inputs, returns an OpticalResult (single-point).
    - For a sequence of radii and/or wavelengths, performs a sweep and returns
      a ResultGrid with dims ordered (radius, wavelength).

    Args:
        radius: particle radius in nm, scalar or sequence.
        wavelength: vacuum wavelength in nm, scalar or sequence.
        n_particle: particle index as RefractiveIndex, complex or (n, k).
        n_medium: real refractive index of the surrounding medium.
        backend: 'serial'|'loky'|'thread'|'process' for sweeps.
        warn: emit a RegimeWarning when the approximation is questionable.
    """
    base = RayleighModel(
        radius=_first(radius, "radius"),
        wavelength=_first(wavelength, "wavelength"),
        n_particle=n_particle,
        n_medium=n_medium,
    )

    params: Dict[str, Any] = {}
    if _is_seq(radius):
        params['radius'] = [float(r) for r in radius]
    if _is_seq(wavelength):
        params['wavelength'] = [float(w) for w in wavelength]

    if not params:
        if warn:
            for msg in base.warnings():
                warnings.warn(msg, RegimeWarning, stacklevel=2)
        return base.calculate()

    sweep = Sweep(params, backend=backend, n_jobs=n_jobs)
    if warn:
        points = sweep.points(base)
        flagged = [p for p in points if p.warnings()]
        if flagged:
            x_max = max(p.size_parameter() for p in flagged)
            warnings.warn(
                f"{len(flagged)} of {len(points)} sweep points have size parameter > 1 "
                f"(max x={x_max:.2f}). Rayleigh approximation may be inaccurate.",
                RegimeWarning, stacklevel=2)
    return sweep.run(base)


__all__ = ['simulate', 'RegimeWarning']
