"""
Sweep engine for parameter scans.

Features:
- Cartesian product over model parameters (first key varies slowest).
- Serial or parallel execution through joblib, chunked by the model's
  recommended chunk size.
- Results come back in input order as a ResultGrid; any failing point aborts
  the whole sweep.

Usage example:
    sweep = Sweep({
        'radius': [10, 20, 40],
        'wavelength': list(range(300, 801, 5)),
    }, backend='loky')
    grid = sweep.run(RayleighModel(10, 500, RefractiveIndex(0.47, 2.40), 1.33))
"""
from __future__ import annotations

import logging
from itertools import product
from typing import Any, Dict, List, Optional, Sequence

import numpy as np
from joblib import Parallel, delayed

from nanocalc.core.models import OpticalModel, Parallelizable
from nanocalc.core.results import OpticalResult
from nanocalc.solve.results import ResultGrid, build_result_grid

logger = logging.getLogger(__name__)

_BACKENDS = {
    'serial': None,
    'loky': 'loky',
    'thread': 'threading',
    'process': 'multiprocessing',
}


def _eval_chunk(model: OpticalModel, updates: Sequence[Dict[str, Any]]) -> List[OpticalResult]:
    """Evaluate one chunk of sweep points against a base model."""
    keys = set().union(*updates) if updates else set()
    if keys == {'wavelength'}:
        return model.calculate_spectrum([u['wavelength'] for u in updates])
    return [model.with_params(**u).calculate() for u in updates]


class Sweep:
    """Parameter sweep over an OpticalModel.

    params maps constructor parameter names of the model to sequences of values.
    Scalars are treated as one-element sequences.

    Example:
        params = {
            'wavelength': [400.0, 500.0, 600.0],
            'n_medium': [1.0, 1.33],
        }
    """

    def __init__(
        self,
        params: Dict[str, Any],
        backend: str = 'serial',
        n_jobs: int = -1,
        chunk_size: Optional[int] = None,
    ) -> None:
        if backend not in _BACKENDS:
            raise ValueError("backend must be one of: serial, loky, thread, process")
        if chunk_size is not None and chunk_size < 1:
            raise ValueError("chunk_size must be a positive integer")
        self.params = params or {}
        if not self.params:
            raise ValueError("Sweep requires at least one parameter")
        self.backend = backend
        self.n_jobs = n_jobs
        self.chunk_size = chunk_size

        self._specs: Dict[str, List[Any]] = {}
        for key, val in self.params.items():
            if isinstance(val, (list, tuple, np.ndarray)):
                self._specs[str(key)] = list(val)
            else:
                self._specs[str(key)] = [val]

    @property
    def coords(self) -> Dict[str, List[Any]]:
        return {k: list(v) for k, v in self._specs.items()}

    def combinations(self) -> List[Dict[str, Any]]:
        """All parameter updates in row-major order."""
        keys = list(self._specs.keys())
        return [dict(zip(keys, values)) for values in product(*self._specs.values())]

    def points(self, model: OpticalModel) -> List[OpticalModel]:
        """Per-point model copies, in the same order as the results of ``run``."""
        return [model.with_params(**u) for u in self.combinations()]

    def _resolve_chunk_size(self, model: OpticalModel) -> int:
        if self.chunk_size is not None:
            return self.chunk_size
        if isinstance(model, Parallelizable):
            return model.recommended_chunk_size()
        return 1

    def _is_parallel(self, model: OpticalModel) -> bool:
        if self.backend == 'serial':
            return False
        return isinstance(model, Parallelizable) and model.can_parallelize()

    def run(self, model: OpticalModel) -> ResultGrid:
        """Execute the sweep and return a ResultGrid with one dim per parameter."""
        combos = self.combinations()
        size = self._resolve_chunk_size(model)
        chunks = [combos[i:i + size] for i in range(0, len(combos), size)]
        parallel = self._is_parallel(model)
        logger.info("Sweep of %d points over %s (%d chunks, backend=%s)",
                    len(combos), list(self._specs), len(chunks),
                    self.backend if parallel else 'serial')

        if parallel:
            per_chunk = Parallel(n_jobs=self.n_jobs, backend=_BACKENDS[self.backend])(
                delayed(_eval_chunk)(model, chunk) for chunk in chunks
            )
        else:
            per_chunk = [_eval_chunk(model, chunk) for chunk in chunks]

        results = [r for chunk_results in per_chunk for r in chunk_results]
        return build_result_grid(self.coords, results)


__all__ = ['Sweep']
