import warnings
from itertools import product
from typing import Any, Dict, Iterator, List, Mapping, Sequence, Tuple, Union

import numpy as np

from nanocalc.core.results import OpticalResult

_METADATA_FIELDS = ('num_terms', 'converged', 'size_parameter', 'notes')


class ResultGrid:
    """
    Optical results of a parameter sweep, laid out on a labeled grid.

    :param dims: Swept model parameters in sweep order (i.e. ['radius', 'wavelength'])
    :param coords: Parameter values per dim
    :param data: One OpticalResult per grid point; the last dim varies fastest

    Points are picked by parameter value (``sel``/``loc``) or by position
    (``isel``); ``get`` stacks one quantity over the whole grid.
    """

    def __init__(self, dims: Sequence[str], coords: Mapping[str, Sequence[Any]], data: Sequence[OpticalResult]):
        self.dims = list(dims)
        self.coords = {k: list(v) for k, v in coords.items()}
        self.data: List[OpticalResult] = list(data)
        self._shape = tuple(len(self.coords[d]) for d in self.dims)
        n_points = int(np.prod(self._shape)) if self._shape else 1
        if len(self.data) != n_points:
            warnings.warn(
                f"{len(self.data)} results for a grid of {n_points} points; "
                f"positional selection may be wrong.")

    @property
    def shape(self) -> Tuple[int, ...]:
        return self._shape

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[OpticalResult]:
        return iter(self.data)

    def _flat_index(self, indices: Sequence[int]) -> int:
        if not self._shape:
            return 0
        return int(np.ravel_multi_index(tuple(int(i) for i in indices), self._shape))

    def isel(self, **indexers: int) -> Union['ResultGrid', OpticalResult]:
        """Select by position along each dim (negative positions count from the end).

        Fixing every dim returns the single OpticalResult, otherwise a smaller grid.
        """
        unknown = set(indexers) - set(self.dims)
        if unknown:
            raise KeyError(f"Unknown dimension {sorted(unknown)[0]}")
        axes: List[List[int]] = []
        kept: List[str] = []
        for d, size in zip(self.dims, self._shape):
            if d not in indexers:
                axes.append(list(range(size)))
                kept.append(d)
                continue
            pos = indexers[d] + size if indexers[d] < 0 else indexers[d]
            if not 0 <= pos < size:
                raise IndexError(f"Position {indexers[d]} outside '{d}' (size {size})")
            axes.append([pos])
        picked = [self.data[self._flat_index(idx)] for idx in product(*axes)]
        if not kept:
            return picked[0]
        return ResultGrid(kept, {d: self.coords[d] for d in kept}, picked)

    def sel(self, **selectors: Any) -> Union['ResultGrid', OpticalResult]:
        """Select by parameter value; floats match to a relative 1e-12. Alias: .loc"""
        indexers: Dict[str, int] = {}
        for d, val in selectors.items():
            if d not in self.coords:
                raise KeyError(f"Unknown dimension {d}")
            matches = [j for j, c in enumerate(self.coords[d])
                       if c == val or (np.isscalar(c) and np.isscalar(val) and _close(c, val))]
            if not matches:
                raise KeyError(f"No '{d}' coordinate equal to {val}")
            indexers[d] = matches[0]
        return self.isel(**indexers)

    loc = sel

    def _field(self, result: OpticalResult, field: str) -> Any:
        if field == 'conservation_error':
            return result.check_conservation()
        if field in _METADATA_FIELDS:
            return getattr(result.metadata, field)
        return getattr(result, field)

    def get(self, field: str) -> np.ndarray:
        """Stack a result field across the grid into an ndarray with shape dims.

        Accepts OpticalResult fields (q_sca, c_ext, ...), metadata fields
        (size_parameter, ...) and 'conservation_error'.
        """
        out = np.empty(self._shape, dtype=object)
        for idx in np.ndindex(self._shape):
            out[idx] = self._field(self.data[self._flat_index(idx)], field)
        try:
            return out.astype(float)
        except (TypeError, ValueError):
            return out

    def to_dataframe(self):
        """Return a pandas DataFrame with one row per grid point.

        Columns are the coordinate labels followed by the efficiencies,
        cross-sections and size parameter of each point.
        """
        import pandas as pd

        rows: List[Dict[str, Any]] = []
        for idx in np.ndindex(self._shape):
            r = self.data[self._flat_index(idx)]
            row: Dict[str, Any] = {}
            for d, i in zip(self.dims, idx):
                row[d] = self.coords[d][i]
            row.update({
                'q_sca': r.q_sca,
                'q_abs': r.q_abs,
                'q_ext': r.q_ext,
                'c_sca': r.c_sca,
                'c_abs': r.c_abs,
                'c_ext': r.c_ext,
                'size_parameter': r.metadata.size_parameter,
            })
            rows.append(row)
        return pd.DataFrame(rows)

    def max_conservation_error(self) -> float:
        """Largest |Q_ext - (Q_sca + Q_abs)| over the grid."""
        return max((r.check_conservation() for r in self.data), default=0.0)


def _close(a: Any, b: Any) -> bool:
    try:
        return bool(np.isclose(a, b, rtol=1e-12, atol=0.0))
    except TypeError:
        return False


def build_result_grid(coords: Mapping[str, Sequence[Any]], results: Sequence[OpticalResult]) -> ResultGrid:
    """Build a ResultGrid whose dims follow the order of the coords mapping."""
    return ResultGrid(dims=list(coords.keys()), coords=coords, data=results)


__all__ = ['ResultGrid', 'build_result_grid']
