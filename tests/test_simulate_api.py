import warnings

import numpy as np
import pytest

from nanocalc import OpticalResult, RegimeWarning, ResultGrid, simulate


def test_simulate_single_point_returns_result():
    res = simulate(10.0, 500.0, (0.5, 2.5), 1.33)
    assert isinstance(res, OpticalResult)
    assert np.isfinite(res.q_ext)
    assert res.check_conservation() < 1e-10


def test_simulate_sweep_returns_grid():
    grid = simulate([10.0, 20.0], np.array([400.0, 500.0, 600.0]), 0.47 + 2.40j, 1.33)
    assert isinstance(grid, ResultGrid)
    assert grid.dims == ['radius', 'wavelength']
    assert grid.shape == (2, 3)
    assert grid.get('q_ext').shape == (2, 3)


def test_simulate_spectrum_only():
    grid = simulate(10.0, [300.0, 400.0, 500.0], (1.5, 0.0))
    assert [r.wavelength for r in grid] == [300.0, 400.0, 500.0]
    assert np.all(grid.get('q_abs') == 0.0)


def test_regime_warning_is_emitted_but_does_not_block():
    with pytest.warns(RegimeWarning, match="may be inaccurate"):
        res = simulate(200.0, 500.0, (0.5, 2.5), 1.33)
    assert res.metadata.size_parameter > 1.0

    with pytest.warns(RegimeWarning, match="1 of 2 sweep points"):
        simulate([10.0, 200.0], 500.0, (0.5, 2.5), 1.33)


def test_no_warning_in_rayleigh_regime():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        simulate(10.0, 500.0, (0.5, 2.5), 1.33)
        simulate(200.0, 500.0, (0.5, 2.5), 1.33, warn=False)


def test_simulate_rejects_empty_sequence():
    with pytest.raises(ValueError):
        simulate(10.0, [], (1.5, 0.0))
