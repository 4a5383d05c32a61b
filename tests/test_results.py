import pytest

from nanocalc.core.results import OpticalMetadata, OpticalResult


def make_result(q_sca=1.5, q_abs=0.5, q_ext=2.0):
    return OpticalResult(
        wavelength=500.0, q_sca=q_sca, q_abs=q_abs, q_ext=q_ext,
        c_sca=100.0, c_abs=33.33, c_ext=133.33,
    )


def test_optical_result_conservation():
    assert make_result().check_conservation() < 1e-10


def test_conservation_error_is_exposed_not_enforced():
    # A result from an independent extinction estimate may deviate
    res = make_result(q_ext=2.1)
    assert res.check_conservation() == pytest.approx(0.1)


def test_default_metadata_and_albedo():
    res = make_result()
    assert res.metadata == OpticalMetadata()
    assert res.metadata.converged is False
    assert res.albedo == pytest.approx(0.75)
    assert make_result(0.0, 0.0, 0.0).albedo == 0.0


def test_results_are_frozen():
    res = make_result()
    with pytest.raises(AttributeError):
        res.q_ext = 3.0
