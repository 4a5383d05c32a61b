import numpy as np
import pytest

from nanocalc.core import constants as const


def test_fine_structure_constant_consistency():
    # alpha = e^2 / (4 pi eps0 hbar c)
    alpha = const.E ** 2 / (4.0 * np.pi * const.EPSILON_0 * const.HBAR * const.C)
    assert abs(alpha - const.ALPHA) / const.ALPHA < 1e-6


def test_hc_product_in_ev_nm():
    assert const.HC_EV_NM == pytest.approx(1239.84193, rel=1e-6)


def test_rydberg_energy():
    ry_j = const.M_E * const.E ** 4 / (8.0 * const.EPSILON_0 ** 2 * const.H ** 2)
    assert abs(ry_j / const.E - const.RY) / const.RY < 1e-6


def test_bohr_radius():
    a0 = 4.0 * np.pi * const.EPSILON_0 * const.HBAR ** 2 / (const.M_E * const.E ** 2)
    assert abs(a0 - const.BOHR_RADIUS) / const.BOHR_RADIUS < 1e-6
    assert const.BOHR_RADIUS * const.M_TO_NM == pytest.approx(const.BOHR_RADIUS_NM, rel=1e-9)


def test_speed_of_light_units_agree():
    assert const.C * const.M_TO_NM == pytest.approx(const.C_NM_S, rel=1e-15)


def test_compound_helpers():
    # Electron thermal de Broglie wavelength at 300 K is about 4.3 nm
    assert const.thermal_de_broglie_nm(const.M_E) == pytest.approx(4.3, rel=0.02)
    assert const.plasma_wavelength_nm(9.0) == pytest.approx(const.HC_EV_NM / 9.0)
    assert const.K_B * 300.0 * const.J_TO_EV == pytest.approx(const.K_B_T_300K_EV, rel=1e-3)
