import pytest

from nanocalc.core import constants as const
from nanocalc.core.units import (
    ElectronVolt, Kelvin, Micrometer, Nanometer, ThermalConductivity, Wavelength, mm, nm, um,
)


def test_length_helpers_return_nanometres():
    assert nm(42) == 42.0
    assert um(1.5) == pytest.approx(1500.0)
    assert mm(0.002) == pytest.approx(2000.0)


def test_nanometer_and_micrometer_conversions():
    assert Nanometer(500.0).to_meters() == pytest.approx(5e-7)
    assert Nanometer(2500.0).to_micrometers() == pytest.approx(2.5)
    assert Micrometer(2.0).to_nanometers() == Nanometer(2000.0)
    assert Micrometer(2.0).to_meters() == pytest.approx(2e-6)


def test_wavelength_to_photon_energy_and_frequency():
    wl = Wavelength(500.0)
    assert wl.to_energy_ev().value == pytest.approx(const.HC_EV_NM / 500.0)
    assert wl.to_energy_ev().value == pytest.approx(2.4797, abs=1e-4)
    assert wl.to_frequency_hz() == pytest.approx(5.99584916e14)
    assert wl.to_meters() == pytest.approx(5e-7)


def test_energy_wavelength_round_trip():
    e = ElectronVolt(2.0)
    assert e.to_wavelength().value == pytest.approx(619.92, abs=0.01)
    assert Wavelength.from_energy(e).to_energy_ev().value == pytest.approx(2.0)
    assert e.to_joules() == pytest.approx(2.0 * const.EV_TO_J)


def test_temperature_conversions():
    assert Kelvin(300.0).to_celsius() == pytest.approx(26.85)
    assert Kelvin(300.0).thermal_energy_ev().value == pytest.approx(const.K_B_T_300K_EV, rel=1e-3)


def test_unit_types_are_distinct_and_immutable():
    assert Nanometer(1.0) != Wavelength(1.0)
    assert Kelvin(10.0) < Kelvin(20.0)
    with pytest.raises(AttributeError):
        ThermalConductivity(148.0).value = 1.0
