"""
Dimensioned scalar types.

Each wrapper carries one float in a fixed unit so that a radius in nm cannot be
passed where a temperature in K is expected. Only conversions meaningful for the
unit are provided, and all of them read their factors from ``constants``.
"""
from __future__ import annotations

from dataclasses import dataclass

from nanocalc.core import constants as const


# Length helpers. Lengths inside the package are expressed in nanometres.
def nm(value: float) -> float:
    """Nanometres (identity, for readability at call sites)."""
    return float(value)


def um(value: float) -> float:
    """Convert micrometres to nanometres."""
    return value * const.UM_TO_NM


def mm(value: float) -> float:
    """Convert millimetres to nanometres."""
    return value * const.MM_TO_NM


@dataclass(frozen=True, order=True)
class Nanometer:
    """Length in nanometres."""
    value: float

    def to_meters(self) -> float:
        return self.value * const.NM_TO_M

    def to_micrometers(self) -> float:
        return self.value / const.UM_TO_NM


@dataclass(frozen=True, order=True)
class Micrometer:
    """Length in micrometres."""
    value: float

    def to_nanometers(self) -> Nanometer:
        return Nanometer(self.value * const.UM_TO_NM)

    def to_meters(self) -> float:
        return self.to_nanometers().to_meters()


@dataclass(frozen=True, order=True)
class Wavelength:
    """Vacuum wavelength in nanometres."""
    value: float

    def to_energy_ev(self) -> 'ElectronVolt':
        """Photon energy E = hc / lambda."""
        return ElectronVolt(const.HC_EV_NM / self.value)

    def to_frequency_hz(self) -> float:
        """Optical frequency f = c / lambda."""
        return const.C_NM_S / self.value

    def to_meters(self) -> float:
        return self.value * const.NM_TO_M

    @classmethod
    def from_energy(cls, energy: 'ElectronVolt') -> 'Wavelength':
        return cls(const.HC_EV_NM / energy.value)


@dataclass(frozen=True, order=True)
class Kelvin:
    """Absolute temperature in kelvin."""
    value: float

    def to_celsius(self) -> float:
        return self.value - const.ZERO_CELSIUS_K

    def thermal_energy_ev(self) -> 'ElectronVolt':
        """k_B T expressed in eV."""
        return ElectronVolt(const.K_B * self.value * const.J_TO_EV)


@dataclass(frozen=True, order=True)
class ElectronVolt:
    """Energy in electron volts."""
    value: float

    def to_joules(self) -> float:
        return self.value * const.EV_TO_J

    def to_wavelength(self) -> Wavelength:
        return Wavelength.from_energy(self)


@dataclass(frozen=True, order=True)
class ThermalConductivity:
    """Thermal conductivity in W/(m K)."""
    value: float


__all__ = [
    'nm', 'um', 'mm',
    'Nanometer', 'Micrometer', 'Wavelength', 'Kelvin', 'ElectronVolt', 'ThermalConductivity',
]
