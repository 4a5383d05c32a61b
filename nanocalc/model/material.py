"""
Reference refractive indices for common nanoparticle materials.

Values are single-wavelength approximations meant to seed a calculation, not
dispersive data: presets are quoted near their plasmon or band-edge region,
element indices near 550 nm.
"""
from dataclasses import dataclass
from typing import Dict, Tuple

from nanocalc.core.types import RefractiveIndex


@dataclass(frozen=True)
class MaterialPreset:
    """
    Named particle material with a fixed complex refractive index.

    :param name: Display name (i.e. "Gold (Au)")
    :param symbol: Short lookup key (i.e. "Au")
    :param n_real: Real part of the refractive index
    :param n_imag: Imaginary part (extinction coefficient)
    :param description: Where the value applies
    """
    name: str
    symbol: str
    n_real: float
    n_imag: float
    description: str = ''

    @property
    def refractive_index(self) -> RefractiveIndex:
        return RefractiveIndex(self.n_real, self.n_imag)


PRESETS: Tuple[MaterialPreset, ...] = (
    MaterialPreset("Gold (Au)", "Au", 0.47, 2.40, "Gold nanoparticles at 520 nm"),
    MaterialPreset("Silver (Ag)", "Ag", 0.05, 3.00, "Silver nanoparticles at 400 nm"),
    MaterialPreset("Silicon (Si)", "Si", 4.15, 0.04, "Silicon at 500 nm"),
    MaterialPreset("TiO2", "TiO2", 2.50, 0.00, "Titanium dioxide (rutile)"),
)

# Approximate (n, k) of elemental solids at 550 nm
ELEMENT_INDICES: Dict[str, Tuple[float, float]] = {
    'Au': (0.47, 2.40),
    'Ag': (0.05, 3.00),
    'Cu': (0.94, 2.43),
    'Al': (0.82, 6.50),
    'Si': (4.15, 0.04),
    'Ti': (2.90, 3.10),
    'Fe': (2.95, 3.50),
    'Ni': (2.40, 4.30),
    'Pt': (2.37, 4.26),
    'Pd': (1.80, 4.40),
    'Cr': (3.10, 3.30),
    'Zn': (1.70, 5.00),
    'C': (2.40, 1.40),   # graphite
}
DEFAULT_ELEMENT_INDEX = (1.50, 0.00)


def get_preset(key: str) -> MaterialPreset:
    """Look up a preset by symbol or display name, ignoring case."""
    wanted = key.strip().lower()
    for preset in PRESETS:
        if wanted in (preset.symbol.lower(), preset.name.lower()):
            return preset
    raise ValueError(f"Material '{key}' not found in presets")


def element_index(symbol: str) -> RefractiveIndex:
    """Approximate index of an element; unknown elements get a transparent 1.5."""
    n, k = ELEMENT_INDICES.get(symbol, DEFAULT_ELEMENT_INDEX)
    return RefractiveIndex(n, k)


__all__ = ['MaterialPreset', 'PRESETS', 'ELEMENT_INDICES', 'get_preset', 'element_index']
