"""
Per-domain result structures.

Results are plain immutable data: models create them fresh for every
calculation and downstream consumers (plotting, exporters) read them as-is.
Only ``OpticalResult`` is produced by a model in this package; the thermal and
electronic shapes define the contract future models will fill.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class OpticalMetadata:
    """
    Diagnostics attached to an optical result.

    :param num_terms: Number of series terms used (None if not a series method)
    :param converged: Whether the method converged
    :param size_parameter: x = 2*pi*r/lambda
    :param notes: Model-specific notes
    """
    num_terms: Optional[int] = None
    converged: bool = False
    size_parameter: float = 0.0
    notes: Tuple[str, ...] = ()


@dataclass(frozen=True)
class OpticalResult:
    """
    Scattering, absorption and extinction of a single particle at one wavelength.

    Efficiencies are dimensionless, cross-sections are in nm^2 and the
    wavelength is in nm.
    """
    wavelength: float
    q_sca: float
    q_abs: float
    q_ext: float
    c_sca: float
    c_abs: float
    c_ext: float
    metadata: OpticalMetadata = field(default_factory=OpticalMetadata)

    def check_conservation(self) -> float:
        """|Q_ext - (Q_sca + Q_abs)|, should be numerically negligible."""
        return abs(self.q_ext - (self.q_sca + self.q_abs))

    @property
    def albedo(self) -> float:
        """Single-scattering albedo Q_sca / Q_ext (0 when nothing is extinguished)."""
        if self.q_ext == 0:
            return 0.0
        return self.q_sca / self.q_ext

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d['metadata']['notes'] = list(self.metadata.notes)
        return d


@dataclass(frozen=True)
class ThermalMetadata:
    size_to_mfp_ratio: Optional[float] = None
    dominant_mechanism: Optional[str] = None
    notes: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ThermalResult:
    """Effective thermal conductivity of a nanostructure at one temperature (K)."""
    temperature: float
    kappa_eff: float
    kappa_bulk: float
    reduction_factor: float
    mfp: Optional[float] = None
    metadata: ThermalMetadata = field(default_factory=ThermalMetadata)


class ConfinementRegime(Enum):
    WEAK = 'weak'                  # r >> a_B
    INTERMEDIATE = 'intermediate'  # r ~ a_B
    STRONG = 'strong'              # r << a_B


@dataclass(frozen=True)
class ElectronicMetadata:
    effective_mass: Optional[float] = None
    dielectric_constant: Optional[float] = None
    model_type: str = ''
    notes: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ElectronicResult:
    """Size-dependent band structure of a nanoparticle; energies in eV, sizes in nm."""
    diameter: float
    bandgap: float
    bulk_bandgap: float
    confinement_energy: float
    coulomb_correction: float
    regime: ConfinementRegime
    bohr_radius: Optional[float] = None
    metadata: ElectronicMetadata = field(default_factory=ElectronicMetadata)


__all__ = [
    'OpticalMetadata', 'OpticalResult',
    'ThermalMetadata', 'ThermalResult',
    'ConfinementRegime', 'ElectronicMetadata', 'ElectronicResult',
]
