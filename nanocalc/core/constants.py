"""
Physical constants with CODATA 2018 values.

All values are in SI units unless the name says otherwise (``_NM``, ``_EV``).
Every unit conversion in the package goes through this table.
"""
import numpy as np

# Speed of light in vacuum [m/s]
C = 2.99792458e8
# Speed of light [nm/s]
C_NM_S = 2.99792458e17
# Planck constant [J s]
H = 6.62607015e-34
# Reduced Planck constant [J s]
HBAR = 1.054571817e-34
# Boltzmann constant [J/K]
K_B = 1.380649e-23
# Elementary charge [C]
E = 1.602176634e-19
# Electron mass [kg]
M_E = 9.1093837015e-31
# Proton mass [kg]
M_P = 1.67262192369e-27
# Avogadro constant [1/mol]
N_A = 6.02214076e23
# Vacuum permittivity [F/m]
EPSILON_0 = 8.8541878128e-12
# Vacuum permeability [H/m]
MU_0 = 1.25663706212e-6
# Fine structure constant
ALPHA = 7.2973525693e-3
# Rydberg energy [eV]
RY = 13.605693122994
# Bohr radius [m]
BOHR_RADIUS = 5.29177210903e-11
# Bohr radius [nm]
BOHR_RADIUS_NM = 0.05291772109

# Conversion factors
EV_TO_J = 1.602176634e-19
J_TO_EV = 6.241509074e18
NM_TO_M = 1e-9
M_TO_NM = 1e9
UM_TO_NM = 1e3
MM_TO_NM = 1e6
ZERO_CELSIUS_K = 273.15
AMU_TO_KG = 1.66053906660e-27

# h*c in eV nm, the photon energy / wavelength product
HC_EV_NM = H * C * M_TO_NM / EV_TO_J

# Thermal energy at 300 K
K_B_T_300K_EV = 0.02585
K_B_T_300K_J = 4.14e-21


def thermal_de_broglie_nm(mass_kg: float) -> float:
    """Thermal de Broglie wavelength at 300 K for a particle of the given mass, in nm."""
    lam = H / np.sqrt(2.0 * np.pi * mass_kg * K_B * 300.0)
    return float(lam * M_TO_NM)


def plasma_wavelength_nm(omega_p_ev: float) -> float:
    """Wavelength (nm) corresponding to a plasma energy given in eV."""
    return HC_EV_NM / omega_p_ev


__all__ = [
    'C', 'C_NM_S', 'H', 'HBAR', 'K_B', 'E', 'M_E', 'M_P', 'N_A', 'EPSILON_0', 'MU_0',
    'ALPHA', 'RY', 'BOHR_RADIUS', 'BOHR_RADIUS_NM',
    'EV_TO_J', 'J_TO_EV', 'NM_TO_M', 'M_TO_NM', 'UM_TO_NM', 'MM_TO_NM', 'ZERO_CELSIUS_K',
    'AMU_TO_KG', 'HC_EV_NM', 'K_B_T_300K_EV', 'K_B_T_300K_J',
    'thermal_de_broglie_nm', 'plasma_wavelength_nm',
]
