__version__ = '0.1.0'

# Core abstractions
from nanocalc.core import constants
from nanocalc.core.types import (
    RefractiveIndex, as_refractive_index,
    ValidationError, OutOfRange, InvalidParameter, PhysicsViolation,
    CalculationError, ConvergenceFailed, NumericalInstability, InvalidInput,
    ModelNotApplicable, ValidationFailed,
)
from nanocalc.core.units import (
    nm, um, mm, Nanometer, Micrometer, Wavelength, Kelvin, ElectronVolt, ThermalConductivity,
)
from nanocalc.core.results import (
    OpticalMetadata, OpticalResult, ThermalMetadata, ThermalResult,
    ConfinementRegime, ElectronicMetadata, ElectronicResult,
)
from nanocalc.core.models import (
    PhysicsModel, OpticalModel, ThermalModel, ElectronicModel, Cacheable, Parallelizable,
)

# Models
from nanocalc.physics.optical.rayleigh import RayleighModel
from nanocalc.model.material import MaterialPreset, PRESETS, get_preset, element_index

# Workflow / results
from nanocalc.solve.results import ResultGrid, build_result_grid
from nanocalc.solve.sweep import Sweep
from nanocalc.solve.simulate import simulate, RegimeWarning
from nanocalc.config import Scene, SpectrumRange, load_scene

__all__ = [
    # meta
    "__version__",
    # core
    "constants",
    "RefractiveIndex",
    "as_refractive_index",
    "ValidationError",
    "OutOfRange",
    "InvalidParameter",
    "PhysicsViolation",
    "CalculationError",
    "ConvergenceFailed",
    "NumericalInstability",
    "InvalidInput",
    "ModelNotApplicable",
    "ValidationFailed",
    "nm",
    "um",
    "mm",
    "Nanometer",
    "Micrometer",
    "Wavelength",
    "Kelvin",
    "ElectronVolt",
    "ThermalConductivity",
    "OpticalMetadata",
    "OpticalResult",
    "ThermalMetadata",
    "ThermalResult",
    "ConfinementRegime",
    "ElectronicMetadata",
    "ElectronicResult",
    "PhysicsModel",
    "OpticalModel",
    "ThermalModel",
    "ElectronicModel",
    "Cacheable",
    "Parallelizable",
    # models
    "RayleighModel",
    "MaterialPreset",
    "PRESETS",
    "get_preset",
    "element_index",
    # workflow / results
    "ResultGrid",
    "build_result_grid",
    "Sweep",
    "simulate",
    "RegimeWarning",
    "Scene",
    "SpectrumRange",
    "load_scene",
]
