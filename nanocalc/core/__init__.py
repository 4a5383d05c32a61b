"""
Core abstractions for nanocalc.

This package contains the physical constants, unit types, refractive index and
error types, the model interfaces and the per-domain result structures. It
does not depend on any concrete physical model.
"""

from .types import (
    RefractiveIndex, as_refractive_index,
    ValidationError, OutOfRange, InvalidParameter, PhysicsViolation,
    CalculationError, ConvergenceFailed, NumericalInstability, InvalidInput,
    ModelNotApplicable, ValidationFailed,
)
from .units import nm, um, mm, Nanometer, Micrometer, Wavelength, Kelvin, ElectronVolt, ThermalConductivity
from .results import (
    OpticalMetadata, OpticalResult, ThermalMetadata, ThermalResult,
    ConfinementRegime, ElectronicMetadata, ElectronicResult,
)
from .models import (
    PhysicsModel, OpticalModel, ThermalModel, ElectronicModel, Cacheable, Parallelizable,
    DEFAULT_CHUNK_SIZE,
)
