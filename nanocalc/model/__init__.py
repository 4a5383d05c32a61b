"""
Material data for particle models.

This module holds reference refractive indices used to seed calculations. It
does not depend on any physical model.
"""

from .material import MaterialPreset, PRESETS, ELEMENT_INDICES, get_preset, element_index

__all__ = ['MaterialPreset', 'PRESETS', 'ELEMENT_INDICES', 'get_preset', 'element_index']
