"""
Physics model implementations, grouped by domain.
"""

from .optical import RayleighModel

__all__ = ['RayleighModel']
