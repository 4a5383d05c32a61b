from .rayleigh import RayleighModel

__all__ = ['RayleighModel']
