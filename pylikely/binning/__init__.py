"""
Binning schemes.
"""

from pylikely.binning.nonuniform import NonUniformSampling

__all__ = ["NonUniformSampling"]
