"""
pylikely: support library for statistical fitting.

Represents the outcome of a numerical minimization (a parameter vector,
its objective value and an optional covariance) and provides the
numerical machinery around it: packed symmetric storage, Cholesky
factorization as a positive-definiteness test and sampling transform,
and random sources for correlated parameter draws.

Submodules:
    minimum: MinimizationResult and batch parameter draws
    random: RandomSource and aligned buffers
    fitparams: Named fit parameters
    interpolate: 1D interpolation over tabulated data
    binning: Non-uniform sampling points
    core: Exceptions, validation, packed linear algebra
"""

__version__ = "0.1.0"

from pylikely import binning
from pylikely import fitparams
from pylikely import interpolate
from pylikely import minimum
from pylikely import random
from pylikely.minimum import MinimizationResult, draw_parameters
from pylikely.random import RandomSource

__all__ = [
    "__version__",
    "binning",
    "fitparams",
    "interpolate",
    "minimum",
    "random",
    "MinimizationResult",
    "RandomSource",
    "draw_parameters",
]
