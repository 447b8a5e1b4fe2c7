"""
Function minima with parameter covariance.

Public API:
    MinimizationResult(value, location, covariance=None, errors_only=False)
    draw_parameters(minimum, n_draws, seed=None) -> SamplingSolution

Usage:
    from pylikely.minimum import MinimizationResult, draw_parameters

    fmin = MinimizationResult(1.5, [0.0, 1.0], [[1.0, 0.3], [0.3, 2.0]])
    params, weight = fmin.random_parameters()
    batch = draw_parameters(fmin, 10_000, seed=42)
"""

from pylikely.minimum.minimum import DEFAULT_FORMAT, MinimizationResult
from pylikely.minimum.sampling import draw_parameters
from pylikely.minimum.solution import SamplingSolution

__all__ = [
    "DEFAULT_FORMAT",
    "MinimizationResult",
    "SamplingSolution",
    "draw_parameters",
]
