"""
One-dimensional interpolation over tabulated data.

Usage:
    from pylikely.interpolate import Interpolator

    f = Interpolator([0.0, 1.0, 2.0], [0.0, 1.0, 4.0], 'linear')
    f(1.5)      # 2.5
    f(10.0)     # 4.0 (endpoint value)
"""

from pylikely.interpolate.interpolator import (
    ALGORITHMS,
    Interpolator,
    create_interpolator,
    read_vectors,
)

__all__ = [
    "ALGORITHMS",
    "Interpolator",
    "create_interpolator",
    "read_vectors",
]
