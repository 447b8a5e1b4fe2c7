"""
Shared compute infrastructure for pylikely.

Timing utilities and the linear algebra kernels shared by the domain
modules (minimum, random).

Submodules:
    timing: Execution timing utilities
    linalg: Packed symmetric storage and Cholesky factorization
"""

from pylikely.core.compute.timing import Timer, timed

__all__ = [
    "Timer",
    "timed",
]
