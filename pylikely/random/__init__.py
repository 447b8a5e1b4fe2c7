"""
Random number sources for pylikely.

Usage:
    from pylikely.random import RandomSource, allocate_aligned_array

    source = RandomSource.instance()
    source.set_seed(42)
    x = source.get_normal()

    buffer = allocate_aligned_array(1024 * 8)          # 1024 doubles
    source.fill_array_uniform(buffer, seed=7)          # shared stream untouched
"""

from pylikely.random.aligned import ALIGNMENT_BYTES, allocate_aligned_array, is_aligned
from pylikely.random.source import RandomSource, normalize_seed

__all__ = [
    "ALIGNMENT_BYTES",
    "RandomSource",
    "allocate_aligned_array",
    "is_aligned",
    "normalize_seed",
]
