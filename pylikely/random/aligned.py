"""
Aligned buffer allocation for the bulk fill routines.

RandomSource.fill_array_uniform and fill_array_normal only accept buffers
whose data pointer sits on a 128-bit boundary. numpy gives no such
guarantee for arbitrary dtypes, so buffers are carved out of a slightly
larger byte allocation.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import DTypeLike, NDArray

from pylikely.core.exceptions import ValidationError
from pylikely.core.validation import check_non_negative_int

# 128-bit alignment
ALIGNMENT_BYTES = 16


def allocate_aligned_array(
    byte_size: int,
    dtype: DTypeLike = np.float64,
    alignment: int = ALIGNMENT_BYTES,
) -> NDArray[Any]:
    """
    Allocate an uninitialised 1D array with an aligned data pointer.

    Args:
        byte_size: Size of the buffer in bytes; must be a multiple of the
            item size of dtype
        dtype: Element type of the returned array
        alignment: Required alignment in bytes (power of two)

    Returns:
        Writable array of byte_size // itemsize elements. The array keeps
        its backing allocation alive through .base.

    Raises:
        ValidationError: If byte_size is negative or not a whole number
            of elements, or alignment is not a power of two
    """
    byte_size = check_non_negative_int(byte_size, "byte_size")
    alignment = check_non_negative_int(alignment, "alignment")
    if alignment == 0 or alignment & (alignment - 1):
        raise ValidationError(f"alignment: must be a power of two, got {alignment}")
    dt = np.dtype(dtype)
    if byte_size % dt.itemsize:
        raise ValidationError(
            f"byte_size: {byte_size} is not a multiple of the {dt} item size {dt.itemsize}"
        )
    raw = np.empty(byte_size + alignment, dtype=np.uint8)
    offset = -raw.ctypes.data % alignment
    return raw[offset:offset + byte_size].view(dt)


def is_aligned(array: NDArray[Any], alignment: int = ALIGNMENT_BYTES) -> bool:
    """True if the array's data pointer is a multiple of alignment."""
    return array.ctypes.data % alignment == 0
