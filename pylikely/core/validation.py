"""
Input validation utilities for pylikely.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting,
truncating, or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pylikely.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).
    The returned array is always a fresh copy, so callers may keep it
    without aliasing the caller's storage.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with dtype float64

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    return np.array(result, dtype=np.float64, copy=True)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}",
            expected=ndim,
            actual=array.ndim,
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_length(array: NDArray[np.floating[Any]], length: int, name: str) -> None:
    """
    Verify a 1D array has exactly the given length.

    Args:
        array: Array to check
        length: Required length
        name: Parameter name for error messages

    Raises:
        DimensionError: If the length differs
    """
    if array.shape[0] != length:
        raise DimensionError(
            f"{name}: expected length {length}, got {array.shape[0]}",
            expected=length,
            actual=array.shape[0],
        )


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Args:
        array: Array to check
        min_samples: Minimum required samples (first dimension)
        name: Parameter name for error messages

    Raises:
        ValidationError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )


def check_square(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a 2D array is square.

    Raises:
        DimensionError: If the two dimensions differ
    """
    rows, cols = array.shape
    if rows != cols:
        raise DimensionError(
            f"{name}: expected a square matrix, got shape {array.shape}",
            expected=(rows, rows),
            actual=array.shape,
        )


def check_symmetric(
    array: NDArray[np.floating[Any]],
    name: str,
    rtol: float = 1e-10,
) -> None:
    """
    Verify a square matrix is symmetric up to a relative tolerance.

    Matrices computed as inverses or products (e.g. inv(hessian)) are
    symmetric only to rounding. An entry may differ from its mirror by
    rtol times the mirror's magnitude plus rtol times the largest
    magnitude in the matrix.

    Raises:
        ValidationError: If array differs from its transpose beyond rtol
    """
    scale = float(np.max(np.abs(array))) if array.size else 0.0
    close = np.isclose(array, array.T, rtol=rtol, atol=rtol * scale)
    if not np.all(close):
        i, j = np.argwhere(~close)[0]
        raise ValidationError(
            f"{name}: matrix is not symmetric "
            f"([{i}, {j}]={array[i, j]!r} but [{j}, {i}]={array[j, i]!r})"
        )


def check_increasing(
    array: NDArray[np.floating[Any]],
    name: str,
    strict: bool = True,
) -> None:
    """
    Verify a 1D array is sorted in increasing order.

    Args:
        array: Array to check
        name: Parameter name for error messages
        strict: If True, equal neighbours are also rejected

    Raises:
        ValidationError: If the array is not (strictly) increasing
    """
    steps = np.diff(array)
    bad = np.flatnonzero(steps <= 0 if strict else steps < 0)
    if len(bad) > 0:
        k = int(bad[0])
        order = "strictly increasing" if strict else "non-decreasing"
        raise ValidationError(
            f"{name}: values must be {order} "
            f"(index {k}: {array[k]!r}, index {k + 1}: {array[k + 1]!r})"
        )


def check_non_negative_int(value: int, name: str) -> int:
    """
    Verify value is an integer >= 0 and return it as a Python int.

    Raises:
        ValidationError: If value is not an integer or is negative
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(f"{name}: expected an integer, got {type(value).__name__}")
    if value < 0:
        raise ValidationError(f"{name}: must be >= 0, got {value}")
    return int(value)
