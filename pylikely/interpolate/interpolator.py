"""
One-dimensional interpolation over tabulated data.

Interpolator wraps the scipy.interpolate algorithms behind a single
callable. Outside the tabulated domain it returns the nearest endpoint
value instead of extrapolating.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, TextIO

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import interpolate as sp_interpolate

from pylikely.core.exceptions import ValidationError
from pylikely.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_finite,
    check_increasing,
    check_min_samples,
)


def _linear(x, y):
    return lambda t: np.interp(t, x, y)


def _cspline(x, y):
    return sp_interpolate.CubicSpline(x, y, bc_type='natural', extrapolate=False)


def _akima(x, y):
    return sp_interpolate.Akima1DInterpolator(x, y)


def _pchip(x, y):
    return sp_interpolate.PchipInterpolator(x, y, extrapolate=False)


def _polynomial(x, y):
    return sp_interpolate.BarycentricInterpolator(x, y)


_ALGORITHMS: dict[str, tuple[Callable[[Any, Any], Callable], int]] = {
    # name: (builder, minimum number of points)
    'linear': (_linear, 2),
    'cspline': (_cspline, 3),
    'akima': (_akima, 5),
    'pchip': (_pchip, 2),
    'polynomial': (_polynomial, 2),
}

ALGORITHMS = frozenset(_ALGORITHMS)


class Interpolator:
    """
    Interpolate y(x) from control points.

    Args:
        x: Strictly increasing control point abscissas
        y: Control point values, same length as x
        algorithm: One of ALGORITHMS ('linear', 'cspline', 'akima',
            'pchip', 'polynomial')

    Raises:
        ValidationError: Unknown algorithm, non-increasing x, non-finite
            values, or too few points for the algorithm
        DimensionError: x and y lengths differ
    """

    def __init__(self, x: ArrayLike, y: ArrayLike, algorithm: str):
        if algorithm not in _ALGORITHMS:
            raise ValidationError(
                f"algorithm: unknown interpolation algorithm {algorithm!r}, "
                f"expected one of {sorted(ALGORITHMS)}"
            )
        builder, min_points = _ALGORITHMS[algorithm]

        xs = check_array(x, "x")
        ys = check_array(y, "y")
        check_1d(xs, "x")
        check_1d(ys, "y")
        check_consistent_length(xs, ys, names=("x", "y"))
        check_min_samples(xs, min_points, "x")
        check_finite(xs, "x")
        check_finite(ys, "y")
        check_increasing(xs, "x")

        self._x = xs
        self._y = ys
        self._algorithm = algorithm
        self._engine = builder(xs, ys)

    @property
    def algorithm(self) -> str:
        return self._algorithm

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return self._x.copy()

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        return self._y.copy()

    def __len__(self) -> int:
        return self._x.shape[0]

    def __call__(self, x: ArrayLike) -> float | NDArray[np.floating[Any]]:
        """
        Interpolated value(s) at x.

        Points below the first or above the last control point get the
        first or last y value.
        """
        t = np.asarray(x, dtype=np.float64)
        inside = np.clip(t, self._x[0], self._x[-1])
        result = np.asarray(self._engine(inside), dtype=np.float64)
        # Clipping pins outside points onto the endpoints exactly.
        result = np.where(t <= self._x[0], self._y[0], result)
        result = np.where(t >= self._x[-1], self._y[-1], result)
        if result.ndim == 0:
            return float(result)
        return result

    def __repr__(self) -> str:
        return f"Interpolator(n={len(self)}, algorithm={self._algorithm!r})"


def read_vectors(
    stream: TextIO,
    n_columns: int,
    ignore_extra: bool = False,
) -> list[NDArray[np.floating[Any]]]:
    """
    Read whitespace-separated numeric columns from a text stream.

    Blank lines and lines starting with '#' are skipped.

    Args:
        stream: Text stream to read
        n_columns: Number of columns required on every row
        ignore_extra: Silently drop columns beyond n_columns instead of
            raising

    Returns:
        One array per column; the row count is the common array length

    Raises:
        ValidationError: If a row has too few columns, unexpected extra
            columns, or a value that is not a number
    """
    if n_columns < 1:
        raise ValidationError(f"n_columns: must be >= 1, got {n_columns}")
    rows: list[list[float]] = []
    for line_number, line in enumerate(stream, start=1):
        text = line.strip()
        if not text or text.startswith('#'):
            continue
        tokens = text.split()
        if len(tokens) < n_columns:
            raise ValidationError(
                f"line {line_number}: expected {n_columns} columns, got {len(tokens)}"
            )
        if len(tokens) > n_columns and not ignore_extra:
            raise ValidationError(
                f"line {line_number}: unexpected extra input after {n_columns} columns: "
                f"{' '.join(tokens[n_columns:])!r}"
            )
        try:
            rows.append([float(token) for token in tokens[:n_columns]])
        except ValueError as e:
            raise ValidationError(f"line {line_number}: {e}") from e

    table = np.array(rows, dtype=np.float64).reshape(len(rows), n_columns)
    return [table[:, k].copy() for k in range(n_columns)]


def create_interpolator(filename: str | Path, algorithm: str) -> Interpolator:
    """
    Build an Interpolator from the first two columns of a text file.

    Columns beyond the second are ignored.
    """
    with open(filename) as f:
        x, y = read_vectors(f, 2, ignore_extra=True)
    return Interpolator(x, y, algorithm)
