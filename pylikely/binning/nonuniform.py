"""
Binning defined by an increasing list of sample points.

Each sample point is a zero-width bin: its low edge, high edge and center
all coincide.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylikely.core.exceptions import BinningError, ValidationError
from pylikely.core.validation import check_1d, check_array, check_finite


class NonUniformSampling:
    """
    Zero-width bins at arbitrary, non-decreasing sample points.

    Args:
        sample_points: At least one point, in non-decreasing order

    Raises:
        BinningError: If there are no points or they are out of order
    """

    def __init__(self, sample_points: ArrayLike):
        try:
            points = check_array(sample_points, "sample_points")
            check_1d(points, "sample_points")
            check_finite(points, "sample_points")
        except ValidationError as e:
            raise BinningError(f"NonUniformSampling: {e}") from e
        if points.shape[0] < 1:
            raise BinningError("NonUniformSampling: need at least 1 sample point.")
        decreasing = np.flatnonzero(np.diff(points) < 0)
        if len(decreasing) > 0:
            k = int(decreasing[0])
            raise BinningError(
                f"NonUniformSampling: sample points are not in increasing order "
                f"(index {k}: {points[k]!r}, index {k + 1}: {points[k + 1]!r})."
            )
        points.flags.writeable = False
        self._points = points

    @property
    def n_bins(self) -> int:
        return self._points.shape[0]

    @property
    def sample_points(self) -> NDArray[np.floating[Any]]:
        return self._points

    def is_valid_bin_index(self, index: int) -> bool:
        return 0 <= index < self.n_bins

    def _check_index(self, index: int, method: str) -> None:
        if not self.is_valid_bin_index(index):
            raise BinningError(f"{method}: invalid bin index {index}.")

    def get_bin_center(self, index: int) -> float:
        self._check_index(index, "get_bin_center")
        return float(self._points[index])

    def get_bin_low_edge(self, index: int) -> float:
        return self.get_bin_center(index)

    def get_bin_high_edge(self, index: int) -> float:
        return self.get_bin_center(index)

    def get_bin_width(self, index: int) -> float:
        self._check_index(index, "get_bin_width")
        return 0.0

    def __len__(self) -> int:
        return self.n_bins

    def __repr__(self) -> str:
        return f"NonUniformSampling(n_bins={self.n_bins})"
