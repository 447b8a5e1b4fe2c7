"""
Common data structures for function minima.

CovarianceState is the single optional composite held by a
MinimizationResult: either absent (None) or a covariance matrix together
with its Cholesky factor. SampleParams is the payload wrapped by
Result[P] for batches of correlated draws.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylikely.core.compute.linalg.cholesky import CholeskyFactor
from pylikely.core.compute.linalg.packed import PackedSymmetricMatrix
from pylikely.core.exceptions import DimensionError


@dataclass(frozen=True)
class CovarianceState:
    """
    A positive definite covariance and the factor that certified it.

    Replaced as a whole, never field by field.
    """
    matrix: PackedSymmetricMatrix
    factor: CholeskyFactor

    def __post_init__(self):
        if self.matrix.n != self.factor.n:
            raise DimensionError(
                f"covariance is {self.matrix.n}x{self.matrix.n} but its factor is "
                f"{self.factor.n}x{self.factor.n}",
                expected=self.matrix.n,
                actual=self.factor.n,
            )


@dataclass(frozen=True)
class SampleParams:
    """
    Parameter payload for a batch of correlated parameter draws.

    - draws: location + L g for each standard normal deviate g
    - weights: 0.5 * |g|^2, the negative log-likelihood of each deviate
      under a standard multivariate normal
    """
    draws: NDArray[np.floating[Any]]           # shape (n_draws, n_parameters)
    weights: NDArray[np.floating[Any]]         # shape (n_draws,)
    location: NDArray[np.floating[Any]]        # shape (n_parameters,)
