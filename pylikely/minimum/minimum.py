"""
The outcome of a numerical minimization.

MinimizationResult holds the point a minimizer found, the objective value
there, and optionally a covariance matrix for the parameters. When a
covariance is present its Cholesky factor is computed once and used to
draw correlated parameter vectors around the minimum.
"""

from __future__ import annotations

import io
import warnings
from typing import Any, TextIO

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylikely.core.compute.linalg.cholesky import (
    CholeskyFactor,
    cholesky_from_errors,
    cholesky_packed,
)
from pylikely.core.compute.linalg.packed import PackedSymmetricMatrix, packed_size
from pylikely.core.exceptions import (
    DimensionError,
    MissingCovarianceError,
    NotPositiveDefiniteError,
    ValidationError,
)
from pylikely.core.validation import (
    check_1d,
    check_array,
    check_length,
)
from pylikely.minimum._common import CovarianceState
from pylikely.random.source import RandomSource

# printf-style format applied to every number in the text report
DEFAULT_FORMAT = "%.6g"


class MinimizationResult:
    """
    A minimum found by a minimizer, with optional parameter covariance.

    Args:
        value: Objective function value at the minimum
        location: Parameter values at the minimum, length N
        covariance: Optional covariance, either packed (length N(N+1)/2),
            dense (N x N), or, with errors_only=True, a length-N vector of
            per-parameter errors
        errors_only: Interpret covariance as a vector of errors
        random_source: Source of the Gaussian deviates used by
            set_random_parameters (default: RandomSource.instance())

    Raises:
        DimensionError: If covariance does not match the number of parameters
        NotPositiveDefiniteError: If a covariance is given but is not
            positive definite (or some error is <= 0)

    Not safe for concurrent use from several threads.
    """

    def __init__(
        self,
        value: float,
        location: ArrayLike,
        covariance: ArrayLike | PackedSymmetricMatrix | None = None,
        errors_only: bool = False,
        *,
        random_source: RandomSource | None = None,
    ):
        loc = check_array(location, "location")
        check_1d(loc, "location")
        self._value = float(value)
        self._location = loc
        self._covariance: CovarianceState | None = None
        self._random = random_source if random_source is not None else RandomSource.instance()

        if covariance is not None and not self.update_covariance(covariance, errors_only):
            what = "errors" if errors_only else "covariance"
            raise NotPositiveDefiniteError(
                f"MinimizationResult: {what} is not positive definite",
                matrix_name=what,
            )

    # --- State ---

    @property
    def value(self) -> float:
        """Objective function value at the minimum."""
        return self._value

    @property
    def location(self) -> NDArray[np.floating[Any]]:
        """Copy of the parameter values at the minimum."""
        return self._location.copy()

    @property
    def n_parameters(self) -> int:
        return self._location.shape[0]

    @property
    def has_covariance(self) -> bool:
        return self._covariance is not None

    @property
    def covariance(self) -> PackedSymmetricMatrix | None:
        return None if self._covariance is None else self._covariance.matrix

    @property
    def cholesky_factor(self) -> CholeskyFactor | None:
        return None if self._covariance is None else self._covariance.factor

    @property
    def random_source(self) -> RandomSource:
        return self._random

    # --- Updates ---

    def update_parameters(self, location: ArrayLike, value: float) -> None:
        """
        Replace the location and objective value, keeping the covariance.

        Values are stored as given; only the length is checked.

        Raises:
            DimensionError: If location changes the number of parameters
        """
        loc = check_array(location, "location")
        check_1d(loc, "location")
        check_length(loc, self.n_parameters, "location")
        self._location = loc
        self._value = float(value)

    def update_covariance(
        self,
        covariance: ArrayLike | PackedSymmetricMatrix,
        errors_only: bool = False,
    ) -> bool:
        """
        Replace the covariance and its Cholesky factor together.

        Args:
            covariance: Packed or dense covariance, or a vector of errors
            errors_only: Interpret covariance as per-parameter errors,
                squared onto the diagonal of an otherwise zero matrix

        Returns:
            True if the covariance was accepted. False if it is not
            positive definite (or some error is <= 0); the previous
            covariance, if any, is then left untouched.

        Raises:
            DimensionError: If the input does not match the number of parameters
        """
        n = self.n_parameters
        if errors_only:
            errors = check_array(covariance, "errors")
            check_1d(errors, "errors")
            if errors.shape[0] != n:
                raise DimensionError(
                    f"MinimizationResult: {errors.shape[0]} errors given for {n} parameters",
                    expected=n,
                    actual=errors.shape[0],
                )
            factor = cholesky_from_errors(errors)
            if factor is None:
                return False
            matrix = PackedSymmetricMatrix.from_errors(errors)
        else:
            matrix = self._as_covariance(covariance)
            factor = cholesky_packed(matrix)
            if factor is None:
                return False
        self._covariance = CovarianceState(matrix=matrix, factor=factor)
        return True

    def _as_covariance(self, covariance: ArrayLike | PackedSymmetricMatrix) -> PackedSymmetricMatrix:
        n = self.n_parameters
        if isinstance(covariance, PackedSymmetricMatrix):
            if covariance.n != n:
                raise DimensionError(
                    f"MinimizationResult: covariance is {covariance.n}x{covariance.n} "
                    f"for {n} parameters",
                    expected=n,
                    actual=covariance.n,
                )
            return PackedSymmetricMatrix(covariance.packed, name="covariance")

        data = check_array(covariance, "covariance")
        if data.ndim == 2:
            if data.shape != (n, n):
                raise DimensionError(
                    f"MinimizationResult: covariance has shape {data.shape} for {n} parameters",
                    expected=(n, n),
                    actual=data.shape,
                )
            return PackedSymmetricMatrix.from_dense(data, name="covariance")
        check_1d(data, "covariance")
        if data.shape[0] != packed_size(n):
            raise DimensionError(
                f"MinimizationResult: packed covariance has {data.shape[0]} elements, "
                f"expected {packed_size(n)} for {n} parameters",
                expected=packed_size(n),
                actual=data.shape[0],
            )
        return PackedSymmetricMatrix(data, name="covariance")

    # --- Derived quantities ---

    def _require_covariance(self, operation: str) -> CovarianceState:
        if self._covariance is None:
            raise MissingCovarianceError(
                f"MinimizationResult.{operation}: no covariance matrix available"
            )
        return self._covariance

    def get_errors(self) -> NDArray[np.floating[Any]]:
        """
        Per-parameter errors: square roots of the covariance diagonal.

        A non-positive diagonal entry yields an error of zero.

        Raises:
            MissingCovarianceError: If no covariance has been established
        """
        state = self._require_covariance("get_errors")
        variances = state.matrix.diagonal()
        bad = np.flatnonzero(variances <= 0)
        if len(bad) > 0:
            warnings.warn(
                f"covariance diagonal is non-positive for parameters {bad.tolist()}; "
                f"reporting zero errors",
                RuntimeWarning,
                stacklevel=2,
            )
        return np.sqrt(np.where(variances > 0, variances, 0.0))

    def set_random_parameters(self, params: NDArray[np.floating[Any]]) -> float:
        """
        Fill params with a random draw from the fitted covariance.

        Draws N independent standard normals g from the random source and
        writes location + L g, where L is the Cholesky factor.

        Args:
            params: Writable float array of length N, overwritten in place

        Returns:
            0.5 * sum(g**2), the negative log-likelihood of the deviate
            under a standard multivariate normal. Importance-sampling
            callers use it to reweight draws against a target density.

        Raises:
            MissingCovarianceError: If no covariance has been established
        """
        state = self._require_covariance("set_random_parameters")
        if not isinstance(params, np.ndarray) or not np.issubdtype(params.dtype, np.floating):
            raise ValidationError("params: expected a floating point numpy array")
        check_1d(params, "params")
        check_length(params, self.n_parameters, "params")

        gauss = np.asarray(self._random.get_normal(self.n_parameters), dtype=np.float64)
        params[:] = self._location + state.factor.transform(gauss)
        return 0.5 * float(gauss @ gauss)

    def random_parameters(self) -> tuple[NDArray[np.floating[Any]], float]:
        """Return (params, weight) for one random draw; see set_random_parameters."""
        params = np.empty(self.n_parameters)
        weight = self.set_random_parameters(params)
        return params, weight

    # --- Display ---

    def print_to_stream(self, stream: TextIO, format_spec: str = DEFAULT_FORMAT) -> None:
        """
        Write the text report.

        Format:
            F(v0,v1,...) = value
            ERRORS: e0 e1 ...          (only with a covariance)
            COVARIANCE:
             c00 c01 ...
             ...

        Args:
            stream: Any object with a write(str) method
            format_spec: printf-style format for every number, e.g. "%.3f"
        """
        fmt = _formatter(format_spec)
        location = ",".join(fmt(v) for v in self._location)
        stream.write(f"F({location}) = {fmt(self._value)}\n")
        if self._covariance is None:
            return
        errors = self.get_errors()
        stream.write("ERRORS:" + "".join(" " + fmt(e) for e in errors) + "\n")
        stream.write("COVARIANCE:\n")
        for row in self._covariance.matrix.to_dense():
            stream.write("".join(" " + fmt(c) for c in row) + "\n")

    def render(self, format_spec: str = DEFAULT_FORMAT) -> str:
        """Text report as a string."""
        buffer = io.StringIO()
        self.print_to_stream(buffer, format_spec)
        return buffer.getvalue()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"MinimizationResult(value={self._value!r}, n_parameters={self.n_parameters}, "
            f"has_covariance={self.has_covariance})"
        )


def _formatter(format_spec: str):
    try:
        format_spec % 1.0
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"format_spec: {format_spec!r} is not a printf-style format for one number: {e}"
        ) from e
    return lambda x: format_spec % float(x)
