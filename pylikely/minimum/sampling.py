"""
Batches of correlated parameter draws around a minimum.

draw_parameters() is the vectorised counterpart of
MinimizationResult.set_random_parameters: it produces many draws and
their weights in one call and reports them in a Result envelope.
"""

from __future__ import annotations

import warnings

import numpy as np

from pylikely.core.compute.timing import timed
from pylikely.core.exceptions import MissingCovarianceError
from pylikely.core.result import Result
from pylikely.core.validation import check_non_negative_int
from pylikely.minimum._common import SampleParams
from pylikely.minimum.minimum import MinimizationResult
from pylikely.minimum.solution import SamplingSolution
from pylikely.random.source import RandomSource


def draw_parameters(
    minimum: MinimizationResult,
    n_draws: int,
    *,
    seed: int | None = None,
) -> SamplingSolution:
    """
    Draw correlated parameter vectors from a minimum's covariance.

    Args:
        minimum: A MinimizationResult with a covariance
        n_draws: Number of parameter vectors to draw
        seed: If given, draw from a fresh RandomSource(seed) so the batch is
            reproducible and the minimum's own source is not advanced.
            Otherwise the minimum's random source is used.

    Returns:
        SamplingSolution with draws of shape (n_draws, N) and weights of
        shape (n_draws,)

    Raises:
        MissingCovarianceError: If minimum has no covariance
        ValidationError: If n_draws is not a non-negative integer
    """
    if not minimum.has_covariance:
        raise MissingCovarianceError("draw_parameters: no covariance matrix available")
    n_draws = check_non_negative_int(n_draws, "n_draws")
    source = RandomSource(seed) if seed is not None else minimum.random_source

    n = minimum.n_parameters
    location = minimum.location
    factor = minimum.cholesky_factor

    with timed() as timer:
        with timer.section('gaussian_draws'):
            gauss = np.asarray(source.get_normal((n_draws, n)), dtype=np.float64)

        with timer.section('cholesky_transform'):
            draws = location + factor.transform(gauss)
            weights = 0.5 * np.sum(gauss * gauss, axis=1)

    warnings_list: list[str] = []
    if n_draws < 2:
        msg = f"only {n_draws} draw(s): empirical covariance is undefined"
        warnings.warn(msg, RuntimeWarning, stacklevel=2)
        warnings_list.append(msg)

    result = Result(
        params=SampleParams(draws=draws, weights=weights, location=location),
        info={
            'n_draws': n_draws,
            'n_parameters': n,
            'seed': seed,
        },
        timing=timer.result(),
        backend_name='cpu_cholesky',
        warnings=tuple(warnings_list),
    )
    return SamplingSolution(_result=result)
