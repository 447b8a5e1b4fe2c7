"""
Solution wrapper for batches of correlated parameter draws.

SamplingSolution wraps Result[SampleParams] and provides convenient
accessors and a text summary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylikely.core.result import Result
from pylikely.minimum._common import SampleParams


@dataclass
class SamplingSolution:
    """
    User-facing results of draw_parameters().

    Weights are negative log-likelihoods under the standard normal
    proposal, so importance weights against a target density p are
    exp(-nll_target(draw) + weight) up to normalisation.
    """
    _result: Result[SampleParams]

    # --- Core fields ---

    @property
    def draws(self) -> NDArray[np.floating[Any]]:
        """Parameter vectors, shape (n_draws, n_parameters)."""
        return self._result.params.draws

    @property
    def weights(self) -> NDArray[np.floating[Any]]:
        """0.5 * |g|^2 for the deviate behind each draw, shape (n_draws,)."""
        return self._result.params.weights

    @property
    def location(self) -> NDArray[np.floating[Any]]:
        """Minimum the draws are centred on."""
        return self._result.params.location

    @property
    def n_draws(self) -> int:
        return self._result.info['n_draws']

    @property
    def n_parameters(self) -> int:
        return self._result.info['n_parameters']

    @property
    def mean(self) -> NDArray[np.floating[Any]]:
        """Empirical mean of the draws."""
        return np.mean(self.draws, axis=0)

    @property
    def covariance(self) -> NDArray[np.floating[Any]]:
        """Empirical covariance of the draws (dense, ddof=1)."""
        return np.atleast_2d(np.cov(self.draws, rowvar=False, ddof=1))

    # --- Metadata ---

    @property
    def seed(self) -> int | None:
        return self._result.info['seed']

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Display ---

    def summary(self) -> str:
        """Per-parameter location, sample mean and sample standard deviation."""
        lines = [
            "Correlated Parameter Draws",
            "=" * 60,
            f"Draws: {self.n_draws}",
            f"Parameters: {self.n_parameters}",
            f"Seed: {self.seed if self.seed is not None else 'shared stream'}",
            "",
            f"{'':>8s} {'location':>14s} {'mean':>14s} {'std. dev.':>14s}",
        ]
        if self.n_draws > 1:
            mean = self.mean
            sd = np.sqrt(np.diag(self.covariance))
            for i in range(self.n_parameters):
                lines.append(
                    f"{f'p[{i}]':>8s} {self.location[i]:14.6g} {mean[i]:14.6g} {sd[i]:14.6g}"
                )
            lines.append("")
            lines.append(f"Mean weight: {np.mean(self.weights):.6g} "
                         f"(expected {0.5 * self.n_parameters:.6g})")
        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        if self.warnings:
            lines.append(f"Warnings: {len(self.warnings)}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"SamplingSolution(n_draws={self.n_draws}, "
            f"n_parameters={self.n_parameters}, backend={self.backend_name!r})"
        )
