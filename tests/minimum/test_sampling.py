"""
Tests for draw_parameters() and SamplingSolution.
"""

import numpy as np
import pytest

from pylikely.core.exceptions import MissingCovarianceError, ValidationError
from pylikely.minimum import MinimizationResult, SamplingSolution, draw_parameters
from pylikely.random import RandomSource


COV3 = np.array([
    [2.0, 0.6, -0.3],
    [0.6, 1.0, 0.2],
    [-0.3, 0.2, 0.5],
])
LOCATION = np.array([1.0, -1.0, 3.0])


@pytest.fixture
def fmin():
    return MinimizationResult(0.0, LOCATION, COV3, random_source=RandomSource(99))


# ═══════════════════════════════════════════════════════════════════════
# Basic behaviour
# ═══════════════════════════════════════════════════════════════════════


class TestDrawParameters:

    def test_returns_solution(self, fmin):
        sol = draw_parameters(fmin, 100, seed=1)
        assert isinstance(sol, SamplingSolution)
        assert sol.draws.shape == (100, 3)
        assert sol.weights.shape == (100,)
        assert sol.n_draws == 100
        assert sol.n_parameters == 3
        assert sol.seed == 1
        assert sol.backend_name == 'cpu_cholesky'
        np.testing.assert_array_equal(sol.location, LOCATION)

    def test_requires_covariance(self):
        fmin = MinimizationResult(0.0, [1.0, 2.0], random_source=RandomSource(0))
        with pytest.raises(MissingCovarianceError):
            draw_parameters(fmin, 10)

    @pytest.mark.parametrize("n_draws", [-1, 2.5, "10"])
    def test_invalid_n_draws(self, fmin, n_draws):
        with pytest.raises(ValidationError):
            draw_parameters(fmin, n_draws)

    def test_matches_factor_transform(self, fmin):
        sol = draw_parameters(fmin, 50, seed=17)
        g = RandomSource(17).get_normal((50, 3))
        L = fmin.cholesky_factor.lower()
        np.testing.assert_allclose(sol.draws, LOCATION + g @ L.T, rtol=1e-13)
        np.testing.assert_allclose(sol.weights, 0.5 * np.sum(g * g, axis=1), rtol=1e-13)

    def test_seeded_draws_reproducible(self, fmin):
        a = draw_parameters(fmin, 20, seed=5)
        b = draw_parameters(fmin, 20, seed=5)
        np.testing.assert_array_equal(a.draws, b.draws)
        np.testing.assert_array_equal(a.weights, b.weights)

    def test_seed_does_not_advance_minimum_source(self):
        a = MinimizationResult(0.0, LOCATION, COV3, random_source=RandomSource(4))
        b = MinimizationResult(0.0, LOCATION, COV3, random_source=RandomSource(4))
        draw_parameters(a, 10, seed=123)
        pa, _ = a.random_parameters()
        pb, _ = b.random_parameters()
        np.testing.assert_array_equal(pa, pb)

    def test_unseeded_uses_minimum_source(self):
        fmin = MinimizationResult(0.0, LOCATION, COV3, random_source=RandomSource(31))
        sol = draw_parameters(fmin, 5)
        g = RandomSource(31).get_normal((5, 3))
        np.testing.assert_allclose(sol.weights, 0.5 * np.sum(g * g, axis=1), rtol=1e-13)
        assert sol.seed is None

    def test_timing_sections(self, fmin):
        sol = draw_parameters(fmin, 10, seed=2)
        assert 'total_seconds' in sol.timing
        assert 'gaussian_draws' in sol.timing
        assert 'cholesky_transform' in sol.timing
        sections = sol.timing['gaussian_draws'] + sol.timing['cholesky_transform']
        assert 0.0 <= sections <= sol.timing['total_seconds']

    def test_single_draw_warns(self, fmin):
        with pytest.warns(RuntimeWarning, match="empirical covariance"):
            sol = draw_parameters(fmin, 1, seed=3)
        assert sol.draws.shape == (1, 3)
        assert len(sol.warnings) == 1

    def test_zero_draws(self, fmin):
        with pytest.warns(RuntimeWarning):
            sol = draw_parameters(fmin, 0, seed=3)
        assert sol.draws.shape == (0, 3)
        assert sol.weights.shape == (0,)


# ═══════════════════════════════════════════════════════════════════════
# Statistical properties
# ═══════════════════════════════════════════════════════════════════════


class TestStatistics:

    def test_mean_and_covariance(self, fmin):
        sol = draw_parameters(fmin, 200_000, seed=2024)
        np.testing.assert_allclose(sol.mean, LOCATION, atol=0.02)
        np.testing.assert_allclose(sol.covariance, COV3, atol=0.03)

    def test_mean_weight_is_half_dimension(self, fmin):
        sol = draw_parameters(fmin, 200_000, seed=7)
        assert np.mean(sol.weights) == pytest.approx(1.5, abs=0.02)

    def test_single_parameter_covariance_is_2d(self):
        fmin = MinimizationResult(0.0, [0.0], [0.5], errors_only=True,
                                  random_source=RandomSource(0))
        sol = draw_parameters(fmin, 50_000, seed=11)
        assert sol.covariance.shape == (1, 1)
        assert sol.covariance[0, 0] == pytest.approx(0.25, abs=0.01)


# ═══════════════════════════════════════════════════════════════════════
# Display
# ═══════════════════════════════════════════════════════════════════════


class TestDisplay:

    def test_summary(self, fmin):
        text = draw_parameters(fmin, 1000, seed=8).summary()
        assert "Correlated Parameter Draws" in text
        assert "Draws: 1000" in text
        assert "Seed: 8" in text
        assert "p[2]" in text
        assert "Mean weight:" in text
        assert "Backend: cpu_cholesky" in text

    def test_summary_without_enough_draws(self, fmin):
        with pytest.warns(RuntimeWarning):
            text = draw_parameters(fmin, 1).summary()
        assert "Seed: shared stream" in text
        assert "Mean weight" not in text
        assert "Warnings: 1" in text

    def test_repr(self, fmin):
        sol = draw_parameters(fmin, 4, seed=1)
        assert repr(sol) == "SamplingSolution(n_draws=4, n_parameters=3, backend='cpu_cholesky')"
