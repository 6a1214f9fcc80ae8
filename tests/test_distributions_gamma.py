"""Unit tests for priorkit.distributions.gamma module."""

import numpy as np
import pytest
from scipy.stats import gamma as scipy_gamma

from priorkit.distributions import GammaDistribution


@pytest.mark.parametrize("a, b", [(1.0, 1.0), (2.5, 0.5), (0.7, 3.0)])
@pytest.mark.parametrize("x", [0.1, 1.0, 4.2])
def test_gamma_log_prob_matches_scipy(a, b, x):
    """Tests that log_prob agrees with scipy's shape/rate gamma."""
    dist = GammaDistribution(a=a, b=b)
    assert dist.log_prob(x) == pytest.approx(scipy_gamma.logpdf(x, a, scale=1.0 / b))


@pytest.mark.parametrize("a, b", [(1.0, 1.0), (2.5, 0.5), (0.7, 3.0)])
@pytest.mark.parametrize("x", [0.3, 1.0, 4.2])
def test_gamma_grad_input_matches_finite_difference(a, b, x, numerical_derivative):
    """Tests that grad_input agrees with a numerical derivative of log_prob."""
    dist = GammaDistribution(a=a, b=b)
    assert dist.grad_input(x) == pytest.approx(numerical_derivative(dist.log_prob, x), rel=1e-5, abs=1e-6)


def test_gamma_outside_support():
    """Tests that x <= 0 gives -inf log_prob and zero gradient."""
    dist = GammaDistribution(a=2.0, b=1.0)
    for x in (0.0, -1.0):
        assert dist.log_prob(x) == -np.inf
        assert dist.grad_input(x) == 0.0


def test_gamma_params_and_defaults():
    """Tests parameter access, defaults, and parameter names."""
    dist = GammaDistribution()
    assert dist.num_params == 2
    assert dist.get_param(0) == pytest.approx(1e-6)
    assert dist.get_param(1) == pytest.approx(1e-6)
    dist.set_param(3.0, 0)
    dist.set_param(4.0, 1)
    assert (dist.a, dist.b) == (3.0, 4.0)
    assert dist.param_names == ["a", "b"]
    assert dist.dist_type == "gamma"
    dist.set_init_param()
    assert (dist.a, dist.b) == (1e-6, 1e-6)


def test_gamma_validates_parameters():
    """Tests that both parameters must be strictly positive."""
    with pytest.raises(ValueError):
        GammaDistribution(a=-1.0, b=1.0)
    with pytest.raises(ValueError):
        GammaDistribution(a=1.0, b=0.0)
    with pytest.raises(IndexError):
        GammaDistribution().get_param(2)
