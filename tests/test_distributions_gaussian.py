"""Unit tests for priorkit.distributions.gaussian module."""

import numpy as np
import pytest
from scipy.integrate import trapezoid

from priorkit.distributions import GaussianDistribution


def test_gaussian_log_prob_matches_formula():
    """Tests that log_prob at precision 2 and x=1 matches the closed form."""
    dist = GaussianDistribution(precision=2.0)
    expected = 0.5 * np.log(2.0) - 0.5 * np.log(2.0 * np.pi) - 1.0
    assert dist.log_prob(1.0) == pytest.approx(expected)
    assert dist.log_prob(1.0) == pytest.approx(-1.5724, abs=1e-4)


def test_gaussian_grad_input_value():
    """Tests that grad_input is -precision * x."""
    dist = GaussianDistribution(precision=2.0)
    assert dist.grad_input(1.0) == pytest.approx(-2.0)
    assert dist.grad_input(0.0) == 0.0


def test_gaussian_log_prob_integrates_to_one():
    """Tests that the density is normalised."""
    dist = GaussianDistribution(precision=0.7)
    xs = np.linspace(-20.0, 20.0, 20001)
    dens = np.exp([dist.log_prob(x) for x in xs])
    assert trapezoid(dens, xs) == pytest.approx(1.0, rel=1e-6)


@pytest.mark.parametrize("precision", [0.1, 1.0, 3.5])
@pytest.mark.parametrize("x", [-2.0, -0.3, 0.0, 1.7])
def test_gaussian_grad_input_matches_finite_difference(precision, x, numerical_derivative):
    """Tests that grad_input agrees with a numerical derivative of log_prob."""
    dist = GaussianDistribution(precision=precision)
    assert dist.grad_input(x) == pytest.approx(numerical_derivative(dist.log_prob, x), abs=1e-5)


def test_gaussian_defaults_and_metadata():
    """Tests default parameter, tag, name, and parameter names."""
    dist = GaussianDistribution()
    assert dist.num_params == 1
    assert dist.get_param(0) == 1.0
    assert dist.dist_type == "gaussian"
    assert dist.name == "Gaussian prior"
    assert dist.get_param_name(0) == "precision"


def test_gaussian_set_init_param_resets_precision():
    """Tests that set_init_param restores precision to 1."""
    dist = GaussianDistribution(precision=5.0)
    dist.set_init_param()
    assert dist.precision == 1.0


def test_gaussian_rejects_non_positive_precision():
    """Tests that precision must be strictly positive."""
    with pytest.raises(ValueError):
        GaussianDistribution(precision=0.0)
    dist = GaussianDistribution()
    with pytest.raises(ValueError):
        dist.set_param(-1.0, 0)
    assert dist.precision == 1.0


def test_gaussian_param_index_out_of_range():
    """Tests that only index 0 is valid."""
    dist = GaussianDistribution()
    with pytest.raises(IndexError):
        dist.get_param(1)
    with pytest.raises(IndexError):
        dist.set_param(2.0, -1)
