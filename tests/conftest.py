"""Pytest configuration file with a minimal regularisable model."""

import numpy as np
import pytest

from priorkit import Regularisable

__all__ = ["VectorModel"]


class VectorModel(Regularisable):
    """Model whose parameters are the entries of a 1D array."""

    def __init__(self, theta):
        super().__init__()
        self.theta = np.array(theta, dtype=float)

    @property
    def num_params(self):
        return self.theta.size

    def get_param(self, index):
        return float(self.theta[index])

    def set_param(self, value, index):
        self.theta[index] = value

    def grad_params(self, g):
        # gradient of -0.5 * ||theta||^2
        g[:] = -self.theta


@pytest.fixture
def model():
    """A three-parameter model with no priors attached."""
    return VectorModel([0.5, 1.5, -2.0])


def central_difference(f, x, h=1e-6):
    """Central finite-difference estimate of ``f'(x)``."""
    return (f(x + h) - f(x - h)) / (2.0 * h)


@pytest.fixture
def numerical_derivative():
    """Returns the central-difference helper."""
    return central_difference
