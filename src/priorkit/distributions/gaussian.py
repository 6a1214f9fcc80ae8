"""Zero-mean Gaussian distribution parameterised by its precision."""

from __future__ import annotations

import numpy as np

from priorkit.distributions.base import Distribution

__all__ = ["GaussianDistribution"]

_LOG_TWO_PI = float(np.log(2.0 * np.pi))


class GaussianDistribution(Distribution):
    """Zero-mean Gaussian with precision (inverse variance) ``precision``.

    ``log p(x) = 0.5*log(precision) - 0.5*log(2*pi) - 0.5*precision*x**2``

    Example:
        >>> from priorkit.distributions import GaussianDistribution
        >>> dist = GaussianDistribution(precision=2.0)
        >>> round(dist.log_prob(1.0), 4)
        -1.5724
        >>> dist.grad_input(1.0)
        -2.0
    """

    def __init__(self, precision: float | None = None):
        super().__init__(1, "gaussian", name="Gaussian prior")
        self.set_param_name("precision", 0)
        self.precision = 1.0
        self.set_init_param()
        if precision is not None:
            self.set_param(precision, 0)

    def get_param(self, index: int) -> float:
        self._check_index(index)
        return self.precision

    def set_param(self, value: float, index: int) -> None:
        self._check_index(index)
        value = float(value)
        if not value > 0.0:
            raise ValueError(f"precision must be > 0, got {value}.")
        self.precision = value

    def set_init_param(self) -> None:
        self.precision = 1.0

    def log_prob(self, x: float) -> float:
        return float(0.5 * np.log(self.precision) - 0.5 * _LOG_TWO_PI - 0.5 * self.precision * x * x)

    def grad_input(self, x: float) -> float:
        return -self.precision * x
