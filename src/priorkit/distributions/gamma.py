"""Gamma distribution with shape ``a`` and rate ``b``."""

from __future__ import annotations

import numpy as np
from scipy.special import gammaln

from priorkit.distributions.base import Distribution

__all__ = ["GammaDistribution"]


class GammaDistribution(Distribution):
    """Gamma distribution over ``x > 0``.

    ``log p(x) = a*log(b) - log(Gamma(a)) + (a - 1)*log(x) - b*x``

    Outside the support ``log_prob`` is ``-inf`` and ``grad_input`` is
    ``0.0``, so a parameter that has left the support receives no pull from
    this prior.

    The default parameters ``a = b = 1e-6`` give a very broad prior.
    """

    def __init__(self, a: float | None = None, b: float | None = None):
        super().__init__(2, "gamma", name="Gamma prior")
        self.set_param_name("a", 0)
        self.set_param_name("b", 1)
        self.a = 1e-6
        self.b = 1e-6
        self.set_init_param()
        if a is not None:
            self.set_param(a, 0)
        if b is not None:
            self.set_param(b, 1)

    def get_param(self, index: int) -> float:
        index = self._check_index(index)
        return self.a if index == 0 else self.b

    def set_param(self, value: float, index: int) -> None:
        index = self._check_index(index)
        value = float(value)
        if not value > 0.0:
            raise ValueError(f"{'a' if index == 0 else 'b'} must be > 0, got {value}.")
        if index == 0:
            self.a = value
        else:
            self.b = value

    def set_init_param(self) -> None:
        self.a = 1e-6
        self.b = 1e-6

    def log_prob(self, x: float) -> float:
        if x <= 0.0:
            return -np.inf
        a, b = self.a, self.b
        return float(a * np.log(b) - gammaln(a) + (a - 1.0) * np.log(x) - b * x)

    def grad_input(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        return (self.a - 1.0) / x - self.b
