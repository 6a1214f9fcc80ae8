"""Single-parameter scale prior from Wang's GPDM work.

The density is improper: ``log p(x) = M*log(x)`` on ``x > 0``. With
``M > 0`` it tends to ``-inf`` as ``x -> 0+`` and so discourages small
scale parameters such as kernel widths. The normalising constant is
omitted; only differences of the log-density and its gradient are used
when the prior regularises an objective.
"""

from __future__ import annotations

import numpy as np

from priorkit.distributions.base import Distribution

__all__ = ["WangDistribution"]


class WangDistribution(Distribution):
    """Improper scale prior ``p(x) ∝ x**M`` on ``x > 0``.

    Outside the support ``log_prob`` is ``-inf`` and ``grad_input`` is ``0.0``.
    """

    def __init__(self, M: float | None = None):
        super().__init__(1, "wang", name="Wang prior")
        self.set_param_name("M", 0)
        self.M = 1.0
        self.set_init_param()
        if M is not None:
            self.set_param(M, 0)

    def get_param(self, index: int) -> float:
        self._check_index(index)
        return self.M

    def set_param(self, value: float, index: int) -> None:
        self._check_index(index)
        value = float(value)
        if not np.isfinite(value):
            raise ValueError(f"M must be finite, got {value}.")
        self.M = value

    def set_init_param(self) -> None:
        self.M = 1.0

    def log_prob(self, x: float) -> float:
        if x <= 0.0:
            return -np.inf
        return float(self.M * np.log(x))

    def grad_input(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        return self.M / x
