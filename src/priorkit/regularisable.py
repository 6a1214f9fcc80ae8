"""Mixin that lets a parameterised model carry priors over its parameters.

A model implements four primitives (``num_params``, ``get_param``,
``set_param`` and ``grad_params``) and inherits from
:class:`Regularisable` to get:

* bulk parameter access (``get_params`` / ``set_params``),
* prior management (``add_prior``, ``clear_priors``, ...),
* the prior terms of a penalised objective (``prior_log_prob`` and
  ``add_prior_grad``),
* text serialization of the attached priors (``write_priors`` /
  ``read_priors``).

Example:
    >>> import numpy as np
    >>> from priorkit import GaussianDistribution, Regularisable
    >>> class Model(Regularisable):
    ...     def __init__(self, theta):
    ...         super().__init__()
    ...         self.theta = np.asarray(theta, dtype=float)
    ...     @property
    ...     def num_params(self):
    ...         return self.theta.size
    ...     def get_param(self, index):
    ...         return float(self.theta[index])
    ...     def set_param(self, value, index):
    ...         self.theta[index] = value
    ...     def grad_params(self, g):
    ...         g[:] = 0.0
    >>> model = Model([1.0, 2.0])
    >>> model.add_prior(GaussianDistribution(precision=1.0), 1)
    >>> g = np.zeros(2)
    >>> model.add_prior_grad(g)
    >>> g.tolist()
    [0.0, -2.0]
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TextIO

import numpy as np
from numpy.typing import NDArray

from priorkit.distributions.base import Distribution
from priorkit.distributions.io import read_dist, write_dist
from priorkit.exceptions import FileFormatError
from priorkit.logger import priorkit_logger
from priorkit.priors import ParamPriors
from priorkit.utils.strings import read_key_value
from priorkit.utils.validate import validate_index, validate_param_vector

__all__ = ["Regularisable"]


def _vector_position(arr: NDArray[np.floating], i: int) -> tuple[int, ...]:
    """Index tuple for entry ``i`` of a ``(n,)`` or ``(1, n)`` vector."""
    return (i,) if arr.ndim == 1 else (0, i)


class Regularisable(ABC):
    """Base class for models whose parameters can be regularised by priors.

    Subclasses must call ``super().__init__()`` so the prior list exists.
    Priors are evaluated in the order they were attached.
    """

    def __init__(self):
        self._priors = ParamPriors()

    @property
    @abstractmethod
    def num_params(self) -> int:
        """Number of scalar parameters."""

    @abstractmethod
    def get_param(self, index: int) -> float:
        """Returns parameter ``index``."""

    @abstractmethod
    def set_param(self, value: float, index: int) -> None:
        """Sets parameter ``index`` to ``value``."""

    @abstractmethod
    def grad_params(self, g: NDArray[np.floating]) -> None:
        """Writes the gradient of the model objective into ``g``."""

    def get_params(self, out: NDArray[np.floating] | None = None) -> NDArray[np.floating]:
        """Copies every parameter into a vector.

        Args:
            out: Optional ``(n,)`` or ``(1, n)`` array to fill. A new
                ``(n,)`` array is allocated when omitted.

        Returns:
            The filled vector.
        """
        n = self.num_params
        if out is None:
            out = np.empty(n, dtype=float)
        validate_param_vector(out, n, name="out")
        for i in range(n):
            out[_vector_position(out, i)] = self.get_param(i)
        return out

    def set_params(self, params: NDArray[np.floating]) -> None:
        """Sets every parameter from a ``(n,)`` or ``(1, n)`` vector."""
        n = self.num_params
        validate_param_vector(params, n)
        for i in range(n):
            self.set_param(float(params[_vector_position(params, i)]), i)

    def add_prior(self, dist: Distribution, index: int) -> None:
        """Attaches ``dist`` as a prior on parameter ``index``.

        Several priors may target the same index; their terms add up.

        Raises:
            IndexError: If ``index`` is not a valid parameter index.
            ValueError: If ``dist`` is already attached to a model; attach a
                ``clone()`` instead.
        """
        index = validate_index(index, self.num_params, name="parameter index")
        self._priors.add_dist(dist, index)
        priorkit_logger.debug("Attached %s prior to parameter %d.", dist.dist_type, index)

    def clear_priors(self) -> None:
        """Removes every attached prior."""
        priorkit_logger.debug("Clearing %d priors.", self._priors.num_dists)
        self._priors.clear_dists()

    @property
    def num_priors(self) -> int:
        """Number of attached priors."""
        return self._priors.num_dists

    def get_prior(self, ind: int) -> Distribution:
        """Returns the ``ind``-th attached prior."""
        return self._priors.get_dist(ind)

    def get_prior_type(self, ind: int) -> str:
        """Returns the family tag of the ``ind``-th attached prior."""
        return self._priors.get_dist_type(ind)

    def get_prior_index(self, ind: int) -> int:
        """Returns the parameter index of the ``ind``-th attached prior."""
        return self._priors.get_dist_index(ind)

    def prior_log_prob(self) -> float:
        """Sums the log-density of every prior at its parameter's current value.

        Returns:
            The total, ``0.0`` when no priors are attached.
        """
        total = 0.0
        for binding in self._priors:
            total += binding.dist.log_prob(self.get_param(binding.index))
        return total

    def add_prior_grad(self, g: NDArray[np.floating]) -> None:
        """Adds the prior gradient into ``g``.

        For each prior, the derivative of its log-density at the current
        parameter value is *added* to ``g`` at that parameter's index.
        ``g`` is never zeroed, so it may already hold the likelihood gradient.

        Args:
            g: ``(n,)`` or ``(1, n)`` gradient vector, updated in place.
        """
        validate_param_vector(g, self.num_params, name="g")
        for binding in self._priors:
            g[_vector_position(g, binding.index)] += binding.dist.grad_input(
                self.get_param(binding.index)
            )

    def write_priors(self, out: TextIO) -> None:
        """Writes every prior as a ``priorIndex=<i>`` line plus a distribution block."""
        for binding in self._priors:
            out.write(f"priorIndex={binding.index}\n")
            write_dist(binding.dist, out)
        priorkit_logger.debug("Wrote %d priors.", self._priors.num_dists)

    def read_priors(self, stream: TextIO, num_priors: int) -> None:
        """Reads ``num_priors`` priors written by :meth:`write_priors` and attaches them.

        The whole set is parsed before anything is attached, so a failure
        leaves the current priors untouched.

        Raises:
            FileFormatError: If the stream is malformed, or if a prior
                targets a parameter the model does not have.
        """
        parsed: list[tuple[int, Distribution]] = []
        for _ in range(num_priors):
            raw = read_key_value(stream, "priorIndex")
            try:
                index = int(raw)
            except ValueError as exc:
                raise FileFormatError(f"priorIndex is not an integer: '{raw}'.") from exc
            parsed.append((index, read_dist(stream)))

        for index, _ in parsed:
            try:
                validate_index(index, self.num_params, name="parameter index")
            except IndexError as exc:
                raise FileFormatError(f"priorIndex={index}: {exc}") from exc
        for index, dist in parsed:
            self._priors.add_dist(dist, index)
        priorkit_logger.debug("Read %d priors.", len(parsed))
