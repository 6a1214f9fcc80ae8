"""Storage for priors bound to parameter positions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np

from priorkit.distributions.base import Distribution
from priorkit.utils.validate import validate_index

__all__ = ["PriorBinding", "ParamPriors"]


@dataclass(frozen=True)
class PriorBinding:
    """A distribution attached to one parameter index.

    Attributes:
        index: Index of the parameter the prior applies to.
        dist: The prior distribution.
    """

    index: int
    dist: Distribution


class ParamPriors:
    """Insertion-ordered list of :class:`PriorBinding`.

    The same parameter index may appear several times. The container takes
    over each distribution it is given: an instance can be held by one
    container at a time until that container is cleared, so callers that
    want to reuse a distribution should attach a ``clone()``.
    No evaluation happens here.
    """

    def __init__(self):
        self._bindings: list[PriorBinding] = []

    def add_dist(self, dist: Distribution, index: int) -> None:
        """Appends ``dist`` as a prior on parameter ``index``.

        Raises:
            TypeError: If ``dist`` is not a :class:`Distribution`.
            IndexError: If ``index`` is negative.
            ValueError: If ``dist`` is already held by a container.
        """
        if not isinstance(dist, Distribution):
            raise TypeError(f"dist must be a Distribution, got {type(dist).__name__}.")
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            raise TypeError(f"index must be an integer, got {index!r}.")
        if index < 0:
            raise IndexError(f"index must be >= 0, got {index}.")
        if dist.attached:
            raise ValueError(f"{dist!r} is already attached as a prior; attach a clone() instead.")
        dist._attached = True
        self._bindings.append(PriorBinding(int(index), dist))

    def clear_dists(self) -> None:
        """Forgets every binding."""
        for binding in self._bindings:
            binding.dist._attached = False
        self._bindings.clear()

    @property
    def num_dists(self) -> int:
        """Number of bindings."""
        return len(self._bindings)

    def _binding(self, ind: int) -> PriorBinding:
        return self._bindings[validate_index(ind, len(self._bindings), name="prior position")]

    def get_dist(self, ind: int) -> Distribution:
        """Returns the distribution at list position ``ind``."""
        return self._binding(ind).dist

    def get_dist_index(self, ind: int) -> int:
        """Returns the parameter index targeted by list position ``ind``."""
        return self._binding(ind).index

    def get_dist_type(self, ind: int) -> str:
        """Returns the family tag of the distribution at list position ``ind``."""
        return self._binding(ind).dist.dist_type

    def __len__(self) -> int:
        return len(self._bindings)

    def __iter__(self) -> Iterator[PriorBinding]:
        return iter(self._bindings)
