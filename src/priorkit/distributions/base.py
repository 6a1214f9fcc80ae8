"""Base class for the distributions used as parameter priors.

A :class:`Distribution` is a univariate density with a fixed number of
scalar parameters. It exposes the log-density, its derivative with respect
to the *input* value, and a line-oriented text codec for its parameters.
The family tag itself is written and read one level up, by
:func:`priorkit.distributions.io.write_dist` and
:func:`priorkit.distributions.io.read_dist`.

Subclasses implement ``get_param``, ``set_param``, ``log_prob``,
``grad_input`` and ``set_init_param``; everything else is provided here.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import TextIO

import numpy as np
from numpy.typing import ArrayLike, NDArray

from priorkit.exceptions import FileFormatError
from priorkit.utils.strings import read_key_value
from priorkit.utils.validate import validate_index, validate_same_shape

__all__ = ["Distribution", "DEFAULT_PARAM_NAME"]

DEFAULT_PARAM_NAME = "no name"


class Distribution(ABC):
    """Univariate distribution with a fixed set of scalar parameters.

    Attributes:
        dist_type: Family tag used to dispatch deserialization.
        name: Free-form instance name.
        param_names: Display names of the parameters. The list is sized
            lazily by :meth:`set_param_name`, so it may be shorter than
            :attr:`num_params`.
    """

    def __init__(self, num_params: int, dist_type: str, name: str = ""):
        """Initialises the metadata shared by every family.

        Args:
            num_params: Number of scalar parameters. Fixed for the lifetime
                of the instance.
            dist_type: Family tag.
            name: Instance name.
        """
        if num_params < 0:
            raise ValueError(f"num_params must be >= 0, got {num_params}.")
        self._num_params = int(num_params)
        self.dist_type = dist_type
        self.name = name
        self.param_names: list[str] = []
        # set while a ParamPriors container holds this instance
        self._attached = False

    @property
    def num_params(self) -> int:
        """Number of scalar parameters."""
        return self._num_params

    @property
    def attached(self) -> bool:
        """Whether a prior container currently holds this instance."""
        return self._attached

    @abstractmethod
    def get_param(self, index: int) -> float:
        """Returns parameter ``index``."""

    @abstractmethod
    def set_param(self, value: float, index: int) -> None:
        """Sets parameter ``index`` to ``value``."""

    @abstractmethod
    def set_init_param(self) -> None:
        """Resets the parameters to the family's default starting point."""

    @abstractmethod
    def log_prob(self, x: float) -> float:
        """Log-density at ``x`` under the current parameters."""

    @abstractmethod
    def grad_input(self, x: float) -> float:
        """Derivative of :meth:`log_prob` with respect to ``x``."""

    def _check_index(self, index: int) -> int:
        return validate_index(index, self._num_params, name="param index")

    def get_params(self) -> NDArray[np.float64]:
        """Returns all parameters as a 1D array."""
        return np.array([self.get_param(i) for i in range(self._num_params)], dtype=float)

    def log_prob_sum(self, values: ArrayLike) -> float:
        """Sums :meth:`log_prob` over every entry of ``values``.

        Entries are visited in row-major order.

        Args:
            values: Scalar or array of input values.

        Returns:
            The summed log-density.
        """
        ll = 0.0
        for v in np.asarray(values, dtype=float).ravel():
            ll += self.log_prob(float(v))
        return ll

    def grad_inputs(self, g: NDArray[np.floating], x: ArrayLike) -> None:
        """Writes :meth:`grad_input` of every entry of ``x`` into ``g``.

        Args:
            g: Output array, same shape as ``x``. Overwritten in place.
            x: Input values.

        Raises:
            ValueError: If ``g`` and ``x`` differ in shape.
        """
        validate_same_shape(g, x)
        x_arr = np.asarray(x, dtype=float)
        for idx in np.ndindex(x_arr.shape):
            g[idx] = self.grad_input(float(x_arr[idx]))

    def grad_params(self, g: NDArray[np.floating]) -> None:
        """Gradient of the log-density with respect to the distribution's own parameters.

        Only distributions that are themselves optimised need this; the
        built-in families do not provide it.

        Raises:
            NotImplementedError: Always, unless a subclass overrides it.
        """
        raise NotImplementedError(
            f"{type(self).__name__} does not provide gradients with respect to its parameters."
        )

    def set_param_name(self, name: str, index: int) -> None:
        """Sets the display name of parameter ``index``.

        Names for lower indices that were never set are filled with
        ``"no name"``. Names are written after the value on a
        ``param<i>=`` line, so they must be non-empty, must not start with
        whitespace and must not contain ``=`` or line breaks.

        Raises:
            ValueError: If ``name`` cannot be written to a parameter block.
        """
        if not isinstance(name, str) or not name or name != name.lstrip():
            raise ValueError(
                f"parameter name must be a non-empty string without leading whitespace, got {name!r}."
            )
        if any(c in name for c in "=\r\n"):
            raise ValueError(f"parameter name must not contain '=' or line breaks, got {name!r}.")
        index = self._check_index(index)
        if len(self.param_names) <= index:
            self.param_names.extend([DEFAULT_PARAM_NAME] * (index + 1 - len(self.param_names)))
        self.param_names[index] = name

    def get_param_name(self, index: int) -> str:
        """Returns the display name of parameter ``index``.

        Raises:
            IndexError: If no name was set for ``index``.
        """
        return self.param_names[validate_index(index, len(self.param_names), name="param name index")]

    def clone(self) -> Distribution:
        """Returns an independent deep copy.

        The copy is not attached to any prior container.
        """
        dup = copy.deepcopy(self)
        dup._attached = False
        return dup

    def write_params(self, out: TextIO) -> None:
        """Writes the parameter block.

        The block is a ``numParams=<n>`` line followed by one
        ``param<i>=<value>[ <name>]`` line per parameter. Values are written
        with ``repr`` so they read back exactly.
        """
        out.write(f"numParams={self._num_params}\n")
        for i in range(self._num_params):
            line = f"param{i}={float(self.get_param(i))!r}"
            if i < len(self.param_names):
                line += f" {self.param_names[i]}"
            out.write(line + "\n")

    def read_params(self, stream: TextIO) -> None:
        """Reads a parameter block written by :meth:`write_params`.

        Either every value and name is applied or, on error, the instance
        is left as it was.

        Raises:
            FileFormatError: If the block is malformed, holds an invalid
                value, or declares a parameter count different from this
                family's.
        """
        raw = read_key_value(stream, "numParams")
        try:
            num = int(raw)
        except ValueError as exc:
            raise FileFormatError(f"numParams is not an integer: '{raw}'.") from exc
        if num != self._num_params:
            raise FileFormatError(
                f"'{self.dist_type}' has {self._num_params} parameters, stream declares {num}."
            )

        values: list[float] = []
        names: list[str | None] = []
        for i in range(num):
            value_and_name = read_key_value(stream, f"param{i}").split(None, 1)
            if not value_and_name:
                raise FileFormatError(f"param{i} has no value.")
            try:
                values.append(float(value_and_name[0]))
            except ValueError as exc:
                raise FileFormatError(f"param{i} is not a number: '{value_and_name[0]}'.") from exc
            names.append(value_and_name[1] if len(value_and_name) > 1 else None)

        saved = copy.deepcopy(self.__dict__)
        for i, (value, name) in enumerate(zip(values, names)):
            try:
                self.set_param(value, i)
                if name is not None:
                    self.set_param_name(name, i)
            except ValueError as exc:
                self.__dict__.clear()
                self.__dict__.update(saved)
                raise FileFormatError(f"invalid entry for param{i}: {exc}") from exc

    def __repr__(self) -> str:
        params = ", ".join(f"{self.get_param(i)!r}" for i in range(self._num_params))
        return f"{type(self).__name__}({params})"
