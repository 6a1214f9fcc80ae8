"""Validation utilities for priorkit.

These checks guard programming contracts (indices, shapes). They raise
built-in exceptions and are never used for parsing input streams.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

__all__ = [
    "validate_index",
    "validate_param_vector",
    "validate_same_shape",
]


def validate_index(index: Any, size: int, name: str = "index") -> int:
    """Checks that ``index`` is an integer in ``[0, size)``.

    Args:
        index: Candidate index.
        size: Number of valid positions.
        name: Label used in the error message.

    Returns:
        ``index`` as a Python ``int``.

    Raises:
        TypeError: If ``index`` is not an integer.
        IndexError: If ``index`` is out of range.
    """
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise TypeError(f"{name} must be an integer, got {type(index).__name__}.")
    index = int(index)
    if index < 0 or index >= size:
        raise IndexError(f"{name}={index} out of range for size {size}.")
    return index


def validate_param_vector(arr: Any, n: int, name: str = "params") -> NDArray[np.floating]:
    """Checks that ``arr`` is a ``1 x n`` parameter vector.

    Both shape ``(n,)`` and shape ``(1, n)`` are accepted.

    Args:
        arr: Array to check. It is returned as-is (no copy) so callers can
            write into it.
        n: Required number of entries.
        name: Label used in the error message.

    Returns:
        The input array.

    Raises:
        TypeError: If ``arr`` is not a NumPy array.
        ValueError: If the shape is not ``(n,)`` or ``(1, n)``.
    """
    if not isinstance(arr, np.ndarray):
        raise TypeError(f"{name} must be a numpy.ndarray, got {type(arr).__name__}.")
    if arr.shape not in ((n,), (1, n)):
        raise ValueError(f"{name} must have shape ({n},) or (1, {n}); got {arr.shape}.")
    return arr


def validate_same_shape(g: Any, x: Any) -> None:
    """Checks that an output array ``g`` matches the shape of ``x``.

    Raises:
        TypeError: If ``g`` is not a NumPy array.
        ValueError: If the shapes differ.
    """
    if not isinstance(g, np.ndarray):
        raise TypeError(f"g must be a numpy.ndarray, got {type(g).__name__}.")
    x_shape = np.shape(x)
    if g.shape != x_shape:
        raise ValueError(f"g has shape {g.shape} but x has shape {x_shape}.")
