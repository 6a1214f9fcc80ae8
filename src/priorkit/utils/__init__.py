"""Utility functions for priorkit package."""

from .strings import read_key_value, tokenise
from .validate import (
    validate_index,
    validate_param_vector,
    validate_same_shape,
)

__all__ = [
    "read_key_value",
    "tokenise",
    "validate_index",
    "validate_param_vector",
    "validate_same_shape",
]
