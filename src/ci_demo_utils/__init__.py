"""Small utility helpers used by the CI troubleshooting demo."""

from .core import (
    FACTORIAL_NEGATIVE_MESSAGE,
    InvalidArgumentError,
    add,
    factorial,
    get_nested_property,
    get_value_or_default,
    multiply,
)
from .fetch import fetch_data

__all__ = [
    "FACTORIAL_NEGATIVE_MESSAGE",
    "InvalidArgumentError",
    "add",
    "factorial",
    "fetch_data",
    "get_nested_property",
    "get_value_or_default",
    "multiply",
]
