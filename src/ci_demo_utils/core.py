"""Arithmetic and lookup helpers exercised by the CI demo test suite.

Every function here is stateless: calling it twice with the same arguments
returns the same value.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

T = TypeVar("T")
D = TypeVar("D")

Number = int | float

FACTORIAL_NEGATIVE_MESSAGE = "Factorial not defined for negative numbers"
NESTED_KEY = "nested"


class InvalidArgumentError(ValueError):
    """Raised when an argument falls outside an operation's domain."""


def add(a: Number, b: Number) -> Number:
    """Return the sum of two numbers."""
    return a + b


def multiply(a: Number, b: Number) -> Number:
    """Return the product of two numbers."""
    return a * b


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative integer.

    Raises:
        InvalidArgumentError: If ``n`` is negative.

    """
    if n < 0:
        raise InvalidArgumentError(FACTORIAL_NEGATIVE_MESSAGE)

    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def get_value_or_default(value: T | None, default_value: D) -> T | D:
    """Return ``value`` unless it is ``None``, otherwise ``default_value``.

    Falsy values such as ``0``, ``""`` and ``False`` are returned unchanged.
    """
    if value is None:
        return default_value
    return value


def get_nested_property(container: Any, property_name: str) -> Any:
    """Look up ``container["nested"][property_name]`` without raising.

    Returns ``None`` as soon as any link in the chain is missing.
    """
    if container is None:
        return None
    if not isinstance(container, Mapping) or NESTED_KEY not in container:
        return None

    nested = container[NESTED_KEY]
    if not isinstance(nested, Mapping) or property_name not in nested:
        return None

    return nested[property_name]
