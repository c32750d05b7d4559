#!/usr/bin/env python3
"""
Batch Operations

Apply a single-value arithmetic operation to every element of a collection.
Each function is a plain mapping over the Money methods; an error on any
element propagates and no partial list is returned.
"""

from collections.abc import Iterable

from .currency import Currency
from .money import Money
from .rounding import Real, RoundingMode


def multiply_all(values: Iterable[Money], scalar: Real, mode: RoundingMode = RoundingMode.NEAREST) -> list[Money]:
    """Multiply every value by scalar."""
    return [value.multiply(scalar, mode) for value in values]


def divide_all(values: Iterable[Money], scalar: Real, mode: RoundingMode = RoundingMode.NEAREST) -> list[Money]:
    """Divide every value by scalar."""
    return [value.divide(scalar, mode) for value in values]


def percentage_all(
    values: Iterable[Money], percent: Real, mode: RoundingMode = RoundingMode.NEAREST
) -> list[Money]:
    """Take the given percentage of every value."""
    return [value.percentage(percent, mode) for value in values]


def total(values: Iterable[Money], currency: Currency) -> Money:
    """
    Sum values exactly, starting from zero of the given currency.

    Args:
        values: Money values, all in currency
        currency: Currency of the result (and of an empty input)

    Returns:
        Exact sum

    Raises:
        CurrencyMismatchError: If any value has a different currency
    """
    result = Money.zero(currency)
    for value in values:
        result = result.add(value)
    return result
