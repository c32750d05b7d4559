#!/usr/bin/env python3
"""
Money Error Types

Typed exceptions raised by the money core. Every error derives from MoneyError
and from the closest built-in exception, so callers can catch either.
"""


class MoneyError(Exception):
    """Base class for all money core errors"""

    pass


class CurrencyMismatchError(MoneyError, ValueError):
    """Raised when two operands carry different currency codes"""

    def __init__(self, left: str, right: str, operation: str = "combine"):
        self.left = left
        self.right = right
        self.operation = operation
        super().__init__(f"Currency mismatch: cannot {operation} {left} and {right}")


class AmountOverflowError(MoneyError, OverflowError):
    """Raised when an amount falls outside the signed 64-bit minor-unit range"""

    pass


class DivisionByZeroError(MoneyError, ZeroDivisionError):
    """Raised when dividing money by a zero scalar"""

    pass


class InvalidOperandError(MoneyError, ValueError):
    """Raised for non-finite or non-numeric operands"""

    pass


class InvalidRatioError(MoneyError, ValueError):
    """Raised for empty, negative, non-integer or all-zero allocation weights"""

    pass


class SerializationError(MoneyError, ValueError):
    """Raised when a money record or JSON document is malformed"""

    pass


class InvalidCurrencyError(MoneyError, ValueError):
    """Raised for invalid currency descriptors or unknown currency codes"""

    pass
