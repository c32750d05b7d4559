"""
Cowry - Fixed-Point Money for Python

Integer minor-unit monetary values with exact arithmetic, explicit rounding
modes, and ratio allocation that always reconciles to the cent.

Key Features:
- Currency-checked add/subtract/compare on integer minor units
- Multiply, divide and percentage with nearest/floor/ceil/truncate rounding
- Largest-remainder allocation (100 across [1, 1, 1] -> [34, 33, 33])
- Record/JSON round-trips and symbol-prefixed display formatting

Example Usage:
    from cowry import NGN, Money, RoundingMode

    price = Money(105, NGN)
    price.multiply(2.5, RoundingMode.FLOOR)  # Money(amount=262, currency=NGN)
    Money(100, NGN).allocate([1, 1, 1])      # 34, 33, 33

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "Cowry Developers"

from .core.currency import BTC, EUR, GBP, JPY, NGN, USD, Currency
from .core.errors import (
    AmountOverflowError,
    CurrencyMismatchError,
    DivisionByZeroError,
    InvalidOperandError,
    InvalidRatioError,
    MoneyError,
    SerializationError,
)
from .core.money import Money
from .core.rounding import RoundingMode, round_amount

__all__ = [
    # Values
    "Currency",
    "Money",
    "RoundingMode",
    "round_amount",

    # Currencies
    "BTC",
    "EUR",
    "GBP",
    "JPY",
    "NGN",
    "USD",

    # Errors
    "AmountOverflowError",
    "CurrencyMismatchError",
    "DivisionByZeroError",
    "InvalidOperandError",
    "InvalidRatioError",
    "MoneyError",
    "SerializationError",
]
