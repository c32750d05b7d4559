"""
Core Money Package

Currency descriptors, rounding policy, the Money value type, allocation,
serialization and configuration.

This package provides:
- Integer minor-unit money with exact add/subtract
- Scaling with explicit rounding modes (nearest, floor, ceil, truncate)
- Largest-remainder allocation that always sums to the original amount
- Record/JSON serialization and display formatting
"""

from .allocation import allocate, allocate_amount, split, validate_ratios
from .batch import divide_all, multiply_all, percentage_all, total
from .config import Config, Environment, MoneyDefaults, get_config, reload_config
from .currency import (
    BTC,
    BUILTIN_CURRENCIES,
    ETH,
    EUR,
    GBP,
    JPY,
    NGN,
    USD,
    USDT,
    Currency,
    format_minor_units,
    get_currency,
    load_currency_catalog,
    parse_major_to_minor,
)
from .errors import (
    AmountOverflowError,
    CurrencyMismatchError,
    DivisionByZeroError,
    InvalidCurrencyError,
    InvalidOperandError,
    InvalidRatioError,
    MoneyError,
    SerializationError,
)
from .money import MAX_AMOUNT, MIN_AMOUNT, Money
from .rounding import RoundingMode, round_amount, round_scaled
from .serialization import from_json, from_record, to_json, to_record

__all__ = [
    "AmountOverflowError",
    "BTC",
    "BUILTIN_CURRENCIES",
    # Configuration
    "Config",
    # Values
    "Currency",
    "CurrencyMismatchError",
    "DivisionByZeroError",
    "ETH",
    "EUR",
    "Environment",
    "GBP",
    "InvalidCurrencyError",
    "InvalidOperandError",
    "InvalidRatioError",
    "JPY",
    "MAX_AMOUNT",
    "MIN_AMOUNT",
    "Money",
    "MoneyDefaults",
    # Errors
    "MoneyError",
    "NGN",
    "RoundingMode",
    "SerializationError",
    "USD",
    "USDT",
    # Operations
    "allocate",
    "allocate_amount",
    "divide_all",
    "format_minor_units",
    "from_json",
    "from_record",
    "get_config",
    "get_currency",
    "load_currency_catalog",
    "multiply_all",
    "parse_major_to_minor",
    "percentage_all",
    "reload_config",
    "round_amount",
    "round_scaled",
    "split",
    "to_json",
    "to_record",
    "total",
    "validate_ratios",
]
