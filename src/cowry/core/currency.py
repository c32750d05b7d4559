#!/usr/bin/env python3
"""
Currency Descriptors and Display Utilities

Currency definitions, the built-in currency catalogue, and conversion between
integer minor units and human-readable strings.

Currency Systems:
- Amounts are stored as integer minor units (100 kobo = ₦1.00)
- Precision is the number of minor-unit digits (2 for NGN, 0 for JPY, 8 for BTC)
- Display uses symbol-prefixed, grouped, fixed-decimal strings: "₦1,234.50"

Key Principles:
- Currency identity is the code; symbol and precision are display metadata
- Conversions to and from display strings use integer or decimal arithmetic only
- Extra currencies come from an explicit YAML catalogue, never a mutable global
"""

import logging
import re
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import yaml

from .errors import InvalidCurrencyError, InvalidOperandError
from .rounding import Real, RoundingMode, round_scaled, to_decimal

logger = logging.getLogger(__name__)

MAX_PRECISION = 18

_CODE_PATTERN = re.compile(r"[A-Z0-9]{3,4}")

# Optional sign, one symbol or code on either side, comma-grouped digits
_MAJOR_AMOUNT_PATTERN = re.compile(
    r"(?P<sign>[+-]?)\s*"
    r"(?P<prefix>[^\d\s.,+-]*)\s*"
    r"(?P<inner_sign>[+-]?)"
    r"(?P<number>(?:\d{1,3}(?:,\d{3})+|\d+)(?:\.\d*)?|\.\d+)\s*"
    r"(?P<suffix>[^\d\s.,+-]*)"
)


@dataclass(frozen=True, eq=False)
class Currency:
    """
    Immutable currency descriptor.

    Two currencies are the same currency iff their codes match.

    Examples:
        >>> ngn = Currency("NGN", "₦", 2)
        >>> ngn == Currency("ngn", "N", 2)
        True
        >>> ngn.minor_units_per_major
        100
    """

    code: str
    symbol: str
    precision: int

    def __post_init__(self) -> None:
        if not isinstance(self.code, str):
            raise InvalidCurrencyError(f"$code must be a string, but provided value is: {self.code!r}")
        code = self.code.strip().upper()
        if not _CODE_PATTERN.fullmatch(code):
            raise InvalidCurrencyError(
                f"$code must be 3-4 letters or digits, but provided value is: '{self.code}'"
            )

        if not isinstance(self.symbol, str) or not self.symbol.strip():
            raise InvalidCurrencyError(f"$symbol must be a non-empty string, but provided value is: {self.symbol!r}")

        if (
            isinstance(self.precision, bool)
            or not isinstance(self.precision, int)
            or not 0 <= self.precision <= MAX_PRECISION
        ):
            raise InvalidCurrencyError(
                f"$precision must be an integer between 0 and {MAX_PRECISION}, "
                f"but provided value is: {self.precision!r}"
            )

        object.__setattr__(self, "code", code)
        object.__setattr__(self, "symbol", self.symbol.strip())

    @property
    def minor_units_per_major(self) -> int:
        """Number of minor units in one major unit (10 ** precision)."""
        return 10**self.precision

    def same_as(self, other: "Currency") -> bool:
        """Check whether two descriptors denote the same currency."""
        return self.code == other.code

    def __eq__(self, other: object) -> bool:
        """Currencies are equal when their codes match."""
        if not isinstance(other, Currency):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self.code)

    def __str__(self) -> str:
        """Return the currency code."""
        return self.code


# Built-in currencies
NGN = Currency("NGN", "₦", 2)
USD = Currency("USD", "$", 2)
EUR = Currency("EUR", "€", 2)
GBP = Currency("GBP", "£", 2)
JPY = Currency("JPY", "¥", 0)
BTC = Currency("BTC", "₿", 8)
ETH = Currency("ETH", "Ξ", 18)
USDT = Currency("USDT", "₮", 6)

BUILTIN_CURRENCIES: Mapping[str, Currency] = MappingProxyType(
    {currency.code: currency for currency in (NGN, USD, EUR, GBP, JPY, BTC, ETH, USDT)}
)


def get_currency(code: str, catalog: Mapping[str, Currency] | None = None) -> Currency:
    """
    Look up a currency by code.

    Args:
        code: Currency code (case-insensitive)
        catalog: Catalogue to search (default: built-in currencies)

    Returns:
        The matching Currency

    Raises:
        InvalidCurrencyError: If the code is not in the catalogue
    """
    catalog = BUILTIN_CURRENCIES if catalog is None else catalog
    key = str(code).strip().upper()
    if key not in catalog:
        raise InvalidCurrencyError(
            f"Currency with code '{key}' not found. Available currencies: {sorted(catalog)}"
        )
    return catalog[key]


def currency_from_dict(data: Mapping[str, Any]) -> Currency:
    """
    Build a Currency from a mapping with code, symbol and precision.

    Raises:
        InvalidCurrencyError: If a field is missing or invalid
    """
    missing = [name for name in ("code", "symbol", "precision") if name not in data]
    if missing:
        raise InvalidCurrencyError(f"Currency entry is missing fields: {', '.join(missing)}")
    return Currency(code=data["code"], symbol=data["symbol"], precision=data["precision"])


def load_currency_catalog(path: str | Path) -> dict[str, Currency]:
    """
    Load extra currencies from a YAML file, merged over the built-in catalogue.

    Expected format:
        currencies:
          - code: KES
            symbol: KSh
            precision: 2

    Args:
        path: Path to the YAML catalogue

    Returns:
        New dictionary of code -> Currency

    Raises:
        InvalidCurrencyError: If the document or an entry is malformed
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise InvalidCurrencyError(f"Invalid currency catalogue {path}: {e}") from e

    entries = data.get("currencies", []) if isinstance(data, dict) else None
    if not isinstance(entries, list):
        raise InvalidCurrencyError(f"Currency catalogue {path} must contain a 'currencies' list")

    catalog = dict(BUILTIN_CURRENCIES)
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise InvalidCurrencyError(f"Currency entry {i} in {path} must be a mapping")
        currency = currency_from_dict(entry)
        catalog[currency.code] = currency

    logger.info("Loaded %d currencies from %s", len(entries), path)
    return catalog


def format_minor_units(
    amount: int,
    precision: int,
    symbol: str = "",
    grouping: bool = True,
    display_precision: int | None = None,
    mode: RoundingMode = RoundingMode.NEAREST,
) -> str:
    """
    Format an integer minor-unit amount using pure integer arithmetic.

    Args:
        amount: Amount in minor units
        precision: Minor-unit digits of the amount's currency
        symbol: Currency symbol placed after the sign
        grouping: Insert comma separators in the integer part
        display_precision: Digits to show (default: precision)
        mode: Rounding mode when display_precision < precision

    Returns:
        Formatted string

    Examples:
        format_minor_units(500, 2, "₦") -> "₦5.00"
        format_minor_units(200, 0, "¥") -> "¥200"
        format_minor_units(-123456789, 2, "$") -> "-$1,234,567.89"
        format_minor_units(1249, 2, "$", display_precision=1) -> "$12.5"
    """
    digits = precision if display_precision is None else display_precision
    if digits < 0:
        raise InvalidOperandError(f"display_precision must be non-negative, got {digits}")

    if digits < precision:
        amount = round_scaled(amount, 1, 10 ** (precision - digits), mode)
    elif digits > precision:
        amount = amount * 10 ** (digits - precision)

    sign = "-" if amount < 0 else ""
    whole, fraction = divmod(abs(amount), 10**digits)

    whole_str = f"{whole:,}" if grouping else str(whole)
    fraction_str = f".{fraction:0{digits}d}" if digits > 0 else ""

    return f"{sign}{symbol}{whole_str}{fraction_str}"


def parse_major_to_minor(value: Real | str, precision: int, mode: RoundingMode = RoundingMode.NEAREST) -> int:
    """
    Convert a major-unit value to integer minor units.

    Strings may carry a sign, comma separators, and one currency symbol or code
    before or after the number; anything else is rejected. Digits beyond the
    precision are rounded with the given mode.

    Args:
        value: Major-unit amount like "₦1,234.56", "12.5 USD", 12 or Decimal("0.375")
        precision: Minor-unit digits of the target currency
        mode: Rounding mode for excess digits

    Returns:
        Amount in minor units

    Raises:
        InvalidOperandError: If the value cannot be parsed as a finite number
        AmountOverflowError: If the amount is far outside the 64-bit range

    Examples:
        parse_major_to_minor("$12.34", 2) -> 1234
        parse_major_to_minor("-1,234.5", 2) -> -123450
        parse_major_to_minor("KSh 100", 2) -> 10000
        parse_major_to_minor("0.375", 2, RoundingMode.FLOOR) -> 37
    """
    if isinstance(value, str):
        match = _MAJOR_AMOUNT_PATTERN.fullmatch(value.strip())
        if (
            match is None
            or (match["prefix"] and match["suffix"])
            or (match["sign"] and match["inner_sign"])
        ):
            raise InvalidOperandError(f"Cannot parse amount from '{value}'")
        sign = "-" if "-" in (match["sign"], match["inner_sign"]) else ""
        decimal_value = Decimal(sign + match["number"].replace(",", ""))
    else:
        decimal_value = to_decimal(value, "value")

    return round_scaled(decimal_value, 10**precision, 1, mode)
