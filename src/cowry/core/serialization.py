#!/usr/bin/env python3
"""
Money Serialization

Converts Money to and from the structural record

    {"amount": 500, "currency": {"code": "NGN", "symbol": "₦", "precision": 2}}

Field order is fixed on write, unknown fields are ignored on read, and
from_record(to_record(value)) reproduces the identical amount and currency.
"""

import json
from pathlib import Path
from typing import Any

from .currency import Currency
from .errors import MoneyError, SerializationError
from .json_utils import compact_json, read_json, write_json
from .money import Money


def to_record(money: Money) -> dict[str, Any]:
    """Convert Money to its serialization record."""
    return {
        "amount": money.amount,
        "currency": {
            "code": money.currency.code,
            "symbol": money.currency.symbol,
            "precision": money.currency.precision,
        },
    }


def _require(data: dict[str, Any], name: str, expected: type, context: str) -> Any:
    if name not in data:
        raise SerializationError(f"{context} is missing required field '{name}'")
    value = data[name]
    if isinstance(value, bool) or not isinstance(value, expected):
        raise SerializationError(
            f"{context} field '{name}' must be {expected.__name__}, but provided value is: {value!r}"
        )
    return value


def from_record(record: Any) -> Money:
    """
    Create Money from a serialization record.

    Args:
        record: Mapping with amount and currency fields

    Returns:
        Money object

    Raises:
        SerializationError: If the record is malformed or describes an invalid value
    """
    if not isinstance(record, dict):
        raise SerializationError(f"Money record must be an object, but provided value is: {record!r}")

    amount = _require(record, "amount", int, "Money record")
    currency_data = _require(record, "currency", dict, "Money record")
    code = _require(currency_data, "code", str, "Currency record")
    symbol = _require(currency_data, "symbol", str, "Currency record")
    precision = _require(currency_data, "precision", int, "Currency record")

    try:
        return Money(amount, Currency(code=code, symbol=symbol, precision=precision))
    except MoneyError as e:
        raise SerializationError(f"Invalid money record: {e}") from e


def to_json(money: Money) -> str:
    """
    Serialize Money to a compact JSON string.

    Example:
        to_json(Money(500, NGN))
        -> '{"amount":500,"currency":{"code":"NGN","symbol":"₦","precision":2}}'
    """
    return compact_json(to_record(money))


def from_json(text: str | bytes) -> Money:
    """
    Deserialize Money from a JSON string.

    Raises:
        SerializationError: If the text is not valid JSON or not a valid record
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, TypeError, UnicodeDecodeError) as e:
        raise SerializationError(f"Invalid JSON: {e}") from e
    return from_record(data)


def dump_money_list(filepath: str | Path, values: list[Money]) -> None:
    """Write a list of Money values to a pretty-printed JSON file."""
    write_json(filepath, [to_record(value) for value in values])


def load_money_list(filepath: str | Path) -> list[Money]:
    """
    Read a list of Money values written by dump_money_list.

    Raises:
        SerializationError: If the file does not hold a list of valid records
    """
    try:
        data = read_json(filepath)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON in {filepath}: {e}") from e
    if not isinstance(data, list):
        raise SerializationError(f"Expected a list of money records in {filepath}")
    return [from_record(item) for item in data]
