#!/usr/bin/env python3
"""
Rounding Policy

Maps a real-valued intermediate result back to an integral minor-unit amount.

Rounding Modes:
- NEAREST: nearest integer, exact .5 ties away from zero (default)
- FLOOR: toward negative infinity
- CEIL: toward positive infinity
- TRUNCATE: toward zero

Key Principles:
- Rounding acts on the exact decimal or rational value, never on binary floats
- Floats enter through their shortest decimal representation (0.1 means one tenth)
- Integral inputs come back unchanged under every mode
- Non-finite inputs are rejected instead of collapsing to zero
"""

import math
from decimal import (
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_UP,
    Context,
    Decimal,
    InvalidOperation,
    localcontext,
)
from enum import Enum
from fractions import Fraction
from typing import Union

from .errors import AmountOverflowError, DivisionByZeroError, InvalidOperandError

# Real operands accepted by the arithmetic engine
Real = Union[int, float, Decimal]

# Holds any 64-bit amount at any currency precision without rounding
WORKING_PRECISION = 60

# Any magnitude of at least 10 ** 19 lies outside the signed 64-bit range
OVERFLOW_EXPONENT = 19


class RoundingMode(Enum):
    """Strategies for turning a real number into an integer."""

    NEAREST = "nearest"
    FLOOR = "floor"
    CEIL = "ceil"
    TRUNCATE = "truncate"

    @classmethod
    def from_str(cls, value: "str | RoundingMode") -> "RoundingMode":
        """
        Parse a rounding mode name such as "nearest" or "FLOOR".

        Args:
            value: Mode name (case-insensitive) or an existing RoundingMode

        Returns:
            Matching RoundingMode

        Raises:
            ValueError: If the name is not a known mode
        """
        if isinstance(value, RoundingMode):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(mode.value for mode in cls)
            raise ValueError(f"Unknown rounding mode '{value}'. Expected one of: {choices}") from None

    @property
    def decimal_rounding(self) -> str:
        """The decimal module rounding constant for this mode."""
        return _DECIMAL_ROUNDING[self]


_DECIMAL_ROUNDING = {
    RoundingMode.NEAREST: ROUND_HALF_UP,
    RoundingMode.FLOOR: ROUND_FLOOR,
    RoundingMode.CEIL: ROUND_CEILING,
    RoundingMode.TRUNCATE: ROUND_DOWN,
}


def working_context() -> Context:
    """Decimal context used for every intermediate computation."""
    return Context(prec=WORKING_PRECISION)


def to_decimal(value: Real, name: str = "operand") -> Decimal:
    """
    Convert a real operand to Decimal, rejecting non-finite and non-numeric input.

    Args:
        value: int, float or Decimal
        name: Operand name used in error messages

    Returns:
        Finite Decimal equal to the operand as written

    Raises:
        InvalidOperandError: If the value is not a finite real number

    Examples:
        to_decimal(2.5) -> Decimal('2.5')
        to_decimal(0.1) -> Decimal('0.1')
    """
    # bool is an int subclass but never a meaningful amount or scalar
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise InvalidOperandError(f"${name} must be a real number, but provided value is: {value!r}")

    if isinstance(value, int):
        return Decimal(value)

    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidOperandError(f"${name} must be finite, but provided value is: {value!r}")
        return Decimal(repr(value))

    if not value.is_finite():
        raise InvalidOperandError(f"${name} must be finite, but provided value is: {value!r}")
    return value


def round_amount(raw: Real, mode: RoundingMode = RoundingMode.NEAREST) -> int:
    """
    Round a real number to an integer under the given mode.

    Args:
        raw: Value to round (int, float or Decimal)
        mode: Rounding strategy (default: NEAREST, ties away from zero)

    Returns:
        Rounded integer

    Raises:
        InvalidOperandError: If raw is infinite, NaN or not a number

    Examples:
        round_amount(262.5) -> 263
        round_amount(-262.5) -> -263
        round_amount(262.5, RoundingMode.FLOOR) -> 262
        round_amount(-0.375, RoundingMode.CEIL) -> 0
    """
    if not isinstance(mode, RoundingMode):
        raise InvalidOperandError(f"$mode must be a RoundingMode, but provided value is: {mode!r}")

    value = to_decimal(raw, "raw")
    try:
        with localcontext(working_context()):
            return int(value.to_integral_value(rounding=mode.decimal_rounding))
    except InvalidOperation as e:
        raise InvalidOperandError(f"Cannot round {raw!r}: {e}") from e


def _round_fraction(value: Fraction, mode: RoundingMode) -> int:
    numerator, denominator = value.numerator, value.denominator
    if mode is RoundingMode.FLOOR:
        return numerator // denominator
    if mode is RoundingMode.CEIL:
        return -(-numerator // denominator)

    quotient, remainder = divmod(abs(numerator), denominator)
    if mode is RoundingMode.NEAREST and 2 * remainder >= denominator:
        quotient += 1
    return -quotient if numerator < 0 else quotient


def round_scaled(
    value: Real, factor: Real, divisor: Real = 1, mode: RoundingMode = RoundingMode.NEAREST
) -> int:
    """
    Round value * factor / divisor to an integer, computing the quotient exactly.

    No intermediate result is rounded to a working precision, so FLOOR and CEIL
    see the true value however many digits the operands carry.

    Args:
        value: Amount being scaled
        factor: Multiplier
        divisor: Divisor (must be non-zero)
        mode: Rounding strategy (default: NEAREST, ties away from zero)

    Returns:
        Rounded integer

    Raises:
        InvalidOperandError: If an operand is not a finite real number
        DivisionByZeroError: If divisor is zero
        AmountOverflowError: If the result certainly exceeds 10**19 in magnitude

    Examples:
        round_scaled(105, 2.5) -> 263
        round_scaled(105, 2.8, 100, RoundingMode.FLOOR) -> 2
        round_scaled(3, Decimal("0." + "3" * 70), 1, RoundingMode.FLOOR) -> 0
    """
    if not isinstance(mode, RoundingMode):
        raise InvalidOperandError(f"$mode must be a RoundingMode, but provided value is: {mode!r}")

    value = to_decimal(value, "value")
    factor = to_decimal(factor, "factor")
    divisor = to_decimal(divisor, "divisor")
    if divisor == 0:
        raise DivisionByZeroError("Cannot scale by a zero divisor")
    if value == 0 or factor == 0:
        return 0

    # 10 ** lower < |value * factor / divisor| < 10 ** (lower + 3)
    lower = value.adjusted() + factor.adjusted() - divisor.adjusted() - 1
    if lower >= OVERFLOW_EXPONENT:
        raise AmountOverflowError(
            f"Scaled amount exceeds 10**{OVERFLOW_EXPONENT}, outside the signed 64-bit range"
        )
    if lower + 3 <= -1:
        # Magnitude below 0.1: only the sign matters
        negative = value.is_signed() ^ factor.is_signed() ^ divisor.is_signed()
        if mode is RoundingMode.FLOOR:
            return -1 if negative else 0
        if mode is RoundingMode.CEIL:
            return 0 if negative else 1
        return 0

    return _round_fraction(Fraction(value) * Fraction(factor) / Fraction(divisor), mode)
