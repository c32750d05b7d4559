#!/usr/bin/env python3
"""
Money Primitive Type

Immutable monetary value: an integer count of minor units tied to a Currency.
Exact integer arithmetic for add/subtract, decimal scaling with an explicit
rounding mode for multiply/divide/percentage, and largest-remainder allocation.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal, localcontext

from .allocation import allocate, split
from .currency import Currency, format_minor_units, parse_major_to_minor
from .errors import (
    AmountOverflowError,
    CurrencyMismatchError,
    DivisionByZeroError,
    InvalidOperandError,
)
from .rounding import Real, RoundingMode, round_scaled, to_decimal, working_context

MIN_AMOUNT = -(2**63)
MAX_AMOUNT = 2**63 - 1


def _check_range(amount: int) -> int:
    if not MIN_AMOUNT <= amount <= MAX_AMOUNT:
        raise AmountOverflowError(
            f"Amount of {amount.bit_length()} bits is outside the representable range [{MIN_AMOUNT}, {MAX_AMOUNT}]"
        )
    return amount


@dataclass(frozen=True, eq=False)
class Money:
    """
    Immutable money value in minor units.

    Supports both positive and negative amounts. Every operation returns a new
    value; combining values of different currencies raises CurrencyMismatchError.

    Examples:
        >>> ngn = Currency("NGN", "₦", 2)
        >>> price = Money(105, ngn)
        >>> price.multiply(2.5).amount  # 262.5 rounds half away from zero
        263
        >>> price.multiply(2.5, RoundingMode.FLOOR).amount
        262
        >>> [part.amount for part in Money(100, ngn).allocate([1, 1, 1])]
        [34, 33, 33]
        >>> str(Money(-123456, ngn))
        '-₦1,234.56'
    """

    amount: int
    currency: Currency

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise InvalidOperandError(f"$amount must be an integer, but provided value is: {self.amount!r}")
        if not isinstance(self.currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {self.currency!r}")
        _check_range(self.amount)

    @classmethod
    def zero(cls, currency: Currency) -> "Money":
        """Create a zero amount of the given currency."""
        return cls(0, currency)

    @classmethod
    def from_major(
        cls, value: Real | str, currency: Currency, mode: RoundingMode = RoundingMode.NEAREST
    ) -> "Money":
        """
        Create Money from a major-unit value such as "₦12.34" or Decimal("12.345").

        Digits beyond the currency precision are rounded with mode.

        Args:
            value: Major-unit amount (str, int, float or Decimal)
            currency: Currency of the result
            mode: Rounding mode for excess digits

        Returns:
            Money object
        """
        return cls(parse_major_to_minor(value, currency.precision, mode), currency)

    @property
    def code(self) -> str:
        """Currency code (e.g. "NGN")."""
        return self.currency.code

    @property
    def precision(self) -> int:
        """Minor-unit digits of the currency."""
        return self.currency.precision

    def with_amount(self, amount: int) -> "Money":
        """Return a value with the same currency and a new amount."""
        return Money(amount, self.currency)

    def to_major(self) -> Decimal:
        """Get value in major units as an exact Decimal."""
        with localcontext(working_context()):
            return Decimal(self.amount).scaleb(-self.precision)

    def is_zero(self) -> bool:
        return self.amount == 0

    def is_positive(self) -> bool:
        return self.amount > 0

    def is_negative(self) -> bool:
        return self.amount < 0

    def _check_same_currency(self, other: "Money", operation: str) -> None:
        if not isinstance(other, Money):
            raise InvalidOperandError(f"Cannot {operation} Money and {type(other).__name__}")
        if self.currency.code != other.currency.code:
            raise CurrencyMismatchError(self.currency.code, other.currency.code, operation)

    # Arithmetic engine

    def add(self, other: "Money") -> "Money":
        """Add two values of the same currency."""
        self._check_same_currency(other, "add")
        return self.with_amount(_check_range(self.amount + other.amount))

    def subtract(self, other: "Money") -> "Money":
        """Subtract a value of the same currency."""
        self._check_same_currency(other, "subtract")
        return self.with_amount(_check_range(self.amount - other.amount))

    def negate(self) -> "Money":
        """Return the value with its sign flipped."""
        return self.with_amount(_check_range(-self.amount))

    def abs(self) -> "Money":
        """
        Return absolute value of Money.

        Returns:
            New Money object with absolute value
        """
        return self.with_amount(_check_range(abs(self.amount)))

    def _scale(self, factor: Decimal, divisor: Decimal, mode: RoundingMode) -> "Money":
        return self.with_amount(round_scaled(self.amount, factor, divisor, mode))

    def multiply(self, scalar: Real, mode: RoundingMode = RoundingMode.NEAREST) -> "Money":
        """
        Multiply the amount by a real scalar and round to whole minor units.

        Args:
            scalar: Multiplier (may be negative)
            mode: Rounding mode (default: NEAREST)

        Returns:
            New Money in the same currency

        Raises:
            InvalidOperandError: If scalar is not a finite number
            AmountOverflowError: If the result leaves the 64-bit range
        """
        return self._scale(to_decimal(scalar, "scalar"), Decimal(1), mode)

    def divide(self, scalar: Real, mode: RoundingMode = RoundingMode.NEAREST) -> "Money":
        """
        Divide the amount by a real scalar and round to whole minor units.

        Raises:
            InvalidOperandError: If scalar is not a finite number
            DivisionByZeroError: If scalar is zero
        """
        divisor = to_decimal(scalar, "scalar")
        if divisor == 0:
            raise DivisionByZeroError(f"Cannot divide {self} by zero")
        return self._scale(Decimal(1), divisor, mode)

    def percentage(self, percent: Real, mode: RoundingMode = RoundingMode.NEAREST) -> "Money":
        """
        Return the given percentage of the amount.

        The division by 100 is exact, so percentage(10) of 500 is 50 under every mode.

        Args:
            percent: Percentage (may exceed 100 or be negative)
            mode: Rounding mode (default: NEAREST)
        """
        return self._scale(to_decimal(percent, "percent"), Decimal(100), mode)

    def round_to_precision(self, mode: RoundingMode = RoundingMode.NEAREST) -> "Money":
        """
        Normalize the amount to the currency precision.

        Returns a new value; Money is immutable, so nothing is changed in place.

        Re-derives the minor-unit amount from the major-unit value. Amounts are
        always whole minor units, so the normalized value equals this one.
        """
        return Money(parse_major_to_minor(self.to_major(), self.precision, mode), self.currency)

    def allocate(self, ratios: Sequence[int]) -> list["Money"]:
        """
        Split the value by integer weights; the parts sum exactly to this value.

        Raises:
            InvalidRatioError: If the weights are empty, negative or all zero
        """
        return allocate(self, ratios)

    def split(self, parts: int) -> list["Money"]:
        """Split the value into equal parts that sum exactly to this value."""
        return split(self, parts)

    # Comparator

    def equals(self, other: "Money") -> bool:
        self._check_same_currency(other, "compare")
        return self.amount == other.amount

    def less_than(self, other: "Money") -> bool:
        self._check_same_currency(other, "compare")
        return self.amount < other.amount

    def greater_than(self, other: "Money") -> bool:
        self._check_same_currency(other, "compare")
        return self.amount > other.amount

    def less_or_equal(self, other: "Money") -> bool:
        self._check_same_currency(other, "compare")
        return self.amount <= other.amount

    def greater_or_equal(self, other: "Money") -> bool:
        self._check_same_currency(other, "compare")
        return self.amount >= other.amount

    def compare(self, other: "Money") -> int:
        """Return -1, 0 or 1 as this value is less than, equal to or greater than other."""
        self._check_same_currency(other, "compare")
        return (self.amount > other.amount) - (self.amount < other.amount)

    # Formatting and serialization

    def format(
        self,
        grouping: bool = True,
        display_precision: int | None = None,
        mode: RoundingMode = RoundingMode.NEAREST,
    ) -> str:
        """
        Format as a display string like "₦1,234.50".

        Args:
            grouping: Insert comma separators
            display_precision: Digits to show (default: currency precision)
            mode: Rounding mode when showing fewer digits than the precision
        """
        return format_minor_units(
            self.amount,
            self.precision,
            self.currency.symbol,
            grouping=grouping,
            display_precision=display_precision,
            mode=mode,
        )

    def to_dict(self) -> dict:
        """Convert to a serialization record."""
        from .serialization import to_record

        return to_record(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Money":
        """Create Money from a serialization record."""
        from .serialization import from_record

        return from_record(data)

    def to_json(self) -> str:
        """Serialize to a compact JSON string."""
        from .serialization import to_json

        return to_json(self)

    @classmethod
    def from_json(cls, text: str) -> "Money":
        """Deserialize from a JSON string."""
        from .serialization import from_json

        return from_json(text)

    # Operator sugar

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: object) -> "Money":
        """Support sum() by treating a leading 0 as the additive identity."""
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: "Money") -> "Money":
        """Subtract two Money objects."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> "Money":
        return self.negate()

    def __abs__(self) -> "Money":
        return self.abs()

    def __mul__(self, scalar: Real) -> "Money":
        """Multiply Money by scalar with the default rounding mode."""
        if isinstance(scalar, Money):
            return NotImplemented
        return self.multiply(scalar)

    def __rmul__(self, scalar: Real) -> "Money":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: Real) -> "Money":
        """Divide Money by scalar with the default rounding mode."""
        if isinstance(scalar, Money):
            return NotImplemented
        return self.divide(scalar)

    def __eq__(self, other: object) -> bool:
        """Check equality; values of different currencies are never equal."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.currency.code == other.currency.code and self.amount == other.amount

    def __hash__(self) -> int:
        """Hash based on amount and currency code."""
        return hash((self.amount, self.currency.code))

    def __lt__(self, other: "Money") -> bool:
        """Less than comparison."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other: "Money") -> bool:
        """Less than or equal comparison."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.less_or_equal(other)

    def __gt__(self, other: "Money") -> bool:
        """Greater than comparison."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.greater_than(other)

    def __ge__(self, other: "Money") -> bool:
        """Greater than or equal comparison."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.greater_or_equal(other)

    def __str__(self) -> str:
        """Format as display string."""
        return self.format()

    def __repr__(self) -> str:
        """Repr format."""
        return f"Money(amount={self.amount}, currency={self.currency.code})"
