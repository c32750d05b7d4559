#!/usr/bin/env python3
"""Tests for the rounding policy."""

from decimal import Decimal

import pytest

from cowry.core.errors import AmountOverflowError, DivisionByZeroError, InvalidOperandError
from cowry.core.rounding import RoundingMode, round_amount, round_scaled, to_decimal

LONG_THIRDS = Decimal("0." + "3" * 70)
JUST_OVER_ONE = Decimal("1." + "0" * 70 + "1")
TINY = Decimal("1E-999999")


class TestRoundAmount:
    """Test each rounding mode on positive, negative and tie inputs."""

    @pytest.mark.currency
    @pytest.mark.parametrize(
        "raw,nearest,floor,ceil,truncate",
        [
            (262.5, 263, 262, 263, 262),
            (-262.5, -263, -263, -262, -262),
            (2.4, 2, 2, 3, 2),
            (2.6, 3, 2, 3, 2),
            (-2.4, -2, -3, -2, -2),
            (-2.6, -3, -3, -2, -2),
            (0.5, 1, 0, 1, 0),
            (-0.5, -1, -1, 0, 0),
            (Decimal("37.5"), 38, 37, 38, 37),
            (Decimal("-37.5"), -38, -38, -37, -37),
        ],
        ids=["tie", "neg_tie", "low", "high", "neg_low", "neg_high", "half", "neg_half", "dec_tie", "dec_neg_tie"],
    )
    def test_modes(self, raw, nearest, floor, ceil, truncate):
        """Test all four modes against expected integers."""
        assert round_amount(raw, RoundingMode.NEAREST) == nearest
        assert round_amount(raw, RoundingMode.FLOOR) == floor
        assert round_amount(raw, RoundingMode.CEIL) == ceil
        assert round_amount(raw, RoundingMode.TRUNCATE) == truncate

    @pytest.mark.currency
    def test_default_mode_is_nearest(self):
        """Test ties round away from zero by default."""
        assert round_amount(2.5) == 3
        assert round_amount(-2.5) == -3
        assert round_amount(3.5) == 4

    @pytest.mark.currency
    @pytest.mark.parametrize("mode", list(RoundingMode))
    @pytest.mark.parametrize("value", [0, 1, -1, 105, -2**63, 2**63 - 1, 10**25])
    def test_integers_are_unchanged(self, value, mode):
        """Test exact integers map to themselves under every mode."""
        assert round_amount(value, mode) == value
        assert round_amount(Decimal(value), mode) == value

    @pytest.mark.currency
    @pytest.mark.parametrize("mode", list(RoundingMode))
    def test_integral_floats_are_unchanged(self, mode):
        """Test integral floats introduce no drift."""
        assert round_amount(262.0, mode) == 262
        assert round_amount(-1e15, mode) == -10**15

    @pytest.mark.currency
    def test_result_is_int(self):
        """Test the result type is always int."""
        for mode in RoundingMode:
            assert type(round_amount(1.25, mode)) is int

    @pytest.mark.currency
    @pytest.mark.parametrize("bad", [float("inf"), float("-inf"), float("nan"), Decimal("NaN"), Decimal("Infinity")])
    def test_non_finite_rejected(self, bad):
        """Test non-finite values raise instead of producing zero."""
        with pytest.raises(InvalidOperandError):
            round_amount(bad)

    @pytest.mark.currency
    @pytest.mark.parametrize("bad", ["1.5", None, True, [1]])
    def test_non_numeric_rejected(self, bad):
        """Test non-numeric values are rejected."""
        with pytest.raises(InvalidOperandError):
            round_amount(bad)

    @pytest.mark.currency
    def test_mode_must_be_enum(self):
        """Test a string mode is rejected by round_amount."""
        with pytest.raises(InvalidOperandError):
            round_amount(1.5, "nearest")  # type: ignore[arg-type]


class TestRoundingModeParsing:
    """Test RoundingMode.from_str."""

    @pytest.mark.currency
    def test_from_str_case_insensitive(self):
        assert RoundingMode.from_str("nearest") is RoundingMode.NEAREST
        assert RoundingMode.from_str("FLOOR") is RoundingMode.FLOOR
        assert RoundingMode.from_str(" Ceil ") is RoundingMode.CEIL
        assert RoundingMode.from_str(RoundingMode.TRUNCATE) is RoundingMode.TRUNCATE

    @pytest.mark.currency
    def test_from_str_unknown(self):
        with pytest.raises(ValueError, match="Unknown rounding mode"):
            RoundingMode.from_str("bankers")


class TestToDecimal:
    """Test operand conversion."""

    @pytest.mark.currency
    def test_float_uses_shortest_repr(self):
        """Test 0.1 converts to exactly one tenth."""
        assert to_decimal(0.1) == Decimal("0.1")
        assert to_decimal(2.5) == Decimal("2.5")

    @pytest.mark.currency
    def test_int_and_decimal_exact(self):
        assert to_decimal(7) == Decimal(7)
        assert to_decimal(Decimal("1.005")) == Decimal("1.005")


class TestRoundScaled:
    """Test exact scale-then-round."""

    @pytest.mark.currency
    @pytest.mark.parametrize(
        "value,factor,divisor,nearest,floor,ceil,truncate",
        [
            (105, 2.5, 1, 263, 262, 263, 262),
            (-105, 2.5, 1, -263, -263, -262, -262),
            (105, 2.8, 100, 3, 2, 3, 2),
            (1, 1, 2, 1, 0, 1, 0),
            (1, 1, 3, 0, 0, 1, 0),
            (3, LONG_THIRDS, 1, 1, 0, 1, 0),
            (100, JUST_OVER_ONE, 1, 100, 100, 101, 100),
            (-100, JUST_OVER_ONE, 1, -100, -101, -100, -100),
            (5, TINY, 1, 0, 0, 1, 0),
            (-5, TINY, 1, 0, -1, 0, 0),
            (5, -TINY, 1, 0, -1, 0, 0),
        ],
    )
    def test_modes_use_exact_value(self, value, factor, divisor, nearest, floor, ceil, truncate):
        """Test long and tiny operands are never pre-rounded before the mode applies."""
        assert round_scaled(value, factor, divisor, RoundingMode.NEAREST) == nearest
        assert round_scaled(value, factor, divisor, RoundingMode.FLOOR) == floor
        assert round_scaled(value, factor, divisor, RoundingMode.CEIL) == ceil
        assert round_scaled(value, factor, divisor, RoundingMode.TRUNCATE) == truncate

    @pytest.mark.currency
    def test_zero_operands(self):
        for mode in RoundingMode:
            assert round_scaled(0, 2.5, 3, mode) == 0
            assert round_scaled(105, 0, 3, mode) == 0

    @pytest.mark.currency
    @pytest.mark.parametrize(
        "value,factor,divisor",
        [
            (5, 10**5000, 1),
            (5, Decimal("1E+999999"), 1),
            (1, 1, TINY),
            (10**19, 10, 1),
        ],
        ids=["huge_int", "huge_decimal", "tiny_divisor", "past_bound"],
    )
    def test_overflow_is_typed(self, value, factor, divisor):
        with pytest.raises(AmountOverflowError):
            round_scaled(value, factor, divisor)

    @pytest.mark.currency
    def test_large_results_within_bound(self):
        assert round_scaled(2**63 - 1, 1) == 2**63 - 1
        assert round_scaled(10**18, 10) == 10**19

    @pytest.mark.currency
    def test_zero_divisor(self):
        with pytest.raises(DivisionByZeroError):
            round_scaled(5, 1, 0)

    @pytest.mark.currency
    @pytest.mark.parametrize("bad", [float("inf"), float("nan"), Decimal("NaN"), "2", None])
    def test_invalid_operand(self, bad):
        with pytest.raises(InvalidOperandError):
            round_scaled(5, bad)
