#!/usr/bin/env python3
"""
Ratio Allocation

Splits an integer minor-unit amount into parts proportional to integer weights
using the largest-remainder (Hamilton) method.

Algorithm:
1. Floor-divide each exact proportional share (integer arithmetic, no floats)
2. Count the leftover units (always fewer than the number of parts)
3. Give one leftover unit each to the parts with the largest fractional
   remainders, lowest index first on ties
4. Negative amounts are allocated by magnitude and negated

Key Principles:
- The parts always sum exactly to the original amount
- No part ever exceeds its proportional entitlement by a whole unit
- Zero-weight parts receive zero
"""

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from .errors import InvalidRatioError

if TYPE_CHECKING:
    from .money import Money

logger = logging.getLogger(__name__)


def validate_ratios(ratios: Sequence[int]) -> list[int]:
    """
    Check allocation weights and return them as a list.

    Args:
        ratios: Non-negative integer weights, at least one positive

    Returns:
        The weights as a list

    Raises:
        InvalidRatioError: If weights are empty, non-integer, negative or all zero
    """
    weights = list(ratios)
    if not weights:
        raise InvalidRatioError("Cannot allocate across an empty ratio list")

    for i, weight in enumerate(weights):
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise InvalidRatioError(f"Ratio {i} must be an integer, but provided value is: {weight!r}")
        if weight < 0:
            raise InvalidRatioError(f"Ratio {i} must be non-negative, but provided value is: {weight}")

    if sum(weights) == 0:
        raise InvalidRatioError("At least one ratio must be greater than zero")

    return weights


def allocate_amount(amount: int, ratios: Sequence[int]) -> list[int]:
    """
    Allocate an integer amount across weights so the parts sum exactly to the amount.

    Args:
        amount: Amount in minor units (may be negative)
        ratios: Non-negative integer weights, at least one positive

    Returns:
        One share per weight, in weight order

    Raises:
        InvalidRatioError: If the weights are invalid

    Examples:
        allocate_amount(100, [1, 1, 1]) -> [34, 33, 33]
        allocate_amount(-100, [1, 1, 1]) -> [-34, -33, -33]
        allocate_amount(10, [1, 2, 4]) -> [1, 3, 6]
    """
    weights = validate_ratios(ratios)
    total_weight = sum(weights)
    magnitude = abs(amount)

    shares: list[int] = []
    remainders: list[int] = []
    for weight in weights:
        share, remainder = divmod(magnitude * weight, total_weight)
        shares.append(share)
        remainders.append(remainder)

    leftover = magnitude - sum(shares)

    # Largest fractional remainder first, lowest index on ties
    order = sorted(range(len(weights)), key=lambda i: (-remainders[i], i))
    for i in order[:leftover]:
        shares[i] += 1

    logger.debug(
        "Allocated %d across %d parts (%d leftover units distributed)", amount, len(weights), leftover
    )

    if amount < 0:
        return [-share for share in shares]
    return shares


def allocate(money: "Money", ratios: Sequence[int]) -> list["Money"]:
    """
    Allocate a Money value across weights.

    Args:
        money: Value to split
        ratios: Non-negative integer weights, at least one positive

    Returns:
        One Money per weight in the same currency, summing exactly to money
    """
    return [money.with_amount(share) for share in allocate_amount(money.amount, ratios)]


def split(money: "Money", parts: int) -> list["Money"]:
    """
    Split a Money value into equal parts, earlier parts absorbing leftover units.

    Args:
        money: Value to split
        parts: Number of parts (at least 1)

    Returns:
        List of parts summing exactly to money

    Raises:
        InvalidRatioError: If parts is not a positive integer
    """
    if isinstance(parts, bool) or not isinstance(parts, int) or parts < 1:
        raise InvalidRatioError(f"$parts must be a positive integer, but provided value is: {parts!r}")
    return allocate(money, [1] * parts)
