"""Reward point calculation.

Points are earned per transaction in three tiers:

- nothing for the first 50 of an amount,
- 1 point per whole unit spent between 50 and 100,
- 2 points per unit spent above 100, on top of the 50 points of the
  middle tier.

Fractions are truncated, so 100.5 earns 51 points and 50.99 earns none.
"""

from decimal import Decimal, ROUND_FLOOR
from typing import Union

from rewardit.domain.entities import PointResult

LOWER_THRESHOLD = Decimal("50")
UPPER_THRESHOLD = Decimal("100")
UPPER_TIER_MULTIPLIER = 2
UPPER_TIER_BONUS = 50

NEGATIVE_AMOUNT = "negative amount"

Amount = Union[Decimal, int, float, str]


def to_decimal(amount: Amount) -> Decimal:
    """Convert an amount to Decimal without binary float artifacts."""
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, float):
        return Decimal(str(amount))
    return Decimal(amount)


def _floor(value: Decimal) -> int:
    return int(value.to_integral_value(rounding=ROUND_FLOOR))


def calculate_points(amount: Amount) -> PointResult:
    """Calculate the reward points earned by a single transaction amount.

    Args:
        amount: Transaction amount

    Returns:
        PointResult with the points, or a failure for negative amounts
    """
    value = to_decimal(amount)

    if value > UPPER_THRESHOLD:
        points = (
            _floor((value - UPPER_THRESHOLD) * UPPER_TIER_MULTIPLIER)
            + UPPER_TIER_BONUS
        )
    elif value > LOWER_THRESHOLD:
        points = _floor(value - LOWER_THRESHOLD)
    elif value >= 0:
        points = 0
    else:
        return PointResult(failure=NEGATIVE_AMOUNT)

    return PointResult(points=points)


class PointCalculator:
    """Calculator handed to the reward aggregator."""

    def calculate(self, amount: Amount) -> PointResult:
        """Calculate points for an amount. See ``calculate_points``."""
        return calculate_points(amount)
