"""Domain layer for rewardit application.

Services that talk to the database live in ``rewardit.domain.rewards`` and
``rewardit.domain.transaction`` and are imported from there.
"""

from rewardit.domain.entities import (
    EnrichedTransaction,
    PointResult,
    RewardSummary,
    TransactionRecord,
)
from rewardit.domain.points import PointCalculator, calculate_points

__all__ = [
    "EnrichedTransaction",
    "PointResult",
    "RewardSummary",
    "TransactionRecord",
    "PointCalculator",
    "calculate_points",
]
