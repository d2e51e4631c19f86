"""Domain model entities for rewardit.

These are pure data classes representing business concepts, independent of
database schema. Records handed to the reward calculation are always these
entities, never ORM rows.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class TransactionRecord:
    """Purchase made by a customer on a given day."""

    customer_name: str
    date: date
    amount: Decimal
    id: Optional[int] = None


@dataclass(frozen=True)
class EnrichedTransaction:
    """Transaction record together with the points it earned."""

    customer_name: str
    date: date
    amount: Decimal
    points: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "customer_name": self.customer_name,
            "date": self.date.isoformat(),
            "amount": str(self.amount),
            "points": self.points,
        }


@dataclass(frozen=True)
class PointResult:
    """Outcome of a point calculation for a single amount.

    Exactly one of ``points`` and ``failure`` is set.
    """

    points: Optional[int] = None
    failure: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.failure is None


@dataclass(frozen=True)
class RewardSummary:
    """Reward points of one customer over a date range."""

    customer_name: str
    total_points: int
    monthly_points: Mapping[str, int] = field(default_factory=dict)
    transactions: tuple[EnrichedTransaction, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {
            "customer_name": self.customer_name,
            "total_points": self.total_points,
            "monthly_points": dict(self.monthly_points),
            "transactions": [txn.to_dict() for txn in self.transactions],
        }


def customer_key(customer_name: str) -> str:
    """Return the case-insensitive identity of a customer name."""
    return customer_name.casefold()
