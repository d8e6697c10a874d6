"""Shared data model definitions for the SubSpend engine."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Mapping, Optional

import pandas as pd

from core.errors import SubscriptionValidationError

UNCATEGORIZED = "Uncategorized"


class SubscriptionStatus(str, Enum):
    ACTIVE = "Active"
    PAUSED = "Paused"
    CANCELLED = "Cancelled"
    TRIAL = "Trial"

    @classmethod
    def parse(cls, value: "SubscriptionStatus | str") -> "SubscriptionStatus":
        """Return the status matching ``value`` regardless of letter case."""

        if isinstance(value, cls):
            return value
        lookup = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == lookup:
                return member
        raise ValueError(f"Invalid subscription status: {value!r}")


@dataclass(frozen=True)
class Subscription:
    id: str
    name: str
    amount: Decimal
    currency: str
    billing_cycle_days: int
    status: SubscriptionStatus
    start_date: date
    category: Optional[str] = None
    end_date: Optional[date] = None
    next_billing_date: Optional[date] = None
    description: Optional[str] = None
    color: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return self.status is SubscriptionStatus.ACTIVE

    @property
    def category_label(self) -> str:
        return self.category or UNCATEGORIZED

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Subscription":
        """Build a subscription from an API or CSV shaped mapping.

        Amounts are routed through ``str`` so floats never leak binary
        rounding into the stored ``Decimal``.
        """

        subscription_id = _optional_text(record.get("id")) or ""
        try:
            amount = Decimal(str(record["amount"]).strip())
            status = SubscriptionStatus.parse(record["status"])
            billing_cycle_days = int(record["billing_cycle_days"])
            start_date = _parse_date(record["start_date"])
        except KeyError as exc:
            raise SubscriptionValidationError(subscription_id, f"missing field {exc.args[0]!r}") from exc
        except (InvalidOperation, TypeError, ValueError) as exc:
            raise SubscriptionValidationError(subscription_id, str(exc) or type(exc).__name__) from exc

        if not amount.is_finite():
            raise SubscriptionValidationError(subscription_id, "amount must be a finite number")

        if start_date is None:
            raise SubscriptionValidationError(subscription_id, "missing start date")

        return cls(
            id=subscription_id,
            name=_optional_text(record.get("name")) or "",
            amount=amount,
            currency=(_optional_text(record.get("currency")) or "USD").upper(),
            billing_cycle_days=billing_cycle_days,
            status=status,
            start_date=start_date,
            category=_optional_text(record.get("category")),
            end_date=_parse_date(record.get("end_date")),
            next_billing_date=_parse_date(record.get("next_billing_date")),
            description=_optional_text(record.get("description")),
            color=_optional_text(record.get("color")),
        )


@dataclass(frozen=True)
class CategoryCost:
    name: str
    value: Decimal
    count: int


@dataclass(frozen=True)
class TopSubscription:
    name: str
    cost: Decimal
    category: Optional[str]


@dataclass(frozen=True)
class MonthlyCost:
    name: str
    cost: Decimal


@dataclass(frozen=True)
class StatusBreakdown:
    status: str
    count: int
    cost: Decimal


@dataclass(frozen=True)
class AggregateSummary:
    monthly: Decimal
    yearly: Decimal
    weekly: Decimal
    total_active: int
    average_per_subscription: Decimal
    category_costs: tuple[CategoryCost, ...]
    status_breakdown: tuple[StatusBreakdown, ...]


@dataclass(frozen=True)
class EnhancedStats:
    """Spend statistics for one subscription list, window and reference instant."""

    monthly: Decimal
    yearly: Decimal
    weekly: Decimal
    total_active: int
    average_per_subscription: Decimal
    category_costs: tuple[CategoryCost, ...]
    top_subscriptions: tuple[TopSubscription, ...]
    monthly_costs: tuple[MonthlyCost, ...]
    status_breakdown: tuple[StatusBreakdown, ...]

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class OverviewSummary:
    total_subscriptions: int
    active_subscriptions: int
    monthly: Decimal
    yearly: Decimal
    renewing_soon: int

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


def _parse_date(value: Any) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, str):
        if not value.strip():
            return None
    elif pd.isna(value):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return pd.Timestamp(value).date()


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str) and pd.isna(value):
        return None
    text = str(value).strip()
    return text or None


__all__ = [
    "UNCATEGORIZED",
    "SubscriptionStatus",
    "Subscription",
    "CategoryCost",
    "TopSubscription",
    "MonthlyCost",
    "StatusBreakdown",
    "AggregateSummary",
    "EnhancedStats",
    "OverviewSummary",
]
