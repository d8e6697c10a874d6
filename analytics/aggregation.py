"""Category, status and headline cost aggregation for subscription lists."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

import pandas as pd

from analytics.cadence import weekly_from_monthly, yearly_from_monthly
from analytics.frames import build_subscription_frame
from core.models import AggregateSummary, CategoryCost, StatusBreakdown, Subscription

__all__ = [
    "aggregate",
    "build_category_costs",
    "build_status_breakdown",
    "sum_costs",
]

_ZERO = Decimal(0)


def aggregate(subscriptions: Iterable[Subscription]) -> AggregateSummary:
    """Summarise normalised spend across ``subscriptions``.

    Only Active subscriptions contribute to the cost figures; the status
    breakdown counts every subscription.
    """

    frame = build_subscription_frame(subscriptions)
    active = frame[frame["is_active"]]

    monthly = sum_costs(active["monthly_cost"])
    total_active = int(len(active))
    average = monthly / total_active if total_active else _ZERO

    return AggregateSummary(
        monthly=monthly,
        yearly=yearly_from_monthly(monthly),
        weekly=weekly_from_monthly(monthly),
        total_active=total_active,
        average_per_subscription=average,
        category_costs=build_category_costs(active),
        status_breakdown=build_status_breakdown(frame),
    )


def sum_costs(costs: Iterable[Decimal]) -> Decimal:
    return sum(costs, _ZERO)


def build_category_costs(active: pd.DataFrame) -> tuple[CategoryCost, ...]:
    """Group active rows by category label, most expensive first.

    Categories with equal totals keep the order in which they first appear.
    """

    if active.empty:
        return ()

    totals = active.groupby("category_label", sort=False).agg(
        value=("monthly_cost", sum_costs),
        count=("monthly_cost", "size"),
    )
    totals = totals.sort_values("value", ascending=False, kind="stable")

    return tuple(
        CategoryCost(name=str(name), value=row["value"], count=int(row["count"]))
        for name, row in totals.iterrows()
    )


def build_status_breakdown(frame: pd.DataFrame) -> tuple[StatusBreakdown, ...]:
    """Count every status in encounter order, costing only the Active rows."""

    if frame.empty:
        return ()

    costed = frame.assign(
        status_cost=[
            cost if is_active else _ZERO
            for cost, is_active in zip(frame["monthly_cost"], frame["is_active"])
        ]
    )
    grouped = costed.groupby("status", sort=False).agg(
        count=("status_cost", "size"),
        cost=("status_cost", sum_costs),
    )

    return tuple(
        StatusBreakdown(status=str(status), count=int(row["count"]), cost=row["cost"])
        for status, row in grouped.iterrows()
    )
