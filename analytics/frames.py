"""Tabular views over subscription lists used by the analytics helpers."""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from analytics.cadence import normalize_to_monthly
from core.models import Subscription

__all__ = ["FRAME_COLUMNS", "build_subscription_frame"]

FRAME_COLUMNS: tuple[str, ...] = (
    "name",
    "category",
    "category_label",
    "status",
    "is_active",
    "start_date",
    "end_date",
    "monthly_cost",
)


def build_subscription_frame(subscriptions: Iterable[Subscription]) -> pd.DataFrame:
    """Return one row per subscription with its normalised monthly cost.

    ``monthly_cost`` holds ``Decimal`` values (object dtype) so sums stay
    exact. Input order is preserved in the index, which the stable sorts and
    first-appearance grouping downstream rely on.
    """

    records = [
        {
            "name": sub.name,
            "category": sub.category,
            "category_label": sub.category_label,
            "status": sub.status.value,
            "is_active": sub.is_active,
            "start_date": sub.start_date,
            "end_date": sub.end_date,
            "monthly_cost": normalize_to_monthly(sub.amount, sub.billing_cycle_days),
        }
        for sub in subscriptions
    ]

    frame = pd.DataFrame.from_records(records, columns=list(FRAME_COLUMNS))
    frame["monthly_cost"] = frame["monthly_cost"].astype(object)
    frame["is_active"] = frame["is_active"].astype(bool)
    frame["start_date"] = pd.to_datetime(frame["start_date"])
    frame["end_date"] = pd.to_datetime(frame["end_date"])
    return frame
