"""Top-N ranking of subscriptions by normalised monthly cost."""

from __future__ import annotations

from typing import Iterable

from analytics.frames import build_subscription_frame
from config.settings import DEFAULT_TOP_LIMIT
from core.models import Subscription, TopSubscription

__all__ = ["rank_subscriptions"]


def rank_subscriptions(
    subscriptions: Iterable[Subscription],
    limit: int = DEFAULT_TOP_LIMIT,
) -> tuple[TopSubscription, ...]:
    """Return the ``limit`` most expensive Active subscriptions.

    Ties keep their original relative order.
    """

    if limit <= 0:
        return ()

    frame = build_subscription_frame(subscriptions)
    active = frame[frame["is_active"]]
    if active.empty:
        return ()

    ranked = active.sort_values("monthly_cost", ascending=False, kind="stable").head(limit)

    return tuple(
        TopSubscription(
            name=str(row["name"]),
            cost=row["monthly_cost"],
            category=row["category"],
        )
        for row in ranked.to_dict(orient="records")
    )
