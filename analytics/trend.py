"""Month-by-month cost trend honouring each subscription's active lifetime."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Final, Iterable, Optional

import pandas as pd

from analytics.aggregation import sum_costs
from analytics.frames import build_subscription_frame
from config.settings import DEFAULT_TIME_RANGE
from core.models import MonthlyCost, Subscription

__all__ = [
    "TIME_RANGE_MONTHS",
    "resolve_month_count",
    "month_anchors",
    "build_monthly_trend",
]

logger = logging.getLogger(__name__)

TIME_RANGE_MONTHS: Final[dict[str, int]] = {
    "30days": 1,
    "90days": 3,
    "6months": 6,
    "1year": 12,
}
FALLBACK_TIME_RANGE: Final = "1year"


def resolve_month_count(time_range: Optional[str]) -> int:
    """Map a trend window name to the number of months it covers.

    ``None`` selects the default window. Unrecognised names fall back to a
    full year.
    """

    key = DEFAULT_TIME_RANGE if time_range is None else time_range
    months = TIME_RANGE_MONTHS.get(key)
    if months is None:
        logger.debug("Unrecognised time range %r, using %s", time_range, FALLBACK_TIME_RANGE)
        return TIME_RANGE_MONTHS[FALLBACK_TIME_RANGE]
    return months


def month_anchors(now: date | datetime, month_count: int) -> list[pd.Period]:
    """Return ``month_count`` monthly periods ending at ``now``'s month, oldest first."""

    moment = pd.Timestamp(now)
    if moment.tzinfo is not None:
        moment = moment.tz_localize(None)
    current = moment.to_period("M")
    return [current - offset for offset in range(month_count - 1, -1, -1)]


def build_monthly_trend(
    subscriptions: Iterable[Subscription],
    time_range: Optional[str],
    now: date | datetime,
) -> tuple[MonthlyCost, ...]:
    """Sum normalised monthly cost for each month in the window.

    A subscription counts towards a month when it is Active, started on or
    before the first day of that month and had not ended before it.
    """

    month_count = resolve_month_count(time_range)
    frame = build_subscription_frame(subscriptions)
    active = frame[frame["is_active"]]

    points: list[MonthlyCost] = []
    for period in month_anchors(now, month_count):
        anchor = period.start_time
        running = (active["start_date"] <= anchor) & (
            active["end_date"].isna() | (active["end_date"] >= anchor)
        )
        points.append(
            MonthlyCost(
                name=period.strftime("%b"),
                cost=sum_costs(active.loc[running, "monthly_cost"]),
            )
        )

    return tuple(points)
