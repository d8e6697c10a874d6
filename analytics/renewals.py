"""Next billing date resolution and upcoming renewal detection."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Optional

from config.settings import DEFAULT_RENEWAL_WINDOW_DAYS
from core.errors import InvalidCadenceError
from core.models import Subscription

__all__ = ["next_billing_date", "upcoming_renewals"]


def next_billing_date(subscription: Subscription, today: date) -> Optional[date]:
    """Return the first charge on or after ``today``.

    A stored ``next_billing_date`` that is still in the future wins. Otherwise
    the date is rolled forward from the stale stored date (or the start date)
    by whole billing cycles. Subscriptions that end before the next charge
    return ``None``.
    """

    cycle_days = subscription.billing_cycle_days
    if cycle_days <= 0:
        raise InvalidCadenceError(cycle_days)

    end_date = subscription.end_date
    if end_date is not None and end_date < today:
        return None

    anchor = subscription.next_billing_date or subscription.start_date
    if anchor < today:
        elapsed = (today - anchor).days
        cycles = -(-elapsed // cycle_days)
        anchor = anchor + timedelta(days=cycles * cycle_days)

    if end_date is not None and anchor > end_date:
        return None
    return anchor


def upcoming_renewals(
    subscriptions: Iterable[Subscription],
    today: date,
    window_days: int = DEFAULT_RENEWAL_WINDOW_DAYS,
) -> list[tuple[Subscription, date]]:
    """Return Active subscriptions billing within ``window_days`` of ``today``."""

    horizon = today + timedelta(days=window_days)
    due: list[tuple[Subscription, date]] = []
    for subscription in subscriptions:
        if not subscription.is_active:
            continue
        billing_date = next_billing_date(subscription, today)
        if billing_date is not None and billing_date <= horizon:
            due.append((subscription, billing_date))

    due.sort(key=lambda item: (item[1], item[0].name))
    return due
