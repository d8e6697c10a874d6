"""Core logic for assembling SubSpend subscription statistics."""

from __future__ import annotations

import logging
from datetime import date, datetime
from pathlib import Path
from typing import Iterable, Optional

from analytics.aggregation import aggregate
from analytics.ranking import rank_subscriptions
from analytics.renewals import upcoming_renewals
from analytics.trend import build_monthly_trend
from config.settings import get_settings
from core.data_loader import load_subscriptions
from core.models import EnhancedStats, OverviewSummary, Subscription
from core.validation import partition_valid

__all__ = ["compute_statistics", "build_overview", "prepare_statistics"]

logger = logging.getLogger(__name__)


def compute_statistics(
    subscriptions: Iterable[Subscription],
    time_range: Optional[str] = None,
    now: Optional[date | datetime] = None,
    *,
    top_limit: Optional[int] = None,
    skip_invalid: Optional[bool] = None,
) -> EnhancedStats:
    """Return spend statistics for ``subscriptions``.

    ``now`` anchors the trend window and defaults to the current instant.
    With ``skip_invalid`` enabled, records failing validation are dropped and
    logged. Otherwise records are used as given and a billing cycle of zero
    or fewer days raises :class:`InvalidCadenceError`.
    """

    settings = get_settings()
    if time_range is None:
        time_range = settings.default_time_range
    if top_limit is None:
        top_limit = settings.top_subscriptions_limit
    if skip_invalid is None:
        skip_invalid = settings.skip_invalid_records
    if now is None:
        now = datetime.now()

    records = _screen(subscriptions, skip_invalid)

    summary = aggregate(records)
    top_subscriptions = rank_subscriptions(records, limit=top_limit)
    monthly_costs = build_monthly_trend(records, time_range, now)

    logger.debug(
        "Computed statistics for %d subscriptions (%d active, window=%s)",
        len(records),
        summary.total_active,
        time_range,
    )

    return EnhancedStats(
        monthly=summary.monthly,
        yearly=summary.yearly,
        weekly=summary.weekly,
        total_active=summary.total_active,
        average_per_subscription=summary.average_per_subscription,
        category_costs=summary.category_costs,
        top_subscriptions=top_subscriptions,
        monthly_costs=monthly_costs,
        status_breakdown=summary.status_breakdown,
    )


def build_overview(
    subscriptions: Iterable[Subscription],
    now: Optional[date | datetime] = None,
    *,
    window_days: Optional[int] = None,
    skip_invalid: Optional[bool] = None,
) -> OverviewSummary:
    """Return the headline counts shown on a subscription dashboard."""

    settings = get_settings()
    if window_days is None:
        window_days = settings.renewal_window_days
    if skip_invalid is None:
        skip_invalid = settings.skip_invalid_records
    today = _as_date(now)

    records = _screen(subscriptions, skip_invalid)
    summary = aggregate(records)
    renewals = upcoming_renewals(records, today, window_days=window_days)

    return OverviewSummary(
        total_subscriptions=len(records),
        active_subscriptions=summary.total_active,
        monthly=summary.monthly,
        yearly=summary.yearly,
        renewing_soon=len(renewals),
    )


def prepare_statistics(
    csv_path: str | Path | None = None,
    time_range: Optional[str] = None,
    now: Optional[date | datetime] = None,
) -> EnhancedStats:
    """Load subscriptions from CSV and compute their statistics."""

    if csv_path is None:
        csv_path = get_settings().data_path
    if csv_path is None:
        raise ValueError("No subscription CSV path given and SUBSPEND_DATA_PATH is not set.")

    subscriptions = load_subscriptions(csv_path)
    return compute_statistics(subscriptions, time_range, now)


def _screen(subscriptions: Iterable[Subscription], skip_invalid: bool) -> list[Subscription]:
    records = list(subscriptions)
    if not skip_invalid:
        return records

    valid, rejected = partition_valid(records)
    for _, error in rejected:
        logger.warning("Skipping subscription: %s", error)
    return valid


def _as_date(moment: Optional[date | datetime]) -> date:
    if moment is None:
        return date.today()
    if isinstance(moment, datetime):
        return moment.date()
    return moment
