"""Analytics helpers shared across SubSpend services."""

from analytics.aggregation import aggregate, build_category_costs, build_status_breakdown, sum_costs
from analytics.cadence import (
    CYCLE_DAYS,
    MONTH_DAYS,
    WEEKS_PER_MONTH,
    days_from_label,
    describe_cycle,
    label_from_days,
    normalize_to_monthly,
    weekly_from_monthly,
    yearly_from_monthly,
)
from analytics.frames import build_subscription_frame
from analytics.ranking import rank_subscriptions
from analytics.renewals import next_billing_date, upcoming_renewals
from analytics.trend import TIME_RANGE_MONTHS, build_monthly_trend, month_anchors, resolve_month_count

__all__ = [
    "CYCLE_DAYS",
    "MONTH_DAYS",
    "WEEKS_PER_MONTH",
    "normalize_to_monthly",
    "weekly_from_monthly",
    "yearly_from_monthly",
    "days_from_label",
    "label_from_days",
    "describe_cycle",
    "build_subscription_frame",
    "aggregate",
    "build_category_costs",
    "build_status_breakdown",
    "sum_costs",
    "rank_subscriptions",
    "TIME_RANGE_MONTHS",
    "resolve_month_count",
    "month_anchors",
    "build_monthly_trend",
    "next_billing_date",
    "upcoming_renewals",
]
