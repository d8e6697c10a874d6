"""Core domain package for the SubSpend engine."""

from .errors import InvalidCadenceError, SubscriptionDataError, SubscriptionValidationError
from .models import (
    UNCATEGORIZED,
    AggregateSummary,
    CategoryCost,
    EnhancedStats,
    MonthlyCost,
    OverviewSummary,
    StatusBreakdown,
    Subscription,
    SubscriptionStatus,
    TopSubscription,
)

__all__ = [
    "UNCATEGORIZED",
    "AggregateSummary",
    "CategoryCost",
    "EnhancedStats",
    "MonthlyCost",
    "OverviewSummary",
    "StatusBreakdown",
    "Subscription",
    "SubscriptionStatus",
    "TopSubscription",
    "InvalidCadenceError",
    "SubscriptionDataError",
    "SubscriptionValidationError",
]
