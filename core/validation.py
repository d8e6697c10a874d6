"""Basic sanity checks applied to subscription records before aggregation."""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Iterable

from core.errors import SubscriptionValidationError
from core.models import Subscription

__all__ = ["validate_subscription", "partition_valid"]

_HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")


def validate_subscription(subscription: Subscription) -> None:
    """Raise :class:`SubscriptionValidationError` if the record cannot be aggregated."""

    if not subscription.name.strip():
        raise SubscriptionValidationError(subscription.id, "name cannot be empty")
    if not subscription.amount.is_finite() or subscription.amount < Decimal(0):
        raise SubscriptionValidationError(subscription.id, "amount must be non-negative")
    if subscription.billing_cycle_days <= 0:
        raise SubscriptionValidationError(subscription.id, "billing cycle days must be positive")
    if subscription.color is not None and not _HEX_COLOR.match(subscription.color):
        raise SubscriptionValidationError(subscription.id, "color must use #RRGGBB format")
    if subscription.end_date is not None and subscription.end_date < subscription.start_date:
        raise SubscriptionValidationError(subscription.id, "end date precedes start date")


def partition_valid(
    subscriptions: Iterable[Subscription],
) -> tuple[list[Subscription], list[tuple[Subscription, SubscriptionValidationError]]]:
    """Split records into those that pass validation and those that do not."""

    valid: list[Subscription] = []
    rejected: list[tuple[Subscription, SubscriptionValidationError]] = []
    for subscription in subscriptions:
        try:
            validate_subscription(subscription)
        except SubscriptionValidationError as exc:
            rejected.append((subscription, exc))
        else:
            valid.append(subscription)
    return valid, rejected
