"""Exception types raised by the SubSpend engine."""

from __future__ import annotations

__all__ = [
    "SubscriptionDataError",
    "InvalidCadenceError",
    "SubscriptionValidationError",
]


class SubscriptionDataError(ValueError):
    """Base class for subscription records the engine refuses to process."""


class InvalidCadenceError(SubscriptionDataError):
    """Raised when a billing cycle of zero or fewer days reaches the normalizer."""

    def __init__(self, billing_cycle_days: int) -> None:
        super().__init__(f"Billing cycle days must be positive, got {billing_cycle_days!r}")
        self.billing_cycle_days = billing_cycle_days


class SubscriptionValidationError(SubscriptionDataError):
    """Raised when a subscription record fails basic sanity checks."""

    def __init__(self, subscription_id: str, reason: str) -> None:
        super().__init__(f"Subscription {subscription_id!r} is invalid: {reason}")
        self.subscription_id = subscription_id
        self.reason = reason
