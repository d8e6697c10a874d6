"""Shared fixtures for the SubSpend test-suite."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from config.settings import get_settings
from core.models import Subscription, SubscriptionStatus


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Keep tests independent of ``SUBSPEND_*`` variables on the host."""

    for name in (
        "SUBSPEND_TOP_SUBSCRIPTIONS_LIMIT",
        "SUBSPEND_DEFAULT_TIME_RANGE",
        "SUBSPEND_RENEWAL_WINDOW_DAYS",
        "SUBSPEND_SKIP_INVALID_RECORDS",
        "SUBSPEND_LOG_LEVEL",
        "SUBSPEND_DATA_PATH",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def now() -> datetime:
    return datetime(2024, 10, 15, 9, 30)


@pytest.fixture()
def make_subscription():
    counter = iter(range(1, 10_000))

    def factory(**overrides) -> Subscription:
        index = next(counter)
        fields = {
            "id": f"sub-{index}",
            "name": f"Service {index}",
            "amount": Decimal("30"),
            "currency": "USD",
            "billing_cycle_days": 30,
            "status": SubscriptionStatus.ACTIVE,
            "start_date": date(2024, 1, 1),
            "category": None,
        }
        fields.update(overrides)
        if not isinstance(fields["amount"], Decimal):
            fields["amount"] = Decimal(str(fields["amount"]))
        return Subscription(**fields)

    return factory
