"""Tests for the top subscriptions ranking."""

from __future__ import annotations

from decimal import Decimal

from analytics.ranking import rank_subscriptions
from core.models import SubscriptionStatus


def test_rank_orders_by_normalised_monthly_cost(make_subscription):
    subscriptions = [
        make_subscription(name="Yearly", amount="120", billing_cycle_days=365, category="Cloud"),
        make_subscription(name="Weekly", amount="10", billing_cycle_days=7, category="Food"),
        make_subscription(name="Monthly", amount="20", billing_cycle_days=30),
    ]

    ranked = rank_subscriptions(subscriptions)

    assert [row.name for row in ranked] == ["Weekly", "Monthly", "Yearly"]
    assert ranked[1].cost == Decimal("20")
    assert ranked[1].category is None
    assert ranked[0].category == "Food"


def test_rank_limits_to_five_by_default(make_subscription):
    subscriptions = [make_subscription(amount=str(value)) for value in range(1, 9)]

    ranked = rank_subscriptions(subscriptions)

    assert len(ranked) == 5
    assert [row.cost for row in ranked] == [Decimal(v) for v in (8, 7, 6, 5, 4)]


def test_rank_ties_keep_input_order(make_subscription):
    subscriptions = [
        make_subscription(name="First", amount="10"),
        make_subscription(name="Second", amount="10"),
        make_subscription(name="Third", amount="10"),
    ]

    assert [row.name for row in rank_subscriptions(subscriptions, limit=2)] == ["First", "Second"]


def test_rank_skips_inactive(make_subscription):
    subscriptions = [
        make_subscription(name="Cancelled", amount="100", status=SubscriptionStatus.CANCELLED),
        make_subscription(name="Trial", amount="50", status=SubscriptionStatus.TRIAL),
        make_subscription(name="Active", amount="5"),
    ]

    assert [row.name for row in rank_subscriptions(subscriptions)] == ["Active"]


def test_rank_empty_and_non_positive_limit(make_subscription):
    assert rank_subscriptions([]) == ()
    assert rank_subscriptions([make_subscription()], limit=0) == ()
