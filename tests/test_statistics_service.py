"""Tests for the statistics façade and overview summary."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from config.settings import get_settings
from core.errors import InvalidCadenceError
from core.models import SubscriptionStatus
from core.statistics_service import build_overview, compute_statistics, prepare_statistics
from data.synth import write_subscriptions_csv


def test_compute_statistics_empty_input(now):
    stats = compute_statistics([], "30days", now)

    assert stats.monthly == 0
    assert stats.yearly == 0
    assert stats.weekly == 0
    assert stats.total_active == 0
    assert stats.average_per_subscription == 0
    assert stats.category_costs == ()
    assert stats.top_subscriptions == ()
    assert stats.status_breakdown == ()
    assert len(stats.monthly_costs) == 1
    assert stats.monthly_costs[0].cost == 0


@pytest.mark.parametrize(("time_range", "length"), [("1year", 12), ("90days", 3), ("6months", 6)])
def test_compute_statistics_window_length(make_subscription, now, time_range, length):
    stats = compute_statistics([make_subscription()], time_range, now)

    assert len(stats.monthly_costs) == length


def test_single_monthly_subscription_scenario(make_subscription, now):
    subscription = make_subscription(
        name="Video",
        amount="30",
        billing_cycle_days=30,
        category="Entertainment",
        start_date=date(2024, 8, 1),
    )

    stats = compute_statistics([subscription], "90days", now)

    assert stats.monthly == Decimal("30")
    assert [point.cost for point in stats.monthly_costs] == [Decimal("30")] * 3
    assert len(stats.top_subscriptions) == 1
    top = stats.top_subscriptions[0]
    assert (top.name, top.cost, top.category) == ("Video", Decimal("30"), "Entertainment")


def test_weekly_subscription_scenario(make_subscription, now):
    stats = compute_statistics([make_subscription(amount="9.99", billing_cycle_days=7)], now=now)

    assert stats.monthly.quantize(Decimal("0.01")) == Decimal("42.81")
    assert stats.weekly.quantize(Decimal("0.01")) == Decimal("9.89")
    assert stats.average_per_subscription == stats.monthly


def test_cancelled_subscription_scenario(make_subscription, now):
    subscriptions = [
        make_subscription(name="Gym", amount="100", status=SubscriptionStatus.CANCELLED, category="Health"),
        make_subscription(name="Music", amount="10", category="Music"),
    ]

    stats = compute_statistics(subscriptions, "30days", now)

    assert stats.monthly == Decimal("10")
    assert [row.name for row in stats.category_costs] == ["Music"]
    assert [row.name for row in stats.top_subscriptions] == ["Music"]
    cancelled = next(row for row in stats.status_breakdown if row.status == "Cancelled")
    assert (cancelled.count, cancelled.cost) == (1, Decimal("0"))


def test_compute_statistics_is_idempotent(make_subscription, now):
    subscriptions = [
        make_subscription(amount="12.50", category="A"),
        make_subscription(amount="99", billing_cycle_days=365, category="B"),
    ]

    first = compute_statistics(subscriptions, "6months", now)
    second = compute_statistics(subscriptions, "6months", now)

    assert first == second
    assert first.as_dict()["monthly_costs"][0]["name"] == "May"


def test_compute_statistics_fails_fast_on_zero_cadence(make_subscription, now):
    subscriptions = [make_subscription(), make_subscription(billing_cycle_days=0)]

    with pytest.raises(InvalidCadenceError):
        compute_statistics(subscriptions, "30days", now)


def test_compute_statistics_can_skip_invalid_records(make_subscription, now, caplog):
    subscriptions = [
        make_subscription(amount="20"),
        make_subscription(id="broken", billing_cycle_days=0),
    ]

    with caplog.at_level("WARNING", logger="core.statistics_service"):
        stats = compute_statistics(subscriptions, "30days", now, skip_invalid=True)

    assert stats.monthly == Decimal("20")
    assert sum(row.count for row in stats.status_breakdown) == 1
    assert "broken" in caplog.text


def test_skip_invalid_defaults_from_settings(make_subscription, now, monkeypatch):
    monkeypatch.setenv("SUBSPEND_SKIP_INVALID_RECORDS", "true")
    get_settings.cache_clear()

    stats = compute_statistics([make_subscription(billing_cycle_days=-1)], "30days", now)

    assert stats.total_active == 0


def test_top_limit_defaults_from_settings(make_subscription, now, monkeypatch):
    monkeypatch.setenv("SUBSPEND_TOP_SUBSCRIPTIONS_LIMIT", "2")
    get_settings.cache_clear()

    stats = compute_statistics([make_subscription() for _ in range(4)], "30days", now)

    assert len(stats.top_subscriptions) == 2


def test_compute_statistics_unknown_window_covers_a_year(make_subscription, now):
    stats = compute_statistics([make_subscription()], "forever", now)

    assert len(stats.monthly_costs) == 12
    assert stats.monthly_costs[0].name == "Nov"
    assert stats.monthly_costs[-1].name == "Oct"


def test_build_overview_counts_renewals(make_subscription):
    today = date(2024, 10, 15)
    subscriptions = [
        make_subscription(start_date=date(2024, 9, 18)),
        make_subscription(start_date=date(2024, 9, 1)),
        make_subscription(status=SubscriptionStatus.PAUSED, start_date=date(2024, 9, 18)),
    ]

    overview = build_overview(subscriptions, today)

    assert overview.total_subscriptions == 3
    assert overview.active_subscriptions == 2
    assert overview.monthly == Decimal("60")
    assert overview.yearly == Decimal("720")
    assert overview.renewing_soon == 1


def test_prepare_statistics_from_csv(tmp_path):
    csv_path = tmp_path / "subscriptions.csv"
    frame = write_subscriptions_csv(str(csv_path), seed=7, count=12, today="2024-10-15")

    stats = prepare_statistics(csv_path, "1year", date(2024, 10, 15))

    assert len(stats.monthly_costs) == 12
    assert sum(row.count for row in stats.status_breakdown) == len(frame)
    assert stats.total_active == int((frame["status"] == "Active").sum())


def test_prepare_statistics_requires_a_path():
    with pytest.raises(ValueError, match="SUBSPEND_DATA_PATH"):
        prepare_statistics()
