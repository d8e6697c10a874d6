"""Synthetic subscription ledger generator for SubSpend.

Produces realistic subscription records for development and testing. The
generator draws from a catalogue of common consumer services, assigns each a
plausible cadence, price and lifecycle, and emits the column set read by
:func:`core.data_loader.load_subscriptions`.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from analytics.cadence import days_from_label
from analytics.renewals import next_billing_date
from core.data_loader import CSV_COLUMNS
from core.models import Subscription, SubscriptionStatus

STATUS_WEIGHTS: Tuple[Tuple[SubscriptionStatus, float], ...] = (
    (SubscriptionStatus.ACTIVE, 0.7),
    (SubscriptionStatus.PAUSED, 0.1),
    (SubscriptionStatus.CANCELLED, 0.12),
    (SubscriptionStatus.TRIAL, 0.08),
)


@dataclass(frozen=True)
class ServiceProfile:
    """Metadata describing a service used in synthetic ledgers."""

    name: str
    category: Optional[str]
    cycle: str
    base_amount: float
    color: str
    description: str = ""


SERVICE_CATALOGUE: Sequence[ServiceProfile] = (
    ServiceProfile("Netflix", "Entertainment", "monthly", 15.49, "#e50914", "Standard plan"),
    ServiceProfile("Spotify", "Music", "monthly", 10.99, "#1db954", "Premium individual"),
    ServiceProfile("Disney+", "Entertainment", "yearly", 109.99, "#1d4ed8"),
    ServiceProfile("YouTube Premium", "Entertainment", "monthly", 13.99, "#ef4444"),
    ServiceProfile("iCloud+", "Cloud Storage", "monthly", 2.99, "#1d4ed8", "200 GB"),
    ServiceProfile("Dropbox", "Cloud Storage", "yearly", 119.88, "#1d4ed8"),
    ServiceProfile("GitHub Copilot", "Software", "monthly", 10.0, "#8b5cf6"),
    ServiceProfile("JetBrains All Products", "Software", "yearly", 289.0, "#8b5cf6"),
    ServiceProfile("Gym membership", "Health", "monthly", 39.0, "#f59e0b"),
    ServiceProfile("Meal kit", "Food", "weekly", 59.94, "#1db954"),
    ServiceProfile("Coffee club", "Food", "weekly", 12.5, "#f59e0b"),
    ServiceProfile("Newspaper", "News", "quarterly", 45.0, "#1d4ed8"),
    ServiceProfile("Language app", None, "yearly", 84.99, "#1db954"),
    ServiceProfile("Parking permit", None, "daily", 1.5, "#ef4444"),
)


def generate_synthetic_subscriptions(
    count: int = 10,
    *,
    today: Optional[date | datetime | str] = None,
    currency: str = "USD",
    max_age_months: int = 24,
    seed: Optional[int] = None,
) -> pd.DataFrame:
    """Generate a synthetic set of subscription records.

    Services are drawn from :data:`SERVICE_CATALOGUE`; once it is exhausted
    the catalogue is reused with a numeric suffix so names stay unique.
    Prices jitter by up to 10% around the catalogue price.
    """

    if count < 0:
        raise ValueError("count must be zero or a positive integer")
    if max_age_months <= 0:
        raise ValueError("max_age_months must be a positive integer")

    rng = np.random.default_rng(seed)
    today_obj = _normalize_date(today) if today is not None else date.today()

    statuses = [status for status, _ in STATUS_WEIGHTS]
    weights = np.array([weight for _, weight in STATUS_WEIGHTS])
    weights = weights / weights.sum()

    records: list[dict] = []
    order = rng.permutation(len(SERVICE_CATALOGUE))
    for idx in range(count):
        profile = SERVICE_CATALOGUE[int(order[idx % len(order)])]
        lap = idx // len(order)
        name = profile.name if lap == 0 else f"{profile.name} {lap + 1}"

        status = statuses[int(rng.choice(len(statuses), p=weights))]
        billing_cycle_days = days_from_label(profile.cycle)
        amount = Decimal(str(round(profile.base_amount * rng.uniform(0.9, 1.1), 2)))

        age_days = int(rng.integers(1, max_age_months * 30))
        start_date = today_obj - timedelta(days=age_days)
        end_date = None
        if status is SubscriptionStatus.CANCELLED:
            end_date = start_date + timedelta(days=int(rng.integers(0, age_days + 1)))

        subscription = Subscription(
            id=f"sub_{idx + 1:04d}",
            name=name,
            amount=amount,
            currency=currency.upper(),
            billing_cycle_days=billing_cycle_days,
            status=status,
            start_date=start_date,
            category=profile.category,
            end_date=end_date,
            description=profile.description or None,
            color=profile.color,
        )
        records.append(_to_row(subscription, today_obj))

    return pd.DataFrame.from_records(records, columns=list(CSV_COLUMNS))


def write_subscriptions_csv(
    path: str,
    *,
    seed: Optional[int] = None,
    **kwargs,
) -> pd.DataFrame:
    """Generate synthetic data and persist it to ``path``.

    Additional keyword arguments are forwarded to
    :func:`generate_synthetic_subscriptions`.
    """

    df = generate_synthetic_subscriptions(seed=seed, **kwargs)
    df.to_csv(path, index=False)
    return df


def _to_row(subscription: Subscription, today: date) -> dict:
    due = next_billing_date(subscription, today)
    return {
        "id": subscription.id,
        "name": subscription.name,
        "amount": str(subscription.amount),
        "currency": subscription.currency,
        "billing_cycle_days": subscription.billing_cycle_days,
        "category": subscription.category,
        "status": subscription.status.value,
        "start_date": subscription.start_date.isoformat(),
        "end_date": subscription.end_date.isoformat() if subscription.end_date else None,
        "next_billing_date": due.isoformat() if due else None,
        "description": subscription.description,
        "color": subscription.color,
    }


def _normalize_date(value: date | datetime | str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        parsed = datetime.fromisoformat(value)
        return parsed.date()
    raise TypeError(f"Unsupported date value: {value!r}")
