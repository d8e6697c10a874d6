"""Data loading utilities for SubSpend's statistics pipeline."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Final, Iterable, Mapping

import pandas as pd

from core.models import Subscription

__all__ = ["CSV_COLUMNS", "load_subscriptions", "subscriptions_from_records"]

logger = logging.getLogger(__name__)

_CACHE_SIZE: Final[int] = 8

CSV_COLUMNS: Final[tuple[str, ...]] = (
    "id",
    "name",
    "amount",
    "currency",
    "billing_cycle_days",
    "category",
    "status",
    "start_date",
    "end_date",
    "next_billing_date",
    "description",
    "color",
)


def subscriptions_from_records(records: Iterable[Mapping[str, Any]]) -> list[Subscription]:
    """Convert API-shaped mappings into :class:`Subscription` values."""

    return [Subscription.from_record(record) for record in records]


@lru_cache(maxsize=_CACHE_SIZE)
def _read_subscriptions(path: Path) -> tuple[Subscription, ...]:
    df = pd.read_csv(path, dtype={"id": str, "amount": str}, keep_default_na=True)
    if "billing_cycle_days" not in df.columns:
        raise ValueError(f"CSV file is missing the billing_cycle_days column: {path}")

    subscriptions = subscriptions_from_records(df.to_dict(orient="records"))
    logger.info("Loaded %d subscriptions from %s", len(subscriptions), path)
    return tuple(subscriptions)


def load_subscriptions(csv_path: str | Path) -> list[Subscription]:
    """Return the subscriptions stored in the given CSV path.

    Amounts are read as text so they become exact decimals. Results are
    cached per path to avoid redundant disk reads when statistics are
    recomputed for a different trend window.
    """

    path = Path(csv_path)
    if not path.exists():
        raise FileNotFoundError(f"CSV file not found: {path}")
    return list(_read_subscriptions(path))
