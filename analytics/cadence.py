"""Billing cadence normalisation and label/day-count conversion."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Final

from core.errors import InvalidCadenceError

__all__ = [
    "MONTH_DAYS",
    "WEEKS_PER_MONTH",
    "CYCLE_DAYS",
    "DEFAULT_CYCLE_LABEL",
    "normalize_to_monthly",
    "weekly_from_monthly",
    "yearly_from_monthly",
    "days_from_label",
    "label_from_days",
    "describe_cycle",
]

logger = logging.getLogger(__name__)

MONTH_DAYS: Final[Decimal] = Decimal(30)
WEEKS_PER_MONTH: Final[Decimal] = Decimal("4.33")
MONTHS_PER_YEAR: Final[Decimal] = Decimal(12)

CYCLE_DAYS: Final[dict[str, int]] = {
    "daily": 1,
    "weekly": 7,
    "monthly": 30,
    "quarterly": 90,
    "yearly": 365,
}
DEFAULT_CYCLE_LABEL: Final[str] = "monthly"

_CYCLE_UNITS: Final[dict[int, str]] = {
    1: "day",
    7: "week",
    30: "month",
    90: "quarter",
    365: "year",
}
_LABELS_BY_DAYS: Final[dict[int, str]] = {days: label for label, days in CYCLE_DAYS.items()}


def normalize_to_monthly(amount: Decimal, billing_cycle_days: int) -> Decimal:
    """Rescale ``amount`` charged every ``billing_cycle_days`` to a 30-day month.

    Raises
    ------
    InvalidCadenceError
        If ``billing_cycle_days`` is zero or negative.
    """

    if billing_cycle_days <= 0:
        raise InvalidCadenceError(billing_cycle_days)
    return Decimal(amount) * MONTH_DAYS / Decimal(billing_cycle_days)


def weekly_from_monthly(monthly: Decimal) -> Decimal:
    return Decimal(monthly) / WEEKS_PER_MONTH


def yearly_from_monthly(monthly: Decimal) -> Decimal:
    return Decimal(monthly) * MONTHS_PER_YEAR


def days_from_label(label: str | None) -> int:
    """Return the day-count for a cadence label, falling back to monthly."""

    key = (label or "").strip().lower()
    days = CYCLE_DAYS.get(key)
    if days is None:
        logger.debug("Unrecognised billing cycle label %r, using %s", label, DEFAULT_CYCLE_LABEL)
        return CYCLE_DAYS[DEFAULT_CYCLE_LABEL]
    return days


def label_from_days(days: int) -> str:
    """Return the cadence label for an exact day-count, falling back to monthly."""

    return _LABELS_BY_DAYS.get(days, DEFAULT_CYCLE_LABEL)


def describe_cycle(days: int) -> str:
    """Return the short billing unit shown next to a price, e.g. ``"month"``."""

    unit = _CYCLE_UNITS.get(days)
    if unit is not None:
        return unit
    return f"{days} days"
