"""Formatting helpers for SubSpend summaries."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from analytics.cadence import describe_cycle

__all__ = ["format_currency", "category_share", "format_billing_cycle"]

_CENTS = Decimal("0.01")
_CURRENCY_SYMBOLS = {
    "USD": "$",
    "CNY": "¥",
    "GBP": "£",
}


def format_currency(amount: Decimal, currency: str = "USD") -> str:
    value = Decimal(amount).quantize(_CENTS, rounding=ROUND_HALF_UP)
    code = currency.upper()
    sign = "-" if value < 0 else ""
    digits = f"{abs(value):,.2f}"

    symbol = _CURRENCY_SYMBOLS.get(code)
    if symbol is None:
        return f"{sign}{code} {digits}"
    return f"{sign}{symbol}{digits}"


def category_share(value: Decimal, total: Decimal) -> Decimal:
    """Return ``value`` as a percentage of ``total``, or zero for an empty total."""

    if total <= 0:
        return Decimal(0)
    return Decimal(value) / Decimal(total) * 100


def format_billing_cycle(billing_cycle_days: int) -> str:
    unit = describe_cycle(billing_cycle_days)
    if unit.endswith("days"):
        return f"every {unit}"
    return f"per {unit}"
