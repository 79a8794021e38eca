"""
Pricing Policy

The price shown to end users is the unit's base nightly cost with a
fixed markup on top. Rounding to cents (half-up) happens once, on the
final figure, so intermediate products keep full precision.
"""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from shared.domain.value_objects import DateRange

MARKUP_RATE = Decimal("0.15")
MARKUP_MULTIPLIER = Decimal("1") + MARKUP_RATE

CENTS = Decimal("0.01")


def _to_cents(amount: Decimal) -> Decimal:
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def nights_between(start_date: date, end_date: date) -> int:
    return DateRange(start_date, end_date).nights


def compute_total_cost(base_cost: Decimal, start_date: date, end_date: date) -> Decimal:
    """
    Total cost of a stay

    ``base_cost * nights * (1 + MARKUP_RATE)``; a same-day stay is
    billed as one night.

    Example:
        compute_total_cost(Decimal("100.00"), date(2026, 2, 1), date(2026, 2, 3))
        -> Decimal("230.00")
    """
    nights = nights_between(start_date, end_date)
    return _to_cents(Decimal(base_cost) * nights * MARKUP_MULTIPLIER)


def total_cost_to_user_price(base_cost: Decimal) -> Decimal:
    """Nightly price shown to users for a given base cost."""
    return _to_cents(Decimal(base_cost) * MARKUP_MULTIPLIER)


def base_cost_from_user_price(user_price: Decimal) -> Decimal:
    """Inverse of ``total_cost_to_user_price``, used for price filters."""
    return _to_cents(Decimal(user_price) / MARKUP_MULTIPLIER)
