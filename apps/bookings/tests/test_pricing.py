"""Pricing policy."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from apps.bookings.domain.pricing import (
    MARKUP_MULTIPLIER,
    base_cost_from_user_price,
    compute_total_cost,
    total_cost_to_user_price,
)
from shared.domain.exceptions import InvalidArgumentError


def test_two_nights_with_markup() -> None:
    assert compute_total_cost(Decimal("100.00"), date(2026, 2, 1), date(2026, 2, 3)) == Decimal("230.00")


def test_same_day_stay_is_billed_as_one_night() -> None:
    assert compute_total_cost(Decimal("100.00"), date(2026, 2, 1), date(2026, 2, 1)) == Decimal("115.00")


def test_rounding_happens_once_on_the_final_amount() -> None:
    # 1.03 * 3 * 1.15 = 3.5535 -> 3.55; rounding the nightly price first would give 3.54
    assert compute_total_cost(Decimal("1.03"), date(2026, 3, 1), date(2026, 3, 4)) == Decimal("3.55")


def test_half_up_rounding() -> None:
    # 0.30 * 1.15 = 0.345
    assert total_cost_to_user_price(Decimal("0.30")) == Decimal("0.35")


def test_end_before_start_is_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        compute_total_cost(Decimal("100.00"), date(2026, 2, 3), date(2026, 2, 1))


def test_markup_multiplier() -> None:
    assert MARKUP_MULTIPLIER == Decimal("1.15")


@pytest.mark.parametrize(
    "base_cost",
    ["1.00", "12.34", "99.99", "100.00", "123.45", "250.01", "333.33", "99999.99"],
)
def test_user_price_converts_back_to_base_cost(base_cost: str) -> None:
    base = Decimal(base_cost)
    assert abs(base_cost_from_user_price(total_cost_to_user_price(base)) - base) <= Decimal("0.01")


def test_user_price_filter_bound_matches_displayed_price() -> None:
    assert base_cost_from_user_price(Decimal("115.00")) == Decimal("100.00")
    assert base_cost_from_user_price(Decimal("230.00")) == Decimal("200.00")
