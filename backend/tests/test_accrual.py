"""Unit tests for the monthly accrual rule and the minimum-tenure eligibility gate."""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

import pytest

from leave_tracker.services.accrual import (
    DEFAULT_LEAVE_POLICY,
    ELIGIBILITY_MIN_MONTHS,
    MONTHLY_ACCRUAL_RATE,
    LeavePolicy,
    calculate_accrued_leave,
    get_leave_policy,
    is_eligible,
)


def _months_before(anchor: date, months: int) -> date:
    """Same day-of-month, `months` whole months before anchor."""
    total = anchor.year * 12 + (anchor.month - 1) - months
    return date(total // 12, total % 12 + 1, anchor.day)


# ---------------------------------------------------------------------------
# Constants and policy
# ---------------------------------------------------------------------------


def test_default_rate_and_threshold() -> None:
    assert MONTHLY_ACCRUAL_RATE == Decimal("0.83")
    assert ELIGIBILITY_MIN_MONTHS == 6
    assert DEFAULT_LEAVE_POLICY == LeavePolicy(Decimal("0.83"), 6)


def test_leave_policy_from_settings_defaults() -> None:
    assert get_leave_policy() == DEFAULT_LEAVE_POLICY


# ---------------------------------------------------------------------------
# calculate_accrued_leave
# ---------------------------------------------------------------------------


def test_accrued_six_months() -> None:
    assert calculate_accrued_leave(date(2023, 1, 15), date(2023, 7, 15)) == Decimal("4.98")


def test_accrued_one_day_short_of_six_months() -> None:
    assert calculate_accrued_leave(date(2023, 1, 15), date(2023, 7, 14)) == Decimal("4.15")


@pytest.mark.parametrize("months", [0, 1, 5, 6, 11, 12, 13, 24, 37, 60])
def test_accrued_equals_months_times_rate(months: int) -> None:
    today = date(2025, 6, 15)
    hire_date = _months_before(today, months)
    assert calculate_accrued_leave(hire_date, today) == months * Decimal("0.83")


def test_accrual_has_no_annual_reset() -> None:
    """37 full months accrue 37 x rate in total, across three year boundaries."""
    assert calculate_accrued_leave(date(2020, 1, 10), date(2023, 2, 10)) == Decimal("30.71")


def test_accrual_custom_rate() -> None:
    assert calculate_accrued_leave(date(2023, 1, 1), date(2024, 1, 1), rate=Decimal("1.25")) == Decimal("15.00")


def test_accrual_future_hire_is_zero() -> None:
    assert calculate_accrued_leave(date(2030, 1, 1), date(2024, 1, 1)) == 0


def test_accrual_non_decreasing_across_year_end() -> None:
    hire_date = date(2022, 12, 31)
    previous = Decimal(0)
    current = date(2023, 11, 1)
    while current <= date(2024, 3, 31):
        accrued = calculate_accrued_leave(hire_date, current)
        assert accrued >= previous
        previous = accrued
        current += timedelta(days=1)


# ---------------------------------------------------------------------------
# is_eligible
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("months", "expected"),
    [(0, False), (5, False), (6, True), (7, True), (120, True)],
)
def test_is_eligible_threshold(months: int, expected: bool) -> None:
    assert is_eligible(months) is expected


def test_is_eligible_custom_threshold() -> None:
    assert is_eligible(3, min_months=3) is True
    assert is_eligible(2, min_months=3) is False
