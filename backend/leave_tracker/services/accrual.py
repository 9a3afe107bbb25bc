"""Accrual and eligibility rules: a fixed monthly rate with no yearly reset, and a minimum-tenure gate."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from leave_tracker.config import get_settings
from leave_tracker.services.tenure import get_full_months_between

if TYPE_CHECKING:
    from datetime import date

MONTHLY_ACCRUAL_RATE = Decimal("0.83")  # days per full month of tenure
ELIGIBILITY_MIN_MONTHS = 6


@dataclass(frozen=True)
class LeavePolicy:
    """Rate and eligibility threshold applied uniformly to every employee."""

    monthly_accrual_rate: Decimal = MONTHLY_ACCRUAL_RATE
    eligibility_min_months: int = ELIGIBILITY_MIN_MONTHS


DEFAULT_LEAVE_POLICY = LeavePolicy()


def get_leave_policy() -> LeavePolicy:
    """Build the leave policy from application settings."""
    settings = get_settings()
    return LeavePolicy(
        monthly_accrual_rate=settings.monthly_accrual_rate,
        eligibility_min_months=settings.eligibility_min_months,
    )


def calculate_accrued_leave(hire_date: date, today: date, rate: Decimal = MONTHLY_ACCRUAL_RATE) -> Decimal:
    """Total leave accrued from hire_date up to today.

    Cumulative over the whole employment. Starting balance and leave taken
    are applied by the caller.
    """
    return get_full_months_between(hire_date, today) * rate


def is_eligible(full_months_tenure: int, min_months: int = ELIGIBILITY_MIN_MONTHS) -> bool:
    """Whether an employee with this many full months may draw on their balance."""
    return full_months_tenure >= min_months
