from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from leave_tracker.schemas.employee import LeaveEntry

_CENTS = Decimal("0.01")
_ZERO = Decimal(0)


def to_decimal(value: float | int | Decimal) -> Decimal:
    """Convert a stored number to Decimal without binary float noise."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def sum_leave_taken(entries: Iterable[LeaveEntry]) -> Decimal:
    """Sum the days of every entry. Nothing is filtered by date or type."""
    return sum((to_decimal(entry.days) for entry in entries), _ZERO)


def compute_balance(accrued: Decimal, starting_balance: Decimal, leave_taken_total: Decimal) -> Decimal:
    """Accrued plus starting balance minus leave taken. Negative means over-drawn."""
    return accrued + starting_balance - leave_taken_total


def available_to_use(balance: Decimal, can_use_leave: bool) -> Decimal:
    """The balance when the employee is eligible, otherwise zero."""
    return balance if can_use_leave else _ZERO


def round_days(value: Decimal) -> float:
    """Round half-up to two decimals for output."""
    # "or 0.0" folds -0.0 into 0.0
    return float(value.quantize(_CENTS, rounding=ROUND_HALF_UP)) or 0.0
