"""Leave transformer: derives tenure, accrual, balance and eligibility for each employee."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from leave_tracker.exceptions import EmployeeNotFoundError, InvalidDateError, InvalidEmployeeRecordError
from leave_tracker.schemas.employee import EmployeeRaw, EmployeeWithLeave
from leave_tracker.services.accrual import DEFAULT_LEAVE_POLICY, LeavePolicy, calculate_accrued_leave, is_eligible
from leave_tracker.services.balance import (
    available_to_use,
    compute_balance,
    round_days,
    sum_leave_taken,
    to_decimal,
)
from leave_tracker.services.tenure import diff_in_days, get_full_months_between, get_tenure_components, parse_date

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import date

    from leave_tracker.schemas.leave import AddLeaveRequest
    from leave_tracker.services.employee import EmployeeRecordStore

logger = logging.getLogger(__name__)

# Derived fields of an already-enriched input are dropped and recomputed.
_RAW_FIELDS = set(EmployeeRaw.model_fields)


# ---------------------------------------------------------------------------
# Pure computation (no I/O)
# ---------------------------------------------------------------------------


def _compute_one(employee: EmployeeRaw, as_of: date, policy: LeavePolicy) -> EmployeeWithLeave:
    hire_date = parse_date(employee.hire_date)

    tenure_days = diff_in_days(hire_date, as_of)
    tenure = get_tenure_components(hire_date, as_of)
    full_months_tenure = get_full_months_between(hire_date, as_of)

    starting_balance = to_decimal(employee.starting_balance)
    accrued = calculate_accrued_leave(hire_date, as_of, policy.monthly_accrual_rate)
    leave_taken_total = sum_leave_taken(employee.leave_taken)
    balance = compute_balance(accrued, starting_balance, leave_taken_total)

    can_use_leave = is_eligible(full_months_tenure, policy.eligibility_min_months)
    available = available_to_use(balance, can_use_leave)

    # Round only here, after all arithmetic is done at full precision.
    return EmployeeWithLeave(
        **employee.model_dump(include=_RAW_FIELDS),
        tenure_days=tenure_days,
        tenure_years=tenure.years,
        tenure_months=tenure.months,
        accrued_leave=round_days(accrued + starting_balance),
        leave_taken_total=round_days(leave_taken_total),
        leave_balance=round_days(balance),
        full_months_tenure=full_months_tenure,
        can_use_leave=can_use_leave,
        available_leave_to_use=round_days(available),
    )


def compute_employee_leave(
    employees: Sequence[EmployeeRaw],
    as_of: date,
    policy: LeavePolicy = DEFAULT_LEAVE_POLICY,
) -> list[EmployeeWithLeave]:
    """Enrich every employee with leave figures as of the given date.

    Output order and length match the input. Inputs are never mutated.
    Fails fast: one record with an unparseable hire date aborts the batch.
    """
    results: list[EmployeeWithLeave] = []
    for employee in employees:
        try:
            results.append(_compute_one(employee, as_of, policy))
        except InvalidDateError:
            logger.error("Cannot compute leave for employee %s: bad hire date %r", employee.id, employee.hire_date)
            raise
    return results


def today_utc() -> date:
    """Current calendar date in UTC."""
    return datetime.now(UTC).date()


def compute_employee_leave_today(
    employees: Sequence[EmployeeRaw],
    policy: LeavePolicy = DEFAULT_LEAVE_POLICY,
) -> list[EmployeeWithLeave]:
    """compute_employee_leave against the live current date."""
    return compute_employee_leave(employees, today_utc(), policy)


# ---------------------------------------------------------------------------
# Read / append actions (record store I/O)
# ---------------------------------------------------------------------------


def _compute_stored(
    employees: Sequence[EmployeeRaw],
    as_of: date,
    policy: LeavePolicy,
) -> list[EmployeeWithLeave]:
    # A bad date in stored data is a server-side fault, not a client error.
    try:
        return compute_employee_leave(employees, as_of, policy)
    except InvalidDateError as exc:
        raise InvalidEmployeeRecordError(exc.message) from exc


async def list_employees_with_leave(
    store: EmployeeRecordStore,
    as_of: date,
    policy: LeavePolicy = DEFAULT_LEAVE_POLICY,
) -> list[EmployeeWithLeave]:
    """Load a snapshot of every employee and compute their leave."""
    employees = await store.list_employees()
    return _compute_stored(employees, as_of, policy)


async def get_employee_with_leave(
    store: EmployeeRecordStore,
    employee_id: str,
    as_of: date,
    policy: LeavePolicy = DEFAULT_LEAVE_POLICY,
) -> EmployeeWithLeave:
    """Compute leave for a single employee."""
    employees = await store.list_employees()
    for employee in employees:
        if employee.id == employee_id:
            return _compute_stored([employee], as_of, policy)[0]
    raise EmployeeNotFoundError(employee_id)


async def record_leave(
    store: EmployeeRecordStore,
    employee_id: str,
    payload: AddLeaveRequest,
    as_of: date,
    policy: LeavePolicy = DEFAULT_LEAVE_POLICY,
) -> list[EmployeeWithLeave]:
    """Append a leave entry, then recompute every employee from a fresh snapshot.

    The entry date is validated before the store is touched.
    """
    parse_date(payload.date)
    entry = payload.to_entry()

    await store.append_leave(employee_id, entry)
    logger.info("Recorded %s day(s) of %s leave for employee %s on %s", entry.days, entry.type, employee_id, entry.date)

    return await list_employees_with_leave(store, as_of, policy)
