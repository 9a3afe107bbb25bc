# ruff: noqa: B008, TC003
from __future__ import annotations

from datetime import date
from typing import Annotated

from fastapi import Depends, Query

from leave_tracker.services.accrual import LeavePolicy, get_leave_policy
from leave_tracker.services.employee import EmployeeRecordStore, get_record_store
from leave_tracker.services.leave import today_utc

RecordStoreDep = Annotated[EmployeeRecordStore, Depends(get_record_store)]

LeavePolicyDep = Annotated[LeavePolicy, Depends(get_leave_policy)]


async def get_as_of(
    as_of: date | None = Query(default=None, description="Evaluation date, defaults to today (UTC)"),
) -> date:
    """Resolve the evaluation date, falling back to the current UTC date."""
    return as_of if as_of is not None else today_utc()


AsOfDep = Annotated[date, Depends(get_as_of)]
