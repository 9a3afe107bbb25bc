from __future__ import annotations

from fastapi import APIRouter, status

from leave_tracker.api.deps import AsOfDep, LeavePolicyDep, RecordStoreDep
from leave_tracker.schemas.employee import EmployeeWithLeave
from leave_tracker.schemas.leave import AddLeaveRequest, AddLeaveResponse
from leave_tracker.services import leave as leave_service

employees_router = APIRouter(
    prefix="/employees",
    tags=["employees"],
)


@employees_router.get("", response_model=list[EmployeeWithLeave])
async def list_employees(
    store: RecordStoreDep,
    policy: LeavePolicyDep,
    as_of: AsOfDep,
) -> list[EmployeeWithLeave]:
    """List every employee with tenure, accrual and balance figures."""
    return await leave_service.list_employees_with_leave(store, as_of, policy)


@employees_router.get("/{employee_id}", response_model=EmployeeWithLeave)
async def get_employee(
    employee_id: str,
    store: RecordStoreDep,
    policy: LeavePolicyDep,
    as_of: AsOfDep,
) -> EmployeeWithLeave:
    """Get a single employee with tenure, accrual and balance figures."""
    return await leave_service.get_employee_with_leave(store, employee_id, as_of, policy)


@employees_router.post(
    "/{employee_id}/leave",
    response_model=AddLeaveResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_leave_entry(
    employee_id: str,
    payload: AddLeaveRequest,
    store: RecordStoreDep,
    policy: LeavePolicyDep,
    as_of: AsOfDep,
) -> AddLeaveResponse:
    """Record a leave entry and return every employee recomputed."""
    employees = await leave_service.record_leave(store, employee_id, payload, as_of, policy)
    return AddLeaveResponse(employees=employees)
