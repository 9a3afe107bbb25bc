from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


class LeaveEntry(BaseModel):
    """One recorded leave event. Never mutated once recorded."""

    date: str  # YYYY-MM-DD
    days: float
    type: str
    note: str | None = None


class EmployeeRaw(BaseModel):
    """Employee record as supplied by the record store."""

    id: str = Field(min_length=1)
    full_name: str
    position: str = ""
    hire_date: str  # YYYY-MM-DD
    starting_balance: float = 0.0  # manual credit/debit, independent of accrual
    leave_taken: list[LeaveEntry] = Field(default_factory=list)

    @field_validator("starting_balance", mode="before")
    @classmethod
    def _blank_starting_balance_is_zero(cls, value: Any) -> Any:
        if value is None or value == "":
            return 0.0
        return value


class EmployeeWithLeave(EmployeeRaw):
    """Employee record enriched with derived tenure and leave figures.

    Built fresh on every read; none of these fields is ever stored.
    """

    tenure_days: int
    tenure_years: int
    tenure_months: int

    # Total over the whole employment, no yearly reset.
    accrued_leave: float
    leave_taken_total: float
    leave_balance: float

    full_months_tenure: int
    can_use_leave: bool
    available_leave_to_use: float  # 0 until can_use_leave
