from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from leave_tracker.schemas.employee import EmployeeWithLeave, LeaveEntry


class AddLeaveRequest(BaseModel):
    """Request body for recording a leave entry against an employee."""

    model_config = ConfigDict(str_strip_whitespace=True)

    date: str = Field(min_length=1, description="Calendar date, YYYY-MM-DD")
    days: float = Field(gt=0, allow_inf_nan=False, description="Days taken, may be fractional")
    type: str = Field(min_length=1, max_length=100)
    note: str | None = Field(default=None, max_length=1000)

    def to_entry(self) -> LeaveEntry:
        """Convert to the stored leave entry shape."""
        return LeaveEntry(date=self.date, days=self.days, type=self.type, note=self.note or None)


class AddLeaveResponse(BaseModel):
    """All employees recomputed after a leave entry was recorded."""

    employees: list[EmployeeWithLeave]
