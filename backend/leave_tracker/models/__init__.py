from leave_tracker.models.enums import DateErrorReason, LeaveType

__all__ = [
    "DateErrorReason",
    "LeaveType",
]
