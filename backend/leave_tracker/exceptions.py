from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from leave_tracker.models.enums import DateErrorReason


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: str
    detail: str | None = None
    status_code: int


class AppError(Exception):
    """Base application exception."""

    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class InvalidDateError(AppError):
    """A calendar date string could not be turned into a date."""

    def __init__(self, value: str, reason: DateErrorReason) -> None:
        self.value = value
        self.reason = reason
        if reason == DateErrorReason.MALFORMED:
            message = f"Malformed date {value!r}: expected YYYY-MM-DD"
        else:
            message = f"Date {value!r} is not a valid calendar date"
        super().__init__(message, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)


class EmployeeNotFoundError(AppError):
    """No employee record matches the given id."""

    def __init__(self, employee_id: str) -> None:
        self.employee_id = employee_id
        super().__init__(f"Employee with id {employee_id} not found", status_code=status.HTTP_404_NOT_FOUND)


class InvalidEmployeeRecordError(AppError):
    """A stored employee record cannot be computed, e.g. its hire date is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Stored employee record is invalid: {message}")


class RecordSourceError(AppError):
    """The employee record store could not be read or written."""

    def __init__(self, message: str = "Employee records are unavailable") -> None:
        super().__init__(message, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)


async def _app_exception_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error=type(exc).__name__,
            detail=exc.message,
            status_code=exc.status_code,
        ).model_dump(),
    )


async def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=ErrorResponse(
            error="ValidationError",
            detail=str(exc.errors()),
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        ).model_dump(),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers on the application."""
    app.add_exception_handler(AppError, _app_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)  # type: ignore[arg-type]
