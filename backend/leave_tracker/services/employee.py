"""Employee record stores: the source of truth for employees and their leave entries."""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
from typing import Protocol, runtime_checkable

from pydantic import TypeAdapter, ValidationError

from leave_tracker.config import get_settings
from leave_tracker.exceptions import EmployeeNotFoundError, RecordSourceError
from leave_tracker.schemas.employee import EmployeeRaw, LeaveEntry

logger = logging.getLogger(__name__)

_employees_adapter: TypeAdapter[list[EmployeeRaw]] = TypeAdapter(list[EmployeeRaw])


@runtime_checkable
class EmployeeRecordStore(Protocol):
    """Interface for the employee record store."""

    async def list_employees(self) -> list[EmployeeRaw]:
        """Return a snapshot of every employee with their leave entries."""
        ...

    async def append_leave(self, employee_id: str, entry: LeaveEntry) -> None:
        """Append a leave entry. Raises EmployeeNotFoundError for unknown ids."""
        ...


class InMemoryEmployeeStore:
    """In-memory stub implementation for development and tests."""

    def __init__(self) -> None:
        self._employees: dict[str, EmployeeRaw] = {}

    def seed(self, employee: EmployeeRaw) -> None:
        """Seed an employee, replacing any record with the same id."""
        self._employees[employee.id] = employee.model_copy(deep=True)

    async def list_employees(self) -> list[EmployeeRaw]:
        """Return deep copies so callers never alias stored state."""
        return [e.model_copy(deep=True) for e in self._employees.values()]

    async def append_leave(self, employee_id: str, entry: LeaveEntry) -> None:
        """Append a leave entry to an existing employee."""
        employee = self._employees.get(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        employee.leave_taken.append(entry.model_copy())


class JsonFileEmployeeStore:
    """Employees kept as a JSON array of records in a single file."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self._lock = asyncio.Lock()

    def _read(self) -> list[EmployeeRaw]:
        try:
            raw = self.path.read_bytes()
        except OSError as exc:
            logger.exception("Failed to read employee records from %s", self.path)
            raise RecordSourceError(f"Cannot read employee records: {exc.strerror or exc}") from exc
        try:
            return _employees_adapter.validate_json(raw)
        except ValidationError as exc:
            logger.exception("Employee records in %s are malformed", self.path)
            raise RecordSourceError("Employee records are malformed") from exc

    def _write(self, employees: list[EmployeeRaw]) -> None:
        # Write a sibling temp file and swap it in, so readers never see a partial file.
        tmp_path = self.path.with_name(f".{self.path.name}.tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_bytes(_employees_adapter.dump_json(employees, indent=2))
            os.replace(tmp_path, self.path)
        except OSError as exc:
            logger.exception("Failed to write employee records to %s", self.path)
            tmp_path.unlink(missing_ok=True)
            raise RecordSourceError(f"Cannot write employee records: {exc.strerror or exc}") from exc

    async def list_employees(self) -> list[EmployeeRaw]:
        """Load every employee from disk."""
        async with self._lock:
            return await asyncio.to_thread(self._read)

    async def append_leave(self, employee_id: str, entry: LeaveEntry) -> None:
        """Append a leave entry and rewrite the file."""
        async with self._lock:
            employees = await asyncio.to_thread(self._read)
            for employee in employees:
                if employee.id == employee_id:
                    employee.leave_taken.append(entry)
                    break
            else:
                raise EmployeeNotFoundError(employee_id)
            await asyncio.to_thread(self._write, employees)

    async def write_employees(self, employees: list[EmployeeRaw]) -> None:
        """Replace the whole file. Used for seeding."""
        async with self._lock:
            await asyncio.to_thread(self._write, employees)


def _build_record_store() -> EmployeeRecordStore:
    settings = get_settings()
    if settings.record_store == "memory":
        return InMemoryEmployeeStore()
    return JsonFileEmployeeStore(settings.data_path)


_record_store: EmployeeRecordStore | None = None


def get_record_store() -> EmployeeRecordStore:
    """FastAPI dependency for the employee record store."""
    global _record_store
    if _record_store is None:
        _record_store = _build_record_store()
    return _record_store


def set_record_store(store: EmployeeRecordStore | None) -> None:
    """Override the store (for testing or production wiring). None rebuilds from settings."""
    global _record_store
    _record_store = store
