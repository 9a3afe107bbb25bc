from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient

from leave_tracker.main import app
from leave_tracker.schemas.employee import EmployeeRaw, LeaveEntry
from leave_tracker.services.employee import InMemoryEmployeeStore, get_record_store

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


def make_employee(
    employee_id: str = "E001",
    hire_date: str = "2023-01-15",
    starting_balance: float = 0.0,
    leave_days: tuple[float, ...] = (),
    full_name: str = "Jane Doe",
) -> EmployeeRaw:
    """Build a raw employee with one Annual entry per value in leave_days."""
    return EmployeeRaw(
        id=employee_id,
        full_name=full_name,
        position="Clerk",
        hire_date=hire_date,
        starting_balance=starting_balance,
        leave_taken=[LeaveEntry(date="2023-03-01", days=d, type="Annual") for d in leave_days],
    )


@pytest.fixture
def record_store() -> InMemoryEmployeeStore:
    """In-memory record store seeded with two employees."""
    store = InMemoryEmployeeStore()
    store.seed(make_employee("E001", hire_date="2020-01-01", starting_balance=10, leave_days=(5, 3)))
    store.seed(make_employee("E002", hire_date="2023-01-15", full_name="John Roe"))
    return store


@pytest.fixture
async def async_client(record_store: InMemoryEmployeeStore) -> AsyncIterator[AsyncClient]:
    """Async HTTP client with the record store dependency overridden."""
    app.dependency_overrides[get_record_store] = lambda: record_store
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
