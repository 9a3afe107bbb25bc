from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock

from httpx import ASGITransport, AsyncClient

from leave_tracker.main import app
from leave_tracker.services.employee import InMemoryEmployeeStore, get_record_store

if TYPE_CHECKING:
    from leave_tracker.services.employee import EmployeeRecordStore


async def test_health_returns_200(async_client: AsyncClient) -> None:
    response = await async_client.get("/health")
    assert response.status_code == 200


async def test_health_response_body(async_client: AsyncClient) -> None:
    response = await async_client.get("/health")
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == "0.1.0"
    assert data["environment"] == "development"


async def test_health_response_schema(async_client: AsyncClient) -> None:
    response = await async_client.get("/health")
    data = response.json()
    assert set(data.keys()) == {"status", "version", "environment"}
    assert data["status"] in ("ok", "degraded", "error")


async def test_health_degraded_on_store_failure() -> None:
    """GET /health returns degraded status when the record store is unreachable."""
    mock_store = AsyncMock(spec=InMemoryEmployeeStore)
    mock_store.list_employees.side_effect = ConnectionError("store unreachable")

    def _broken_store() -> EmployeeRecordStore:
        return mock_store

    app.dependency_overrides[get_record_store] = _broken_store
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.get("/health")
        data = response.json()
        assert response.status_code == 200
        assert data["status"] == "degraded"
    finally:
        app.dependency_overrides.clear()
