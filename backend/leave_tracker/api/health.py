import logging
from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel

from leave_tracker.api.deps import RecordStoreDep
from leave_tracker.config import get_settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["ok", "degraded", "error"]
    version: str
    environment: str


@router.get("/health", response_model=HealthResponse)
async def health(store: RecordStoreDep) -> HealthResponse:
    """Return the health status of the API service."""
    settings = get_settings()
    status: Literal["ok", "degraded", "error"] = "ok"

    try:
        await store.list_employees()
    except Exception:
        logger.exception("Health check: employee record store unreachable")
        status = "degraded"

    return HealthResponse(
        status=status,
        version=settings.app_version,
        environment=settings.environment,
    )
