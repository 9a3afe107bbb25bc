from fastapi import APIRouter

from leave_tracker.api.employees import employees_router

api_router = APIRouter()
api_router.include_router(employees_router)
