"""Seed script for development data.

Run with:  python -m leave_tracker.seed [path]

Writes a handful of sample employees to the JSON record store, replacing
whatever the file held before.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

from leave_tracker.config import get_settings
from leave_tracker.models.enums import LeaveType
from leave_tracker.schemas.employee import EmployeeRaw, LeaveEntry
from leave_tracker.services.employee import JsonFileEmployeeStore

logger = logging.getLogger(__name__)

EMPLOYEES = [
    EmployeeRaw(
        id="E001",
        full_name="Alice Johnson",
        position="Office Manager",
        hire_date="2020-01-01",
        starting_balance=10,
        leave_taken=[
            LeaveEntry(date="2023-04-10", days=5, type=LeaveType.ANNUAL.value, note="Easter break"),
            LeaveEntry(date="2023-11-02", days=3, type=LeaveType.SICK.value),
        ],
    ),
    EmployeeRaw(
        id="E002",
        full_name="Bob Smith",
        position="Technician",
        hire_date="2023-01-15",
    ),
    EmployeeRaw(
        id="E003",
        full_name="Carol Williams",
        position="Apprentice",
        hire_date="2024-09-15",
        leave_taken=[
            LeaveEntry(date="2024-12-23", days=2, type=LeaveType.UNPAID.value, note="Before eligibility"),
        ],
    ),
    EmployeeRaw(
        id="E004",
        full_name="Dave Brown",
        position="Sales",
        hire_date="2022-03-31",
        starting_balance=-1.5,
        leave_taken=[
            LeaveEntry(date="2023-08-14", days=0.5, type=LeaveType.OTHER.value, note="Half day"),
        ],
    ),
]


async def seed(path: Path) -> None:
    """Write the sample employees to path."""
    store = JsonFileEmployeeStore(path)
    await store.write_employees(EMPLOYEES)
    logger.info("Seeded %d employees into %s", len(EMPLOYEES), path)


def main() -> None:
    """Entry point for the seed script."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else get_settings().data_path
    asyncio.run(seed(path))


if __name__ == "__main__":
    main()
