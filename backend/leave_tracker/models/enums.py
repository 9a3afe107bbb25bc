from __future__ import annotations

import enum


class DateErrorReason(enum.StrEnum):
    """Why a calendar date string was rejected."""

    MALFORMED = "MALFORMED"  # not shaped like YYYY-MM-DD
    OUT_OF_RANGE = "OUT_OF_RANGE"  # right shape, no such calendar day


class LeaveType(enum.StrEnum):
    """Common leave labels offered to operators.

    Entry types are free-form; these are suggestions, not a closed set.
    """

    ANNUAL = "Annual"
    SICK = "Sick"
    UNPAID = "Unpaid"
    OTHER = "Other"
