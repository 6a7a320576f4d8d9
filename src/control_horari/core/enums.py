from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for permission checks."""

    ADMIN = "ADMIN"
    EMPLOYEE = "EMPLOYEE"


class EntryKind(str, Enum):
    """Direction of a clock event."""

    IN = "IN"
    OUT = "OUT"


class RequestStatus(str, Enum):
    """Approval flow state of a vacation request."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class WorkerStatus(str, Enum):
    """Where a worker stands today, derived from their newest entry."""

    OFF = "OFF"
    IN = "IN"
    OUT = "OUT"


class HolidayKind(str, Enum):
    SYSTEM = "system"
    CONVENI = "conveni"
    SECTOR = "sector"
