from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import HolidayKind, RequestStatus


@dataclass(frozen=True)
class VacationRequest:
    request_id: str
    user_id: str
    user_name: str
    start_date: date
    end_date: date
    status: RequestStatus
    created_at: Optional[datetime] = None

    def covers(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date


@dataclass(frozen=True)
class Holiday:
    day: date
    name: str
    kind: HolidayKind = HolidayKind.SYSTEM


@dataclass(frozen=True)
class CalendarDay:
    """One cell of the month grid."""

    day: date
    holiday: Optional[Holiday]
    on_vacation: bool
    is_today: bool
