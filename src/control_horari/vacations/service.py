from __future__ import annotations

import calendar
import uuid
from datetime import date, timedelta
from typing import Optional, Sequence

import structlog

from ..common.datetime_utils import now_local
from ..core.enums import RequestStatus, Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..users.service import SessionUser
from .holidays import DEFAULT_HOLIDAYS
from .model import CalendarDay, Holiday, VacationRequest
from .repository import VacationRepository

log = structlog.get_logger(__name__)


class VacationService:
    """Use case: vacation requests, admin decisions and the yearly calendar."""

    def __init__(self, requests: VacationRepository, *, holidays: Sequence[Holiday] = DEFAULT_HOLIDAYS):
        self._requests = requests
        self._holidays = {h.day: h for h in holidays}

    def request(self, user: SessionUser, start: date, end: date) -> VacationRequest:
        if end < start:
            raise ValidationError("La data final no pot ser anterior a la inicial")

        req = VacationRequest(
            request_id=uuid.uuid4().hex,
            user_id=user.user_id,
            user_name=user.name,
            start_date=start,
            end_date=end,
            status=RequestStatus.PENDING,
            created_at=now_local(),
        )
        self._requests.create(req)
        log.info("vacation_requested", request_id=req.request_id, user_id=user.user_id, start=str(start), end=str(end))
        return req

    def _decide(self, *, current_role: Role, request_id: str, status: RequestStatus) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("No tens permisos")

        req = self._requests.get(request_id)
        if not req:
            raise ValidationError("La sol·licitud no existeix")
        if req.status != RequestStatus.PENDING:
            raise ValidationError("La sol·licitud ja s'ha resolt")

        if not self._requests.decide(request_id=request_id, status=status):
            raise ValidationError("No s'ha pogut actualitzar la sol·licitud")
        log.info("vacation_decided", request_id=request_id, status=status.value)

    def approve(self, *, current_role: Role, request_id: str) -> None:
        self._decide(current_role=current_role, request_id=request_id, status=RequestStatus.APPROVED)

    def reject(self, *, current_role: Role, request_id: str) -> None:
        self._decide(current_role=current_role, request_id=request_id, status=RequestStatus.REJECTED)

    def list_pending(self) -> Sequence[VacationRequest]:
        return self._requests.list_requests(status=RequestStatus.PENDING)

    def list_for_user(self, user_id: str) -> Sequence[VacationRequest]:
        return self._requests.list_requests(user_id=user_id)

    def holiday_on(self, day: date) -> Optional[Holiday]:
        return self._holidays.get(day)

    def approved_days(self, user_id: str, year: int) -> int:
        """Calendar days of ``year`` covered by the user's approved requests."""
        first, last = date(year, 1, 1), date(year, 12, 31)
        days: set[date] = set()
        for req in self._requests.list_requests(status=RequestStatus.APPROVED, user_id=user_id):
            day = max(req.start_date, first)
            end = min(req.end_date, last)
            while day <= end:
                days.add(day)
                day += timedelta(days=1)
        return len(days)

    def month_calendar(self, user_id: str, year: int, month: int, today: date) -> list[CalendarDay]:
        approved = self._requests.list_requests(status=RequestStatus.APPROVED, user_id=user_id)
        _, days_in_month = calendar.monthrange(year, month)

        grid = []
        for n in range(1, days_in_month + 1):
            day = date(year, month, n)
            grid.append(
                CalendarDay(
                    day=day,
                    holiday=self._holidays.get(day),
                    on_vacation=any(r.covers(day) for r in approved),
                    is_today=day == today,
                )
            )
        return grid
