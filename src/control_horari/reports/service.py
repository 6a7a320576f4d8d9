from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional

from ..common.datetime_utils import format_hours_minutes, to_hours, week_start
from ..entries.repository import EntryRepository
from ..shifts.aggregator import (
    MONTH_LABELS,
    WEEKDAY_LABELS,
    ShiftAggregator,
    month_key,
    weekday_key,
)
from ..shifts.model import Shift


class ReportService:
    """Weekly/monthly hour charts and the per-shift detail table."""

    def __init__(self, entries: EntryRepository, *, aggregator: Optional[ShiftAggregator] = None):
        self._entries = entries
        self._aggregator = aggregator or ShiftAggregator()

    def _shifts(self, user_id: str) -> tuple[Shift, ...]:
        return self._aggregator.reconstruct(self._entries.list_for_user(user_id))

    @staticmethod
    def _in_range(shifts, start: datetime, end: datetime) -> list[Shift]:
        return [s for s in shifts if start <= s.started_at < end]

    def weekly_hours(self, user_id: str, week_of: date) -> list[dict]:
        monday = week_start(week_of)
        start = datetime.combine(monday, time.min)
        shifts = self._in_range(self._shifts(user_id), start, start + timedelta(days=7))

        buckets = self._aggregator.bucket_by(shifts, weekday_key, WEEKDAY_LABELS)
        return [{"name": k, "hours": to_hours(v)} for k, v in buckets.items()]

    def monthly_trend(self, user_id: str, year: int) -> list[dict]:
        shifts = self._in_range(self._shifts(user_id), datetime(year, 1, 1), datetime(year + 1, 1, 1))

        buckets = self._aggregator.bucket_by(shifts, month_key, MONTH_LABELS)
        return [{"month": k, "hours": to_hours(v)} for k, v in buckets.items()]

    def live_total(self, user_id: str, start: datetime, end: datetime, now: datetime) -> timedelta:
        return self._aggregator.total_duration(self._shifts(user_id), start, end, now)

    def detail_rows(self, user_id: str, *, start: date, end: date, now: datetime) -> list[dict]:
        """One row per shift started between ``start`` and ``end`` (inclusive)."""
        lo = datetime.combine(start, time.min)
        hi = datetime.combine(end + timedelta(days=1), time.min)

        rows = []
        for s in self._in_range(self._shifts(user_id), lo, hi):
            rows.append(
                {
                    "date": s.started_at.strftime("%Y-%m-%d"),
                    "check_in": s.started_at.strftime("%H:%M:%S"),
                    "check_out": s.end.timestamp.strftime("%H:%M:%S") if s.end else "-",
                    "total": format_hours_minutes(s.duration(now)),
                    "status": "En curs" if s.is_open else "Validat",
                    "location": s.start.location_label or "",
                }
            )
        return rows
