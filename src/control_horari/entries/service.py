from __future__ import annotations

import uuid
from datetime import date, datetime, timedelta
from typing import Optional, Protocol, Sequence

import structlog

from ..common.datetime_utils import day_bounds, now_local
from ..core.enums import EntryKind
from ..geofence.classifier import GeofenceClassifier
from ..shifts.aggregator import ShiftAggregator
from ..users.service import SessionUser
from .model import Location, TimeEntry
from .repository import EntryRepository

log = structlog.get_logger(__name__)


class EntrySync(Protocol):
    def push_pending(self) -> int:
        raise NotImplementedError


class ClockService:
    """Use case: clock in/out and the live counters shown on the dashboard."""

    def __init__(
        self,
        entries: EntryRepository,
        classifier: GeofenceClassifier,
        *,
        aggregator: Optional[ShiftAggregator] = None,
        sync: Optional[EntrySync] = None,
    ):
        self._entries = entries
        self._classifier = classifier
        self._aggregator = aggregator or ShiftAggregator()
        self._sync = sync

    def clock(
        self,
        user: SessionUser,
        kind: EntryKind,
        *,
        location: Optional[Location] = None,
        now: Optional[datetime] = None,
    ) -> TimeEntry:
        now = now or now_local()
        entry = TimeEntry(
            entry_id=uuid.uuid4().hex,
            user_id=user.user_id,
            user_name=user.name,
            timestamp=now,
            kind=kind,
            location=location,
            location_label=self._classifier.classify(location),
        )
        self._entries.add(entry)
        log.info(
            "entry_recorded",
            entry_id=entry.entry_id,
            user_id=entry.user_id,
            kind=entry.kind.value,
            location_label=entry.location_label,
        )

        if self._sync is not None:
            try:
                self._sync.push_pending()
            except Exception:
                # The entry is already stored; the next push picks it up.
                log.exception("sheets_sync_error", entry_id=entry.entry_id)
        return entry

    def toggle(
        self,
        user: SessionUser,
        *,
        location: Optional[Location] = None,
        now: Optional[datetime] = None,
    ) -> TimeEntry:
        now = now or now_local()
        kind = EntryKind.OUT if self.is_working(user.user_id, now.date()) else EntryKind.IN
        return self.clock(user, kind, location=location, now=now)

    def today_entries(self, user_id: str, today: date) -> Sequence[TimeEntry]:
        """Entries of ``today``, newest first."""
        start, end = day_bounds(today)
        rows = [e for e in self._entries.list_for_user(user_id) if start <= e.timestamp < end]
        rows.sort(key=lambda e: e.timestamp, reverse=True)
        return rows

    def is_working(self, user_id: str, today: date) -> bool:
        rows = self.today_entries(user_id, today)
        return bool(rows) and rows[0].kind == EntryKind.IN

    def live_seconds(self, user_id: str, now: datetime) -> int:
        """Seconds in the open shift started today, 0 when not working."""
        shifts = self._aggregator.reconstruct(self._entries.list_for_user(user_id))
        if not shifts or not shifts[-1].is_open or shifts[-1].started_at.date() != now.date():
            return 0
        return int(shifts[-1].duration(now).total_seconds())

    def worked_today(self, user_id: str, now: datetime) -> timedelta:
        shifts = self._aggregator.reconstruct(self._entries.list_for_user(user_id))
        start, end = day_bounds(now.date())
        return self._aggregator.total_duration(shifts, start, end, now)
