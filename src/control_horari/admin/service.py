from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import day_bounds
from ..core.constants import DEFAULT_RECENT_MOVEMENTS
from ..core.enums import EntryKind, WorkerStatus
from ..entries.model import Location, TimeEntry
from ..entries.repository import EntryRepository
from ..users.service import UserService

STATUS_LABELS = {
    WorkerStatus.OFF: "No ha entrat",
    WorkerStatus.IN: "Treballant",
    WorkerStatus.OUT: "Ha sortit",
}


@dataclass(frozen=True)
class WorkerStatusInfo:
    user_id: str
    name: str
    status: WorkerStatus
    since: Optional[datetime] = None

    @property
    def label(self) -> str:
        return STATUS_LABELS[self.status]


def map_url(location: Location) -> str:
    return f"https://www.google.com/maps?q={location.latitude},{location.longitude}"


class RosterService:
    """Admin view: who is on site today and the latest movements."""

    def __init__(self, entries: EntryRepository, users: UserService):
        self._entries = entries
        self._users = users

    def worker_status(self, user_id: str, name: str, today: date) -> WorkerStatusInfo:
        start, end = day_bounds(today)
        todays = [e for e in self._entries.list_for_user(user_id) if start <= e.timestamp < end]
        if not todays:
            return WorkerStatusInfo(user_id=user_id, name=name, status=WorkerStatus.OFF)

        latest = max(todays, key=lambda e: e.timestamp)
        status = WorkerStatus.IN if latest.kind == EntryKind.IN else WorkerStatus.OUT
        return WorkerStatusInfo(user_id=user_id, name=name, status=status, since=latest.timestamp)

    def roster(self, today: date) -> list[WorkerStatusInfo]:
        return [self.worker_status(u.user_id, u.name, today) for u in self._users.list_employees()]

    def last_movements(self, limit: int = DEFAULT_RECENT_MOVEMENTS) -> list[dict]:
        return [self._movement(e) for e in self._entries.list_recent(limit)]

    @staticmethod
    def _movement(e: TimeEntry) -> dict:
        return {
            "id": e.entry_id,
            "user_name": e.user_name,
            "type": e.kind.value,
            "timestamp": e.timestamp.isoformat(),
            "location_label": e.location_label,
            "map_url": map_url(e.location) if e.location else None,
        }
