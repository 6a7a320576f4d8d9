from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional

import pytest

from control_horari.core.enums import EntryKind, RequestStatus, Role
from control_horari.entries.model import Location, TimeEntry
from control_horari.geofence.model import Site
from control_horari.users.model import AdminAccount, User
from control_horari.users.service import SessionUser
from control_horari.vacations.model import VacationRequest


class InMemoryEntries:
    def __init__(self, entries=None):
        self._rows: list[TimeEntry] = list(entries or [])

    def add(self, entry: TimeEntry) -> None:
        self._rows.append(entry)

    def list_for_user(self, user_id: str):
        return [e for e in self._rows if e.user_id == user_id]

    def list_recent(self, limit: int):
        return sorted(self._rows, key=lambda e: e.timestamp, reverse=True)[:limit]

    def list_all(self):
        return sorted(self._rows, key=lambda e: e.timestamp)

    def list_unsynced(self):
        return [e for e in self.list_all() if not e.synced]

    def mark_synced(self, entry_id: str) -> bool:
        for i, e in enumerate(self._rows):
            if e.entry_id == entry_id:
                self._rows[i] = replace(e, synced=True)
                return True
        return False


class InMemoryUsers:
    def __init__(self, users=None):
        self._users: dict[str, User] = {u.user_id: u for u in (users or [])}

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    def list_all(self):
        return sorted(self._users.values(), key=lambda u: u.name)

    def create_user(self, user: User) -> None:
        self._users[user.user_id] = user


class InMemoryVacations:
    def __init__(self, requests=None):
        self._rows: dict[str, VacationRequest] = {r.request_id: r for r in (requests or [])}

    def create(self, request: VacationRequest) -> None:
        self._rows[request.request_id] = request

    def get(self, request_id: str) -> Optional[VacationRequest]:
        return self._rows.get(request_id)

    def list_requests(self, *, status=None, user_id=None):
        rows = [
            r
            for r in self._rows.values()
            if (status is None or r.status == status) and (user_id is None or r.user_id == user_id)
        ]
        return sorted(rows, key=lambda r: r.start_date)

    def decide(self, *, request_id: str, status: RequestStatus) -> bool:
        req = self._rows.get(request_id)
        if not req or req.status != RequestStatus.PENDING:
            return False
        self._rows[request_id] = replace(req, status=status)
        return True


_seq = 0


def make_entry(
    kind: str,
    ts: datetime,
    *,
    user_id: str = "u1",
    user_name: str = "Jordi",
    location: Optional[Location] = None,
    label: Optional[str] = None,
) -> TimeEntry:
    global _seq
    _seq += 1
    return TimeEntry(
        entry_id=f"e{_seq}",
        user_id=user_id,
        user_name=user_name,
        timestamp=ts,
        kind=EntryKind(kind),
        location=location,
        location_label=label,
    )


SITE = Site(name="Obra Tarragona", latitude=41.1189, longitude=1.2445, radius_m=500)
ADMIN = AdminAccount(user_id="admin", name="Albert", pin="9999")


@pytest.fixture
def site() -> Site:
    return SITE


@pytest.fixture
def admin() -> AdminAccount:
    return ADMIN


@pytest.fixture
def worker() -> SessionUser:
    return SessionUser(user_id="u1", name="Jordi", role=Role.EMPLOYEE)


@pytest.fixture
def entries_repo() -> InMemoryEntries:
    return InMemoryEntries()


@pytest.fixture
def users_repo() -> InMemoryUsers:
    return InMemoryUsers()


@pytest.fixture
def vacations_repo() -> InMemoryVacations:
    return InMemoryVacations()


@pytest.fixture
def entry():
    return make_entry
