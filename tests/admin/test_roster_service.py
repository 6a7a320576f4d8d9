from __future__ import annotations

from datetime import date, datetime

from control_horari.admin.service import RosterService
from control_horari.core.enums import WorkerStatus
from control_horari.entries.model import Location
from control_horari.users.model import User
from control_horari.users.service import UserService


def _roster(entries_repo, users_repo, admin) -> RosterService:
    return RosterService(entries_repo, UserService(users_repo, admin))


def test_roster_statuses(entries_repo, users_repo, admin, entry):
    users_repo.create_user(User(user_id="u1", name="Jordi", pin_hash="x"))
    users_repo.create_user(User(user_id="u2", name="Marta", pin_hash="x"))
    users_repo.create_user(User(user_id="u3", name="Pere", pin_hash="x"))
    entries_repo.add(entry("IN", datetime(2026, 3, 2, 8, 0), user_id="u1"))
    entries_repo.add(entry("IN", datetime(2026, 3, 2, 7, 0), user_id="u2", user_name="Marta"))
    entries_repo.add(entry("OUT", datetime(2026, 3, 2, 11, 0), user_id="u2", user_name="Marta"))
    # yesterday only
    entries_repo.add(entry("IN", datetime(2026, 3, 1, 8, 0), user_id="u3", user_name="Pere"))

    roster = {w.user_id: w for w in _roster(entries_repo, users_repo, admin).roster(date(2026, 3, 2))}

    assert roster["u1"].status == WorkerStatus.IN
    assert roster["u1"].label == "Treballant"
    assert roster["u1"].since == datetime(2026, 3, 2, 8, 0)
    assert roster["u2"].status == WorkerStatus.OUT
    assert roster["u2"].label == "Ha sortit"
    assert roster["u3"].status == WorkerStatus.OFF
    assert roster["u3"].label == "No ha entrat"


def test_last_movements_newest_first_with_map_link(entries_repo, users_repo, admin, entry):
    for h in range(6, 20):
        entries_repo.add(entry("IN" if h % 2 == 0 else "OUT", datetime(2026, 3, 2, h, 0)))
    entries_repo.add(entry("IN", datetime(2026, 3, 2, 21, 0), location=Location(41.1, 1.2)))

    moves = _roster(entries_repo, users_repo, admin).last_movements()

    assert len(moves) == 10
    assert moves[0]["timestamp"] == "2026-03-02T21:00:00"
    assert moves[0]["map_url"] == "https://www.google.com/maps?q=41.1,1.2"
    assert moves[1]["map_url"] is None
