from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..core.enums import EntryKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, optional_float
from .model import Location, TimeEntry
from .repository import EntryRepository

_COLUMNS = """
    entry_id, user_id, user_name, ts, kind,
    latitude, longitude, accuracy, location_label, synced
"""


def _row_to_entry(r: Dict[str, Any]) -> TimeEntry:
    location: Optional[Location] = None
    if r.get("latitude") is not None and r.get("longitude") is not None:
        location = Location(
            latitude=float(r["latitude"]),
            longitude=float(r["longitude"]),
            accuracy=optional_float(r.get("accuracy")),
        )
    return TimeEntry(
        entry_id=r["entry_id"],
        user_id=r["user_id"],
        user_name=r["user_name"],
        timestamp=r["ts"],
        kind=EntryKind(r["kind"]),
        location=location,
        location_label=r.get("location_label"),
        synced=bool(r.get("synced", 0)),
    )


class MySQLEntryRepository(EntryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def add(self, entry: TimeEntry) -> None:
        loc = entry.location
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO time_entries(
                    entry_id, user_id, user_name, ts, kind,
                    latitude, longitude, accuracy, location_label, synced
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    entry.entry_id,
                    entry.user_id,
                    entry.user_name,
                    entry.timestamp,
                    entry.kind.value,
                    loc.latitude if loc else None,
                    loc.longitude if loc else None,
                    loc.accuracy if loc else None,
                    entry.location_label,
                    int(entry.synced),
                ),
            )

    def list_for_user(self, user_id: str) -> Sequence[TimeEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM time_entries WHERE user_id=%s ORDER BY ts",
                (user_id,),
            )
            return [_row_to_entry(r) for r in fetchall(cur)]

    def list_recent(self, limit: int) -> Sequence[TimeEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM time_entries ORDER BY ts DESC LIMIT %s",
                (int(limit),),
            )
            return [_row_to_entry(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[TimeEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM time_entries ORDER BY ts")
            return [_row_to_entry(r) for r in fetchall(cur)]

    def list_unsynced(self) -> Sequence[TimeEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM time_entries WHERE synced=0 ORDER BY ts")
            return [_row_to_entry(r) for r in fetchall(cur)]

    def mark_synced(self, entry_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE time_entries SET synced=1 WHERE entry_id=%s", (entry_id,))
            return cur.rowcount > 0
