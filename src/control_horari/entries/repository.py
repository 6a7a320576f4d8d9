from __future__ import annotations

from typing import Protocol, Sequence

from .model import TimeEntry


class EntryRepository(Protocol):
    """Clock event log. Services treat every read as a snapshot."""

    def add(self, entry: TimeEntry) -> None:
        raise NotImplementedError

    def list_for_user(self, user_id: str) -> Sequence[TimeEntry]:
        raise NotImplementedError

    def list_recent(self, limit: int) -> Sequence[TimeEntry]:
        """Newest entries across all workers."""

        raise NotImplementedError

    def list_all(self) -> Sequence[TimeEntry]:
        raise NotImplementedError

    def list_unsynced(self) -> Sequence[TimeEntry]:
        raise NotImplementedError

    def mark_synced(self, entry_id: str) -> bool:
        raise NotImplementedError
