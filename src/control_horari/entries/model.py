from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import EntryKind


@dataclass(frozen=True)
class Location:
    """A GPS fix captured by the client when the worker clocked."""

    latitude: float
    longitude: float
    accuracy: Optional[float] = None


@dataclass(frozen=True)
class TimeEntry:
    """Domain entity: one clock event (IN or OUT).

    ``user_name`` is a display cache; ``location_label`` is computed once when
    the entry is created and never recomputed.
    """

    entry_id: str
    user_id: str
    user_name: str
    timestamp: datetime
    kind: EntryKind
    location: Optional[Location] = None
    location_label: Optional[str] = None
    synced: bool = False
