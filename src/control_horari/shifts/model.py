from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from ..entries.model import TimeEntry


@dataclass(frozen=True)
class Shift:
    """A reconstructed working interval: one IN and, once closed, one OUT.

    Derived from the entry log on demand, never stored.
    """

    start: TimeEntry
    end: Optional[TimeEntry] = None

    @property
    def is_open(self) -> bool:
        return self.end is None

    @property
    def started_at(self) -> datetime:
        return self.start.timestamp

    def duration(self, now: Optional[datetime] = None) -> timedelta:
        """Worked time, clamped at zero. Open shifts need ``now``."""
        if self.end is not None:
            until = self.end.timestamp
        elif now is not None:
            until = now
        else:
            return timedelta(0)
        return max(until - self.start.timestamp, timedelta(0))
