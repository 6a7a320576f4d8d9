"""Shift reconstruction and time aggregation over a raw entry log.

Everything here is a pure function of its inputs: no clock is read, nothing is
mutated and nothing is logged, so the same log always yields the same shifts.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Callable, Dict, Hashable, Iterable, Optional, Sequence

from ..core.enums import EntryKind
from ..entries.model import TimeEntry
from .model import Shift

WEEKDAY_LABELS = ("Dl", "Dt", "Dc", "Dj", "Dv", "Ds", "Dg")
MONTH_LABELS = ("Gen", "Feb", "Mar", "Abr", "Mai", "Jun", "Jul", "Ago", "Set", "Oct", "Nov", "Des")

BucketKeyFn = Callable[[datetime], Hashable]


def weekday_key(ts: datetime) -> str:
    return WEEKDAY_LABELS[ts.weekday()]


def month_key(ts: datetime) -> str:
    return MONTH_LABELS[ts.month - 1]


def day_key(ts: datetime) -> str:
    return ts.date().isoformat()


def reconstruct_shifts(entries: Iterable[TimeEntry]) -> tuple[Shift, ...]:
    """Pair one worker's IN/OUT events into shifts, oldest first.

    Two INs in a row: the newer one replaces the older (a forgotten clock-out
    is dropped rather than paired with an unrelated OUT). An OUT with no open
    IN is discarded. A trailing IN is returned as an open shift.
    """
    # sorted() is stable, so equal timestamps keep their log order.
    ordered = sorted(entries, key=lambda e: e.timestamp)

    shifts: list[Shift] = []
    open_start: Optional[TimeEntry] = None
    for entry in ordered:
        if entry.kind == EntryKind.IN:
            open_start = entry
        elif open_start is not None:
            shifts.append(Shift(start=open_start, end=entry))
            open_start = None

    if open_start is not None:
        shifts.append(Shift(start=open_start))
    return tuple(shifts)


def total_duration(shifts: Iterable[Shift], start: datetime, end: datetime, now: datetime) -> timedelta:
    """Worked time of shifts starting in ``[start, end)``.

    Open shifts count up to ``now`` so the total grows while the worker is
    clocked in. Each contribution is clamped at zero.
    """
    total = timedelta(0)
    for shift in shifts:
        if start <= shift.started_at < end:
            total += shift.duration(now)
    return total


def bucket_by(
    shifts: Iterable[Shift],
    key_fn: BucketKeyFn,
    keys: Optional[Sequence[Hashable]] = None,
) -> Dict[Hashable, timedelta]:
    """Sum closed shifts per ``key_fn(start timestamp)``.

    Open shifts are left out of historical buckets. Every key in ``keys`` is
    present (zero-filled, in the given order); unexpected keys follow them.
    """
    buckets: Dict[Hashable, timedelta] = {k: timedelta(0) for k in (keys or ())}
    for shift in shifts:
        if shift.is_open:
            continue
        key = key_fn(shift.started_at)
        buckets[key] = buckets.get(key, timedelta(0)) + shift.duration()
    return buckets


class ShiftAggregator:
    """Stateless facade over the aggregation functions.

    Services receive one so tests (or a different pairing rule) can swap it.
    """

    def reconstruct(self, entries: Iterable[TimeEntry]) -> tuple[Shift, ...]:
        return reconstruct_shifts(entries)

    def total_duration(self, shifts: Iterable[Shift], start: datetime, end: datetime, now: datetime) -> timedelta:
        return total_duration(shifts, start, end, now)

    def bucket_by(
        self,
        shifts: Iterable[Shift],
        key_fn: BucketKeyFn,
        keys: Optional[Sequence[Hashable]] = None,
    ) -> Dict[Hashable, timedelta]:
        return bucket_by(shifts, key_fn, keys)
