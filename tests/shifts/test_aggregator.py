from __future__ import annotations

from datetime import datetime, timedelta

from control_horari.shifts.aggregator import (
    MONTH_LABELS,
    WEEKDAY_LABELS,
    ShiftAggregator,
    bucket_by,
    day_key,
    month_key,
    reconstruct_shifts,
    total_duration,
    weekday_key,
)
from control_horari.shifts.model import Shift


def at(hour: int, minute: int = 0, day: int = 2) -> datetime:
    # 2026-02-02 is a Monday
    return datetime(2026, 2, day, hour, minute)


DAY_START = datetime(2026, 2, 2)
DAY_END = datetime(2026, 2, 3)


def test_two_shifts_in_a_day_total_eight_hours(entry):
    shifts = reconstruct_shifts(
        [entry("IN", at(8)), entry("OUT", at(12)), entry("IN", at(13)), entry("OUT", at(17))]
    )

    assert len(shifts) == 2
    assert total_duration(shifts, DAY_START, DAY_END, now=at(17)) == timedelta(hours=8)
    assert total_duration(shifts, DAY_START, DAY_END, now=at(23)) == timedelta(hours=8)


def test_double_in_keeps_the_latest_in(entry):
    shifts = reconstruct_shifts([entry("IN", at(8)), entry("IN", at(9)), entry("OUT", at(17))])

    assert len(shifts) == 1
    assert shifts[0].start.timestamp == at(9)
    assert shifts[0].end.timestamp == at(17)
    assert shifts[0].duration() == timedelta(hours=8)


def test_orphan_out_is_discarded(entry):
    assert reconstruct_shifts([entry("OUT", at(9))]) == ()


def test_orphan_out_before_real_shift(entry):
    shifts = reconstruct_shifts([entry("OUT", at(7)), entry("IN", at(8)), entry("OUT", at(16))])

    assert len(shifts) == 1
    assert shifts[0].duration() == timedelta(hours=8)


def test_empty_log_gives_no_shifts():
    assert reconstruct_shifts([]) == ()


def test_trailing_in_is_an_open_shift_counted_until_now(entry):
    shifts = reconstruct_shifts([entry("IN", at(8))])

    assert len(shifts) == 1
    assert shifts[0].is_open
    assert total_duration(shifts, DAY_START, DAY_END, now=at(10)) == timedelta(hours=2)

    buckets = bucket_by(shifts, day_key)
    assert buckets == {}


def test_open_shift_excluded_from_buckets_but_keys_kept(entry):
    shifts = reconstruct_shifts([entry("IN", at(8))])

    buckets = bucket_by(shifts, weekday_key, WEEKDAY_LABELS)

    assert list(buckets) == list(WEEKDAY_LABELS)
    assert all(v == timedelta(0) for v in buckets.values())


def test_unsorted_input_yields_shifts_in_start_order(entry):
    log = [
        entry("OUT", at(17, day=3)),
        entry("IN", at(8, day=2)),
        entry("IN", at(8, day=3)),
        entry("OUT", at(16, day=2)),
    ]

    shifts = reconstruct_shifts(log)

    starts = [s.started_at for s in shifts]
    assert starts == sorted(starts)
    assert [s.duration() for s in shifts] == [timedelta(hours=8), timedelta(hours=9)]


def test_reconstruct_is_repeatable(entry):
    log = [entry("IN", at(8)), entry("OUT", at(12)), entry("IN", at(13))]

    assert reconstruct_shifts(log) == reconstruct_shifts(log)


def test_equal_timestamps_do_not_raise(entry):
    shifts = reconstruct_shifts([entry("IN", at(8)), entry("OUT", at(8))])

    assert len(shifts) == 1
    assert shifts[0].duration() == timedelta(0)


def test_total_duration_ignores_shifts_outside_window(entry):
    shifts = reconstruct_shifts(
        [entry("IN", at(8, day=1)), entry("OUT", at(12, day=1)), entry("IN", at(8)), entry("OUT", at(10))]
    )

    assert total_duration(shifts, DAY_START, DAY_END, now=at(20)) == timedelta(hours=2)


def test_negative_shift_is_clamped_to_zero(entry):
    # Build a closed shift whose OUT predates its IN (clock skew in stored data).
    skewed = Shift(start=entry("IN", at(12)), end=entry("OUT", at(9)))
    normal = Shift(start=entry("IN", at(13)), end=entry("OUT", at(14)))

    assert total_duration([skewed, normal], DAY_START, DAY_END, now=at(20)) == timedelta(hours=1)
    assert bucket_by([skewed], day_key) == {"2026-02-02": timedelta(0)}


def test_open_shift_with_now_before_start_is_clamped(entry):
    shifts = reconstruct_shifts([entry("IN", at(10))])

    assert total_duration(shifts, DAY_START, DAY_END, now=at(9)) == timedelta(0)


def test_bucket_by_weekday_zero_fills_whole_week(entry):
    shifts = reconstruct_shifts(
        [
            entry("IN", at(8, day=2)),
            entry("OUT", at(16, day=2)),
            entry("IN", at(8, day=4)),
            entry("OUT", at(12, day=4)),
        ]
    )

    buckets = bucket_by(shifts, weekday_key, WEEKDAY_LABELS)

    assert list(buckets) == ["Dl", "Dt", "Dc", "Dj", "Dv", "Ds", "Dg"]
    assert buckets["Dl"] == timedelta(hours=8)
    assert buckets["Dc"] == timedelta(hours=4)
    assert buckets["Dg"] == timedelta(0)


def test_bucket_by_appends_keys_outside_expected_set(entry):
    shifts = reconstruct_shifts([entry("IN", at(8)), entry("OUT", at(9))])

    buckets = bucket_by(shifts, day_key, ["2026-02-01"])

    assert list(buckets) == ["2026-02-01", "2026-02-02"]
    assert buckets["2026-02-02"] == timedelta(hours=1)


def test_key_helpers():
    assert weekday_key(datetime(2026, 2, 8, 10)) == "Dg"
    assert month_key(datetime(2026, 5, 1)) == "Mai"
    assert len(MONTH_LABELS) == 12


def test_aggregator_facade_matches_functions(entry):
    agg = ShiftAggregator()
    log = [entry("IN", at(8)), entry("OUT", at(12))]

    shifts = agg.reconstruct(log)

    assert shifts == reconstruct_shifts(log)
    assert agg.total_duration(shifts, DAY_START, DAY_END, at(12)) == timedelta(hours=4)
    assert agg.bucket_by(shifts, month_key) == {"Feb": timedelta(hours=4)}
