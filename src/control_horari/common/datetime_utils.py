from __future__ import annotations

from datetime import date, datetime, time, timedelta


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """Half-open ``[start, end)`` range covering one calendar day."""
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)


def week_start(day: date) -> date:
    """Monday of the week containing ``day``."""
    return day - timedelta(days=day.weekday())


def format_clock(seconds: int) -> str:
    """Render a second count as HH:MM:SS (the live timer)."""
    seconds = max(int(seconds), 0)
    return f"{seconds // 3600:02d}:{(seconds % 3600) // 60:02d}:{seconds % 60:02d}"


def format_hours_minutes(duration: timedelta) -> str:
    """Render a duration as e.g. ``8h 12m``."""
    minutes = max(int(duration.total_seconds() // 60), 0)
    return f"{minutes // 60}h {minutes % 60:02d}m"


def to_hours(duration: timedelta) -> float:
    return round(duration.total_seconds() / 3600, 1)
