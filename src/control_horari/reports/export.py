from __future__ import annotations

import csv
import io
from typing import Iterable

from ..core.enums import EntryKind
from ..entries.model import TimeEntry

CSV_HEADERS = ["Empleat", "Tipus", "Data", "Hora", "Lat", "Long", "Ubicació"]


def export_entries_csv(entries: Iterable[TimeEntry]) -> str:
    """Raw clock log as CSV (the admin's "registre_horari.csv")."""
    out = io.StringIO()
    writer = csv.writer(out)
    writer.writerow(CSV_HEADERS)
    for e in entries:
        writer.writerow(
            [
                e.user_name or "N/A",
                "ENTRADA" if e.kind == EntryKind.IN else "SORTIDA",
                e.timestamp.strftime("%Y-%m-%d"),
                e.timestamp.strftime("%H:%M:%S"),
                e.location.latitude if e.location else "",
                e.location.longitude if e.location else "",
                e.location_label or "",
            ]
        )
    return out.getvalue()
