"""Official days off of the 2026 construction-sector calendar (Tarragona)."""

from __future__ import annotations

from datetime import date

from ..core.enums import HolidayKind
from .model import Holiday

DEFAULT_HOLIDAYS: tuple[Holiday, ...] = (
    Holiday(date(2026, 1, 1), "Cap d'Any", HolidayKind.SYSTEM),
    Holiday(date(2026, 1, 6), "Reis", HolidayKind.SYSTEM),
    Holiday(date(2026, 4, 3), "Divendres Sant", HolidayKind.SYSTEM),
    Holiday(date(2026, 4, 6), "Dilluns de Pasqua", HolidayKind.SYSTEM),
    Holiday(date(2026, 5, 1), "Festa del Treball", HolidayKind.SYSTEM),
    Holiday(date(2026, 6, 24), "Sant Joan", HolidayKind.SYSTEM),
    Holiday(date(2026, 8, 15), "Assumpció", HolidayKind.SYSTEM),
    Holiday(date(2026, 9, 11), "Diada de Catalunya", HolidayKind.SYSTEM),
    Holiday(date(2026, 10, 12), "Festa Nacional", HolidayKind.SYSTEM),
    Holiday(date(2026, 12, 8), "Immaculada", HolidayKind.SYSTEM),
    Holiday(date(2026, 12, 25), "Nadal", HolidayKind.SYSTEM),
    Holiday(date(2026, 12, 26), "Sant Esteve", HolidayKind.SYSTEM),
)
