from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .admin.service import RosterService
from .core.constants import ADMIN_USER_ID, DEFAULT_ADMIN_NAME, DEFAULT_ADMIN_PIN, DEFAULT_SYNC_TIMEOUT_SECONDS
from .database.connection import DBConfig, DatabaseConnection
from .entries.mysql_entry_repository import MySQLEntryRepository
from .entries.repository import EntryRepository
from .entries.service import ClockService
from .geofence.classifier import GeofenceClassifier
from .geofence.model import Site
from .reports.service import ReportService
from .shifts.aggregator import ShiftAggregator
from .sync.webhook import SheetsWebhookSync
from .users.model import AdminAccount
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService
from .vacations.mysql_vacation_repository import MySQLVacationRepository
from .vacations.repository import VacationRepository
from .vacations.service import VacationService


@dataclass(frozen=True)
class Container:
    entries_repo: EntryRepository
    users_repo: UserRepository
    vacations_repo: VacationRepository

    classifier: GeofenceClassifier
    sync: SheetsWebhookSync

    auth_service: AuthService
    user_service: UserService
    clock_service: ClockService
    report_service: ReportService
    roster_service: RosterService
    vacation_service: VacationService


def wire_services(
    *,
    entries_repo: EntryRepository,
    users_repo: UserRepository,
    vacations_repo: VacationRepository,
    site: Site,
    admin: AdminAccount,
    webhook_url: Optional[str] = None,
    sync_timeout: float = DEFAULT_SYNC_TIMEOUT_SECONDS,
) -> Container:
    aggregator = ShiftAggregator()
    classifier = GeofenceClassifier(site)
    sync = SheetsWebhookSync(webhook_url, entries_repo, timeout=sync_timeout)
    user_service = UserService(users_repo, admin)

    return Container(
        entries_repo=entries_repo,
        users_repo=users_repo,
        vacations_repo=vacations_repo,
        classifier=classifier,
        sync=sync,
        auth_service=AuthService(users_repo, admin),
        user_service=user_service,
        clock_service=ClockService(entries_repo, classifier, aggregator=aggregator, sync=sync),
        report_service=ReportService(entries_repo, aggregator=aggregator),
        roster_service=RosterService(entries_repo, user_service),
        vacation_service=VacationService(vacations_repo),
    )


def build_container(*, settings: Any) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(settings.DB_CONFIG))
    admin = AdminAccount(
        user_id=ADMIN_USER_ID,
        name=getattr(settings, "ADMIN_NAME", DEFAULT_ADMIN_NAME),
        pin=getattr(settings, "ADMIN_PIN", DEFAULT_ADMIN_PIN),
    )

    return wire_services(
        entries_repo=MySQLEntryRepository(conn),
        users_repo=MySQLUserRepository(conn),
        vacations_repo=MySQLVacationRepository(conn),
        site=Site.from_dict(settings.SITE),
        admin=admin,
        webhook_url=getattr(settings, "SHEETS_WEBHOOK_URL", ""),
        sync_timeout=float(getattr(settings, "SYNC_TIMEOUT_SECONDS", DEFAULT_SYNC_TIMEOUT_SECONDS)),
    )
