from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..core.enums import RequestStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import VacationRequest
from .repository import VacationRepository


def _row_to_request(r: Dict[str, Any]) -> VacationRequest:
    return VacationRequest(
        request_id=r["request_id"],
        user_id=r["user_id"],
        user_name=r["user_name"],
        start_date=normalize_mysql_date(r["start_date"]),
        end_date=normalize_mysql_date(r["end_date"]),
        status=RequestStatus(r["status"]),
        created_at=r.get("created_at"),
    )


class MySQLVacationRepository(VacationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, request: VacationRequest) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO vacation_requests(request_id, user_id, user_name, start_date, end_date, status)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (
                    request.request_id,
                    request.user_id,
                    request.user_name,
                    request.start_date,
                    request.end_date,
                    request.status.value,
                ),
            )

    def get(self, request_id: str) -> Optional[VacationRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT request_id, user_id, user_name, start_date, end_date, status, created_at
                FROM vacation_requests
                WHERE request_id=%s
                """,
                (request_id,),
            )
            r = fetchone(cur)
            return _row_to_request(r) if r else None

    def list_requests(
        self,
        *,
        status: Optional[RequestStatus] = None,
        user_id: Optional[str] = None,
    ) -> Sequence[VacationRequest]:
        where = []
        params: list[Any] = []
        if status is not None:
            where.append("status=%s")
            params.append(status.value)
        if user_id is not None:
            where.append("user_id=%s")
            params.append(user_id)

        sql = """
            SELECT request_id, user_id, user_name, start_date, end_date, status, created_at
            FROM vacation_requests
        """
        if where:
            sql += " WHERE " + " AND ".join(where)
        sql += " ORDER BY start_date"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [_row_to_request(r) for r in fetchall(cur)]

    def decide(self, *, request_id: str, status: RequestStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE vacation_requests
                SET status=%s
                WHERE request_id=%s AND status=%s
                """,
                (status.value, request_id, RequestStatus.PENDING.value),
            )
            return cur.rowcount > 0
