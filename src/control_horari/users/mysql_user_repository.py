from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import User
from .repository import UserRepository


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, name, pin_hash, role
                FROM users
                WHERE user_id=%s
                """,
                (user_id,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return User(
                user_id=row["user_id"],
                name=row["name"],
                pin_hash=row["pin_hash"],
                role=Role(row["role"]),
            )

    def list_all(self) -> Sequence[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT user_id, name, pin_hash, role FROM users ORDER BY name")
            return [
                User(
                    user_id=r["user_id"],
                    name=r["name"],
                    pin_hash=r["pin_hash"],
                    role=Role(r["role"]),
                )
                for r in fetchall(cur)
            ]

    def create_user(self, user: User) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO users (user_id, name, pin_hash, role)
                VALUES (%s, %s, %s, %s)
                """,
                (user.user_id, user.name, user.pin_hash, user.role.value),
            )
