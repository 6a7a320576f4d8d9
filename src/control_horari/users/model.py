from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: a worker (or the admin) who logs in with a PIN.

    Note: plain data object, no DB access code here.
    """

    user_id: str
    name: str
    pin_hash: str
    role: Role = Role.EMPLOYEE

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


@dataclass(frozen=True)
class AdminAccount:
    """The built-in admin, configured rather than stored."""

    user_id: str
    name: str
    pin: str
