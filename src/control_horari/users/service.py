from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Optional, Sequence

import structlog
from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_min_length, require_pin
from ..core.constants import MIN_NAME_LENGTH, PIN_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError
from .model import AdminAccount, User
from .repository import UserRepository

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: str
    name: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


class AuthService:
    """Use case: PIN login and self-registration."""

    def __init__(self, users: UserRepository, admin: AdminAccount):
        self._users = users
        self._admin = admin

    def _find_by_pin(self, pin: str) -> Optional[User]:
        for user in self._users.list_all():
            try:
                ok = check_password_hash(user.pin_hash, pin)
            except ValueError:
                # e.g. placeholder or corrupted hashes
                ok = False
            if ok:
                return user
        return None

    def login(self, pin: str) -> SessionUser:
        pin = (pin or "").strip()
        if pin == self._admin.pin:
            log.info("login", user_id=self._admin.user_id, role=Role.ADMIN.value)
            return SessionUser(user_id=self._admin.user_id, name=self._admin.name, role=Role.ADMIN)

        user = self._find_by_pin(pin) if pin else None
        if not user:
            log.info("login_failed")
            raise AuthenticationError("PIN incorrecte")

        log.info("login", user_id=user.user_id, role=user.role.value)
        return SessionUser(user_id=user.user_id, name=user.name, role=user.role)

    def register(self, name: str, pin: str) -> SessionUser:
        name = require_min_length(name, "Nom massa curt", MIN_NAME_LENGTH)
        pin = require_pin(pin, PIN_LENGTH)

        if pin == self._admin.pin:
            raise ValidationError("Aquest PIN està reservat")
        if self._find_by_pin(pin):
            raise ValidationError("Aquest PIN ja està en ús")

        user = User(
            user_id=uuid.uuid4().hex,
            name=name,
            pin_hash=generate_password_hash(pin),
            role=Role.EMPLOYEE,
        )
        self._users.create_user(user)
        log.info("user_registered", user_id=user.user_id)
        return SessionUser(user_id=user.user_id, name=user.name, role=user.role)


class UserService:
    """Use case: look up workers (admin roster, session refresh)."""

    def __init__(self, users: UserRepository, admin: AdminAccount):
        self._users = users
        self._admin = admin

    def get(self, user_id: str) -> Optional[SessionUser]:
        if user_id == self._admin.user_id:
            return SessionUser(user_id=self._admin.user_id, name=self._admin.name, role=Role.ADMIN)
        user = self._users.get_by_id(user_id)
        if not user:
            return None
        return SessionUser(user_id=user.user_id, name=user.name, role=user.role)

    def list_employees(self) -> Sequence[User]:
        return [u for u in self._users.list_all() if u.role == Role.EMPLOYEE]
