from __future__ import annotations

import secrets
from dataclasses import dataclass
from datetime import date
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_non_empty
from ..core.constants import GENERATED_PASSWORD_BYTES
from ..core.enums import Gender, PlanType, Role
from ..core.exceptions import AuthenticationError, ValidationError
from .repository import UserRepository


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: int
    username: str
    role: Role


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, username: str, password: str) -> SessionUser:
        # JSON clients may send numeric usernames such as 1001
        username = str(username if username is not None else "").strip()
        password = str(password if password is not None else "")

        user = self._users.get_by_username(username)
        if not user or not user.is_active:
            raise AuthenticationError("Invalid username or password")

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            raise AuthenticationError("Invalid username or password")

        return SessionUser(user_id=user.user_id, username=user.username, role=user.role)

    def get_session_user(self, user_id: int) -> Optional[SessionUser]:
        user = self._users.get_by_id(int(user_id))
        if not user or not user.is_active:
            return None
        return SessionUser(user_id=user.user_id, username=user.username, role=user.role)


@dataclass(frozen=True)
class CreatedAccount:
    user_id: int
    username: str
    password: str


class UserService:
    """Use case: provision accounts (admin bootstrap)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def create_admin(
        self,
        *,
        username: str,
        full_name: str = "Admin User",
        email: Optional[str] = None,
        today: Optional[date] = None,
    ) -> CreatedAccount:
        username = require_non_empty(username, "Username")
        full_name = require_non_empty(full_name, "Full name")

        if self._users.get_by_username(username):
            raise ValidationError(f"User {username} already exists")

        password = secrets.token_hex(GENERATED_PASSWORD_BYTES)
        user_id = self._users.create_with_member(
            username=username,
            password_hash=generate_password_hash(password),
            role=Role.ADMIN,
            full_name=full_name,
            email=email,
            gender=Gender.OTHER,
            plan_type=PlanType.VIP,
            join_date=today or date.today(),
        )
        return CreatedAccount(user_id=user_id, username=username, password=password)
