from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.enums import Gender, PlanType, Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import User
from .repository import UserRepository


def _to_user(row: dict) -> User:
    return User(
        user_id=int(row["user_id"]),
        username=row["username"],
        password_hash=row["password_hash"],
        role=Role(row["role"]),
        is_active=bool(row.get("is_active", True)),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT user_id, username, password_hash, role, is_active FROM users WHERE user_id=%s",
                (int(user_id),),
            )
            row = fetchone(cur)
            return _to_user(row) if row else None

    def get_by_username(self, username: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT user_id, username, password_hash, role, is_active FROM users WHERE username=%s",
                (username,),
            )
            row = fetchone(cur)
            return _to_user(row) if row else None

    def create_with_member(
        self,
        *,
        username: str,
        password_hash: str,
        role: Role,
        full_name: str,
        email: Optional[str],
        gender: Gender,
        plan_type: PlanType,
        join_date: date,
    ) -> int:
        # One connection, one commit: both rows or neither.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO users(username, password_hash, role, is_active)
                VALUES(%s,%s,%s,1)
                """,
                (username, password_hash, role.value),
            )
            user_id = int(cur.lastrowid)
            cur.execute(
                """
                INSERT INTO members(user_id, full_name, email, gender, plan_type, join_date, status)
                VALUES(%s,%s,%s,%s,%s,%s,'active')
                """,
                (user_id, full_name, email, gender.value, plan_type.value, join_date),
            )
            return user_id
