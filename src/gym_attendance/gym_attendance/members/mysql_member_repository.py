from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..core.enums import Gender, MemberStatus, PlanType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Member
from .repository import MemberRepository

_COLUMNS = "member_id, user_id, full_name, email, phone, gender, plan_type, join_date, status"


def _to_member(row: dict) -> Member:
    return Member(
        member_id=int(row["member_id"]),
        user_id=int(row["user_id"]),
        full_name=row["full_name"],
        gender=Gender(row["gender"]),
        plan_type=PlanType(row["plan_type"]),
        join_date=row["join_date"],
        status=MemberStatus(row["status"]),
        email=row.get("email"),
        phone=row.get("phone"),
    )


class MySQLMemberRepository(MemberRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, member_id: int) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM members WHERE member_id=%s", (int(member_id),))
            row = fetchone(cur)
            return _to_member(row) if row else None

    def get_by_user_id(self, user_id: int) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM members WHERE user_id=%s", (int(user_id),))
            row = fetchone(cur)
            return _to_member(row) if row else None

    def list_all(self) -> Sequence[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM members ORDER BY full_name")
            return [_to_member(r) for r in fetchall(cur)]

    def list_by_ids(self, member_ids: Iterable[int]) -> Sequence[Member]:
        ids = sorted({int(i) for i in member_ids})
        if not ids:
            return []

        placeholders = ",".join(["%s"] * len(ids))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM members WHERE member_id IN ({placeholders})", tuple(ids))
            return [_to_member(r) for r in fetchall(cur)]

    def update_status(self, member_id: int, status: MemberStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE members SET status=%s WHERE member_id=%s", (status.value, int(member_id)))
            return cur.rowcount > 0
