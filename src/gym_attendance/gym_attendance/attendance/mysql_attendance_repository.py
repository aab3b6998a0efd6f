from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from mysql.connector.errors import IntegrityError

from ..core.exceptions import InvalidStateError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = "attendance_id, member_id, attendance_date, check_in_time, check_out_time"
OPEN_SESSION_INDEX = "uq_attendance_open_session"


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        member_id=int(r["member_id"]),
        attendance_date=r["attendance_date"],
        check_in_time=r["check_in_time"],
        check_out_time=r.get("check_out_time"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_open_for_member(self, member_id: int, attendance_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE member_id=%s AND attendance_date=%s AND check_out_time IS NULL
                ORDER BY check_in_time DESC
                LIMIT 1
                """,
                (int(member_id), attendance_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def create_checkin(self, *, member_id: int, attendance_date: date, check_in_time: datetime) -> AttendanceRecord:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendance_records(member_id, attendance_date, check_in_time)
                    VALUES(%s,%s,%s)
                    """,
                    (int(member_id), attendance_date, check_in_time),
                )
                attendance_id = int(cur.lastrowid)
        except IntegrityError as e:
            if is_duplicate_key(e, index_name=OPEN_SESSION_INDEX):
                raise InvalidStateError("Already checked in") from e
            raise

        return AttendanceRecord(
            attendance_id=attendance_id,
            member_id=int(member_id),
            attendance_date=attendance_date,
            check_in_time=check_in_time,
            check_out_time=None,
        )

    def close_checkout(self, *, attendance_id: int, check_out_time: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET check_out_time=%s
                WHERE attendance_id=%s AND check_out_time IS NULL
                """,
                (check_out_time, int(attendance_id)),
            )
            return cur.rowcount > 0

    def list_open(self, attendance_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE attendance_date=%s AND check_out_time IS NULL
                ORDER BY check_in_time ASC
                """,
                (attendance_date,),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def count_open(self, attendance_date: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT COUNT(*) AS n FROM attendance_records WHERE attendance_date=%s AND check_out_time IS NULL",
                (attendance_date,),
            )
            r = fetchone(cur)
            return int(r["n"]) if r else 0

    def list_history(self, *, member_id: Optional[int] = None) -> Sequence[AttendanceRecord]:
        where = ""
        params: tuple = ()
        if member_id is not None:
            where = "WHERE member_id=%s"
            params = (int(member_id),)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                {where}
                ORDER BY attendance_date DESC, check_in_time DESC
                """,
                params,
            )
            return [_to_record(r) for r in fetchall(cur)]
