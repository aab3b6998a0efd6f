from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_GYM_CAPACITY
from .database.connection import DatabaseConnection, DBConfig
from .members.mysql_member_repository import MySQLMemberRepository
from .members.repository import MemberRepository
from .members.service import MemberService
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .settings.repository import SettingsRepository
from .settings.service import SettingsService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    members_repo: MemberRepository
    attendance_repo: AttendanceRepository
    settings_repo: SettingsRepository

    auth_service: AuthService
    user_service: UserService
    member_service: MemberService
    settings_service: SettingsService
    attendance_service: AttendanceService


def wire_container(
    *,
    users_repo: UserRepository,
    members_repo: MemberRepository,
    attendance_repo: AttendanceRepository,
    settings_repo: SettingsRepository,
    default_capacity: int = DEFAULT_GYM_CAPACITY,
) -> Container:
    """Build services on top of any repository implementations (MySQL or in-memory)."""

    member_service = MemberService(members_repo)
    settings_service = SettingsService(settings_repo, default_capacity=default_capacity)

    return Container(
        users_repo=users_repo,
        members_repo=members_repo,
        attendance_repo=attendance_repo,
        settings_repo=settings_repo,
        auth_service=AuthService(users_repo),
        user_service=UserService(users_repo),
        member_service=member_service,
        settings_service=settings_service,
        attendance_service=AttendanceService(attendance_repo, member_service, settings_service),
    )


def build_container(*, db_config: dict, default_capacity: int = DEFAULT_GYM_CAPACITY) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    return wire_container(
        users_repo=MySQLUserRepository(conn),
        members_repo=MySQLMemberRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        settings_repo=MySQLSettingsRepository(conn),
        default_capacity=default_capacity,
    )
