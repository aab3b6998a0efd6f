from __future__ import annotations

from datetime import datetime
from types import SimpleNamespace

import pytest

from src.gym_attendance.gym_attendance.container import wire_container
from tests.fakes import InMemoryAttendance, InMemoryMembers, InMemorySettings, InMemoryUsers


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 3, 2, 18, 0, 0)


@pytest.fixture
def repos():
    members = InMemoryMembers()
    return SimpleNamespace(
        attendance=InMemoryAttendance(),
        members=members,
        settings=InMemorySettings(),
        users=InMemoryUsers(members),
    )


@pytest.fixture
def container(repos):
    return wire_container(
        users_repo=repos.users,
        members_repo=repos.members,
        attendance_repo=repos.attendance,
        settings_repo=repos.settings,
        default_capacity=50,
    )
