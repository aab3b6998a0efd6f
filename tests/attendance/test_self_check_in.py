from __future__ import annotations

from datetime import timedelta

import pytest

from src.gym_attendance.gym_attendance.container import wire_container
from src.gym_attendance.gym_attendance.core.enums import MemberStatus
from src.gym_attendance.gym_attendance.core.exceptions import CapacityExceededError, InvalidStateError, NotFoundError
from tests.fakes import make_member

ME = 7
MY_USER = 70


@pytest.fixture
def me(repos):
    return repos.members.add(make_member(ME, user_id=MY_USER))


def _fill(repos, now, count, *, first_member_id=1000):
    for i in range(count):
        repos.attendance.add(member_id=first_member_id + i, check_in_time=now - timedelta(minutes=i + 1))


def test_unknown_profile_is_not_found(container, fixed_now):
    with pytest.raises(NotFoundError):
        container.attendance_service.self_check_in(MY_USER, now=fixed_now)


def test_frozen_member_is_rejected_even_when_gym_is_empty(container, repos, fixed_now):
    repos.members.add(make_member(ME, user_id=MY_USER, status=MemberStatus.FROZEN))

    with pytest.raises(InvalidStateError, match="frozen"):
        container.attendance_service.self_check_in(MY_USER, now=fixed_now)

    assert repos.attendance.records == {}


def test_status_is_checked_before_capacity(container, repos, fixed_now):
    repos.settings.values["gym_capacity"] = "1"
    repos.members.add(make_member(ME, user_id=MY_USER, status=MemberStatus.INACTIVE))
    _fill(repos, fixed_now, 1)

    with pytest.raises(InvalidStateError) as exc:
        container.attendance_service.self_check_in(MY_USER, now=fixed_now)

    assert not isinstance(exc.value, CapacityExceededError)


def test_capacity_one_with_someone_inside_is_rejected(container, repos, me, fixed_now):
    repos.settings.values["gym_capacity"] = "1"
    _fill(repos, fixed_now, 1)

    with pytest.raises(CapacityExceededError, match="Gym at full capacity"):
        container.attendance_service.self_check_in(MY_USER, now=fixed_now)

    assert container.attendance_service.is_checked_in(ME, today=fixed_now.date()).is_checked_in is False


def test_capacity_two_with_someone_inside_is_accepted(container, repos, me, fixed_now):
    repos.settings.values["gym_capacity"] = "2"
    _fill(repos, fixed_now, 1)

    record = container.attendance_service.self_check_in(MY_USER, now=fixed_now)

    assert record.member_id == ME
    assert record.is_open


def test_capacity_is_checked_before_duplicate(container, repos, me, fixed_now):
    repos.settings.values["gym_capacity"] = "1"
    repos.attendance.add(member_id=ME, check_in_time=fixed_now - timedelta(minutes=10))

    with pytest.raises(CapacityExceededError):
        container.attendance_service.self_check_in(MY_USER, now=fixed_now)


def test_already_checked_in_is_rejected(container, repos, me, fixed_now):
    svc = container.attendance_service
    svc.self_check_in(MY_USER, now=fixed_now)

    with pytest.raises(InvalidStateError, match="Already checked in"):
        svc.self_check_in(MY_USER, now=fixed_now + timedelta(minutes=1))

    assert len(repos.attendance.records) == 1


def test_configured_default_applies_when_capacity_is_unset(repos, fixed_now):
    container = wire_container(
        users_repo=repos.users,
        members_repo=repos.members,
        attendance_repo=repos.attendance,
        settings_repo=repos.settings,
        default_capacity=3,
    )
    repos.members.add(make_member(ME, user_id=MY_USER))
    _fill(repos, fixed_now, 3)

    with pytest.raises(CapacityExceededError):
        container.attendance_service.self_check_in(MY_USER, now=fixed_now)


def test_self_check_out_and_status(container, repos, me, fixed_now):
    svc = container.attendance_service
    today = fixed_now.date()

    assert svc.self_check_status(MY_USER, today=today).is_checked_in is False

    opened = svc.self_check_in(MY_USER, now=fixed_now)
    status = svc.self_check_status(MY_USER, today=today)
    assert status.is_checked_in is True
    assert status.attendance == opened

    closed = svc.self_check_out(MY_USER, now=fixed_now + timedelta(hours=1))
    assert closed.check_out_time == fixed_now + timedelta(hours=1)
    assert svc.self_check_status(MY_USER, today=today).is_checked_in is False


def test_self_check_out_without_session_fails(container, me, fixed_now):
    with pytest.raises(InvalidStateError, match="No active check-in found"):
        container.attendance_service.self_check_out(MY_USER, now=fixed_now)
