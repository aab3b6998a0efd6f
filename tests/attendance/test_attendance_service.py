from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from src.gym_attendance.gym_attendance.core.enums import MemberStatus
from src.gym_attendance.gym_attendance.core.exceptions import InvalidStateError
from tests.fakes import make_member


def test_check_in_then_check_out_round_trip(container, repos, fixed_now):
    repos.members.add(make_member(1))
    svc = container.attendance_service

    opened = svc.check_in(1, now=fixed_now)
    assert opened.is_open
    assert opened.attendance_date == fixed_now.date()
    assert svc.is_checked_in(1, today=fixed_now.date()).is_checked_in

    closed = svc.check_out(1, now=fixed_now + timedelta(minutes=45))

    assert closed.attendance_id == opened.attendance_id
    assert closed.check_in_time <= closed.check_out_time
    assert len(repos.attendance.records) == 1
    assert not repos.attendance.records[opened.attendance_id].is_open

    status = svc.is_checked_in(1, today=fixed_now.date())
    assert status.is_checked_in is False
    assert status.attendance is None


def test_check_in_and_out_immediately_keeps_order(container, repos, fixed_now):
    repos.members.add(make_member(1))
    svc = container.attendance_service

    svc.check_in(1, now=fixed_now)
    closed = svc.check_out(1, now=fixed_now)

    assert closed.check_in_time == closed.check_out_time


def test_member_can_cycle_several_times_a_day(container, repos, fixed_now):
    repos.members.add(make_member(1))
    svc = container.attendance_service

    svc.check_in(1, now=fixed_now)
    svc.check_out(1, now=fixed_now + timedelta(hours=1))
    svc.check_in(1, now=fixed_now + timedelta(hours=3))
    svc.check_out(1, now=fixed_now + timedelta(hours=4))

    history = svc.get_attendance_history(1)
    assert len(history) == 2
    assert all(not r.is_open for r in history)
    assert history[0].check_in_time > history[1].check_in_time


def test_check_out_without_open_session_changes_nothing(container, repos, fixed_now):
    repos.members.add(make_member(1))
    closed = repos.attendance.add(
        member_id=1,
        check_in_time=fixed_now - timedelta(hours=2),
        check_out_time=fixed_now - timedelta(hours=1),
    )
    before = dict(repos.attendance.records)

    with pytest.raises(InvalidStateError, match="No active check-in found"):
        container.attendance_service.check_out(1, now=fixed_now)

    assert repos.attendance.records == before
    assert repos.attendance.writes == 0
    assert repos.attendance.records[closed.attendance_id].check_out_time == fixed_now - timedelta(hours=1)


def test_check_out_ignores_sessions_from_previous_days(container, repos, fixed_now):
    repos.members.add(make_member(1))
    repos.attendance.add(member_id=1, check_in_time=fixed_now - timedelta(days=1))

    with pytest.raises(InvalidStateError):
        container.attendance_service.check_out(1, now=fixed_now)


@pytest.mark.parametrize("status", [MemberStatus.FROZEN, MemberStatus.INACTIVE])
def test_staff_check_in_rejects_non_active_member(container, repos, fixed_now, status):
    repos.members.add(make_member(1, status=status))

    with pytest.raises(InvalidStateError, match="Member inactive or not found"):
        container.attendance_service.check_in(1, now=fixed_now)

    assert repos.attendance.records == {}


def test_staff_check_in_rejects_unknown_member(container, repos, fixed_now):
    with pytest.raises(InvalidStateError, match="Member inactive or not found"):
        container.attendance_service.check_in(404, now=fixed_now)


def test_staff_check_in_rejects_second_open_session(container, repos, fixed_now):
    repos.members.add(make_member(1))
    svc = container.attendance_service
    svc.check_in(1, now=fixed_now)

    with pytest.raises(InvalidStateError, match="Already checked in"):
        svc.check_in(1, now=fixed_now + timedelta(minutes=5))

    assert len(svc.get_live_attendance(today=fixed_now.date())) == 1


def test_staff_check_in_is_not_capacity_gated(container, repos, fixed_now):
    repos.settings.values["gym_capacity"] = "1"
    repos.members.add(make_member(1))
    repos.members.add(make_member(2))
    svc = container.attendance_service

    svc.check_in(1, now=fixed_now)
    svc.check_in(2, now=fixed_now)

    snapshot = svc.get_live_snapshot(include_attendees=False, today=fixed_now.date())
    assert snapshot.occupancy.count == 2
    assert snapshot.occupancy.occupancy_rate == 200


def test_live_attendance_only_lists_todays_open_sessions(container, repos, fixed_now):
    today = fixed_now.date()
    repos.attendance.add(member_id=1, check_in_time=fixed_now - timedelta(hours=1))
    repos.attendance.add(member_id=2, check_in_time=fixed_now - timedelta(hours=2), check_out_time=fixed_now)
    repos.attendance.add(member_id=3, check_in_time=fixed_now - timedelta(days=1))

    live = container.attendance_service.get_live_attendance(today=today)

    assert [r.member_id for r in live] == [1]


def test_history_is_newest_first_and_filterable(container, repos):
    day1 = datetime(2026, 2, 27, 9, 0)
    day2 = datetime(2026, 2, 28, 9, 0)
    day3 = datetime(2026, 3, 1, 9, 0)
    repos.attendance.add(member_id=1, check_in_time=day2, check_out_time=day2 + timedelta(hours=1))
    repos.attendance.add(member_id=2, check_in_time=day3)
    repos.attendance.add(member_id=1, check_in_time=day1, check_out_time=day1 + timedelta(hours=1))
    repos.attendance.add(member_id=2, check_in_time=day1 + timedelta(hours=3), check_out_time=day1 + timedelta(hours=4))

    svc = container.attendance_service
    everyone = svc.get_attendance_history()
    only_one = svc.get_attendance_history(1)

    assert len(everyone) == 4
    dates = [r.attendance_date for r in everyone]
    assert dates == sorted(dates, reverse=True)
    assert {r.member_id for r in everyone} == {1, 2}

    assert [r.attendance_date for r in only_one] == [day2.date(), day1.date()]
    assert all(r.member_id == 1 for r in only_one)


def test_live_snapshot_withholds_attendees_unless_asked(container, repos, fixed_now):
    repos.members.add(make_member(1))
    repos.members.add(make_member(2))
    svc = container.attendance_service
    svc.check_in(1, now=fixed_now)
    svc.check_in(2, now=fixed_now + timedelta(minutes=1))

    anonymous = svc.get_live_snapshot(include_attendees=False, today=fixed_now.date())
    named = svc.get_live_snapshot(include_attendees=True, today=fixed_now.date())

    assert anonymous.attendees is None
    assert anonymous.occupancy.count == 2
    assert anonymous.occupancy.capacity == 50
    assert anonymous.occupancy.occupancy_rate == 4
    assert [m.member_id for m in named.attendees] == [1, 2]


def test_live_snapshot_reflects_capacity_changes_immediately(container, repos, fixed_now):
    repos.members.add(make_member(1))
    svc = container.attendance_service
    svc.check_in(1, now=fixed_now)

    before = svc.get_live_snapshot(include_attendees=False, today=fixed_now.date())
    repos.settings.values["gym_capacity"] = "1"
    after = svc.get_live_snapshot(include_attendees=False, today=fixed_now.date())

    assert before.occupancy.occupancy_rate == 2
    assert after.occupancy.occupancy_rate == 100
    assert after.occupancy.crowd_status.value == "Full"
