import pytest

from src.gym_attendance.gym_attendance.core.enums import Role
from src.gym_attendance.gym_attendance.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.gym_attendance.gym_attendance.settings.service import SettingsService
from tests.fakes import InMemorySettings


def test_capacity_defaults_when_unset():
    assert SettingsService(InMemorySettings(), default_capacity=50).get_capacity() == 50
    assert SettingsService(InMemorySettings(), default_capacity=12).get_capacity() == 12


def test_capacity_reads_stored_value():
    svc = SettingsService(InMemorySettings({"gym_capacity": " 80 "}), default_capacity=50)
    assert svc.get_capacity() == 80


@pytest.mark.parametrize("raw", ["", "abc", "0", "-5", "12.5"])
def test_unusable_capacity_falls_back_to_default(raw):
    svc = SettingsService(InMemorySettings({"gym_capacity": raw}), default_capacity=50)
    assert svc.get_capacity() == 50


def test_admin_can_set_capacity():
    repo = InMemorySettings()
    svc = SettingsService(repo)

    setting = svc.set_setting(current_role=Role.ADMIN, key="gym_capacity", value="75")

    assert setting.value == "75"
    assert svc.get_capacity() == 75


@pytest.mark.parametrize("value", ["0", "-1", "lots", None])
def test_invalid_capacity_is_rejected(value):
    repo = InMemorySettings({"gym_capacity": "50"})
    svc = SettingsService(repo)

    with pytest.raises(ValidationError):
        svc.set_setting(current_role=Role.ADMIN, key="gym_capacity", value=value)

    assert repo.values["gym_capacity"] == "50"


def test_other_keys_are_stored_verbatim():
    svc = SettingsService(InMemorySettings())
    svc.set_setting(current_role=Role.ADMIN, key="gym_name", value="FitZone Gym")

    assert svc.get_setting("gym_name").value == "FitZone Gym"
    assert [s.key for s in svc.list_settings()] == ["gym_name"]


@pytest.mark.parametrize("role", [Role.TRAINER, Role.MEMBER])
def test_only_admin_can_change_settings(role):
    with pytest.raises(AuthorizationError):
        SettingsService(InMemorySettings()).set_setting(current_role=role, key="gym_capacity", value="10")


def test_missing_setting_is_not_found():
    with pytest.raises(NotFoundError):
        SettingsService(InMemorySettings()).get_setting("nope")
