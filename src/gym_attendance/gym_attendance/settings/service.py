from __future__ import annotations

import logging
from typing import Sequence

from ..common.validators import require_non_empty, require_positive_int
from ..core.constants import DEFAULT_GYM_CAPACITY, GYM_CAPACITY_KEY
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError
from .model import Setting
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


class SettingsService:
    """Key/value gym settings. Capacity is read on every call, never cached."""

    def __init__(self, settings: SettingsRepository, *, default_capacity: int = DEFAULT_GYM_CAPACITY):
        self._settings = settings
        self._default_capacity = int(default_capacity)

    def get_capacity(self) -> int:
        setting = self._settings.get(GYM_CAPACITY_KEY)
        if setting is None:
            return self._default_capacity

        try:
            capacity = int(str(setting.value).strip())
        except ValueError:
            capacity = 0
        if capacity <= 0:
            logger.warning(
                "Ignoring unusable %s=%r, using default %s", GYM_CAPACITY_KEY, setting.value, self._default_capacity
            )
            return self._default_capacity
        return capacity

    def list_settings(self) -> Sequence[Setting]:
        return self._settings.list_all()

    def get_setting(self, key: str) -> Setting:
        setting = self._settings.get(key)
        if not setting:
            raise NotFoundError("Setting not found")
        return setting

    def set_setting(self, *, current_role: Role, key: str, value) -> Setting:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Forbidden")

        key = require_non_empty(key, "Setting key")
        if value is None:
            value = ""
        value = str(value).strip()
        if key == GYM_CAPACITY_KEY:
            value = str(require_positive_int(value, "Gym capacity"))

        setting = self._settings.upsert(key, value)
        logger.info("Setting %s updated", key)
        return setting
