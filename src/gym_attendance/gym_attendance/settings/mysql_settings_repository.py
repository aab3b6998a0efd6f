from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Setting
from .repository import SettingsRepository


class MySQLSettingsRepository(SettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Setting]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT setting_key, setting_value FROM settings ORDER BY setting_key")
            return [Setting(key=r["setting_key"], value=r["setting_value"]) for r in fetchall(cur)]

    def get(self, key: str) -> Optional[Setting]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT setting_key, setting_value FROM settings WHERE setting_key=%s", (key,))
            r = fetchone(cur)
            if not r:
                return None
            return Setting(key=r["setting_key"], value=r["setting_value"])

    def upsert(self, key: str, value: str) -> Setting:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO settings(setting_key, setting_value)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE setting_value=VALUES(setting_value)
                """,
                (key, value),
            )
        return Setting(key=key, value=value)
