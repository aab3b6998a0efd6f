from __future__ import annotations

import logging
import re
from datetime import date
from pathlib import Path
from typing import Iterable

from werkzeug.security import generate_password_hash

from .connection import DatabaseConnection, DBConfig

logger = logging.getLogger(__name__)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema/seed files (handles ';' inside quotes and '--' comments).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    lines = [line for line in sql.splitlines() if not line.lstrip().startswith("--")]
    for ch in "\n".join(lines):
        if escape:
            buf.append(ch)
            escape = False
        elif ch == "\\":
            buf.append(ch)
            escape = True
        elif ch == "'" and not in_double:
            in_single = not in_single
            buf.append(ch)
        elif ch == '"' and not in_single:
            in_double = not in_double
            buf.append(ch)
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
        else:
            buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _run_script(conn_factory: DatabaseConnection, path: str | Path) -> int:
    sql = _strip_create_db_and_use(Path(path).read_text(encoding="utf-8"))
    conn = conn_factory.connect()
    count = 0
    try:
        cur = conn.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
            count += 1
        conn.commit()
    finally:
        conn.close()
    return count


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_mapping(db_config)
    conn = DatabaseConnection(target).connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    count = _run_script(DatabaseConnection(DBConfig.from_mapping(db_config)), schema_path)
    logger.info("Applied %s schema statements from %s", count, schema_path)


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> None:
    count = _run_script(DatabaseConnection(DBConfig.from_mapping(db_config)), seed_path)
    logger.info("Applied %s seed statements from %s", count, seed_path)


def ensure_demo_users(db_config: dict) -> None:
    """Upsert the demo admin/trainer/member accounts, each with a member profile."""

    conn = DatabaseConnection(DBConfig.from_mapping(db_config)).connect()
    try:
        cur = conn.cursor(dictionary=True)

        def upsert_account(username: str, password: str, role: str, full_name: str, gender: str, plan: str) -> None:
            password_hash = generate_password_hash(password)
            cur.execute("SELECT user_id FROM users WHERE username=%s", (username,))
            existing = cur.fetchone()
            if existing:
                user_id = int(existing["user_id"])
                cur.execute(
                    "UPDATE users SET password_hash=%s, role=%s, is_active=1 WHERE user_id=%s",
                    (password_hash, role, user_id),
                )
            else:
                cur.execute(
                    "INSERT INTO users (username, password_hash, role, is_active) VALUES (%s, %s, %s, 1)",
                    (username, password_hash, role),
                )
                user_id = int(cur.lastrowid)

            cur.execute("SELECT member_id FROM members WHERE user_id=%s", (user_id,))
            if not cur.fetchone():
                cur.execute(
                    """
                    INSERT INTO members (user_id, full_name, gender, plan_type, join_date, status)
                    VALUES (%s, %s, %s, %s, %s, 'active')
                    """,
                    (user_id, full_name, gender, plan, date.today()),
                )

        upsert_account("admin", "admin123", "admin", "System Admin", "other", "vip")
        upsert_account("trainer", "trainer123", "trainer", "John Trainer", "male", "classic")
        upsert_account("member", "member123", "member", "Demo Member", "female", "premium")

        conn.commit()
    finally:
        conn.close()


def list_tables(db_config: dict) -> list[str]:
    conn = DatabaseConnection(DBConfig.from_mapping(db_config)).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
