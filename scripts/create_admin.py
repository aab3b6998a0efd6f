"""Create an admin account (with its member profile) and print a generated password.

Usage: python scripts/create_admin.py [username] [--email EMAIL] [--name FULL_NAME]
"""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.gym_attendance.gym_attendance.container import build_container
from src.gym_attendance.gym_attendance.core.exceptions import ValidationError


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("username", nargs="?", default="1001")
    parser.add_argument("--email", default="admin@example.com")
    parser.add_argument("--name", default="Admin User")
    args = parser.parse_args(argv)

    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    try:
        account = container.user_service.create_admin(username=args.username, full_name=args.name, email=args.email)
    except ValidationError as e:
        raise SystemExit(f"ERROR: {e}")

    print("OK: Admin user created")
    print(f"  Username: {account.username}")
    print(f"  Email:    {args.email}")
    print(f"  Password: {account.password}")
    print("Save these credentials in a secure location; the password is not stored in clear text.")


if __name__ == "__main__":
    main()
