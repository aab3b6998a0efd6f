from __future__ import annotations

from datetime import date, datetime
from typing import Optional


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def isoformat_or_none(value: Optional[datetime | date]) -> Optional[str]:
    return value.isoformat() if value is not None else None
