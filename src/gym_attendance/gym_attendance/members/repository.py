from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from ..core.enums import MemberStatus
from .model import Member


class MemberRepository(Protocol):
    """Repository interface for Member.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, member_id: int) -> Optional[Member]:
        raise NotImplementedError

    def get_by_user_id(self, user_id: int) -> Optional[Member]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Member]:
        raise NotImplementedError

    def list_by_ids(self, member_ids: Iterable[int]) -> Sequence[Member]:
        raise NotImplementedError

    def update_status(self, member_id: int, status: MemberStatus) -> bool:
        raise NotImplementedError
