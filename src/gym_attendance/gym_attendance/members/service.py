from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from ..core.enums import MemberStatus, Role
from ..core.exceptions import AuthorizationError, NotFoundError
from .model import Member
from .repository import MemberRepository

logger = logging.getLogger(__name__)


class MemberService:
    """Use case: read the member directory, freeze/unfreeze memberships (admin)."""

    def __init__(self, members: MemberRepository):
        self._members = members

    def get_member(self, member_id: int) -> Member:
        member = self._members.get_by_id(int(member_id))
        if not member:
            raise NotFoundError("Member not found")
        return member

    def find_member(self, member_id: int) -> Optional[Member]:
        return self._members.get_by_id(int(member_id))

    def get_by_user_id(self, user_id: int) -> Optional[Member]:
        return self._members.get_by_user_id(int(user_id))

    def require_profile(self, user_id: int) -> Member:
        member = self._members.get_by_user_id(int(user_id))
        if not member:
            raise NotFoundError("Member profile not found")
        return member

    def list_members(self) -> Sequence[Member]:
        return self._members.list_all()

    def get_many(self, member_ids: Iterable[int]) -> Sequence[Member]:
        return self._members.list_by_ids(member_ids)

    def toggle_freeze(self, *, current_role: Role, member_id: int) -> Member:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Forbidden")

        member = self.get_member(member_id)
        new_status = MemberStatus.ACTIVE if member.status == MemberStatus.FROZEN else MemberStatus.FROZEN
        if not self._members.update_status(member.member_id, new_status):
            raise NotFoundError("Member not found")

        logger.info("Member %s status %s -> %s", member.member_id, member.status.value, new_status.value)
        return self.get_member(member.member_id)
