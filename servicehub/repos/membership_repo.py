from __future__ import annotations

from typing import Protocol
from uuid import UUID

from servicehub.models.organization import Membership


class MembershipRepo(Protocol):
    async def add(self, membership: Membership) -> None: ...
    async def list_by_org(self, org_id: UUID) -> list[Membership]: ...
    async def list_by_user(self, user_id: UUID) -> list[Membership]: ...


class InMemoryMembershipRepo:
    def __init__(self) -> None:
        self._by_id: dict[UUID, Membership] = {}

    async def add(self, membership: Membership) -> None:
        self._by_id[membership.id] = membership

    async def list_by_org(self, org_id: UUID) -> list[Membership]:
        return [m for m in self._by_id.values() if m.org_id == org_id]

    async def list_by_user(self, user_id: UUID) -> list[Membership]:
        return [m for m in self._by_id.values() if m.user_id == user_id]

    def clear(self) -> None:
        self._by_id.clear()
