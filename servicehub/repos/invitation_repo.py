from __future__ import annotations

from typing import Protocol
from uuid import UUID

from servicehub.models.invitation import Invitation


class InvitationRepo(Protocol):
    async def add(self, invitation: Invitation) -> None: ...
    async def list_by_org(self, org_id: UUID) -> list[Invitation]: ...


class InMemoryInvitationRepo:
    def __init__(self) -> None:
        self._by_id: dict[UUID, Invitation] = {}

    async def add(self, invitation: Invitation) -> None:
        # Repeat invites for the same org/email are stored side by side.
        self._by_id[invitation.id] = invitation

    async def list_by_org(self, org_id: UUID) -> list[Invitation]:
        return [i for i in self._by_id.values() if i.org_id == org_id]

    def clear(self) -> None:
        self._by_id.clear()
