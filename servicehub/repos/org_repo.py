from __future__ import annotations

from typing import Protocol
from uuid import UUID

from servicehub.models.organization import Organization


class OrgRepo(Protocol):
    async def add(self, org: Organization) -> None: ...
    async def list_all(self) -> list[Organization]: ...


class InMemoryOrgRepo:
    def __init__(self) -> None:
        self._by_id: dict[UUID, Organization] = {}

    async def add(self, org: Organization) -> None:
        # org_code is deliberately not unique-checked.
        self._by_id[org.id] = org

    async def list_all(self) -> list[Organization]:
        return list(self._by_id.values())

    def clear(self) -> None:
        self._by_id.clear()
