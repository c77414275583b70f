"""PostgreSQL implementation of InvitationRepo."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from servicehub.db.tables import InvitationRow
from servicehub.models.invitation import Invitation


class PgInvitationRepo:
    """Satisfies the InvitationRepo Protocol using PostgreSQL via SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, invitation: Invitation) -> None:
        self._session.add(
            InvitationRow(
                id=invitation.id,
                org_id=invitation.org_id,
                invited_by=invitation.invited_by,
                email=invitation.email,
                role=invitation.role,
                status=invitation.status,
                expires_at=invitation.expires_at,
                created_at=invitation.created_at,
                updated_at=invitation.updated_at,
            )
        )
        await self._session.flush()

    async def list_by_org(self, org_id: UUID) -> list[Invitation]:
        stmt = (
            select(InvitationRow)
            .where(InvitationRow.org_id == org_id)
            .order_by(InvitationRow.created_at)
        )
        rows = (await self._session.execute(stmt)).scalars().all()
        return [
            Invitation(
                id=r.id,
                org_id=r.org_id,
                invited_by=r.invited_by,
                email=r.email,
                role=r.role,
                status=r.status,
                expires_at=r.expires_at,
                created_at=r.created_at,
                updated_at=r.updated_at,
            )
            for r in rows
        ]
