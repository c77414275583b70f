from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from uuid import UUID

from servicehub.core.metrics import INVITATIONS_CREATED
from servicehub.models.invitation import Invitation
from servicehub.repos.invitation_repo import InvitationRepo

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class InvitationTracker:
    def __init__(
        self,
        invitations: InvitationRepo,
        now: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._invitations = invitations
        self._now = now

    async def invite_user(
        self, org_id: UUID, invited_by: UUID, email: str, role: str
    ) -> Invitation:
        # No org/inviter validation and no de-duplication: every call
        # writes a fresh pending row.
        invitation = Invitation.new(
            org_id=org_id,
            invited_by=invited_by,
            email=email,
            role=role,
            now=self._now(),
        )
        await self._invitations.add(invitation)

        logger.info(
            "Invitation created  org_id=%s email=%s role=%s expires_at=%s",
            org_id,
            email,
            role,
            invitation.expires_at.isoformat(),
        )
        INVITATIONS_CREATED.inc()
        return invitation
