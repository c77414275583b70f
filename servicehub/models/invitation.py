from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

INVITATION_TTL = timedelta(hours=24)


@dataclass(frozen=True, slots=True)
class Invitation:
    id: UUID
    org_id: UUID
    invited_by: UUID
    email: str
    role: str
    status: str  # pending (nothing moves it further)
    expires_at: datetime
    created_at: datetime
    updated_at: datetime

    @staticmethod
    def new(
        *,
        org_id: UUID,
        invited_by: UUID,
        email: str,
        role: str,
        now: datetime | None = None,
    ) -> Invitation:
        created = now or datetime.now(UTC)
        return Invitation(
            id=uuid4(),
            org_id=org_id,
            invited_by=invited_by,
            email=email,
            role=role,
            status="pending",
            expires_at=created + INVITATION_TTL,
            created_at=created,
            updated_at=created,
        )
