from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID, uuid4

ORG_CODE_LENGTH = 6


def generate_org_code() -> str:
    # Truncated UUID4: short enough to share by hand.  Not checked for
    # collisions.
    return str(uuid4())[:ORG_CODE_LENGTH]


@dataclass(frozen=True, slots=True)
class Organization:
    id: UUID
    name: str
    org_code: str
    org_type: str
    created_by: UUID  # user id, not validated
    created_at: datetime
    updated_at: datetime

    @staticmethod
    def new(*, name: str, org_type: str, created_by: UUID) -> Organization:
        now = datetime.now(UTC)
        return Organization(
            id=uuid4(),
            name=name,
            org_code=generate_org_code(),
            org_type=org_type,
            created_by=created_by,
            created_at=now,
            updated_at=now,
        )


@dataclass(frozen=True, slots=True)
class Membership:
    id: UUID
    user_id: UUID
    org_id: UUID
    role: str  # admin|member|...
    status: str  # active
    created_at: datetime
    updated_at: datetime

    @staticmethod
    def new(
        *, user_id: UUID, org_id: UUID, role: str, status: str = "active"
    ) -> Membership:
        now = datetime.now(UTC)
        return Membership(
            id=uuid4(),
            user_id=user_id,
            org_id=org_id,
            role=role,
            status=status,
            created_at=now,
            updated_at=now,
        )
