from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, slots=True)
class User:
    id: UUID
    full_name: str
    email: str
    password_hash: str
    created_at: datetime
    updated_at: datetime

    @staticmethod
    def new(*, full_name: str, email: str, password_hash: str) -> User:
        now = datetime.now(UTC)
        return User(
            id=uuid4(),
            full_name=full_name,
            email=email,
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
        )
