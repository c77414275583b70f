from __future__ import annotations

import asyncio
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Ensure repo root is on sys.path so `import servicehub` works under pytest.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from servicehub.api.dependencies import MEMORY_REPOS  # noqa: E402
from servicehub.main import app  # noqa: E402
from servicehub.models.user import User  # noqa: E402
from servicehub.services.passwords import hash_password  # noqa: E402


@pytest.fixture(autouse=True)
def reset_memory_store() -> None:
    """Clear the in-memory repos between tests."""
    MEMORY_REPOS.clear()


@pytest.fixture(autouse=True)
def reset_dependency_overrides() -> Iterator[None]:
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


# ---------------------------------------------------------------------------
# Store helpers
# ---------------------------------------------------------------------------


def seed_user(
    email: str = "tee@example.com",
    password: str = "password",
    full_name: str = "Tee",
) -> User:
    """Persist a user directly in the in-memory repo."""
    user = User.new(
        full_name=full_name,
        email=email,
        password_hash=hash_password(password),
    )
    asyncio.run(MEMORY_REPOS.users.add(user))
    return user


def stored_user(email: str) -> User | None:
    return asyncio.run(MEMORY_REPOS.users.get_by_email(email))
