"""SQLAlchemy-backed repos, run against an in-memory SQLite database.

The queries are dialect-neutral; only the aiosqlite engine differs from
production.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import servicehub.db.tables  # noqa: F401
from servicehub.db.engine import Base
from servicehub.models.organization import Membership
from servicehub.models.user import User
from servicehub.repos.pg_invitation_repo import PgInvitationRepo
from servicehub.repos.pg_org_repo import PgMembershipRepo, PgOrgRepo
from servicehub.repos.pg_user_repo import PgUserRepo
from servicehub.repos.user_repo import DuplicateEmailError
from servicehub.services.invitation_tracker import InvitationTracker
from servicehub.services.org_registry import OrgRegistry
from servicehub.services.user_directory import SignupOutcome, UserDirectory

Scenario = Callable[[async_sessionmaker[AsyncSession]], Awaitable[None]]


def _run(scenario: Scenario) -> None:
    async def main() -> None:
        engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        sessions = async_sessionmaker(engine, expire_on_commit=False)
        try:
            await scenario(sessions)
        finally:
            await engine.dispose()

    asyncio.run(main())


def _user(email: str = "tee@example.com", password_hash: str = "h1") -> User:
    return User.new(full_name="Tee", email=email, password_hash=password_hash)


def test_user_add_and_lookup_by_email() -> None:
    user = _user()

    async def scenario(sessions: async_sessionmaker[AsyncSession]) -> None:
        async with sessions() as s:
            await PgUserRepo(s).add(user)
            await s.commit()
        async with sessions() as s:
            stored = await PgUserRepo(s).get_by_email("tee@example.com")
            missing = await PgUserRepo(s).get_by_email("nobody@example.com")
        assert stored is not None
        assert stored.id == user.id
        assert stored.full_name == "Tee"
        assert stored.password_hash == "h1"
        assert missing is None

    _run(scenario)


def test_user_add_duplicate_email_raises() -> None:
    async def scenario(sessions: async_sessionmaker[AsyncSession]) -> None:
        async with sessions() as s:
            await PgUserRepo(s).add(_user())
            await s.commit()
        async with sessions() as s:
            with pytest.raises(DuplicateEmailError):
                await PgUserRepo(s).add(_user())

    _run(scenario)


def test_update_password_hash() -> None:
    user = _user()

    async def scenario(sessions: async_sessionmaker[AsyncSession]) -> None:
        async with sessions() as s:
            await PgUserRepo(s).add(user)
            await s.commit()
        async with sessions() as s:
            await PgUserRepo(s).update_password_hash(user.id, "h2")
            await s.commit()
        async with sessions() as s:
            stored = await PgUserRepo(s).get_by_email(user.email)
        assert stored is not None
        assert stored.password_hash == "h2"

    _run(scenario)


def test_update_password_hash_unknown_user_raises() -> None:
    async def scenario(sessions: async_sessionmaker[AsyncSession]) -> None:
        async with sessions() as s:
            with pytest.raises(KeyError):
                await PgUserRepo(s).update_password_hash(uuid4(), "h2")

    _run(scenario)


class _StaleLookupUserRepo(PgUserRepo):
    """Misses existing rows on lookup, as a concurrent signup would."""

    async def get_by_email(self, email: str) -> User | None:
        return None


def test_signup_race_maps_unique_violation_to_email_exists() -> None:
    async def scenario(sessions: async_sessionmaker[AsyncSession]) -> None:
        async with sessions() as s:
            await PgUserRepo(s).add(_user())
            await s.commit()
        async with sessions() as s:
            result = await UserDirectory(_StaleLookupUserRepo(s)).signup(
                "Other", "tee@example.com", "p1"
            )
        assert result.outcome is SignupOutcome.EMAIL_EXISTS

    _run(scenario)


def test_create_org_writes_org_and_admin_membership() -> None:
    user_id = uuid4()

    async def scenario(sessions: async_sessionmaker[AsyncSession]) -> None:
        async with sessions() as s:
            registry = OrgRegistry(PgOrgRepo(s), PgMembershipRepo(s))
            result = await registry.create_org("Acme", "company", user_id)
            await s.commit()

        async with sessions() as s:
            orgs = await PgOrgRepo(s).list_all()
            by_org = await PgMembershipRepo(s).list_by_org(result.org_id)
            by_user = await PgMembershipRepo(s).list_by_user(user_id)

        assert [o.id for o in orgs] == [result.org_id]
        assert orgs[0].org_code == result.org_code
        assert orgs[0].created_by == user_id
        assert len(by_org) == 1
        assert by_org[0].user_id == user_id
        assert by_org[0].role == "admin"
        assert by_org[0].status == "active"
        assert [m.id for m in by_user] == [by_org[0].id]

    _run(scenario)


def test_membership_failure_rolls_back_org_in_shared_transaction() -> None:
    class _FailingMembershipRepo(PgMembershipRepo):
        async def add(self, membership: Membership) -> None:
            raise ConnectionError("lost connection")

    async def scenario(sessions: async_sessionmaker[AsyncSession]) -> None:
        async with sessions() as s:
            registry = OrgRegistry(PgOrgRepo(s), _FailingMembershipRepo(s))
            with pytest.raises(ConnectionError):
                await registry.create_org("Acme", "company", uuid4())
            await s.rollback()
        async with sessions() as s:
            assert await PgOrgRepo(s).list_all() == []

    _run(scenario)


def test_invitations_are_stored_pending_and_listed_by_org() -> None:
    org_id, inviter = uuid4(), uuid4()

    async def scenario(sessions: async_sessionmaker[AsyncSession]) -> None:
        async with sessions() as s:
            tracker = InvitationTracker(PgInvitationRepo(s))
            await tracker.invite_user(org_id, inviter, "x@example.com", "member")
            await tracker.invite_user(org_id, inviter, "x@example.com", "member")
            await tracker.invite_user(uuid4(), inviter, "y@example.com", "admin")
            await s.commit()
        async with sessions() as s:
            stored = await PgInvitationRepo(s).list_by_org(org_id)

        assert len(stored) == 2
        assert {i.status for i in stored} == {"pending"}
        assert {i.email for i in stored} == {"x@example.com"}
        assert all(i.invited_by == inviter for i in stored)

    _run(scenario)
