"""Wiring between the HTTP layer and the services.

Repositories are built explicitly here and handed to service
constructors.  One dependency, get_repos, decides the backing store:

- DATABASE_URL set: PostgreSQL repos bound to one request-scoped session
  (commit once on success, rollback on error).
- DATABASE_URL unset: the process-wide in-memory repos in MEMORY_REPOS.

Tests reset MEMORY_REPOS between cases and may override get_repos to
inject failing stores.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from servicehub.db.engine import get_optional_session
from servicehub.repos.invitation_repo import InMemoryInvitationRepo, InvitationRepo
from servicehub.repos.membership_repo import InMemoryMembershipRepo, MembershipRepo
from servicehub.repos.org_repo import InMemoryOrgRepo, OrgRepo
from servicehub.repos.pg_invitation_repo import PgInvitationRepo
from servicehub.repos.pg_org_repo import PgMembershipRepo, PgOrgRepo
from servicehub.repos.pg_user_repo import PgUserRepo
from servicehub.repos.user_repo import InMemoryUserRepo, UserRepo
from servicehub.services.invitation_tracker import InvitationTracker
from servicehub.services.org_registry import OrgRegistry
from servicehub.services.user_directory import UserDirectory


@dataclass(frozen=True, slots=True)
class Repos:
    users: UserRepo
    orgs: OrgRepo
    memberships: MembershipRepo
    invitations: InvitationRepo


@dataclass(frozen=True, slots=True)
class InMemoryRepos:
    users: InMemoryUserRepo
    orgs: InMemoryOrgRepo
    memberships: InMemoryMembershipRepo
    invitations: InMemoryInvitationRepo

    def clear(self) -> None:
        self.users.clear()
        self.orgs.clear()
        self.memberships.clear()
        self.invitations.clear()


MEMORY_REPOS = InMemoryRepos(
    users=InMemoryUserRepo(),
    orgs=InMemoryOrgRepo(),
    memberships=InMemoryMembershipRepo(),
    invitations=InMemoryInvitationRepo(),
)


def get_repos(
    session: Annotated[AsyncSession | None, Depends(get_optional_session)],
) -> Repos:
    if session is None:
        return Repos(
            users=MEMORY_REPOS.users,
            orgs=MEMORY_REPOS.orgs,
            memberships=MEMORY_REPOS.memberships,
            invitations=MEMORY_REPOS.invitations,
        )
    return Repos(
        users=PgUserRepo(session),
        orgs=PgOrgRepo(session),
        memberships=PgMembershipRepo(session),
        invitations=PgInvitationRepo(session),
    )


def get_user_directory(
    repos: Annotated[Repos, Depends(get_repos)],
) -> UserDirectory:
    return UserDirectory(repos.users)


def get_org_registry(
    repos: Annotated[Repos, Depends(get_repos)],
) -> OrgRegistry:
    return OrgRegistry(repos.orgs, repos.memberships)


def get_invitation_tracker(
    repos: Annotated[Repos, Depends(get_repos)],
) -> InvitationTracker:
    return InvitationTracker(repos.invitations)
