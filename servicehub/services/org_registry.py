from __future__ import annotations

import logging
from dataclasses import dataclass
from uuid import UUID

from servicehub.core.metrics import ORGANIZATIONS_CREATED
from servicehub.models.organization import Membership, Organization
from servicehub.repos.membership_repo import MembershipRepo
from servicehub.repos.org_repo import OrgRepo

logger = logging.getLogger(__name__)

CREATOR_ROLE = "admin"


@dataclass(frozen=True, slots=True)
class OrgCreatedResult:
    org_id: UUID
    org_code: str


class OrgRegistry:
    def __init__(self, orgs: OrgRepo, memberships: MembershipRepo) -> None:
        self._orgs = orgs
        self._memberships = memberships

    async def create_org(
        self, name: str, org_type: str, user_id: UUID
    ) -> OrgCreatedResult:
        """Create an organization and make *user_id* its active admin.

        user_id is stored as given; it is not checked against the users
        table.  The two writes are sequential: if the membership write
        fails, the organization row is only rolled back when both share a
        database transaction.
        """
        org = Organization.new(name=name, org_type=org_type, created_by=user_id)
        await self._orgs.add(org)

        await self._memberships.add(
            Membership.new(user_id=user_id, org_id=org.id, role=CREATOR_ROLE)
        )

        logger.info(
            "Organization created  org_id=%s org_code=%s created_by=%s",
            org.id,
            org.org_code,
            user_id,
        )
        ORGANIZATIONS_CREATED.inc()
        return OrgCreatedResult(org_id=org.id, org_code=org.org_code)
