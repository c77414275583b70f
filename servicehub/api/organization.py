"""POST /organization/create."""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from servicehub.api.dependencies import get_org_registry
from servicehub.api.fields import Text
from servicehub.services.org_registry import OrgRegistry

router = APIRouter(prefix="/organization", tags=["organization"])


class OrgCreateIn(BaseModel):
    name: Text
    org_type: Text
    user_id: UUID


class OrgCreateOut(BaseModel):
    message: str
    org_id: str
    org_code: str


@router.post("/create", response_model=OrgCreateOut)
async def create_org(
    body: OrgCreateIn,
    registry: Annotated[OrgRegistry, Depends(get_org_registry)],
) -> OrgCreateOut:
    """Create an organization.  The given user becomes its active admin."""
    result = await registry.create_org(body.name, body.org_type, body.user_id)
    return OrgCreateOut(
        message="Organization created",
        org_id=str(result.org_id),
        org_code=result.org_code,
    )
