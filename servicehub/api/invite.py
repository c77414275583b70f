"""POST /invite."""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from servicehub.api.dependencies import get_invitation_tracker
from servicehub.api.fields import Email, Text
from servicehub.services.invitation_tracker import InvitationTracker

router = APIRouter(tags=["invite"])


class InviteIn(BaseModel):
    org_id: UUID
    invited_by: UUID
    email: Email
    role: Text


class InviteOut(BaseModel):
    message: str


@router.post("/invite", response_model=InviteOut)
async def invite(
    body: InviteIn,
    tracker: Annotated[InvitationTracker, Depends(get_invitation_tracker)],
) -> InviteOut:
    """Record a pending invitation that expires 24 hours from now.

    Nothing is sent and no token is returned.
    """
    await tracker.invite_user(body.org_id, body.invited_by, body.email, body.role)
    return InviteOut(message="Invitation sent")
