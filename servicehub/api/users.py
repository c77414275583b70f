"""POST /users/signup."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from servicehub.api.dependencies import get_user_directory
from servicehub.api.fields import Email, Password, Text
from servicehub.services.user_directory import SignupOutcome, UserDirectory

router = APIRouter(prefix="/users", tags=["users"])

_SIGNUP_MESSAGES = {
    SignupOutcome.CREATED: "User created successfully",
    SignupOutcome.EMAIL_EXISTS: "Email already exists",
}


class SignupIn(BaseModel):
    full_name: Text
    email: Email
    password: Password


class SignupOut(BaseModel):
    message: str
    user_id: str | None = None


@router.post("/signup", response_model=SignupOut, response_model_exclude_none=True)
async def signup(
    payload: SignupIn,
    directory: Annotated[UserDirectory, Depends(get_user_directory)],
) -> SignupOut:
    """Register a user.  An email that is already taken is a 200 with a message."""
    result = await directory.signup(payload.full_name, payload.email, payload.password)
    return SignupOut(
        message=_SIGNUP_MESSAGES[result.outcome],
        user_id=str(result.user_id) if result.user_id else None,
    )
