"""POST /auth/login and POST /auth/forgot-password.

No session or token is issued: a successful login answers with the
user's id and email only.  Unknown users and wrong passwords are 200
responses whose message says which.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from servicehub.api.dependencies import get_user_directory
from servicehub.api.fields import Email, Password
from servicehub.services.user_directory import (
    LoginOutcome,
    PasswordResetOutcome,
    UserDirectory,
)

router = APIRouter(prefix="/auth", tags=["auth"])

_LOGIN_MESSAGES = {
    LoginOutcome.SUCCESS: "Login successful",
    LoginOutcome.USER_NOT_FOUND: "User not found",
    LoginOutcome.INVALID_PASSWORD: "Invalid password",
}

_RESET_MESSAGES = {
    PasswordResetOutcome.UPDATED: "Password updated successfully",
    PasswordResetOutcome.USER_NOT_FOUND: "User not found",
}


# --- Request / Response schemas -------------------------------------------


class LoginIn(BaseModel):
    email: Email
    password: Password


class LoginOut(BaseModel):
    message: str
    user_id: str | None = None
    email: str | None = None


class ForgotPasswordIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: Email
    new_password: Password = Field(alias="newPassword")


class MessageOut(BaseModel):
    message: str


# --- POST /auth/login -----------------------------------------------------


@router.post("/login", response_model=LoginOut, response_model_exclude_none=True)
async def login(
    payload: LoginIn,
    directory: Annotated[UserDirectory, Depends(get_user_directory)],
) -> LoginOut:
    result = await directory.login(payload.email, payload.password)
    return LoginOut(
        message=_LOGIN_MESSAGES[result.outcome],
        user_id=str(result.user_id) if result.user_id else None,
        email=result.email,
    )


# --- POST /auth/forgot-password -------------------------------------------


@router.post("/forgot-password", response_model=MessageOut)
async def forgot_password(
    payload: ForgotPasswordIn,
    directory: Annotated[UserDirectory, Depends(get_user_directory)],
) -> MessageOut:
    """Overwrite the password of the user with this email."""
    result = await directory.forgot_password(payload.email, payload.new_password)
    return MessageOut(message=_RESET_MESSAGES[result.outcome])
