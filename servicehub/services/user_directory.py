"""User Directory: signup, login and forgot-password.

Every "negative" answer here (email taken, unknown user, wrong password)
is a normal result with its own outcome, not an exception.  The HTTP
layer renders all of them as 200 responses carrying the outcome message.
Only store failures propagate.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from uuid import UUID

from starlette.concurrency import run_in_threadpool

from servicehub.core.metrics import LOGIN_ATTEMPTS, PASSWORD_RESETS, USER_SIGNUPS
from servicehub.models.user import User
from servicehub.repos.user_repo import DuplicateEmailError, UserRepo
from servicehub.services.passwords import hash_password, needs_rehash, verify_password

logger = logging.getLogger(__name__)


class SignupOutcome(str, Enum):
    CREATED = "created"
    EMAIL_EXISTS = "email_exists"


class LoginOutcome(str, Enum):
    SUCCESS = "success"
    USER_NOT_FOUND = "user_not_found"
    INVALID_PASSWORD = "invalid_password"


class PasswordResetOutcome(str, Enum):
    UPDATED = "updated"
    USER_NOT_FOUND = "user_not_found"


@dataclass(frozen=True, slots=True)
class SignupResult:
    outcome: SignupOutcome
    user_id: UUID | None = None


@dataclass(frozen=True, slots=True)
class LoginResult:
    outcome: LoginOutcome
    user_id: UUID | None = None
    email: str | None = None


@dataclass(frozen=True, slots=True)
class PasswordResetResult:
    outcome: PasswordResetOutcome


class UserDirectory:
    def __init__(self, users: UserRepo) -> None:
        self._users = users

    async def signup(self, full_name: str, email: str, password: str) -> SignupResult:
        if await self._users.get_by_email(email) is not None:
            logger.warning("Signup rejected, email exists  email=%s", email)
            USER_SIGNUPS.labels(outcome=SignupOutcome.EMAIL_EXISTS.value).inc()
            return SignupResult(SignupOutcome.EMAIL_EXISTS)

        # Argon2 is CPU-bound; keep it off the event loop.
        password_hash = await run_in_threadpool(hash_password, password)
        user = User.new(full_name=full_name, email=email, password_hash=password_hash)
        try:
            await self._users.add(user)
        except DuplicateEmailError:
            # Lost the race against a concurrent signup for the same email.
            logger.warning("Signup raced, email exists  email=%s", email)
            USER_SIGNUPS.labels(outcome=SignupOutcome.EMAIL_EXISTS.value).inc()
            return SignupResult(SignupOutcome.EMAIL_EXISTS)

        logger.info("User created  user_id=%s email=%s", user.id, email)
        USER_SIGNUPS.labels(outcome=SignupOutcome.CREATED.value).inc()
        return SignupResult(SignupOutcome.CREATED, user_id=user.id)

    async def login(self, email: str, password: str) -> LoginResult:
        user = await self._users.get_by_email(email)
        if user is None:
            logger.warning("Login failed, unknown email  email=%s", email)
            LOGIN_ATTEMPTS.labels(outcome=LoginOutcome.USER_NOT_FOUND.value).inc()
            return LoginResult(LoginOutcome.USER_NOT_FOUND)

        if not await run_in_threadpool(verify_password, password, user.password_hash):
            logger.warning("Login failed, bad password  user_id=%s", user.id)
            LOGIN_ATTEMPTS.labels(outcome=LoginOutcome.INVALID_PASSWORD.value).inc()
            return LoginResult(LoginOutcome.INVALID_PASSWORD)

        if needs_rehash(user.password_hash):
            rehashed = await run_in_threadpool(hash_password, password)
            await self._users.update_password_hash(user.id, rehashed)
            logger.info("Rehashed password  user_id=%s", user.id)

        logger.info("Login succeeded  user_id=%s email=%s", user.id, email)
        LOGIN_ATTEMPTS.labels(outcome=LoginOutcome.SUCCESS.value).inc()
        return LoginResult(LoginOutcome.SUCCESS, user_id=user.id, email=user.email)

    async def forgot_password(
        self, email: str, new_password: str
    ) -> PasswordResetResult:
        user = await self._users.get_by_email(email)
        if user is None:
            logger.warning("Password reset for unknown email  email=%s", email)
            PASSWORD_RESETS.labels(
                outcome=PasswordResetOutcome.USER_NOT_FOUND.value
            ).inc()
            return PasswordResetResult(PasswordResetOutcome.USER_NOT_FOUND)

        # Knowing the email is enough; there is no old-password check.
        new_hash = await run_in_threadpool(hash_password, new_password)
        await self._users.update_password_hash(user.id, new_hash)
        logger.info("Password updated  user_id=%s", user.id)
        PASSWORD_RESETS.labels(outcome=PasswordResetOutcome.UPDATED.value).inc()
        return PasswordResetResult(PasswordResetOutcome.UPDATED)
