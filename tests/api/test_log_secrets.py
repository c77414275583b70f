"""Passwords and password hashes must never appear in log output."""

from __future__ import annotations

import logging

import pytest
from fastapi.testclient import TestClient

from tests.conftest import seed_user, stored_user

TEST_EMAIL = "secrets-test@example.com"
TEST_PASSWORD = "super-s3cret-p@ssw0rd!"
NEW_PASSWORD = "even-m0re-s3cret!"


def _log_text(caplog: pytest.LogCaptureFixture) -> str:
    return " ".join(caplog.messages)


def test_signup_does_not_log_password(
    client: TestClient, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.DEBUG):
        client.post(
            "/users/signup",
            json={"full_name": "S", "email": TEST_EMAIL, "password": TEST_PASSWORD},
        )

    user = stored_user(TEST_EMAIL)
    assert user is not None
    text = _log_text(caplog)
    assert TEST_PASSWORD not in text, "Password found in log output!"
    assert user.password_hash not in text, "Password hash found in log output!"


@pytest.mark.parametrize("password", [TEST_PASSWORD, "wrong-password"])
def test_login_does_not_log_password(
    client: TestClient, caplog: pytest.LogCaptureFixture, password: str
) -> None:
    seed_user(email=TEST_EMAIL, password=TEST_PASSWORD)

    with caplog.at_level(logging.DEBUG):
        client.post("/auth/login", json={"email": TEST_EMAIL, "password": password})

    assert password not in _log_text(caplog), "Password found in log output!"


def test_forgot_password_does_not_log_new_password(
    client: TestClient, caplog: pytest.LogCaptureFixture
) -> None:
    seed_user(email=TEST_EMAIL, password=TEST_PASSWORD)

    with caplog.at_level(logging.DEBUG):
        client.post(
            "/auth/forgot-password",
            json={"email": TEST_EMAIL, "newPassword": NEW_PASSWORD},
        )

    assert NEW_PASSWORD not in _log_text(caplog), "Password found in log output!"
