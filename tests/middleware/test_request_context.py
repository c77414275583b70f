"""Tests for the request context middleware.

Every response gets an X-Request-ID header (generated or echoed) and
every request produces one completion log line with structured fields.
"""

from __future__ import annotations

import logging
import uuid

import pytest
from fastapi.testclient import TestClient

from servicehub.api.dependencies import MEMORY_REPOS, Repos, get_repos
from servicehub.main import app

_LOGGER = "servicehub.middleware.request_context"


def _completion_records(caplog: pytest.LogCaptureFixture) -> list[logging.LogRecord]:
    return [r for r in caplog.records if r.name == _LOGGER]


def test_request_id_generated_when_not_provided(client: TestClient) -> None:
    resp = client.get("/health")
    req_id = resp.headers.get("x-request-id")
    assert req_id is not None
    uuid.UUID(req_id)  # raises ValueError if invalid


def test_request_id_echoed_when_provided(client: TestClient) -> None:
    custom_id = "my-custom-request-id-123"
    resp = client.get("/health", headers={"X-Request-ID": custom_id})
    assert resp.headers.get("x-request-id") == custom_id


def test_request_id_present_on_client_errors(client: TestClient) -> None:
    resp = client.post("/users/signup", json={})
    assert resp.status_code == 422
    assert resp.headers.get("x-request-id") is not None


def test_completion_line_has_structured_fields(
    client: TestClient, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.INFO, logger=_LOGGER):
        client.post(
            "/auth/login",
            json={"email": "ghost@x.com", "password": "p"},
            headers={"X-Request-ID": "req-42"},
        )

    (record,) = _completion_records(caplog)
    assert record.method == "POST"  # type: ignore[attr-defined]
    assert record.path == "/auth/login"  # type: ignore[attr-defined]
    assert record.status_code == 200  # type: ignore[attr-defined]
    assert record.request_id == "req-42"  # type: ignore[attr-defined]
    assert record.duration_ms >= 0  # type: ignore[attr-defined]


def test_unhandled_error_is_logged_as_500(caplog: pytest.LogCaptureFixture) -> None:
    def _explode() -> Repos:
        raise RuntimeError("boom")

    app.dependency_overrides[get_repos] = _explode
    client = TestClient(app, raise_server_exceptions=False)

    with caplog.at_level(logging.INFO, logger=_LOGGER):
        resp = client.post(
            "/invite",
            json={
                "org_id": str(uuid.uuid4()),
                "invited_by": str(uuid.uuid4()),
                "email": "a@x.com",
                "role": "member",
            },
        )

    assert resp.status_code == 500
    (record,) = _completion_records(caplog)
    assert record.status_code == 500  # type: ignore[attr-defined]
    assert MEMORY_REPOS.invitations._by_id == {}
