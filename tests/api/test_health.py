from __future__ import annotations

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from servicehub.db import engine as db_engine


def test_health_returns_ok(client: TestClient) -> None:
    resp = client.get("/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["message"] == "Server running"
    assert datetime.fromisoformat(data["timestamp"]).tzinfo is not None


def test_ready_returns_200_without_database(client: TestClient) -> None:
    resp = client.get("/ready")
    assert resp.status_code == 200


def test_ready_returns_503_when_database_unreachable(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    async def _down() -> bool:
        return False

    monkeypatch.setattr(db_engine, "ping", _down)
    resp = client.get("/ready")
    assert resp.status_code == 503
