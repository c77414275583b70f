from __future__ import annotations

from fastapi.testclient import TestClient


def test_api_docs_served(client: TestClient) -> None:
    resp = client.get("/api-docs")
    assert resp.status_code == 200
    assert "swagger" in resp.text.lower()


def test_openapi_lists_every_endpoint(client: TestClient) -> None:
    schema = client.get("/openapi.json").json()
    assert schema["info"]["title"] == "ServiceHub API"
    assert schema["info"]["version"] == "1.0"
    paths = schema["paths"]
    for path in (
        "/users/signup",
        "/auth/login",
        "/auth/forgot-password",
        "/organization/create",
        "/invite",
        "/health",
    ):
        assert path in paths
    assert "/metrics" not in paths
